import os
import json
from typing import List
from rich.console import Console
from rich.table import Table
from rich.markup import escape

from book import Book
from config import settings

# Environment variable to control CLI output mode
# Allowed values: 'plain' (default), 'json', 'rich'
OUTPUT_MODE_ENV = "LIB_CLI_OUTPUT"
OUTPUT_MODES = {"plain", "json", "rich"}

_console = Console()
_error_console = Console(stderr=True)

def set_output_mode(mode: str) -> bool:
    mode = (mode or "").lower().strip()
    if mode in OUTPUT_MODES:
        os.environ[OUTPUT_MODE_ENV] = mode
        return True
    return False

def get_output_mode() -> str:
    mode = os.environ.get(OUTPUT_MODE_ENV, settings.output_mode).lower()
    return mode if mode in OUTPUT_MODES else "plain"

def print_book_list(books: List[Book], long: bool = False) -> None:
    """Print a non-empty book list in the current output mode.
    - plain: '<n> books in library:' then titles, or long blocks separated by blank lines
    - json: JSON array of book dicts
    - rich: Rich table
    """
    mode = get_output_mode()

    if mode == "json":
        print(json.dumps([b.to_dict() for b in books], ensure_ascii=False))
    elif mode == "rich":
        table = Table(title=f"{len(books)} books in library", show_lines=long, header_style="bold cyan")
        table.add_column("Title", style="white")
        table.add_column("Authors", style="white")
        if long:
            table.add_column("Rating", justify="right", style="magenta")
            table.add_column("Year", justify="right")
            table.add_column("Language")
        for b in books:
            row = [escape(b.title), escape(", ".join(b.authors))]
            if long:
                row += [f"{b.rating:.2f}", str(b.year or ""), b.language or ""]
            table.add_row(*row)
        _console.print(table)
    else:
        print(f"{len(books)} books in library:")
        for b in books:
            if long:
                print(b)
                print()
            else:
                print(b.title)

def print_error(message: str) -> None:
    """Report a user-facing error. Plain mode keeps the 'ERROR: ' prefix on stdout."""
    if get_output_mode() == "rich":
        _error_console.print(f"[bold red]ERROR:[/] {escape(message)}", markup=True, highlight=False)
    else:
        print(f"ERROR: {message}")
