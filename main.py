import logging
import os
import sys
from typing import Optional

from rich.console import Console
from rich.panel import Panel

import typer

from cli_config import get_cli_config
from commands import CommandType
from config import settings
from dispatcher import dispatch
from library import LibraryData
from ui_helpers import OUTPUT_MODE_ENV, set_output_mode, print_error

logging.basicConfig(level=getattr(logging, settings.log_level, logging.WARNING))
logger = logging.getLogger(__name__)

APP_NAME = settings.app_name

console = Console()


class LibraryManager:
    """Holds the single LibraryData instance used by the CLI."""

    _instance: Optional[LibraryData] = None
    _data_file: Optional[str] = None

    @classmethod
    def configure(cls, data_file: Optional[str]) -> None:
        """Select the CSV file to preload; drops any already loaded instance."""
        cls._data_file = data_file
        cls._instance = None

    @classmethod
    def get_instance(cls) -> LibraryData:
        if cls._instance is None:
            cls._instance = LibraryData()
            data_file = cls._data_file if cls._data_file is not None else settings.data_file
            if data_file:
                try:
                    count = cls._instance.load_data(data_file)
                    logger.info("Preloaded %d books from %s", count, data_file)
                except OSError as e:
                    logger.warning("Could not preload %s: %s", data_file, e)
                    print_error(f"Could not read file: {data_file}")
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        cls._instance = None
        cls._data_file = None


def run_line(line: str) -> Optional[CommandType]:
    """Run one textual command against the managed library."""
    return dispatch(line, LibraryManager.get_instance())


# --- Typer CLI application ---
app = typer.Typer(help="Library catalogue CLI")

@app.callback()
def _global_options(
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output format: plain | json | rich (default: plain)",
    ),
    data: Optional[str] = typer.Option(
        None,
        "--data",
        "-d",
        help="CSV file to load into the library before running the command",
    ),
):
    """Global options for the CLI (output mode, data file)."""
    if output is None and OUTPUT_MODE_ENV not in os.environ:
        output = get_cli_config().get("preferences.output_mode")
    if output and not set_output_mode(output):
        print_error(f"Unknown output mode: {output}")
        raise typer.Exit(code=2)
    if data is not None:
        LibraryManager.configure(data)

@app.command("list")
def cli_list(mode: str = typer.Argument("", help="short | long")):
    """List all books in the library."""
    run_line(f"{CommandType.LIST.name} {mode}")

@app.command("search")
def cli_search(term: str = typer.Argument(..., help="Single word to look for in titles")):
    """Search book titles for a term, ignoring case."""
    run_line(f"{CommandType.SEARCH.name} {term}")

@app.command("group")
def cli_group(field: str = typer.Argument(..., help="TITLE | AUTHOR")):
    """Group books by title initial or by author."""
    run_line(f"{CommandType.GROUP.name} {field}")

@app.command("remove")
def cli_remove(
    field: str = typer.Argument(..., help="TITLE | AUTHOR"),
    value: str = typer.Argument(..., help="Exact title or author name"),
):
    """Remove a book by title, or all books of an author."""
    run_line(f"{CommandType.REMOVE.name} {field} {value}")

@app.command("add")
def cli_add(file_path: str = typer.Argument(..., help="CSV file with book entries")):
    """Load books from a CSV file."""
    run_line(f"{CommandType.ADD.name} {file_path}")

@app.command("help")
def cli_help():
    """Show the commands understood by the interactive shell."""
    run_line(CommandType.HELP.name)

@app.command("alias")
def cli_alias(
    alias: Optional[str] = typer.Argument(None, help="Alias to add or show"),
    command: Optional[str] = typer.Argument(None, help="Command keyword the alias stands for"),
):
    """List, show or add shell command aliases."""
    config_manager = get_cli_config()
    if alias and command:
        if command.upper() not in CommandType.__members__:
            print_error(f"Unknown command: '{command}'")
            raise typer.Exit(code=1)
        config_manager.add_alias(alias, command)
        print(f"Alias '{alias}' -> '{command.upper()}' added")
        return
    aliases = config_manager.list_aliases()
    if alias:
        if alias in aliases:
            print(f"Alias '{alias}' -> '{aliases[alias]}'")
        else:
            print(f"Alias '{alias}' not found")
        return
    if not aliases:
        print("No aliases configured")
        return
    print("Configured aliases:")
    for name, target in aliases.items():
        print(f"  {name} -> {target}")

@app.command("config")
def cli_config(
    action: str = typer.Argument(..., help="Action: show, get, set, reset"),
    key: Optional[str] = typer.Argument(None, help="Configuration key (dot notation)"),
    value: Optional[str] = typer.Argument(None, help="Configuration value"),
):
    """Manage CLI preferences."""
    config_manager = get_cli_config()
    if action == "show":
        config_manager.show_config()

    elif action == "get":
        if not key:
            print_error("'get' needs a key")
            raise typer.Exit(code=1)
        found = config_manager.get(key)
        if found is None:
            print(f"Key '{key}' not found")
        else:
            print(f"{key}: {found}")

    elif action == "set":
        if not key or value is None:
            print_error("'set' needs both a key and a value")
            raise typer.Exit(code=1)
        config_manager.set(key, value)
        print(f"{key} set to {value}")

    elif action == "reset":
        config_manager.reset_to_default()
        print("Configuration reset to default values")

    else:
        print_error(f"Unknown action: {action}. Use show, get, set or reset.")
        raise typer.Exit(code=1)

@app.command("shell")
def cli_shell():
    """Start the interactive command shell."""
    run_shell()


def run_shell() -> None:
    """Read command lines until EXIT or end of input."""
    if sys.stdin.isatty():
        console.print(Panel.fit(
            f"[bold]{APP_NAME}[/] v{settings.app_version}\nType [cyan]HELP[/] for a list of commands.",
            border_style="cyan",
        ))
    while True:
        try:
            line = console.input(settings.prompt)
        except (EOFError, KeyboardInterrupt):
            break
        if not line.strip():
            continue
        if run_line(line) is CommandType.EXIT:
            break


if __name__ == "__main__":
    if len(sys.argv) > 1:
        app()
    else:
        run_shell()
