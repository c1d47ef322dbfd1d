"""Library commands: one class per command keyword, all built on LibraryCommand."""

import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import Callable, Dict, List, Optional

from book import Book, BookField
from errors import InvalidArgumentError, NullArgumentError, UnsupportedFieldError
from grouping import GroupedResult, group_by_first_letter, pack_to_map
from library import LibraryData, get_non_null_book_data
from ui_helpers import print_book_list, print_error
from validators import TextValidator

logger = logging.getLogger(__name__)

EMPTY_LIBRARY_MESSAGE = "The library has no book entries."
GROUPED_MESSAGE = "Grouped data by "
GROUP_HEADER = "## "
NOTHING_FOUND_MESSAGE = "No hits found for search term: "


class CommandType(Enum):
    ADD = "Load book data from a CSV file. Usage: ADD <file.csv>"
    LIST = "List all books. Usage: LIST [short|long]"
    SEARCH = "Search titles for a single term, ignoring case. Usage: SEARCH <term>"
    GROUP = "Group books by title or author. Usage: GROUP TITLE|AUTHOR"
    REMOVE = "Remove books by exact title or author. Usage: REMOVE TITLE|AUTHOR <value>"
    HELP = "Show this help."
    EXIT = "Close the library."

    @property
    def description(self) -> str:
        return self.value


def _require_argument(argument_input: Optional[str]) -> str:
    if argument_input is None:
        raise NullArgumentError("Given input argument must not be None.")
    return argument_input


class LibraryCommand(ABC):
    """A user command that is validated on construction and run against library data.

    Subclasses implement validate() as a pure check and execute() to print results.
    Raises NullArgumentError for a None argument and InvalidArgumentError when
    validate() rejects it.
    """

    def __init__(self, command_type: CommandType, argument_input: Optional[str]) -> None:
        _require_argument(argument_input)
        if not self.validate(argument_input):
            raise InvalidArgumentError(
                f"Invalid argument for the {command_type.name} command: '{argument_input}'"
            )
        self.command_type = command_type
        self.argument_input = argument_input
        self.parse_arguments(argument_input)

    @abstractmethod
    def validate(self, argument_input: Optional[str]) -> bool:
        ...

    def parse_arguments(self, argument_input: str) -> None:
        """Store the parsed form of an already validated argument."""

    @abstractmethod
    def execute(self, data: LibraryData) -> None:
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.argument_input!r})"


class AddCommand(LibraryCommand):
    """Load books from a CSV file into the library."""

    def __init__(self, argument_input: Optional[str]) -> None:
        super().__init__(CommandType.ADD, argument_input)

    def validate(self, argument_input: Optional[str]) -> bool:
        return TextValidator.is_csv_path(_require_argument(argument_input))

    def parse_arguments(self, argument_input: str) -> None:
        self.file_path = argument_input.strip()

    def execute(self, data: LibraryData) -> None:
        get_non_null_book_data(data)
        try:
            count = data.load_data(self.file_path)
        except OSError as e:
            logger.warning("Could not read %s: %s", self.file_path, e)
            print_error(f"Could not read file: {self.file_path}")
            return
        print(f"Loaded {count} book entries from {self.file_path}.")


class ListCommand(LibraryCommand):
    """List every book, either titles only (short) or full details (long)."""

    SHORT = "short"
    LONG = "long"

    def __init__(self, argument_input: Optional[str]) -> None:
        super().__init__(CommandType.LIST, argument_input)

    def validate(self, argument_input: Optional[str]) -> bool:
        return _require_argument(argument_input) in ("", self.SHORT, self.LONG)

    def parse_arguments(self, argument_input: str) -> None:
        self.long = argument_input == self.LONG

    def execute(self, data: LibraryData) -> None:
        books = get_non_null_book_data(data)
        if not books:
            print(EMPTY_LIBRARY_MESSAGE)
            return
        print_book_list(books, long=self.long)


class SearchCommand(LibraryCommand):
    """Search for books with a title containing a given term."""

    def __init__(self, argument_input: Optional[str]) -> None:
        super().__init__(CommandType.SEARCH, argument_input)

    def validate(self, argument_input: Optional[str]) -> bool:
        return TextValidator.is_single_token(_require_argument(argument_input))

    def parse_arguments(self, argument_input: str) -> None:
        self.search_value = argument_input

    def execute(self, data: LibraryData) -> None:
        books = get_non_null_book_data(data)
        needle = self.search_value.lower()
        nothing_printed = True

        for book in books:
            if needle in book.title.lower():
                nothing_printed = False
                print(book.title)

        if nothing_printed:
            print(NOTHING_FOUND_MESSAGE + self.search_value)


def _group_by_title(books: List[Book]) -> GroupedResult:
    return group_by_first_letter([book.title for book in books])


def _group_by_author(books: List[Book]) -> GroupedResult:
    # a title with several authors lands in each of their groups
    grouped = GroupedResult()
    for book in books:
        for author in book.authors:
            pack_to_map(author, book.title, grouped)
    return grouped


GROUPERS: Dict[BookField, Callable[[List[Book]], GroupedResult]] = {
    BookField.TITLE: _group_by_title,
    BookField.AUTHOR: _group_by_author,
}


def print_grouped(grouped: GroupedResult) -> None:
    for key, values in grouped.items():
        print(GROUP_HEADER + key)
        for value in values:
            print(value)


class GroupCommand(LibraryCommand):
    """Group and display books by one of the BookField values."""

    def __init__(self, argument_input: Optional[str]) -> None:
        super().__init__(CommandType.GROUP, argument_input)

    def validate(self, argument_input: Optional[str]) -> bool:
        return _require_argument(argument_input) in BookField.__members__

    def parse_arguments(self, argument_input: str) -> None:
        self.field = BookField[argument_input]

    def execute(self, data: LibraryData) -> None:
        books = get_non_null_book_data(data)

        if not books:
            print(EMPTY_LIBRARY_MESSAGE)
            return

        print(GROUPED_MESSAGE + self.field.name)
        grouper = GROUPERS.get(self.field)
        if grouper is None:
            raise UnsupportedFieldError(f"No grouping defined for field {self.field.name}.")
        print_grouped(grouper(books))


class RemoveCommand(LibraryCommand):
    """Remove a book by exact title, or every book of an author."""

    def __init__(self, argument_input: Optional[str]) -> None:
        super().__init__(CommandType.REMOVE, argument_input)

    def validate(self, argument_input: Optional[str]) -> bool:
        field, value = TextValidator.split_first_word(_require_argument(argument_input))
        return field in BookField.__members__ and not TextValidator.is_blank(value)

    def parse_arguments(self, argument_input: str) -> None:
        field, self.value = TextValidator.split_first_word(argument_input)
        self.field = BookField[field]

    def execute(self, data: LibraryData) -> None:
        get_non_null_book_data(data)

        if self.field is BookField.TITLE:
            if data.remove_by_title(self.value) is None:
                print(f"{self.value}: not found.")
            else:
                print(f"{self.value}: removed successfully.")
        elif self.field is BookField.AUTHOR:
            removed = data.remove_by_author(self.value)
            print(f"{removed} books removed for author: {self.value}")
        else:
            raise UnsupportedFieldError(f"Cannot remove by field {self.field.name}.")


class HelpCommand(LibraryCommand):
    """Print every command keyword with its usage."""

    def __init__(self, argument_input: Optional[str]) -> None:
        super().__init__(CommandType.HELP, argument_input)

    def validate(self, argument_input: Optional[str]) -> bool:
        return TextValidator.is_blank(_require_argument(argument_input))

    def execute(self, data: LibraryData) -> None:
        width = max(len(t.name) for t in CommandType)
        for command_type in CommandType:
            print(f"{command_type.name.ljust(width)}  {command_type.description}")


class ExitCommand(LibraryCommand):
    """Signal the interactive loop to stop."""

    MESSAGE = "Closing library."

    def __init__(self, argument_input: Optional[str]) -> None:
        super().__init__(CommandType.EXIT, argument_input)

    def validate(self, argument_input: Optional[str]) -> bool:
        return TextValidator.is_blank(_require_argument(argument_input))

    def execute(self, data: LibraryData) -> None:
        print(self.MESSAGE)
