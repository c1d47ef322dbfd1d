import csv
import logging
import os
from typing import List, Optional

from book import Book
from errors import CatalogueFileError, CorruptCatalogueError

logger = logging.getLogger(__name__)

CSV_FIELDS = ("title", "authors", "rating", "year", "language")


class LibraryData:
    """Holds the in-memory collection of books and loads it from CSV files."""

    def __init__(self, books: Optional[List[Book]] = None) -> None:
        self.books: List[Book] = list(books) if books else []

    # ------------------------- Core operations ------------------------- #
    def get_book_data(self) -> List[Book]:
        return self.books

    def add_book(self, book: Book) -> None:
        self.books.append(book)

    def remove_by_title(self, title: str) -> Optional[Book]:
        """Remove the first book whose title equals the given one. Returns it or None."""
        for index, book in enumerate(self.books):
            if book.title == title:
                logger.info("Removed book '%s'", title)
                return self.books.pop(index)
        return None

    def remove_by_author(self, author: str) -> int:
        """Remove every book listing the given author. Returns how many were removed."""
        kept = [b for b in self.books if author not in b.authors]
        removed = len(self.books) - len(kept)
        self.books = kept
        if removed:
            logger.info("Removed %d books for author '%s'", removed, author)
        return removed

    # ------------------------- Loading ------------------------- #
    def load_data(self, file_path: str) -> int:
        """Append every well-formed row of a CSV file. Returns the number of books added.

        Raises OSError if the file cannot be read (CatalogueFileError when it is not
        UTF-8 CSV); malformed rows are skipped and the catalogue is unchanged on error.
        """
        if not os.path.exists(file_path):
            raise FileNotFoundError(file_path)

        loaded: List[Book] = []
        try:
            with open(file_path, "r", newline="", encoding="utf-8") as f:
                reader = csv.DictReader(f)
                missing = [name for name in CSV_FIELDS[:2] if name not in (reader.fieldnames or [])]
                if missing:
                    logger.warning("File %s is missing columns: %s", file_path, ", ".join(missing))
                    return 0
                for line_no, row in enumerate(reader, start=2):
                    try:
                        loaded.append(Book.from_dict(row))
                    except (KeyError, TypeError, ValueError) as e:
                        logger.warning("Skipping line %d of %s: %s", line_no, file_path, e)
        except (UnicodeDecodeError, csv.Error) as e:
            raise CatalogueFileError(f"Could not parse {file_path}: {e}") from e

        self.books.extend(loaded)
        logger.info("Loaded %d books from %s", len(loaded), file_path)
        return len(loaded)


def get_non_null_book_data(data: Optional[LibraryData]) -> List[Book]:
    """Return the book list of a library, checking that neither it nor any book is None."""
    if data is None:
        raise CorruptCatalogueError("Library data must not be None.")
    books = data.get_book_data()
    if books is None:
        raise CorruptCatalogueError("List of books must not be None.")
    for book in books:
        if book is None:
            raise CorruptCatalogueError("Book in a list must not be None.")
    return books
