from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class BookField(Enum):
    """Book attributes a catalogue can be grouped or filtered by."""

    TITLE = "title"
    AUTHOR = "author"


@dataclass(frozen=True)
class Book:
    """Represents a single book item in the library."""

    title: str
    authors: tuple[str, ...]
    rating: float = 0.0
    year: int | None = None
    language: str | None = None

    def __post_init__(self) -> None:
        if self.title is None or not self.title.strip():
            raise ValueError("Book title must not be empty.")
        # accept any sequence of authors but store a tuple
        authors = tuple(self.authors or ())
        if not authors:
            raise ValueError(f"Book '{self.title}' must have at least one author.")
        for author in authors:
            if author is None or not author.strip():
                raise ValueError(f"Book '{self.title}' has a blank author.")
        if not 0.0 <= self.rating <= 5.0:
            raise ValueError(f"Rating of '{self.title}' must be between 0 and 5, got {self.rating}.")
        object.__setattr__(self, "authors", authors)

    def __str__(self) -> str:
        return "\n".join([
            self.title,
            f"by {', '.join(self.authors)}",
            f"Rating: {self.rating:.2f}",
            f"Year: {self.year if self.year is not None else 'n/a'}",
            f"Language: {self.language or 'n/a'}",
        ])

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "authors": list(self.authors),
            "rating": self.rating,
            "year": self.year,
            "language": self.language,
        }

    @staticmethod
    def from_dict(data: dict) -> "Book":
        authors = data["authors"]
        if isinstance(authors, str):
            authors = [a.strip() for a in authors.split("-")]
        year = data.get("year")
        return Book(
            title=data["title"],
            authors=tuple(authors),
            rating=float(data.get("rating") or 0.0),
            year=int(year) if year not in (None, "") else None,
            language=data.get("language") or None,
        )
