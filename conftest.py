import pytest

import cli_config
from book import Book
from cli_config import CLIConfig
from library import LibraryData
from ui_helpers import OUTPUT_MODE_ENV

@pytest.fixture(autouse=True)
def isolated_cli(tmp_path, monkeypatch):
    # Keep output mode and aliases from leaking between tests or into the home directory
    monkeypatch.setenv(OUTPUT_MODE_ENV, "plain")
    monkeypatch.setattr(cli_config, "_cli_config", CLIConfig(config_dir=str(tmp_path / "cli-config")))

@pytest.fixture
def books():
    return [
        Book("Dune", ("Frank Herbert",), rating=4.25, year=1965, language="en"),
        Book("1984", ("George Orwell",), rating=4.19, year=1949, language="en"),
        Book("Good Omens", ("Terry Pratchett", "Neil Gaiman"), rating=4.25, year=1990, language="en"),
        Book("dune messiah", ("Frank Herbert",), rating=3.88, year=1969),
        Book("Neverwhere", ("Neil Gaiman",), rating=4.17, year=1996, language="en"),
    ]

@pytest.fixture
def lib(books):
    return LibraryData(books)

@pytest.fixture
def empty_lib():
    return LibraryData()

@pytest.fixture
def books_csv(tmp_path):
    path = tmp_path / "books.csv"
    path.write_text(
        "title,authors,rating,year,language\n"
        "Dune,Frank Herbert,4.25,1965,en\n"
        "Good Omens,Terry Pratchett-Neil Gaiman,4.25,1990,en\n"
        "2001: A Space Odyssey,Arthur C. Clarke,4.0,,\n",
        encoding="utf-8",
    )
    return path

@pytest.fixture
def latin1_csv(tmp_path):
    """A catalogue saved as Latin-1 rather than UTF-8."""
    path = tmp_path / "latin1.csv"
    path.write_bytes(
        "title,authors,rating,year,language\n"
        "Les Misérables,Victor Hugo,4.2,1862,fr\n".encode("latin-1")
    )
    return path
