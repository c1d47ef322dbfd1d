import pytest

from book import Book
from errors import CatalogueFileError, CorruptCatalogueError
from library import LibraryData, get_non_null_book_data


def test_add_list_and_remove(empty_lib):
    assert empty_lib.get_book_data() == []

    book = Book("Ulysses", ("James Joyce",))
    empty_lib.add_book(book)

    assert empty_lib.get_book_data() == [book]
    assert empty_lib.remove_by_title("Ulysses") == book
    assert empty_lib.remove_by_title("Ulysses") is None # Already gone

def test_remove_by_title_takes_first_match_only():
    first = Book("Emma", ("Jane Austen",), year=1815)
    second = Book("Emma", ("Jane Austen",), year=1816)
    data = LibraryData([first, second])

    assert data.remove_by_title("Emma") is first
    assert data.get_book_data() == [second]

def test_remove_by_author_counts(lib):
    assert lib.remove_by_author("Frank Herbert") == 2
    assert lib.remove_by_author("Frank Herbert") == 0
    assert len(lib.get_book_data()) == 3

def test_constructor_copies_list(books):
    data = LibraryData(books)
    data.remove_by_title("Dune")
    assert len(books) == 5

def test_load_data(empty_lib, books_csv):
    assert empty_lib.load_data(str(books_csv)) == 3

    dune, omens, odyssey = empty_lib.get_book_data()
    assert dune.authors == ("Frank Herbert",)
    assert dune.year == 1965
    assert omens.authors == ("Terry Pratchett", "Neil Gaiman")
    assert odyssey.year is None
    assert odyssey.language is None

def test_load_data_appends(lib, books_csv):
    lib.load_data(str(books_csv))
    assert len(lib.get_book_data()) == 8

def test_load_data_skips_malformed_rows(empty_lib, tmp_path, caplog):
    path = tmp_path / "broken.csv"
    path.write_text(
        "title,authors,rating,year,language\n"
        ",Nobody,3.0,,\n"
        "No Authors,,3.0,,\n"
        "Bad Rating,Someone,great,,\n"
        "Too High,Someone,7.5,,\n"
        "Fine,Someone,3.5,2001,en\n",
        encoding="utf-8",
    )

    with caplog.at_level("WARNING", logger="library"):
        assert empty_lib.load_data(str(path)) == 1

    assert [b.title for b in empty_lib.get_book_data()] == ["Fine"]
    assert len([r for r in caplog.records if "Skipping line" in r.getMessage()]) == 4

def test_load_data_requires_columns(empty_lib, tmp_path):
    path = tmp_path / "other.csv"
    path.write_text("name,pages\nDune,412\n", encoding="utf-8")
    assert empty_lib.load_data(str(path)) == 0
    assert empty_lib.get_book_data() == []

def test_load_data_missing_file(empty_lib, tmp_path):
    with pytest.raises(FileNotFoundError):
        empty_lib.load_data(str(tmp_path / "nope.csv"))

def test_load_data_rejects_non_utf8_file(lib, latin1_csv):
    before = list(lib.get_book_data())

    with pytest.raises(CatalogueFileError) as excinfo:
        lib.load_data(str(latin1_csv))

    assert isinstance(excinfo.value, OSError)
    assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)
    assert lib.get_book_data() == before

def test_get_non_null_book_data(lib):
    assert get_non_null_book_data(lib) is lib.get_book_data()

    with pytest.raises(CorruptCatalogueError):
        get_non_null_book_data(None)

    lib.books = None
    with pytest.raises(CorruptCatalogueError):
        get_non_null_book_data(lib)
