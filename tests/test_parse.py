"""Tests for parsing functions."""
from datetime import date

from reading_stats.parse import parse_book, parse_books_export, deduplicate_books
from reading_stats.models import Book, ShelfName


def test_parse_book_complete():
    """Test parsing a book with all fields present."""
    item = {
        "id": "abc123",
        "title": "Python Crash Course",
        "authors": ["Eric Matthes"],
        "pageCount": 544,
        "dateStartedReading": "2020-01-04",
        "dateFinishedReading": "2020-02-11T21:30:00",
        "shelf": "read"
    }

    book = parse_book(item)

    assert book is not None
    assert book.id == "abc123"
    assert book.title == "Python Crash Course"
    assert book.authors == ["Eric Matthes"]
    assert book.page_count == 544
    assert book.date_started_reading == date(2020, 1, 4)
    assert book.date_finished_reading == date(2020, 2, 11)
    assert book.shelf == ShelfName.READ


def test_parse_book_missing_fields():
    """Test parsing a book with missing optional fields."""
    item = {
        "id": "xyz789",
        "title": "Mystery Book"
    }

    book = parse_book(item)

    assert book is not None
    assert book.id == "xyz789"
    assert book.title == "Mystery Book"
    assert book.authors == []
    assert book.page_count is None
    assert book.date_started_reading is None
    assert book.shelf == ShelfName.TO_READ


def test_parse_book_no_id():
    """Test that book without ID returns None."""
    assert parse_book({"title": "No ID Book"}) is None


def test_parse_book_unusable_page_count():
    """Zero, negative and non-integer page counts are treated as not specified."""
    for value in [0, -12, "300", 12.5, True]:
        book = parse_book({"id": "1", "title": "Odd", "pageCount": value})
        assert book is not None
        assert book.page_count is None


def test_parse_book_bad_date_or_shelf():
    """Malformed dates and unknown shelves make the item unparseable."""
    assert parse_book({"id": "1", "dateStartedReading": "yesterday"}) is None
    assert parse_book({"id": "2", "shelf": "favourites"}) is None


def test_parse_book_shelf_by_name():
    """Shelves can be given by member name as well as by value."""
    book = parse_book({"id": "1", "shelf": "DID_NOT_FINISH"})
    assert book.shelf == ShelfName.DID_NOT_FINISH


def test_parse_books_export():
    """Test parsing a complete export, both as a list and wrapped in an object."""
    items = [
        {"id": "1", "title": "Book 1"},
        {"id": "2", "title": "Book 2"},
        {"title": "No ID"},
    ]

    for data in (items, {"books": items}):
        books = parse_books_export(data)

        assert len(books) == 2
        assert books[0].title == "Book 1"
        assert books[1].title == "Book 2"


def test_deduplicate_books():
    """Test deduplication by book ID."""
    books = [
        Book("1", "Book A"),
        Book("2", "Book B"),
        Book("1", "Book A Duplicate"),
    ]

    unique = deduplicate_books(books)

    assert len(unique) == 2
    assert unique[0].id == "1"
    assert unique[0].title == "Book A"
    assert unique[1].id == "2"


def test_parse_book_authors_as_single_name():
    """A single author given as a string becomes a one-name list."""
    book = parse_book({"id": "1", "title": "Dune", "authors": "Frank Herbert"})

    assert book.authors == ["Frank Herbert"]
    assert book.authors_str == "Frank Herbert"


def test_parse_book_unsupported_authors_is_skipped():
    """Authors that are neither a list nor a name make the item unparseable."""
    assert parse_book({"id": "1", "title": "Dune", "authors": {"name": "Frank Herbert"}}) is None


def test_parse_book_non_string_title():
    """Titles are always stored as text."""
    book = parse_book({"id": 7, "title": 42})

    assert book.id == "7"
    assert book.title == "42"


def test_parse_books_export_without_book_list():
    """A missing or malformed books list parses to no books."""
    assert parse_books_export({"books": None}) == []
    assert parse_books_export({"books": "Dune"}) == []
    assert parse_books_export({}) == []


if __name__ == "__main__":
    # Run tests
    test_parse_book_complete()
    test_parse_book_missing_fields()
    test_parse_book_no_id()
    test_parse_book_unusable_page_count()
    test_parse_book_bad_date_or_shelf()
    test_parse_book_shelf_by_name()
    test_parse_books_export()
    test_deduplicate_books()
    test_parse_book_authors_as_single_name()
    test_parse_book_unsupported_authors_is_skipped()
    test_parse_book_non_string_title()
    test_parse_books_export_without_book_list()
    print("✅ All tests passed!")
