"""Parse and normalize book export files."""
from typing import Dict, Any, List, Optional, Union
import logging

from reading_stats.date_utils import parse_date
from reading_stats.models import Book, ShelfName

logger = logging.getLogger(__name__)


def _parse_page_count(value: Any) -> Optional[int]:
    """Only positive whole numbers count as a page count."""
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value if value > 0 else None


def _parse_authors(value: Any) -> List[str]:
    """Accept a list of names or a single name."""
    if not value:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, list):
        return [str(author) for author in value]
    raise ValueError(f"Unsupported authors value: {value!r}")


def parse_book(item: Dict[str, Any]) -> Optional[Book]:
    """
    Parse a single book item from an export.

    Args:
        item: Single book object from the export

    Returns:
        Book object or None if parsing fails
    """
    try:
        # Extract fields with safe defaults
        book_id = str(item.get("id") or "")
        if not book_id:
            return None

        title = str(item.get("title") or "Unknown Title")
        authors = _parse_authors(item.get("authors"))
        page_count = _parse_page_count(item.get("pageCount"))
        date_started = parse_date(item.get("dateStartedReading"))
        date_finished = parse_date(item.get("dateFinishedReading"))
        shelf = ShelfName.from_value(item.get("shelf") or ShelfName.TO_READ.value)

        return Book(
            id=book_id,
            title=title,
            authors=authors,
            page_count=page_count,
            date_started_reading=date_started,
            date_finished_reading=date_finished,
            shelf=shelf
        )
    except (ValueError, TypeError, AttributeError) as e:
        logger.warning(f"Failed to parse book: {e}")
        return None


def parse_books_export(data: Union[List[Dict[str, Any]], Dict[str, Any]]) -> List[Book]:
    """
    Parse a full export.

    Args:
        data: A list of book objects, or an object with a "books" list

    Returns:
        List of Book objects (unparseable items are skipped)
    """
    items = data.get("books") if isinstance(data, dict) else data
    if not isinstance(items, list):
        items = []
    books = []

    for item in items:
        book = parse_book(item)
        if book:
            books.append(book)

    logger.info(f"Parsed {len(books)} of {len(items)} books")
    return books


def deduplicate_books(books: List[Book]) -> List[Book]:
    """
    Remove duplicate books by ID.

    Args:
        books: List of Book objects

    Returns:
        Deduplicated list of books
    """
    seen_ids = set()
    unique_books = []

    for book in books:
        if book.id not in seen_ids:
            seen_ids.add(book.id)
            unique_books.append(book)

    return unique_books
