"""Data models for books, shelves and page statistics."""
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Optional, List, Dict, Any


class ShelfName(Enum):
    """Predefined shelves a book can sit on."""
    TO_READ = "to-read"
    READING = "reading"
    READ = "read"
    DID_NOT_FINISH = "did-not-finish"

    @classmethod
    def from_value(cls, text: str) -> "ShelfName":
        """
        Look up a shelf by value ("did-not-finish") or member name ("DID_NOT_FINISH").

        Raises:
            ValueError: If the text names no shelf
        """
        normalized = (text or "").strip().lower()
        for shelf in cls:
            if normalized in (shelf.value, shelf.name.lower()):
                return shelf
        raise ValueError(f"Unknown shelf: {text!r}")


@dataclass
class Book:
    """A book tracked by the reader."""
    id: str
    title: str
    authors: List[str] = field(default_factory=list)
    page_count: Optional[int] = None
    date_started_reading: Optional[date] = None
    date_finished_reading: Optional[date] = None
    shelf: ShelfName = ShelfName.TO_READ

    @property
    def authors_str(self) -> str:
        """Format authors as comma-separated string."""
        return ", ".join(self.authors) if self.authors else "Unknown"

    @property
    def has_page_count(self) -> bool:
        """True if the page count is specified."""
        return self.page_count is not None


def _book_brief(book: Optional[Book]) -> Optional[Dict[str, Any]]:
    if book is None:
        return None
    return {"id": book.id, "title": book.title, "page_count": book.page_count}


@dataclass
class PageStatisticsSummary:
    """All page statistics for the read shelf, ready for display."""
    book_with_most_pages: Optional[Book]
    book_read_this_year_with_most_pages: Optional[Book]
    book_with_least_pages: Optional[Book]
    book_with_least_pages_this_year: Optional[Book]
    average_page_length: Optional[int]
    average_page_length_this_year: Optional[int]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-ready dictionary."""
        return {
            "book_with_most_pages": _book_brief(self.book_with_most_pages),
            "book_read_this_year_with_most_pages": _book_brief(self.book_read_this_year_with_most_pages),
            "book_with_least_pages": _book_brief(self.book_with_least_pages),
            "book_with_least_pages_this_year": _book_brief(self.book_with_least_pages_this_year),
            "average_page_length": self.average_page_length,
            "average_page_length_this_year": self.average_page_length_this_year,
        }
