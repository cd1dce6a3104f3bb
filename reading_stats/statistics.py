"""Page-count statistics over the books on the 'read' shelf."""
from datetime import date
from typing import Callable, Iterator, List, Optional, Tuple
import logging

from reading_stats.date_utils import date_is_in_current_year
from reading_stats.models import Book, PageStatisticsSummary
from reading_stats.shelves import ShelfProvider

logger = logging.getLogger(__name__)


class BooksWithPageCount:
    """
    Read-shelf books that have a page count, in shelf order.

    Computed once from the shelf provider and never changed afterwards;
    build a new instance to pick up shelf changes.
    """

    def __init__(self, shelf_provider: ShelfProvider):
        self._books: Tuple[Book, ...] = tuple(
            book for book in shelf_provider.get_read_shelf_books()
            if book.has_page_count
        )
        logger.debug(f"Retained {len(self._books)} read books with a page count")

    @property
    def books(self) -> Tuple[Book, ...]:
        return self._books

    def __iter__(self) -> Iterator[Book]:
        return iter(self._books)

    def __len__(self) -> int:
        return len(self._books)

    def __bool__(self) -> bool:
        return bool(self._books)


def _sorted_by_page_count(books) -> List[Book]:
    # sorted() is stable: books with equal page counts keep shelf order
    return sorted(books, key=lambda book: book.page_count)


def _ceiling_average(books) -> Optional[int]:
    page_counts = [book.page_count for book in books]
    if not page_counts:
        return None
    return -(-sum(page_counts) // len(page_counts))


class PageStatistics:
    """
    Extremes and averages of page counts for read books.

    Every query works on a fresh view of the retained books, so queries can
    be called in any order and any number of times with the same result.
    """

    def __init__(
        self,
        books_with_page_count: BooksWithPageCount,
        today: Optional[Callable[[], date]] = None
    ):
        """
        Args:
            books_with_page_count: Retained read-shelf books
            today: Callable returning the current date (default: date.today)
        """
        self.books_with_page_count = books_with_page_count
        self._today = today or date.today

    @classmethod
    def from_shelf_provider(
        cls,
        shelf_provider: ShelfProvider,
        today: Optional[Callable[[], date]] = None
    ) -> "PageStatistics":
        return cls(BooksWithPageCount(shelf_provider), today=today)

    def _started_this_year(self) -> List[Book]:
        today = self._today()
        return [
            book for book in self.books_with_page_count
            if date_is_in_current_year(book.date_started_reading, today)
        ]

    def _read_this_year(self) -> List[Book]:
        """Books both started and finished in the current year."""
        today = self._today()
        return [
            book for book in self.books_with_page_count
            if date_is_in_current_year(book.date_started_reading, today)
            and date_is_in_current_year(book.date_finished_reading, today)
        ]

    def find_book_with_most_pages(self) -> Optional[Book]:
        """
        Returns:
            The read book with the highest page count, or None. Among equal
            page counts the one later on the shelf wins.
        """
        books = _sorted_by_page_count(self.books_with_page_count)
        return books[-1] if books else None

    def find_book_read_this_year_with_most_pages(self) -> Optional[Book]:
        """
        Returns:
            The book with the highest page count started and finished this
            year, or None
        """
        books = _sorted_by_page_count(self._read_this_year())
        return books[-1] if books else None

    def find_book_with_least_pages(self) -> Optional[Book]:
        """
        Returns:
            The read book with the lowest page count, or None. Among equal
            page counts the one earlier on the shelf wins.
        """
        books = _sorted_by_page_count(self.books_with_page_count)
        return books[0] if books else None

    def find_book_with_least_pages_this_year(self) -> Optional[Book]:
        """
        Returns:
            The book with the lowest page count started this year, or None
        """
        books = _sorted_by_page_count(self._started_this_year())
        return books[0] if books else None

    def calculate_average_page_length(self) -> Optional[int]:
        """
        Returns:
            Average page count of read books, rounded up, or None if no
            read book has a page count
        """
        return _ceiling_average(self.books_with_page_count)

    def calculate_average_page_length_this_year(self) -> Optional[int]:
        """
        Returns:
            Average page count of books started this year, rounded up, or None
        """
        return _ceiling_average(self._started_this_year())

    def summary(self) -> PageStatisticsSummary:
        """Run every query and bundle the results."""
        return PageStatisticsSummary(
            book_with_most_pages=self.find_book_with_most_pages(),
            book_read_this_year_with_most_pages=self.find_book_read_this_year_with_most_pages(),
            book_with_least_pages=self.find_book_with_least_pages(),
            book_with_least_pages_this_year=self.find_book_with_least_pages_this_year(),
            average_page_length=self.calculate_average_page_length(),
            average_page_length_this_year=self.calculate_average_page_length_this_year(),
        )
