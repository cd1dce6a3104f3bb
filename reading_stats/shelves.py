"""Shelf providers: where the statistics get their read-shelf books from."""
from typing import Dict, Iterable, List, Optional, Protocol

from reading_stats.models import Book, ShelfName


class ShelfProvider(Protocol):
    """Anything that can list the books on the 'read' shelf, in a stable order."""

    def get_read_shelf_books(self) -> List[Book]:
        """Books on the read shelf, always in the same order."""
        ...


class InMemoryShelfService:
    """Shelf provider over a list of books held in memory."""

    def __init__(self, books: Optional[Iterable[Book]] = None):
        self._books: List[Book] = list(books or [])

    def add_book(self, book: Book):
        """Put a book at the end of its shelf."""
        self._books.append(book)

    def get_books_on_shelf(self, shelf: ShelfName) -> List[Book]:
        """Books on one shelf, in the order they were added."""
        return [book for book in self._books if book.shelf == shelf]

    def get_read_shelf_books(self) -> List[Book]:
        """Books on the read shelf, in the order they were added."""
        return self.get_books_on_shelf(ShelfName.READ)

    def count_by_shelf(self) -> Dict[ShelfName, int]:
        """Number of books on every shelf, empty shelves included."""
        counts = {shelf: 0 for shelf in ShelfName}
        for book in self._books:
            counts[book.shelf] += 1
        return counts
