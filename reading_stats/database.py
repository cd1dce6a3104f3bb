"""Database layer for book and shelf storage."""
import psycopg2
from psycopg2 import pool
from typing import Optional, List, Dict
import logging

from reading_stats.models import Book, ShelfName

logger = logging.getLogger(__name__)

BOOK_COLUMNS = """
    id, title, authors, page_count,
    date_started_reading, date_finished_reading, shelf
"""


def _row_to_book(row) -> Book:
    book_id, title, authors, page_count, started, finished, shelf = row
    return Book(
        id=book_id,
        title=title,
        authors=list(authors or []),
        page_count=page_count,
        date_started_reading=started,
        date_finished_reading=finished,
        shelf=ShelfName(shelf)
    )


class Database:
    """PostgreSQL database with connection pooling."""

    def __init__(self, connection_string: str, min_conn: int = 1, max_conn: int = 10):
        """
        Initialize database connection pool.

        Args:
            connection_string: PostgreSQL connection string
            min_conn: Minimum connections in pool
            max_conn: Maximum connections in pool
        """
        self.connection_pool = psycopg2.pool.SimpleConnectionPool(
            min_conn,
            max_conn,
            connection_string
        )

        if self.connection_pool:
            logger.info("Database connection pool created successfully")
        else:
            raise Exception("Failed to create connection pool")

    def init_schema(self):
        """Create database tables if they don't exist."""
        conn = self.connection_pool.getconn()
        try:
            with conn.cursor() as cur:
                cur.execute("""
                    CREATE TABLE IF NOT EXISTS books (
                        id VARCHAR(255) PRIMARY KEY,
                        title TEXT NOT NULL,
                        authors TEXT[],
                        page_count INTEGER,
                        date_started_reading DATE,
                        date_finished_reading DATE,
                        shelf VARCHAR(32) NOT NULL,
                        created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                        updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
                    )
                """)

                cur.execute("""
                    CREATE INDEX IF NOT EXISTS idx_books_shelf
                    ON books (shelf)
                """)

                conn.commit()
                logger.info("Database schema initialized successfully")

        finally:
            self.connection_pool.putconn(conn)

    def insert_book(self, book: Book) -> bool:
        """
        Insert or update a book in the database.

        Args:
            book: Book object

        Returns:
            True if successful, False otherwise
        """
        conn = self.connection_pool.getconn()
        try:
            with conn.cursor() as cur:
                cur.execute("""
                    INSERT INTO books (
                        id, title, authors, page_count,
                        date_started_reading, date_finished_reading, shelf, updated_at
                    ) VALUES (%s, %s, %s, %s, %s, %s, %s, CURRENT_TIMESTAMP)
                    ON CONFLICT (id) DO UPDATE SET
                        title = EXCLUDED.title,
                        authors = EXCLUDED.authors,
                        page_count = EXCLUDED.page_count,
                        date_started_reading = EXCLUDED.date_started_reading,
                        date_finished_reading = EXCLUDED.date_finished_reading,
                        shelf = EXCLUDED.shelf,
                        updated_at = CURRENT_TIMESTAMP
                """, (
                    book.id, book.title, book.authors, book.page_count,
                    book.date_started_reading, book.date_finished_reading,
                    book.shelf.value
                ))
                conn.commit()
                return True
        except psycopg2.Error as e:
            conn.rollback()
            logger.error(f"Failed to insert book {book.id}: {e}")
            return False
        finally:
            self.connection_pool.putconn(conn)

    def get_book(self, book_id: str) -> Optional[Book]:
        """Get a book by ID."""
        conn = self.connection_pool.getconn()
        try:
            with conn.cursor() as cur:
                cur.execute(f"SELECT {BOOK_COLUMNS} FROM books WHERE id = %s", (book_id,))

                row = cur.fetchone()
                if row:
                    return _row_to_book(row)
                return None
        finally:
            self.connection_pool.putconn(conn)

    def get_books_on_shelf(self, shelf: ShelfName) -> List[Book]:
        """
        Get every book on a shelf, oldest first.

        Args:
            shelf: Shelf to list

        Returns:
            List of Book objects
        """
        conn = self.connection_pool.getconn()
        try:
            with conn.cursor() as cur:
                cur.execute(f"""
                    SELECT {BOOK_COLUMNS}
                    FROM books
                    WHERE shelf = %s
                    ORDER BY created_at, id
                """, (shelf.value,))

                rows = cur.fetchall()
                return [_row_to_book(row) for row in rows]
        finally:
            self.connection_pool.putconn(conn)

    def get_read_shelf_books(self) -> List[Book]:
        return self.get_books_on_shelf(ShelfName.READ)

    def get_stats(self) -> Dict[str, int]:
        """Get the number of books stored, in total and per shelf."""
        conn = self.connection_pool.getconn()
        try:
            with conn.cursor() as cur:
                cur.execute("SELECT shelf, COUNT(*) FROM books GROUP BY shelf")
                per_shelf = dict(cur.fetchall())

                stats = {"total_books": sum(per_shelf.values())}
                for shelf in ShelfName:
                    stats[shelf.value] = per_shelf.get(shelf.value, 0)
                return stats
        finally:
            self.connection_pool.putconn(conn)

    def close(self):
        """Close all connections in the pool."""
        if self.connection_pool:
            self.connection_pool.closeall()
            logger.info("Database connection pool closed")

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
