#!/usr/bin/env python3
"""Reading Stats CLI - page statistics for the books you have read."""
import argparse
import sys
import json
from tabulate import tabulate
from reading_stats.config import Config
from reading_stats.database import Database
from reading_stats.models import ShelfName
from reading_stats.parse import parse_books_export, deduplicate_books
from reading_stats.shelves import InMemoryShelfService
from reading_stats.statistics import PageStatistics
import logging

logger = logging.getLogger(__name__)


def setup_logging(config: Config):
    logging.basicConfig(
        level=getattr(logging, config.LOG_LEVEL, logging.INFO),
        format='%(asctime)s - %(levelname)s - %(message)s'
    )


def setup_database(config: Config) -> Database:
    """Initialize database."""
    db = Database(config.DATABASE_URL)
    db.init_schema()
    return db


def load_export(path: str):
    """Read a JSON export file into a deduplicated list of books."""
    with open(path, encoding='utf-8') as f:
        data = json.load(f)
    return deduplicate_books(parse_books_export(data))


def _describe(book) -> str:
    if book is None:
        return "N/A"
    return f"{book.title} ({book.page_count} pages)"


def display_page_statistics(summary, format_type: str):
    """Display page statistics in specified format."""
    if format_type == "table":
        rows = [
            ["Book with most pages", _describe(summary.book_with_most_pages)],
            ["Book read this year with most pages", _describe(summary.book_read_this_year_with_most_pages)],
            ["Book with least pages", _describe(summary.book_with_least_pages)],
            ["Book with least pages this year", _describe(summary.book_with_least_pages_this_year)],
            ["Average page length", summary.average_page_length or "N/A"],
            ["Average page length this year", summary.average_page_length_this_year or "N/A"],
        ]
        print("\n" + tabulate(rows, headers=["Statistic", "Value"], tablefmt="grid"))

    elif format_type == "json":
        print(json.dumps(summary.to_dict(), indent=2))


def display_books(books, format_type: str):
    """Display books in specified format."""
    if format_type == "table":
        headers = ["Title", "Authors", "Pages", "Started", "Finished"]
        rows = [
            [
                book.title[:50] + "..." if len(book.title) > 50 else book.title,
                book.authors_str[:30] + "..." if len(book.authors_str) > 30 else book.authors_str,
                book.page_count or "N/A",
                book.date_started_reading or "",
                book.date_finished_reading or ""
            ]
            for book in books
        ]
        print("\n" + tabulate(rows, headers=headers, tablefmt="grid"))

    elif format_type == "json":
        books_dict = [
            {
                "id": book.id,
                "title": book.title,
                "authors": book.authors,
                "page_count": book.page_count,
                "date_started_reading": book.date_started_reading.isoformat() if book.date_started_reading else None,
                "date_finished_reading": book.date_finished_reading.isoformat() if book.date_finished_reading else None,
                "shelf": book.shelf.value
            }
            for book in books
        ]
        print(json.dumps(books_dict, indent=2))

    elif format_type == "compact":
        for i, book in enumerate(books, 1):
            print(f"{i}. {book.title} - {book.authors_str}")


def show_page_statistics(args, config: Config):
    """Compute page statistics from an export file or the database."""
    if args.from_json:
        shelf_service = InMemoryShelfService(load_export(args.from_json))
        statistics = PageStatistics.from_shelf_provider(shelf_service)
        display_page_statistics(statistics.summary(), args.format)
        return

    db = setup_database(config)
    try:
        statistics = PageStatistics.from_shelf_provider(db)
        display_page_statistics(statistics.summary(), args.format)
    finally:
        db.close()


def show_shelf(args, config: Config):
    """List the books on one shelf."""
    shelf = ShelfName.from_value(args.name)

    if args.from_json:
        books = InMemoryShelfService(load_export(args.from_json)).get_books_on_shelf(shelf)
    else:
        db = setup_database(config)
        try:
            books = db.get_books_on_shelf(shelf)
        finally:
            db.close()

    logger.info(f"Found {len(books)} books on the '{shelf.value}' shelf")
    display_books(books, args.format)


def import_books(args, config: Config):
    """Store every book from an export file in the database."""
    books = load_export(args.file)
    db = setup_database(config)

    try:
        stored = sum(1 for book in books if db.insert_book(book))
        logger.info(f"Stored {stored} of {len(books)} books in database")
        if stored < len(books):
            logger.warning(f"{len(books) - stored} books could not be stored")
    finally:
        db.close()


def show_stats(args, config: Config):
    """Show database statistics."""
    db = setup_database(config)

    try:
        stats = db.get_stats()

        print("\n" + "=" * 50)
        print("DATABASE STATISTICS")
        print("=" * 50)
        print(f"Total books stored: {stats['total_books']}")
        for shelf in ShelfName:
            print(f"  {shelf.value}: {stats[shelf.value]}")
        print("=" * 50 + "\n")

    finally:
        db.close()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Reading Stats - page statistics for your read shelf",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Page statistics from the database
  %(prog)s pages

  # Page statistics straight from an export file
  %(prog)s pages --from-json books.json --format json

  # Import an export into the database
  %(prog)s import books.json

  # List what you are reading
  %(prog)s shelf --name reading --format compact
        """
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    # Pages command
    pages_parser = subparsers.add_parser("pages", help="Show page statistics for the read shelf")
    pages_parser.add_argument("--from-json", help="Read books from an export file instead of the database")
    pages_parser.add_argument("--format", choices=["table", "json"], default="table", help="Output format")

    # Shelf command
    shelf_parser = subparsers.add_parser("shelf", help="List books on a shelf")
    shelf_parser.add_argument("--name", default=ShelfName.READ.value,
                              choices=[shelf.value for shelf in ShelfName], help="Shelf (default: read)")
    shelf_parser.add_argument("--from-json", help="Read books from an export file instead of the database")
    shelf_parser.add_argument("--format", choices=["table", "json", "compact"], default="table", help="Output format")

    # Import command
    import_parser = subparsers.add_parser("import", help="Import an export file into the database")
    import_parser.add_argument("file", help="JSON export file")

    # Stats command
    subparsers.add_parser("stats", help="Show database statistics")

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    config = Config()
    setup_logging(config)

    try:
        if args.command == "pages":
            show_page_statistics(args, config)

        elif args.command == "shelf":
            show_shelf(args, config)

        elif args.command == "import":
            import_books(args, config)

        elif args.command == "stats":
            show_stats(args, config)

    except KeyboardInterrupt:
        logger.info("\n⚠️  Interrupted by user")
        sys.exit(0)
    except Exception as e:
        logger.error(f"❌ Error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
