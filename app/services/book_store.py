"""
Book Store Service

The entity store for books: a thin repository over a SQLAlchemy session.

Every write commits its own unit of work, so each call is atomic with
respect to the others. There are no multi-call transactions.

Usage:
    store = BookStore(db)
    total = store.count()
    books = store.list(offset=20, limit=10)
"""

import logging
import uuid
from collections.abc import Sequence

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from app.models import Book

logger = logging.getLogger(__name__)


class BookStore:
    """Title-ordered collection of books backed by a database session."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def list(self, offset: int = 0, limit: int | None = None) -> Sequence[Book]:
        """
        Return books ordered by title, ties broken by id.

        Args:
            offset: Number of books to skip from the start of the ordering
            limit: Maximum number of books to return, None for all

        Returns:
            The [offset, offset + limit) slice of the ordered books
        """
        stmt = select(Book).order_by(Book.title, Book.id).offset(offset)
        if limit is not None:
            stmt = stmt.limit(limit)

        books = self.db.execute(stmt).scalars().all()
        logger.debug(f"Listed {len(books)} books (offset={offset}, limit={limit})")
        return books

    def count(self) -> int:
        return self.db.execute(select(func.count()).select_from(Book)).scalar() or 0

    def get_by_id(self, book_id: uuid.UUID) -> Book | None:
        return self.db.get(Book, book_id)

    def add(self, book: Book) -> Book:
        self.db.add(book)
        self.db.commit()
        self.db.refresh(book)
        return book

    def update(self, book: Book) -> Book:
        """Persist a modified book as a single write."""
        book = self.db.merge(book)
        self.db.commit()
        self.db.refresh(book)
        return book

    def remove(self, book_id: uuid.UUID) -> bool:
        """
        Delete a book.

        Returns:
            True if the book existed and was removed, False otherwise
        """
        book = self.get_by_id(book_id)
        if book is None:
            return False

        self.db.delete(book)
        self.db.commit()
        return True
