"""
Book Model

The single model of the Book Store API, representing books in the store.

Identifiers are UUIDs generated by the application when a book is created,
so a book's URL is known before it is written to the store.

Timestamps are kept in UTC:
- created_at_utc is set once, when the book is created
- updated_at_utc stays NULL until the first update
"""

import uuid
from datetime import datetime

from sqlalchemy import DateTime, Integer, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class Book(Base):
    """
    Book model representing books in the store.

    Table: books

    Fields:
    - id: UUID primary key
    - title: Book title (required, trimmed)
    - author: Author name (required, trimmed)
    - year: Publication year (any integer)
    - created_at_utc: When the book was created
    - updated_at_utc: When the book was last updated, None if never

    Indexes:
    - Primary key on id (automatic)
    - title: Index for the title-ordered listing

    Example:
        book = Book(
            id=uuid.uuid4(),
            title="Refactoring",
            author="Martin Fowler",
            year=1999,
            created_at_utc=datetime.now(timezone.utc),
        )
    """

    __tablename__ = "books"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    title: Mapped[str] = mapped_column(
        String(500),
        index=True,
        nullable=False,
        comment="Book title"
    )

    author: Mapped[str] = mapped_column(
        String(500),
        nullable=False,
        comment="Author name"
    )

    year: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
        comment="Publication year"
    )

    # -------------------------------------------------------------------------
    # Timestamps
    # -------------------------------------------------------------------------
    # Set by the handlers, not by the database, so the values written are the
    # values returned to the client.
    created_at_utc: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
    )

    updated_at_utc: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        default=None,
    )

    def __repr__(self) -> str:
        return f"Book(id={self.id}, title='{self.title}', author='{self.author}')"
