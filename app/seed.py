"""
Sample Data

Populates an empty store with a few books so a freshly started server has
something to list. Called from the application lifespan when
SEED_SAMPLE_DATA is enabled (the default).
"""

import logging
import uuid
from datetime import datetime, timezone

from app.models import Book
from app.services.book_store import BookStore

logger = logging.getLogger(__name__)

SAMPLE_BOOKS = [
    {"title": "Clean Architecture", "author": "Robert C. Martin", "year": 2017},
    {"title": "Domain-Driven Design", "author": "Eric Evans", "year": 2003},
    {"title": "Refactoring", "author": "Martin Fowler", "year": 1999},
]


def seed_books(store: BookStore) -> int:
    """
    Add the sample books unless the store already holds books.

    Returns:
        Number of books added
    """
    if store.count() > 0:
        logger.info("Store already has books, skipping seed")
        return 0

    for data in SAMPLE_BOOKS:
        store.add(
            Book(
                id=uuid.uuid4(),
                created_at_utc=datetime.now(timezone.utc),
                **data,
            )
        )

    logger.info(f"Seeded {len(SAMPLE_BOOKS)} sample books")
    return len(SAMPLE_BOOKS)
