"""
pytest Fixtures for Book Store API Tests

This file contains shared fixtures used across all test files.

Every test gets its own application from create_app(). The application
builds its in-memory store during startup, so each test starts from an
empty store and nothing leaks between tests.

FIXTURE SCOPES:
- function (default): New instance per test function
"""

# =============================================================================
# TEST ENVIRONMENT SETUP
# =============================================================================
# IMPORTANT: Set environment variables BEFORE importing the app
# Tests expect an empty store, so sample data is switched off.
import os

os.environ["SEED_SAMPLE_DATA"] = "false"
os.environ["DATABASE_URL"] = "sqlite:///:memory:"

from collections.abc import Generator
from datetime import datetime, timezone
import uuid

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from app.database import create_db_engine, create_session_factory, create_tables
from app.main import create_app
from app.models import Book
from app.services.book_store import BookStore


# =============================================================================
# APPLICATION FIXTURES
# =============================================================================
@pytest.fixture(scope="function")
def app() -> FastAPI:
    """A fresh application with its own (not yet started) store."""
    return create_app()


@pytest.fixture(scope="function")
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    """
    Create a test client for the application.

    Entering the client runs the lifespan, which creates the store.
    Leaving it disposes of the store.
    """
    with TestClient(app) as test_client:
        yield test_client


# =============================================================================
# STANDALONE STORE FIXTURES
# =============================================================================
@pytest.fixture(scope="function")
def db_session() -> Generator[Session, None, None]:
    """Session on a private in-memory store, no application involved."""
    engine = create_db_engine("sqlite:///:memory:")
    create_tables(engine)
    session = create_session_factory(engine)()

    yield session

    session.close()
    engine.dispose()


@pytest.fixture(scope="function")
def store(db_session: Session) -> BookStore:
    return BookStore(db_session)


@pytest.fixture
def make_book():
    """Factory for unsaved Book records, built the way the create handler does."""

    def _make_book(title: str, author: str = "Test Author", year: int = 2000) -> Book:
        return Book(
            id=uuid.uuid4(),
            title=title,
            author=author,
            year=year,
            created_at_utc=datetime.now(timezone.utc),
        )

    return _make_book


# =============================================================================
# SAMPLE DATA FIXTURES
# =============================================================================
# Sample books are created through the API, the same way a client would.


@pytest.fixture
def sample_book(client: TestClient) -> dict:
    """One book in the application's store, as returned by POST."""
    response = client.post(
        "/api/books",
        json={"title": "Dune", "author": "Frank Herbert", "year": 1965},
    )
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def multiple_books(client: TestClient) -> list[dict]:
    """25 books for pagination testing, titled Book 01 .. Book 25."""
    books = []
    # Created in reverse so ordering comes from the store, not insertion
    for i in range(25, 0, -1):
        response = client.post(
            "/api/books",
            json={"title": f"Book {i:02d}", "author": "Test Author", "year": 2000 + i},
        )
        books.append(response.json())
    return books
