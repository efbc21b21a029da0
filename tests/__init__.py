"""
Test Suite for Book Store API

Test Organization:
- conftest.py: Shared fixtures (app, client, standalone store, sample data)
- test_books.py: Tests for /api/books endpoints
- test_book_store.py: Tests for the entity store
- test_links.py: Tests for the hypermedia link builders
- test_app.py: Settings, seeding, root and health endpoints

Running Tests:
    # Run all tests
    pytest

    # Run with coverage
    pytest --cov=app --cov-report=html
"""
