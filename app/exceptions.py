"""
Book Store Exceptions

Errors raised by handlers and services. They carry no HTTP knowledge;
main.py registers exception handlers that turn them into responses:

- BookValidationError → 400 with {"error": message}
- BookNotFoundError → 404 with an empty body
"""

import uuid


class BookStoreError(Exception):
    """Base class for book store errors."""


class BookValidationError(BookStoreError):
    """A required field is missing or blank."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class BookNotFoundError(BookStoreError):
    """No book with the requested id exists."""

    def __init__(self, book_id: uuid.UUID) -> None:
        super().__init__(f"Book with id {book_id} not found")
        self.book_id = book_id
