"""
Book input validation.

Title is checked before author and the first failure wins, so a request
missing both fields reports only the title.
"""

from app.exceptions import BookValidationError
from app.schemas.book import BookBase


def validate_book_input(data: BookBase) -> tuple[str, str]:
    """
    Check the required fields of a create or update request.

    Args:
        data: Request body

    Returns:
        (title, author), both stripped of surrounding whitespace

    Raises:
        BookValidationError: If title or author is missing or blank
    """
    if data.title is None or not data.title.strip():
        raise BookValidationError("Title is required.")

    if data.author is None or not data.author.strip():
        raise BookValidationError("Author is required.")

    return data.title.strip(), data.author.strip()
