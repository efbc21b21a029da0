"""
Books Router

CRUD endpoints for books under /api/books:

- GET    /api/books        paginated, title-ordered listing
- GET    /api/books/{id}   single book
- POST   /api/books        create
- PUT    /api/books/{id}   replace title, author and year
- DELETE /api/books/{id}   delete

Every book in a response carries self/update/delete links; the listing
also carries collection navigation links.

Errors are raised as BookValidationError / BookNotFoundError and turned
into 400 / 404 responses by the handlers registered in main.py.
"""

import logging
import math
import uuid
from datetime import datetime, timezone

from fastapi import APIRouter, Response, status

from app.dependencies import BookStoreDep, Origin, Pagination
from app.exceptions import BookNotFoundError
from app.models import Book
from app.schemas import (
    BookCreate,
    BookResponse,
    BookUpdate,
    ErrorResponse,
    PageResponse,
)
from app.services.book_store import BookStore
from app.services.links import BOOKS_PATH, collection_links
from app.services.mapper import to_book_response
from app.services.validation import validate_book_input

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix=BOOKS_PATH,
    tags=["Books"],
)


# =============================================================================
# Helper Functions
# =============================================================================
def get_book_or_404(store: BookStore, book_id: uuid.UUID) -> Book:
    """
    Get a book by ID or raise BookNotFoundError.

    Args:
        store: Book store
        book_id: ID of the book to find

    Returns:
        Book instance

    Raises:
        BookNotFoundError: if no book has this id
    """
    book = store.get_by_id(book_id)
    if book is None:
        raise BookNotFoundError(book_id)
    return book


# =============================================================================
# CRUD Endpoints
# =============================================================================
@router.get("/", response_model=PageResponse, include_in_schema=False)
@router.get(
    "",
    response_model=PageResponse,
    summary="List books",
    description="Get a page of books ordered by title.",
)
def list_books(
    store: BookStoreDep,
    pagination: Pagination,
    origin: Origin,
) -> PageResponse:
    """
    List books with pagination.

    Invalid paging input is normalised rather than rejected, and a page
    past the end is clamped to the last page. An empty store still has
    one (empty) page.

    Returns:
        Page envelope with items, paging metadata and navigation links
    """
    total_count = store.count()
    total_pages = max(1, math.ceil(total_count / pagination.page_size))

    if pagination.page > total_pages:
        pagination.page = total_pages

    books = store.list(offset=pagination.skip, limit=pagination.page_size)

    return PageResponse(
        items=[to_book_response(origin.scheme, origin.host, book) for book in books],
        page=pagination.page,
        page_size=pagination.page_size,
        total_count=total_count,
        total_pages=total_pages,
        links=collection_links(
            origin.scheme,
            origin.host,
            pagination.page,
            pagination.page_size,
            total_pages,
        ),
    )


@router.get(
    "/{book_id}",
    response_model=BookResponse,
    summary="Get a book by ID",
    responses={404: {"description": "Book not found"}},
)
def get_book(
    book_id: uuid.UUID,
    store: BookStoreDep,
    origin: Origin,
) -> BookResponse:
    book = get_book_or_404(store, book_id)
    return to_book_response(origin.scheme, origin.host, book)


@router.post(
    "/",
    response_model=BookResponse,
    status_code=status.HTTP_201_CREATED,
    include_in_schema=False,
)
@router.post(
    "",
    response_model=BookResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new book",
    responses={400: {"model": ErrorResponse, "description": "Missing title or author"}},
)
def create_book(
    book_data: BookCreate,
    response: Response,
    store: BookStoreDep,
    origin: Origin,
) -> BookResponse:
    """
    Create a new book.

    The server generates the id and creation time; title and author are
    stored trimmed. The Location header points at the new book.

    Raises:
        BookValidationError: title or author missing/blank (400)
    """
    title, author = validate_book_input(book_data)

    book = store.add(
        Book(
            id=uuid.uuid4(),
            title=title,
            author=author,
            year=book_data.year,
            created_at_utc=datetime.now(timezone.utc),
            updated_at_utc=None,
        )
    )
    logger.info(f"Created book {book.id}: '{book.title}'")

    response.headers["Location"] = f"{BOOKS_PATH}/{book.id}"
    return to_book_response(origin.scheme, origin.host, book)


@router.put(
    "/{book_id}",
    response_model=BookResponse,
    summary="Update a book",
    responses={
        400: {"model": ErrorResponse, "description": "Missing title or author"},
        404: {"description": "Book not found"},
    },
)
def update_book(
    book_id: uuid.UUID,
    book_data: BookUpdate,
    store: BookStoreDep,
    origin: Origin,
) -> BookResponse:
    """
    Replace a book's title, author and year.

    Existence is checked before the body, so an invalid body sent to an
    unknown id gets 404. A 400 leaves the stored book untouched.

    Raises:
        BookNotFoundError: unknown id (404)
        BookValidationError: title or author missing/blank (400)
    """
    book = get_book_or_404(store, book_id)
    title, author = validate_book_input(book_data)

    book.title = title
    book.author = author
    book.year = book_data.year
    book.updated_at_utc = datetime.now(timezone.utc)

    book = store.update(book)
    logger.info(f"Updated book {book.id}")

    return to_book_response(origin.scheme, origin.host, book)


@router.delete(
    "/{book_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a book",
    responses={404: {"description": "Book not found"}},
)
def delete_book(
    book_id: uuid.UUID,
    store: BookStoreDep,
) -> None:
    """
    Delete a book.

    Returns 204 No Content on success. Deleting the same id again gives 404.
    """
    if not store.remove(book_id):
        raise BookNotFoundError(book_id)

    logger.info(f"Deleted book {book_id}")
