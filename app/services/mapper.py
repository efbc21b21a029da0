"""
Book to response mapping.

Turns stored Book records into BookResponse payloads with their
hypermedia links attached.
"""

from app.models import Book
from app.schemas import BookResponse
from app.services.links import book_links


def to_book_response(scheme: str, host: str, book: Book) -> BookResponse:
    return BookResponse(
        id=book.id,
        title=book.title,
        author=book.author,
        year=book.year,
        created_at_utc=book.created_at_utc,
        updated_at_utc=book.updated_at_utc,
        links=book_links(scheme, host, book.id),
    )
