"""
Hypermedia Links

Pure functions that build the HATEOAS links attached to responses.

They take only the request's scheme and host (host may include a port,
e.g. "localhost:8000") plus the resource id or page parameters, and return
absolute URLs. Nothing here touches the request object itself.

Example:
    book_links("http", "localhost:8000", book_id)
    → self GET, update PUT, delete DELETE on http://localhost:8000/api/books/{id}
"""

import uuid

from app.schemas.book import LinkResponse

BOOKS_PATH = "/api/books"


def books_url(scheme: str, host: str) -> str:
    """Absolute URL of the books collection."""
    return f"{scheme}://{host}{BOOKS_PATH}"


def book_url(scheme: str, host: str, book_id: uuid.UUID) -> str:
    """Absolute URL of a single book."""
    return f"{books_url(scheme, host)}/{book_id}"


def page_url(scheme: str, host: str, page: int, page_size: int) -> str:
    return f"{books_url(scheme, host)}?page={page}&pageSize={page_size}"


def book_links(scheme: str, host: str, book_id: uuid.UUID) -> list[LinkResponse]:
    """Links for a single book: self, update and delete."""
    href = book_url(scheme, host, book_id)
    return [
        LinkResponse(relation="self", href=href, method="GET"),
        LinkResponse(relation="update", href=href, method="PUT"),
        LinkResponse(relation="delete", href=href, method="DELETE"),
    ]


def collection_links(
    scheme: str,
    host: str,
    page: int,
    page_size: int,
    total_pages: int,
) -> list[LinkResponse]:
    """
    Navigation links for a page of the collection.

    self and create are always present; prev only when there is a
    previous page, next only when there is a following one.
    """
    links = [
        LinkResponse(
            relation="self",
            href=page_url(scheme, host, page, page_size),
            method="GET",
        ),
        LinkResponse(relation="create", href=books_url(scheme, host), method="POST"),
    ]

    if page > 1:
        links.append(
            LinkResponse(
                relation="prev",
                href=page_url(scheme, host, page - 1, page_size),
                method="GET",
            )
        )

    if page < total_pages:
        links.append(
            LinkResponse(
                relation="next",
                href=page_url(scheme, host, page + 1, page_size),
                method="GET",
            )
        )

    return links
