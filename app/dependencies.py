"""
FastAPI Dependencies Module

Dependencies are reusable components injected into route handlers.
FastAPI's Depends() function manages their lifecycle.

Dependencies provided here:
- DbSession: per-request SQLAlchemy session
- BookStoreDep: the book store wrapping that session
- Origin: scheme and host of the current request, for building links
- Pagination: page / pageSize query parameters, normalised
"""

from typing import Annotated, NamedTuple

from fastapi import Depends, Query, Request
from sqlalchemy.orm import Session

from app.database import get_db
from app.services.book_store import BookStore

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100

# =============================================================================
# Store
# =============================================================================
DbSession = Annotated[Session, Depends(get_db)]


def get_book_store(db: DbSession) -> BookStore:
    """Book store bound to the request's session."""
    return BookStore(db)


BookStoreDep = Annotated[BookStore, Depends(get_book_store)]


# =============================================================================
# Request Origin
# =============================================================================
class RequestOrigin(NamedTuple):
    """Scheme and host (with port, if any) the client used to reach us."""

    scheme: str
    host: str


def get_request_origin(request: Request) -> RequestOrigin:
    """Scheme and host of the current request, used to build absolute links."""
    return RequestOrigin(scheme=request.url.scheme, host=request.url.netloc)


Origin = Annotated[RequestOrigin, Depends(get_request_origin)]


# =============================================================================
# Pagination Parameters
# =============================================================================
class PaginationParams:
    """
    Pagination parameters for the book listing.

    Out-of-range values are normalised, never rejected:
    - page below 1 becomes 1
    - pageSize outside [1, 100] falls back to 10

    Clamping page to the last page needs the total count, so that step
    happens in the handler.

    Usage in route:
        @router.get("")
        def list_books(store: BookStoreDep, pagination: Pagination):
            ...
    """

    def __init__(
        self,
        page: int = Query(
            default=1,
            description="Page number (1-indexed)",
            examples=[1, 2, 3],
        ),
        page_size: int = Query(
            default=DEFAULT_PAGE_SIZE,
            alias="pageSize",
            description="Number of items per page (1-100, otherwise 10)",
            examples=[10, 25, 50],
        ),
    ) -> None:
        self.page = page if page >= 1 else 1
        self.page_size = (
            page_size if 1 <= page_size <= MAX_PAGE_SIZE else DEFAULT_PAGE_SIZE
        )

    @property
    def skip(self) -> int:
        """
        Calculate the number of records to skip.

        Page 1 → skip 0 items
        Page 2 → skip page_size items
        """
        return (self.page - 1) * self.page_size


Pagination = Annotated[PaginationParams, Depends()]
