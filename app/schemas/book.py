"""
Book Pydantic Schemas

Request and response shapes for the /api/books endpoints.

JSON keys are camelCase (createdAtUtc, pageSize, ...) while the Python
attributes stay snake_case; the alias generator maps between the two.

Required-field checks for title and author are NOT done here: a missing or
blank field must produce a 400 with {"error": "..."}, not Pydantic's 422,
so the handlers run app.services.validation instead.
"""

import uuid
from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema that reads and writes camelCase JSON keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class LinkResponse(CamelModel):
    """A hypermedia link describing an available action."""

    relation: str = Field(
        ...,
        description="Link relation",
        examples=["self", "update", "delete", "create", "next", "prev"],
    )
    href: str = Field(
        ...,
        description="Absolute target URL",
        examples=["http://localhost:8000/api/books"],
    )
    method: str = Field(
        ...,
        description="HTTP method to use on the target",
        examples=["GET", "POST", "PUT", "DELETE"],
    )


class BookBase(CamelModel):
    """
    Shared book fields for create and update requests.

    title and author are optional at the schema level so that a missing
    value reaches the handler's validation.
    """

    title: str | None = Field(
        default=None,
        description="Book title",
        examples=["Dune"],
    )

    author: str | None = Field(
        default=None,
        description="Author name",
        examples=["Frank Herbert"],
    )

    # Same range as a 32-bit signed integer column
    year: int = Field(
        default=0,
        ge=-(2**31),
        le=2**31 - 1,
        description="Publication year",
        examples=[1965],
    )


class BookCreate(BookBase):
    """
    Schema for creating a new book.

    Example request body:
    {
        "title": "Dune",
        "author": "Frank Herbert",
        "year": 1965
    }
    """


class BookUpdate(BookBase):
    """
    Schema for updating an existing book.

    PUT replaces title, author and year together; there are no partial
    updates.
    """


class BookResponse(CamelModel):
    """
    Schema for book responses.

    Includes the server-generated id and timestamps plus the links for
    the actions available on this book.
    """

    id: uuid.UUID = Field(..., description="Unique identifier")
    title: str = Field(..., description="Book title")
    author: str = Field(..., description="Author name")
    year: int = Field(..., description="Publication year")
    created_at_utc: datetime = Field(..., description="When the book was created")
    updated_at_utc: datetime | None = Field(
        default=None,
        description="When the book was last updated, null if never",
    )
    links: list[LinkResponse] = Field(
        default_factory=list,
        description="Actions available on this book",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "3f2b8c1e-5d7a-4e8b-9a0c-1d2e3f4a5b6c",
                "title": "Dune",
                "author": "Frank Herbert",
                "year": 1965,
                "createdAtUtc": "2024-01-15T10:30:00Z",
                "updatedAtUtc": None,
                "links": [
                    {
                        "relation": "self",
                        "href": "http://localhost:8000/api/books/3f2b8c1e-5d7a-4e8b-9a0c-1d2e3f4a5b6c",
                        "method": "GET",
                    }
                ],
            }
        },
    )

    @field_validator("created_at_utc", "updated_at_utc")
    @classmethod
    def assume_utc(cls, v: datetime | None) -> datetime | None:
        """SQLite drops tzinfo on the way back; the stored values are UTC."""
        if v is not None and v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v


class PageResponse(CamelModel):
    """
    Schema for paginated book list responses.

    Includes metadata about the pagination:
    - total_count: Total number of books in the store
    - page: Current page number (after clamping)
    - page_size: Number of items per page
    - total_pages: Total number of pages, never less than 1
    - links: Collection navigation links
    """

    items: list[BookResponse] = Field(
        ...,
        description="Books on this page",
    )

    page: int = Field(
        ...,
        ge=1,
        description="Current page number",
    )

    page_size: int = Field(
        ...,
        ge=1,
        le=100,
        description="Number of items per page",
    )

    total_count: int = Field(
        ...,
        ge=0,
        description="Total number of books",
    )

    total_pages: int = Field(
        ...,
        ge=1,
        description="Total number of pages",
    )

    links: list[LinkResponse] = Field(
        default_factory=list,
        description="Collection navigation links",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "items": [],
                "page": 1,
                "pageSize": 10,
                "totalCount": 0,
                "totalPages": 1,
                "links": [],
            }
        },
    )


class ErrorResponse(BaseModel):
    """Body of a 400 response."""

    error: str = Field(..., examples=["Title is required."])
