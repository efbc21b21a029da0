"""
Pydantic Schemas Package

This package contains Pydantic models for request/response validation.

WHY Separate Schemas from SQLAlchemy Models?
============================================
1. Control exactly what data is exposed in API responses
2. The JSON shape (camelCase, links) differs from the stored columns
3. Schemas generate OpenAPI documentation

Schema Naming Convention:
- XxxBase: Shared fields between create/update
- XxxCreate: Fields sent when creating a new record
- XxxUpdate: Fields sent when updating a record
- XxxResponse: Fields returned in API responses
"""

from app.schemas.book import (
    BookBase,
    BookCreate,
    BookResponse,
    BookUpdate,
    ErrorResponse,
    LinkResponse,
    PageResponse,
)

__all__ = [
    "BookBase",
    "BookCreate",
    "BookUpdate",
    "BookResponse",
    "PageResponse",
    "LinkResponse",
    "ErrorResponse",
]
