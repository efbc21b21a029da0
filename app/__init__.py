"""
Book Store API Application Package

This is the main application package for the Book Store API.

Package Structure:
- config.py: Application configuration using Pydantic Settings
- database.py: SQLAlchemy engine factory and per-request sessions
- main.py: FastAPI application factory and configuration
- dependencies.py: Dependency injection functions
- exceptions.py: Book store error kinds
- seed.py: Sample books loaded at startup
- models/: SQLAlchemy ORM models
- schemas/: Pydantic request/response schemas
- routers/: API route handlers
- services/: Book store, links, mapping, validation
"""

__version__ = "0.1.0"
