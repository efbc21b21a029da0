"""
Tests for application wiring: settings, startup seeding and the
root/health endpoints.
"""

import pytest
from fastapi import Request, status
from fastapi.testclient import TestClient
from pydantic import ValidationError

from app.config import Settings
from app.dependencies import RequestOrigin, get_request_origin
from app.main import create_app
from app.seed import SAMPLE_BOOKS, seed_books


class TestRootAndHealth:
    def test_root(self, client):
        response = client.get("/")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["books"] == "/api/books"

    def test_health(self, client, sample_book):
        response = client.get("/health")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["status"] == "healthy"
        assert data["books"] == 1


class TestSeeding:
    def test_seeded_app_lists_sample_books(self):
        app = create_app(Settings(seed_sample_data=True))

        with TestClient(app) as client:
            data = client.get("/api/books").json()

        assert data["totalCount"] == 3
        assert [item["title"] for item in data["items"]] == [
            "Clean Architecture",
            "Domain-Driven Design",
            "Refactoring",
        ]

    def test_unseeded_app_starts_empty(self, client):
        assert client.get("/api/books").json()["totalCount"] == 0

    def test_seed_skips_non_empty_store(self, store, make_book):
        store.add(make_book("Existing"))

        assert seed_books(store) == 0
        assert store.count() == 1

    def test_seed_empty_store(self, store):
        assert seed_books(store) == len(SAMPLE_BOOKS)
        assert store.count() == len(SAMPLE_BOOKS)

    def test_each_app_has_its_own_store(self):
        with TestClient(create_app()) as first:
            first.post("/api/books", json={"title": "A", "author": "B", "year": 1})

        with TestClient(create_app()) as second:
            assert second.get("/api/books").json()["totalCount"] == 0


class TestSettings:
    def test_defaults(self):
        settings = Settings(_env_file=None)

        assert settings.database_url.startswith("sqlite")
        assert settings.log_level == "INFO"

    def test_log_level_normalised(self):
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            Settings(log_level="LOUD")

    def test_invalid_environment(self):
        with pytest.raises(ValidationError):
            Settings(environment="moon")

    def test_allowed_origins_list(self):
        settings = Settings(allowed_origins="http://a.test, http://b.test")

        assert settings.allowed_origins_list == ["http://a.test", "http://b.test"]


class TestRequestOrigin:
    def test_origin_includes_port(self):
        request = Request(
            {
                "type": "http",
                "scheme": "https",
                "server": ("books.example.com", 8443),
                "path": "/api/books",
                "headers": [(b"host", b"books.example.com:8443")],
            }
        )

        assert get_request_origin(request) == RequestOrigin(
            scheme="https", host="books.example.com:8443"
        )
