"""Tests for shared error classes and exception handlers."""
from __future__ import annotations

from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.shared.errors import (
    AppError,
    FixtureError,
    NotFoundError,
    ParsingError,
    ValidationError,
    register_exception_handlers,
)


class TestAppError:
    """Tests for the base AppError exception."""

    def test_default_status_code(self):
        err = AppError(detail="something broke")
        assert err.status_code == 500
        assert err.detail == "something broke"

    def test_custom_status_code(self):
        err = AppError(detail="bad request", status_code=400)
        assert err.status_code == 400

    def test_str_is_detail(self):
        assert str(AppError(detail="human readable")) == "human readable"


class TestValidationError:
    """Tests for ValidationError (422)."""

    def test_default_detail(self):
        err = ValidationError()
        assert err.status_code == 422
        assert err.detail == "Validation error"

    def test_custom_detail(self):
        err = ValidationError(detail="Diagram too large")
        assert err.detail == "Diagram too large"
        assert err.status_code == 422

    def test_inherits_from_app_error(self):
        assert issubclass(ValidationError, AppError)


class TestNotFoundError:
    """Tests for NotFoundError (404)."""

    def test_default_detail(self):
        err = NotFoundError()
        assert err.status_code == 404
        assert err.detail == "Resource not found"

    def test_inherits_from_app_error(self):
        assert issubclass(NotFoundError, AppError)


class TestParsingError:
    """Tests for ParsingError (400)."""

    def test_default_detail(self):
        err = ParsingError()
        assert err.status_code == 400
        assert err.detail == "Parsing error"


class TestFixtureError:
    """Tests for FixtureError (500)."""

    def test_default_detail(self):
        err = FixtureError()
        assert err.status_code == 500
        assert err.detail == "Unable to load PlantUML fixtures"

    def test_inherits_from_app_error(self):
        assert issubclass(FixtureError, AppError)


class TestRegisterExceptionHandlers:
    """Tests for register_exception_handlers on a FastAPI app."""

    def test_app_error_returns_json(self):
        app = FastAPI()
        register_exception_handlers(app)

        @app.get("/test-500")
        async def _raise_app():
            raise AppError(detail="server error")

        client = TestClient(app, raise_server_exceptions=False)
        resp = client.get("/test-500")
        assert resp.status_code == 500
        assert resp.json() == {"detail": "server error"}

    def test_not_found_error_returns_404(self):
        app = FastAPI()
        register_exception_handlers(app)

        @app.get("/test-404")
        async def _raise_nf():
            raise NotFoundError(detail="gone")

        client = TestClient(app, raise_server_exceptions=False)
        resp = client.get("/test-404")
        assert resp.status_code == 404
        assert resp.json() == {"detail": "gone"}

    def test_validation_error_returns_422(self):
        app = FastAPI()
        register_exception_handlers(app)

        @app.get("/test-422")
        async def _raise_val():
            raise ValidationError(detail="bad field")

        client = TestClient(app, raise_server_exceptions=False)
        resp = client.get("/test-422")
        assert resp.status_code == 422
        assert resp.json() == {"detail": "bad field"}
