import pytest
from fastapi import HTTPException
from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError, NoResultFound, SQLAlchemyError

from app.core import config
from app.core.exceptions import describe_exception, error_body
from app.schemas.products import ProductCreate


def test_http_exception_keeps_its_status():
    assert describe_exception(HTTPException(status_code=404, detail="Employee not found")) == (
        404,
        "Employee not found",
    )


def test_validation_error_is_bad_request():
    with pytest.raises(ValidationError) as excinfo:
        ProductCreate(name="Gum", price=0.004)

    status_code, message = describe_exception(excinfo.value)
    assert status_code == 400
    assert message.startswith("price: ")
    assert "Price must be at least 0.01" in message


def test_integrity_error_is_conflict():
    exc = IntegrityError("INSERT INTO admins", {}, Exception("UNIQUE constraint failed: admins.email"))

    assert describe_exception(exc) == (409, "Unique or foreign key constraint failed")


def test_missing_row_is_not_found():
    assert describe_exception(NoResultFound()) == (404, "Record not found")


def test_other_database_errors_are_hidden():
    assert describe_exception(SQLAlchemyError("connection refused")) == (500, "A database error occurred")


def test_unexpected_error_shows_message_outside_production():
    assert describe_exception(RuntimeError("disk\nfull")) == (500, "diskfull")


def test_unexpected_error_is_masked_in_production(monkeypatch):
    monkeypatch.setattr(config, "APP_ENV", "production")

    assert describe_exception(RuntimeError("disk full")) == (500, "Internal server error")


def test_error_body_strips_newlines():
    body = error_body(418, "/teapot", "short\nand stout")

    assert body["statusCode"] == 418
    assert body["path"] == "/teapot"
    assert body["message"] == "shortand stout"
    assert body["timestamp"]
