"""
Tests for the response envelope and exception rendering.
"""

import json

from app.core.exceptions import (
    AvatarAlreadyExistsException,
    AvatarNotFoundException,
    BadRequestException,
    StoreException,
)
from app.core.responses import build_envelope, envelope_response


def test_build_envelope():
    """The envelope carries exactly data, error and message."""
    assert build_envelope({"a": 1}, False, "ok") == {
        "data": {"a": 1},
        "error": False,
        "message": "ok",
    }


def test_build_envelope_error_with_null_data():
    assert build_envelope(None, True, "Avatar not found") == {
        "data": None,
        "error": True,
        "message": "Avatar not found",
    }


def test_envelope_response_status_and_body():
    """envelope_response encodes the payload and sets the status code."""
    response = envelope_response({"status": "ok"}, "Created", status_code=201)

    assert response.status_code == 201
    assert json.loads(response.body) == {
        "data": {"status": "ok"},
        "error": False,
        "message": "Created",
    }


def test_exception_status_codes():
    """Each error kind maps to a fixed status code."""
    assert BadRequestException("Bad request").status_code == 400
    assert AvatarAlreadyExistsException("u1").status_code == 400
    assert AvatarNotFoundException("u1").status_code == 404
    assert StoreException("boom").status_code == 500


def test_exception_to_dict():
    """Exceptions render into the error envelope."""
    assert AvatarNotFoundException("u1").to_dict() == {
        "data": None,
        "error": True,
        "message": "Avatar not found",
    }
