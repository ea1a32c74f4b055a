"""
Unit tests for the domain error to HTTP mapping.
"""
import pytest
from fastapi import status

from streetcats.api.v1.errors import ERROR_STATUS_CODES, internal_error, to_http_exception
from streetcats.domain.exceptions import (
    DuplicateEmailError,
    ErrorCode,
    ExpiredTokenError,
    ForbiddenError,
    InternalError,
    MissingTokenError,
    UploadTooLargeError,
)


def test_every_error_code_has_a_status():
    assert set(ERROR_STATUS_CODES) == set(ErrorCode)


def test_unauthorized_carries_bearer_challenge():
    exception = to_http_exception(MissingTokenError())
    assert exception.status_code == status.HTTP_401_UNAUTHORIZED
    assert exception.headers == {"WWW-Authenticate": "Bearer"}
    assert exception.detail["error"] == "MissingToken"


@pytest.mark.parametrize(
    "error, expected_status, expected_code",
    [
        (ExpiredTokenError(), 401, "Expired"),
        (DuplicateEmailError(), 400, "DuplicateEmail"),
        (ForbiddenError(), 403, "Forbidden"),
        (UploadTooLargeError(), 413, "UploadTooLarge"),
    ],
)
def test_mapping(error, expected_status, expected_code):
    exception = to_http_exception(error)
    assert exception.status_code == expected_status
    assert exception.detail == {"error": expected_code, "message": error.message}


def test_internal_error_withholds_details(mock_settings):
    mock_settings.debug = False
    exception = internal_error(RuntimeError("db password=hunter2"), "Error")
    assert exception.status_code == 500
    assert exception.detail == {"error": "InternalError", "message": "Internal server error"}


def test_internal_error_shows_details_in_development(mock_settings):
    mock_settings.debug = True
    exception = internal_error(RuntimeError("db down"), "Error")
    assert "db down" in exception.detail["details"]


def test_internal_domain_error_maps_to_500(mock_settings):
    exception = to_http_exception(InternalError("boom"))
    assert exception.status_code == 500
    assert exception.detail["message"] == "Internal server error"
