"""Tests for the result records and the error normalizer."""

import pytest

from elevenlabs_client.responses import (
    ErrorResult,
    NoResult,
    SuccessResult,
    extract_detail_message,
    handle_exception,
    success,
    unhandled_status,
    validation_error,
)
from elevenlabs_client.transport import TransportError, TransportResponse


@pytest.mark.parametrize("body, expected", [
    (b'{"detail": {"message": "invalid api key"}}', "invalid api key"),
    (b'{"detail": {"status": "quota_exceeded"}}', None),
    (b'{"detail": "Not Found"}', None),
    (b'[1, 2]', None),
    (b'not json', None),
    (b'', None),
    (None, None),
])
def test_extract_detail_message(body, expected):
    assert extract_detail_message(body) == expected


def test_handle_transport_error():
    exc = TransportError(401, b'{"detail": {"message": "invalid api key"}}')

    assert handle_exception(exc) == ErrorResult(401, "invalid api key")


def test_handle_other_exception():
    assert handle_exception(ValueError("boom")) == ErrorResult(0, None)


def test_success_and_validation_records():
    assert success(200, "done") == SuccessResult(200, "done")
    assert validation_error("bad") == ErrorResult(400, "bad")
    assert ErrorResult(500).to_dict() == {"status": 500, "message": None}
    assert SuccessResult(200, "done").ok is True


def test_unhandled_status_is_falsy_sentinel():
    result = unhandled_status(TransportResponse(status_code=201))

    assert result == NoResult(201)
    assert not result
    assert result != SuccessResult(201, "")
