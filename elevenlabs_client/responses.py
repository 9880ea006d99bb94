"""Uniform result records and the routine that normalizes call outcomes into them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional
import json
import logging

from elevenlabs_client.transport import TransportError, TransportResponse


logger = logging.getLogger("elevenlabs.responses")


GENERATED_MESSAGE = "Voice successfully generated"
INVALID_VOICE_SETTINGS_MESSAGE = "You provided invalid voice settings"
UNSERIALIZABLE_VOICE_SETTINGS_MESSAGE = "Voice settings must be JSON serializable"
MISSING_VOICE_ID_MESSAGE = "voice_id is missing"
MISSING_TEXT_MESSAGE = "text is missing"


@dataclass(frozen=True)
class SuccessResult:
    status_code: int
    message: str

    @property
    def ok(self) -> bool:
        return True

    def to_dict(self) -> Dict[str, Any]:
        return {"status": self.status_code, "message": self.message}


@dataclass(frozen=True)
class ErrorResult:
    status_code: int
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return False

    def to_dict(self) -> Dict[str, Any]:
        return {"status": self.status_code, "message": self.message}


@dataclass(frozen=True)
class NoResult:
    """Returned when a call succeeded at transport level with a status other than 200.

    It is neither a success nor an error, and it is falsy.
    """

    status_code: int

    @property
    def ok(self) -> bool:
        return False

    def __bool__(self) -> bool:
        return False


def success(status_code: int, message: str) -> SuccessResult:
    return SuccessResult(status_code, message)


def validation_error(message: str) -> ErrorResult:
    """Local rejection, issued before any network call."""
    logger.warning("Request rejected locally: %s", message)
    return ErrorResult(400, message)


def extract_detail_message(body: Optional[bytes]) -> Optional[str]:
    """Pull ``detail.message`` out of an error body, if it is there."""
    if not body:
        return None
    try:
        data = json.loads(body)
    except ValueError:
        return None
    if not isinstance(data, dict):
        return None
    detail = data.get("detail")
    if isinstance(detail, dict) and detail.get("message") is not None:
        return str(detail["message"])
    return None


def handle_exception(exc: Exception) -> ErrorResult:
    """
    Convert a failed call into an ErrorResult.

    The status code comes from the transport error (0 for anything without
    one); the message is the nested ``detail.message`` of the error body, or
    None when the body does not carry it.
    """
    status_code = exc.status_code if isinstance(exc, TransportError) else 0
    body = exc.body if isinstance(exc, TransportError) else None
    message = extract_detail_message(body)
    logger.error("ElevenLabs call failed (status=%s): %s", status_code, message or exc)
    return ErrorResult(status_code, message)


def unhandled_status(response: TransportResponse) -> NoResult:
    logger.warning(
        "ElevenLabs answered with unexpected status %s, no result produced",
        response.status_code,
    )
    return NoResult(response.status_code)
