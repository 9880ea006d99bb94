"""
Read-only voice metadata lookups.

Descriptors and settings are returned as decoded from the service; only the
``voices`` envelope of the list call is unwrapped.
"""

from __future__ import annotations

from typing import Any, Dict, List, Union
import logging

from elevenlabs_client.responses import (
    MISSING_VOICE_ID_MESSAGE,
    ErrorResult,
    handle_exception,
    validation_error,
)
from elevenlabs_client.transport import HttpTransport, TransportError


logger = logging.getLogger("elevenlabs.voices")


VoiceDescriptor = Dict[str, Any]


class Voice:
    def __init__(self, transport: HttpTransport):
        self.transport = transport

    def get_all(self) -> Union[List[VoiceDescriptor], ErrorResult]:
        """Retrieve all voices available to the account."""
        try:
            data = self._get_json("voices")
        except TransportError as exc:
            return handle_exception(exc)

        voices = data.get("voices") if isinstance(data, dict) else None
        if voices is None:
            return []
        logger.debug("Fetched %d voices", len(voices))
        return voices

    def get_voice(self, voice_id: str) -> Union[VoiceDescriptor, ErrorResult]:
        """Return metadata about a specific voice."""
        try:
            return self._get_json(f"voices/{voice_id}")
        except TransportError as exc:
            return handle_exception(exc)

    def default_settings(self) -> Union[Dict[str, Any], ErrorResult]:
        """
        Get the default voice settings.

        "similarity_boost" corresponds to "Clarity + Similarity Enhancement"
        in the web app and "stability" to the "Stability" slider.
        """
        try:
            return self._get_json("voices/settings/default")
        except TransportError as exc:
            return handle_exception(exc)

    def voice_settings(self, voice_id: str) -> Union[Dict[str, Any], ErrorResult]:
        """Get the settings stored for one voice."""
        if not voice_id:
            return validation_error(MISSING_VOICE_ID_MESSAGE)

        try:
            return self._get_json(f"voices/{voice_id}/settings")
        except TransportError as exc:
            return handle_exception(exc)

    def _get_json(self, path: str) -> Any:
        return self.transport.get(path).json()
