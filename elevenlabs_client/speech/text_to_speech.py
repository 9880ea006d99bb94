"""
Text-to-speech calls.

Every call shares one request builder and one validation rule: voice
settings, when given, may only use keys from ALLOWED_VOICE_SETTINGS.
Failures never raise; they come back as ErrorResult.

See: https://docs.elevenlabs.io/api-reference/text-to-speech
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping, Optional, Union
import json
import logging

from elevenlabs_client.responses import (
    GENERATED_MESSAGE,
    INVALID_VOICE_SETTINGS_MESSAGE,
    MISSING_TEXT_MESSAGE,
    UNSERIALIZABLE_VOICE_SETTINGS_MESSAGE,
    ErrorResult,
    NoResult,
    SuccessResult,
    handle_exception,
    success,
    unhandled_status,
    validation_error,
)
from elevenlabs_client.transport import HttpTransport, TransportError, TransportResponse

from .config import DEFAULT_LATENCY_OPTIMIZATION, DEFAULT_MODEL_ID, DEFAULT_VOICE_ID
from .dto import GenerationRequest


logger = logging.getLogger("elevenlabs.speech")


StatusResult = Union[SuccessResult, ErrorResult, NoResult]


class TextToSpeech:
    def __init__(
        self,
        transport: HttpTransport,
        voice_id: str = DEFAULT_VOICE_ID,
        model_id: str = DEFAULT_MODEL_ID,
    ):
        self.transport = transport
        # used whenever a call leaves voice_id / model_id unset
        self.voice_id = voice_id
        self.model_id = model_id

    def generate(
        self,
        content: str,
        voice_id: Optional[str] = None,
        optimize_latency: Optional[bool] = DEFAULT_LATENCY_OPTIMIZATION,
        model_id: Optional[str] = None,
        voice_settings: Optional[Mapping[str, Any]] = None,
    ) -> StatusResult:
        """
        Generate speech for `content` and report whether it worked.

        Args:
            content: Text to speak
            voice_id: Voice to use (default: the client's voice, Rachel unless configured)
            optimize_latency: Latency hint, accepted but not sent
            model_id: Synthesis model (default: the client's model, eleven_monolingual_v1 unless configured)
            voice_settings: Overrides for the voice's stored settings

        Returns:
            SuccessResult on HTTP 200, ErrorResult on failure, NoResult for any
            other status.
        """
        request = self._build_request(content, voice_id, optimize_latency, model_id, voice_settings)
        if isinstance(request, ErrorResult):
            return request

        response = self._send(request)
        if isinstance(response, ErrorResult):
            return response
        if response.status_code == 200:
            return success(response.status_code, GENERATED_MESSAGE)
        return unhandled_status(response)

    def generate_download(
        self,
        content: str,
        voice_id: Optional[str] = None,
        optimize_latency: Optional[bool] = DEFAULT_LATENCY_OPTIMIZATION,
        model_id: Optional[str] = None,
        voice_settings: Optional[Mapping[str, Any]] = None,
    ) -> Union[bytes, ErrorResult, NoResult]:
        """Same request as `generate`, but returns the audio bytes on HTTP 200."""
        request = self._build_request(content, voice_id, optimize_latency, model_id, voice_settings)
        if isinstance(request, ErrorResult):
            return request

        response = self._send(request)
        if isinstance(response, ErrorResult):
            return response
        if response.status_code == 200:
            logger.info("Downloaded %d bytes of audio (voice=%s)", len(response.content), request.voice_id)
            return response.content
        return unhandled_status(response)

    def generate_stream(
        self,
        content: str,
        voice_id: Optional[str] = None,
        optimize_latency: Optional[bool] = DEFAULT_LATENCY_OPTIMIZATION,
        model_id: Optional[str] = None,
        voice_settings: Optional[Mapping[str, Any]] = None,
    ) -> StatusResult:
        """
        Call the streaming endpoint.

        Only success or failure is reported; the audio chunks are not exposed.
        """
        request = self._build_request(content, voice_id, optimize_latency, model_id, voice_settings)
        if isinstance(request, ErrorResult):
            return request

        response = self._send(request, stream=True)
        if isinstance(response, ErrorResult):
            return response
        if response.status_code == 200:
            return success(response.status_code, GENERATED_MESSAGE)
        return unhandled_status(response)

    def generate_to_file(
        self,
        content: str,
        output_path: Path,
        voice_id: Optional[str] = None,
        optimize_latency: Optional[bool] = DEFAULT_LATENCY_OPTIMIZATION,
        model_id: Optional[str] = None,
        voice_settings: Optional[Mapping[str, Any]] = None,
    ) -> Union[Path, ErrorResult, NoResult]:
        audio = self.generate_download(content, voice_id, optimize_latency, model_id, voice_settings)
        if not isinstance(audio, bytes):
            return audio

        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "wb") as f:
            f.write(audio)
        logger.info("Saved speech audio -> %s", output_path)
        return output_path

    def _build_request(
        self,
        content: str,
        voice_id: Optional[str],
        optimize_latency: Optional[bool],
        model_id: Optional[str],
        voice_settings: Optional[Mapping[str, Any]],
    ) -> Union[GenerationRequest, ErrorResult]:
        if not content:
            return validation_error(MISSING_TEXT_MESSAGE)

        request = GenerationRequest(
            text=content,
            voice_id=voice_id or self.voice_id,
            model_id=model_id or self.model_id,
            optimize_latency=optimize_latency,
            voice_settings=dict(voice_settings or {}),
        )

        invalid = request.invalid_settings()
        if invalid:
            logger.debug("Unknown voice settings: %s", ", ".join(invalid))
            return validation_error(INVALID_VOICE_SETTINGS_MESSAGE)

        try:
            json.dumps(request.to_payload())
        except (TypeError, ValueError) as exc:
            logger.debug("Voice settings are not JSON serializable: %s", exc)
            return validation_error(UNSERIALIZABLE_VOICE_SETTINGS_MESSAGE)
        return request

    def _send(self, request: GenerationRequest, stream: bool = False) -> Union[TransportResponse, ErrorResult]:
        path = f"text-to-speech/{request.voice_id}"
        if stream:
            path += "/stream"
        try:
            return self.transport.post(path, json=request.to_payload())
        except TransportError as exc:
            return handle_exception(exc)
