"""
HTTP transport shared by the feature modules.

A thin wrapper over ``requests.Session`` bound to the API base URL and the
``xi-api-key`` header. Failed calls raise :class:`TransportError`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, Mapping, Optional
import json
import logging

import requests

if TYPE_CHECKING:
    from elevenlabs_client.config import ElevenLabsConfig


logger = logging.getLogger("elevenlabs.transport")


class TransportError(Exception):
    """Raised when a request fails or the service answers with an error status.

    ``status_code`` is 0 when no response was received at all.
    """

    def __init__(self, status_code: int, body: Optional[bytes] = None, message: str = ""):
        super().__init__(message or f"HTTP request failed with status {status_code}")
        self.status_code = status_code
        self.body = body


class ResponseDecodeError(TransportError):
    """Raised when a response body that should be JSON is not."""


@dataclass
class TransportResponse:
    status_code: int
    content: bytes = b""
    headers: Dict[str, str] = field(default_factory=dict)

    @property
    def text(self) -> str:
        return self.content.decode("utf-8", errors="replace")

    def json(self) -> Any:
        try:
            return json.loads(self.content)
        except ValueError as exc:
            raise ResponseDecodeError(
                self.status_code,
                self.content,
                f"Response body is not valid JSON: {exc}",
            ) from exc


class HttpTransport:
    """
    Sends requests for one API key.

    The credential headers go out with every request; an injected session is
    used as-is and its own headers are left untouched.
    """

    def __init__(self, config: ElevenLabsConfig, session: Optional[requests.Session] = None):
        self.config = config
        self.session = session or requests.Session()
        self.headers = {
            "accept": "*/*",
            "xi-api-key": config.api_key,
            "Content-Type": "application/json",
        }

    def url(self, path: str) -> str:
        return f"{self.config.base_url}/{path.lstrip('/')}"

    def get(self, path: str) -> TransportResponse:
        return self._request("GET", path)

    def post(self, path: str, json: Optional[Mapping[str, Any]] = None) -> TransportResponse:
        return self._request("POST", path, json=json)

    def _request(self, method: str, path: str, json: Optional[Mapping[str, Any]] = None) -> TransportResponse:
        url = self.url(path)
        logger.debug("%s %s", method, url)
        try:
            resp = self.session.request(
                method, url, json=json, headers=self.headers, timeout=self.config.timeout
            )
        except requests.RequestException as exc:
            logger.debug("ElevenLabs request %s %s failed: %s", method, url, exc)
            raise TransportError(0, None, str(exc)) from exc
        except (TypeError, ValueError) as exc:
            # body could not be encoded
            logger.debug("ElevenLabs request %s %s not sent: %s", method, url, exc)
            raise TransportError(0, None, str(exc)) from exc

        try:
            resp.raise_for_status()
        except requests.HTTPError as exc:
            logger.debug("ElevenLabs %s %s returned %s: %s", method, path, resp.status_code, resp.text)
            raise TransportError(resp.status_code, resp.content, str(exc)) from exc

        return TransportResponse(
            status_code=resp.status_code,
            content=resp.content,
            headers=dict(resp.headers),
        )

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "HttpTransport":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
