"""
Client configuration.

Credentials and endpoint settings are read from the environment when the
client is built through the factory; everything can also be passed
explicitly.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional
import os

from elevenlabs_client.speech.config import DEFAULT_MODEL_ID, DEFAULT_VOICE_ID


ENV_API_KEY = "ELEVENLABS_API_KEY"
ENV_BASE_URL = "ELEVENLABS_BASE_URL"
ENV_TIMEOUT = "ELEVENLABS_TIMEOUT"
ENV_VOICE_ID = "ELEVENLABS_VOICE_ID"
ENV_MODEL_ID = "ELEVENLABS_MODEL_ID"


@dataclass
class ElevenLabsConfig:
    api_key: str
    base_url: str = "https://api.elevenlabs.io/v1"
    timeout: float = 120.0  # seconds, per request
    voice_id: str = DEFAULT_VOICE_ID
    model_id: str = DEFAULT_MODEL_ID

    def __post_init__(self):
        self.base_url = self.base_url.rstrip("/")


def build_config_from_env(api_key: Optional[str] = None) -> ElevenLabsConfig:
    """
    Build a config from ``ELEVENLABS_*`` environment variables.

    Raises:
        RuntimeError: if no API key is given and ELEVENLABS_API_KEY is unset,
            or ELEVENLABS_TIMEOUT is not a number
    """
    api_key = api_key or os.getenv(ENV_API_KEY)
    if not api_key:
        raise RuntimeError(f"{ENV_API_KEY} environment variable is not set")

    defaults = ElevenLabsConfig(api_key=api_key)
    timeout = os.getenv(ENV_TIMEOUT)
    try:
        timeout = float(timeout) if timeout else defaults.timeout
    except ValueError as exc:
        raise RuntimeError(f"{ENV_TIMEOUT} must be a number of seconds, got {timeout!r}") from exc

    return ElevenLabsConfig(
        api_key=api_key,
        base_url=os.getenv(ENV_BASE_URL, defaults.base_url),
        timeout=timeout,
        voice_id=os.getenv(ENV_VOICE_ID, defaults.voice_id),
        model_id=os.getenv(ENV_MODEL_ID, defaults.model_id),
    )
