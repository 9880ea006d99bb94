"""Client facade and process-wide factory.

`ElevenLabs` builds one transport and hands it to each feature module.
`get_client()` lazily creates a shared instance configured from the
environment.
"""

from __future__ import annotations

import threading
from typing import Optional
import logging

from elevenlabs_client.config import ElevenLabsConfig, build_config_from_env
from elevenlabs_client.speech import TextToSpeech
from elevenlabs_client.transport import HttpTransport
from elevenlabs_client.voices import Voice


logger = logging.getLogger("elevenlabs.client")


class ElevenLabs:
    def __init__(self, config: ElevenLabsConfig, transport: Optional[HttpTransport] = None):
        self.config = config
        self.transport = transport or HttpTransport(config)
        self.text_to_speech = TextToSpeech(self.transport, voice_id=config.voice_id, model_id=config.model_id)
        self.voices = Voice(self.transport)

    def close(self) -> None:
        self.transport.close()

    def __enter__(self) -> "ElevenLabs":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


_lock = threading.RLock()
_client: Optional[ElevenLabs] = None


def get_client() -> ElevenLabs:
    """Get the shared client, building it from ELEVENLABS_* env vars on first use.

    Raises:
        RuntimeError: if ELEVENLABS_API_KEY is not set
    """
    global _client
    with _lock:
        if _client is None:
            config = build_config_from_env()
            _client = ElevenLabs(config)
            logger.info("ElevenLabs client initialized (base_url=%s)", config.base_url)
        return _client


def reset_client() -> None:
    global _client
    with _lock:
        if _client is not None:
            _client.close()
        _client = None
