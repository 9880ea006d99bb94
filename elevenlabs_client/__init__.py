"""
ElevenLabs Client

Synchronous wrapper over the ElevenLabs text-to-speech REST API. Every
operation returns a result record instead of raising.

Example:
    >>> from elevenlabs_client import ElevenLabs, ElevenLabsConfig
    >>> client = ElevenLabs(ElevenLabsConfig(api_key="..."))
    >>> client.text_to_speech.generate("Hello there")
    SuccessResult(status_code=200, message='Voice successfully generated')
    >>> audio = client.text_to_speech.generate_download("Hello there")
    >>> voices = client.voices.get_all()
"""

from .config import ElevenLabsConfig, build_config_from_env
from .responses import ErrorResult, NoResult, SuccessResult
from .transport import HttpTransport, ResponseDecodeError, TransportError, TransportResponse
from .speech import TextToSpeech
from .voices import Voice
from .client import ElevenLabs, get_client, reset_client

__all__ = [
    "ElevenLabsConfig",
    "build_config_from_env",
    "ErrorResult",
    "NoResult",
    "SuccessResult",
    "HttpTransport",
    "ResponseDecodeError",
    "TransportError",
    "TransportResponse",
    "TextToSpeech",
    "Voice",
    "ElevenLabs",
    "get_client",
    "reset_client",
]

__version__ = "0.1.0"
