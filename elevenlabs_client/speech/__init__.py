"""
Speech generation.

Exposes the text-to-speech module and its request constants.
"""

from .config import (
    ALLOWED_VOICE_SETTINGS,
    DEFAULT_LATENCY_OPTIMIZATION,
    DEFAULT_MODEL_ID,
    DEFAULT_VOICE_ID,
    MODELS,
    PREMADE_VOICES,
)
from .dto import GenerationRequest
from .text_to_speech import TextToSpeech

__all__ = [
    "ALLOWED_VOICE_SETTINGS",
    "DEFAULT_LATENCY_OPTIMIZATION",
    "DEFAULT_MODEL_ID",
    "DEFAULT_VOICE_ID",
    "MODELS",
    "PREMADE_VOICES",
    "GenerationRequest",
    "TextToSpeech",
]
