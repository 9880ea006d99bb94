"""Voice metadata lookups."""

from .voice import Voice, VoiceDescriptor

__all__ = [
    "Voice",
    "VoiceDescriptor",
]
