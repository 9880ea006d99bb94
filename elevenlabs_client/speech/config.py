"""
Constants for text-to-speech requests

Premade voices, model identifiers and the voice settings the API accepts.
"""

from typing import Dict, FrozenSet


# Premade voices available on every account
PREMADE_VOICES: Dict[str, str] = {
    "rachel": "21m00Tcm4TlvDq8ikWAM",
    "domi": "AZnzlk1XvdvUeBnXmlld",
    "bella": "EXAVITQu4vr4xnxyUmpQ",
    "antoni": "ErXwobaYiR6klkd2ZcnD",
    "elli": "MF3mGyEYCl7XYWbV9V6O",
    "josh": "TxGEqnHWrfWFTfGW9XJl",
    "arnold": "VR6AewLTigWG4xSOukaG",
    "adam": "pNInz6obpgDQGcFmaJgB",
    "sam": "yoZ06aMxZJJ28mfd3POQ",
}

DEFAULT_VOICE_ID = PREMADE_VOICES["rachel"]

MODELS = (
    "eleven_monolingual_v1",
    "eleven_multilingual_v1",
    "eleven_multilingual_v2",
    "eleven_turbo_v2",
)

DEFAULT_MODEL_ID: str = "eleven_monolingual_v1"


# "similarity_boost" is "Clarity + Similarity Enhancement" in the web app,
# "stability" is the "Stability" slider
ALLOWED_VOICE_SETTINGS: FrozenSet[str] = frozenset({
    "stability",
    "similarity_boost",
    "style",
    "use_speaker_boost",
})


# Latency hint, accepted by the generation calls but not sent
DEFAULT_LATENCY_OPTIMIZATION = False
