"""Dataclass for a single text-to-speech request."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .config import ALLOWED_VOICE_SETTINGS, DEFAULT_LATENCY_OPTIMIZATION, DEFAULT_MODEL_ID, DEFAULT_VOICE_ID


@dataclass
class GenerationRequest:
    text: str
    voice_id: str = DEFAULT_VOICE_ID
    model_id: Optional[str] = DEFAULT_MODEL_ID
    optimize_latency: Optional[bool] = DEFAULT_LATENCY_OPTIMIZATION
    voice_settings: Dict[str, Any] = field(default_factory=dict)

    def invalid_settings(self) -> List[str]:
        return sorted(k for k in self.voice_settings if k not in ALLOWED_VOICE_SETTINGS)

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "text": self.text,
            "model_id": self.model_id,
        }
        if self.voice_settings:
            payload["voice_settings"] = dict(self.voice_settings)
        return payload
