"""
Shared fixtures.

`FakeTransport` stands in for HttpTransport: it records every call and
answers with queued responses or errors, so no test touches the network.
"""

import json

import pytest

from elevenlabs_client.speech import TextToSpeech
from elevenlabs_client.transport import TransportError, TransportResponse
from elevenlabs_client.voices import Voice


class FakeTransport:
    def __init__(self):
        self.calls = []
        self._outcomes = []

    def respond(self, status_code=200, content=b"", payload=None):
        if payload is not None:
            content = json.dumps(payload).encode()
        self._outcomes.append(TransportResponse(status_code=status_code, content=content))
        return self

    def fail(self, status_code, payload=None, body=None):
        if payload is not None:
            body = json.dumps(payload).encode()
        self._outcomes.append(TransportError(status_code, body))
        return self

    def get(self, path):
        self.calls.append(("GET", path, None))
        return self._next()

    def post(self, path, json=None):
        self.calls.append(("POST", path, json))
        return self._next()

    def _next(self):
        outcome = self._outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


@pytest.fixture
def transport():
    return FakeTransport()


@pytest.fixture
def tts(transport):
    return TextToSpeech(transport)


@pytest.fixture
def voices(transport):
    return Voice(transport)


@pytest.fixture
def invalid_api_key():
    return {"detail": {"status": "invalid_api_key", "message": "invalid api key"}}
