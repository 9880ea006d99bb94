"""Tests for voice metadata lookups."""

import pytest

from elevenlabs_client.responses import ErrorResult


RACHEL = {"voice_id": "21m00Tcm4TlvDq8ikWAM", "name": "Rachel", "category": "premade"}
DOMI = {"voice_id": "AZnzlk1XvdvUeBnXmlld", "name": "Domi", "category": "premade"}


class TestGetAll:

    @pytest.mark.parametrize("voice_list", [[], [RACHEL], [RACHEL, DOMI]])
    def test_unwraps_envelope(self, voices, transport, voice_list):
        transport.respond(200, payload={"voices": voice_list})

        assert voices.get_all() == voice_list
        assert transport.calls == [("GET", "voices", None)]

    def test_missing_envelope_is_empty_list(self, voices, transport):
        transport.respond(200, payload={"something_else": 1})

        assert voices.get_all() == []

    def test_error(self, voices, transport, invalid_api_key):
        transport.fail(401, payload=invalid_api_key)

        assert voices.get_all() == ErrorResult(401, "invalid api key")

    def test_undecodable_body(self, voices, transport):
        transport.respond(200, b"<html>oops</html>")

        assert voices.get_all() == ErrorResult(200, None)


class TestGetVoice:

    def test_returns_body_verbatim(self, voices, transport):
        transport.respond(200, payload=RACHEL)

        assert voices.get_voice("21m00Tcm4TlvDq8ikWAM") == RACHEL
        assert transport.calls[0][1] == "voices/21m00Tcm4TlvDq8ikWAM"

    def test_error(self, voices, transport, invalid_api_key):
        transport.fail(401, payload=invalid_api_key)

        assert voices.get_voice("abc") == ErrorResult(401, "invalid api key")


class TestSettings:

    def test_default_settings(self, voices, transport):
        settings = {"stability": 0.5, "similarity_boost": 0.75}
        transport.respond(200, payload=settings)

        assert voices.default_settings() == settings
        assert transport.calls[0][1] == "voices/settings/default"

    def test_default_settings_error(self, voices, transport, invalid_api_key):
        transport.fail(401, payload=invalid_api_key)

        assert voices.default_settings() == ErrorResult(401, "invalid api key")

    def test_voice_settings(self, voices, transport):
        transport.respond(200, payload={"stability": 0.1})

        assert voices.voice_settings("valid-id") == {"stability": 0.1}
        assert transport.calls == [("GET", "voices/valid-id/settings", None)]

    def test_voice_settings_requires_id(self, voices, transport):
        result = voices.voice_settings("")

        assert result == ErrorResult(400, "voice_id is missing")
        assert transport.calls == []

    def test_voice_settings_error(self, voices, transport, invalid_api_key):
        transport.fail(401, payload=invalid_api_key)

        assert voices.voice_settings("abc") == ErrorResult(401, "invalid api key")
