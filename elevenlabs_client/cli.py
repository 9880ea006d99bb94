"""
Command line access to the client.

    elevenlabs-client voices
    elevenlabs-client voice 21m00Tcm4TlvDq8ikWAM
    elevenlabs-client settings [VOICE_ID]
    elevenlabs-client speak "Hello there" -o hello.mp3

Reads ELEVENLABS_API_KEY (and the other ELEVENLABS_* variables) from the
environment.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional
import argparse
import json
import logging
import sys
import uuid

from elevenlabs_client.client import ElevenLabs, get_client
from elevenlabs_client.responses import ErrorResult, NoResult


def safe_filename(prefix: str = "speech", suffix: str = ".mp3") -> str:
    return f"{prefix}_{uuid.uuid4().hex}{suffix}"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="elevenlabs-client",
        description="ElevenLabs text-to-speech client",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("voices", help="List available voices")

    voice = sub.add_parser("voice", help="Show metadata of one voice")
    voice.add_argument("voice_id", type=str)

    settings = sub.add_parser("settings", help="Show default settings, or the settings of one voice")
    settings.add_argument("voice_id", type=str, nargs="?")

    speak = sub.add_parser("speak", help="Generate speech and save it to a file")
    speak.add_argument("text", type=str)
    speak.add_argument("-o", "--output", type=str, help="Output file (default: speech_<id>.mp3)")
    speak.add_argument("--voice-id", type=str, help="Voice to use")
    speak.add_argument("--model-id", type=str, help="Model to use")
    speak.add_argument("--stability", type=float, help="Voice stability (0-1)")
    speak.add_argument("--similarity-boost", type=float, help="Clarity + similarity enhancement (0-1)")

    return parser


def _fail(result) -> int:
    if isinstance(result, NoResult):
        print(f"No result (HTTP {result.status_code})", file=sys.stderr)
    else:
        print(f"Error {result.status_code}: {result.message or 'request failed'}", file=sys.stderr)
    return 1


def _speak(client: ElevenLabs, args: argparse.Namespace) -> int:
    voice_settings = {}
    if args.stability is not None:
        voice_settings["stability"] = args.stability
    if args.similarity_boost is not None:
        voice_settings["similarity_boost"] = args.similarity_boost

    output = Path(args.output) if args.output else Path.cwd() / safe_filename()
    result = client.text_to_speech.generate_to_file(
        args.text,
        output,
        voice_id=args.voice_id,
        model_id=args.model_id,
        voice_settings=voice_settings,
    )
    if not isinstance(result, Path):
        return _fail(result)
    print(result)
    return 0


def main(argv: Optional[List[str]] = None, client: Optional[ElevenLabs] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if client is None:
        try:
            client = get_client()
        except RuntimeError as exc:
            print(str(exc), file=sys.stderr)
            return 1

    if args.command == "speak":
        return _speak(client, args)

    if args.command == "voices":
        result = client.voices.get_all()
        if isinstance(result, ErrorResult):
            return _fail(result)
        for voice in result:
            print(f"{voice.get('voice_id', ''):<24} {voice.get('name', '')}")
        return 0

    if args.command == "voice":
        result = client.voices.get_voice(args.voice_id)
    elif args.voice_id:
        result = client.voices.voice_settings(args.voice_id)
    else:
        result = client.voices.default_settings()

    if isinstance(result, ErrorResult):
        return _fail(result)
    print(json.dumps(result, indent=2, ensure_ascii=False))
    return 0
