#!/usr/bin/env python3
"""
Command line entry point for inspecting and splitting interchange documents.

    chuk-music-time info melody.json
    chuk-music-time split melody.json --at 3/2
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from chuk_music_time.codec import from_json, load_document, to_document
from chuk_music_time.config import MusicTimeConfig, default_config_path, load_config
from chuk_music_time.core import Duration, Score, Voice, format_rational, to_rational
from chuk_music_time.errors import MusicTimeError

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def summarize(x: Voice[Any] | Score[Any]) -> dict[str, Any]:
    """Kind, size and extent of a voice or score."""
    if isinstance(x, Voice):
        return {
            "kind": "voice",
            "entries": len(x),
            "duration": format_rational(x.duration.value),
        }
    return {
        "kind": "score",
        "entries": len(x),
        "duration": format_rational(x.duration.value),
        "onset": format_rational(x.onset.value),
        "offset": format_rational(x.offset.value),
    }


def _info(path: Path, config: MusicTimeConfig) -> str:
    x = from_json(path.read_text(), schema=config.schema_version)
    return json.dumps(summarize(x), indent=config.json_indent)


def _split(path: Path, at: str, config: MusicTimeConfig) -> str:
    data = json.loads(path.read_text())
    document = load_document(data, expected_kind="voice", schema=config.schema_version)
    voice = document.to_voice()  # type: ignore[union-attr]

    t = Duration(to_rational(at))
    first, second = voice.split(t)
    logger.debug("Split %d notes into %d + %d", len(voice), len(first), len(second))
    halves = [
        to_document(half, config.schema_version).model_dump(mode="json", by_alias=True)
        for half in (first, second)
    ]
    return json.dumps(halves, indent=config.json_indent)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="CHUK Music Time document tool")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML config file (default: $CHUK_MUSIC_TIME_CONFIG)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    info = commands.add_parser("info", help="Summarize a voice or score document")
    info.add_argument("file", type=Path)

    split = commands.add_parser("split", help="Split a voice document in two")
    split.add_argument("file", type=Path)
    split.add_argument("--at", required=True, help="Split point as a rational, e.g. 3/2")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point; returns the process exit status."""
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config or default_config_path())
    except ValueError:
        logger.exception("Could not load config")
        return 1

    logging.getLogger().setLevel(logging.DEBUG if args.debug else config.log_level)

    try:
        if args.command == "info":
            output = _info(args.file, config)
        else:
            output = _split(args.file, args.at, config)
    except (MusicTimeError, OSError, ValueError):
        logger.exception("Command '%s' failed", args.command)
        return 1

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
