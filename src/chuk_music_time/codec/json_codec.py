"""
JSON encoding of time values.

Wire format:
- Duration, Time: [numerator, denominator]
- Span: {"onset": <rational>, "offset": <rational>}
- Note: {"duration": <rational>, "value": <value>}
- Event: {"span": <span>, "value": <value>}
- Voice: [<note>, ...]
- Score: [<event>, ...]

Encoding produces plain JSON-compatible structures (lists, dicts, ints,
strings); use json.dumps on the result. Decoding is exact: rationals are
rebuilt as Fractions, so decode(encode(x)) == x with no rounding.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from fractions import Fraction
from typing import Any

from chuk_music_time.constants import ErrorMessages
from chuk_music_time.core.event import Event
from chuk_music_time.core.note import Note
from chuk_music_time.core.score import Score
from chuk_music_time.core.types import Duration, Span, Time
from chuk_music_time.core.voice import Voice
from chuk_music_time.errors import CodecError

logger = logging.getLogger(__name__)

ValueDecoder = Callable[[Any], Any]


def keep_value(value: Any) -> Any:
    """Default value decoder: the JSON value as is."""
    return value


# Encoding


def encode_rational(q: Fraction) -> list[int]:
    return [q.numerator, q.denominator]


def encode(x: Any) -> Any:
    """
    Encode a time value (or any structure containing them) as JSON data.

    Values that are already JSON primitives pass through unchanged.

    Raises:
        CodecError: For values with no JSON representation
    """
    if isinstance(x, (Duration, Time)):
        return encode_rational(x.value)
    if isinstance(x, Fraction):
        return encode_rational(x)
    if isinstance(x, Span):
        return {"onset": encode(x.onset), "offset": encode(x.offset)}
    if isinstance(x, Note):
        return {"duration": encode(x.duration), "value": encode(x.value)}
    if isinstance(x, Event):
        return {"span": encode(x.span), "value": encode(x.value)}
    if isinstance(x, Voice):
        return [encode(n) for n in x.notes]
    if isinstance(x, Score):
        return [encode(e) for e in x.events]
    if x is None or isinstance(x, (bool, int, float, str)):
        return x
    if isinstance(x, (list, tuple)):
        return [encode(item) for item in x]
    if isinstance(x, dict):
        return {str(key): encode(value) for key, value in x.items()}
    raise CodecError(f"Cannot encode {type(x).__name__} as JSON")


# Decoding


def decode_rational(payload: Any) -> Fraction:
    """
    Decode a [numerator, denominator] pair.

    Raises:
        CodecError: If the payload is not a pair of integers or the
            denominator is zero
    """
    if (
        not isinstance(payload, (list, tuple))
        or len(payload) != 2
        or not all(isinstance(n, int) and not isinstance(n, bool) for n in payload)
    ):
        raise CodecError(ErrorMessages.INVALID_RATIONAL_PAYLOAD.format(payload=payload))
    numerator, denominator = payload
    if denominator == 0:
        raise CodecError(ErrorMessages.ZERO_DENOMINATOR.format(payload=payload))
    return Fraction(numerator, denominator)


def decode_duration(payload: Any) -> Duration:
    return Duration(decode_rational(payload))


def decode_time(payload: Any) -> Time:
    return Time(decode_rational(payload))


def _require(payload: Any, keys: tuple[str, ...], message: str) -> dict[str, Any]:
    if not isinstance(payload, dict) or not all(key in payload for key in keys):
        raise CodecError(message.format(payload=payload))
    return payload


def decode_span(payload: Any) -> Span:
    data = _require(payload, ("onset", "offset"), ErrorMessages.INVALID_SPAN_PAYLOAD)
    return Span.from_onset_offset(decode_time(data["onset"]), decode_time(data["offset"]))


def decode_note(payload: Any, value_decoder: ValueDecoder = keep_value) -> Note[Any]:
    data = _require(payload, ("duration", "value"), ErrorMessages.INVALID_NOTE_PAYLOAD)
    return Note(decode_duration(data["duration"]), value_decoder(data["value"]))


def decode_event(payload: Any, value_decoder: ValueDecoder = keep_value) -> Event[Any]:
    data = _require(payload, ("span", "value"), ErrorMessages.INVALID_EVENT_PAYLOAD)
    return Event(decode_span(data["span"]), value_decoder(data["value"]))


def decode_voice(payload: Any, value_decoder: ValueDecoder = keep_value) -> Voice[Any]:
    if not isinstance(payload, list):
        raise CodecError(f"Expected a list of notes, got {payload!r}.")
    logger.debug("Decoding voice of %d notes", len(payload))
    return Voice(tuple(decode_note(item, value_decoder) for item in payload))


def decode_score(payload: Any, value_decoder: ValueDecoder = keep_value) -> Score[Any]:
    if not isinstance(payload, list):
        raise CodecError(f"Expected a list of events, got {payload!r}.")
    logger.debug("Decoding score of %d events", len(payload))
    return Score(tuple(decode_event(item, value_decoder) for item in payload))
