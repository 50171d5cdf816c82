"""
JSON interchange for time values, voices and scores.

json_codec holds the wire encoding of individual values; documents wraps
voices and scores in versioned, validated JSON documents.
"""

from chuk_music_time.codec.documents import (
    EventEntry,
    NoteEntry,
    ScoreDocument,
    SpanEntry,
    VoiceDocument,
    from_json,
    load_document,
    to_document,
    to_json,
)
from chuk_music_time.codec.json_codec import (
    decode_duration,
    decode_event,
    decode_note,
    decode_rational,
    decode_score,
    decode_span,
    decode_time,
    decode_voice,
    encode,
    encode_rational,
    keep_value,
)

__all__ = [
    # Wire encoding
    "encode",
    "encode_rational",
    "decode_rational",
    "decode_duration",
    "decode_time",
    "decode_span",
    "decode_note",
    "decode_event",
    "decode_voice",
    "decode_score",
    "keep_value",
    # Documents
    "SpanEntry",
    "NoteEntry",
    "EventEntry",
    "VoiceDocument",
    "ScoreDocument",
    "to_document",
    "load_document",
    "to_json",
    "from_json",
]
