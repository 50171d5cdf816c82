"""
Interchange documents - versioned JSON files holding a Voice or a Score.

A document is an object with a schema version, a kind and its entries:

    {"schema": "music-time/v1", "kind": "voice", "notes": [<note>, ...]}
    {"schema": "music-time/v1", "kind": "score", "events": [<event>, ...]}

Entries use the wire format of json_codec. Documents are validated with
pydantic on the way in; any problem surfaces as a CodecError.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, StrictInt, ValidationError

from chuk_music_time.codec.json_codec import (
    ValueDecoder,
    decode_score,
    decode_voice,
    encode,
    keep_value,
)
from chuk_music_time.constants import SCHEMA_VERSION, DocumentKind, ErrorMessages
from chuk_music_time.core.score import Score
from chuk_music_time.core.voice import Voice
from chuk_music_time.errors import CodecError

logger = logging.getLogger(__name__)

RationalPayload = tuple[StrictInt, StrictInt]


class SpanEntry(BaseModel):
    """A span as onset and offset rationals."""

    onset: RationalPayload
    offset: RationalPayload

    model_config = ConfigDict(frozen=True)


class NoteEntry(BaseModel):
    """A note: duration rational and an arbitrary JSON value."""

    duration: RationalPayload
    value: Any = Field(..., description="Note value (null for a rest)")

    model_config = ConfigDict(frozen=True)


class EventEntry(BaseModel):
    """An event: span and an arbitrary JSON value."""

    span: SpanEntry
    value: Any = Field(..., description="Event value")

    model_config = ConfigDict(frozen=True)


class _Document(BaseModel):
    schema_version: str = Field(SCHEMA_VERSION, alias="schema", description="Interchange schema")

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    def to_json(self, indent: int | None = 2) -> str:
        """Serialize to a JSON string."""
        return json.dumps(self.model_dump(mode="json", by_alias=True), indent=indent)


class VoiceDocument(_Document):
    """A versioned document holding one voice."""

    kind: Literal["voice"] = "voice"
    notes: list[NoteEntry] = Field(default_factory=list)

    @classmethod
    def from_voice(cls, voice: Voice[Any], schema: str = SCHEMA_VERSION) -> VoiceDocument:
        return cls.model_validate({"schema": schema, "kind": "voice", "notes": encode(voice)})

    def to_voice(self, value_decoder: ValueDecoder = keep_value) -> Voice[Any]:
        return decode_voice([entry.model_dump(mode="json") for entry in self.notes], value_decoder)


class ScoreDocument(_Document):
    """A versioned document holding one score."""

    kind: Literal["score"] = "score"
    events: list[EventEntry] = Field(default_factory=list)

    @classmethod
    def from_score(cls, score: Score[Any], schema: str = SCHEMA_VERSION) -> ScoreDocument:
        return cls.model_validate({"schema": schema, "kind": "score", "events": encode(score)})

    def to_score(self, value_decoder: ValueDecoder = keep_value) -> Score[Any]:
        return decode_score([entry.model_dump(mode="json") for entry in self.events], value_decoder)


Document = VoiceDocument | ScoreDocument

_DOCUMENT_TYPES: dict[DocumentKind, type[VoiceDocument] | type[ScoreDocument]] = {
    "voice": VoiceDocument,
    "score": ScoreDocument,
}


def to_document(x: Voice[Any] | Score[Any], schema: str = SCHEMA_VERSION) -> Document:
    """Wrap a voice or score in a versioned document."""
    if isinstance(x, Voice):
        return VoiceDocument.from_voice(x, schema)
    if isinstance(x, Score):
        return ScoreDocument.from_score(x, schema)
    raise CodecError(f"Cannot make a document from {type(x).__name__}")


def load_document(
    data: Any, expected_kind: DocumentKind | None = None, schema: str = SCHEMA_VERSION
) -> Document:
    """
    Validate decoded JSON data as a document.

    Raises:
        CodecError: On a schema or kind mismatch, or invalid entries
    """
    if not isinstance(data, dict):
        raise CodecError(ErrorMessages.INVALID_DOCUMENT.format(error="expected a JSON object"))

    found = data.get("schema")
    if found != schema:
        raise CodecError(ErrorMessages.SCHEMA_MISMATCH.format(schema=found, expected=schema))

    kind = data.get("kind")
    if expected_kind is not None and kind != expected_kind:
        raise CodecError(ErrorMessages.KIND_MISMATCH.format(expected=expected_kind, kind=kind))
    if kind not in tuple(_DOCUMENT_TYPES):
        raise CodecError(ErrorMessages.INVALID_DOCUMENT.format(error=f"unknown kind {kind!r}"))
    document_type = _DOCUMENT_TYPES[kind]

    try:
        document = document_type.model_validate(data)
    except ValidationError as e:
        raise CodecError(ErrorMessages.INVALID_DOCUMENT.format(error=e)) from e
    logger.debug("Loaded %s document", kind)
    return document


def to_json(
    x: Voice[Any] | Score[Any], indent: int | None = 2, schema: str = SCHEMA_VERSION
) -> str:
    """Serialize a voice or score as a versioned JSON document."""
    return to_document(x, schema).to_json(indent=indent)


def from_json(
    text: str, value_decoder: ValueDecoder = keep_value, schema: str = SCHEMA_VERSION
) -> Voice[Any] | Score[Any]:
    """
    Read a voice or score from a JSON document.

    Raises:
        CodecError: If the text is not valid JSON or not a valid document
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise CodecError(ErrorMessages.INVALID_DOCUMENT.format(error=e)) from e

    document = load_document(data, schema=schema)
    if isinstance(document, VoiceDocument):
        return document.to_voice(value_decoder)
    return document.to_score(value_decoder)
