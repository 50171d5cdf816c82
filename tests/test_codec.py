"""
Tests for the JSON wire format and interchange documents.
"""

import json
from fractions import Fraction

import pytest

from chuk_music_time.codec import (
    ScoreDocument,
    VoiceDocument,
    decode_duration,
    decode_event,
    decode_note,
    decode_rational,
    decode_score,
    decode_span,
    decode_time,
    decode_voice,
    encode,
    from_json,
    load_document,
    to_document,
    to_json,
)
from chuk_music_time.constants import SCHEMA_VERSION
from chuk_music_time.core import Duration, Event, Note, Score, Span, Time, Voice
from chuk_music_time.errors import CodecError


class TestEncode:
    """Tests for the wire encoding of individual values."""

    def test_rationals(self) -> None:
        assert encode(Duration(Fraction(3, 4))) == [3, 4]
        assert encode(Time(-2)) == [-2, 1]
        assert encode(Fraction(6, 8)) == [3, 4]

    def test_span(self) -> None:
        span = Span.from_onset_offset(1, Fraction(5, 2))
        assert encode(span) == {"onset": [1, 1], "offset": [5, 2]}

    def test_note_and_event(self) -> None:
        assert encode(Note(Duration(Fraction(1, 4)), 60)) == {"duration": [1, 4], "value": 60}
        event = Event(Span.from_onset_offset(0, 1), "C4")
        assert encode(event) == {
            "span": {"onset": [0, 1], "offset": [1, 1]},
            "value": "C4",
        }

    def test_containers(self, melody: Voice[int]) -> None:
        encoded = encode(melody)
        assert len(encoded) == 4
        assert encoded[3] == {"duration": [1, 1], "value": 65}
        assert json.loads(json.dumps(encoded)) == encoded

    def test_nested_time_values(self) -> None:
        """Time values inside note values are encoded too."""
        assert encode(Note(Duration(1), Duration(2))) == {"duration": [1, 1], "value": [2, 1]}
        assert encode({"a": (Time(1), None)}) == {"a": [[1, 1], None]}

    def test_unencodable(self) -> None:
        with pytest.raises(CodecError):
            encode(object())


class TestDecode:
    """Tests for decoding the wire format."""

    def test_rational(self) -> None:
        assert decode_rational([6, 8]) == Fraction(3, 4)
        assert decode_duration([1, 4]) == Duration(Fraction(1, 4))
        assert decode_time([-3, 2]) == Time(Fraction(-3, 2))

    @pytest.mark.parametrize(
        "payload",
        [[1], [1, 2, 3], [1.5, 2], [True, 1], "1/2", {"n": 1, "d": 2}, None],
    )
    def test_invalid_rational(self, payload: object) -> None:
        with pytest.raises(CodecError):
            decode_rational(payload)

    def test_zero_denominator(self) -> None:
        with pytest.raises(CodecError, match="Denominator"):
            decode_rational([1, 0])

    def test_round_trips(self) -> None:
        """decode(encode(x)) == x for the exact time types."""
        d = Duration(Fraction(7, 3))
        t = Time(Fraction(-5, 8))
        s = Span(Time(1), Duration(Fraction(-1, 3)))
        n = Note(Duration(Fraction(1, 4)), 60)
        e = Event(Span.from_onset_offset(0, 1), "x")
        assert decode_duration(encode(d)) == d
        assert decode_time(encode(t)) == t
        assert decode_span(encode(s)) == s
        assert decode_note(encode(n)) == n
        assert decode_event(encode(e)) == e

    def test_containers(self, melody: Voice[int], chord_score: Score[int]) -> None:
        assert decode_voice(encode(melody)) == melody
        assert decode_score(encode(chord_score)) == chord_score

    def test_value_decoder(self) -> None:
        """The value decoder rebuilds domain values from their JSON form."""
        payload = encode(Note(Duration(1), Duration(2)))
        assert decode_note(payload, decode_duration) == Note(Duration(1), Duration(2))

    def test_missing_keys(self) -> None:
        with pytest.raises(CodecError):
            decode_span({"onset": [0, 1]})
        with pytest.raises(CodecError):
            decode_note({"value": 60})
        with pytest.raises(CodecError):
            decode_event([0, 1])

    def test_containers_must_be_lists(self) -> None:
        with pytest.raises(CodecError):
            decode_voice({"notes": []})
        with pytest.raises(CodecError):
            decode_score("events")


class TestDocuments:
    """Tests for versioned voice and score documents."""

    def test_voice_document(self, melody: Voice[int]) -> None:
        document = to_document(melody)
        assert isinstance(document, VoiceDocument)
        assert document.schema_version == SCHEMA_VERSION
        assert document.to_voice() == melody

    def test_score_document(self, chord_score: Score[int]) -> None:
        document = to_document(chord_score)
        assert isinstance(document, ScoreDocument)
        assert document.to_score() == chord_score

    def test_json_layout(self, melody: Voice[int]) -> None:
        """The schema field is written under its short name."""
        data = json.loads(to_json(melody))
        assert data["schema"] == SCHEMA_VERSION
        assert data["kind"] == "voice"
        assert data["notes"][0] == {"duration": [1, 4], "value": 60}

    def test_compact_json(self, melody: Voice[int]) -> None:
        assert "\n" not in to_json(melody, indent=None)

    def test_from_json(self, melody: Voice[int], chord_score: Score[int]) -> None:
        assert from_json(to_json(melody)) == melody
        assert from_json(to_json(chord_score)) == chord_score

    def test_custom_schema(self, melody: Voice[int]) -> None:
        text = to_json(melody, schema="music-time/v2")
        assert from_json(text, schema="music-time/v2") == melody
        with pytest.raises(CodecError, match="schema"):
            from_json(text)

    def test_not_to_document(self) -> None:
        with pytest.raises(CodecError):
            to_document([1, 2])

    def test_invalid_json(self) -> None:
        with pytest.raises(CodecError):
            from_json("{not json")

    def test_not_an_object(self) -> None:
        with pytest.raises(CodecError):
            load_document([1, 2])

    def test_kind_mismatch(self, chord_score: Score[int]) -> None:
        data = json.loads(to_json(chord_score))
        with pytest.raises(CodecError, match="voice"):
            load_document(data, expected_kind="voice")

    def test_unknown_kind(self) -> None:
        with pytest.raises(CodecError):
            load_document({"schema": SCHEMA_VERSION, "kind": "track"})

    def test_invalid_entries(self) -> None:
        data = {
            "schema": SCHEMA_VERSION,
            "kind": "voice",
            "notes": [{"duration": [1, "4"], "value": 60}],
        }
        with pytest.raises(CodecError):
            load_document(data)

    @pytest.mark.parametrize(
        "kind, entries, entry",
        [
            ("voice", "notes", {"duration": [1, 1]}),
            ("score", "events", {"span": {"onset": [0, 1], "offset": [1, 1]}}),
        ],
    )
    def test_entries_require_value(self, kind: str, entries: str, entry: dict) -> None:
        """An entry without a value is rejected, as by the wire decoders."""
        data = {"schema": SCHEMA_VERSION, "kind": kind, entries: [entry]}
        with pytest.raises(CodecError):
            load_document(data)

    def test_rest_value_is_explicit(self) -> None:
        data = {
            "schema": SCHEMA_VERSION,
            "kind": "voice",
            "notes": [{"duration": [1, 1], "value": None}],
        }
        assert load_document(data).to_voice() == Voice.from_pairs([(1, None)])

    def test_unhashable_kind(self) -> None:
        with pytest.raises(CodecError):
            load_document({"schema": SCHEMA_VERSION, "kind": ["voice"]})

    def test_unexpected_fields(self) -> None:
        data = {"schema": SCHEMA_VERSION, "kind": "voice", "notes": [], "tempo": 120}
        with pytest.raises(CodecError):
            load_document(data)

    def test_empty_voice(self) -> None:
        assert from_json(to_json(Voice.empty())) == Voice.empty()
