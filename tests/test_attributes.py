"""
Tests for tagged values and the attribute facets.

Tests cover:
- Tagged arithmetic and payload forwarding (tagged.py)
- Facet traversal (facets.py)
- Part, articulation, dynamics, tremolo, staff number and pitch facets
"""

import itertools
import math
from fractions import Fraction

import pytest

from chuk_music_time.attributes import (
    ARTICULATION,
    DYNAMIC,
    PART,
    TREMOLO,
    Amplitude,
    Articulation,
    Bel,
    Decibel,
    Facet,
    Interval,
    PitchClass,
    Tagged,
    above,
    accent,
    accent_all,
    accent_last,
    all_parts,
    amplitude,
    articulations,
    bel,
    decibel,
    down,
    dynamics,
    extract_part,
    extract_parts,
    facets,
    highest,
    invert_pitches,
    klangfarben,
    leaves,
    legato,
    louder,
    lowest,
    map_facets,
    map_pitches,
    marcato,
    marcato_all,
    marcato_last,
    octaves_down,
    octaves_up,
    parts,
    pitch_range,
    pitches,
    portato,
    replace_parts,
    set_dynamic,
    set_facet,
    set_part,
    softer,
    staccatissimo,
    staccato,
    staff_number,
    staff_numbers,
    tag,
    tremolo,
    tremolos,
    up,
    update_facet,
)
from chuk_music_time.core import (
    Duration,
    Event,
    Note,
    Reactive,
    Score,
    Span,
    Time,
    Track,
    Voice,
    duration,
    split,
    transform,
)


class TestTagged:
    """Tests for the generic tagged wrapper."""

    def test_arithmetic_keeps_tag(self) -> None:
        x = Tagged(PART, "violin", 60)
        assert x + 2 == Tagged(PART, "violin", 62)
        assert 2 + x == Tagged(PART, "violin", 62)
        assert 10 - x == Tagged(PART, "violin", -50)
        assert x * 2 == Tagged(PART, "violin", 120)
        assert -x == Tagged(PART, "violin", -60)
        assert abs(Tagged(PART, "violin", -3)) == Tagged(PART, "violin", 3)

    def test_tags_combine_through_facet(self) -> None:
        """Tremolo keeps the larger tag, parts keep the first."""
        assert Tagged(TREMOLO, 1, 10) + Tagged(TREMOLO, 3, 5) == Tagged(TREMOLO, 3, 15)
        assert Tagged(PART, "a", 1) + Tagged(PART, "b", 1) == Tagged(PART, "a", 2)

    def test_different_facets_do_not_mix(self) -> None:
        with pytest.raises(TypeError):
            Tagged(PART, "a", 1) + Tagged(TREMOLO, 1, 1)

    def test_facets_compare_by_name(self) -> None:
        assert Facet("part") == PART
        assert str(PART) == "part"

    def test_duration_and_split_forward(self) -> None:
        """Time capabilities go to the payload; the tag stays on both halves."""
        x = Tagged(PART, "violin", Duration(2))
        assert duration(x) == Duration(2)
        first, second = split(Fraction(1, 2), x)
        assert first == Tagged(PART, "violin", Duration(Fraction(1, 2)))
        assert second == Tagged(PART, "violin", Duration(Fraction(3, 2)))

    def test_transform_forwards(self) -> None:
        x = Tagged(PART, "violin", Duration(2))
        assert transform(Span(Time(1), Duration(3)), x) == Tagged(PART, "violin", Duration(6))

    def test_note_split_through_tag(self) -> None:
        """The note split corrections see through tags."""
        n = Note(Duration(1), Tagged(PART, "violin", Duration(2)))
        first, second = n.split(Duration(Fraction(3, 5)))
        assert first == Note(Duration(Fraction(3, 5)), Tagged(PART, "violin", Duration(1)))
        assert second == Note(
            Duration(Fraction(2, 5)), Tagged(PART, "violin", Duration(Fraction(7, 2)))
        )


class TestFacetTraversal:
    """Tests for reading and writing tags through containers."""

    def test_containers(self) -> None:
        """Lists, pair seconds, dict values and notes are all visited."""
        x = {"a": [Note(Duration(1), 60), (Duration(1), 62)], "b": None}
        tagged = set_facet(PART, "flute", x)
        assert facets(PART, tagged) == ["flute", "flute"]
        first = tagged["a"][1]
        assert first[0] == Duration(1)
        assert first[1] == Tagged(PART, "flute", 62)
        assert tagged["b"] is None

    def test_longer_tuples_visit_all(self) -> None:
        assert facets(PART, set_facet(PART, "x", (1, 2, 3))) == ["x", "x", "x"]

    def test_set_is_idempotent(self, melody: Voice[int]) -> None:
        once = set_facet(PART, "oboe", melody)
        assert set_facet(PART, "oboe", once) == once

    def test_set_never_changes_timing(self, melody: Voice[int]) -> None:
        tagged = set_facet(PART, "oboe", melody)
        assert tagged.durations == melody.durations

    def test_tagging_commutes_with_transform(self, melody: Voice[int]) -> None:
        s = Span(Time(2), Duration(3))
        assert transform(s, set_part("oboe", melody)) == set_part("oboe", transform(s, melody))

    def test_tagging_commutes_with_split(self, melody: Voice[int]) -> None:
        t = Duration(Fraction(3, 4))
        first, second = set_part("oboe", melody).split(t)
        plain_first, plain_second = melody.split(t)
        assert first == set_part("oboe", plain_first)
        assert second == set_part("oboe", plain_second)

    def test_nested_facets(self) -> None:
        """Tags of other facets are traversed into."""
        x = Tagged(TREMOLO, 2, 60)
        tagged = set_part("cello", x)
        assert tagged == Tagged(TREMOLO, 2, Tagged(PART, "cello", 60))
        assert tremolos(tagged) == [2]
        assert parts(tagged) == ["cello"]

    def test_map_leaves_untagged_alone(self) -> None:
        x = [Tagged(PART, "a", 1), 2]
        assert map_facets(PART, str.upper, x) == [Tagged(PART, "A", 1), 2]

    def test_update_with_default(self) -> None:
        x = [Tagged(TREMOLO, 2, 1), 2]
        result = update_facet(TREMOLO, lambda n: n + 1, 0, x)
        assert tremolos(result) == [3, 1]

    def test_all_containers(self) -> None:
        track = Track.from_pairs([(0, "a")])
        reactive = Reactive.step("a", [(1, "b")])
        score = Score.of(Event(Span.from_onset_offset(0, 1), "a"))
        assert parts(set_part("p", track)) == ["p"]
        assert parts(set_part("p", reactive)) == ["p", "p"]
        assert parts(set_part("p", score)) == ["p"]

    def test_tag_wraps_whole(self, melody: Voice[int]) -> None:
        tagged = tag(PART, "piano", melody)
        assert tagged.value is melody
        assert parts(tagged) == ["piano"]

    def test_leaves(self) -> None:
        assert leaves([Tagged(PART, "a", 1), None, (Duration(1), 2)]) == [1, 2]


class TestPart:
    """Tests for parts and orchestration."""

    def test_all_parts_sorted_unique(self, chord_score: Score[int]) -> None:
        events = chord_score.events
        score = Score(
            tuple(
                Event(e.span, Tagged(PART, name, e.value))
                for e, name in zip(events, ["vla", "vln", "vla", "bass"])
            )
        )
        assert all_parts(score) == ["bass", "vla", "vln"]
        assert extract_part("vla", score).values == [
            Tagged(PART, "vla", 60),
            Tagged(PART, "vla", 67),
        ]
        assert [p for p, _ in extract_parts(score)] == ["bass", "vla", "vln"]

    def test_replace_parts(self, melody: Voice[int]) -> None:
        renamed = replace_parts({"fl": "flute"}, set_part("fl", melody))
        assert set(parts(renamed)) == {"flute"}

    def test_klangfarben(self, melody: Voice[int]) -> None:
        """Each note gets the next part; a cycle repeats the orchestration."""
        result = klangfarben(itertools.cycle(["fl", "ob"]), melody)
        assert parts(result) == ["fl", "ob", "fl", "ob"]
        assert result.durations == melody.durations

    def test_klangfarben_short_sequence(self, melody: Voice[int]) -> None:
        """Notes beyond the part sequence are unchanged."""
        result = klangfarben(["fl"], melody)
        assert parts(result) == ["fl"]
        assert result.notes[1:] == melody.notes[1:]


class TestArticulation:
    """Tests for accents and separation."""

    def test_articulation_adds(self) -> None:
        a = Articulation(1, Fraction(1, 2)) + Articulation(1, -1)
        assert a == Articulation(2, Fraction(-1, 2))
        assert ARTICULATION.combine(Articulation(1, 0), Articulation(0, 1)) == Articulation(1, 1)

    def test_accent_first_of_each_phrase(self, phrased_melody: Voice[int | None]) -> None:
        result = accent(phrased_melody)
        arts = [art.accentuation for art in articulations(result)]
        assert arts == [1, 1]
        assert result.notes[0].value == Tagged(ARTICULATION, Articulation(1, 0), 60)
        assert result.notes[3].value == Tagged(ARTICULATION, Articulation(1, 0), 67)
        assert result.notes[1].value == 62
        assert result.notes[2].value is None

    def test_accent_last(self, phrased_melody: Voice[int | None]) -> None:
        result = marcato_last(phrased_melody)
        assert result.notes[1].value == Tagged(ARTICULATION, Articulation(2, 0), 62)
        assert result.notes[4].value == Tagged(ARTICULATION, Articulation(2, 0), 65)
        assert accent_last(phrased_melody).notes[0].value == 60

    def test_marcato_on_score(self) -> None:
        """In a score, a gap between events starts a new phrase."""
        score = Score.of(
            Event(Span.from_onset_offset(0, 1), 60),
            Event(Span.from_onset_offset(1, 2), 62),
            Event(Span.from_onset_offset(3, 4), 64),
        )
        result = marcato(score)
        assert [isinstance(e.value, Tagged) for e in result.events] == [True, False, True]

    def test_no_phrases(self) -> None:
        with pytest.raises(TypeError):
            accent(60)

    def test_all(self, melody: Voice[int]) -> None:
        assert {a.accentuation for a in articulations(accent_all(melody))} == {1}
        assert {a.accentuation for a in articulations(marcato_all(melody))} == {2}

    @pytest.mark.parametrize(
        "articulate, separation",
        [(legato, -1), (portato, Fraction(1, 2)), (staccato, 1), (staccatissimo, 2)],
    )
    def test_separation(self, melody: Voice[int], articulate, separation: Fraction) -> None:
        result = articulate(melody)
        assert {a.separation for a in articulations(result)} == {separation}

    def test_accent_then_staccato(self, melody: Voice[int]) -> None:
        """Setting separation keeps an existing accent."""
        result = staccato(accent(melody))
        assert articulations(result)[0] == Articulation(1, 1)
        assert articulations(result)[1] == Articulation(0, 1)


class TestDynamics:
    """Tests for loudness levels."""

    def test_conversions(self) -> None:
        assert decibel(Amplitude(10)).value == pytest.approx(10)
        assert bel(Amplitude(100)).value == pytest.approx(2)
        assert amplitude(Decibel(20)).value == pytest.approx(100)
        assert amplitude(Bel(1)).value == pytest.approx(10)
        assert decibel(Bel(1)).value == pytest.approx(10)

    def test_non_positive_amplitude(self) -> None:
        with pytest.raises(ValueError):
            decibel(Amplitude(0))

    def test_combination(self) -> None:
        assert Amplitude(2) * Amplitude(3) == Amplitude(6)
        assert Decibel(3) + Decibel(4) == Decibel(7)
        assert Bel(1) + Bel(1) == Bel(2)
        assert Decibel(1) < Decibel(2)

    def test_set_and_read(self, melody: Voice[int]) -> None:
        result = set_dynamic(-6, melody)
        assert dynamics(result) == [Decibel(-6)] * 4

    def test_louder_softer(self, melody: Voice[int]) -> None:
        result = softer(3, louder(10, set_dynamic(Bel(1), melody)))
        assert [d.value for d in dynamics(result)] == [pytest.approx(17)] * 4

    def test_louder_on_untagged(self) -> None:
        assert dynamics(louder(Decibel(3), [60])) == [Decibel(3)]

    def test_dynamic_tags_add(self) -> None:
        total = Tagged(DYNAMIC, Decibel(1), 1) + Tagged(DYNAMIC, Decibel(2), 1)
        assert total.tag == Decibel(3)
        assert math.isclose(total.value, 2)


class TestTremoloAndStaff:
    """Tests for tremolo beams and staff numbers."""

    def test_tremolo(self, melody: Voice[int]) -> None:
        assert tremolos(tremolo(2, melody)) == [2, 2, 2, 2]

    def test_tremolo_negative(self) -> None:
        with pytest.raises(ValueError):
            tremolo(-1, 60)

    def test_staff_number(self, melody: Voice[int]) -> None:
        assert staff_numbers(staff_number(1, melody)) == [1, 1, 1, 1]
        assert staff_number(0, staff_number(0, melody)) == staff_number(0, melody)

    def test_staff_number_negative(self) -> None:
        with pytest.raises(ValueError):
            staff_number(-1, 60)


class TestPitch:
    """Tests for the pitch facet."""

    def test_pitch_class(self) -> None:
        assert PitchClass.B.transpose(1) == PitchClass.C
        assert PitchClass.C.to_midi(4) == 60
        assert PitchClass.from_midi(69) == PitchClass.A
        assert str(PitchClass.Fs) == "F#"

    def test_interval(self) -> None:
        assert Interval.OCTAVE * 2 == Interval(24)
        assert Interval.PERFECT_FIFTH + Interval(5) == Interval.OCTAVE
        assert -Interval(3) < Interval.UNISON

    def test_pitches(self, melody: Voice[int]) -> None:
        assert pitches(melody) == [60, 62, 64, 65]
        assert highest(melody) == 65
        assert lowest(melody) == 60
        assert pitch_range(melody) == (60, 65)
        assert highest(Voice.empty()) is None
        assert pitch_range([]) is None

    def test_transpose(self, melody: Voice[int]) -> None:
        assert pitches(up(Interval.PERFECT_FIFTH, melody)) == [67, 69, 71, 72]
        assert pitches(down(2, melody)) == [58, 60, 62, 63]
        assert pitches(octaves_up(1, melody)) == [72, 74, 76, 77]
        assert octaves_down(1, octaves_up(1, melody)) == melody

    def test_pitch_classes_wrap(self) -> None:
        assert up(2, [PitchClass.B]) == [PitchClass.Cs]

    def test_keeps_tags(self, melody: Voice[int]) -> None:
        tagged = set_part("vln", melody)
        result = up(12, tagged)
        assert parts(result) == ["vln"] * 4
        assert pitches(result) == [72, 74, 76, 77]

    def test_non_pitches_untouched(self) -> None:
        x = [Note(Duration(1), "rest"), Note(Duration(1), 60), Note(Duration(1), True)]
        assert pitches(x) == [60]
        assert map_pitches(lambda p: p + 1, x)[0].value == "rest"

    def test_invert(self) -> None:
        assert invert_pitches(60, [62, 57]) == [58, 63]

    def test_above(self, chord_score: Score[int]) -> None:
        doubled = above(Interval.OCTAVE, chord_score)
        assert len(doubled) == 8
        assert sorted(pitches(doubled))[-1] == 79
        assert doubled.era == chord_score.era

    def test_above_requires_layerable(self, melody: Voice[int]) -> None:
        with pytest.raises(TypeError):
            above(12, melody)
