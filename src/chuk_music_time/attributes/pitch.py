"""
Pitch - the values themselves, read as pitches.

Pitch leaves are either MIDI note numbers (int, C4 = 60) or PitchClass
members. Transposition works on both: MIDI numbers move freely, pitch
classes wrap around the octave. Any other leaf (strings, rests, nested
attributes) is left alone.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import IntEnum
from functools import total_ordering
from typing import Any, ClassVar, TypeVar

from chuk_music_time.attributes.facets import leaves, map_leaves
from chuk_music_time.core.score import Score

A = TypeVar("A")

_NAMES: list[str] = ["C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"]


class PitchClass(IntEnum):
    """The 12 chromatic pitch classes, octave independent (C# == Db == 1)."""

    C = 0
    Cs = 1
    D = 2
    Ds = 3
    E = 4
    F = 5
    Fs = 6
    G = 7
    Gs = 8
    A = 9
    As = 10
    B = 11

    def transpose(self, semitones: int) -> PitchClass:
        return PitchClass((self.value + semitones) % 12)

    def to_midi(self, octave: int = 4) -> int:
        """MIDI note number in the given octave. C4 = 60."""
        return self.value + (octave + 1) * 12

    @classmethod
    def from_midi(cls, midi_note: int) -> PitchClass:
        return cls(midi_note % 12)

    def __str__(self) -> str:
        return _NAMES[self.value]


@total_ordering
@dataclass(frozen=True)
class Interval:
    """Distance between pitches in semitones."""

    semitones: int

    UNISON: ClassVar[Interval]
    PERFECT_FIFTH: ClassVar[Interval]
    OCTAVE: ClassVar[Interval]

    def __add__(self, other: object) -> Interval:
        if not isinstance(other, Interval):
            return NotImplemented
        return Interval(self.semitones + other.semitones)

    def __sub__(self, other: object) -> Interval:
        if not isinstance(other, Interval):
            return NotImplemented
        return Interval(self.semitones - other.semitones)

    def __neg__(self) -> Interval:
        return Interval(-self.semitones)

    def __mul__(self, n: object) -> Interval:
        if not isinstance(n, int) or isinstance(n, bool):
            return NotImplemented
        return Interval(self.semitones * n)

    __rmul__ = __mul__

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return self.semitones < other.semitones


Interval.UNISON = Interval(0)
Interval.PERFECT_FIFTH = Interval(7)
Interval.OCTAVE = Interval(12)

Pitch = int | PitchClass


def is_pitch(value: object) -> bool:
    """True for MIDI numbers and pitch classes (not for bools)."""
    return isinstance(value, int) and not isinstance(value, bool)


def _semitones(interval: Interval | int) -> int:
    return interval.semitones if isinstance(interval, Interval) else interval


def _transpose(semitones: int) -> Callable[[Pitch], Pitch]:
    def shift(p: Pitch) -> Pitch:
        if isinstance(p, PitchClass):
            return p.transpose(semitones)
        return p + semitones

    return shift


def pitches(x: Any) -> list[Pitch]:
    """All pitches in ``x``, in traversal order."""
    return [leaf for leaf in leaves(x) if is_pitch(leaf)]


def map_pitches(f: Callable[[Pitch], Pitch], x: A) -> A:
    """Apply ``f`` to every pitch, keeping timing and attribute tags."""
    return map_leaves(lambda leaf: f(leaf) if is_pitch(leaf) else leaf, x)  # type: ignore[no-any-return]


def up(interval: Interval | int, x: A) -> A:
    return map_pitches(_transpose(_semitones(interval)), x)


def down(interval: Interval | int, x: A) -> A:
    return map_pitches(_transpose(-_semitones(interval)), x)


def octaves_up(n: int, x: A) -> A:
    return up(Interval.OCTAVE * n, x)


def octaves_down(n: int, x: A) -> A:
    return down(Interval.OCTAVE * n, x)


def invert_pitches(center: Pitch, x: A) -> A:
    """Reflect every pitch through ``center``."""
    c = int(center)
    return map_pitches(lambda p: _transpose(2 * (c - int(p)))(p), x)


def highest(x: Any) -> Pitch | None:
    """The highest pitch, or None if there are none."""
    return max(pitches(x), default=None)


def lowest(x: Any) -> Pitch | None:
    """The lowest pitch, or None if there are none."""
    return min(pitches(x), default=None)


def pitch_range(x: Any) -> tuple[Pitch, Pitch] | None:
    """The (lowest, highest) pitches, or None if there are none."""
    found = pitches(x)
    if not found:
        return None
    return min(found), max(found)


def _with_copy(x: A, copy: A) -> A:
    if isinstance(x, Score):
        return x.par(copy)  # type: ignore[return-value]
    if isinstance(x, list):
        return x + copy  # type: ignore[operator, no-any-return]
    raise TypeError(f"Cannot layer copies of {type(x).__name__}")


def above(interval: Interval | int, x: A) -> A:
    """``x`` together with a copy transposed up (doubling a score)."""
    return _with_copy(x, up(interval, x))


def below(interval: Interval | int, x: A) -> A:
    """``x`` together with a copy transposed down."""
    return _with_copy(x, down(interval, x))
