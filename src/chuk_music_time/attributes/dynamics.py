"""
Dynamics - loudness levels.

Three absolute scales for the same quantity:
- Amplitude: a power ratio, combined by multiplication (identity 1)
- Decibel: 10 * log10(amplitude), combined by addition (identity 0)
- Bel: log10(amplitude), combined by addition (identity 0)

The dynamic facet stores levels in decibels; louder and softer add a
decibel offset, so that they commute with each other.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from functools import total_ordering
from typing import Any, ClassVar, TypeVar

from chuk_music_time.attributes.facets import facets, set_facet, update_facet
from chuk_music_time.attributes.tagged import Facet
from chuk_music_time.constants import ErrorMessages

A = TypeVar("A")


@total_ordering
@dataclass(frozen=True)
class Amplitude:
    """A power ratio (1 is the reference level)."""

    value: float

    def __mul__(self, other: object) -> Amplitude:
        if not isinstance(other, Amplitude):
            return NotImplemented
        return Amplitude(self.value * other.value)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Amplitude):
            return NotImplemented
        return self.value < other.value


@total_ordering
@dataclass(frozen=True)
class Decibel:
    """A level in decibels relative to amplitude 1."""

    value: float

    ZERO: ClassVar[Decibel]

    def __add__(self, other: object) -> Decibel:
        if not isinstance(other, Decibel):
            return NotImplemented
        return Decibel(self.value + other.value)

    def __neg__(self) -> Decibel:
        return Decibel(-self.value)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Decibel):
            return NotImplemented
        return self.value < other.value


@total_ordering
@dataclass(frozen=True)
class Bel:
    """A level in bels relative to amplitude 1."""

    value: float

    def __add__(self, other: object) -> Bel:
        if not isinstance(other, Bel):
            return NotImplemented
        return Bel(self.value + other.value)

    def __neg__(self) -> Bel:
        return Bel(-self.value)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Bel):
            return NotImplemented
        return self.value < other.value


Decibel.ZERO = Decibel(0.0)

Level = Amplitude | Decibel | Bel


def amplitude(level: Level) -> Amplitude:
    if isinstance(level, Amplitude):
        return level
    if isinstance(level, Decibel):
        return Amplitude(10 ** (level.value / 10))
    if isinstance(level, Bel):
        return Amplitude(10**level.value)
    raise TypeError(f"{type(level).__name__} is not a dynamic level")


def _log_amplitude(level: Level) -> float:
    a = amplitude(level).value
    if a <= 0:
        raise ValueError(ErrorMessages.NON_POSITIVE_AMPLITUDE.format(value=a))
    return math.log10(a)


def decibel(level: Level) -> Decibel:
    """
    Express a level in decibels.

    Raises:
        ValueError: If the amplitude is not positive
    """
    if isinstance(level, Decibel):
        return level
    return Decibel(_log_amplitude(level) * 10)


def bel(level: Level) -> Bel:
    """
    Express a level in bels.

    Raises:
        ValueError: If the amplitude is not positive
    """
    if isinstance(level, Bel):
        return level
    return Bel(_log_amplitude(level))


DYNAMIC = Facet("dynamic", combine=lambda a, b: a + b)


def _as_decibel(level: Level | float) -> Decibel:
    if isinstance(level, (Amplitude, Decibel, Bel)):
        return decibel(level)
    return Decibel(float(level))


def set_dynamic(level: Level | float, x: A) -> A:
    """Set the dynamic of every value; plain numbers are decibels."""
    return set_facet(DYNAMIC, _as_decibel(level), x)  # type: ignore[no-any-return]


def dynamics(x: Any) -> list[Decibel]:
    return facets(DYNAMIC, x)


def louder(level: Level | float, x: A) -> A:
    """Raise every dynamic by a decibel offset (untagged values start at 0 dB)."""
    offset = _as_decibel(level)
    return update_facet(DYNAMIC, lambda d: d + offset, Decibel.ZERO, x)  # type: ignore[no-any-return]


def softer(level: Level | float, x: A) -> A:
    """Lower every dynamic by a decibel offset."""
    return louder(-_as_decibel(level), x)
