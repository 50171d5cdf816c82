"""
Articulation - accentuation and separation of notes.

An Articulation is a pair of exact numbers:
- accentuation: 0 is normal, 1 accent, 2 marcato
- separation: -2 legatissimo, -1 legato, 0 separated, 1/2 portato,
  1 staccato, 2 staccatissimo

Accents are placed per phrase: a phrase is a maximal run of sounding
notes (rests end a phrase). In a Score, phrases are followed per part and
a gap between two events also ends a phrase.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, replace
from fractions import Fraction
from typing import Any, TypeVar

from chuk_music_time.attributes.facets import facets, update_facet
from chuk_music_time.attributes.part import parts
from chuk_music_time.attributes.tagged import Facet
from chuk_music_time.constants import (
    ACCENT,
    LEGATISSIMO,
    LEGATO,
    MARCATO,
    PORTATO,
    SEPARATED,
    STACCATISSIMO,
    STACCATO,
)
from chuk_music_time.core.rational import to_rational
from chuk_music_time.core.score import Score
from chuk_music_time.core.voice import Voice

A = TypeVar("A")


@dataclass(frozen=True)
class Articulation:
    """Accentuation and separation; combines component-wise by addition."""

    accentuation: Fraction = Fraction(0)
    separation: Fraction = Fraction(0)

    def __post_init__(self) -> None:
        object.__setattr__(self, "accentuation", to_rational(self.accentuation))
        object.__setattr__(self, "separation", to_rational(self.separation))

    def __add__(self, other: object) -> Articulation:
        if not isinstance(other, Articulation):
            return NotImplemented
        return Articulation(
            self.accentuation + other.accentuation,
            self.separation + other.separation,
        )

    def with_accentuation(self, value: object) -> Articulation:
        return replace(self, accentuation=to_rational(value))

    def with_separation(self, value: object) -> Articulation:
        return replace(self, separation=to_rational(value))


ARTICULATION = Facet("articulation", combine=lambda a, b: a + b)


def articulations(x: Any) -> list[Articulation]:
    return facets(ARTICULATION, x)


def _update(f: Callable[[Articulation], Articulation], x: A) -> A:
    return update_facet(ARTICULATION, f, Articulation(), x)  # type: ignore[no-any-return]


def _set_accentuation(value: object) -> Callable[[Articulation], Articulation]:
    return lambda a: a.with_accentuation(value)


def _set_separation(value: object) -> Callable[[Articulation], Articulation]:
    return lambda a: a.with_separation(value)


# Phrases


def _voice_phrases(voice: Voice[Any]) -> list[list[int]]:
    """Note indices of each phrase; rests (None) separate phrases."""
    result: list[list[int]] = []
    current: list[int] = []
    for i, value in enumerate(voice.values):
        if value is None:
            if current:
                result.append(current)
            current = []
        else:
            current.append(i)
    if current:
        result.append(current)
    return result


def _score_phrases(score: Score[Any]) -> list[list[int]]:
    """Event indices of each phrase, followed separately in every part."""
    by_part: dict[Any, list[int]] = {}
    for i, event in enumerate(score.events):
        if event.value is None:
            continue
        key = tuple(parts(event.value))
        by_part.setdefault(key, []).append(i)

    result: list[list[int]] = []
    for indices in by_part.values():
        ordered = sorted(indices, key=lambda i: (score.events[i].onset, score.events[i].offset))
        current: list[int] = []
        for i in ordered:
            if current and score.events[current[-1]].offset != score.events[i].onset:
                result.append(current)
                current = []
            current.append(i)
        if current:
            result.append(current)
    return result


def _on_phrase_ends(f: Callable[[Articulation], Articulation], x: A, last: bool) -> A:
    if isinstance(x, Voice):
        chosen = {phrase[-1] if last else phrase[0] for phrase in _voice_phrases(x)}
        notes = tuple(_update(f, n) if i in chosen else n for i, n in enumerate(x.notes))
        return Voice(notes)  # type: ignore[return-value]
    if isinstance(x, Score):
        chosen = {phrase[-1] if last else phrase[0] for phrase in _score_phrases(x)}
        events = tuple(_update(f, e) if i in chosen else e for i, e in enumerate(x.events))
        return Score(events)  # type: ignore[return-value]
    if isinstance(x, list):
        return [_on_phrase_ends(f, item, last) for item in x]  # type: ignore[return-value]
    raise TypeError(f"{type(x).__name__} has no phrases")


def accent(x: A) -> A:
    """Accent the first note of every phrase."""
    return _on_phrase_ends(_set_accentuation(ACCENT), x, last=False)


def marcato(x: A) -> A:
    """Marcato on the first note of every phrase."""
    return _on_phrase_ends(_set_accentuation(MARCATO), x, last=False)


def accent_last(x: A) -> A:
    """Accent the last note of every phrase."""
    return _on_phrase_ends(_set_accentuation(ACCENT), x, last=True)


def marcato_last(x: A) -> A:
    """Marcato on the last note of every phrase."""
    return _on_phrase_ends(_set_accentuation(MARCATO), x, last=True)


def accent_all(x: A) -> A:
    return _update(_set_accentuation(ACCENT), x)


def marcato_all(x: A) -> A:
    return _update(_set_accentuation(MARCATO), x)


# Separation


def legatissimo(x: A) -> A:
    return _update(_set_separation(LEGATISSIMO), x)


def legato(x: A) -> A:
    return _update(_set_separation(LEGATO), x)


def separated(x: A) -> A:
    return _update(_set_separation(SEPARATED), x)


def portato(x: A) -> A:
    return _update(_set_separation(PORTATO), x)


def staccato(x: A) -> A:
    return _update(_set_separation(STACCATO), x)


def staccatissimo(x: A) -> A:
    return _update(_set_separation(STACCATISSIMO), x)
