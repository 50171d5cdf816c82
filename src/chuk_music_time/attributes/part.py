"""
Parts - which instrument or voice plays a value.

A part is any sortable tag (a string such as 'Violin I' works). Parts are
assigned with set_part and read back with parts / all_parts; scores can
be split per part with extract_parts.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, TypeVar

from chuk_music_time.attributes.facets import facets, map_facets, set_facet
from chuk_music_time.attributes.tagged import Facet
from chuk_music_time.core.note import Note
from chuk_music_time.core.score import Score
from chuk_music_time.core.voice import Voice

PART = Facet("part")

A = TypeVar("A")


def set_part(part: Any, x: A) -> A:
    """Assign a part to every value in ``x``."""
    return set_facet(PART, part, x)  # type: ignore[no-any-return]


def parts(x: Any) -> list[Any]:
    """Parts of every value in ``x``, in order (with repeats)."""
    return facets(PART, x)


def all_parts(x: Any) -> list[Any]:
    """The distinct parts in ``x``, sorted."""
    return sorted(set(parts(x)))


def replace_parts(mapping: Mapping[Any, Any], x: A) -> A:
    """Rename parts; parts missing from ``mapping`` are kept."""
    return map_facets(PART, lambda p: mapping.get(p, p), x)  # type: ignore[no-any-return]


def extract_part(part: Any, score: Score[A]) -> Score[A]:
    """The events of ``score`` that belong to ``part``."""
    return Score(tuple(e for e in score.events if part in parts(e.value)))


def extract_parts(score: Score[A]) -> list[tuple[Any, Score[A]]]:
    """One (part, score) pair per distinct part, in part order."""
    return [(p, extract_part(p, score)) for p in all_parts(score)]


def klangfarben(part_sequence: Iterable[Any], voice: Voice[A]) -> Voice[A]:
    """
    Distribute the notes of a voice over a sequence of parts.

    Note i gets part i; pass an itertools.cycle for a repeating
    orchestration. Notes beyond the end of the sequence are left as they
    are.
    """
    notes: list[Note[A]] = []
    part_iter = iter(part_sequence)
    for n in voice.notes:
        part = next(part_iter, _MISSING)
        notes.append(n if part is _MISSING else set_part(part, n))
    return Voice(tuple(notes))


_MISSING = object()
