"""
Track - values placed at points in time.

Unlike a Score, a Track does not give its values a length; values that
have a duration of their own (notes, voices) bring it with them when the
track is turned into a score.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from chuk_music_time.core.event import Event, Placed
from chuk_music_time.core.score import Score
from chuk_music_time.core.transform import duration, has_duration
from chuk_music_time.core.types import Duration, Span, Time

A = TypeVar("A")
B = TypeVar("B")


@dataclass(frozen=True)
class Track(Generic[A]):
    """A time-ordered collection of placed values."""

    placed: tuple[Placed[A], ...] = ()

    def __post_init__(self) -> None:
        ordered = sorted(self.placed, key=lambda p: p.time)
        object.__setattr__(self, "placed", tuple(ordered))

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[Any, A]]) -> Track[A]:
        """Build a track from (time, value) pairs."""
        return cls(tuple(Placed(t, value) for t, value in pairs))

    def __len__(self) -> int:
        return len(self.placed)

    def __iter__(self) -> Iterator[Placed[A]]:
        return iter(self.placed)

    @property
    def times(self) -> list[Time]:
        return [p.time for p in self.placed]

    @property
    def values(self) -> list[A]:
        return [p.value for p in self.placed]

    def map(self, f: Callable[[A], B]) -> Track[B]:
        return Track(tuple(p.map(f) for p in self.placed))

    def transform(self, span: Span) -> Track[A]:
        return Track(tuple(p.transform(span) for p in self.placed))

    def to_score(self) -> Score[A]:
        """
        One event per placed value, lasting the value's own duration.

        Values without a duration become degenerate events.
        """
        events = []
        for p in self.placed:
            d = duration(p.value) if has_duration(p.value) else Duration(0)
            events.append(Event(Span(p.time, d), p.value))
        return Score(tuple(events))
