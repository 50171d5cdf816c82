"""
Event and Placed - values positioned in absolute time.

An Event carries a full Span (onset + duration), a Placed value only an
onset; its length, if any, comes from the value itself.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

from chuk_music_time.core.transform import stretching, transform
from chuk_music_time.core.types import Duration, Span, Time, as_time

A = TypeVar("A")
B = TypeVar("B")


@dataclass(frozen=True)
class Event(Generic[A]):
    """A value occupying a span of time."""

    span: Span
    value: A

    @classmethod
    def from_pair(cls, pair: tuple[Span, A]) -> Event[A]:
        span, value = pair
        return cls(span, value)

    @property
    def pair(self) -> tuple[Span, A]:
        return (self.span, self.value)

    @property
    def onset(self) -> Time:
        return self.span.onset

    @property
    def offset(self) -> Time:
        return self.span.offset

    @property
    def duration(self) -> Duration:
        return self.span.duration

    def map(self, f: Callable[[A], B]) -> Event[B]:
        return Event(self.span, f(self.value))

    def transform(self, span: Span) -> Event[A]:
        """Transform the event's span; the value is left alone."""
        return Event(span.compose(self.span), self.value)

    def split(self, t: Duration) -> tuple[Event[A], Event[A]]:
        """Split the span at ``t`` after the onset; both halves keep the value."""
        first, second = self.span.split(t)
        return Event(first, self.value), Event(second, self.value)


@dataclass(frozen=True)
class Placed(Generic[A]):
    """A value placed at a point in time."""

    time: Time
    value: A

    def __post_init__(self) -> None:
        object.__setattr__(self, "time", as_time(self.time))

    @property
    def pair(self) -> tuple[Time, A]:
        return (self.time, self.value)

    def map(self, f: Callable[[A], B]) -> Placed[B]:
        return Placed(self.time, f(self.value))

    def transform(self, span: Span) -> Placed[A]:
        """Move the placement by the full span and stretch the value."""
        return Placed(
            transform(span, self.time), transform(stretching(span.duration), self.value)
        )
