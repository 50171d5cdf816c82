"""
Reactive - piecewise-constant values over time (step functions).

A Reactive holds an initial value and a time-ordered list of change
points. Its value at time t is the value of the last change at or before
t, or the initial value before the first change.
"""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from chuk_music_time.core.types import Span, Time, as_time

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")


@dataclass(frozen=True)
class Reactive(Generic[A]):
    """A total function of time that only changes at discrete points."""

    initial: A
    changes: tuple[tuple[Time, A], ...] = ()

    def __post_init__(self) -> None:
        changes = sorted(((as_time(t), value) for t, value in self.changes), key=lambda c: c[0])
        object.__setattr__(self, "changes", tuple(changes))

    @classmethod
    def constant(cls, value: A) -> Reactive[A]:
        """A value that never changes."""
        return cls(value, ())

    @classmethod
    def step(cls, initial: A, changes: Iterable[tuple[Any, A]]) -> Reactive[A]:
        """Build from an initial value and (time, value) change points."""
        return cls(initial, tuple(changes))

    def occurrences(self) -> list[Time]:
        """Times at which the value changes."""
        return [t for t, _ in self.changes]

    @property
    def final(self) -> A:
        """The value after the last change."""
        if not self.changes:
            return self.initial
        return self.changes[-1][1]

    def at_time(self, t: object) -> A:
        """The value at time ``t`` (changes take effect at their own time)."""
        index = bisect_right(self.occurrences(), as_time(t))
        if index == 0:
            return self.initial
        return self.changes[index - 1][1]

    def __call__(self, t: object) -> A:
        return self.at_time(t)

    def sample(self, times: Iterable[object]) -> list[A]:
        return [self.at_time(t) for t in times]

    def map(self, f: Callable[[A], B]) -> Reactive[B]:
        return Reactive(f(self.initial), tuple((t, f(value)) for t, value in self.changes))

    def zip_with(self, f: Callable[[A, B], C], other: Reactive[B]) -> Reactive[C]:
        """Combine two step functions point-wise."""
        times = sorted(set(self.occurrences()) | set(other.occurrences()))
        return Reactive(
            f(self.initial, other.initial),
            tuple((t, f(self.at_time(t), other.at_time(t))) for t in times),
        )

    def transform(self, span: Span) -> Reactive[A]:
        """
        Move every change point by the span.

        Raises:
            UnrepresentableConversionError: For backward or degenerate spans,
                which would reorder or merge the change points
        """
        span = span.forward()
        return Reactive(
            self.initial,
            tuple((span.onset + span.duration * t, value) for t, value in self.changes),
        )
