"""
Voice - sequential (monophonic) music.

A Voice is an ordered sequence of Notes; each note starts where the
previous one ends. Concatenation is sequencing in time.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from chuk_music_time.core.event import Event
from chuk_music_time.core.note import Note
from chuk_music_time.core.types import Duration, Span, Time, as_duration, as_time

if TYPE_CHECKING:
    from chuk_music_time.core.score import Score

logger = logging.getLogger(__name__)

A = TypeVar("A")
B = TypeVar("B")


@dataclass(frozen=True)
class Context(Generic[A]):
    """A value together with its neighbours in a sequence."""

    previous: A | None
    current: A
    next: A | None


def add_context(values: Sequence[A]) -> list[Context[A]]:
    """Pair each value with the one before and after it (None at the ends)."""
    result: list[Context[A]] = []
    for i, value in enumerate(values):
        previous = values[i - 1] if i > 0 else None
        following = values[i + 1] if i + 1 < len(values) else None
        result.append(Context(previous, value, following))
    return result


@dataclass(frozen=True)
class Voice(Generic[A]):
    """
    An ordered sequence of notes.

    Duration is the sum of the note durations. Transforming a voice
    stretches every note; delays have no effect since a voice has no
    position of its own.
    """

    notes: tuple[Note[A], ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "notes", tuple(self.notes))

    @classmethod
    def empty(cls) -> Voice[Any]:
        return cls(())

    @classmethod
    def of(cls, *notes: Note[A]) -> Voice[A]:
        return cls(notes)

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[Any, A]]) -> Voice[A]:
        """Build a voice from (duration, value) pairs."""
        return cls(tuple(Note(as_duration(d), value) for d, value in pairs))

    @classmethod
    def concat(cls, voices: Iterable[Voice[A]]) -> Voice[A]:
        notes: list[Note[A]] = []
        for voice in voices:
            notes.extend(voice.notes)
        return cls(tuple(notes))

    def __add__(self, other: object) -> Voice[A]:
        if not isinstance(other, Voice):
            return NotImplemented
        return Voice(self.notes + other.notes)

    def __len__(self) -> int:
        return len(self.notes)

    def __iter__(self) -> Iterator[Note[A]]:
        return iter(self.notes)

    @property
    def pairs(self) -> list[tuple[Duration, A]]:
        return [n.pair for n in self.notes]

    @property
    def durations(self) -> list[Duration]:
        return [n.duration for n in self.notes]

    @property
    def values(self) -> list[A]:
        return [n.value for n in self.notes]

    @property
    def duration(self) -> Duration:
        return sum((n.duration for n in self.notes), Duration(0))

    def onsets(self) -> list[Time]:
        """Onset of each note, the first one at 0."""
        result: list[Time] = []
        current = Time(0)
        for n in self.notes:
            result.append(current)
            current = current + n.duration
        return result

    def map(self, f: Callable[[A], B]) -> Voice[B]:
        """Apply a function to every value."""
        return Voice(tuple(n.map(f) for n in self.notes))

    def map_notes(self, f: Callable[[Note[A]], Note[B]]) -> Voice[B]:
        return Voice(tuple(f(n) for n in self.notes))

    def reverse(self) -> Voice[A]:
        """The same notes in retrograde order."""
        return Voice(tuple(reversed(self.notes)))

    def with_context(self) -> Voice[Context[A]]:
        """Pair each value with its neighbours, keeping the durations."""
        contexts = add_context(self.values)
        return Voice(tuple(Note(n.duration, c) for n, c in zip(self.notes, contexts)))

    def transform(self, span: Span) -> Voice[A]:
        return Voice(tuple(n.transform(span) for n in self.notes))

    def split(self, t: Duration) -> tuple[Voice[A], Voice[A]]:
        """
        Split at duration ``t`` from the start of the voice.

        At most one note crossing the split point is itself split; notes
        ending exactly at ``t`` stay in the first half.
        """
        t = as_duration(t)
        elapsed = Duration(0)
        for i, n in enumerate(self.notes):
            if t <= elapsed:
                return Voice(self.notes[:i]), Voice(self.notes[i:])
            end = elapsed + n.duration
            if t < end:
                logger.debug("Splitting note %d of voice at %s", i, t - elapsed)
                first, second = n.split(t - elapsed)
                return (
                    Voice(self.notes[:i] + (first,)),
                    Voice((second,) + self.notes[i + 1 :]),
                )
            elapsed = end
        return self, Voice(())

    def to_score(self, origin: object = 0) -> Score[A]:
        """Place the notes one after another, starting at ``origin``."""
        from chuk_music_time.core.score import Score

        start = as_time(origin)
        return Score(
            tuple(
                Event(Span(start + onset, n.duration), n.value)
                for onset, n in zip(self.onsets(), self.notes)
            )
        )
