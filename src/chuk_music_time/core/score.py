"""
Score - simultaneous (polyphonic) music positioned in absolute time.

A Score is a collection of Events. Events may overlap freely and have no
implied order; ``sorted_events`` gives a canonical ordering when needed.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from chuk_music_time.constants import ErrorMessages
from chuk_music_time.core.event import Event
from chuk_music_time.core.note import Note
from chuk_music_time.core.transform import delay
from chuk_music_time.core.types import Duration, Span, Time, TimeInterval, as_duration, as_time
from chuk_music_time.core.voice import Voice
from chuk_music_time.errors import UnrepresentableConversionError

logger = logging.getLogger(__name__)

A = TypeVar("A")
B = TypeVar("B")


@dataclass(frozen=True)
class Score(Generic[A]):
    """
    A collection of events.

    Transforming a score transforms every event's span. ``par`` (or ``|``)
    puts two scores in parallel, ``seq`` (or ``>>``) plays the second after
    the first.
    """

    events: tuple[Event[A], ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "events", tuple(self.events))

    @classmethod
    def empty(cls) -> Score[Any]:
        return cls(())

    @classmethod
    def of(cls, *events: Event[A]) -> Score[A]:
        return cls(events)

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[Span, A]]) -> Score[A]:
        """Build a score from (span, value) pairs."""
        return cls(tuple(Event(span, value) for span, value in pairs))

    def __len__(self) -> int:
        return len(self.events)

    def __iter__(self) -> Iterator[Event[A]]:
        return iter(self.events)

    @property
    def pairs(self) -> list[tuple[Span, A]]:
        return [e.pair for e in self.events]

    @property
    def values(self) -> list[A]:
        return [e.value for e in self.events]

    def sorted_events(self) -> list[Event[A]]:
        """Events ordered by onset, then offset."""
        return sorted(self.events, key=lambda e: (e.span.onset, e.span.offset))

    def map(self, f: Callable[[A], B]) -> Score[B]:
        return Score(tuple(e.map(f) for e in self.events))

    def map_events(self, f: Callable[[Event[A]], Event[B]]) -> Score[B]:
        return Score(tuple(f(e) for e in self.events))

    def filter(self, predicate: Callable[[A], bool]) -> Score[A]:
        """Keep the events whose value satisfies the predicate."""
        return Score(tuple(e for e in self.events if predicate(e.value)))

    def transform(self, span: Span) -> Score[A]:
        return Score(tuple(e.transform(span) for e in self.events))

    # Era

    @property
    def era(self) -> TimeInterval:
        """Hull of all event spans (EmptyInterval for an empty score)."""
        return TimeInterval.concat(e.span for e in self.events)

    @property
    def onset(self) -> Time:
        span = self.era.to_span()
        return span.onset if span is not None else Time(0)

    @property
    def offset(self) -> Time:
        span = self.era.to_span()
        return span.offset if span is not None else Time(0)

    @property
    def duration(self) -> Duration:
        return self.offset - self.onset

    # Composition

    def par(self, other: Score[A]) -> Score[A]:
        """Both scores at the same time."""
        return Score(self.events + other.events)

    def seq(self, other: Score[A]) -> Score[A]:
        """The other score moved to start where this one ends."""
        if not self.events:
            return other
        if not other.events:
            return self
        moved = delay(self.offset - other.onset, other)
        return Score(self.events + moved.events)

    def __or__(self, other: object) -> Score[A]:
        if not isinstance(other, Score):
            return NotImplemented
        return self.par(other)

    def __rshift__(self, other: object) -> Score[A]:
        if not isinstance(other, Score):
            return NotImplemented
        return self.seq(other)

    # Conversion

    def to_voice(self, rest: Any = None) -> Voice[Any]:
        """
        Read the score as a single voice starting at the score's onset.

        Gaps between events become ``rest`` notes.

        Raises:
            UnrepresentableConversionError: If events overlap or an event is
                backward
        """
        notes: list[Note[Any]] = []
        previous: Event[A] | None = None
        for event in self.sorted_events():
            if event.span.is_backward:
                raise UnrepresentableConversionError(
                    ErrorMessages.BACKWARD_EVENT.format(span=event.span)
                )
            if previous is not None:
                gap = event.onset - previous.offset
                if gap < 0:
                    raise UnrepresentableConversionError(
                        ErrorMessages.OVERLAPPING_EVENTS.format(
                            first=previous.span, second=event.span
                        )
                    )
                if gap > 0:
                    notes.append(Note(gap, rest))
            notes.append(Note(event.duration, event.value))
            previous = event
        logger.debug("Converted %d events to a voice of %d notes", len(self.events), len(notes))
        return Voice(tuple(notes))


def render_aligned_voice(time: object, alignment: object, voice: Voice[A]) -> Score[A]:
    """
    Place a voice so that the point at fraction ``alignment`` of its
    duration falls on ``time``.

    Alignment 0 puts the start of the voice at ``time``, 1 its end, 1/2 its
    middle.
    """
    t = as_time(time)
    onset = t - as_duration(alignment) * voice.duration
    return voice.to_score(onset)
