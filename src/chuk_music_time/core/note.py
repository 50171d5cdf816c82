"""
Note - a value paired with the duration it is stretched by.

A Note(d, x) stores x in its own (unstretched) coordinates. Two views:
- ``pair`` gives (d, x) as stored
- ``notee`` gives x realized through the stretch, i.e. stretch(d, x)

Splitting a note whose value is itself splittable is the subtle part: the
inner value has its own duration, independent of d, so its halves must be
rescaled for the nested structure to keep the split laws.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from chuk_music_time.core.transform import (
    compress,
    duration,
    is_splittable,
    split,
    stretching,
    transform,
)
from chuk_music_time.core.types import Duration, Span, as_duration, split_duration

logger = logging.getLogger(__name__)

A = TypeVar("A")
B = TypeVar("B")


@dataclass(frozen=True)
class Note(Generic[A]):
    """
    A value with a duration.

    Transforming a note only stretches its duration (notes carry no
    position). The value is kept unstretched; use ``notee`` to see it
    realized.
    """

    duration: Duration
    value: A

    def __post_init__(self) -> None:
        object.__setattr__(self, "duration", as_duration(self.duration))

    @classmethod
    def from_pair(cls, pair: tuple[Any, A]) -> Note[A]:
        d, value = pair
        return cls(as_duration(d), value)

    @property
    def pair(self) -> tuple[Duration, A]:
        """The stored (duration, value), no transformation applied."""
        return (self.duration, self.value)

    @property
    def notee(self) -> A:
        """The value realized through the stretch."""
        return transform(stretching(self.duration), self.value)

    def with_notee(self, value: B) -> Note[B]:
        """
        Replace the realized value, storing it through the inverse stretch.

        Raises:
            DegenerateSpanError: For zero-duration notes (no inverse stretch)
        """
        return Note(self.duration, transform(stretching(self.duration).inverse(), value))

    def over_notee(self, f: Callable[[A], B]) -> Note[B]:
        """Modify the realized value."""
        return self.with_notee(f(self.notee))

    def map(self, f: Callable[[A], B]) -> Note[B]:
        """Modify the stored value, keeping the duration."""
        return Note(self.duration, f(self.value))

    def transform(self, span: Span) -> Note[A]:
        return Note(span.duration * self.duration, self.value)

    def split(self, t: Duration) -> tuple[Note[A], Note[A]]:
        """
        Split at duration ``t`` from the start of the note.

        For a splittable value x with duration X, splitting Note(d, x) at t
        gives (Note(da, xa), Note(db, xb)) where

            da + db       == d                  (split t d)
            xa*p + xb*q   == X                  (split (t/d) x, then rescale)
            da*xa + db*xb == d*X                (split t (d*X))

        xa and xb follow from the last line, p and q from the second.
        Values that are not splittable are treated as atomic: both halves
        keep the whole value.
        """
        d, x = self.pair
        da, db = split_duration(t, d)

        if not is_splittable(x):
            return Note(da, x), Note(db, x)

        # Boundary splits keep the original note whole
        if da == 0:
            head, _ = split(Duration(0), x)
            return Note(da, head), self
        if db == 0:
            _, tail = split(duration(x), x)
            return self, Note(db, tail)

        x_duration = duration(x)
        xa_p, xb_q = split(da / d, x)
        da_xa, db_xb = split_duration(da, d * x_duration)

        if da_xa == 0 or db_xb == 0:
            logger.debug("Inner value of %r saturated at %s, halves left unscaled", self, da)
            return Note(da, xa_p), Note(db, xb_q)

        xa = da_xa / da
        xb = db_xb / db
        p = (x_duration - duration(xb_q)) / xa
        q = (x_duration - duration(xa_p)) / xb

        if p == 0 or q == 0:
            logger.debug("Degenerate correction for %r at %s (p=%s, q=%s)", self, da, p, q)
            return Note(da, xa_p), Note(db, xb_q)

        logger.debug("Split %r at %s with corrections p=%s q=%s", self, da, p, q)
        return Note(da, compress(p, xa_p)), Note(db, compress(q, xb_q))


def note(d: object, value: A) -> Note[A]:
    """Build a note from a duration and a value."""
    return Note(as_duration(d), value)


def duration_note(d: object) -> Note[None]:
    """A note that carries only a duration."""
    return Note(as_duration(d), None)
