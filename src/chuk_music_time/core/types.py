"""
Time primitives - Duration, Time, Span and TimeInterval.

Duration is a one-dimensional vector space over itself, Time is an affine
space with Duration as its difference type, and Span is a time interval
which doubles as an affine transformation (delay + stretch).

All values are exact rationals (see rational.py), measured in whole notes.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from fractions import Fraction
from functools import total_ordering
from typing import ClassVar

from chuk_music_time.constants import ErrorMessages
from chuk_music_time.core.rational import RationalLike, format_rational, to_rational
from chuk_music_time.errors import (
    DegenerateSpanError,
    RationalError,
    UnrepresentableConversionError,
)

_PLAIN_NUMBERS = (int, Fraction)


def _scalar(other: object) -> Fraction | None:
    """Return the Fraction of a plain number (not bool), else None."""
    if isinstance(other, bool):
        return None
    if isinstance(other, _PLAIN_NUMBERS):
        return Fraction(other)
    return None


@total_ordering
@dataclass(frozen=True, eq=False)
class Duration:
    """
    A relative length of musical time.

    Arithmetic (+, -, *, /) has ordinary rational semantics. The monoid
    operation ``compose`` is multiplication with identity 1: composing two
    durations stacks their stretches. The additive group (``+``, zero) is a
    separate structure and the two are never unified.

    Plain ints and Fractions are accepted wherever a Duration is expected
    and compare equal to the Duration of the same value.
    """

    value: Fraction

    # Common durations (defined after class)
    WHOLE: ClassVar[Duration]
    HALF: ClassVar[Duration]
    QUARTER: ClassVar[Duration]
    EIGHTH: ClassVar[Duration]
    SIXTEENTH: ClassVar[Duration]
    THIRTY_SECOND: ClassVar[Duration]

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", _duration_payload(self.value))

    @classmethod
    def zero(cls) -> Duration:
        """Additive identity."""
        return cls(0)

    @classmethod
    def identity(cls) -> Duration:
        """Identity of ``compose`` (the multiplicative monoid)."""
        return cls(1)

    def compose(self, other: Duration) -> Duration:
        """Monoid composition: stretches multiply."""
        return Duration(self.value * _duration_value(other))

    def dotted(self) -> Duration:
        """Return a dotted version (1.5x length)."""
        return Duration(self.value * Fraction(3, 2))

    def double_dotted(self) -> Duration:
        """Return a double-dotted version (1.75x length)."""
        return Duration(self.value * Fraction(7, 4))

    def triplet(self) -> Duration:
        """Return a triplet version (2/3 length)."""
        return Duration(self.value * Fraction(2, 3))

    def __add__(self, other: object) -> Duration:
        value = _coerce_duration(other)
        if value is None:
            return NotImplemented
        return Duration(self.value + value)

    def __radd__(self, other: object) -> Duration:
        return self.__add__(other)

    def __sub__(self, other: object) -> Duration:
        value = _coerce_duration(other)
        if value is None:
            return NotImplemented
        return Duration(self.value - value)

    def __rsub__(self, other: object) -> Duration:
        value = _coerce_duration(other)
        if value is None:
            return NotImplemented
        return Duration(value - self.value)

    def __mul__(self, other: object) -> Duration:
        value = _coerce_duration(other)
        if value is None:
            return NotImplemented
        return Duration(self.value * value)

    def __rmul__(self, other: object) -> Duration:
        return self.__mul__(other)

    def __truediv__(self, other: object) -> Duration:
        value = _coerce_duration(other)
        if value is None:
            return NotImplemented
        return Duration(self.value / value)

    def __rtruediv__(self, other: object) -> Duration:
        value = _coerce_duration(other)
        if value is None:
            return NotImplemented
        return Duration(value / self.value)

    def __neg__(self) -> Duration:
        return Duration(-self.value)

    def __pos__(self) -> Duration:
        return self

    def __abs__(self) -> Duration:
        return Duration(abs(self.value))

    def __eq__(self, other: object) -> bool:
        value = _coerce_duration(other)
        if value is None:
            return NotImplemented
        return self.value == value

    def __hash__(self) -> int:
        return hash(self.value)

    def __lt__(self, other: object) -> bool:
        value = _coerce_duration(other)
        if value is None:
            return NotImplemented
        return self.value < value

    def __str__(self) -> str:
        return format_rational(self.value)

    def __repr__(self) -> str:
        return f"Duration('{format_rational(self.value)}')"


def _coerce_duration(other: object) -> Fraction | None:
    if isinstance(other, Duration):
        return other.value
    return _scalar(other)


def _duration_value(other: object) -> Fraction:
    value = _coerce_duration(other)
    if value is None:
        return to_rational(other)
    return value


# The distance used to align a value against a point in time
Alignment = Duration


@total_ordering
@dataclass(frozen=True, eq=False)
class Time:
    """
    An absolute point in musical time.

    Time forms an affine space over Duration:
        Time - Time     -> Duration
        Time + Duration -> Time
        Time - Duration -> Time

    The origin (zero) carries no special meaning; music may start at
    negative time. Times also add (an additive monoid) and scale by a
    Duration, which is how a Span acts on them.
    """

    value: Fraction

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", _time_payload(self.value))

    @classmethod
    def origin(cls) -> Time:
        """The zero point."""
        return cls(0)

    def reflect_through(self, point: Time) -> Time:
        """Mirror this point through another point."""
        return point + (point - self)

    def __add__(self, other: object) -> Time:
        if isinstance(other, Time):
            return Time(self.value + other.value)
        value = _coerce_duration(other)
        if value is None:
            return NotImplemented
        return Time(self.value + value)

    def __radd__(self, other: object) -> Time:
        return self.__add__(other)

    def __sub__(self, other: object) -> Time | Duration:
        if isinstance(other, Time):
            return Duration(self.value - other.value)
        value = _coerce_duration(other)
        if value is None:
            return NotImplemented
        return Time(self.value - value)

    def __mul__(self, other: object) -> Time:
        value = _coerce_duration(other)
        if value is None:
            return NotImplemented
        return Time(self.value * value)

    def __rmul__(self, other: object) -> Time:
        return self.__mul__(other)

    def __truediv__(self, other: object) -> Time:
        value = _coerce_duration(other)
        if value is None:
            return NotImplemented
        return Time(self.value / value)

    def __neg__(self) -> Time:
        return Time(-self.value)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Time):
            return self.value == other.value
        value = _scalar(other)
        if value is None:
            return NotImplemented
        return self.value == value

    def __hash__(self) -> int:
        return hash(self.value)

    def __lt__(self, other: object) -> bool:
        if isinstance(other, Time):
            return self.value < other.value
        value = _scalar(other)
        if value is None:
            return NotImplemented
        return self.value < value

    def __str__(self) -> str:
        return format_rational(self.value)

    def __repr__(self) -> str:
        return f"Time('{format_rational(self.value)}')"


def _duration_payload(value: object) -> Fraction:
    if isinstance(value, Duration):
        return value.value
    if isinstance(value, Time):
        raise RationalError(ErrorMessages.TIME_AS_DURATION.format(value=value))
    return to_rational(value)


def _time_payload(value: object) -> Fraction:
    if isinstance(value, Time):
        return value.value
    if isinstance(value, Duration):
        raise RationalError(ErrorMessages.DURATION_AS_TIME.format(value=value))
    return to_rational(value)


# Define common durations
Duration.WHOLE = Duration(1)
Duration.HALF = Duration(Fraction(1, 2))
Duration.QUARTER = Duration(Fraction(1, 4))
Duration.EIGHTH = Duration(Fraction(1, 8))
Duration.SIXTEENTH = Duration(Fraction(1, 16))
Duration.THIRTY_SECOND = Duration(Fraction(1, 32))


def as_time(value: Time | RationalLike) -> Time:
    """
    Coerce a Time or rational-like value to a Time.

    Raises:
        RationalError: For a Duration, a float or a non-numeric value
    """
    return value if isinstance(value, Time) else Time(value)  # type: ignore[arg-type]


def as_duration(value: Duration | RationalLike) -> Duration:
    """
    Coerce a Duration or rational-like value to a Duration.

    Raises:
        RationalError: For a Time, a float or a non-numeric value
    """
    return value if isinstance(value, Duration) else Duration(value)  # type: ignore[arg-type]


def split_duration(t: object, d: Duration) -> tuple[Duration, Duration]:
    """
    Split a scalar duration, saturating at its boundaries.

    split_duration(t, d) == (t', d - t') with t' clamped between 0 and d.
    """
    t = as_duration(t)
    low, high = sorted((Duration(0), d))
    first = max(low, min(t, high))
    return first, d - first


def to_absolute_time(durations: Iterable[Duration]) -> list[Time]:
    """
    Convert successive durations to the absolute times they end at.

    The implicit starting point 0 is not included:
    [1, 2, 3] -> [1, 3, 6].
    """
    result: list[Time] = []
    current = Time.origin()
    for d in durations:
        current = current + as_duration(d)
        result.append(current)
    return result


def to_relative_time(times: Iterable[Time]) -> list[Duration]:
    """
    Convert absolute times to the durations between them, starting at 0.

    Inverse of to_absolute_time: [1, 3, 6] -> [1, 2, 3].
    """
    result: list[Duration] = []
    previous = Time.origin()
    for t in times:
        t = as_time(t)
        result.append(t - previous)
        previous = t
    return result


def to_relative_time_n_(end: Time, times: Sequence[Time]) -> list[Duration]:
    """
    Durations from each time to the next one, the last one running to ``end``.

    to_relative_time_n_(10, [0, 1, 3]) -> [1, 2, 7].
    """
    result: list[Duration] = []
    following = as_time(end)
    for t in reversed(times):
        t = as_time(t)
        result.append(following - t)
        following = t
    result.reverse()
    return result


def to_relative_time_n(times: Sequence[Time]) -> list[Duration]:
    """Like to_relative_time_n_, ending at the last time (the last duration is 0)."""
    if not times:
        return []
    return to_relative_time_n_(times[-1], times)


@dataclass(frozen=True, order=True)
class Span:
    """
    A time interval, stored as (onset, duration).

    Equivalently an affine transformation of time: ``onset`` is the delay
    and ``duration`` the stretch. Spans form a group under ``compose``
    with identity (0, 1).

    A span is forward (duration > 0), backward (duration < 0) or
    degenerate (duration = 0); exactly one holds.
    """

    onset: Time
    duration: Duration

    def __post_init__(self) -> None:
        object.__setattr__(self, "onset", as_time(self.onset))
        object.__setattr__(self, "duration", as_duration(self.duration))

    # Construction

    @classmethod
    def from_onset_offset(cls, onset: object, offset: object) -> Span:
        """Span from its two endpoints (t <-> u)."""
        t = as_time(onset)
        return cls(t, as_time(offset) - t)

    @classmethod
    def from_onset_duration(cls, onset: object, duration: object) -> Span:
        """Span from its onset and duration (t >-> d)."""
        return cls(as_time(onset), as_duration(duration))

    @classmethod
    def from_duration_offset(cls, duration: object, offset: object) -> Span:
        """Span from its duration and offset (d <-< u)."""
        d = as_duration(duration)
        return cls(as_time(offset) - d, d)

    @classmethod
    def identity(cls) -> Span:
        """The identity transformation 0 <-> 1."""
        return cls(Time(0), Duration(1))

    @classmethod
    def fixed_duration_span(cls, onset: object) -> Span:
        """A unit-length span at the given onset (a pure delay)."""
        return cls(as_time(onset), Duration(1))

    @classmethod
    def fixed_onset_span(cls, duration: object) -> Span:
        """A span starting at 0 with the given duration (a pure stretch)."""
        return cls(Time(0), as_duration(duration))

    # Views

    @property
    def offset(self) -> Time:
        return self.onset + self.duration

    @property
    def midpoint(self) -> Time:
        return self.onset + self.duration / 2

    @property
    def onset_and_offset(self) -> tuple[Time, Time]:
        return (self.onset, self.offset)

    @property
    def onset_and_duration(self) -> tuple[Time, Duration]:
        return (self.onset, self.duration)

    @property
    def duration_and_offset(self) -> tuple[Duration, Time]:
        return (self.duration, self.offset)

    @property
    def delay_component(self) -> Time:
        return self.onset

    @property
    def stretch_component(self) -> Duration:
        return self.duration

    def fixed_duration_onset(self) -> Time | None:
        """The onset if this is a unit-length span, else None."""
        if self.duration == 1:
            return self.onset
        return None

    def fixed_onset_duration(self) -> Duration | None:
        """The duration if this span starts at 0, else None."""
        if self.onset == 0:
            return self.duration
        return None

    # Group structure

    def compose(self, other: Span) -> Span:
        """
        Apply this span as a transformation to another span.

        (t1, d1) . (t2, d2) = (t1 + d1*t2, d1*d2)
        """
        return Span(self.onset + self.duration * other.onset, self.duration * other.duration)

    def inverse(self) -> Span:
        """
        The inverse transformation (-t/d, 1/d).

        Raises:
            DegenerateSpanError: If the span has zero duration
        """
        if self.is_degenerate:
            raise DegenerateSpanError(ErrorMessages.DEGENERATE_INVERSE.format(span=self))
        return Span(-self.onset / self.duration, 1 / self.duration)

    def scale(self, factor: object) -> Span:
        """Scale both onset and duration."""
        k = as_duration(factor)
        return Span(k * self.onset, k * self.duration)

    def __add__(self, other: object) -> Span:
        if not isinstance(other, Span):
            return NotImplemented
        return self.compose(other)

    def __neg__(self) -> Span:
        return self.inverse()

    def __rmul__(self, other: object) -> Span:
        if _coerce_duration(other) is None:
            return NotImplemented
        return self.scale(other)

    # Properties

    @property
    def is_forward(self) -> bool:
        return self.duration > 0

    @property
    def is_backward(self) -> bool:
        return self.duration < 0

    @property
    def is_degenerate(self) -> bool:
        return self.duration == 0

    # Transformations

    def reflect(self, point: object) -> Span:
        """Reflect both endpoints through a point."""
        p = as_time(point)
        return Span.from_onset_offset(self.onset.reflect_through(p), self.offset.reflect_through(p))

    def reverse(self) -> Span:
        """Reflect through the midpoint (swaps onset and offset)."""
        return self.reflect(self.midpoint)

    def normalize(self) -> Span:
        """Reverse backward spans; forward and degenerate spans are unchanged."""
        if self.is_backward:
            return self.reverse()
        return self

    def forward(self) -> Span:
        """
        Return this span, insisting that it is forward.

        Raises:
            UnrepresentableConversionError: For backward or degenerate spans
        """
        if not self.is_forward:
            raise UnrepresentableConversionError(ErrorMessages.NOT_FORWARD.format(span=self))
        return self

    # Points in spans

    def inside(self, t: object) -> bool:
        """onset <= t <= offset."""
        t = as_time(t)
        return self.onset <= t <= self.offset

    def strictly_inside(self, t: object) -> bool:
        """onset < t < offset."""
        t = as_time(t)
        return self.onset < t < self.offset

    def closest_point_inside(self, t: object) -> Time:
        """Clamp a time to this span."""
        t = as_time(t)
        if t < self.onset:
            return self.onset
        if t > self.offset:
            return self.offset
        return t

    # Predicates

    def encloses(self, other: Span) -> bool:
        """Both endpoints of ``other`` lie inside this span."""
        return self.inside(other.onset) and self.inside(other.offset)

    def properly_encloses(self, other: Span) -> bool:
        return self.encloses(other) and self != other

    def is_before(self, other: Span) -> bool:
        """This span ends no later than ``other`` starts, whatever their directions."""
        return max(self.onset, self.offset) <= min(other.onset, other.offset)

    def overlaps(self, other: Span) -> bool:
        return not self.is_before(other) and not other.is_before(self)

    def hull(self, other: Span) -> Span:
        """Convex hull (min onset, max offset)."""
        return Span.from_onset_offset(
            min(self.onset, other.onset), max(self.offset, other.offset)
        )

    def split(self, t: object) -> tuple[Span, Span]:
        """Split at duration ``t`` after the onset, saturating at the endpoints."""
        first, second = split_duration(t, self.duration)
        return Span(self.onset, first), Span(self.onset + first, second)

    def __str__(self) -> str:
        return show_onset_and_offset(self)

    def __repr__(self) -> str:
        return f"Span({self.onset!r}, {self.duration!r})"


# Free-function spellings of the span API


def onset_offset(onset: object, offset: object) -> Span:
    return Span.from_onset_offset(onset, offset)


def onset_duration(onset: object, duration: object) -> Span:
    return Span.from_onset_duration(onset, duration)


def duration_offset(duration: object, offset: object) -> Span:
    return Span.from_duration_offset(duration, offset)


def inside(t: object, span: Span) -> bool:
    return span.inside(t)


def strictly_inside(t: object, span: Span) -> bool:
    return span.strictly_inside(t)


def closest_point_inside(span: Span, t: object) -> Time:
    return span.closest_point_inside(t)


def encloses(a: Span, b: Span) -> bool:
    return a.encloses(b)


def properly_encloses(a: Span, b: Span) -> bool:
    return a.properly_encloses(b)


def overlaps(a: Span, b: Span) -> bool:
    return a.overlaps(b)


def is_before(a: Span, b: Span) -> bool:
    return a.is_before(b)


def hull(a: Span, b: Span) -> Span:
    return a.hull(b)


def normalize_span(span: Span) -> Span:
    return span.normalize()


def reverse_span(span: Span) -> Span:
    return span.reverse()


def reflect_span(point: object, span: Span) -> Span:
    return span.reflect(point)


def show_onset_and_offset(span: Span) -> str:
    return f"{span.onset} <-> {span.offset}"


def show_onset_and_duration(span: Span) -> str:
    return f"{span.onset} >-> {span.duration}"


def show_duration_and_offset(span: Span) -> str:
    return f"{span.duration} <-< {span.offset}"


class TimeInterval:
    """
    A possibly empty time interval: EmptyInterval | NonEmptyInterval(span).

    Combining takes the convex hull; EmptyInterval is the identity.
    A zero-length span is a real, positioned interval and is never used
    to stand for "empty".
    """

    @staticmethod
    def empty() -> TimeInterval:
        return EmptyInterval()

    @staticmethod
    def of(span: Span) -> TimeInterval:
        return NonEmptyInterval(span)

    @staticmethod
    def concat(spans: Iterable[Span]) -> TimeInterval:
        """Hull of all spans, or EmptyInterval for none."""
        result: TimeInterval = EmptyInterval()
        for span in spans:
            result = result.combine(NonEmptyInterval(span))
        return result

    def combine(self, other: TimeInterval) -> TimeInterval:
        if isinstance(self, NonEmptyInterval) and isinstance(other, NonEmptyInterval):
            return NonEmptyInterval(self.span.hull(other.span))
        if isinstance(self, EmptyInterval):
            return other
        return self

    def __or__(self, other: object) -> TimeInterval:
        if not isinstance(other, TimeInterval):
            return NotImplemented
        return self.combine(other)

    def to_span(self) -> Span | None:
        """The underlying span, or None when empty."""
        return self.span if isinstance(self, NonEmptyInterval) else None


@dataclass(frozen=True)
class EmptyInterval(TimeInterval):
    """The empty interval."""


@dataclass(frozen=True)
class NonEmptyInterval(TimeInterval):
    """An interval covering a span."""

    span: Span
