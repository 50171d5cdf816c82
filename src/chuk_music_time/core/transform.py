"""
Capabilities shared by every time-carrying value.

- Transformable: can be acted on by a Span (delay + stretch)
- HasDuration: has a length in time
- Splittable: can be divided at a point into two parts whose durations add
  up to the original

Containers implement these as methods; the generic functions here also
cover the primitive time types, plain sequences and scalars (which are
transform-invariant).
"""

from __future__ import annotations

from typing import Any, Protocol, TypeVar, runtime_checkable

from chuk_music_time.core.types import Duration, Span, Time, as_duration, split_duration

T = TypeVar("T")


@runtime_checkable
class Transformable(Protocol):
    """A value that can be delayed and stretched by a Span."""

    def transform(self, span: Span) -> Any:
        """Apply the span's affine transformation to this value."""
        ...


@runtime_checkable
class HasDuration(Protocol):
    """A value with a length in musical time."""

    @property
    def duration(self) -> Duration: ...


@runtime_checkable
class Splittable(Protocol):
    """
    A value that can be divided at a relative point.

    Laws:
        duration(a) + duration(b) == duration(x)   where (a, b) = split(t, x)
        split(t <= 0, x)           == (degenerate, x)
        split(t >= duration(x), x) == (x, degenerate)
    """

    def split(self, t: Duration) -> tuple[Any, Any]: ...


@runtime_checkable
class Wrapped(Protocol):
    """
    A value that forwards its time capabilities to a payload.

    Duration and splitting are read from the payload; ``rewrap`` puts a
    new payload back into the same wrapper.
    """

    def unwrap(self) -> Any: ...

    def rewrap(self, payload: Any) -> Any: ...


def transform(span: Span, value: T) -> T:
    """
    Apply a span to any value.

    Durations are stretched, times are delayed and stretched, spans are
    composed. Lists and tuples are transformed element-wise. Values without
    a notion of time (numbers, strings, pitches) are returned unchanged.
    """
    if isinstance(value, Duration):
        return span.duration * value  # type: ignore[return-value]
    if isinstance(value, Time):
        return span.onset + span.duration * value  # type: ignore[return-value]
    if isinstance(value, Span):
        return span.compose(value)  # type: ignore[return-value]
    if isinstance(value, Transformable):
        return value.transform(span)  # type: ignore[no-any-return]
    if isinstance(value, list):
        return [transform(span, x) for x in value]  # type: ignore[return-value]
    if type(value) is tuple:
        return tuple(transform(span, x) for x in value)  # type: ignore[return-value]
    return value


def delaying(d: object) -> Span:
    """A span that delays by ``d`` without stretching."""
    return Span(Time(0) + as_duration(d), Duration(1))


def stretching(d: object) -> Span:
    """A span that stretches by ``d`` without delaying."""
    return Span(Time(0), as_duration(d))


def delay(d: object, value: T) -> T:
    return transform(delaying(d), value)


def undelay(d: object, value: T) -> T:
    return transform(delaying(-as_duration(d)), value)


def stretch(d: object, value: T) -> T:
    return transform(stretching(d), value)


def compress(d: object, value: T) -> T:
    return transform(stretching(1 / as_duration(d)), value)


def duration(value: object) -> Duration:
    """
    The duration of a value.

    Raises:
        TypeError: If the value has no duration
    """
    if isinstance(value, Duration):
        return value
    if isinstance(value, Wrapped):
        return duration(value.unwrap())
    if isinstance(value, HasDuration):
        return value.duration
    raise TypeError(f"{type(value).__name__} has no duration")


def has_duration(value: object) -> bool:
    if isinstance(value, Wrapped):
        return has_duration(value.unwrap())
    return isinstance(value, (Duration, HasDuration))


def is_splittable(value: object) -> bool:
    """True for values with a duration and a split method."""
    if isinstance(value, Wrapped):
        return is_splittable(value.unwrap())
    if isinstance(value, Duration):
        return True
    return isinstance(value, Splittable) and isinstance(value, HasDuration)


def split(t: object, value: T) -> tuple[T, T]:
    """
    Split a value at duration ``t`` from its start.

    Raises:
        TypeError: If the value is not splittable
    """
    if isinstance(value, Duration):
        return split_duration(t, value)  # type: ignore[return-value]
    if isinstance(value, Wrapped):
        first, second = split(t, value.unwrap())
        return value.rewrap(first), value.rewrap(second)
    if is_splittable(value):
        return value.split(as_duration(t))  # type: ignore[attr-defined, return-value]
    raise TypeError(f"{type(value).__name__} is not splittable")
