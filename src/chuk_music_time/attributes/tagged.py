"""
Tagged values - a payload carrying an orthogonal attribute tag.

One generic wrapper serves every attribute kind (part, articulation,
dynamic, tremolo, staff number). The Facet names the kind and says how
two tags combine when tagged values are combined arithmetically.

A Tagged value behaves like its payload: arithmetic, transformation,
duration and splitting all go to the payload and leave the tag alone.
"""

from __future__ import annotations

import operator
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from chuk_music_time.core.transform import transform
from chuk_music_time.core.types import Span

T = TypeVar("T")
A = TypeVar("A")
B = TypeVar("B")


def keep_first(first: Any, second: Any) -> Any:
    """Tag combination that keeps the left tag."""
    return first


@dataclass(frozen=True)
class Facet:
    """
    An attribute kind.

    Facets compare by name; ``combine`` merges the tags of two tagged
    operands (the left tag wins by default).
    """

    name: str
    combine: Callable[[Any, Any], Any] = field(default=keep_first, compare=False)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Tagged(Generic[T, A]):
    """A value with a tag of some facet."""

    facet: Facet
    tag: T
    value: A

    def with_tag(self, tag: Any) -> Tagged[Any, A]:
        return Tagged(self.facet, tag, self.value)

    def with_value(self, value: B) -> Tagged[T, B]:
        return Tagged(self.facet, self.tag, value)

    def map(self, f: Callable[[A], B]) -> Tagged[T, B]:
        return self.with_value(f(self.value))

    # Payload forwarding for the time capabilities

    def unwrap(self) -> A:
        return self.value

    def rewrap(self, payload: B) -> Tagged[T, B]:
        return self.with_value(payload)

    def transform(self, span: Span) -> Tagged[T, A]:
        return self.with_value(transform(span, self.value))

    # Arithmetic lifted through the tag

    def _lift(self, op: Callable[[Any, Any], Any], other: object, reflected: bool = False) -> Any:
        if isinstance(other, Tagged):
            if other.facet != self.facet:
                return NotImplemented
            tag = self.facet.combine(self.tag, other.tag)
            return Tagged(self.facet, tag, op(self.value, other.value))
        if reflected:
            return self.with_value(op(other, self.value))
        return self.with_value(op(self.value, other))

    def __add__(self, other: object) -> Any:
        return self._lift(operator.add, other)

    def __radd__(self, other: object) -> Any:
        return self._lift(operator.add, other, reflected=True)

    def __sub__(self, other: object) -> Any:
        return self._lift(operator.sub, other)

    def __rsub__(self, other: object) -> Any:
        return self._lift(operator.sub, other, reflected=True)

    def __mul__(self, other: object) -> Any:
        return self._lift(operator.mul, other)

    def __rmul__(self, other: object) -> Any:
        return self._lift(operator.mul, other, reflected=True)

    def __truediv__(self, other: object) -> Any:
        return self._lift(operator.truediv, other)

    def __rtruediv__(self, other: object) -> Any:
        return self._lift(operator.truediv, other, reflected=True)

    def __neg__(self) -> Tagged[T, Any]:
        return self.map(operator.neg)

    def __abs__(self) -> Tagged[T, Any]:
        return self.map(abs)
