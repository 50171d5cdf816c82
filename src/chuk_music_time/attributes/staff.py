"""
Staff number - which staff of a multi-staff part a value is written on.

Staff numbers are natural numbers; combining two tagged values keeps the
first staff.
"""

from __future__ import annotations

from typing import Any, TypeVar

from chuk_music_time.attributes.facets import facets, set_facet
from chuk_music_time.attributes.tagged import Facet
from chuk_music_time.constants import ErrorMessages

A = TypeVar("A")

STAFF_NUMBER = Facet("staff_number")


def staff_number(n: int, x: A) -> A:
    """
    Put every value on staff ``n``.

    Raises:
        ValueError: If n is negative
    """
    if n < 0:
        raise ValueError(ErrorMessages.NEGATIVE_STAFF.format(value=n))
    return set_facet(STAFF_NUMBER, n, x)  # type: ignore[no-any-return]


def staff_numbers(x: Any) -> list[int]:
    return facets(STAFF_NUMBER, x)
