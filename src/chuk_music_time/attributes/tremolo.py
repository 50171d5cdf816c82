"""
Tremolo - number of tremolo beams on a value.

Combining two tremolo-tagged values keeps the larger beam count.
"""

from __future__ import annotations

from typing import Any, TypeVar

from chuk_music_time.attributes.facets import facets, set_facet
from chuk_music_time.attributes.tagged import Facet
from chuk_music_time.constants import ErrorMessages

A = TypeVar("A")

TREMOLO = Facet("tremolo", combine=max)


def tremolo(n: int, x: A) -> A:
    """
    Set the tremolo of every value to ``n`` beams (0 means none).

    Raises:
        ValueError: If n is negative
    """
    if n < 0:
        raise ValueError(ErrorMessages.NEGATIVE_TREMOLO.format(value=n))
    return set_facet(TREMOLO, n, x)  # type: ignore[no-any-return]


def tremolos(x: Any) -> list[int]:
    return facets(TREMOLO, x)
