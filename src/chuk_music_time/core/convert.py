"""
Conversions between step functions and voices.
"""

from __future__ import annotations

import logging
from typing import TypeVar

from chuk_music_time.core.note import Note
from chuk_music_time.core.reactive import Reactive
from chuk_music_time.core.types import Span, Time, as_time, to_relative_time_n_
from chuk_music_time.core.voice import Voice

logger = logging.getLogger(__name__)

A = TypeVar("A")


def reactive_to_voice(span: Span, reactive: Reactive[A]) -> Voice[A]:
    """
    Sample a step function into a voice over the window ``span``.

    The function is sampled at 0 and at every change point strictly inside
    the window; each sample lasts until the next one, the last until the
    window's offset.
    """
    u, v = span.onset_and_offset
    times = [Time(0)] + [t for t in reactive.occurrences() if u < t < v]
    durations = to_relative_time_n_(v, times)
    logger.debug("Sampling reactive over %s at %d points", span, len(times))
    return Voice(tuple(Note(d, reactive.at_time(t)) for d, t in zip(durations, times)))


def voice_to_reactive(voice: Voice[A], origin: object = 0) -> Reactive[A]:
    """
    Read a voice as a step function starting at ``origin``.

    Each value holds from its note's onset; the first value also holds
    before the origin and the last one after the voice ends.

    Raises:
        ValueError: For an empty voice (a step function needs a value)
    """
    if not voice.notes:
        raise ValueError("Cannot build a step function from an empty voice")
    start = as_time(origin)
    changes = [(start + onset, value) for onset, value in zip(voice.onsets(), voice.values)]
    return Reactive(voice.values[0], tuple(changes[1:]))
