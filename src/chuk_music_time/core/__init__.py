"""
Core time algebra - the Radix layer.

These are the mathematical invariants that everything else composes on:
- Duration: relative time, a vector space (and a multiplicative monoid)
- Time: absolute time, an affine space over Duration
- Span: onset + duration, also an affine transformation of time
- TimeInterval: possibly empty interval, a monoid under hull
- Transformable / HasDuration / Splittable: capability protocols
- Note: a value stretched by a duration
- Event / Placed: values positioned in time
- Voice: sequential music
- Score / Track: simultaneous music
- Reactive: step functions of time
"""

from chuk_music_time.core.convert import reactive_to_voice, voice_to_reactive
from chuk_music_time.core.event import Event, Placed
from chuk_music_time.core.note import Note, duration_note, note
from chuk_music_time.core.rational import format_rational, to_rational
from chuk_music_time.core.reactive import Reactive
from chuk_music_time.core.score import Score, render_aligned_voice
from chuk_music_time.core.track import Track
from chuk_music_time.core.transform import (
    HasDuration,
    Splittable,
    Transformable,
    Wrapped,
    compress,
    delay,
    delaying,
    duration,
    has_duration,
    is_splittable,
    split,
    stretch,
    stretching,
    transform,
    undelay,
)
from chuk_music_time.core.types import (
    Alignment,
    Duration,
    EmptyInterval,
    NonEmptyInterval,
    Span,
    Time,
    TimeInterval,
    closest_point_inside,
    duration_offset,
    encloses,
    hull,
    inside,
    is_before,
    normalize_span,
    onset_duration,
    onset_offset,
    overlaps,
    properly_encloses,
    reflect_span,
    reverse_span,
    show_duration_and_offset,
    show_onset_and_duration,
    show_onset_and_offset,
    split_duration,
    strictly_inside,
    to_absolute_time,
    to_relative_time,
    to_relative_time_n,
    to_relative_time_n_,
)
from chuk_music_time.core.voice import Context, Voice, add_context

__all__ = [
    # Rational base
    "to_rational",
    "format_rational",
    # Types
    "Alignment",
    "Duration",
    "Time",
    "Span",
    "TimeInterval",
    "EmptyInterval",
    "NonEmptyInterval",
    "to_absolute_time",
    "to_relative_time",
    "to_relative_time_n",
    "to_relative_time_n_",
    "split_duration",
    # Span functions
    "onset_offset",
    "onset_duration",
    "duration_offset",
    "inside",
    "strictly_inside",
    "closest_point_inside",
    "encloses",
    "properly_encloses",
    "overlaps",
    "is_before",
    "hull",
    "normalize_span",
    "reverse_span",
    "reflect_span",
    "show_onset_and_offset",
    "show_onset_and_duration",
    "show_duration_and_offset",
    # Capabilities
    "Transformable",
    "HasDuration",
    "Splittable",
    "Wrapped",
    "has_duration",
    "is_splittable",
    "transform",
    "delay",
    "undelay",
    "stretch",
    "compress",
    "delaying",
    "stretching",
    "duration",
    "split",
    # Containers
    "Note",
    "note",
    "duration_note",
    "Event",
    "Placed",
    "Voice",
    "Context",
    "add_context",
    "Score",
    "render_aligned_voice",
    "Track",
    "Reactive",
    # Conversion
    "reactive_to_voice",
    "voice_to_reactive",
]
