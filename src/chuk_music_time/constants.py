"""
Constants for the music time system.

No magic strings - use constants and Literal types for constrained values.
"""

from fractions import Fraction
from typing import Literal

# Interchange schema version - frozen for v1
SCHEMA_VERSION = "music-time/v1"

# Document kinds carried in the "kind" field of interchange documents
DocumentKind = Literal["voice", "score"]

# Log levels accepted by the configuration file
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]

# Environment variable naming the default config file for the CLI
CONFIG_ENV_VAR = "CHUK_MUSIC_TIME_CONFIG"

# Separation values used by the articulation helpers
LEGATISSIMO = -2
LEGATO = -1
SEPARATED = 0
PORTATO = Fraction(1, 2)
STACCATO = 1
STACCATISSIMO = 2

# Accentuation values used by the articulation helpers
ACCENT = 1
MARCATO = 2


class ErrorMessages:
    """Standardized error messages."""

    FLOAT_TIME = "Cannot use float {value!r} as a time value; use int, Fraction or 'n/d'."
    NOT_RATIONAL = "Cannot interpret {value!r} as a rational number."
    TIME_AS_DURATION = "Cannot use time {value} as a duration; subtract two times instead."
    DURATION_AS_TIME = "Cannot use duration {value} as a time; add it to a time instead."
    DEGENERATE_INVERSE = "Cannot invert degenerate span {span}."
    NOT_FORWARD = "Expected a forward span, got {span}."
    OVERLAPPING_EVENTS = "Cannot convert overlapping events to a voice: {first} and {second}."
    BACKWARD_EVENT = "Cannot convert backward event at {span} to a voice."
    INVALID_RATIONAL_PAYLOAD = "Expected [numerator, denominator], got {payload!r}."
    ZERO_DENOMINATOR = "Denominator must be non-zero, got {payload!r}."
    INVALID_SPAN_PAYLOAD = "Expected an object with 'onset' and 'offset', got {payload!r}."
    INVALID_NOTE_PAYLOAD = "Expected an object with 'duration' and 'value', got {payload!r}."
    INVALID_EVENT_PAYLOAD = "Expected an object with 'span' and 'value', got {payload!r}."
    SCHEMA_MISMATCH = "Unsupported schema '{schema}', expected '{expected}'."
    KIND_MISMATCH = "Expected a '{expected}' document, got '{kind}'."
    INVALID_DOCUMENT = "Invalid document: {error}"
    CONFIG_NOT_MAPPING = "Config file {path} must contain a mapping, got {kind}."
    CONFIG_UNREADABLE = "Cannot read config file {path}: {error}"
    NEGATIVE_STAFF = "Staff number must be non-negative, got {value}."
    NEGATIVE_TREMOLO = "Tremolo beams must be non-negative, got {value}."
    NON_POSITIVE_AMPLITUDE = "Cannot take the level of non-positive amplitude {value}."
