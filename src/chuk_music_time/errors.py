"""
Error taxonomy for the music time system.

All errors are raised at the point of the invalid operation. The concrete
classes also derive from the builtin exception a caller would naturally
expect (ValueError, TypeError), so plain ``except ValueError`` keeps working.
"""

from __future__ import annotations


class MusicTimeError(Exception):
    """Base class for all errors raised by this package."""


class RationalError(MusicTimeError, TypeError):
    """A value cannot be used as an exact rational time value."""


class DegenerateSpanError(MusicTimeError, ValueError):
    """An operation needs an invertible span but got a zero-duration one."""


class UnrepresentableConversionError(MusicTimeError, ValueError):
    """A conversion would silently produce a wrong result."""


class CodecError(MusicTimeError, ValueError):
    """Interchange data is malformed or has the wrong schema."""
