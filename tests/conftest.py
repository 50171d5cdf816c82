"""
Pytest configuration and shared fixtures.
"""

import tempfile
from fractions import Fraction
from pathlib import Path

import pytest

from chuk_music_time.core import Event, Score, Span, Voice


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def melody() -> Voice[int]:
    """Four MIDI pitches: quarter, quarter, half, whole."""
    return Voice.from_pairs(
        [
            (Fraction(1, 4), 60),
            (Fraction(1, 4), 62),
            (Fraction(1, 2), 64),
            (1, 65),
        ]
    )


@pytest.fixture
def phrased_melody() -> Voice[int | None]:
    """Two phrases separated by a rest."""
    return Voice.from_pairs(
        [
            (Fraction(1, 4), 60),
            (Fraction(1, 4), 62),
            (Fraction(1, 4), None),
            (Fraction(1, 4), 67),
            (Fraction(1, 2), 65),
        ]
    )


@pytest.fixture
def chord_score() -> Score[int]:
    """A C major triad followed by a G in the bass, with an overlap."""
    return Score.of(
        Event(Span.from_onset_offset(0, 1), 60),
        Event(Span.from_onset_offset(0, 1), 64),
        Event(Span.from_onset_offset(0, 1), 67),
        Event(Span.from_onset_offset(Fraction(1, 2), 2), 43),
    )


@pytest.fixture
def voice_document_path(temp_dir: Path) -> Path:
    """Path for a temporary voice document."""
    return temp_dir / "voice.json"
