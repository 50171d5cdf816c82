#!/usr/bin/env python3
"""
Example: Splitting Notes and Voices.

This demonstrates exact rational time and the split laws.

Usage:
    python examples/split_notes.py

This example shows:
1. Building a voice from (duration, value) pairs
2. Splitting it inside a note - only that note is cut in two
3. Splitting a note whose value has its own duration, with rescaling
4. Writing both halves as versioned JSON documents
"""

from fractions import Fraction
from pathlib import Path

from chuk_music_time.codec import to_json
from chuk_music_time.core import Duration, Note, Voice, format_rational


def show(label: str, voice: Voice[object]) -> None:
    pairs = ", ".join(f"({format_rational(d.value)}, {v})" for d, v in voice.pairs)
    print(f"   {label}: [{pairs}]  total {format_rational(voice.duration.value)}")


def main() -> None:
    """Demonstrate splitting."""
    output_dir = Path(__file__).parent / "output"
    output_dir.mkdir(exist_ok=True)

    print("CHUK Music Time Split Demo")
    print("=" * 50)
    print()

    # 1. A melody in whole notes
    print("1. Melody")
    melody = Voice.from_pairs(
        [(Fraction(1, 4), "C4"), (Fraction(1, 4), "D4"), (Fraction(1, 2), "E4"), (1, "F4")]
    )
    show("melody", melody)
    print()

    # 2. Split inside the half note
    print("2. Split at 3/4")
    first, second = melody.split(Duration(Fraction(3, 4)))
    show("first ", first)
    show("second", second)
    print()

    # 3. A note holding a duration is rescaled so both laws hold
    print("3. Split Note(1, 2) at 3/5")
    a, b = Note(Duration(1), Duration(2)).split(Duration(Fraction(3, 5)))
    for label, n in (("first ", a), ("second", b)):
        print(f"   {label}: ({format_rational(n.duration.value)}, {format_rational(n.value.value)})")
    realized = a.duration * a.value + b.duration * b.value
    print(f"   realized duration: {format_rational(realized.value)}")
    print()

    # 4. Save both halves
    print("4. Writing documents")
    for name, half in (("first", first), ("second", second)):
        path = output_dir / f"melody_{name}.json"
        path.write_text(to_json(half))
        print(f"   ✓ {path}")


if __name__ == "__main__":
    main()
