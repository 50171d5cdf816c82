#!/usr/bin/env python3
"""
Example: Orchestrating a Melody with Attributes.

Usage:
    python examples/orchestrate.py

This example shows:
1. Distributing notes over instruments (klangfarbenmelodie)
2. Accenting phrases and adding staccato
3. Raising the dynamic and doubling an octave up
4. Extracting the score of each part
"""

import itertools
from fractions import Fraction

from chuk_music_time.attributes import (
    above,
    accent,
    all_parts,
    articulations,
    dynamics,
    extract_parts,
    klangfarben,
    louder,
    pitch_range,
    staccato,
)
from chuk_music_time.core import Voice


def main() -> None:
    """Demonstrate attributes."""
    print("CHUK Music Time Orchestration Demo")
    print("=" * 50)
    print()

    melody: Voice[int | None] = Voice.from_pairs(
        [
            (Fraction(1, 8), 67),
            (Fraction(1, 8), 69),
            (Fraction(1, 4), 71),
            (Fraction(1, 4), None),
            (Fraction(1, 4), 72),
            (Fraction(1, 2), 74),
        ]
    )

    print("1. Klangfarben over flute and oboe")
    colored = klangfarben(itertools.cycle(["flute", "oboe"]), melody)
    print(f"   Parts: {all_parts(colored)}")
    print()

    print("2. Accents and staccato")
    articulated = staccato(accent(colored))
    for art in articulations(articulated):
        print(f"   accent {art.accentuation}, separation {art.separation}")
    print()

    print("3. Louder, doubled an octave up")
    score = above(12, louder(6, articulated).to_score())
    print(f"   Dynamics: {sorted({d.value for d in dynamics(score)})} dB")
    print(f"   Range: {pitch_range(score)}")
    print()

    print("4. Parts")
    for part, part_score in extract_parts(score):
        print(f"   {part}: {len(part_score)} events")


if __name__ == "__main__":
    main()
