"""
Attributes - orthogonal tags on musical values.

Every attribute kind is a Facet carried by the generic Tagged wrapper:
- part: which instrument plays
- articulation: accentuation and separation
- dynamic: loudness in decibels
- tremolo: number of tremolo beams
- staff number: which staff of a part

Tags live on the values, so they survive transformation and splitting
unchanged. Pitch is read from the values themselves.
"""

from chuk_music_time.attributes.articulation import (
    ARTICULATION,
    Articulation,
    accent,
    accent_all,
    accent_last,
    articulations,
    legatissimo,
    legato,
    marcato,
    marcato_all,
    marcato_last,
    portato,
    separated,
    staccatissimo,
    staccato,
)
from chuk_music_time.attributes.dynamics import (
    DYNAMIC,
    Amplitude,
    Bel,
    Decibel,
    amplitude,
    bel,
    decibel,
    dynamics,
    louder,
    set_dynamic,
    softer,
)
from chuk_music_time.attributes.facets import (
    facets,
    leaves,
    map_facets,
    map_leaves,
    set_facet,
    tag,
    update_facet,
)
from chuk_music_time.attributes.part import (
    PART,
    all_parts,
    extract_part,
    extract_parts,
    klangfarben,
    parts,
    replace_parts,
    set_part,
)
from chuk_music_time.attributes.pitch import (
    Interval,
    PitchClass,
    above,
    below,
    down,
    highest,
    invert_pitches,
    lowest,
    map_pitches,
    octaves_down,
    octaves_up,
    pitch_range,
    pitches,
    up,
)
from chuk_music_time.attributes.staff import STAFF_NUMBER, staff_number, staff_numbers
from chuk_music_time.attributes.tagged import Facet, Tagged, keep_first
from chuk_music_time.attributes.tremolo import TREMOLO, tremolo, tremolos

__all__ = [
    # Tagging
    "Facet",
    "Tagged",
    "keep_first",
    "facets",
    "map_facets",
    "update_facet",
    "set_facet",
    "tag",
    "leaves",
    "map_leaves",
    # Part
    "PART",
    "set_part",
    "parts",
    "all_parts",
    "replace_parts",
    "extract_part",
    "extract_parts",
    "klangfarben",
    # Articulation
    "ARTICULATION",
    "Articulation",
    "articulations",
    "accent",
    "marcato",
    "accent_last",
    "marcato_last",
    "accent_all",
    "marcato_all",
    "legatissimo",
    "legato",
    "separated",
    "portato",
    "staccato",
    "staccatissimo",
    # Dynamics
    "DYNAMIC",
    "Amplitude",
    "Decibel",
    "Bel",
    "amplitude",
    "decibel",
    "bel",
    "set_dynamic",
    "dynamics",
    "louder",
    "softer",
    # Tremolo and staff
    "TREMOLO",
    "tremolo",
    "tremolos",
    "STAFF_NUMBER",
    "staff_number",
    "staff_numbers",
    # Pitch
    "PitchClass",
    "Interval",
    "pitches",
    "map_pitches",
    "up",
    "down",
    "octaves_up",
    "octaves_down",
    "invert_pitches",
    "highest",
    "lowest",
    "pitch_range",
    "above",
    "below",
]
