"""
Mode table - the closed set of scale step patterns.

Steps are semitone distances from one degree to the next (not cumulative).
Every diatonic mode sums to an octave; the chromatic mode is the only one
that cannot be harmonized.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType


class Mode(str, Enum):
    """
    Mode identifiers.

    MAJOR and IONIAN share a step pattern but stay distinct identifiers,
    as do MINOR_NATURAL and AEOLIAN. Pick CHROMATIC when a progression
    has no key.
    """

    IONIAN = "ionian"
    DORIAN = "dorian"  # Major with flat 3 and 7
    PHRYGIAN = "phrygian"  # Major with flat 2, 3, 6 and 7
    LYDIAN = "lydian"  # Major with sharp 4
    MIXOLYDIAN = "mixolydian"  # Major with flat 7
    AEOLIAN = "aeolian"  # Major with flat 3, 6 and 7
    LOCRIAN = "locrian"  # Major with flat 2, 3, 5, 6 and 7
    MAJOR = "major"
    MINOR_NATURAL = "minor_natural"
    MINOR_HARMONIC = "minor_harmonic"  # Natural minor with sharp 7
    CHROMATIC = "chromatic"

    @property
    def steps(self) -> tuple[int, ...]:
        """Semitone steps between consecutive scale degrees."""
        return MODE_STEPS[self]

    @property
    def is_harmonizable(self) -> bool:
        """Whether degree triads can be derived for this mode."""
        return self is not Mode.CHROMATIC

    def __str__(self) -> str:
        return self.value.replace("_", " ")


MODE_STEPS: MappingProxyType[Mode, tuple[int, ...]] = MappingProxyType(
    {
        Mode.IONIAN: (2, 2, 1, 2, 2, 2, 1),
        Mode.DORIAN: (2, 1, 2, 2, 2, 1, 2),
        Mode.PHRYGIAN: (1, 2, 2, 2, 1, 2, 2),
        Mode.LYDIAN: (2, 2, 2, 1, 2, 2, 1),
        Mode.MIXOLYDIAN: (2, 2, 1, 2, 2, 1, 2),
        Mode.AEOLIAN: (2, 1, 2, 2, 1, 2, 2),
        Mode.LOCRIAN: (1, 2, 2, 1, 2, 2, 2),
        Mode.MAJOR: (2, 2, 1, 2, 2, 2, 1),
        Mode.MINOR_NATURAL: (2, 1, 2, 2, 1, 2, 2),
        Mode.MINOR_HARMONIC: (2, 1, 2, 2, 1, 3, 1),
        Mode.CHROMATIC: (1,) * 12,
    }
)
