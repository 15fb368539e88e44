"""
Pitch primitives - Pitch and Interval.

These are the foundational types for all pitch-related operations.
Pitch is a concrete MIDI key (0-127) that can be transposed in place.
Interval represents the distance between pitches in semitones.
"""

from __future__ import annotations

import re
from functools import total_ordering
from typing import ClassVar

from chuk_music_score.constants import MIDI_MAX, MIDI_MIN, NOTE_NAMES, OCTAVE, ErrorMessages
from chuk_music_score.errors import RangeError, ValidationError

_PITCH_NAME = re.compile(r"^([A-G]#?)(-?\d+)$")


@total_ordering
class Interval:
    """
    Distance between pitches in semitones.

    Chords are built by stacking intervals on top of the last note.

    Immutable and hashable.
    """

    __slots__ = ("_semitones",)
    _semitones: int

    # Named intervals (class constants)
    UNISON: ClassVar[Interval]
    MINOR_SECOND: ClassVar[Interval]
    MAJOR_SECOND: ClassVar[Interval]
    MINOR_THIRD: ClassVar[Interval]
    MAJOR_THIRD: ClassVar[Interval]
    PERFECT_FOURTH: ClassVar[Interval]
    TRITONE: ClassVar[Interval]
    PERFECT_FIFTH: ClassVar[Interval]
    OCTAVE: ClassVar[Interval]

    def __init__(self, semitones: int) -> None:
        """Create an interval with the given number of semitones."""
        object.__setattr__(self, "_semitones", semitones)

    @property
    def semitones(self) -> int:
        """Number of semitones in this interval."""
        return self._semitones

    def __add__(self, other: Interval) -> Interval:
        if not isinstance(other, Interval):
            return NotImplemented
        return Interval(self._semitones + other._semitones)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return bool(self._semitones == other._semitones)

    def __lt__(self, other: Interval) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return bool(self._semitones < other._semitones)

    def __hash__(self) -> int:
        return hash(self._semitones)

    def __repr__(self) -> str:
        return f"Interval({self._semitones})"


Interval.UNISON = Interval(0)
Interval.MINOR_SECOND = Interval(1)
Interval.MAJOR_SECOND = Interval(2)
Interval.MINOR_THIRD = Interval(3)
Interval.MAJOR_THIRD = Interval(4)
Interval.PERFECT_FOURTH = Interval(5)
Interval.TRITONE = Interval(6)
Interval.PERFECT_FIFTH = Interval(7)
Interval.OCTAVE = Interval(OCTAVE)


def check_key(key: int) -> int:
    """Return key unchanged, raising RangeError if it is not a valid MIDI key."""
    if not MIDI_MIN <= key <= MIDI_MAX:
        raise RangeError(ErrorMessages.PITCH_OUT_OF_RANGE.format(key=key))
    return key


@total_ordering
class Pitch:
    """
    A concrete pitch identified by its MIDI key (0-127).

    A key of 69 is A4 (concert A, 440 Hz), 60 is C4 (middle C).
    Octave, pitch class and display name are derived from the key.

    Pitches are mutable: transpose() shifts the key in place and fails
    with RangeError instead of clamping. Equality and ordering are by key.
    """

    __slots__ = ("_key",)

    def __init__(self, key: int) -> None:
        self._key = check_key(key)

    @property
    def key(self) -> int:
        """The MIDI key of this pitch."""
        return self._key

    @property
    def octave(self) -> int:
        """Octave number, -1 to 9."""
        return self._key // OCTAVE - 1

    @property
    def pitch_class(self) -> int:
        """Pitch class, 0 (C) to 11 (B)."""
        return self._key % OCTAVE

    @property
    def display_name(self) -> str:
        """Name with octave, e.g. 'C4' or 'F#2'."""
        return f"{NOTE_NAMES[self.pitch_class]}{self.octave}"

    def can_transpose(self, semitones: int) -> bool:
        """Whether transposing by semitones stays within 0-127."""
        return MIDI_MIN <= self._key + semitones <= MIDI_MAX

    def transpose(self, semitones: int) -> Pitch:
        """
        Transpose in place by a number of semitones.

        Raises:
            RangeError: If the result would leave 0-127 (pitch is unchanged)
        """
        if not self.can_transpose(semitones):
            raise RangeError(
                ErrorMessages.TRANSPOSE_OUT_OF_RANGE.format(key=self._key, semitones=semitones)
            )
        self._key += semitones
        return self

    def octave_shift(self, octaves: int) -> Pitch:
        """Transpose in place by whole octaves."""
        return self.transpose(OCTAVE * octaves)

    def compare_to(self, other: Pitch) -> int:
        """Signed difference of keys."""
        return self._key - other._key

    def copy(self) -> Pitch:
        """Independent copy with the same key."""
        return Pitch(self._key)

    @classmethod
    def parse(cls, name: str) -> Pitch:
        """Parse a pitch from a display name like 'C4', 'F#2' or 'C-1'."""
        match = _PITCH_NAME.match(name.strip())
        if match is None:
            raise ValidationError(ErrorMessages.UNKNOWN_PITCH_NAME.format(name=name))
        pitch_class = NOTE_NAMES.index(match.group(1))
        octave = int(match.group(2))
        return cls((octave + 1) * OCTAVE + pitch_class)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pitch):
            return NotImplemented
        return self._key == other._key

    def __lt__(self, other: Pitch) -> bool:
        if not isinstance(other, Pitch):
            return NotImplemented
        return self._key < other._key

    # Mutable, so not hashable
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Pitch({self._key})"

    def __str__(self) -> str:
        return self.display_name
