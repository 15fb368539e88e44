"""
Scale primitives - Scale and Key.

A key is a mode applied to a concrete tonic pitch. Its scale is derived:
the pitches from tonic to octave, plus one harmonized triad per degree.
The scale is rebuilt from scratch every time the key changes.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from chuk_music_score.constants import OCTAVE, ErrorMessages
from chuk_music_score.core.chord import Chord
from chuk_music_score.core.mode import Mode
from chuk_music_score.core.pitch import Pitch
from chuk_music_score.errors import UnsupportedOperationError, ValidationError

if TYPE_CHECKING:
    from chuk_music_score.core.progression import ChordProgression


# Triad quality per scale degree. Valid for the major scale and its
# rotations; it is not re-derived from a mode's own intervals.
DEGREE_TRIADS: dict[int, Callable[[Chord], Chord]] = {
    1: Chord.append_major_triad,
    2: Chord.append_minor_triad,
    3: Chord.append_minor_triad,
    4: Chord.append_major_triad,
    5: Chord.append_major_triad,
    6: Chord.append_minor_triad,
    7: Chord.append_diminished_triad,
}


class Scale:
    """
    Read-only scale derived from a mode and a tonic.

    pitches runs from the tonic to tonic + sum(steps), so a seven-step
    mode yields eight pitches. chords holds one triad per degree and is
    empty for the chromatic mode.
    """

    __slots__ = ("_mode", "_pitches", "_chords")

    def __init__(self, mode: Mode, pitches: list[Pitch], chords: list[Chord]) -> None:
        self._mode = mode
        self._pitches = tuple(pitches)
        self._chords = tuple(chords)

    @classmethod
    def generate(cls, mode: Mode, tonic: Pitch) -> Scale:
        """
        Build the scale for a mode starting on tonic.

        Raises:
            RangeError: If a scale pitch or chord tone would leave 0-127
        """
        pitches = [tonic.copy()]
        for step in mode.steps:
            pitches.append(pitches[-1].copy().transpose(step))

        chords: list[Chord] = []
        if mode.is_harmonizable:
            for degree, pitch in enumerate(pitches, start=1):
                build = DEGREE_TRIADS.get(degree)
                if build is not None:
                    chords.append(build(Chord(pitch)))

        return cls(mode, pitches, chords)

    @property
    def mode(self) -> Mode:
        return self._mode

    @property
    def pitches(self) -> list[Pitch]:
        """Copies of the scale pitches, tonic first."""
        return [pitch.copy() for pitch in self._pitches]

    @property
    def keys(self) -> list[int]:
        return [pitch.key for pitch in self._pitches]

    @property
    def chords(self) -> list[Chord]:
        """Copies of the harmonized triads, degree 1 first."""
        return [chord.copy() for chord in self._chords]

    @property
    def degree_count(self) -> int:
        """Number of scale degrees (one per step)."""
        return len(self._mode.steps)

    def chord_at(self, degree: int) -> Chord:
        """Copy of the triad on a 1-based degree."""
        return self._chords[degree - 1].copy()

    def __len__(self) -> int:
        return len(self._pitches)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Scale):
            return NotImplemented
        return (
            self._mode is other._mode
            and self.keys == other.keys
            and [c.keys for c in self._chords] == [c.keys for c in other._chords]
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Scale({self._mode.value}, {self.keys})"

    def __str__(self) -> str:
        return " ".join(pitch.display_name for pitch in self._pitches)


class Key:
    """
    A mode plus a tonic pitch.

    This is the context for resolving scale degrees to chords.

    Examples:
        Key(Mode.IONIAN, Pitch(60))   = C4 ionian
        Key(Mode.AEOLIAN, Pitch(57))  = A3 aeolian
    """

    __slots__ = ("_mode", "_tonic", "_scale")

    def __init__(self, mode: Mode, tonic: Pitch | int) -> None:
        self._mode = mode
        self._tonic = tonic.copy() if isinstance(tonic, Pitch) else Pitch(tonic)
        self._scale = Scale.generate(self._mode, self._tonic)

    @property
    def mode(self) -> Mode:
        return self._mode

    @property
    def tonic(self) -> Pitch:
        """Copy of the tonic."""
        return self._tonic.copy()

    @property
    def scale(self) -> Scale:
        return self._scale

    def transpose(self, semitones: int) -> Key:
        """
        Move the tonic and rebuild the scale.

        Raises:
            RangeError: If the tonic or the rebuilt scale would leave 0-127
                (the key is unchanged)
        """
        tonic = self._tonic.copy().transpose(semitones)
        scale = Scale.generate(self._mode, tonic)
        self._tonic = tonic
        self._scale = scale
        return self

    def octave_shift(self, octaves: int) -> Key:
        return self.transpose(OCTAVE * octaves)

    def get_chord_by_degree(self, degree: int) -> Chord:
        """
        Get the harmonized triad on a 1-based scale degree.

        Returns a copy; the scale itself is never modified.

        Raises:
            UnsupportedOperationError: If the mode is chromatic
            ValidationError: If degree is outside 1..degree_count
        """
        if not self._mode.is_harmonizable:
            raise UnsupportedOperationError(ErrorMessages.CHROMATIC_HARMONY)
        count = self._scale.degree_count
        if not 1 <= degree <= count:
            raise ValidationError(
                ErrorMessages.DEGREE_OUT_OF_RANGE.format(count=count, key=self, degree=degree)
            )
        return self._scale.chord_at(degree)

    def progression(self) -> ChordProgression:
        """The harmonized triads as a progression in a copy of this key."""
        from chuk_music_score.core.progression import ChordProgression

        result = ChordProgression(self)
        for chord in self._scale.chords:
            result.add_chord(chord)
        return result

    def copy(self) -> Key:
        return Key(self._mode, self._tonic)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Key):
            return NotImplemented
        return self._mode is other._mode and self._tonic == other._tonic

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Key({self._mode!r}, {self._tonic!r})"

    def __str__(self) -> str:
        return f"{self._tonic.display_name} {self._mode!s}"
