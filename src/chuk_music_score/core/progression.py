"""
Chord progressions - ordered chords in a key.

If a progression has no key, use the chromatic mode for it; degree-based
chords are then unavailable.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator

from chuk_music_score.constants import OCTAVE, ErrorMessages
from chuk_music_score.core.chord import Chord
from chuk_music_score.core.pitch import Pitch
from chuk_music_score.core.scale import Key
from chuk_music_score.errors import RangeError, ValidationError


class ChordProgression:
    """
    A key plus an ordered list of chords.

    The progression owns a copy of the key passed in, and copies of the
    chords added to it, so transposing the progression never reaches
    objects the caller still holds. Reads hand out copies as well.
    """

    __slots__ = ("_key", "_chords")

    def __init__(self, key: Key) -> None:
        self._key = key.copy()
        self._chords: list[Chord] = []

    @property
    def key(self) -> Key:
        """Copy of the key; transpose the progression to move it."""
        return self._key.copy()

    @property
    def chords(self) -> tuple[Chord, ...]:
        return tuple(chord.copy() for chord in self._chords)

    def add_chord(self, chord: Chord) -> ChordProgression:
        """Append a copy of chord to the end of the progression."""
        self._chords.append(chord.copy())
        return self

    def add_chord_by_degree(self, degree: int) -> ChordProgression:
        """
        Append the key's harmonized triad on a scale degree.

        Raises:
            UnsupportedOperationError: If the key is chromatic
            ValidationError: If the degree is out of range
        """
        return self.add_chord(self._key.get_chord_by_degree(degree))

    def add_major_chord(self, root: Pitch | int) -> ChordProgression:
        return self.add_chord(Chord(root).append_major_triad())

    def add_minor_chord(self, root: Pitch | int) -> ChordProgression:
        return self.add_chord(Chord(root).append_minor_triad())

    def modify_chord(self, index: int, modification: Callable[[Chord], Chord]) -> ChordProgression:
        """
        Replace the chord at index with modification(chord).

        Raises:
            ValidationError: If index is not a valid position
        """
        if not 0 <= index < len(self._chords):
            raise ValidationError(
                ErrorMessages.CHORD_INDEX_OUT_OF_RANGE.format(
                    last=len(self._chords) - 1, index=index
                )
            )
        self._chords[index] = modification(self._chords[index])
        return self

    def transpose(self, semitones: int) -> ChordProgression:
        """
        Transpose the key, then every chord in order. All-or-nothing.

        Raises:
            RangeError: If the key or any chord would leave 0-127
                (nothing is changed)
        """
        for chord in self._chords:
            if not chord.can_transpose(semitones):
                raise RangeError(
                    ErrorMessages.TRANSPOSE_OUT_OF_RANGE.format(key=chord.keys, semitones=semitones)
                )
        self._key.transpose(semitones)
        for chord in self._chords:
            chord.transpose(semitones)
        return self

    def octave_shift(self, octaves: int) -> ChordProgression:
        return self.transpose(OCTAVE * octaves)

    def __len__(self) -> int:
        return len(self._chords)

    def __iter__(self) -> Iterator[Chord]:
        return iter(self.chords)

    def __repr__(self) -> str:
        return f"ChordProgression({self._key!r}, {[c.keys for c in self._chords]})"

    def __str__(self) -> str:
        chords = ", ".join(f"[{chord}]" for chord in self._chords)
        return f"{self._key}: {chords}"
