"""
Chord builder - an ordered stack of pitches.

Chords are built by stacking intervals on top of the last note.
All mutators work in place and return the same chord so calls chain:

    Chord(Pitch(60)).add_major_3().add_minor_3()   # C4 E4 G4
"""

from __future__ import annotations

from collections.abc import Callable, Iterator

from chuk_music_score.constants import OCTAVE, ErrorMessages
from chuk_music_score.core.pitch import Interval, Pitch
from chuk_music_score.errors import RangeError, ValidationError


class Chord:
    """
    A mutable, ordered, non-empty sequence of pitches.

    Reads hand out copies; only the chord's own methods change its notes.

    Order matters: inversion shifts notes by index and interval helpers
    stack on the last note. Pitches are not deduplicated.
    """

    __slots__ = ("_notes",)

    def __init__(self, root: Pitch | int) -> None:
        root_pitch = root.copy() if isinstance(root, Pitch) else Pitch(root)
        self._notes: list[Pitch] = [root_pitch]

    @property
    def notes(self) -> tuple[Pitch, ...]:
        """Copies of the notes in build order."""
        return tuple(note.copy() for note in self._notes)

    @property
    def keys(self) -> list[int]:
        """MIDI keys in build order."""
        return [note.key for note in self._notes]

    @property
    def root(self) -> Pitch:
        """Copy of the first note."""
        return self._notes[0].copy()

    @property
    def last(self) -> Pitch:
        """Copy of the note new intervals are stacked on."""
        return self._notes[-1].copy()

    # ------------------------------------------------------------------
    # Building
    # ------------------------------------------------------------------

    def append_note(self, pitch: Pitch | int) -> Chord:
        """Append a copy of a pitch after the last note."""
        self._notes.append(pitch.copy() if isinstance(pitch, Pitch) else Pitch(pitch))
        return self

    def append_interval(self, interval: Interval | int) -> Chord:
        """
        Append a note a number of semitones above the last note.

        Raises:
            RangeError: If the new note would leave 0-127
        """
        semitones = interval.semitones if isinstance(interval, Interval) else interval
        return self.append_note(self.last.transpose(semitones))

    def add_minor_2(self) -> Chord:
        return self.append_interval(Interval.MINOR_SECOND)

    def add_major_2(self) -> Chord:
        return self.append_interval(Interval.MAJOR_SECOND)

    def add_minor_3(self) -> Chord:
        return self.append_interval(Interval.MINOR_THIRD)

    def add_major_3(self) -> Chord:
        return self.append_interval(Interval.MAJOR_THIRD)

    def add_perfect_4(self) -> Chord:
        return self.append_interval(Interval.PERFECT_FOURTH)

    def add_tritone(self) -> Chord:
        return self.append_interval(Interval.TRITONE)

    def add_perfect_5(self) -> Chord:
        return self.append_interval(Interval.PERFECT_FIFTH)

    def append_major_triad(self) -> Chord:
        """Stack a major triad on the last note (M3 then m3)."""
        return self.add_major_3().add_minor_3()

    def append_minor_triad(self) -> Chord:
        """Stack a minor triad on the last note (m3 then M3)."""
        return self.add_minor_3().add_major_3()

    def append_diminished_triad(self) -> Chord:
        """Stack a diminished triad on the last note (m3 then m3)."""
        return self.add_minor_3().add_minor_3()

    # ------------------------------------------------------------------
    # Transformations
    # ------------------------------------------------------------------

    def modify_note(self, index: int, modification: Callable[[Pitch], Pitch]) -> Chord:
        """
        Replace the note at index with modification(note).

        Raises:
            ValidationError: If index is not a valid position
        """
        if not 0 <= index < len(self._notes):
            raise ValidationError(
                ErrorMessages.NOTE_INDEX_OUT_OF_RANGE.format(last=len(self._notes) - 1, index=index)
            )
        self._notes[index] = modification(self._notes[index])
        return self

    def invert(self, root_index: int) -> Chord:
        """
        Shift the first root_index notes up an octave, in index order.

        root_index == 0 leaves the chord unchanged; root_index == len(chord)
        shifts every note.

        Raises:
            ValidationError: If root_index is outside 0..len(chord)
            RangeError: If a shifted note would leave 0-127 (nothing is shifted)
        """
        if not 0 <= root_index <= len(self._notes):
            raise ValidationError(
                ErrorMessages.INVERSION_OUT_OF_RANGE.format(
                    length=len(self._notes), index=root_index
                )
            )
        shifted = self._notes[:root_index]
        _check_transposable(shifted, OCTAVE)
        for note in shifted:
            note.octave_shift(1)
        return self

    def transpose(self, semitones: int) -> Chord:
        """
        Transpose every note. All-or-nothing.

        Raises:
            RangeError: If any note would leave 0-127 (no note is changed)
        """
        _check_transposable(self._notes, semitones)
        for note in self._notes:
            note.transpose(semitones)
        return self

    def octave_shift(self, octaves: int) -> Chord:
        return self.transpose(OCTAVE * octaves)

    def can_transpose(self, semitones: int) -> bool:
        """Whether every note can be transposed by semitones."""
        return all(note.can_transpose(semitones) for note in self._notes)

    def copy(self) -> Chord:
        """Independent copy with the same notes in the same order."""
        chord = Chord(self._notes[0])
        for note in self._notes[1:]:
            chord.append_note(note)
        return chord

    def sorted_notes(self) -> list[Pitch]:
        """Copies of the notes ordered low to high. Does not reorder the chord."""
        return sorted(self.notes)

    @staticmethod
    def stack(bottom: Chord, top: Chord) -> Chord:
        """Append copies of top's notes onto bottom and return bottom."""
        for note in top._notes:
            bottom.append_note(note)
        return bottom

    def __len__(self) -> int:
        return len(self._notes)

    def __iter__(self) -> Iterator[Pitch]:
        return iter(self.notes)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Chord):
            return NotImplemented
        return self.keys == other.keys

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Chord({self.keys})"

    def __str__(self) -> str:
        return " ".join(note.display_name for note in self.sorted_notes())


def _check_transposable(notes: list[Pitch], semitones: int) -> None:
    """Raise RangeError if any note cannot move by semitones."""
    for note in notes:
        if not note.can_transpose(semitones):
            raise RangeError(
                ErrorMessages.TRANSPOSE_OUT_OF_RANGE.format(key=note.key, semitones=semitones)
            )
