"""
Song container - timed notes plus a resolution.

A song keeps its notes in insertion order. Export goes through
notes_to_messages and import through the note reconstructor, with mido
handling the file itself.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from mido import MidiFile

from chuk_music_score.compiler.events import (
    NoteMessage,
    ReconstructionResult,
    notes_to_messages,
    reconstruct,
)
from chuk_music_score.compiler.midi import messages_to_midi, midi_to_messages
from chuk_music_score.constants import DEFAULT_VELOCITY, TICKS_PER_BEAT, ErrorMessages
from chuk_music_score.core.note import TimedNote
from chuk_music_score.errors import ValidationError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from chuk_music_score.core.chord import Chord
    from chuk_music_score.core.pitch import Pitch
    from chuk_music_score.core.progression import ChordProgression

logger = logging.getLogger(__name__)


class Song:
    """
    A flat list of timed notes at a fixed resolution.

    Notes are not sorted; overlapping notes of the same pitch are allowed.

    Example:
        song = Song(resolution=480)
        song.add_chord_progression(key.progression(), start=0, chord_length=1920)
        song.save("progression.mid")
    """

    def __init__(self, resolution: int = TICKS_PER_BEAT) -> None:
        """
        Args:
            resolution: Ticks per quarter note
        """
        if resolution <= 0:
            raise ValidationError(
                ErrorMessages.NON_POSITIVE_RESOLUTION.format(resolution=resolution)
            )
        self._resolution = resolution
        self._notes: list[TimedNote] = []
        self.last_import: ReconstructionResult | None = None

    @property
    def resolution(self) -> int:
        return self._resolution

    @property
    def notes(self) -> list[TimedNote]:
        """Copy of the notes in insertion order."""
        return list(self._notes)

    # ------------------------------------------------------------------
    # Building
    # ------------------------------------------------------------------

    def add_note(self, note: TimedNote) -> Song:
        self._notes.append(note)
        return self

    def add_pitch(
        self,
        pitch: Pitch | int,
        start: int,
        length: int,
        velocity: int = DEFAULT_VELOCITY,
    ) -> Song:
        """Add a pitch starting at start and lasting length ticks."""
        return self.add_note(TimedNote.from_length(pitch, start, length, velocity))

    def add_chord(
        self,
        chord: Chord,
        start: int,
        length: int,
        velocity: int = DEFAULT_VELOCITY,
    ) -> Song:
        """Add every note of chord with the same start, length and velocity."""
        for pitch in chord.notes:
            self.add_pitch(pitch, start, length, velocity)
        return self

    def add_chord_progression(
        self,
        progression: ChordProgression,
        start: int,
        chord_length: int,
        velocity: int = DEFAULT_VELOCITY,
    ) -> Song:
        """Add the chords back to back: chord i starts at start + i * chord_length."""
        for index, chord in enumerate(progression.chords):
            self.add_chord(chord, start + index * chord_length, chord_length, velocity)
        return self

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------

    def to_messages(self) -> list[NoteMessage]:
        """Serialize the notes into a tick-ordered message stream."""
        return notes_to_messages(self._notes)

    def to_midi(self) -> MidiFile:
        """Build a single-track mido MidiFile."""
        return messages_to_midi(self.to_messages(), ticks_per_beat=self._resolution)

    def save(self, path: str | Path) -> Path:
        """
        Write the song to a standard MIDI file.

        Raises:
            ValidationError: If a note has velocity 0 (nothing is written)
        """
        path = Path(path)
        self.to_midi().save(str(path))
        logger.info("Saved %d notes to %s", len(self._notes), path)
        return path

    # ------------------------------------------------------------------
    # Import
    # ------------------------------------------------------------------

    @classmethod
    def from_messages(cls, messages: Iterable[NoteMessage], resolution: int) -> Song:
        """
        Rebuild a song from a tick-ordered message stream.

        Unpaired messages are dropped; see song.last_import for counts.
        """
        song = cls(resolution)
        result = reconstruct(messages)
        for note in result.notes:
            song.add_note(note)
        song.last_import = result
        return song

    @classmethod
    def from_midi(cls, mid: MidiFile, track_index: int | None = None) -> Song:
        """Rebuild a song from one track of a mido MidiFile."""
        return cls.from_messages(midi_to_messages(mid, track_index), mid.ticks_per_beat)

    @classmethod
    def load(cls, path: str | Path, track_index: int | None = None) -> Song:
        """Read a standard MIDI file."""
        song = cls.from_midi(MidiFile(str(path)), track_index)
        logger.info("Loaded %d notes from %s", len(song), path)
        return song

    def __len__(self) -> int:
        return len(self._notes)

    def __repr__(self) -> str:
        return f"Song(resolution={self._resolution}, notes={len(self._notes)})"

    def __str__(self) -> str:
        ordered = sorted(self._notes, key=lambda note: note.start_tick)
        return "\n".join(str(note) for note in ordered)
