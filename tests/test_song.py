"""
Tests for the Song container.

Tests cover:
- Adding notes, chords and progressions
- Export to message streams and MIDI files
- Import from message streams and MIDI files
"""

import logging
from pathlib import Path

import pytest

from chuk_music_score.compiler import MessageKind, NoteMessage, Song
from chuk_music_score.core import Chord, ChordProgression, Key, Pitch, TimedNote
from chuk_music_score.errors import ValidationError


def by_start(notes: list[TimedNote]) -> list[TimedNote]:
    return sorted(notes, key=lambda n: (n.start_tick, n.pitch, n.end_tick))


class TestSongBuilding:
    """Tests for adding material to a song."""

    def test_defaults(self) -> None:
        """A new song is empty at 480 ticks per beat."""
        song = Song()
        assert song.resolution == 480
        assert song.notes == []
        assert len(song) == 0

    def test_invalid_resolution(self) -> None:
        """Resolution must be positive."""
        with pytest.raises(ValidationError):
            Song(resolution=0)

    def test_add_note_keeps_insertion_order(self) -> None:
        """Notes are not sorted by tick."""
        song = Song().add_pitch(Pitch(60), 480, 480, 90).add_pitch(62, 0, 480)
        assert song.notes == [TimedNote(60, 480, 960, 90), TimedNote(62, 0, 480, 100)]

    def test_add_note(self) -> None:
        """add_note stores a timed note as is."""
        note = TimedNote(60, 0, 480, 100)
        assert Song().add_note(note).notes == [note]

    def test_add_pitch_negative_length(self) -> None:
        """Lengths cannot be negative."""
        with pytest.raises(ValidationError):
            Song().add_pitch(60, 0, -1)

    def test_notes_is_a_copy(self) -> None:
        """Changing the returned list does not change the song."""
        song = Song().add_pitch(60, 0, 480)
        song.notes.clear()
        assert len(song) == 1

    def test_add_chord(self) -> None:
        """Each chord pitch becomes a note with the same timing."""
        chord = Chord(60).append_major_triad()
        song = Song().add_chord(chord, 240, 480, 70)
        assert song.notes == [
            TimedNote(60, 240, 720, 70),
            TimedNote(64, 240, 720, 70),
            TimedNote(67, 240, 720, 70),
        ]

    def test_add_chord_progression(self, c_major: Key) -> None:
        """Chords are placed back to back."""
        progression = ChordProgression(c_major).add_chord_by_degree(1).add_chord_by_degree(5)
        song = Song().add_chord_progression(progression, start=960, chord_length=480)

        assert len(song) == 6
        assert {n.start_tick for n in song.notes[:3]} == {960}
        assert {n.start_tick for n in song.notes[3:]} == {1440}
        assert {n.end_tick for n in song.notes[3:]} == {1920}
        assert [n.pitch for n in song.notes[3:]] == [67, 71, 74]

    def test_str_sorted_by_start(self) -> None:
        """str() lists notes by start tick."""
        song = Song().add_pitch(64, 480, 10).add_pitch(60, 0, 10)
        assert str(song).splitlines()[0].startswith("C4")


class TestSongExport:
    """Tests for exporting songs."""

    def test_to_messages(self) -> None:
        """Notes serialize into an ordered stream."""
        song = Song().add_pitch(64, 480, 480).add_pitch(60, 0, 480)
        assert [(m.kind, m.pitch, m.tick) for m in song.to_messages()] == [
            (MessageKind.NOTE_ON, 60, 0),
            (MessageKind.NOTE_OFF, 60, 480),
            (MessageKind.NOTE_ON, 64, 480),
            (MessageKind.NOTE_OFF, 64, 960),
        ]

    def test_to_midi_uses_resolution(self) -> None:
        """The MIDI file carries the song resolution."""
        assert Song(resolution=96).to_midi().ticks_per_beat == 96

    def test_save_and_load(self, temp_midi_path: Path, c_major: Key) -> None:
        """A saved song loads back with the same notes and resolution."""
        song = Song(resolution=960)
        song.add_chord_progression(c_major.progression(), start=0, chord_length=1920, velocity=90)
        song.add_pitch(48, 0, 1920 * 7, 110)

        path = song.save(temp_midi_path)
        assert path.exists()

        loaded = Song.load(temp_midi_path)
        assert loaded.resolution == 960
        assert by_start(loaded.notes) == by_start(song.notes)
        assert loaded.last_import is not None
        assert loaded.last_import.dropped == 0

    def test_save_rejects_silent_note(self, temp_midi_path: Path) -> None:
        """A velocity-0 note fails to save instead of vanishing on load."""
        song = Song().add_note(TimedNote(60, 0, 480, 0))
        assert song.to_messages()[0].velocity == 0

        with pytest.raises(ValidationError):
            song.save(temp_midi_path)
        assert not temp_midi_path.exists()


class TestSongImport:
    """Tests for importing songs."""

    def test_from_messages(self) -> None:
        """Messages rebuild notes and keep the given resolution."""
        messages = [
            NoteMessage(kind="note_on", pitch=60, velocity=90, tick=0),
            NoteMessage(kind="note_on", pitch=60, velocity=80, tick=10),
            NoteMessage(kind="note_off", pitch=60, velocity=0, tick=20),
            NoteMessage(kind="note_off", pitch=60, velocity=0, tick=30),
        ]
        song = Song.from_messages(messages, resolution=240)
        assert song.resolution == 240
        assert song.notes == [TimedNote(60, 0, 20, 90), TimedNote(60, 10, 30, 80)]

    def test_from_messages_reports_drops(self, caplog: pytest.LogCaptureFixture) -> None:
        """Orphaned messages are dropped, counted and logged."""
        messages = [
            NoteMessage(kind="note_off", pitch=62, velocity=0, tick=0),
            NoteMessage(kind="note_on", pitch=60, velocity=90, tick=0),
            NoteMessage(kind="note_on", pitch=64, velocity=90, tick=0),
            NoteMessage(kind="note_off", pitch=60, velocity=0, tick=480),
        ]
        with caplog.at_level(logging.INFO, logger="chuk_music_score"):
            song = Song.from_messages(messages, resolution=480)

        assert song.notes == [TimedNote(60, 0, 480, 90)]
        assert song.last_import is not None
        assert song.last_import.orphan_offs == 1
        assert song.last_import.unmatched_ons == 1
        assert "dropped 1 orphan note-offs and 1 unclosed note-ons" in caplog.text

    def test_from_midi(self) -> None:
        """The resolution comes from the MIDI file."""
        midi = Song(resolution=384).add_pitch(72, 0, 384).to_midi()
        song = Song.from_midi(midi)
        assert song.resolution == 384
        assert song.notes == [TimedNote(72, 0, 384, 100)]
