"""
Compilation pipeline - timed notes to MIDI and back.

The pipeline:
    Chord / ChordProgression → Song (TimedNotes)
    → NoteMessage stream (note_on / note_off at absolute ticks)
    → MIDI File (via mido)

and in reverse, MIDI File → NoteMessage stream → NoteReconstructor → Song.
"""

from chuk_music_score.compiler.events import (
    MessageKind,
    NoteMessage,
    NoteReconstructor,
    ReconstructionResult,
    messages_to_notes,
    notes_to_messages,
    reconstruct,
)
from chuk_music_score.compiler.midi import beats_to_ticks, messages_to_midi, midi_to_messages
from chuk_music_score.compiler.song import Song

__all__ = [
    # Events
    "MessageKind",
    "NoteMessage",
    "NoteReconstructor",
    "ReconstructionResult",
    "messages_to_notes",
    "notes_to_messages",
    "reconstruct",
    # MIDI
    "beats_to_ticks",
    "messages_to_midi",
    "midi_to_messages",
    # Song
    "Song",
]
