"""
chuk-music-score - a music theory value model with MIDI import/export.

Build pitches, chords, keys and progressions, place them in a Song, and
convert the song to and from note-on/note-off message streams.
"""

from chuk_music_score.compiler import (
    MessageKind,
    NoteMessage,
    NoteReconstructor,
    ReconstructionResult,
    Song,
    messages_to_notes,
    notes_to_messages,
)
from chuk_music_score.core import (
    Chord,
    ChordProgression,
    Interval,
    Key,
    Mode,
    Pitch,
    Scale,
    TimedNote,
)
from chuk_music_score.errors import (
    MusicScoreError,
    RangeError,
    UnsupportedOperationError,
    ValidationError,
)

__version__ = "0.1.0"

__all__ = [
    "Chord",
    "ChordProgression",
    "Interval",
    "Key",
    "MessageKind",
    "Mode",
    "MusicScoreError",
    "NoteMessage",
    "NoteReconstructor",
    "Pitch",
    "RangeError",
    "ReconstructionResult",
    "Scale",
    "Song",
    "TimedNote",
    "UnsupportedOperationError",
    "ValidationError",
    "messages_to_notes",
    "notes_to_messages",
]
