"""
Core music primitives.

These are the building blocks everything else composes on:
- Pitch: A concrete MIDI key (0-127), transposable in place
- Interval: Distance between pitches in semitones
- Mode: Closed table of scale step patterns
- Scale: Pitches and harmonized triads derived from a mode and tonic
- Key: Mode + tonic, rebuilds its scale whenever it moves
- Chord: Ordered pitch stack with fluent interval building
- ChordProgression: Key + ordered chords
- TimedNote: A pitch with start/end ticks and velocity
"""

from chuk_music_score.core.chord import Chord
from chuk_music_score.core.mode import MODE_STEPS, Mode
from chuk_music_score.core.note import TimedNote
from chuk_music_score.core.pitch import Interval, Pitch
from chuk_music_score.core.progression import ChordProgression
from chuk_music_score.core.scale import DEGREE_TRIADS, Key, Scale

__all__ = [
    # Pitch
    "Pitch",
    "Interval",
    # Mode / scale
    "Mode",
    "MODE_STEPS",
    "Scale",
    "Key",
    "DEGREE_TRIADS",
    # Chord
    "Chord",
    "ChordProgression",
    # Time
    "TimedNote",
]
