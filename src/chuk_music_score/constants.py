"""
Constants for the score model.

No magic numbers - MIDI ranges and defaults live here.
"""

# MIDI note/velocity range (7-bit data bytes)
MIDI_MIN = 0
MIDI_MAX = 127

# Semitones per octave
OCTAVE = 12

# Standard ticks per beat (quarter note) - industry standard
TICKS_PER_BEAT = 480

# Defaults used when building songs
DEFAULT_VELOCITY = 100
DEFAULT_CHANNEL = 0

# Display names indexed by pitch class (sharps only)
NOTE_NAMES: tuple[str, ...] = (
    "C",
    "C#",
    "D",
    "D#",
    "E",
    "F",
    "F#",
    "G",
    "G#",
    "A",
    "A#",
    "B",
)


class ErrorMessages:
    """Standardized error messages."""

    PITCH_OUT_OF_RANGE = "Pitch key must be 0-127, got {key}"
    TRANSPOSE_OUT_OF_RANGE = "Transposing {key} by {semitones} semitones leaves the range 0-127"
    VELOCITY_OUT_OF_RANGE = "Velocity must be 0-127, got {velocity}"
    NEGATIVE_TICK = "Start tick must be >= 0, got {tick}"
    INVERTED_INTERVAL = "End tick {end} is before start tick {start}"
    INVERSION_OUT_OF_RANGE = "Inversion index must be 0-{length}, got {index}"
    NOTE_INDEX_OUT_OF_RANGE = "Note index must be 0-{last}, got {index}"
    CHORD_INDEX_OUT_OF_RANGE = "Chord index must be 0-{last}, got {index}"
    DEGREE_OUT_OF_RANGE = "There are {count} degrees in {key}, from 1 to {count}, got {degree}"
    CHROMATIC_HARMONY = "The chromatic mode cannot be harmonized"
    NON_POSITIVE_RESOLUTION = "Resolution must be > 0, got {resolution}"
    NON_POSITIVE_LENGTH = "Length must be >= 0, got {length}"
    OUT_OF_ORDER = "Message at tick {tick} arrived after tick {previous}"
    UNKNOWN_PITCH_NAME = "Unknown pitch name: {name}"
    SILENT_NOTE_ON = (
        "Note-on for pitch {pitch} at tick {tick} has velocity 0, which MIDI reads as a note-off"
    )
    TRACK_OUT_OF_RANGE = "Track index must be 0-{last}, got {index}"
