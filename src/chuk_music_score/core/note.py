"""
Timed notes - a pitch placed in time.

A TimedNote does not replace Pitch; it only gives one a start, an end and
a velocity so it can be written to a MIDI track.
"""

from __future__ import annotations

from dataclasses import dataclass

from chuk_music_score.constants import MIDI_MAX, MIDI_MIN, ErrorMessages
from chuk_music_score.core.pitch import Pitch, check_key
from chuk_music_score.errors import ValidationError


@dataclass(frozen=True)
class TimedNote:
    """
    A single note in ticks (absolute from start of track).

    Immutable and hashable. end_tick may equal start_tick.
    """

    pitch: int  # MIDI key (0-127)
    start_tick: int
    end_tick: int
    velocity: int  # 0-127

    def __post_init__(self) -> None:
        """Validate MIDI ranges and the tick interval."""
        if isinstance(self.pitch, Pitch):
            object.__setattr__(self, "pitch", self.pitch.key)
        check_key(self.pitch)
        if not MIDI_MIN <= self.velocity <= MIDI_MAX:
            raise ValidationError(ErrorMessages.VELOCITY_OUT_OF_RANGE.format(velocity=self.velocity))
        if self.start_tick < 0:
            raise ValidationError(ErrorMessages.NEGATIVE_TICK.format(tick=self.start_tick))
        if self.end_tick < self.start_tick:
            raise ValidationError(
                ErrorMessages.INVERTED_INTERVAL.format(start=self.start_tick, end=self.end_tick)
            )

    @classmethod
    def from_length(
        cls, pitch: Pitch | int, start_tick: int, length: int, velocity: int
    ) -> TimedNote:
        """Create a note from a start tick and a length in ticks."""
        if length < 0:
            raise ValidationError(ErrorMessages.NON_POSITIVE_LENGTH.format(length=length))
        key = pitch.key if isinstance(pitch, Pitch) else pitch
        return cls(key, start_tick, start_tick + length, velocity)

    @property
    def length(self) -> int:
        """Length in ticks."""
        return self.end_tick - self.start_tick

    def to_pitch(self) -> Pitch:
        """A new Pitch for this note's key."""
        return Pitch(self.pitch)

    def __str__(self) -> str:
        return f"{Pitch(self.pitch)} [{self.start_tick}-{self.end_tick}] vel={self.velocity}"
