"""
Note events - converting timed notes to and from note-on/note-off messages.

Serializing is stateless: every note becomes one note-on at its start and
one note-off at its end, and the stream is ordered by tick.

Deserializing is a small state machine. Open note-ons wait in a pending
list until a note-off of the same pitch closes them. A note-off closes the
first pending entry with its pitch, in arrival order. Note-offs with no
pending match and note-ons still open at the end of the stream are
dropped; they are counted but never raise.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, Field

from chuk_music_score.constants import ErrorMessages
from chuk_music_score.core.note import TimedNote
from chuk_music_score.errors import ValidationError

logger = logging.getLogger(__name__)

# Sort order for messages sharing a tick: notes that are ending release
# first so a retriggered pitch closes before it reopens; a zero-length
# note's note-off sorts after its own note-on.
_RANK_OFF = 0
_RANK_ON = 1
_RANK_OFF_EMPTY = 2


class MessageKind(str, Enum):
    """Channel message types the engine understands."""

    NOTE_ON = "note_on"
    NOTE_OFF = "note_off"


class NoteMessage(BaseModel):
    """
    A single note-on or note-off at an absolute tick.

    This is the record shape exchanged with the MIDI container layer.
    """

    kind: MessageKind = Field(..., description="note_on or note_off")
    pitch: int = Field(..., ge=0, le=127, description="MIDI note number")
    velocity: int = Field(..., ge=0, le=127, description="Velocity")
    tick: int = Field(..., ge=0, description="Absolute position in ticks")

    model_config = {"frozen": True}

    @property
    def is_note_on(self) -> bool:
        return self.kind == MessageKind.NOTE_ON


def notes_to_messages(notes: Iterable[TimedNote]) -> list[NoteMessage]:
    """
    Serialize timed notes into a tick-ordered message stream.

    Both messages of a note carry the note's pitch and velocity.
    Messages at the same tick keep note-offs ahead of note-ons, and
    otherwise keep input order, so output is deterministic.
    """
    ranked: list[tuple[int, int, NoteMessage]] = []
    for note in notes:
        ranked.append(
            (
                note.start_tick,
                _RANK_ON,
                NoteMessage(
                    kind=MessageKind.NOTE_ON,
                    pitch=note.pitch,
                    velocity=note.velocity,
                    tick=note.start_tick,
                ),
            )
        )
        ranked.append(
            (
                note.end_tick,
                _RANK_OFF if note.length > 0 else _RANK_OFF_EMPTY,
                NoteMessage(
                    kind=MessageKind.NOTE_OFF,
                    pitch=note.pitch,
                    velocity=note.velocity,
                    tick=note.end_tick,
                ),
            )
        )

    ranked.sort(key=lambda entry: (entry[0], entry[1]))
    return [message for _, _, message in ranked]


@dataclass
class _PendingNote:
    """A note-on still waiting for its note-off."""

    pitch: int
    start_tick: int
    velocity: int


@dataclass(frozen=True)
class ReconstructionResult:
    """Notes rebuilt from a message stream, plus what was dropped."""

    notes: tuple[TimedNote, ...] = ()
    orphan_offs: int = 0  # note-offs with no open note-on
    unmatched_ons: int = 0  # note-ons never closed

    @property
    def dropped(self) -> int:
        return self.orphan_offs + self.unmatched_ons


class NoteReconstructor:
    """
    Pairs note-on and note-off messages into TimedNotes.

    Feed messages in non-decreasing tick order, then call finish().
    Each note-off closes the first pending note-on with the same pitch;
    with overlapping same-pitch notes this is not guaranteed to match a
    FIFO or LIFO reading of the performance.
    """

    def __init__(self) -> None:
        self._pending: list[_PendingNote] = []
        self._notes: list[TimedNote] = []
        self._last_tick = 0
        self._orphan_offs = 0

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    def feed(self, message: NoteMessage) -> TimedNote | None:
        """
        Consume one message.

        Returns:
            The completed note when message closes one, otherwise None

        Raises:
            ValidationError: If message is earlier than the previous one
        """
        if message.tick < self._last_tick:
            raise ValidationError(
                ErrorMessages.OUT_OF_ORDER.format(tick=message.tick, previous=self._last_tick)
            )
        self._last_tick = message.tick

        if message.is_note_on:
            self._pending.append(_PendingNote(message.pitch, message.tick, message.velocity))
            return None

        for index, pending in enumerate(self._pending):
            if pending.pitch == message.pitch:
                del self._pending[index]
                # The note-off velocity is discarded in favour of the note-on's
                note = TimedNote(
                    pitch=pending.pitch,
                    start_tick=pending.start_tick,
                    end_tick=message.tick,
                    velocity=pending.velocity,
                )
                self._notes.append(note)
                return note

        self._orphan_offs += 1
        logger.debug(
            "Dropping note-off without note-on: pitch %d at tick %d", message.pitch, message.tick
        )
        return None

    def finish(self) -> ReconstructionResult:
        """Discard still-open note-ons and return the rebuilt notes."""
        unmatched = len(self._pending)
        for pending in self._pending:
            logger.debug(
                "Dropping unclosed note-on: pitch %d at tick %d", pending.pitch, pending.start_tick
            )
        self._pending.clear()

        result = ReconstructionResult(
            notes=tuple(self._notes),
            orphan_offs=self._orphan_offs,
            unmatched_ons=unmatched,
        )
        if result.dropped:
            logger.info(
                "Rebuilt %d notes, dropped %d orphan note-offs and %d unclosed note-ons",
                len(result.notes),
                result.orphan_offs,
                result.unmatched_ons,
            )
        return result


def reconstruct(messages: Iterable[NoteMessage]) -> ReconstructionResult:
    """Deserialize a tick-ordered message stream, with drop diagnostics."""
    reconstructor = NoteReconstructor()
    for message in messages:
        reconstructor.feed(message)
    return reconstructor.finish()


def messages_to_notes(messages: Iterable[NoteMessage]) -> list[TimedNote]:
    """
    Deserialize a tick-ordered message stream into timed notes.

    Notes are returned in the order they were closed.
    """
    return list(reconstruct(messages).notes)
