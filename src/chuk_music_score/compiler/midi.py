"""
MIDI bridge - message streams to and from mido.

This module only deals with MIDI container details: delta times, the
single track, and note-on messages with velocity 0. Pairing note-ons
with note-offs is the job of compiler.events.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from mido import Message, MetaMessage, MidiFile, MidiTrack

from chuk_music_score.compiler.events import MessageKind, NoteMessage
from chuk_music_score.constants import DEFAULT_CHANNEL, TICKS_PER_BEAT, ErrorMessages
from chuk_music_score.errors import ValidationError

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)


def messages_to_midi(
    messages: Sequence[NoteMessage],
    ticks_per_beat: int = TICKS_PER_BEAT,
    channel: int = DEFAULT_CHANNEL,
) -> MidiFile:
    """
    Write a tick-ordered message stream into a single-track MidiFile.

    Args:
        messages: Messages ordered by absolute tick
        ticks_per_beat: Resolution (default 480)
        channel: MIDI channel for every message

    Returns:
        A mido MidiFile ready to be saved

    Raises:
        ValidationError: If the resolution is not positive, messages go
            back in time, or a note-on has velocity 0

    This function is deterministic: same messages → same MIDI file.
    """
    if ticks_per_beat <= 0:
        raise ValidationError(
            ErrorMessages.NON_POSITIVE_RESOLUTION.format(resolution=ticks_per_beat)
        )

    mid = MidiFile(ticks_per_beat=ticks_per_beat)
    track = MidiTrack()
    mid.tracks.append(track)

    # Convert to delta times
    current_time = 0
    for message in messages:
        delta = message.tick - current_time
        if delta < 0:
            raise ValidationError(
                ErrorMessages.OUT_OF_ORDER.format(tick=message.tick, previous=current_time)
            )
        # A velocity-0 note-on is a note-off on the wire
        if message.is_note_on and message.velocity == 0:
            raise ValidationError(
                ErrorMessages.SILENT_NOTE_ON.format(pitch=message.pitch, tick=message.tick)
            )
        track.append(
            Message(
                message.kind.value,
                channel=channel,
                note=message.pitch,
                velocity=message.velocity,
                time=delta,
            )
        )
        current_time = message.tick

    # End of track
    track.append(MetaMessage("end_of_track", time=0))

    logger.debug("Wrote %d note messages at %d ticks per beat", len(messages), ticks_per_beat)
    return mid


def _note_track(mid: MidiFile) -> MidiTrack | None:
    """First track that carries note messages."""
    for track in mid.tracks:
        if any(msg.type in ("note_on", "note_off") for msg in track):
            return track
    return None


def midi_to_messages(mid: MidiFile, track_index: int | None = None) -> list[NoteMessage]:
    """
    Read the note messages of one track as absolute-tick records.

    Args:
        mid: A loaded mido MidiFile
        track_index: Track to read; defaults to the first track with notes

    Returns:
        Messages in track order. A note-on with velocity 0 is read as a
        note-off. Everything other than notes is skipped.

    Raises:
        ValidationError: If track_index is not a track of mid
    """
    if track_index is None:
        track = _note_track(mid)
        if track is None:
            return []
    elif 0 <= track_index < len(mid.tracks):
        track = mid.tracks[track_index]
    else:
        raise ValidationError(
            ErrorMessages.TRACK_OUT_OF_RANGE.format(last=len(mid.tracks) - 1, index=track_index)
        )

    if len(mid.tracks) > 1:
        logger.info("Reading 1 of %d tracks", len(mid.tracks))

    messages: list[NoteMessage] = []
    tick = 0
    for msg in track:
        tick += msg.time
        if msg.type == "note_on" and msg.velocity > 0:
            kind = MessageKind.NOTE_ON
        elif msg.type == "note_off" or msg.type == "note_on":
            kind = MessageKind.NOTE_OFF
        else:
            continue
        messages.append(NoteMessage(kind=kind, pitch=msg.note, velocity=msg.velocity, tick=tick))

    return messages


def beats_to_ticks(beats: float, ticks_per_beat: int = TICKS_PER_BEAT) -> int:
    """Convert a beat position to ticks."""
    return int(beats * ticks_per_beat)
