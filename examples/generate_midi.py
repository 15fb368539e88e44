#!/usr/bin/env python3
"""
Example: Generate MIDI files from keys and chord progressions.

Run this script to create playable MIDI files you can open in any DAW,
then read one back to see the note reconstruction at work.

Usage:
    python examples/generate_midi.py
    # Creates: examples/output/pop_progression.mid
    #          examples/output/d_minor_bassline.mid
"""

from pathlib import Path

from chuk_music_score.compiler import Song, beats_to_ticks
from chuk_music_score.core import Chord, ChordProgression, Key, Mode, Pitch


def main() -> None:
    """Generate example MIDI files."""
    output_dir = Path(__file__).parent / "output"
    output_dir.mkdir(exist_ok=True)

    # Example 1: I-V-vi-IV in C, one chord per bar
    print("Generating pop_progression.mid...")
    song = create_pop_progression()
    path = song.save(output_dir / "pop_progression.mid")
    print(f"  Created: {path} ({len(song)} notes)")

    # Example 2: D minor bassline with an inverted chord pad
    print("\nGenerating d_minor_bassline.mid...")
    song = create_d_minor_bassline()
    path = song.save(output_dir / "d_minor_bassline.mid")
    print(f"  Created: {path} ({len(song)} notes)")

    # Example 3: Read a file back
    print("\nReloading pop_progression.mid...")
    loaded = Song.load(output_dir / "pop_progression.mid")
    print(f"  Resolution: {loaded.resolution}")
    print(f"  Notes: {len(loaded)}")
    if loaded.last_import is not None:
        print(f"  Dropped messages: {loaded.last_import.dropped}")

    print("\nDone! Open the MIDI files in your DAW to hear them.")


def create_pop_progression() -> Song:
    """
    I-V-vi-IV in C major, then the same progression up a whole step.

    This demonstrates:
    - Building chords from scale degrees
    - Transposing a whole progression
    """
    key = Key(Mode.MAJOR, Pitch.parse("C4"))
    progression = ChordProgression(key)
    for degree in (1, 5, 6, 4):
        progression.add_chord_by_degree(degree)

    bar = beats_to_ticks(4)
    song = Song()
    song.add_chord_progression(progression, start=0, chord_length=bar, velocity=90)

    progression.transpose(2)
    song.add_chord_progression(progression, start=4 * bar, chord_length=bar, velocity=90)
    return song


def create_d_minor_bassline() -> Song:
    """
    i-VI-III-VII in D minor: quarter note roots under a sustained pad.

    This demonstrates:
    - Explicit major/minor chords in a key
    - Chord inversion and octave shifts
    - Adding single pitches
    """
    key = Key(Mode.MINOR_NATURAL, Pitch.parse("D3"))
    progression = (
        ChordProgression(key)
        .add_minor_chord(Pitch.parse("D3"))
        .add_major_chord(Pitch.parse("A#2"))
        .add_major_chord(Pitch.parse("F3"))
        .add_major_chord(Pitch.parse("C3"))
    )

    beat = beats_to_ticks(1)
    bar = 4 * beat
    song = Song()

    for index, chord in enumerate(progression.chords):
        bar_start = index * bar
        pad = chord.copy().invert(1)
        song.add_chord(pad, bar_start, bar, velocity=70)

        bass = chord.root.octave_shift(-1)
        for step in range(4):
            # Slightly shorter for separation, accent on the downbeat
            song.add_pitch(bass, bar_start + step * beat, beat - 20, 100 if step == 0 else 80)

    # Stacked chord to finish: D minor triad over a low D fifth
    ending = Chord.stack(Chord(Pitch.parse("D2")).add_perfect_5(), key.get_chord_by_degree(1))
    song.add_chord(ending, 4 * bar, bar, velocity=85)
    return song


if __name__ == "__main__":
    main()
