#!/usr/bin/env python3
"""Render a chord to an audio file.

The chord is given either by name or as an explicit list of notes:

    python scripts/render_chord.py Abmaj7 -o abmaj7.wav
    python scripts/render_chord.py Ab4 C E --duration 2 --completion all
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from chord_player import ChordPlayer, CompletionMode, OfflineAudioContext


def main() -> None:
    """Run the chord rendering script."""
    parser = argparse.ArgumentParser(description="Render a chord name or note list to an audio file")
    parser.add_argument(
        "chord",
        nargs="+",
        help="Chord name (e.g. Cmaj7), or two or more note names (e.g. Ab4 C E)",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=Path("chord.wav"),
        help="Path to the rendered audio file",
    )
    parser.add_argument("--octave", type=int, default=None, help="Octave of the root or first note")
    parser.add_argument("--duration", type=float, default=None, help="Seconds each note plays for")
    parser.add_argument("--volume", type=float, default=None, help="Chord volume [0-1]")
    parser.add_argument("--sample-rate", type=int, default=44100, help="Output sample rate in Hz")
    parser.add_argument(
        "--completion",
        choices=[mode.value for mode in CompletionMode],
        default=CompletionMode.FIRST.value,
        help="Finish with the first note or with all notes",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log playback progress")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    spec = args.chord[0] if len(args.chord) == 1 else args.chord
    context = OfflineAudioContext(sample_rate=args.sample_rate)
    chord = ChordPlayer.build(spec, context, completion=args.completion)
    if chord is None:
        sys.exit(1)

    chord.set_octave(args.octave)
    chord.set_duration(args.duration)
    chord.set_volume(args.volume)
    chord.set_verbose(args.verbose)

    finished: list[float] = []
    if not chord.play(lambda: finished.append(context.current_time)):
        sys.exit(1)
    context.run()

    print(f"{chord.spec}: {' '.join(chord.get_chord_info())}")
    print(f"Finished after {finished[0]:.2f}s")
    print(f"Saved to {context.save(args.output)}")


if __name__ == "__main__":
    main()
