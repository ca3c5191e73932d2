"""Pitch class tables and note-name operations.

This module holds the fixed lookup tables used to turn chord names and
note tokens into canonical, sharp-spelled pitch classes, and the chord
quality table mapping each quality to its semitone offsets from the root.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from chord_player.errors import UnknownRootError

# Sharp-only spelling, index is the pitch class (C=0)
CANONICAL_NOTES: tuple[str, ...] = ("C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B")

NOTES_PER_OCTAVE = len(CANONICAL_NOTES)

A4_FREQUENCY = 440.0

# Spellings translated before lookup: every flat, plus the two sharps
# that land on a natural
ENHARMONIC_SPELLINGS: Mapping[str, str] = MappingProxyType(
    {
        "Cb": "B",
        "Db": "C#",
        "Eb": "D#",
        "Fb": "E",
        "Gb": "F#",
        "Ab": "G#",
        "Bb": "A#",
        "E#": "F",
        "B#": "C",
    }
)

# Chord quality to ascending semitone offsets from the root
QUALITY_INTERVALS: Mapping[str, tuple[int, ...]] = MappingProxyType(
    {
        # Triads
        "maj": (0, 4, 7),
        "min": (0, 3, 7),
        "dim": (0, 3, 6),
        "aug": (0, 4, 8),
        # Seventh chords
        "maj7": (0, 4, 7, 11),
        "min7": (0, 3, 7, 10),
        "7": (0, 4, 7, 10),
        "min7b5": (0, 3, 6, 10),
        "minmaj7": (0, 3, 7, 11),
        "maj7#5": (0, 4, 8, 11),
        "dim7": (0, 3, 6, 9),
    }
)


def normalize_note(note: str) -> str:
    """Translate a note spelling to its canonical sharp spelling.

    Spellings without a translation are returned unchanged.

    Parameters
    ----------
    note : str
        Note letter with optional accidental (e.g., "Ab", "E#", "C").

    Returns
    -------
    str
        Canonical spelling (e.g., "G#", "F", "C").

    Examples
    --------
    >>> normalize_note("Db")
    'C#'
    >>> normalize_note("B#")
    'C'
    >>> normalize_note("F#")
    'F#'
    """
    return ENHARMONIC_SPELLINGS.get(note, note)


def note_to_index(note: str) -> int:
    """Return the canonical index (0-11) of a note spelling.

    Parameters
    ----------
    note : str
        Note letter with optional accidental, flats allowed.

    Returns
    -------
    int
        Pitch class index, where C=0.

    Raises
    ------
    UnknownRootError
        If the normalized spelling is not a canonical pitch class.

    Examples
    --------
    >>> note_to_index("C")
    0
    >>> note_to_index("Ab")
    8
    """
    canonical = normalize_note(note)
    if canonical in CANONICAL_NOTES:
        return CANONICAL_NOTES.index(canonical)
    msg = f"Unknown note: {note}"
    raise UnknownRootError(msg)


def chromatic_rotation(root: str) -> tuple[str, ...]:
    """Rotate the canonical notes so that ``root`` comes first.

    Examples
    --------
    >>> chromatic_rotation("A")[:4]
    ('A', 'A#', 'B', 'C')
    """
    index = note_to_index(root)
    return CANONICAL_NOTES[index:] + CANONICAL_NOTES[:index]


def note_to_frequency(pitch_class: str, octave: int, reference: float = A4_FREQUENCY) -> float:
    """Return the equal-tempered frequency of a note in Hz.

    Parameters
    ----------
    pitch_class : str
        Note letter with optional accidental, flats allowed.
    octave : int
        Octave number, where A4 is the reference pitch.
    reference : float
        Frequency of A4 in Hz (default 440.0).

    Returns
    -------
    float
        Frequency in Hz.

    Examples
    --------
    >>> note_to_frequency("A", 4)
    440.0
    >>> round(note_to_frequency("C", 4), 2)
    261.63
    """
    semitones_from_a4 = (octave - 4) * NOTES_PER_OCTAVE + note_to_index(pitch_class) - CANONICAL_NOTES.index("A")
    return reference * 2 ** (semitones_from_a4 / NOTES_PER_OCTAVE)
