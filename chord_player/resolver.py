"""Chord resolution: chord names and note lists to pitched notes.

Two resolution modes are supported:

- By name: ``"Abmaj7"`` is split into root ``Ab`` and quality ``maj7``,
  and the quality's semitone offsets are laid out above the root.
- By explicit note list: ``["Ab4", "C", "E"]`` keeps the given order and
  fills in missing octaves assuming the notes ascend.

Both are pure functions; ``try_resolve`` wraps them in a result value
for callers that do not want exceptions.

Examples
--------
>>> [note.name for note in resolve_by_name("Abmaj7", 4)]
['G#4', 'C5', 'D#5', 'G5']
>>> [note.name for note in resolve_note_list(["Ab4", "C", "E"], 4)]
['G#4', 'C5', 'E5']
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass

from chord_player.errors import ChordError, ParseError, UnknownQualityError
from chord_player.models import ChordName, ChordSpec, NoteList, ResolvedNote
from chord_player.pitch_class import (
    NOTES_PER_OCTAVE,
    QUALITY_INTERVALS,
    chromatic_rotation,
    normalize_note,
    note_to_index,
)

DEFAULT_OCTAVE = 4

# "Abmaj7" -> ("Ab", "maj7")
CHORD_NAME_PATTERN = re.compile(r"^([A-G][#b]?)(.*)$")

# "Ab4" -> ("Ab", "4"), "C" -> ("C", "")
NOTE_TOKEN_PATTERN = re.compile(r"^([A-G][#b]?)(\d*)$")


@dataclass(frozen=True)
class Resolution:
    """Outcome of resolving a chord specification.

    Exactly one of ``notes`` (non-empty) or ``error`` is set.

    Parameters
    ----------
    notes : tuple[ResolvedNote, ...]
        Resolved notes in playback order.
    error : ChordError | None
        The error that stopped resolution, if any.
    """

    notes: tuple[ResolvedNote, ...] = ()
    error: ChordError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def names(self) -> list[str]:
        """Note names with octave, in playback order."""
        return [note.name for note in self.notes]


def split_chord_name(symbol: str) -> tuple[str, str]:
    """Split a chord name into its root and quality tokens.

    Parameters
    ----------
    symbol : str
        Chord name (e.g., "Abmaj7").

    Returns
    -------
    tuple[str, str]
        Root with accidental and the remaining quality token.

    Raises
    ------
    ParseError
        If the name is shorter than two characters or does not start with
        a note letter.

    Examples
    --------
    >>> split_chord_name("Abmaj7")
    ('Ab', 'maj7')
    >>> split_chord_name("C7")
    ('C', '7')
    """
    if len(symbol) < 2:
        msg = f"invalid chord name: {symbol!r}"
        raise ParseError(msg)
    match = CHORD_NAME_PATTERN.match(symbol)
    if match is None:
        msg = f"error parsing chord name: {symbol!r}"
        raise ParseError(msg)
    return match.group(1), match.group(2)


def resolve_by_name(symbol: str, octave: int = DEFAULT_OCTAVE) -> list[ResolvedNote]:
    """Resolve a chord name into ascending notes starting at ``octave``.

    Notes whose position above C passes B are carried into the next
    octave, so the chord always ascends from the root.

    Parameters
    ----------
    symbol : str
        Chord name (e.g., "Cmaj7", "Ebmin", "F#dim7").
    octave : int
        Octave of the root note.

    Returns
    -------
    list[ResolvedNote]
        One note per interval of the chord quality.

    Raises
    ------
    ParseError
        If the name cannot be split into root and quality.
    UnknownRootError
        If the root does not normalize to a canonical pitch class.
    UnknownQualityError
        If the quality is not in ``QUALITY_INTERVALS``.

    Examples
    --------
    >>> [note.name for note in resolve_by_name("Cmin7b5")]
    ['C4', 'D#4', 'F#4', 'A#4']
    """
    root, quality = split_chord_name(symbol)
    root_index = note_to_index(root)
    if quality not in QUALITY_INTERVALS:
        msg = f"Unknown chord quality: {quality!r} in {symbol!r}"
        raise UnknownQualityError(msg)

    rotated = chromatic_rotation(root)
    notes = []
    for offset in QUALITY_INTERVALS[quality]:
        carry = (root_index + offset) // NOTES_PER_OCTAVE
        notes.append(ResolvedNote(pitch_class=rotated[offset % NOTES_PER_OCTAVE], octave=octave + carry))
    return notes


def resolve_note_list(tokens: Sequence[str], octave: int = DEFAULT_OCTAVE) -> list[ResolvedNote]:
    """Resolve an ordered list of note tokens, filling in missing octaves.

    The first token without an octave gets ``octave``. Each later token
    without an octave takes the previous note's octave, raised by one when
    its pitch class is lower than the previous note's.

    Parameters
    ----------
    tokens : Sequence[str]
        Note tokens (e.g., ["Ab4", "C", "E"]).
    octave : int
        Octave used for the first token when it has none.

    Returns
    -------
    list[ResolvedNote]
        One note per token, in input order.

    Raises
    ------
    ParseError
        If the list is empty, or a token is not a note letter with optional
        accidental and octave.

    Examples
    --------
    >>> [note.name for note in resolve_note_list(["A", "C"])]
    ['A4', 'C5']
    >>> [note.name for note in resolve_note_list(["C", "A"])]
    ['C4', 'A4']
    """
    if not tokens:
        msg = "note list is empty"
        raise ParseError(msg)

    notes: list[ResolvedNote] = []
    for token in tokens:
        match = NOTE_TOKEN_PATTERN.match(token)
        if match is None:
            msg = f"error parsing note name: {token!r}"
            raise ParseError(msg)

        pitch_class = normalize_note(match.group(1))
        index = note_to_index(pitch_class)
        if match.group(2):
            note_octave = int(match.group(2))
        elif not notes:
            note_octave = octave
        else:
            previous = notes[-1]
            note_octave = previous.octave
            if index < note_to_index(previous.pitch_class):
                note_octave += 1
        notes.append(ResolvedNote(pitch_class=pitch_class, octave=note_octave))
    return notes


def resolve(spec: ChordSpec, octave: int = DEFAULT_OCTAVE) -> list[ResolvedNote]:
    """Resolve either kind of chord specification.

    Raises
    ------
    ChordError
        Any error raised by ``resolve_by_name`` or ``resolve_note_list``.
    """
    if isinstance(spec, ChordName):
        return resolve_by_name(spec.symbol, octave)
    if isinstance(spec, NoteList):
        return resolve_note_list(spec.tokens, octave)
    msg = f"unsupported chord specification: {spec!r}"
    raise ParseError(msg)


def try_resolve(spec: ChordSpec, octave: int = DEFAULT_OCTAVE) -> Resolution:
    """Resolve a chord specification without raising.

    Examples
    --------
    >>> try_resolve(ChordName("Cmaj")).names
    ['C4', 'E4', 'G4']
    >>> try_resolve(ChordName("Cxyz")).ok
    False
    """
    try:
        return Resolution(notes=tuple(resolve(spec, octave)))
    except ChordError as err:
        return Resolution(error=err)
