"""Data models for chord specifications and resolved notes.

A chord is specified either by name (``ChordName("Abmaj7")``) or by an
explicit, ordered list of note tokens (``NoteList(("Ab4", "C", "E"))``).
Resolving a specification yields a sequence of ``ResolvedNote``.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from chord_player.errors import MissingSpecError, ParseError


@dataclass(frozen=True)
class ResolvedNote:
    """A canonical pitch class at a specific octave.

    Parameters
    ----------
    pitch_class : str
        Sharp-spelled pitch class (e.g., "C", "G#").
    octave : int
        Octave number (e.g., 4 for the octave starting at middle C).

    Examples
    --------
    >>> ResolvedNote(pitch_class="G#", octave=4).name
    'G#4'
    """

    pitch_class: str
    octave: int

    @property
    def name(self) -> str:
        """Return the note name with its octave (e.g., "G#4")."""
        return f"{self.pitch_class}{self.octave}"

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class ChordName:
    """A chord given by name: root, optional accidental and quality.

    Parameters
    ----------
    symbol : str
        Chord name (e.g., "Cmaj7", "Abmin", "F#dim7").
    """

    symbol: str

    def __post_init__(self) -> None:
        if len(self.symbol) < 2:
            msg = f"invalid chord name: {self.symbol!r}"
            raise ParseError(msg)

    def __str__(self) -> str:
        return self.symbol


@dataclass(frozen=True)
class NoteList:
    """A chord given as an explicit, ordered list of note tokens.

    Parameters
    ----------
    tokens : tuple[str, ...]
        Note tokens, each a letter with optional accidental and optional
        octave (e.g., ("Ab4", "C", "E")). Order is significant.
    """

    tokens: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.tokens:
            msg = "note list is empty"
            raise ParseError(msg)

    def __str__(self) -> str:
        return " ".join(self.tokens)


ChordSpec = ChordName | NoteList


def chord_spec(value: ChordSpec | str | Sequence[str] | None) -> ChordSpec:
    """Coerce a chord name or note sequence into a ``ChordSpec``.

    Parameters
    ----------
    value : ChordSpec | str | Sequence[str] | None
        A chord name string, a sequence of note tokens, or an existing spec.

    Returns
    -------
    ChordSpec
        ``ChordName`` for strings, ``NoteList`` for sequences.

    Raises
    ------
    MissingSpecError
        If ``value`` is None.
    ParseError
        If a chord name is shorter than two characters, the note list is
        empty, or ``value`` has an unsupported type.

    Examples
    --------
    >>> chord_spec("Cmaj7")
    ChordName(symbol='Cmaj7')
    >>> chord_spec(["Ab4", "C", "E"])
    NoteList(tokens=('Ab4', 'C', 'E'))
    """
    if value is None:
        msg = "chord name not specified"
        raise MissingSpecError(msg)
    if isinstance(value, (ChordName, NoteList)):
        return value
    if isinstance(value, str):
        return ChordName(value)
    if isinstance(value, Sequence) and all(isinstance(token, str) for token in value):
        return NoteList(tuple(value))
    msg = f"unsupported chord specification: {value!r}"
    raise ParseError(msg)
