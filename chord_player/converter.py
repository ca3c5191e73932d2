"""Chord symbol front end using pychord notation.

Chord names played by ``ChordPlayer`` use a fixed quality vocabulary
("Gmin7", "Bbmaj"). This module accepts the shorter, more common symbols
understood by pychord ("Gm7", "Bb") and rewrites them into that vocabulary.
"""

from chord_player.errors import ParseError, UnknownQualityError
from chord_player.models import ChordName

# Mapping from pychord quality names to chord player qualities
PYCHORD_TO_QUALITY: dict[str, str] = {
    "": "maj",
    "maj": "maj",
    "m": "min",
    "min": "min",
    "dim": "dim",
    "aug": "aug",
    "+": "aug",
    "maj7": "maj7",
    "M7": "maj7",
    "m7": "min7",
    "min7": "min7",
    "7": "7",
    "m7-5": "min7b5",
    "m7b5": "min7b5",
    "mmaj7": "minmaj7",
    "mM7": "minmaj7",
    "M7+5": "maj7#5",
    "maj7+5": "maj7#5",
    "M7#5": "maj7#5",
    "dim7": "dim7",
}


def pychord_quality_to_quality(pychord_quality: str) -> str:
    """Convert a pychord quality string to a chord player quality.

    Parameters
    ----------
    pychord_quality : str
        The pychord quality (e.g., "m7", "M7", "").

    Returns
    -------
    str
        The equivalent quality (e.g., "min7", "maj7", "maj").

    Raises
    ------
    UnknownQualityError
        If the quality has no counterpart.

    Examples
    --------
    >>> pychord_quality_to_quality("m7-5")
    'min7b5'
    >>> pychord_quality_to_quality("")
    'maj'
    """
    if pychord_quality in PYCHORD_TO_QUALITY:
        return PYCHORD_TO_QUALITY[pychord_quality]
    msg = f"Unknown pychord quality: {pychord_quality}"
    raise UnknownQualityError(msg)


def from_pychord(chord_str: str) -> ChordName:
    """Parse a pychord notation string into a ``ChordName``.

    Parameters
    ----------
    chord_str : str
        Chord in pychord notation (e.g., "Gm7", "C", "F#dim7").

    Returns
    -------
    ChordName
        The chord in chord player notation.

    Raises
    ------
    ParseError
        If pychord cannot parse the symbol, or it is a slash chord.
    UnknownQualityError
        If the quality has no counterpart.

    Examples
    --------
    >>> from_pychord("Gm7")
    ChordName(symbol='Gmin7')
    >>> from_pychord("Bb")
    ChordName(symbol='Bbmaj')
    """
    from pychord import Chord as PyChord

    try:
        pc = PyChord(chord_str)
    except ValueError as err:
        msg = f"error parsing chord name: {chord_str!r}"
        raise ParseError(msg) from err
    if pc.on:
        msg = f"slash chords are not supported: {chord_str!r}"
        raise ParseError(msg)

    quality = pychord_quality_to_quality(str(pc.quality))
    return ChordName(f"{pc.root}{quality}")
