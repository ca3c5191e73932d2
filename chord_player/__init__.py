"""Chord player library for resolving and playing chords.

This library turns a chord name (e.g., "Abmaj7") or an explicit note list
(e.g., ["Ab4", "C", "E"]) into pitched notes, and plays them together
through an audio graph, signalling once when the chord has finished.

Examples
--------
>>> from chord_player import ChordPlayer, resolve_by_name

>>> # Resolve a chord name into notes
>>> [note.name for note in resolve_by_name("Cmaj7", 4)]
['C4', 'E4', 'G4', 'B4']

>>> # Play a chord into an in-memory audio graph
>>> from chord_player import OfflineAudioContext
>>> context = OfflineAudioContext()
>>> chord = ChordPlayer.build(["Ab4", "C", "E"], context)
>>> chord.get_chord_info()
['G#4', 'C5', 'E5']
>>> chord.play()
True
>>> context.run()
3
"""

from chord_player.converter import from_pychord, pychord_quality_to_quality
from chord_player.errors import (
    ChordError,
    MissingSpecError,
    ParseError,
    UnknownCompletionModeError,
    UnknownQualityError,
    UnknownRootError,
)
from chord_player.models import ChordName, ChordSpec, NoteList, ResolvedNote, chord_spec
from chord_player.note_player import SineNotePlayer
from chord_player.offline import OfflineAudioContext
from chord_player.player import ChordPlayer, CompletionMode
from chord_player.resolver import (
    Resolution,
    resolve,
    resolve_by_name,
    resolve_note_list,
    try_resolve,
)

__all__ = [
    "ChordError",
    "ChordName",
    "ChordPlayer",
    "ChordSpec",
    "CompletionMode",
    "MissingSpecError",
    "NoteList",
    "OfflineAudioContext",
    "ParseError",
    "Resolution",
    "ResolvedNote",
    "SineNotePlayer",
    "UnknownCompletionModeError",
    "UnknownQualityError",
    "UnknownRootError",
    "chord_spec",
    "from_pychord",
    "pychord_quality_to_quality",
    "resolve",
    "resolve_by_name",
    "resolve_note_list",
    "try_resolve",
]
