"""Chord playback: fan a resolved chord out to per-note players.

A ``ChordPlayer`` resolves its chord, builds one note player per note,
routes them all through a fresh gain node into the destination, starts
them, and calls the caller's callback once when the chord is done.

Examples
--------
>>> from chord_player.offline import OfflineAudioContext
>>> context = OfflineAudioContext(sample_rate=8000)
>>> chord = ChordPlayer.build("Abmaj7", context)
>>> chord.get_chord_info()
['G#4', 'C5', 'D#5', 'G5']
>>> chord.set_duration(0.5)
>>> chord.play(lambda: print("done"))
True
>>> context.run()
done
4
"""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence
from enum import Enum
from typing import TYPE_CHECKING, Callable

from chord_player.errors import ChordError, UnknownCompletionModeError
from chord_player.models import ChordName, ChordSpec, chord_spec
from chord_player.note_player import SineNotePlayer
from chord_player.offline import OfflineAudioContext
from chord_player.resolver import DEFAULT_OCTAVE, try_resolve

if TYPE_CHECKING:
    from chord_player.protocols import AudioContext, AudioNode, NotePlayer, NotePlayerFactory

logger = logging.getLogger(__name__)

DEFAULT_VOLUME = 0.5
DURATION_RANGE = (0.5, 3.0)

USAGE = "USAGE: ChordPlayer.build(chord_name_or_notes, [audio_context])"


class CompletionMode(str, Enum):
    """When a chord counts as finished.

    FIRST completes on the first note to finish. ALL waits for every note.
    """

    FIRST = "first"
    ALL = "all"


def random_duration() -> float:
    """Return a duration in seconds drawn from ``[0.5, 3.0)``."""
    low, high = DURATION_RANGE
    return low + random.random() * (high - low)


class ChordPlayer:
    """A chord that can be played through an audio graph.

    Parameters
    ----------
    spec : ChordSpec | str | Sequence[str]
        Chord name (e.g., "Cmin7b5") or ordered note list
        (e.g., ["Ab4", "C", "E"]).
    audio_context : AudioContext | None
        Context to play into. An ``OfflineAudioContext`` is created if None.
    note_player_factory : NotePlayerFactory
        Builds one note player per resolved note.
    completion : CompletionMode
        Whether the chord finishes with its first or its last note.

    Attributes
    ----------
    octave : int
        Octave of the root (name form) or first unannotated note (list form).
    duration : float
        Seconds each note plays for.
    volume : float
        Gain applied to the whole chord, nominally in [0, 1].
    verbose : bool
        Log playback progress at INFO level.
    is_playing : bool
        True between ``play`` and the chord completing.
    notes : list
        Note players built by the last ``play`` call, in resolution order.

    Raises
    ------
    MissingSpecError
        If ``spec`` is None.
    ParseError
        If ``spec`` is a name shorter than two characters, an empty list,
        or of an unsupported type.
    UnknownCompletionModeError
        If ``completion`` is not a ``CompletionMode`` value.
    """

    def __init__(
        self,
        spec: ChordSpec | str | Sequence[str] | None,
        audio_context: AudioContext | None = None,
        *,
        note_player_factory: NotePlayerFactory = SineNotePlayer,
        completion: CompletionMode = CompletionMode.FIRST,
    ) -> None:
        self.spec = chord_spec(spec)
        self.octave = DEFAULT_OCTAVE
        self.duration = random_duration()
        self.volume = DEFAULT_VOLUME
        self.verbose = False
        self.notes: list[NotePlayer] = []
        self.is_playing = False
        self.note_player_factory = note_player_factory
        try:
            self.completion = CompletionMode(completion)
        except ValueError as err:
            msg = f"unknown completion mode: {completion!r}"
            raise UnknownCompletionModeError(msg) from err

        self.audio_context = OfflineAudioContext() if audio_context is None else audio_context
        self.destination_node = self.audio_context.destination
        self.gain_node = None

        self._generation = 0
        self._finished_notes = 0

    @classmethod
    def build(
        cls,
        spec: ChordSpec | str | Sequence[str] | None,
        audio_context: AudioContext | None = None,
        **kwargs,
    ) -> ChordPlayer | None:
        """Build a chord player, returning None if ``spec`` or ``completion`` is invalid."""
        try:
            return cls(spec, audio_context, **kwargs)
        except ChordError as err:
            logger.error("CHORDPLAYER ERROR: %s", err)
            logger.warning(USAGE)
            return None

    @property
    def name(self) -> str | tuple[str, ...]:
        """Chord name, or the note tokens for a list-form chord."""
        if isinstance(self.spec, ChordName):
            return self.spec.symbol
        return self.spec.tokens

    def get_chord_info(self) -> list[str] | None:
        """Return the chord's note names with octaves, or None on error.

        Examples
        --------
        >>> ChordPlayer(["Ab4", "C", "E"]).get_chord_info()
        ['G#4', 'C5', 'E5']
        """
        resolution = try_resolve(self.spec, self.octave)
        if not resolution.ok:
            logger.error("CHORDPLAYER ERROR: %s", resolution.error)
            return None
        return resolution.names

    def play(self, callback: Callable[[], None] | None = None) -> bool:
        """Start every note of the chord.

        Returns immediately; ``callback`` is called once, later, when the
        chord finishes according to ``completion``.

        Parameters
        ----------
        callback : Callable[[], None] | None
            Called without arguments when the chord has finished.

        Returns
        -------
        bool
            False if the chord could not be resolved and nothing was started.
        """
        note_names = self.get_chord_info()
        if note_names is None:
            logger.warning(USAGE)
            return False

        if self.verbose:
            logger.info("Chord will play for a duration of %s", self.duration)

        self.gain_node = self.audio_context.create_gain()
        self.gain_node.gain = self.volume
        self.gain_node.connect(self.destination_node)

        self.notes = []
        for note_name in note_names:
            note = self.note_player_factory.build_from_name(note_name, self.audio_context)
            note.set_destination_node(self.gain_node)
            note.set_duration(self.duration)
            note.set_verbose(self.verbose)
            self.notes.append(note)

        self._generation += 1
        self._finished_notes = 0
        self.is_playing = True
        generation = self._generation
        for note in self.notes:
            note.play(lambda: self._note_finished(generation, callback))
        return True

    def _note_finished(self, generation: int, callback: Callable[[], None] | None) -> None:
        # Completions from an earlier play() call are ignored
        if generation != self._generation or not self.is_playing:
            return
        self._finished_notes += 1
        if self.completion is CompletionMode.ALL and self._finished_notes < len(self.notes):
            return

        self.is_playing = False
        if self.verbose:
            logger.info("Chord has finished playing")
        else:
            logger.debug("Chord %s has finished playing", self.spec)
        if callback is not None:
            callback()

    def set_audio_context(self, audio_context: AudioContext | None = None) -> None:
        if audio_context is not None:
            self.audio_context = audio_context

    def set_destination_node(self, node: AudioNode | None = None) -> None:
        if node is not None:
            self.destination_node = node

    def set_octave(self, octave: int | None = None) -> None:
        if octave is not None:
            self.octave = octave

    def set_volume(self, volume: float | None = None) -> None:
        if volume is not None:
            self.volume = volume

    def set_duration(self, duration: float | None = None) -> None:
        if duration is not None:
            self.duration = duration

    def set_verbose(self, verbose: bool | None = None) -> None:
        if verbose is not None:
            self.verbose = verbose
