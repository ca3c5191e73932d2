"""Single-note player rendering a sine tone into an audio graph."""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Callable

import numpy as np

from chord_player.errors import ParseError
from chord_player.pitch_class import normalize_note, note_to_frequency

if TYPE_CHECKING:
    from chord_player.protocols import AudioNode

logger = logging.getLogger(__name__)

# "G#4" -> ("G#", "4")
NOTE_NAME_PATTERN = re.compile(r"^([A-G][#b]?)(-?\d+)$")

DEFAULT_NOTE_DURATION = 1.0

# Linear fade in/out at the note edges, in seconds
FADE_SECONDS = 0.01


class SineNotePlayer:
    """Plays one note as an enveloped sine wave.

    Parameters
    ----------
    name : str
        Note name with octave (e.g., "G#4", "Bb3").
    audio_context : OfflineAudioContext
        Context providing ``sample_rate``, ``current_time`` and ``call_at``.
    """

    def __init__(self, name: str, audio_context) -> None:
        match = NOTE_NAME_PATTERN.match(name)
        if match is None:
            msg = f"error parsing note name: {name!r}"
            raise ParseError(msg)
        self.name = name
        self.pitch_class = normalize_note(match.group(1))
        self.octave = int(match.group(2))
        self.frequency = note_to_frequency(self.pitch_class, self.octave)
        self.audio_context = audio_context
        self.destination_node: AudioNode | None = None
        self.duration = DEFAULT_NOTE_DURATION
        self.verbose = False

    @classmethod
    def build_from_name(cls, name: str, audio_context) -> SineNotePlayer:
        return cls(name, audio_context)

    def set_destination_node(self, node: AudioNode) -> None:
        self.destination_node = node

    def set_duration(self, seconds: float) -> None:
        self.duration = seconds

    def set_verbose(self, verbose: bool) -> None:
        self.verbose = verbose

    def render(self) -> np.ndarray:
        """Return the note's samples at the context's sample rate."""
        sample_rate = self.audio_context.sample_rate
        num_samples = max(int(self.duration * sample_rate), 0)
        t = np.arange(num_samples) / sample_rate
        tone = np.sin(2 * np.pi * self.frequency * t).astype(np.float32)

        fade = min(int(FADE_SECONDS * sample_rate), num_samples // 2)
        if fade > 0:
            ramp = np.linspace(0.0, 1.0, fade, dtype=np.float32)
            tone[:fade] *= ramp
            tone[-fade:] *= ramp[::-1]
        return tone

    def play(self, callback: Callable[[], None] | None = None) -> None:
        """Write the note into the destination node and schedule ``callback``.

        Raises
        ------
        RuntimeError
            If no destination node has been set.
        """
        if self.destination_node is None:
            msg = f"note {self.name} has no destination node"
            raise RuntimeError(msg)

        start = self.audio_context.current_time
        self.destination_node.write(start, self.render())
        if self.verbose:
            logger.info("Note %s (%.2f Hz) will play for %.2fs", self.name, self.frequency, self.duration)

        def finished() -> None:
            if self.verbose:
                logger.info("Note %s has finished playing", self.name)
            if callback is not None:
                callback()

        self.audio_context.call_at(start + self.duration, finished)
