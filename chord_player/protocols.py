"""Capability interfaces consumed by the chord player.

The chord player never produces sound itself. It builds one note player
per resolved note and routes them through a gain node into an audio graph.
Any objects with these shapes can be plugged in: the in-memory graph in
``chord_player.offline``, a real-time backend, or a test double.
"""

from __future__ import annotations

from typing import Callable, Protocol, runtime_checkable

Callback = Callable[[], None]


class AudioNode(Protocol):
    """Anything a gain node or note player can be connected to."""

    def write(self, start_time: float, samples) -> None:
        """
        Receive rendered samples.

        Args:
            start_time: Context time in seconds of the first sample
            samples: Mono sample buffer
        """
        ...


class GainNode(AudioNode, Protocol):
    """Scales its input by ``gain`` and forwards it to connected nodes."""

    gain: float

    def connect(self, node: AudioNode) -> None:
        """
        Route this node's output to ``node``.

        Args:
            node: Destination node
        """
        ...


@runtime_checkable
class AudioContext(Protocol):
    """Owner of the audio graph."""

    destination: AudioNode

    def create_gain(self) -> GainNode:
        """Create a new gain node with unit gain."""
        ...


@runtime_checkable
class NotePlayer(Protocol):
    """Plays a single pitched note and reports when it has finished."""

    def set_destination_node(self, node: AudioNode) -> None:
        ...

    def set_duration(self, seconds: float) -> None:
        ...

    def set_verbose(self, verbose: bool) -> None:
        ...

    def play(self, callback: Callback | None = None) -> None:
        """
        Start the note.

        Args:
            callback: Called once, when the note has finished
        """
        ...


@runtime_checkable
class NotePlayerFactory(Protocol):
    """Builds a note player from a note name with octave (e.g., "G#4")."""

    def build_from_name(self, name: str, audio_context: AudioContext) -> NotePlayer:
        ...
