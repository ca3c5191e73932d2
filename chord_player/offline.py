"""In-memory audio graph with a virtual clock.

``OfflineAudioContext`` mixes everything written to its destination into
a single mono numpy buffer, and dispatches scheduled callbacks in time
order when ``run`` is called. Nothing happens in the background: the
caller's thread drives the clock.

Examples
--------
>>> context = OfflineAudioContext(sample_rate=8000)
>>> gain = context.create_gain()
>>> gain.gain = 0.5
>>> gain.connect(context.destination)
>>> gain.write(0.0, np.ones(4, dtype=np.float32))
>>> context.render().tolist()
[0.5, 0.5, 0.5, 0.5]
"""

from __future__ import annotations

import heapq
import itertools
import logging
from pathlib import Path
from typing import Callable

import numpy as np
from numpy.typing import NDArray

logger = logging.getLogger(__name__)

DEFAULT_SAMPLE_RATE = 44100


class AudioDestination:
    """Final node of the graph, accumulating a mono float32 buffer."""

    def __init__(self, sample_rate: int) -> None:
        self.sample_rate = sample_rate
        self._buffer: NDArray[np.float32] = np.zeros(0, dtype=np.float32)

    def write(self, start_time: float, samples: NDArray[np.floating]) -> None:
        start = int(round(start_time * self.sample_rate))
        end = start + len(samples)
        if end > len(self._buffer):
            self._buffer = np.pad(self._buffer, (0, end - len(self._buffer)))
        self._buffer[start:end] += samples.astype(np.float32)

    @property
    def samples(self) -> NDArray[np.float32]:
        return self._buffer.copy()


class GainNode:
    """Scales incoming samples by ``gain`` and forwards them."""

    def __init__(self, gain: float = 1.0) -> None:
        self.gain = gain
        self._outputs: list = []

    def connect(self, node) -> None:
        self._outputs.append(node)

    def disconnect(self) -> None:
        self._outputs.clear()

    def write(self, start_time: float, samples: NDArray[np.floating]) -> None:
        scaled = samples * self.gain
        for node in self._outputs:
            node.write(start_time, scaled)


class OfflineAudioContext:
    """Audio context rendering into memory on a virtual clock.

    Parameters
    ----------
    sample_rate : int
        Sample rate of the rendered buffer in Hz.
    """

    def __init__(self, sample_rate: int = DEFAULT_SAMPLE_RATE) -> None:
        self.sample_rate = sample_rate
        self.current_time = 0.0
        self.destination = AudioDestination(sample_rate)
        self._events: list[tuple[float, int, Callable[[], None]]] = []
        self._sequence = itertools.count()

    def create_gain(self) -> GainNode:
        return GainNode()

    def call_at(self, when: float, callback: Callable[[], None]) -> None:
        """Schedule ``callback`` at context time ``when`` (seconds).

        Callbacks due at the same time fire in the order they were scheduled.
        """
        heapq.heappush(self._events, (max(when, self.current_time), next(self._sequence), callback))

    @property
    def pending(self) -> int:
        """Number of scheduled callbacks not yet dispatched."""
        return len(self._events)

    def run(self, until: float | None = None) -> int:
        """Advance the clock, dispatching due callbacks in time order.

        Parameters
        ----------
        until : float | None
            Stop once the next callback is later than this time, leaving
            the clock at ``until``. If None, run until no callbacks remain.

        Returns
        -------
        int
            Number of callbacks dispatched.
        """
        fired = 0
        while self._events and (until is None or self._events[0][0] <= until):
            when, _, callback = heapq.heappop(self._events)
            self.current_time = when
            callback()
            fired += 1
        if until is not None and until > self.current_time:
            self.current_time = until
        logger.debug("Dispatched %d callbacks, clock at %.3fs", fired, self.current_time)
        return fired

    def render(self) -> NDArray[np.float32]:
        """Return the mixed output written to the destination so far."""
        return self.destination.samples

    def save(self, path: str | Path) -> Path:
        """Write the rendered output to an audio file.

        Parameters
        ----------
        path : str | Path
            Output file; the format follows the extension (e.g., ".wav").

        Returns
        -------
        Path
            The written file.
        """
        import soundfile as sf

        path = Path(path)
        samples = self.render()
        sf.write(str(path), samples, self.sample_rate)
        logger.info("Wrote %.2fs of audio to %s", len(samples) / self.sample_rate, path)
        return path
