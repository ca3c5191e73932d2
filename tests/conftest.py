"""Recording fakes for the audio graph and note player capabilities."""

import pytest


class FakeNode:
    """Node that records every write it receives."""

    def __init__(self):
        self.writes = []

    def write(self, start_time, samples):
        self.writes.append((start_time, samples))


class FakeGainNode(FakeNode):
    def __init__(self):
        super().__init__()
        self.gain = 1.0
        self.connections = []

    def connect(self, node):
        self.connections.append(node)


class FakeAudioContext:
    """Context that hands out recording gain nodes."""

    def __init__(self):
        self.destination = FakeNode()
        self.gains = []

    def create_gain(self):
        gain = FakeGainNode()
        self.gains.append(gain)
        return gain


class FakeNotePlayer:
    """Note player whose completion is triggered by the test."""

    def __init__(self, name, audio_context):
        self.name = name
        self.audio_context = audio_context
        self.destination_node = None
        self.duration = None
        self.verbose = None
        self.callback = None
        self.started = False

    def set_destination_node(self, node):
        self.destination_node = node

    def set_duration(self, seconds):
        self.duration = seconds

    def set_verbose(self, verbose):
        self.verbose = verbose

    def play(self, callback=None):
        self.started = True
        self.callback = callback

    def simulate_finish(self):
        """Report completion as a real note player would."""
        if self.callback is not None:
            self.callback()


class FakeNotePlayerFactory:
    """Factory recording every note player it builds, in build order."""

    def __init__(self):
        self.built = []

    def build_from_name(self, name, audio_context):
        note = FakeNotePlayer(name, audio_context)
        self.built.append(note)
        return note


@pytest.fixture
def audio_context() -> FakeAudioContext:
    return FakeAudioContext()


@pytest.fixture
def factory() -> FakeNotePlayerFactory:
    return FakeNotePlayerFactory()
