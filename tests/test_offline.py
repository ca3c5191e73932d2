"""Tests for the in-memory audio graph."""

import numpy as np
import pytest

from chord_player import OfflineAudioContext


class TestGraph:
    def test_gain_scales_into_destination(self) -> None:
        context = OfflineAudioContext(sample_rate=10)
        gain = context.create_gain()
        gain.gain = 0.25
        gain.connect(context.destination)
        gain.write(0.0, np.ones(5, dtype=np.float32))
        assert context.render().tolist() == [0.25] * 5

    def test_writes_are_mixed(self) -> None:
        context = OfflineAudioContext(sample_rate=10)
        context.destination.write(0.0, np.ones(4))
        context.destination.write(0.2, np.ones(4))
        assert context.render().tolist() == [1.0, 1.0, 2.0, 2.0, 1.0, 1.0]

    def test_disconnected_gain_is_silent(self) -> None:
        context = OfflineAudioContext(sample_rate=10)
        gain = context.create_gain()
        gain.connect(context.destination)
        gain.disconnect()
        gain.write(0.0, np.ones(3))
        assert len(context.render()) == 0

    def test_render_is_a_copy(self) -> None:
        context = OfflineAudioContext(sample_rate=10)
        context.destination.write(0.0, np.ones(2))
        context.render()[0] = 9.0
        assert context.render()[0] == 1.0


class TestScheduler:
    def test_callbacks_fire_in_time_order(self) -> None:
        context = OfflineAudioContext()
        fired = []
        context.call_at(0.3, lambda: fired.append(("c", context.current_time)))
        context.call_at(0.1, lambda: fired.append(("a", context.current_time)))
        context.call_at(0.2, lambda: fired.append(("b", context.current_time)))
        assert context.run() == 3
        assert fired == [("a", 0.1), ("b", 0.2), ("c", 0.3)]
        assert context.pending == 0

    def test_ties_fire_in_scheduling_order(self) -> None:
        context = OfflineAudioContext()
        fired = []
        for label in "xyz":
            context.call_at(1.0, lambda label=label: fired.append(label))
        context.run()
        assert fired == ["x", "y", "z"]

    def test_run_until(self) -> None:
        context = OfflineAudioContext()
        fired = []
        context.call_at(0.5, lambda: fired.append(0.5))
        context.call_at(2.0, lambda: fired.append(2.0))
        assert context.run(until=1.0) == 1
        assert context.current_time == 1.0
        assert context.pending == 1
        assert context.run() == 1
        assert fired == [0.5, 2.0]

    def test_past_events_run_at_current_time(self) -> None:
        context = OfflineAudioContext()
        context.run(until=2.0)
        times = []
        context.call_at(1.0, lambda: times.append(context.current_time))
        context.run()
        assert times == [2.0]

    def test_callbacks_may_schedule_more(self) -> None:
        context = OfflineAudioContext()
        fired = []
        context.call_at(0.1, lambda: context.call_at(0.2, lambda: fired.append(True)))
        assert context.run() == 2
        assert fired == [True]


class TestSave:
    def test_save_wav(self, tmp_path) -> None:
        sf = pytest.importorskip("soundfile")
        context = OfflineAudioContext(sample_rate=8000)
        context.destination.write(0.0, np.full(800, 0.5, dtype=np.float32))
        path = context.save(tmp_path / "chord.wav")
        data, sample_rate = sf.read(str(path), dtype="float32")
        assert sample_rate == 8000
        assert len(data) == 800
        assert data[0] == pytest.approx(0.5, abs=1e-3)
