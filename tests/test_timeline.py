from __future__ import annotations

import pytest

from morphicon.timeline import FrameTimeline, accelerate, decelerate, linear
from morphicon.validation import InvalidArgument


class Recorder:
    def __init__(self) -> None:
        self.values: list[float] = []
        self.ends = 0

    def update(self, value: float) -> None:
        self.values.append(value)

    def end(self) -> None:
        self.ends += 1


def test_samples_are_monotonic_and_land_on_end():
    rec = Recorder()
    timeline = FrameTimeline(duration_ms=200)
    timeline.start(1.0, 2.0, rec.update, rec.end)
    samples = list(timeline.frames(fps=60))
    assert samples[-1] == 2.0
    assert rec.values[0] == 1.0
    assert rec.values[-1] == 2.0
    assert all(b >= a for a, b in zip(rec.values, rec.values[1:]))
    assert rec.ends == 1
    assert not timeline.running


def test_advance_past_duration_finishes_once():
    rec = Recorder()
    timeline = FrameTimeline(duration_ms=100, easing=linear)
    timeline.start(0.0, 1.0, rec.update, rec.end)
    assert timeline.advance(50) == pytest.approx(0.5)
    assert timeline.advance(500) == 1.0
    assert timeline.advance(500) == 1.0
    assert rec.ends == 1


def test_cancel_skips_completion():
    rec = Recorder()
    timeline = FrameTimeline(duration_ms=100)
    timeline.start(0.0, 1.0, rec.update, rec.end)
    timeline.advance(10)
    timeline.cancel()
    timeline.advance(200)
    assert rec.ends == 0
    assert rec.values[-1] < 1.0
    assert not timeline.running


def test_force_complete_jumps_to_end():
    rec = Recorder()
    timeline = FrameTimeline(duration_ms=100)
    timeline.start(1.0, 2.0, rec.update, rec.end)
    timeline.force_complete()
    timeline.force_complete()
    assert rec.values[-1] == 2.0
    assert rec.ends == 1


def test_restart_cancels_previous_run():
    first = Recorder()
    second = Recorder()
    timeline = FrameTimeline(duration_ms=100)
    timeline.start(0.0, 1.0, first.update, first.end)
    timeline.start(1.0, 2.0, second.update, second.end)
    timeline.force_complete()
    assert first.ends == 0
    assert second.ends == 1


def test_easing_curves():
    assert decelerate(3.0)(0.5) == pytest.approx(1 - 0.5**6)
    assert accelerate(1.0)(0.5) == pytest.approx(0.25)
    assert linear(0.3) == 0.3


def test_invalid_duration():
    with pytest.raises(InvalidArgument):
        FrameTimeline(duration_ms=0)
    timeline = FrameTimeline()
    with pytest.raises(InvalidArgument):
        timeline.duration_ms = -5


def test_invalid_easing():
    with pytest.raises(InvalidArgument):
        FrameTimeline(easing=lambda t: t + 1)
    with pytest.raises(InvalidArgument):
        FrameTimeline(easing="fast")
    with pytest.raises(InvalidArgument):
        decelerate(0)


def test_invalid_fps_and_elapsed():
    timeline = FrameTimeline()
    with pytest.raises(InvalidArgument):
        next(timeline.frames(fps=0))
    with pytest.raises(InvalidArgument):
        timeline.advance(-1)
