from __future__ import annotations

from typing import Callable, Iterator, Protocol

from morphicon.validation import InvalidArgument, validate_duration, validate_easing

Easing = Callable[[float], float]
UpdateCallback = Callable[[float], None]
EndCallback = Callable[[], None]

DEFAULT_DURATION_MS = 800.0


def linear(t: float) -> float:
    return t


def decelerate(factor: float = 1.0) -> Easing:
    """Fast start, slow finish: ``1 - (1 - t) ** (2 * factor)``."""

    if factor <= 0:
        raise InvalidArgument("Easing factor must be positive.")

    def curve(t: float) -> float:
        return 1.0 - (1.0 - t) ** (2.0 * factor)

    return curve


def accelerate(factor: float = 1.0) -> Easing:
    """Slow start, fast finish: ``t ** (2 * factor)``."""

    if factor <= 0:
        raise InvalidArgument("Easing factor must be positive.")

    def curve(t: float) -> float:
        return t ** (2.0 * factor)

    return curve


class Timeline(Protocol):
    """What the engine needs from an animation driver."""

    @property
    def running(self) -> bool: ...

    def start(self, start: float, end: float, on_update: UpdateCallback, on_end: EndCallback) -> None: ...

    def cancel(self) -> None: ...

    def force_complete(self) -> None: ...


class FrameTimeline:
    """Advance a value from ``start`` to ``end`` as the caller feeds elapsed time.

    Samples are monotonic for monotonic easings and always finish exactly on
    ``end``. ``on_end`` fires once per run on natural or forced completion and
    never after ``cancel``.
    """

    def __init__(self, duration_ms: float = DEFAULT_DURATION_MS, easing: Easing | None = None) -> None:
        self._duration_ms = validate_duration(duration_ms)
        self._easing = validate_easing(easing if easing is not None else decelerate(3.0))
        self._running = False
        self._elapsed_ms = 0.0
        self._start = 0.0
        self._end = 0.0
        self._value = 0.0
        self._on_update: UpdateCallback | None = None
        self._on_end: EndCallback | None = None

    @property
    def duration_ms(self) -> float:
        return self._duration_ms

    @duration_ms.setter
    def duration_ms(self, value: float) -> None:
        self._duration_ms = validate_duration(value)

    @property
    def easing(self) -> Easing:
        return self._easing

    @easing.setter
    def easing(self, value: Easing) -> None:
        self._easing = validate_easing(value)

    @property
    def running(self) -> bool:
        return self._running

    @property
    def value(self) -> float:
        return self._value

    def start(self, start: float, end: float, on_update: UpdateCallback, on_end: EndCallback) -> None:
        if self._running:
            self.cancel()
        self._start = float(start)
        self._end = float(end)
        self._elapsed_ms = 0.0
        self._on_update = on_update
        self._on_end = on_end
        self._running = True
        self._emit(self._start)

    def advance(self, elapsed_ms: float) -> float:
        """Move the run forward by ``elapsed_ms`` and return the new value."""

        if elapsed_ms < 0:
            raise InvalidArgument("Elapsed time must not be negative.")
        if not self._running:
            return self._value
        self._elapsed_ms = min(self._elapsed_ms + elapsed_ms, self._duration_ms)
        fraction = self._elapsed_ms / self._duration_ms
        if fraction >= 1.0:
            self._finish()
            return self._value
        eased = min(max(float(self._easing(fraction)), 0.0), 1.0)
        value = self._start + (self._end - self._start) * eased
        # Keep samples monotonic even if the easing wobbles.
        if self._end >= self._start:
            value = max(value, self._value)
        else:
            value = min(value, self._value)
        self._emit(value)
        return value

    def frames(self, fps: int = 60) -> Iterator[float]:
        """Yield one sample per frame at ``fps`` until the run finishes."""

        if fps <= 0:
            raise InvalidArgument("fps must be positive.")
        step = 1000.0 / fps
        while self._running:
            yield self.advance(step)

    def cancel(self) -> None:
        self._running = False
        self._on_update = None
        self._on_end = None

    def force_complete(self) -> None:
        if not self._running:
            return
        self._finish()

    def _emit(self, value: float) -> None:
        self._value = value
        if self._on_update is not None:
            self._on_update(value)

    def _finish(self) -> None:
        on_end = self._on_end
        self._emit(self._end)
        self._running = False
        self._on_update = None
        self._on_end = None
        if on_end is not None:
            on_end()


__all__ = [
    "Easing",
    "Timeline",
    "FrameTimeline",
    "linear",
    "decelerate",
    "accelerate",
    "DEFAULT_DURATION_MS",
]
