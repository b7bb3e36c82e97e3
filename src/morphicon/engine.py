from __future__ import annotations

import threading
from typing import Callable, Sequence

from PIL import Image

from morphicon._color import RGB, normalize_color
from morphicon._config import IconSettings
from morphicon.modeling.layout import IconLayout, StrokeWidth
from morphicon.modeling.shapes import IconShape, Transition, resolve, rest_pose
from morphicon.modeling.solver import IconGeometry, solve
from morphicon.render import PillowRenderer, Renderer, StrokeStyle, draw_icon
from morphicon.timeline import DEFAULT_DURATION_MS, Easing, FrameTimeline, Timeline
from morphicon.validation import (
    PROGRESS_END,
    PROGRESS_MID,
    PROGRESS_START,
    UnsupportedTransition,
    validate_offset,
)

AnimationListener = Callable[[IconShape], None]


class MorphEngine:
    """Own the icon's morph state and turn commands into stroke geometry.

    All commands run under one re-entrant lock so a cancel-then-restart
    sequence is atomic; completion callbacks from the timeline re-enter it.
    """

    def __init__(
        self,
        stroke: StrokeWidth | str = StrokeWidth.REGULAR,
        color: Sequence[float] | str = "#ffffff",
        scale: int = 1,
        density: float = 1.0,
        duration_ms: float = DEFAULT_DURATION_MS,
        timeline: Timeline | None = None,
    ) -> None:
        self._stroke = StrokeWidth.parse(stroke)
        self._layout = IconLayout.create(self._stroke, scale=scale, density=density)
        self._color: RGB = normalize_color(color)
        self._timeline: Timeline = timeline if timeline is not None else FrameTimeline(duration_ms)
        self._lock = threading.RLock()

        self._current = IconShape.STACK
        self._target: IconShape | None = None
        self._transition = Transition.STACK_ARROW
        self._progress = PROGRESS_START
        self._running = False

        self._visible = True
        self._rtl = False
        self._listener: AnimationListener | None = None

    @classmethod
    def from_settings(cls, settings: IconSettings, timeline: Timeline | None = None) -> "MorphEngine":
        return cls(
            stroke=settings.stroke,
            color=settings.color,
            scale=settings.scale,
            density=settings.density,
            duration_ms=settings.duration_ms,
            timeline=timeline,
        )

    # Queries

    @property
    def layout(self) -> IconLayout:
        return self._layout

    @property
    def stroke(self) -> StrokeWidth:
        return self._stroke

    @property
    def timeline(self) -> Timeline:
        return self._timeline

    @property
    def transition(self) -> Transition:
        return self._transition

    @property
    def progress(self) -> float:
        return self._progress

    @property
    def target_shape(self) -> IconShape | None:
        return self._target

    @property
    def visible(self) -> bool:
        return self._visible

    @property
    def rtl_enabled(self) -> bool:
        return self._rtl

    def current_shape(self) -> IconShape:
        return self._current

    def is_running(self) -> bool:
        return self._running

    def compute_geometry(self) -> IconGeometry:
        with self._lock:
            transition, progress = self._transition, self._progress
        return solve(transition, progress, self._stroke, self._layout)

    # Commands

    def jump_to(self, shape: IconShape) -> None:
        """Snap to the rest pose of ``shape`` without animating."""

        with self._lock:
            if shape is self._current:
                return
            transition, progress = rest_pose(shape)
            if self._running:
                self._timeline.cancel()
                self._running = False
            self._target = None
            self._transition = transition
            self._progress = progress
            self._current = shape

    def animate_to(self, shape: IconShape) -> None:
        """Start animating towards ``shape``, finishing any run in flight first."""

        with self._lock:
            settled = self._target if self._running and self._target is not None else self._current
            if shape is settled:
                if self._running:
                    self._finish_run()
                return
            transition, forward = resolve(settled, shape)

            if self._running:
                self._finish_run()
                # a listener may have moved the icon or queued its own run
                self._running = False
                if self._current is not settled:
                    if shape is self._current:
                        self._timeline.cancel()
                        self._target = None
                        return
                    transition, forward = resolve(self._current, shape)

            start, end = (PROGRESS_START, PROGRESS_MID) if forward else (PROGRESS_MID, PROGRESS_END)
            self._transition = transition
            self._target = shape
            self._running = True
            self._timeline.start(start, end, self._set_progress, self._on_run_end)

    def set_offset(self, transition: Transition, offset: float) -> IconShape:
        """Place the icon directly at ``offset`` along ``transition``."""

        if not isinstance(transition, Transition):
            raise UnsupportedTransition(f"{transition!r} is not a transition.")
        value = validate_offset(offset)
        with self._lock:
            is_first = value < PROGRESS_MID or value == PROGRESS_END
            self._transition = transition
            self._current = transition.first if is_first else transition.second
            self._target = transition.other(self._current)
            self._progress = value
            return self._current

    def stop(self) -> None:
        with self._lock:
            if self._running and self._timeline.running:
                self._timeline.force_complete()
            else:
                self._running = False

    # Appearance

    def set_visible(self, visible: bool) -> None:
        self._visible = bool(visible)

    def set_rtl_enabled(self, enabled: bool) -> None:
        self._rtl = bool(enabled)

    def set_color(self, color: Sequence[float] | str) -> None:
        self._color = normalize_color(color)

    def set_duration(self, duration_ms: float) -> None:
        self._require_frame_timeline().duration_ms = duration_ms

    def set_easing(self, easing: Easing) -> None:
        self._require_frame_timeline().easing = easing

    def set_animation_listener(self, listener: AnimationListener | None) -> None:
        self._listener = listener

    def style(self) -> StrokeStyle:
        return StrokeStyle(color=self._color, width=self._layout.stroke_width)

    def draw(self, renderer: Renderer) -> None:
        if not self._visible:
            return
        draw_icon(renderer, self.compute_geometry(), self.style(), self._layout.width, rtl=self._rtl)

    def render_image(self, supersample: int = 4, background: Sequence[int] | None = None) -> Image.Image:
        renderer = PillowRenderer(self._layout.width, self._layout.height, supersample, background)
        self.draw(renderer)
        return renderer.to_image()

    def clone(self) -> "MorphEngine":
        """Return an idle copy sitting at the shape this engine is heading to."""

        with self._lock:
            duration = getattr(self._timeline, "duration_ms", DEFAULT_DURATION_MS)
            twin = MorphEngine(
                stroke=self._stroke,
                color=self._color,
                density=self._layout.dip,
                duration_ms=duration,
            )
            twin._visible = self._visible
            twin._rtl = self._rtl
            twin._settle(self._target if self._target is not None else self._current)
        return twin

    # Internals

    def _require_frame_timeline(self) -> FrameTimeline:
        if not isinstance(self._timeline, FrameTimeline):
            raise TypeError("Duration and easing are owned by the supplied timeline.")
        return self._timeline

    def _finish_run(self) -> None:
        if self._timeline.running:
            # may re-enter through the listener and start another run
            self._timeline.force_complete()
        elif self._running:
            # the timeline already stopped without reporting back
            self._on_run_end()

    def _set_progress(self, value: float) -> None:
        with self._lock:
            self._progress = min(max(float(value), PROGRESS_START), PROGRESS_END)

    def _settle(self, shape: IconShape) -> None:
        if shape is IconShape.HIDDEN:
            # HIDDEN is always the second shape, so its pose sits at progress 1
            if IconShape.HIDDEN not in self._transition.value:
                self._transition = Transition.STACK_HIDDEN
            self._progress = PROGRESS_MID
            self._current = shape
            return
        self._transition, self._progress = rest_pose(shape)
        self._current = shape

    def _on_run_end(self) -> None:
        with self._lock:
            shape = self._target
            self._running = False
            self._target = None
            if shape is not None:
                self._settle(shape)
            listener = self._listener
        if listener is not None and shape is not None:
            listener(shape)


__all__ = ["MorphEngine", "AnimationListener"]
