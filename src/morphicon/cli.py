from __future__ import annotations

import pathlib
from enum import Enum
from typing import TypeVar

import typer
from PIL import Image
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from morphicon._config import IconSettings, get_icon_settings
from morphicon._color import normalize_color
from morphicon.engine import MorphEngine
from morphicon.modeling import IconShape, Transition, resolve_segment, solve
from morphicon.modeling.layout import IconLayout, StrokeWidth
from morphicon.timeline import FrameTimeline
from morphicon.validation import MorphError, validate_offset

console = Console()
app = typer.Typer(help="Inspect and render the morphing three-stroke icon.")

E = TypeVar("E", bound=Enum)


def _parse_enum(kind: type[E], value: str, label: str) -> E:
    key = value.strip().upper().replace("-", "_")
    try:
        return kind[key]
    except KeyError:
        names = ", ".join(member.name.lower() for member in kind)
        raise typer.BadParameter(f"Unknown {label} {value!r}; expected one of: {names}.") from None


def _resolve_settings(
    stroke: str | None,
    scale: int | None,
    color: str | None,
    duration_ms: float | None = None,
) -> IconSettings:
    defaults = get_icon_settings()
    return IconSettings(
        stroke=stroke if stroke is not None else defaults.stroke,
        scale=scale if scale is not None else defaults.scale,
        density=defaults.density,
        duration_ms=duration_ms if duration_ms is not None else defaults.duration_ms,
        color=color if color is not None else defaults.color,
    )


def _build_engine(settings: IconSettings) -> MorphEngine:
    try:
        return MorphEngine.from_settings(settings)
    except (ValueError, MorphError) as exc:
        raise typer.BadParameter(str(exc)) from exc


def _next_available_path(path: pathlib.Path) -> pathlib.Path:
    """Return a non-conflicting path by appending ' (n)' before the suffix."""

    if not path.exists():
        return path

    parent = path.parent
    stem = path.stem
    suffix = path.suffix
    n = 1
    while True:
        candidate = parent / f"{stem} ({n}){suffix}"
        if not candidate.exists():
            return candidate
        n += 1


def _output_path(output: pathlib.Path, overwrite: bool) -> pathlib.Path:
    if output.exists() and not overwrite:
        final_output = _next_available_path(output)
        console.print(f"[yellow]Output {output} exists; writing to {final_output} instead.[/yellow]")
        return final_output
    return output


def _log_layout(layout: IconLayout, stroke: StrokeWidth) -> None:
    console.print(
        f"[magenta]Canvas {layout.width}x{layout.height}px, {stroke.name.lower()} stroke "
        f"({layout.stroke_width:.4g}px).[/magenta]"
    )


@app.command()
def inspect(
    transition: str = typer.Argument(..., help="Transition name, e.g. stack_arrow."),
    progress: float = typer.Argument(..., help="Progress along the transition, in [0, 2]."),
    stroke: str | None = typer.Option(None, "--stroke", help="bold, regular, or thin (defaults to config)."),
) -> None:
    """
    Print the solved geometry of all three strokes.
    """

    chosen = _parse_enum(Transition, transition, "transition")
    try:
        value = validate_offset(progress)
    except MorphError as exc:
        raise typer.BadParameter(str(exc)) from exc
    settings = _resolve_settings(stroke, None, None)
    try:
        width = StrokeWidth.parse(settings.stroke)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    layout = IconLayout.create(width, scale=settings.scale, density=settings.density)
    geometry = solve(chosen, value, width, layout)

    table = Table(title=f"{chosen.name} @ {value:g}")
    for column in ("stroke", "rotation", "pivot", "rotation2", "pivot2", "start", "end", "alpha", "drawn"):
        table.add_column(column)
    for name, line in zip(("top", "middle", "bottom"), geometry):
        drawn = resolve_segment(line)
        table.add_row(
            name,
            f"{line.rotation:.2f}",
            _fmt_point(line.pivot),
            f"{line.rotation2:.2f}",
            "-" if line.pivot2 is None else _fmt_point(line.pivot2),
            _fmt_point(line.start),
            _fmt_point(line.end),
            str(line.alpha),
            f"{_fmt_point(drawn[0])} -> {_fmt_point(drawn[1])}",
        )
    console.print(table)


def _fmt_point(point) -> str:
    return f"({float(point[0]):.2f}, {float(point[1]):.2f})"


@app.command()
def render(
    shape: str = typer.Argument(..., help="Shape to render: stack, arrow, cross, or check."),
    output: pathlib.Path = typer.Option(pathlib.Path("icon.png"), "--output", "-o", help="PNG file to write."),
    stroke: str | None = typer.Option(None, "--stroke", help="bold, regular, or thin (defaults to config)."),
    scale: int | None = typer.Option(None, "--scale", min=1, help="Canvas multiplier (defaults to config)."),
    color: str | None = typer.Option(None, "--color", help="Stroke colour (defaults to config)."),
    rtl: bool = typer.Option(False, "--rtl/--ltr", help="Mirror the icon for right-to-left layouts."),
    overwrite: bool = typer.Option(False, "--overwrite", help="Allow replacing an existing file."),
) -> None:
    """
    Render the rest pose of a shape to a transparent PNG.
    """

    target = _parse_enum(IconShape, shape, "shape")
    settings = _resolve_settings(stroke, scale, color)
    engine = _build_engine(settings)
    engine.set_rtl_enabled(rtl)
    try:
        engine.jump_to(target)
    except MorphError as exc:
        raise typer.BadParameter(str(exc)) from exc

    _log_layout(engine.layout, engine.stroke)
    final_output = _output_path(output, overwrite)
    final_output.parent.mkdir(parents=True, exist_ok=True)
    engine.render_image().save(final_output)
    console.print(
        Panel(
            f"Wrote {target.name.lower()} to [green]{final_output}[/green].",
            title="Render complete",
            border_style="green",
        )
    )


def render_frames(engine: MorphEngine, target: IconShape, fps: int, background: tuple[int, int, int]) -> list[Image.Image]:
    """Animate ``engine`` to ``target`` and capture one opaque frame per tick."""

    timeline = engine.timeline
    if not isinstance(timeline, FrameTimeline):
        raise TypeError("render_frames needs an engine driven by a FrameTimeline.")
    fill = (*background, 255)
    engine.animate_to(target)
    frames = [engine.render_image(background=fill)]
    for _ in timeline.frames(fps):
        frames.append(engine.render_image(background=fill))
    return frames


@app.command()
def animate(
    source: str = typer.Argument(..., help="Starting shape: stack, arrow, cross, or check."),
    target: str = typer.Argument(..., help="Shape to animate towards."),
    output: pathlib.Path = typer.Option(pathlib.Path("morph.gif"), "--output", "-o", help="GIF file to write."),
    fps: int = typer.Option(60, min=1, max=240, help="Frames per second."),
    duration: float | None = typer.Option(None, "--duration", min=1, help="Animation length in ms (defaults to config)."),
    stroke: str | None = typer.Option(None, "--stroke", help="bold, regular, or thin (defaults to config)."),
    scale: int | None = typer.Option(None, "--scale", min=1, help="Canvas multiplier (defaults to config)."),
    color: str | None = typer.Option(None, "--color", help="Stroke colour (defaults to config)."),
    background: str = typer.Option("#000000", "--background", help="GIF background colour."),
    rtl: bool = typer.Option(False, "--rtl/--ltr", help="Mirror the icon for right-to-left layouts."),
    overwrite: bool = typer.Option(False, "--overwrite", help="Allow replacing an existing file."),
) -> None:
    """
    Animate between two shapes and save the frames as a looping GIF.
    """

    start_shape = _parse_enum(IconShape, source, "shape")
    end_shape = _parse_enum(IconShape, target, "shape")
    settings = _resolve_settings(stroke, scale, color, duration)
    engine = _build_engine(settings)
    engine.set_rtl_enabled(rtl)
    try:
        bg = normalize_color(background)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc

    try:
        engine.jump_to(start_shape)
        frames = render_frames(engine, end_shape, fps, bg)
    except MorphError as exc:
        raise typer.BadParameter(str(exc)) from exc

    _log_layout(engine.layout, engine.stroke)
    final_output = _output_path(output, overwrite)
    final_output.parent.mkdir(parents=True, exist_ok=True)
    frames[0].save(
        final_output,
        save_all=True,
        append_images=frames[1:],
        duration=max(int(round(1000 / fps)), 1),
        loop=0,
    )
    console.print(
        Panel(
            f"Wrote {len(frames)} frames ({start_shape.name.lower()} -> {end_shape.name.lower()}) "
            f"to [green]{final_output}[/green].",
            title="Animation complete",
            border_style="green",
        )
    )


def main() -> None:
    app()
