"""Drive a morph by hand and save a contact sheet of the frames."""

from __future__ import annotations

from pathlib import Path

from PIL import Image

from morphicon import IconShape, MorphEngine
from morphicon.timeline import FrameTimeline


def build(output: Path = Path("stack_to_arrow.png"), fps: int = 30) -> Path:
    """Animate stack -> arrow -> stack and tile every frame left to right."""

    engine = MorphEngine(color="#1e88e5", scale=2, timeline=FrameTimeline(duration_ms=400))
    frames = [engine.render_image(background=(255, 255, 255, 255))]
    for shape in (IconShape.ARROW, IconShape.STACK):
        engine.animate_to(shape)
        for _ in engine.timeline.frames(fps):
            frames.append(engine.render_image(background=(255, 255, 255, 255)))

    width, height = frames[0].size
    sheet = Image.new("RGBA", (width * len(frames), height), (255, 255, 255, 255))
    for index, frame in enumerate(frames):
        sheet.paste(frame, (index * width, 0))
    sheet.save(output)
    return output


if __name__ == "__main__":
    print(build())
