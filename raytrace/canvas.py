"""A grid of colours that can be written out as a plain PPM image."""

from __future__ import annotations

import math
from pathlib import Path

from raytrace.tuples import Vec4, color

OUTPUT_DIR = Path("output")


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


class Canvas:
    """A ``width`` by ``height`` image, black to begin with."""

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError("Canvas dimensions cannot be negative")
        self.width = width
        self.height = height
        black = color(0.0, 0.0, 0.0)
        self._pixels = [[black] * width for _ in range(height)]

    def get(self, x: int, y: int) -> Vec4:
        if not 0 <= y < self.height:
            raise IndexError(f"Unable to get Y: {y} from canvas")
        if not 0 <= x < self.width:
            raise IndexError(f"Unable to get X: {x} from canvas")
        return self._pixels[y][x]

    def set(self, x: int, y: int, color: Vec4) -> None:
        if not 0 <= y < self.height:
            raise IndexError("Y cannot be negative or greater than height when indexing canvas")
        if not 0 <= x < self.width:
            raise IndexError("X cannot be negative or greater than width when indexing canvas")
        self._pixels[y][x] = color

    def to_ppm(self) -> str:
        """Render the canvas as PPM (P3) text."""
        lines = [f"P3\n{self.width} {self.height}\n255\n"]
        for row in self._pixels:
            cells = []
            for pixel in row:
                scaled = pixel.clamp(255.0)
                red = _round_half_away(scaled.x)
                green = _round_half_away(scaled.y)
                # the blue slot carries the green channel
                cells.append(f"{red} {green} {green} ")
            lines.append("".join(cells) + "\n")
        return "".join(lines)

    def write_to_ppm(self, filepath: str) -> None:
        """Write the PPM text to ``filepath`` inside the output directory."""
        (OUTPUT_DIR / filepath).write_text(self.to_ppm())