"""Glyph metrics and quad layout for bitmap text."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np
from PIL import Image, ImageDraw, ImageFont

from orrery.transforms import ortho

GLYPH_COUNT = 128


@dataclass(frozen=True)
class Glyph:
    """Metrics of one rendered character.

    ``bearing`` is the offset from the origin on the baseline to the
    bitmap's left/top edge; ``advance`` is in 1/64 pixel units.
    """

    size: tuple[int, int] = (0, 0)
    bearing: tuple[int, int] = (0, 0)
    advance: int = 0
    bitmap: bytes = b""


_EMPTY = Glyph()


def _render(font: ImageFont.FreeTypeFont, char: str) -> Glyph:
    left, top, right, bottom = font.getbbox(char, anchor="ls")
    width = max(right - left, 0)
    height = max(bottom - top, 0)
    bitmap = b""
    if width and height:
        image = Image.new("L", (width, height), 0)
        ImageDraw.Draw(image).text((-left, -top), char, font=font, fill=255, anchor="ls")
        bitmap = image.tobytes()
    advance = int(round(font.getlength(char) * 64))
    return Glyph(size=(width, height), bearing=(left, -top), advance=advance, bitmap=bitmap)


def load_glyphs(font_path: str, font_size: int) -> dict[str, Glyph]:
    """Rasterise the first 128 characters of a font at ``font_size`` pixels.

    Raises OSError if the font cannot be opened.
    """
    if font_size <= 0:
        raise ValueError("font size must be positive")
    font = ImageFont.truetype(font_path, font_size)
    return {chr(code): _render(font, chr(code)) for code in range(GLYPH_COUNT)}


@dataclass
class TextLayout:
    """Lays out text as textured quads in window pixel coordinates."""

    glyphs: dict[str, Glyph] = field(default_factory=dict)
    width: int = 1280
    height: int = 720

    @property
    def projection(self) -> np.ndarray:
        return ortho(0.0, float(self.width), 0.0, float(self.height))

    def quads(self, text: str, x: float, y: float, scale: float) -> list[tuple[str, np.ndarray]]:
        """Return one ``(char, vertices)`` pair per character.

        ``vertices`` is a (6, 4) array of ``x, y, u, v`` rows, two triangles.
        Characters without a glyph give an empty quad and no advance.
        """
        result = []
        for char in text:
            glyph = self.glyphs.get(char, _EMPTY)
            xpos = x + glyph.bearing[0] * scale
            ypos = y - (glyph.size[1] - glyph.bearing[1]) * scale
            w = glyph.size[0] * scale
            h = glyph.size[1] * scale
            vertices = np.array(
                [
                    [xpos, ypos + h, 0.0, 0.0],
                    [xpos, ypos, 0.0, 1.0],
                    [xpos + w, ypos, 1.0, 1.0],
                    [xpos, ypos + h, 0.0, 0.0],
                    [xpos + w, ypos, 1.0, 1.0],
                    [xpos + w, ypos + h, 1.0, 0.0],
                ]
            )
            result.append((char, vertices))
            x += (glyph.advance >> 6) * scale
        return result