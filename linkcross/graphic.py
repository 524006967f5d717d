"""Colours and a painter that draws model shapes on a canvas."""

from __future__ import annotations

import logging
from enum import Enum

from .constants import R_MAX
from .geometry import Point

_log = logging.getLogger(__name__)


class Color(Enum):
    WHITE = "white"
    GREY = "grey"
    BLACK = "black"
    RED = "red"
    GREEN = "green"
    BLUE = "blue"
    ORANGE = "orange"
    PURPLE = "purple"
    CYAN = "cyan"
    NO_COLOR = "none"


_RGB = {
    Color.WHITE: (1.0, 1.0, 1.0),
    Color.GREY: (0.5, 0.5, 0.5),
    Color.BLACK: (0.0, 0.0, 0.0),
    Color.RED: (1.0, 0.0, 0.0),
    Color.GREEN: (0.0, 0.65, 0.0),
    Color.BLUE: (0.65, 0.65, 1.0),
    Color.ORANGE: (1.0, 0.65, 0.0),
    Color.PURPLE: (0.65, 0.0, 0.65),
    Color.CYAN: (0.0, 1.0, 1.0),
}


def rgb(color: Color) -> tuple[float, float, float]:
    """Red, green, blue components in [0, 1]; NO_COLOR falls back to white."""
    if color is Color.NO_COLOR:
        _log.warning("NO_COLOR is not a drawable colour; using white")
        return _RGB[Color.WHITE]
    return _RGB[color]


def hex_color(color: Color) -> str:
    """The colour as a ``#rrggbb`` string."""
    return "#" + "".join(f"{round(c * 255):02x}" for c in rgb(color))


class Painter:
    """Draws in model coordinates on a canvas with ``create_line`` and ``create_oval``.

    The model origin sits at the canvas centre, the y axis points up, and
    the arena of radius ``R_MAX`` fits the shorter side.
    """

    def __init__(self, canvas, width: int, height: int) -> None:
        self.canvas = canvas
        self.width = width
        self.height = height
        self.scale = min(width, height) / (2 * R_MAX)

    def _to_screen(self, p: Point) -> tuple[float, float]:
        return (self.width // 2 + p.x * self.scale, self.height // 2 - p.y * self.scale)

    def draw_segment(self, p1: Point, p2: Point, width: float, color: Color) -> None:
        if color is Color.NO_COLOR:
            _log.warning("segment drawn with NO_COLOR")
        x1, y1 = self._to_screen(p1)
        x2, y2 = self._to_screen(p2)
        self.canvas.create_line(
            x1, y1, x2, y2, width=width * self.scale, fill=hex_color(color)
        )

    def draw_circle(
        self, center: Point, radius: float, width: float, fill: Color, outline: Color
    ) -> None:
        """Draw a circle; ``fill`` is the inside colour, ``outline`` the border."""
        if fill is Color.NO_COLOR and outline is Color.NO_COLOR:
            return
        cx, cy = self._to_screen(center)
        r = radius * self.scale
        options = {
            "fill": "" if fill is Color.NO_COLOR else hex_color(fill),
            "outline": "" if outline is Color.NO_COLOR else hex_color(outline),
            "width": width * self.scale if outline is not Color.NO_COLOR else 0,
        }
        self.canvas.create_oval(cx - r, cy - r, cx + r, cy + r, **options)