"""Isometric wire-frame rendering of a height map onto a pixel canvas.

A height map is a rectangular grid of integer heights, indexed
``grid[row][column]``. An optional colour grid of the same shape gives
each point a colour; a colour of 0 means the default white.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, List, Optional, Sequence, Tuple

__all__ = [
    "Key",
    "View",
    "Canvas",
    "isometric",
    "draw_segment",
    "render",
    "fit_zoom",
    "handle_key",
    "handle_mouse",
    "CENTER_OFFSET",
    "DEFAULT_COLOR",
]

ANGLE = 0.9
CENTER_OFFSET = 950
Z_SCALE = 3.5
SHIFT_STEP = 40
ZOOM_STEP = 2
DEFAULT_COLOR = 0xFFFFFF

Grid = Sequence[Sequence[int]]
Point = Tuple[int, int]


class Key(IntEnum):
    """Key and button codes the viewer reacts to."""

    SCROLL_UP = 4
    SCROLL_DOWN = 5
    MINUS = 45
    PLUS = 61
    A = 97
    D = 100
    S = 115
    W = 119
    ESCAPE = 65307


@dataclass
class View:
    """Zoom factor and screen offsets applied when rendering."""

    zoom: int
    shift_x: int = 0
    shift_y: int = 0


class Canvas:
    """A fixed-size image holding 32-bit pixel colours."""

    def __init__(self, width: int, height: int) -> None:
        for name, value in (("width", width), ("height", height)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"{name} must be an int, got {type(value).__name__}")
            if value <= 0:
                raise ValueError(f"{name} must be positive, got {value}")
        self.width = width
        self.height = height
        self.pixels: Dict[Point, int] = {}

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set a pixel; points on the top or left edge or outside the canvas are ignored."""
        if x >= self.width or x <= 0 or y >= self.height or y <= 0:
            return
        self.pixels[(x, y)] = color & 0xFFFFFFFF

    def pixel(self, x: int, y: int) -> int:
        """Return the colour at a point, 0 where nothing was drawn."""
        return self.pixels.get((x, y), 0)

    def clear(self) -> None:
        """Reset every pixel to 0."""
        self.pixels.clear()


def isometric(x: float, y: float, z: float) -> Tuple[float, float]:
    """Project a point; the new ``x`` feeds into the computation of ``y``."""
    new_x = (x - y) * math.cos(ANGLE)
    new_y = (new_x + y) * math.sin(ANGLE) - z
    return new_x, new_y


def _shape(grid: Grid, colors: Optional[Grid]) -> Tuple[int, int]:
    rows = len(grid)
    columns = len(grid[0]) if rows else 0
    if any(len(row) != columns for row in grid):
        raise ValueError("every row of the height map must have the same length")
    if colors is not None:
        if len(colors) != rows or any(len(row) != columns for row in colors):
            raise ValueError("the colour grid must have the same shape as the height map")
    return rows, columns


def _cell(grid: Grid, point: Point) -> int:
    x, y = point
    if not (0 <= y < len(grid) and 0 <= x < len(grid[y])):
        raise IndexError(f"point {point} lies outside the map")
    return grid[y][x]


def draw_segment(
    canvas: Canvas,
    view: View,
    grid: Grid,
    colors: Optional[Grid],
    start: Point,
    end: Point,
) -> List[Point]:
    """Draw the edge between two map points and return the pixels visited.

    The line takes the colour of the start point. Pixels outside the
    canvas are visited but not drawn; the walk stops once it leaves the
    canvas.
    """
    scale = view.zoom / Z_SCALE
    z_start = int(_cell(grid, start) * scale)
    z_end = int(_cell(grid, end) * scale)
    color = (_cell(colors, start) if colors is not None else 0) or DEFAULT_COLOR

    xs, ys = isometric(start[0] * view.zoom, start[1] * view.zoom, z_start)
    xe, ye = isometric(end[0] * view.zoom, end[1] * view.zoom, z_end)
    xs += view.shift_x + CENTER_OFFSET
    ys += view.shift_y
    xe += view.shift_x + CENTER_OFFSET
    ye += view.shift_y

    dx = xe - xs
    dy = ye - ys
    steps = max(int(abs(dx)), int(abs(dy)))
    if steps == 0:
        return []
    dx /= steps
    dy /= steps

    visited: List[Point] = []
    while int(xs - xe) or int(ys - ye):
        point = (int(xs), int(ys))
        canvas.put_pixel(point[0], point[1], color)
        visited.append(point)
        xs += dx
        ys += dy
        if xs < 0 or ys < 0 or xs > canvas.width or ys > canvas.height:
            break
    return visited


def render(canvas: Canvas, view: View, grid: Grid, colors: Optional[Grid] = None) -> None:
    """Draw every edge of the map: each point to its right and lower neighbour."""
    rows, columns = _shape(grid, colors)
    for y in range(rows):
        for x in range(columns):
            if x < columns - 1:
                draw_segment(canvas, view, grid, colors, (x, y), (x + 1, y))
            if y < rows - 1:
                draw_segment(canvas, view, grid, colors, (x, y), (x, y + 1))


def _fits(rows: int, columns: int, zoom: int, canvas: Canvas) -> bool:
    x = columns * zoom
    y = rows * zoom
    x = int((x - y) * math.cos(ANGLE))
    y = int((x + y) * math.sin(ANGLE))
    x += CENTER_OFFSET
    return x <= canvas.width and y <= canvas.height


def fit_zoom(rows: int, columns: int, zoom: int, canvas: Canvas) -> int:
    """Return a zoom at which a map of the given size fits on the canvas.

    A zoom that already fits is returned unchanged. Otherwise the zoom is
    lowered step by step, and the value returned is one below the first
    zoom found to fit.
    """
    if _fits(rows, columns, zoom, canvas):
        return zoom
    while True:
        tried = zoom
        fits = _fits(rows, columns, tried, canvas)
        zoom -= 1
        if fits:
            return zoom
        if tried < 0:
            raise ValueError(
                f"a {columns}x{rows} map cannot fit a {canvas.width}x{canvas.height} canvas"
            )


def handle_key(view: View, key: int) -> bool:
    """Apply a key press to the view; return False when the viewer should close."""
    if key == Key.W:
        view.shift_y -= SHIFT_STEP
    if key == Key.S:
        view.shift_y += SHIFT_STEP
    if key == Key.A:
        view.shift_x -= SHIFT_STEP
    if key == Key.D:
        view.shift_x += SHIFT_STEP
    if key in (Key.SCROLL_UP, Key.PLUS):
        view.zoom += ZOOM_STEP
    if key in (Key.SCROLL_DOWN, Key.MINUS):
        view.zoom -= ZOOM_STEP
    return key != Key.ESCAPE


def handle_mouse(view: View, button: int) -> None:
    """Zoom in on scroll up and out on scroll down."""
    if button == Key.SCROLL_UP:
        view.zoom += ZOOM_STEP
    elif button == Key.SCROLL_DOWN:
        view.zoom -= ZOOM_STEP