import typing as tp
import math
from dataclasses import dataclass

from rich.text import Text
from textual.reactive import reactive
from textual.app import RenderResult
from textual.widget import Widget

from .formatting import pointerAngle, SECONDS_PER_REVOLUTION

# A terminal cell is about twice as tall as it is wide.
CELL_ASPECT = 2.0

TOTAL_STYLE = 'bold dark_orange'
LAP_STYLE = 'bold dodger_blue1'
MAJOR_STYLE = 'bold'
MINOR_STYLE = 'dim'

@dataclass(frozen=True)
class TickMark:
    second: int
    major: bool

    @property
    def angle(self) -> float:
        return pointerAngle(self.second)

def tickMarks() -> list[TickMark]:
    return [
        TickMark(second=s, major=s % 5 == 0)
        for s in range(SECONDS_PER_REVOLUTION)
    ]

@dataclass(frozen=True)
class Dial:
    '''
    Geometry of a circular dial fitted into a W x H grid of cells.
    '''
    width: int
    height: int

    @property
    def center(self) -> tuple[float, float]:
        return (self.width - 1) / 2, (self.height - 1) / 2

    @property
    def radius_y(self) -> float:
        return max(0.0, min(
            (self.height - 1) / 2, (self.width - 1) / 2 / CELL_ASPECT,
        ))

    def cellAt(self, angle: float, fraction: float) -> tuple[int, int]:
        '''
        `angle` in degrees clockwise from 12 o'clock.
        `fraction` of the radius, 0 is the center.
        '''
        cx, cy = self.center
        ry = self.radius_y * fraction
        rx = ry * CELL_ASPECT
        theta = math.radians(angle)
        return (
            round(cx + rx * math.sin(theta)),
            round(cy - ry * math.cos(theta)),
        )

    def pointerCells(
        self, angle: float, length: float = 0.8,
    ) -> list[tuple[int, int]]:
        steps = max(1, math.ceil(self.radius_y * CELL_ASPECT * length))
        cells: list[tuple[int, int]] = []
        for i in range(1, steps + 1):
            cell = self.cellAt(angle, length * i / steps)
            if cell != self.cellAt(0, 0) and cell not in cells:
                cells.append(cell)
        return cells

def pointerGlyph(angle: float) -> str:
    octant = round((angle % 180) / 45) % 4
    return '|/-\\'[octant]

class ClockFace(Widget):
    total_time: reactive[float] = reactive(0.0)
    lap_time: reactive[float | None] = reactive(None)

    def render(self) -> RenderResult:
        W, H = self.size
        if W < 3 or H < 3:
            return 'N/A'
        dial = Dial(W, H)
        grid: list[list[tuple[str, str]]] = [
            [(' ', '')] * W for _ in range(H)
        ]
        def put(cell: tuple[int, int], glyph: str, style: str) -> None:
            x, y = cell
            if 0 <= x < W and 0 <= y < H:
                grid[y][x] = (glyph, style)

        for mark in tickMarks():
            put(
                dial.cellAt(mark.angle, 1.0),
                '•' if mark.major else '·',
                MAJOR_STYLE if mark.major else MINOR_STYLE,
            )
        pointers: list[tuple[float, str]] = []
        if self.lap_time is not None:
            pointers.append((self.lap_time, LAP_STYLE))
        pointers.append((self.total_time, TOTAL_STYLE))   # drawn on top
        for seconds, style in pointers:
            angle = pointerAngle(seconds)
            glyph = pointerGlyph(angle)
            for cell in dial.pointerCells(angle):
                put(cell, glyph, style)
        put(dial.cellAt(0, 0), 'o', TOTAL_STYLE)

        text = Text(no_wrap=True, overflow='crop')
        for y, row in enumerate(grid):
            if y:
                text.append('\n')
            for glyph, style in row:
                text.append(glyph, style=style or None)
        return text
