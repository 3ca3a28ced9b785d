from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Sequence, Tuple

from ..exceptions import ShapeError

FILLED_CHARS = ("#", "X", "1")


class Rotation(Enum):
    """Clockwise rotation in quarter turns."""

    R0 = 0
    R90 = 90
    R180 = 180
    R270 = 270

    @classmethod
    def from_degrees(cls, degrees: int) -> "Rotation":
        return cls(int(degrees) % 360)

    @property
    def steps(self) -> int:
        return self.value // 90

    def next(self) -> "Rotation":
        return Rotation.from_degrees(self.value + 90)


@dataclass(frozen=True)
class Shape:
    """
    Rectangular binary matrix describing an item's cells in its own frame.

    Rows are stored top to bottom; ``cells[r][c] == 1`` marks a filled cell.
    Instances are immutable, rotation always produces a new Shape.
    """

    cells: Tuple[Tuple[int, ...], ...]

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "Shape":
        """Build a shape from nested rows, rejecting malformed matrices."""
        if not rows or not rows[0]:
            raise ShapeError("Shape must have at least one row and one column")
        width = len(rows[0])
        normalized: List[Tuple[int, ...]] = []
        for r, row in enumerate(rows):
            if len(row) != width:
                raise ShapeError(f"Shape row {r} has length {len(row)}, expected {width}")
            for value in row:
                if value not in (0, 1):
                    raise ShapeError(f"Shape cells must be 0 or 1, got {value!r}")
            normalized.append(tuple(int(v) for v in row))
        return cls(tuple(normalized))

    @classmethod
    def from_ascii(cls, lines: Iterable[str], filled_chars: Iterable[str] = FILLED_CHARS) -> "Shape":
        """
        Build a shape from ASCII rows for tests/tools.
        - Any char in filled_chars is an occupied cell.
        - All others are empty.
        """
        filled = set(filled_chars)
        return cls.from_rows([[1 if ch in filled else 0 for ch in line] for line in lines])

    @classmethod
    def rectangle(cls, width: int, height: int) -> "Shape":
        return cls.from_rows([[1] * width for _ in range(height)])

    @property
    def height(self) -> int:
        return len(self.cells)

    @property
    def width(self) -> int:
        return len(self.cells[0])

    @property
    def cell_count(self) -> int:
        return sum(sum(row) for row in self.cells)

    def offsets(self) -> List[Tuple[int, int]]:
        """Local (dx, dy) pairs of filled cells in row-major order."""
        return [
            (c, r)
            for r, row in enumerate(self.cells)
            for c, value in enumerate(row)
            if value == 1
        ]

    def rotated(self, rotation: Rotation) -> "Shape":
        shape = self
        for _ in range(rotation.steps):
            shape = rotate_clockwise(shape)
        return shape

    def to_rows(self) -> List[List[int]]:
        return [list(row) for row in self.cells]

    def to_ascii(self) -> List[str]:
        return ["".join("#" if v else "." for v in row) for row in self.cells]

    def __repr__(self) -> str:
        return f"Shape({'/'.join(self.to_ascii())})"


def rotate_clockwise(shape: Shape) -> Shape:
    """Rotate 90° clockwise: cell (r, c) moves to (c, R-1-r)."""
    rows = shape.height
    cols = shape.width
    # new[c][rows-1-r] = old[r][c]
    rotated = tuple(
        tuple(shape.cells[rows - 1 - nc][nr] for nc in range(rows))
        for nr in range(cols)
    )
    return Shape(rotated)


__all__ = [
    'Rotation',
    'Shape',
    'rotate_clockwise',
]
