from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator


class Mark(Enum):
    X = "x"
    O = "o"


BOARD_SIZE = 3
CELL_COUNT = BOARD_SIZE * BOARD_SIZE


@dataclass(frozen=True)
class Board:
    """Immutable snapshot of the nine cells, row-major, None for empty."""
    cells: tuple[Mark | None, ...] = field(default=(None,) * CELL_COUNT)

    def __post_init__(self):
        cells = tuple(self.cells)
        if len(cells) != CELL_COUNT:
            raise ValueError(f"Board needs exactly {CELL_COUNT} cells, got {len(cells)}")
        for cell in cells:
            if cell is not None and not isinstance(cell, Mark):
                raise ValueError(f"Invalid cell value: {cell!r}")
        object.__setattr__(self, "cells", cells)

    @classmethod
    def empty(cls) -> Board:
        return cls()

    def __getitem__(self, index: int) -> Mark | None:
        if not 0 <= index < CELL_COUNT:
            raise IndexError(f"Cell index {index} out of range")
        return self.cells[index]

    def __iter__(self) -> Iterator[Mark | None]:
        return iter(self.cells)

    def __len__(self) -> int:
        return CELL_COUNT

    def is_occupied(self, index: int) -> bool:
        return self[index] is not None

    def with_mark(self, index: int, mark: Mark) -> Board:
        """Copy of this board with one cell set."""
        self[index]  # bounds check
        cells = list(self.cells)
        cells[index] = mark
        return Board(tuple(cells))

    @staticmethod
    def position(index: int) -> tuple[int, int]:
        """(row, col) of a cell index."""
        return index // BOARD_SIZE, index % BOARD_SIZE

    def rows(self) -> list[tuple[Mark | None, ...]]:
        return [self.cells[r * BOARD_SIZE:(r + 1) * BOARD_SIZE] for r in range(BOARD_SIZE)]

    def is_full(self) -> bool:
        return all(cell is not None for cell in self.cells)

    def to_dict(self) -> dict:
        return {"squares": [cell.value if cell else None for cell in self.cells]}

    @classmethod
    def from_dict(cls, data: dict) -> Board:
        """Reconstruct board from serialized data."""
        return cls(tuple(Mark(v) if v is not None else None for v in data["squares"]))

    def to_ascii(self) -> str:
        """ASCII representation for debugging."""
        lines = []
        for row in self.rows():
            lines.append(" ".join(cell.value if cell else "." for cell in row))
        return "\n".join(lines)
