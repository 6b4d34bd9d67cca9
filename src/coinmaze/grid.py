from dataclasses import dataclass
from typing import Iterator, List, Tuple

from .tiles import WALL, is_open

Cell = Tuple[int, int]  # (row, col)


@dataclass
class Grid:
    rows: int
    cols: int
    buf: List[int]

    @classmethod
    def filled(cls, rows: int, cols: int, kind: int = WALL) -> "Grid":
        return cls(rows=rows, cols=cols, buf=[kind] * (rows * cols))

    @classmethod
    def from_rows(cls, matrix: List[List[int]]) -> "Grid":
        rows = len(matrix)
        cols = len(matrix[0]) if rows else 0
        buf: List[int] = []
        for r in matrix:
            if len(r) != cols:
                raise ValueError("ragged grid rows")
            buf.extend(r)
        return cls(rows=rows, cols=cols, buf=buf)

    def idx(self, row: int, col: int) -> int:
        return row * self.cols + col

    def get(self, row: int, col: int) -> int:
        return self.buf[self.idx(row, col)]

    def set(self, row: int, col: int, v: int) -> None:
        self.buf[self.idx(row, col)] = v

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def is_path(self, row: int, col: int) -> bool:
        return self.in_bounds(row, col) and is_open(self.get(row, col))

    def path_cells(self) -> Iterator[Cell]:
        # Row-major; placement passes depend on this order.
        for r in range(self.rows):
            for c in range(self.cols):
                if is_open(self.get(r, c)):
                    yield (r, c)

    def as_matrix(self) -> List[List[int]]:
        return [self.buf[r * self.cols:(r + 1) * self.cols] for r in range(self.rows)]
