"""Sparse matrices stored as (row, column, value) triples."""

from __future__ import annotations

from collections.abc import Iterable


class SparseMatrix:
    """A matrix holding only its listed entries, kept in row-major order."""

    def __init__(self, rows: int, cols: int, entries: Iterable[tuple[int, int, int]] = ()) -> None:
        if rows < 0 or cols < 0:
            raise ValueError("dimensions must be non-negative")
        self._rows = rows
        self._cols = cols
        triples = sorted((int(r), int(c), v) for r, c, v in entries)
        seen: set[tuple[int, int]] = set()
        for r, c, _ in triples:
            if not (0 <= r < rows and 0 <= c < cols):
                raise ValueError(f"entry ({r}, {c}) is outside a {rows}x{cols} matrix")
            if (r, c) in seen:
                raise ValueError(f"entry ({r}, {c}) is given twice")
            seen.add((r, c))
        self._entries = tuple(triples)

    @property
    def rows(self) -> int:
        """Number of rows."""
        return self._rows

    @property
    def cols(self) -> int:
        """Number of columns."""
        return self._cols

    @property
    def shape(self) -> tuple[int, int]:
        """(rows, cols)."""
        return self._rows, self._cols

    @property
    def entries(self) -> tuple[tuple[int, int, int], ...]:
        """Stored entries in row-major order."""
        return self._entries

    def __add__(self, other: object) -> SparseMatrix:
        if not isinstance(other, SparseMatrix):
            return NotImplemented
        if self.shape != other.shape:
            raise ValueError("matrices of different shapes cannot be added")
        a, b = self._entries, other._entries
        merged: list[tuple[int, int, int]] = []
        i = j = 0
        while i < len(a) and j < len(b):
            pos_a, pos_b = a[i][:2], b[j][:2]
            if pos_a < pos_b:
                merged.append(a[i])
                i += 1
            elif pos_a > pos_b:
                merged.append(b[j])
                j += 1
            else:
                merged.append((*pos_a, a[i][2] + b[j][2]))
                i += 1
                j += 1
        merged.extend(a[i:])
        merged.extend(b[j:])
        return SparseMatrix(self._rows, self._cols, merged)

    def to_dense(self) -> list[list[int]]:
        """Return the full matrix as a list of rows."""
        dense = [[0] * self._cols for _ in range(self._rows)]
        for r, c, v in self._entries:
            dense[r][c] = v
        return dense

    def render(self) -> str:
        """Return the full matrix as text, each value followed by a space."""
        return "".join(
            "".join(f"{value} " for value in row) + "\n" for row in self.to_dense()
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SparseMatrix):
            return NotImplemented
        return self.shape == other.shape and self._entries == other._entries

    def __repr__(self) -> str:
        return f"SparseMatrix({self._rows}, {self._cols}, {list(self._entries)!r})"