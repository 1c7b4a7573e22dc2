from dataclasses import dataclass
from math import gcd
from numbers import Integral
from typing import Sequence, Tuple

import numpy as np


def _as_int(x) -> int:
    if isinstance(x, (bool, np.bool_)) or not isinstance(x, (Integral, np.integer)):
        raise ValueError(f"Matrix entries must be integers, got {x!r}")
    return int(x)


@dataclass(frozen=True)
class IntMatrix:
    """Immutable matrix over the integers.

    Rows are stored as tuples of Python ints, so entries have arbitrary
    precision and the matrix is hashable. ``ncols`` is kept explicitly so a
    matrix with no rows still has a width.
    """

    data: Tuple[Tuple[int, ...], ...]
    ncols: int = -1

    def __post_init__(self):
        rows = tuple(tuple(_as_int(x) for x in row) for row in self.data)
        width = len(rows[0]) if rows else max(self.ncols, 0)
        for row in rows:
            if len(row) != width:
                raise ValueError("All rows must have the same length")
        if self.ncols >= 0 and self.ncols != width:
            raise ValueError(f"Dimension mismatch: {self.ncols} != {width}")
        object.__setattr__(self, "data", rows)
        object.__setattr__(self, "ncols", width)

    @property
    def nrows(self) -> int:
        return len(self.data)

    @property
    def shape(self) -> Tuple[int, int]:
        return self.nrows, self.ncols

    @classmethod
    def from_rows(cls, rows, ncols: int = -1) -> "IntMatrix":
        if isinstance(rows, IntMatrix):
            return rows
        if isinstance(rows, np.ndarray):
            if rows.ndim != 2:
                raise ValueError(f"Expected a 2-dimensional array, got {rows.ndim}")
            return cls(tuple(tuple(r) for r in rows.tolist()), rows.shape[1])
        try:
            data = tuple(tuple(r) for r in rows)
        except TypeError:
            raise ValueError(f"Expected a matrix given as a list of rows, got {rows!r}") from None
        return cls(data, ncols)

    @classmethod
    def zeros(cls, nrows: int, ncols: int) -> "IntMatrix":
        return cls(tuple((0,) * ncols for _ in range(nrows)), ncols)

    @classmethod
    def identity(cls, n: int) -> "IntMatrix":
        rows = [[1 if i == j else 0 for j in range(n)] for i in range(n)]
        return cls.from_rows(rows, n)

    @classmethod
    def anti_diagonal(cls, n: int) -> "IntMatrix":
        """Square matrix with ``1`` on the anti-diagonal."""
        rows = [[1 if i + j == n - 1 else 0 for j in range(n)] for i in range(n)]
        return cls.from_rows(rows, n)

    @classmethod
    def ones_row(cls, n: int) -> "IntMatrix":
        return cls(((1,) * n,), n)

    def row(self, i: int) -> Tuple[int, ...]:
        return self.data[i]

    def is_zero_row(self, i: int) -> bool:
        return not any(self.data[i])

    def is_zero(self) -> bool:
        return all(not any(row) for row in self.data)

    def hcat_zeros(self, k: int) -> "IntMatrix":
        """Append ``k`` zero columns on the right."""
        if k <= 0:
            return self
        pad = (0,) * k
        return IntMatrix(tuple(row + pad for row in self.data), self.ncols + k)

    @classmethod
    def hcat(cls, A: "IntMatrix", B: "IntMatrix") -> "IntMatrix":
        if A.nrows != B.nrows:
            raise ValueError(f"Dimension mismatch: {A.nrows} != {B.nrows}")
        rows = tuple(a + b for a, b in zip(A.data, B.data))
        return cls(rows, A.ncols + B.ncols)

    @classmethod
    def vcat(cls, A: "IntMatrix", B: "IntMatrix") -> "IntMatrix":
        """
        Row concatenation:
            [ A ]
            [ B ]
        Both blocks must have the same number of columns.
        """
        if A.ncols != B.ncols:
            raise ValueError(f"Dimension mismatch: {A.ncols} != {B.ncols}")
        return cls(A.data + B.data, A.ncols)

    def __neg__(self) -> "IntMatrix":
        return IntMatrix(tuple(tuple(-x for x in row) for row in self.data), self.ncols)

    def copy(self) -> "IntMatrix":
        return IntMatrix(self.data, self.ncols)

    def tolist(self):
        return [list(row) for row in self.data]

    def to_numpy(self) -> np.ndarray:
        # object dtype keeps Python ints, so large entries never overflow
        out = np.empty(self.shape, dtype=object)
        for i, row in enumerate(self.data):
            for j, x in enumerate(row):
                out[i, j] = x
        return out

    def to_sympy(self):
        import sympy as sp
        return sp.Matrix(self.nrows, self.ncols, [x for row in self.data for x in row])

    def pprint(self):
        from sympy import pprint
        pprint(self.to_sympy())


def content(row: Sequence[int]) -> int:
    """Non-negative gcd of the entries of ``row``; ``0`` for a zero row."""
    c = 0
    for x in row:
        c = gcd(c, x)
        if c == 1:
            break
    return c


def divexact(row: Sequence[int], c: int) -> Tuple[int, ...]:
    out = []
    for x in row:
        q, r = divmod(x, c)
        if r != 0:
            raise ValueError(f"Exact division {x}/{c} impossible")
        out.append(q)
    return tuple(out)


def primitive(row: Sequence[int]) -> Tuple[int, ...]:
    c = content(row)
    if c in (0, 1):
        return tuple(row)
    return divexact(row, c)
