"""Canonical weight matrices.

Different weight matrices can induce the same monomial ordering: rows can be
scaled by positive integers, rows that only repeat information of the rows
above them can be dropped, and a row may be shifted by any combination of
the rows above it, since it is only consulted once those rows tie.
``canonicalize`` picks one representative per ordering by an integer-only
row reduction:

* zero rows are dropped and every kept row is made primitive;
* each new row is cleared, in order, at the pivot column (first nonzero
  entry) of every row already kept, using
  ``row <- |p| * row - sign(p) * row[h] * kept`` with ``p = kept[h]``.

The coefficient in front of the new row stays positive, so no comparison
changes sign. The result only depends on the ordering, which is what makes
it usable for equality and hashing.
"""

from functools import lru_cache
from typing import List, Tuple

from .matrix import IntMatrix, primitive
from .orderings import GenOrdering, ModuleOrdering, MonomialOrdering, OrderKind, flatten
from .weights import weight_matrix


def _pivot(row: Tuple[int, ...]) -> int:
    for j, x in enumerate(row):
        if x != 0:
            return j
    return -1


def _sign(x: int) -> int:
    return (x > 0) - (x < 0)


def canonicalize(w: IntMatrix) -> IntMatrix:
    """Reduce ``w`` to the unique weight matrix of the ordering it induces."""
    w = IntMatrix.from_rows(w)
    kept: List[Tuple[int, ...]] = []
    pivots: List[int] = []

    for i in range(w.nrows):
        if w.is_zero_row(i):
            continue
        nw = primitive(w.row(i))
        for row, h in zip(kept, pivots):
            x = nw[h]
            if x == 0:
                continue
            p = row[h]
            s = _sign(p) * x
            nw = tuple(abs(p) * a - s * b for a, b in zip(nw, row))
        if any(nw):
            nw = primitive(nw)
            kept.append(nw)
            pivots.append(_pivot(nw))

    return IntMatrix(tuple(kept), w.ncols)


@lru_cache(maxsize=1024)
def _canonical_of_leaves(leaves, gen_offset: int) -> IntMatrix:
    return canonicalize(weight_matrix(leaves, gen_offset))


def canonical_form(o) -> IntMatrix:
    """Canonical weight matrix of an ordering handle, tree or matrix."""
    # keyed on the flat tuple of leaves: hashing a deep tree would recurse
    if isinstance(o, MonomialOrdering):
        return _canonical_of_leaves(o.flat(), 0)
    if isinstance(o, ModuleOrdering):
        return _canonical_of_leaves(o.flat(), o.module.base_ring.nvars)
    if isinstance(o, IntMatrix):
        return canonicalize(o)
    return _canonical_of_leaves(flatten(o), 0)


def simplify(o: MonomialOrdering) -> MonomialOrdering:
    """Equivalent ordering given by a single matrix block holding the
    canonical weight matrix."""
    ww = canonical_form(o)
    return MonomialOrdering(o.ring, GenOrdering(range(1, ww.ncols + 1), OrderKind.MATRIX, ww))
