"""Term comparators.

``_isless_<ord>(f, k, l)`` returns ``True`` if the ``k``-th term of ``f`` is
strictly smaller than the ``l``-th term in the ordering ``<ord>``; equal
monomials are never smaller. The named orderings read the exponent vectors
directly instead of going through a weight matrix.
"""

from functools import cmp_to_key
from typing import Callable, List, Sequence

import numpy as np

from .matrix import IntMatrix
from .orderings import (
    ModuleOrdering,
    MonomialOrdering,
    OrderKind,
    check_weights,
)
from .ring import Polynomial, PolynomialRing

Comparator = Callable[[Polynomial, int, int], bool]


def _isless_lex(f, k, l):
    for ek, el in zip(f.exponent_vector(k), f.exponent_vector(l)):
        if ek == el:
            continue
        return ek < el
    return False


def _isless_neglex(f, k, l):
    for ek, el in zip(f.exponent_vector(k), f.exponent_vector(l)):
        if ek == el:
            continue
        return ek > el
    return False


def _isless_revlex(f, k, l):
    for ek, el in zip(reversed(f.exponent_vector(k)), reversed(f.exponent_vector(l))):
        if ek == el:
            continue
        return ek < el
    return False


def _isless_negrevlex(f, k, l):
    for ek, el in zip(reversed(f.exponent_vector(k)), reversed(f.exponent_vector(l))):
        if ek == el:
            continue
        return ek > el
    return False


def _isless_deglex(f, k, l):
    tdk = f.total_degree(k)
    tdl = f.total_degree(l)
    if tdk != tdl:
        return tdk < tdl
    return _isless_lex(f, k, l)


def _isless_degrevlex(f, k, l):
    tdk = f.total_degree(k)
    tdl = f.total_degree(l)
    if tdk != tdl:
        return tdk < tdl
    return _isless_negrevlex(f, k, l)


def _isless_negdeglex(f, k, l):
    tdk = f.total_degree(k)
    tdl = f.total_degree(l)
    if tdk != tdl:
        return tdk > tdl
    return _isless_lex(f, k, l)


def _isless_negdegrevlex(f, k, l):
    tdk = f.total_degree(k)
    tdl = f.total_degree(l)
    if tdk != tdl:
        return tdk > tdl
    return _isless_negrevlex(f, k, l)


def weighted_degree(f: Polynomial, k: int, w: Sequence[int]) -> int:
    """Degree of the ``k``-th term of ``f`` with variable ``i`` weighted by
    ``w[i]``. No sanity checks are performed."""
    return sum(a * b for a, b in zip(f.exponent_vector(k), w))


def _isless_weightlex(f, k, l, w):
    dk = weighted_degree(f, k, w)
    dl = weighted_degree(f, l, w)
    if dk != dl:
        return dk < dl
    return _isless_lex(f, k, l)


def _isless_weightrevlex(f, k, l, w):
    dk = weighted_degree(f, k, w)
    dl = weighted_degree(f, l, w)
    if dk != dl:
        return dk < dl
    return _isless_negrevlex(f, k, l)


def _isless_weightneglex(f, k, l, w):
    dk = weighted_degree(f, k, w)
    dl = weighted_degree(f, l, w)
    if dk != dl:
        return dk > dl
    return _isless_lex(f, k, l)


def _isless_weightnegrevlex(f, k, l, w):
    dk = weighted_degree(f, k, w)
    dl = weighted_degree(f, l, w)
    if dk != dl:
        return dk > dl
    return _isless_negrevlex(f, k, l)


def _isless_matrix(f, k, l, M: IntMatrix):
    ek = f.exponent_vector(k)
    el = f.exponent_vector(l)
    for row in M.data:
        eki = sum(a * b for a, b in zip(row, ek))
        eli = sum(a * b for a, b in zip(row, el))
        if eki != eli:
            return eki < eli
    return False


_PLAIN = {
    OrderKind.LEX: _isless_lex,
    OrderKind.REVLEX: _isless_revlex,
    OrderKind.DEGLEX: _isless_deglex,
    OrderKind.DEGREVLEX: _isless_degrevlex,
    OrderKind.NEGLEX: _isless_neglex,
    OrderKind.NEGREVLEX: _isless_negrevlex,
    OrderKind.NEGDEGLEX: _isless_negdeglex,
    OrderKind.NEGDEGREVLEX: _isless_negdegrevlex,
}

_WEIGHTED = {
    OrderKind.WLEX: _isless_weightlex,
    OrderKind.WREVLEX: _isless_weightrevlex,
    OrderKind.WNEGLEX: _isless_weightneglex,
    OrderKind.WNEGREVLEX: _isless_weightnegrevlex,
}


def _weighted_lt(R: PolynomialRing, kind: OrderKind, w) -> Comparator:
    w = tuple(int(x) for x in w)
    if len(w) != R.nvars:
        raise ValueError("Number of weights has to match number of variables")
    check_weights(kind, w)
    isless = _WEIGHTED[kind]
    return lambda f, k, l: isless(f, k, l, w)


def _matrix_lt(R: PolynomialRing, M) -> Comparator:
    M = IntMatrix.from_rows(M)
    if M.ncols != R.nvars:
        raise ValueError("Matrix dimensions have to match number of variables")
    return lambda f, k, l: _isless_matrix(f, k, l, M)


def _lt_from_handle(R: PolynomialRing, o: MonomialOrdering) -> Comparator:
    if o.ring is not R:
        raise ValueError("wrong rings")
    leaves = o.flat()
    if len(leaves) == 1 and leaves[0].vars == range(1, R.nvars + 1):
        leaf = leaves[0]
        if leaf.ord in _PLAIN:
            return _PLAIN[leaf.ord]
        if leaf.ord in _WEIGHTED:
            return _weighted_lt(R, leaf.ord, leaf.wgt.row(0))
        if leaf.ord is OrderKind.MATRIX:
            return _matrix_lt(R, leaf.wgt)
    ww = o.canonical_matrix()
    return _matrix_lt(R, ww.hcat_zeros(R.nvars - ww.ncols))


def lt_from_ordering(R: PolynomialRing, ord, w=None) -> Comparator:
    """Strict "less than" predicate ``(f, k, l) -> bool`` for terms of
    polynomials in ``R``.

    ``ord`` is one of:

    * an ordering name or ``OrderKind`` (Singular names like ``dp`` work too);
      the weighted kinds ``wlex``, ``wrevlex``, ``wneglex``, ``wnegrevlex``
      need the weight vector ``w``, and ``matrix`` needs a matrix ``w``;
    * an integer matrix with one column per variable;
    * a ``MonomialOrdering`` over ``R``.
    """
    if isinstance(ord, ModuleOrdering):
        raise ValueError("Module orderings have no term comparator")
    if isinstance(ord, MonomialOrdering):
        return _lt_from_handle(R, ord)
    if isinstance(ord, (IntMatrix, np.ndarray, list, tuple)):
        return _matrix_lt(R, ord)

    kind = OrderKind.parse(ord)
    if kind in _PLAIN:
        if w is not None:
            raise ValueError(f"Ordering {kind.value} does not take weights")
        return _PLAIN[kind]
    if w is None:
        raise ValueError(f"Ordering {kind.value} requires weights")
    if kind in _WEIGHTED:
        return _weighted_lt(R, kind, w)
    return _matrix_lt(R, w)


make_comparator = lt_from_ordering


def sorted_term_permutation(f: Polynomial, lt: Comparator) -> List[int]:
    """Positions of the terms of ``f`` in descending order under ``lt``.

    Terms whose monomials compare equal keep their relative order.
    """
    def cmp(k, l):
        if lt(f, l, k):
            return -1
        if lt(f, k, l):
            return 1
        return 0

    return sorted(range(len(f)), key=cmp_to_key(cmp))
