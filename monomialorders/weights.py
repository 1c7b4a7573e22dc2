"""Weight matrices of ordering blocks and of whole ordering trees.

Each leaf kind has a small intrinsic matrix with one column per variable of
the block. ``weight_matrix`` places those columns at the block's global
variable indices and stacks the blocks in order of precedence, so that the
rows of the result, compared top to bottom by dot product with an exponent
vector, reproduce the ordering.
"""

from .matrix import IntMatrix
from .orderings import (
    ModOrdering,
    ModuleOrdering,
    MonomialOrdering,
    OrderKind,
    flatten,
)


def _tail_lex(n: int) -> IntMatrix:
    # [I_{n-1} | 0]: lex on all but the last variable
    return IntMatrix.hcat(IntMatrix.identity(n - 1), IntMatrix.zeros(n - 1, 1))


def _tail_negrevlex(n: int) -> IntMatrix:
    # [0 | -antidiag_{n-1}]: negrevlex on all but the first variable
    return IntMatrix.hcat(IntMatrix.zeros(n - 1, 1), -IntMatrix.anti_diagonal(n - 1))


def leaf_weights(o) -> IntMatrix:
    """Intrinsic weight matrix of a single block, ``len(vars)`` columns wide."""
    if isinstance(o, ModOrdering):
        r = len(o.gens)
        if o.ord is OrderKind.REVLEX:
            return IntMatrix.anti_diagonal(r)
        return IntMatrix.identity(r)

    n = len(o.vars)
    k = o.ord
    if k is OrderKind.LEX:
        return IntMatrix.identity(n)
    if k is OrderKind.REVLEX:
        return IntMatrix.anti_diagonal(n)
    if k is OrderKind.NEGLEX:
        return -IntMatrix.identity(n)
    if k is OrderKind.NEGREVLEX:
        return -IntMatrix.anti_diagonal(n)
    if k is OrderKind.DEGLEX:
        return IntMatrix.vcat(IntMatrix.ones_row(n), _tail_lex(n))
    if k is OrderKind.DEGREVLEX:
        return IntMatrix.vcat(IntMatrix.ones_row(n), _tail_negrevlex(n))
    if k is OrderKind.NEGDEGLEX:
        return IntMatrix.vcat(-IntMatrix.ones_row(n), _tail_lex(n))
    if k is OrderKind.NEGDEGREVLEX:
        return IntMatrix.vcat(-IntMatrix.ones_row(n), _tail_negrevlex(n))
    if k is OrderKind.WLEX:
        return IntMatrix.vcat(o.wgt, IntMatrix.identity(n))
    if k is OrderKind.WNEGLEX:
        return IntMatrix.vcat(-o.wgt, IntMatrix.identity(n))
    if k is OrderKind.WREVLEX:
        return IntMatrix.vcat(o.wgt, -IntMatrix.anti_diagonal(n))
    if k is OrderKind.WNEGREVLEX:
        return IntMatrix.vcat(-o.wgt, -IntMatrix.anti_diagonal(n))
    # WEIGHT and MATRIX blocks are used verbatim
    return o.wgt


def _embed_rows(w: IntMatrix, columns, ncols: int):
    for r in w.data:
        row = [0] * ncols
        for c, x in zip(columns, r):
            row[c - 1] = x
        yield tuple(row)


def embed(w: IntMatrix, columns, ncols: int) -> IntMatrix:
    """Place column ``j`` of ``w`` at global (1-based) column ``columns[j]``."""
    return IntMatrix(tuple(_embed_rows(w, columns, ncols)), ncols)


def _columns(leaf, gen_offset: int):
    if isinstance(leaf, ModOrdering):
        return [gen_offset + g for g in leaf.gens]
    return list(leaf.vars)


def weight_matrix(o, gen_offset: int = 0) -> IntMatrix:
    """Full weight matrix of an ordering handle, tree or tuple of leaves.

    Generator blocks are placed after the ring variables; for a bare tree
    ``gen_offset`` is the number of ring variables to skip and must be
    positive when the tree has generator blocks.
    """
    if isinstance(o, MonomialOrdering):
        o = o.tree
    elif isinstance(o, ModuleOrdering):
        gen_offset = o.module.base_ring.nvars
        o = o.tree

    leaves = o if isinstance(o, tuple) else flatten(o)
    if gen_offset <= 0 and any(isinstance(leaf, ModOrdering) for leaf in leaves):
        raise ValueError(
            "Generator blocks need the number of ring variables as gen_offset"
        )

    blocks = []
    ncols = 0
    for leaf in leaves:
        cols = _columns(leaf, gen_offset)
        blocks.append((leaf_weights(leaf), cols))
        ncols = max(ncols, max(cols))

    # entries are validated once, by the final IntMatrix
    rows = []
    for w, cols in blocks:
        rows.extend(_embed_rows(w, cols, ncols))
    return IntMatrix(tuple(rows), ncols)


weights = weight_matrix
