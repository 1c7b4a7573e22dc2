from itertools import product

import numpy as np

from monomialorders.matrix import IntMatrix
from monomialorders.ring import Polynomial

def matrix_less(M: IntMatrix, a, b) -> bool:
    """Reference comparison of two exponent vectors by rows of ``M``."""
    for row in M.data:
        da = sum(x * y for x, y in zip(row, a))
        db = sum(x * y for x, y in zip(row, b))
        if da != db:
            return da < db
    return False

def monomials_up_to(nvars: int, degree: int):
    """All exponent vectors in ``nvars`` variables of total degree <= degree."""
    return [
        e for e in product(range(degree + 1), repeat=nvars)
        if sum(e) <= degree
    ]

def two_terms(ring, a, b) -> Polynomial:
    return Polynomial(ring, [(1, a), (1, b)])

def same_order(M1: IntMatrix, M2: IntMatrix, exps) -> bool:
    """Check that ``M1`` and ``M2`` compare every pair in ``exps`` alike.

    Rows shorter than an exponent vector see only its leading entries.
    """
    return all(
        matrix_less(M1, a, b) == matrix_less(M2, a, b)
        for a in exps
        for b in exps
    )

def make_random_polynomial(ring, nterms: int, max_exp: int = 4) -> Polynomial:
    """Random polynomial; exponent vectors may repeat."""
    exps = np.random.randint(0, max_exp + 1, size=(nterms, ring.nvars))
    return Polynomial(ring, [(1, row) for row in exps.tolist()])
