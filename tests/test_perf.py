"""Performance sanity checks for canonicalization and term sorting.

These tests verify that runtime does not regress catastrophically.
They use generous wall-clock bounds and are marked ``perf`` so they
are excluded from the default test run.

Run with: pytest -m perf
"""

import random
import time

import pytest

from monomialorders.canonical import canonical_form, canonicalize
from monomialorders.comparators import lt_from_ordering, sorted_term_permutation
from monomialorders.matrix import IntMatrix
from monomialorders.orderings import deglex, lex
from monomialorders.ring import polynomial_ring
from monomialorders.weights import weight_matrix
from tests.helpers import make_random_polynomial


@pytest.mark.perf
class TestPerformanceSanity:
    """Wall-clock sanity checks for representative sizes."""

    CASES = [
        pytest.param(10, 15, 2.0, id="15x10"),
        pytest.param(20, 30, 5.0, id="30x20"),
        pytest.param(40, 50, 20.0, id="50x40"),
    ]

    @pytest.mark.parametrize("ncols, nrows, max_seconds", CASES)
    def test_canonicalize_bound(self, ncols: int, nrows: int, max_seconds: float) -> None:
        random.seed(42)
        W = IntMatrix.from_rows(
            [[random.randint(-9, 9) for _ in range(ncols)] for _ in range(nrows)]
        )

        start = time.perf_counter()
        C = canonicalize(W)
        elapsed = time.perf_counter() - start

        assert C.nrows <= ncols
        assert elapsed < max_seconds, f"{elapsed:.2f}s exceeds {max_seconds}s"

    @pytest.mark.parametrize("seeded_rng", [42], indirect=True)
    def test_sort_bound(self, seeded_rng) -> None:
        R, _ = polynomial_ring([f"x{i}" for i in range(1, 11)])
        f = make_random_polynomial(R, 5000, max_exp=6)
        lt = lt_from_ordering(R, "degrevlex")

        start = time.perf_counter()
        p = sorted_term_permutation(f, lt)
        elapsed = time.perf_counter() - start

        assert len(p) == len(f)
        assert elapsed < 10.0, f"{elapsed:.2f}s"

    @pytest.mark.parametrize("nblocks", [200, 400])
    def test_many_small_blocks_bound(self, nblocks: int) -> None:
        R, xs = polynomial_ring([f"x{i}" for i in range(1, nblocks + 1)])
        o = deglex([xs[0]])
        for x in xs[1:]:
            o = o * lex([x])

        start = time.perf_counter()
        W = weight_matrix(o)
        C = canonical_form(o)
        elapsed = time.perf_counter() - start

        assert W.shape == (nblocks, nblocks)
        assert C == IntMatrix.identity(nblocks)
        assert elapsed < 5.0, f"{elapsed:.2f}s"
