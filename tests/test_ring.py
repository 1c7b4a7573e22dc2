import pytest

from monomialorders.ring import FreeModule, Polynomial, PolynomialRing, polynomial_ring


def test_polynomial_ring_gens():
    R, (x, y, z) = polynomial_ring("x, y, z")

    assert R.nvars == 3
    assert R.gen(2) is y
    assert [R.index_of(v) for v in (x, y, z)] == [1, 2, 3]
    assert repr(z) == "z"


def test_rings_are_compared_by_identity():
    R, (x, _) = polynomial_ring(["x", "y"])
    S, _ = polynomial_ring(["x", "y"])

    assert R is not S
    with pytest.raises(ValueError, match="only variables allowed"):
        S.index_of(x)
    with pytest.raises(ValueError, match="only variables allowed"):
        R.index_of("x")


def test_ring_needs_distinct_names():
    with pytest.raises(ValueError):
        PolynomialRing([])
    with pytest.raises(ValueError, match="Duplicate"):
        PolynomialRing(["x", "x"])


def test_free_module_gens():
    R, _ = polynomial_ring(["x", "y"])
    F = FreeModule(R, 3)

    assert F.rank == 3
    assert F.base_ring is R
    assert [g.name for g in F.gens] == ["e1", "e2", "e3"]
    assert F.index_of(F.gen(3)) == 3
    with pytest.raises(ValueError, match="only generators allowed"):
        FreeModule(R, 2).index_of(F.gen(1))
    with pytest.raises(ValueError):
        FreeModule(R, 0)


def test_polynomial_term_access(R3):
    R, _ = R3
    f = Polynomial(R, [(3, (2, 0, 1)), (-1, (0, 1, 0))])

    assert len(f) == 2
    assert f.coefficient(0) == 3
    assert f.exponent(0, 3) == 1
    assert f.exponent_vector(1) == (0, 1, 0)
    assert f.total_degree(0) == 3
    assert repr(f) == "3*x1^2*x3 + -1*x2"


def test_polynomial_validates_exponents(R3):
    R, _ = R3
    with pytest.raises(ValueError, match="expected 3"):
        Polynomial(R, [(1, (1, 2))])
    with pytest.raises(ValueError, match="Negative exponent"):
        Polynomial(R, [(1, (1, -2, 0))])


def test_from_sympy(R3):
    sp = pytest.importorskip("sympy")
    R, _ = R3
    x1, x2, x3 = sp.symbols("x1 x2 x3")

    f = Polynomial.from_sympy(2 * x1**2 + x2 * x3 - 5, R)

    got = {f.exponent_vector(k): f.coefficient(k) for k in range(len(f))}
    assert got == {(2, 0, 0): 2, (0, 1, 1): 1, (0, 0, 0): -5}
