"""Minimal polynomial-ring model consumed by the ordering machinery.

Orderings only need to know how many variables a ring has, which object a
variable belongs to, and how to read exponent vectors off the terms of a
polynomial. Coefficients are carried along untouched; no arithmetic is
implemented here.
"""

from dataclasses import dataclass
from typing import Any, List, Sequence, Tuple


@dataclass(frozen=True, eq=False)
class Variable:
    ring: "PolynomialRing"
    index: int
    name: str

    def __repr__(self):
        return self.name


@dataclass(frozen=True, eq=False)
class ModuleGen:
    module: "FreeModule"
    index: int
    name: str

    def __repr__(self):
        return self.name


class PolynomialRing:
    """Polynomial ring in ``len(names)`` variables.

    Rings are compared by identity: two rings built from the same names are
    still different rings, and orderings over them do not mix.
    """

    def __init__(self, names: Sequence[str]):
        names = [str(s) for s in names]
        if not names:
            raise ValueError("A polynomial ring needs at least one variable")
        if len(set(names)) != len(names):
            raise ValueError(f"Duplicate variable names in {names}")
        self.names = names
        self.gens = [Variable(self, i + 1, s) for i, s in enumerate(names)]

    @property
    def nvars(self) -> int:
        return len(self.gens)

    def gen(self, i: int) -> Variable:
        return self.gens[i - 1]

    def index_of(self, v) -> int:
        if isinstance(v, Variable) and v.ring is self:
            return v.index
        raise ValueError("only variables allowed")

    def __repr__(self):
        return f"PolynomialRing({', '.join(self.names)})"


def polynomial_ring(names) -> Tuple[PolynomialRing, List[Variable]]:
    """Build a ring from ``names`` (a sequence or a comma separated string)."""
    if isinstance(names, str):
        names = [s.strip() for s in names.split(",") if s.strip()]
    R = PolynomialRing(names)
    return R, list(R.gens)


class FreeModule:
    def __init__(self, base_ring: PolynomialRing, rank: int, prefix: str = "e"):
        if rank < 1:
            raise ValueError("A free module needs at least one generator")
        self.base_ring = base_ring
        self.gens = [ModuleGen(self, i + 1, f"{prefix}{i + 1}") for i in range(rank)]

    @property
    def rank(self) -> int:
        return len(self.gens)

    def gen(self, i: int) -> ModuleGen:
        return self.gens[i - 1]

    def index_of(self, g) -> int:
        if isinstance(g, ModuleGen) and g.module is self:
            return g.index
        raise ValueError("only generators allowed")

    def __repr__(self):
        return f"FreeModule({self.base_ring!r}, {self.rank})"


class Polynomial:
    """A polynomial as an ordered list of ``(coefficient, exponents)`` terms.

    Terms are addressed by position ``0 .. len(f) - 1`` and variables by their
    1-based index, matching ``Variable.index``.
    """

    def __init__(self, ring: PolynomialRing, terms: Sequence[Tuple[Any, Sequence[int]]]):
        n = ring.nvars
        coeffs = []
        exps = []
        for c, e in terms:
            e = tuple(int(x) for x in e)
            if len(e) != n:
                raise ValueError(f"Exponent vector {e} has length {len(e)}, expected {n}")
            if any(x < 0 for x in e):
                raise ValueError(f"Negative exponent in {e}")
            coeffs.append(c)
            exps.append(e)
        self.ring = ring
        self.coeffs = coeffs
        self.exps = exps

    def __len__(self):
        return len(self.exps)

    def coefficient(self, k: int):
        return self.coeffs[k]

    def exponent(self, k: int, i: int) -> int:
        return self.exps[k][i - 1]

    def exponent_vector(self, k: int) -> Tuple[int, ...]:
        return self.exps[k]

    def total_degree(self, k: int) -> int:
        return sum(self.exps[k])

    def sort_terms(self, lt) -> "Polynomial":
        """Return a copy with the terms in descending order under ``lt``."""
        from .comparators import sorted_term_permutation

        p = sorted_term_permutation(self, lt)
        return Polynomial(self.ring, [(self.coeffs[k], self.exps[k]) for k in p])

    @classmethod
    def from_sympy(cls, expr, ring: PolynomialRing) -> "Polynomial":
        """Read a sympy expression whose symbols are named like ``ring``'s variables."""
        import sympy as sp

        symbols = [sp.Symbol(s) for s in ring.names]
        poly = sp.Poly(expr, *symbols)
        return cls(ring, [(c, m) for m, c in poly.terms()])

    def __repr__(self):
        parts = []
        for c, e in zip(self.coeffs, self.exps):
            mono = "*".join(
                s if x == 1 else f"{s}^{x}"
                for s, x in zip(self.ring.names, e) if x
            )
            parts.append(f"{c}*{mono}" if mono else f"{c}")
        return " + ".join(parts) if parts else "0"
