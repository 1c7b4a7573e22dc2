"""Monomial orderings as trees of ordering blocks.

A leaf block (``GenOrdering``) orders a set of ring variables by one of the
kinds in ``OrderKind``; ``ModOrdering`` does the same for the generators of a
free module. ``a * b`` builds a ``ProdOrdering`` node in which ``a`` decides
and ``b`` breaks ties. Trees are ring-free: they only know variable indices.
``MonomialOrdering`` and ``ModuleOrdering`` bind a tree to the ring or module
it is declared over.
"""

from dataclasses import dataclass
from enum import Enum
from numbers import Integral
from typing import Optional, Sequence, Tuple, Union

import numpy as np

from .matrix import IntMatrix
from .ring import FreeModule, ModuleGen, PolynomialRing, Variable


class OrderKind(Enum):
    LEX = "lex"
    DEGLEX = "deglex"
    DEGREVLEX = "degrevlex"
    REVLEX = "revlex"
    NEGLEX = "neglex"
    NEGREVLEX = "negrevlex"
    NEGDEGLEX = "negdeglex"
    NEGDEGREVLEX = "negdegrevlex"
    WLEX = "wlex"
    WREVLEX = "wrevlex"
    WNEGLEX = "wneglex"
    WNEGREVLEX = "wnegrevlex"
    WEIGHT = "weight"
    MATRIX = "matrix"

    @classmethod
    def parse(cls, name) -> "OrderKind":
        if isinstance(name, cls):
            return name
        if name in _SINGULAR_NAMES:
            return _SINGULAR_NAMES[name]
        try:
            return cls(name)
        except ValueError:
            raise ValueError(f"Ordering {name} not available") from None

    @property
    def is_weighted(self) -> bool:
        return self in _WEIGHTED

    @property
    def carries_matrix(self) -> bool:
        return self in _WEIGHTED or self in (OrderKind.WEIGHT, OrderKind.MATRIX)


_WEIGHTED = frozenset(
    [OrderKind.WLEX, OrderKind.WREVLEX, OrderKind.WNEGLEX, OrderKind.WNEGREVLEX]
)

# Singular's short names for the same orderings.
_SINGULAR_NAMES = {
    "lp": OrderKind.LEX,
    "rp": OrderKind.REVLEX,
    "Dp": OrderKind.DEGLEX,
    "dp": OrderKind.DEGREVLEX,
    "ls": OrderKind.NEGLEX,
    "rs": OrderKind.NEGREVLEX,
    "Ds": OrderKind.NEGDEGLEX,
    "ds": OrderKind.NEGDEGREVLEX,
    "Wp": OrderKind.WLEX,
    "wp": OrderKind.WREVLEX,
    "Ws": OrderKind.WNEGLEX,
    "ws": OrderKind.WNEGREVLEX,
    "a": OrderKind.WEIGHT,
    "M": OrderKind.MATRIX,
}


def check_weights(kind: OrderKind, w: Sequence[int]) -> None:
    """Validate a weight vector for one of the weighted kinds."""
    if kind in (OrderKind.WLEX, OrderKind.WREVLEX):
        if not all(x > 0 for x in w):
            raise ValueError("Weights have to be positive")
    elif kind in (OrderKind.WNEGLEX, OrderKind.WNEGREVLEX):
        if len(w) == 0 or w[0] == 0:
            raise ValueError("First weight must not be 0")
    else:
        raise ValueError(f"Ordering {kind.value} does not take weights")


def var_set(indices) -> Union[range, Tuple[int, ...]]:
    """Normalize a sequence of 1-based indices; contiguous runs become a range."""
    if isinstance(indices, range) and indices.step == 1:
        a = indices
    else:
        a = tuple(int(i) for i in indices)
    if len(a) == 0:
        raise ValueError("An ordering needs at least one variable")
    if min(a) < 1:
        raise ValueError(f"Variable indices must be positive, got {list(a)}")
    if len(set(a)) != len(a):
        raise ValueError(f"Duplicate variable indices in {list(a)}")
    if isinstance(a, range):
        return a
    lo, hi = a[0], a[-1]
    if hi - lo + 1 == len(a) and a == tuple(range(lo, hi + 1)):
        return range(lo, hi + 1)
    return a


def _product(a, b):
    if not isinstance(b, (GenOrdering, ModOrdering, ProdOrdering)):
        return NotImplemented
    return ProdOrdering(a, b)


@dataclass(frozen=True)
class GenOrdering:
    """A leaf block ordering the ring variables ``vars`` by ``ord``."""

    vars: Union[range, Tuple[int, ...]]
    ord: OrderKind
    wgt: Optional[IntMatrix] = None

    def __post_init__(self):
        object.__setattr__(self, "vars", var_set(self.vars))
        kind = OrderKind.parse(self.ord)
        object.__setattr__(self, "ord", kind)
        n = len(self.vars)
        if not kind.carries_matrix:
            if self.wgt is not None:
                raise ValueError(f"Ordering {kind.value} does not take a weight matrix")
            return
        if self.wgt is None:
            raise ValueError(f"Ordering {kind.value} requires a weight matrix")
        w = IntMatrix.from_rows(self.wgt)
        if w.ncols != n:
            raise ValueError(
                f"Weight matrix has {w.ncols} columns, expected {n} (one per variable)"
            )
        if kind.is_weighted:
            if w.nrows != 1:
                raise ValueError(f"Ordering {kind.value} takes a single weight vector")
            check_weights(kind, w.row(0))
        object.__setattr__(self, "wgt", w)

    @property
    def is_contiguous(self) -> bool:
        return isinstance(self.vars, range)

    __mul__ = _product


@dataclass(frozen=True)
class ModOrdering:
    """A leaf block ordering the module generators ``gens``."""

    gens: Union[range, Tuple[int, ...]]
    ord: OrderKind = OrderKind.LEX

    def __post_init__(self):
        object.__setattr__(self, "gens", var_set(self.gens))
        kind = OrderKind.parse(self.ord)
        if kind not in (OrderKind.LEX, OrderKind.REVLEX):
            raise ValueError(f"Generator ordering {kind.value} not available")
        object.__setattr__(self, "ord", kind)

    @property
    def is_contiguous(self) -> bool:
        return isinstance(self.gens, range)

    __mul__ = _product


@dataclass(frozen=True, eq=False)
class ProdOrdering:
    """The product of ``a`` and ``b``: ``a`` decides, ``b`` breaks ties.

    Products compare and hash by their leaves, so deep chains never recurse
    and regrouping a product does not change it.
    """

    a: Union[GenOrdering, ModOrdering, "ProdOrdering"]
    b: Union[GenOrdering, ModOrdering, "ProdOrdering"]

    def __post_init__(self):
        for node in (self.a, self.b):
            if not isinstance(node, (GenOrdering, ModOrdering, ProdOrdering)):
                raise ValueError(f"Cannot form a product with {node!r}")

    def __eq__(self, other):
        if not isinstance(other, ProdOrdering):
            return NotImplemented
        return flatten(self) == flatten(other)

    def __hash__(self):
        return hash(flatten(self))

    __mul__ = _product


Ordering = Union[GenOrdering, ModOrdering, ProdOrdering]


def combine(a, b):
    """Product of two orderings (trees or handles); same as ``a * b``."""
    return a * b


def flatten(o: Ordering) -> Tuple[Union[GenOrdering, ModOrdering], ...]:
    """Leaves of ``o`` from left to right, i.e. in order of precedence."""
    out = []
    stack = [o]
    while stack:
        node = stack.pop()
        if isinstance(node, ProdOrdering):
            stack.append(node.b)
            stack.append(node.a)
        else:
            out.append(node)
    return tuple(out)


def is_module_tree(o: Ordering) -> bool:
    return any(isinstance(leaf, ModOrdering) for leaf in flatten(o))


def _check_indices(leaves, nvars: int, rank: int = 0) -> None:
    for leaf in leaves:
        if isinstance(leaf, GenOrdering) and max(leaf.vars) > nvars:
            raise ValueError("only variables allowed")
        if isinstance(leaf, ModOrdering) and max(leaf.gens) > rank:
            raise ValueError("only generators allowed")


def _show_leaf(leaf, names: Sequence[str]) -> str:
    idx = leaf.vars if isinstance(leaf, GenOrdering) else leaf.gens
    vs = "[" + ", ".join(names[i - 1] for i in idx) + "]"
    if isinstance(leaf, GenOrdering) and leaf.wgt is not None:
        return f"{leaf.ord.value}({vs} via {leaf.wgt.tolist()})"
    return f"{leaf.ord.value}({vs})"


def _show(leaves, var_names, gen_names=()) -> str:
    parts = [
        _show_leaf(leaf, var_names if isinstance(leaf, GenOrdering) else gen_names)
        for leaf in leaves
    ]
    if len(parts) > 1:
        return "Product ordering: " + " \\times ".join(parts)
    return parts[0]


class MonomialOrdering:
    """An ordering tree applied to the variables of a polynomial ring.

    Immutable once constructed; equality and hashing go through the
    canonical weight matrix.
    """

    __slots__ = ("_ring", "_tree")

    def __init__(self, ring: PolynomialRing, tree: Ordering):
        if is_module_tree(tree):
            raise ValueError("Generator blocks need a ModuleOrdering")
        _check_indices(flatten(tree), ring.nvars)
        object.__setattr__(self, "_ring", ring)
        object.__setattr__(self, "_tree", tree)

    @property
    def ring(self) -> PolynomialRing:
        return self._ring

    @property
    def tree(self) -> Ordering:
        return self._tree

    def __setattr__(self, name, value):
        raise AttributeError(f"MonomialOrdering is immutable, cannot set {name}")

    def flat(self):
        return flatten(self.tree)

    def weights(self) -> IntMatrix:
        from .weights import weight_matrix
        return weight_matrix(self)

    def canonical_matrix(self) -> IntMatrix:
        from .canonical import canonical_form
        return canonical_form(self)

    def simplify(self) -> "MonomialOrdering":
        from .canonical import simplify
        return simplify(self)

    def _key(self) -> IntMatrix:
        ww = self.canonical_matrix()
        return ww.hcat_zeros(self.ring.nvars - ww.ncols)

    def __mul__(self, other):
        if isinstance(other, MonomialOrdering):
            if self.ring is not other.ring:
                raise ValueError("wrong rings")
            return MonomialOrdering(self.ring, self.tree * other.tree)
        if isinstance(other, ModuleOrdering):
            if other.module.base_ring is not self.ring:
                raise ValueError("wrong rings")
            return ModuleOrdering(other.module, self.tree * other.tree)
        return NotImplemented

    def __eq__(self, other):
        if not isinstance(other, MonomialOrdering):
            return NotImplemented
        return self.ring is other.ring and self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def __str__(self):
        return _show(self.flat(), self.ring.names)

    def __repr__(self):
        return f"MonomialOrdering({self})"


class ModuleOrdering:
    """An ordering on the monomials of a free module: generator blocks
    combined with monomial blocks over the base ring."""

    __slots__ = ("_module", "_tree")

    def __init__(self, module: FreeModule, tree: Ordering):
        if not is_module_tree(tree):
            raise ValueError("A module ordering needs at least one generator block")
        _check_indices(flatten(tree), module.base_ring.nvars, module.rank)
        object.__setattr__(self, "_module", module)
        object.__setattr__(self, "_tree", tree)

    @property
    def module(self) -> FreeModule:
        return self._module

    @property
    def tree(self) -> Ordering:
        return self._tree

    def __setattr__(self, name, value):
        raise AttributeError(f"ModuleOrdering is immutable, cannot set {name}")

    def flat(self):
        return flatten(self.tree)

    def weights(self) -> IntMatrix:
        from .weights import weight_matrix
        return weight_matrix(self)

    def canonical_matrix(self) -> IntMatrix:
        from .canonical import canonical_form
        return canonical_form(self)

    def _key(self) -> IntMatrix:
        ww = self.canonical_matrix()
        return ww.hcat_zeros(self.module.base_ring.nvars + self.module.rank - ww.ncols)

    def __mul__(self, other):
        if isinstance(other, MonomialOrdering):
            if self.module.base_ring is not other.ring:
                raise ValueError("wrong rings")
            return ModuleOrdering(self.module, self.tree * other.tree)
        if isinstance(other, ModuleOrdering):
            if self.module is not other.module:
                raise ValueError("wrong modules")
            return ModuleOrdering(self.module, self.tree * other.tree)
        return NotImplemented

    def __eq__(self, other):
        if not isinstance(other, ModuleOrdering):
            return NotImplemented
        return self.module is other.module and self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def __str__(self):
        names = [g.name for g in self.module.gens]
        return _show(self.flat(), self.module.base_ring.names, names)

    def __repr__(self):
        return f"ModuleOrdering({self})"


# --- constructors ---------------------------------------------------------

def _resolve_vars(v) -> Tuple[PolynomialRing, list]:
    v = list(v)
    if not v or not isinstance(v[0], Variable):
        raise ValueError("only variables allowed")
    R = v[0].ring
    return R, [R.index_of(x) for x in v]


def _resolve_gens(v) -> Tuple[FreeModule, list]:
    v = list(v)
    if not _is_gens(v):
        raise ValueError("only generators allowed")
    M = v[0].module
    return M, [M.index_of(x) for x in v]


def _is_gens(v) -> bool:
    return len(v) > 0 and isinstance(v[0], ModuleGen)


def _is_vector(w) -> bool:
    if isinstance(w, IntMatrix):
        return False
    if isinstance(w, np.ndarray):
        return w.ndim == 1
    return len(w) > 0 and isinstance(w[0], (Integral, np.integer))


def ordering(v, kind, w=None) -> MonomialOrdering:
    """Order the ring variables ``v`` by ``kind``.

    ``w`` is a weight vector for the weighted kinds and a matrix (one column
    per variable) for ``weight`` and ``matrix``.
    """
    R, idx = _resolve_vars(v)
    kind = OrderKind.parse(kind)
    if w is not None and (kind.is_weighted or kind is OrderKind.WEIGHT) and _is_vector(w):
        w = [list(w)]
    return MonomialOrdering(R, GenOrdering(idx, kind, w))


def module_ordering(v, kind=OrderKind.LEX) -> ModuleOrdering:
    M, idx = _resolve_gens(v)
    return ModuleOrdering(M, ModOrdering(idx, kind))


def lex(v):
    """Lexicographic ordering on the variables (or module generators) ``v``."""
    v = list(v)
    if _is_gens(v):
        return module_ordering(v, OrderKind.LEX)
    return ordering(v, OrderKind.LEX)


def revlex(v):
    v = list(v)
    if _is_gens(v):
        return module_ordering(v, OrderKind.REVLEX)
    return ordering(v, OrderKind.REVLEX)


def deglex(v) -> MonomialOrdering:
    return ordering(v, OrderKind.DEGLEX)


def degrevlex(v) -> MonomialOrdering:
    """Degree reverse lexicographic ordering on ``v``."""
    return ordering(v, OrderKind.DEGREVLEX)


def neglex(v) -> MonomialOrdering:
    return ordering(v, OrderKind.NEGLEX)


def negrevlex(v) -> MonomialOrdering:
    return ordering(v, OrderKind.NEGREVLEX)


def negdeglex(v) -> MonomialOrdering:
    return ordering(v, OrderKind.NEGDEGLEX)


def negdegrevlex(v) -> MonomialOrdering:
    return ordering(v, OrderKind.NEGDEGREVLEX)


def wlex(v, w) -> MonomialOrdering:
    return ordering(v, OrderKind.WLEX, w)


def wrevlex(v, w) -> MonomialOrdering:
    return ordering(v, OrderKind.WREVLEX, w)


def wneglex(v, w) -> MonomialOrdering:
    return ordering(v, OrderKind.WNEGLEX, w)


def wnegrevlex(v, w) -> MonomialOrdering:
    return ordering(v, OrderKind.WNEGREVLEX, w)


def weight_ordering(v, W) -> MonomialOrdering:
    """Weight block: the rows of ``W`` are compared first, nothing else."""
    return ordering(v, OrderKind.WEIGHT, W)


def matrix_ordering(v, M) -> MonomialOrdering:
    return ordering(v, OrderKind.MATRIX, M)


def singular(name: str, v, w=None) -> MonomialOrdering:
    """Ordering given by a Singular name (``lp``, ``dp``, ``ls``, ``ds``, ...).

    For ``a`` the weight vector is padded with zeros up to ``len(v)``; ``M``
    takes a full matrix.
    """
    v = list(v)
    kind = OrderKind.parse(name)
    if kind is OrderKind.WEIGHT:
        if w is None:
            raise ValueError("Singular ordering a requires a weight vector")
        w = list(w)
        if len(w) > len(v):
            raise ValueError(f"Got {len(w)} weights for {len(v)} variables")
        w = [w + [0] * (len(v) - len(w))]
    return ordering(v, kind, w)
