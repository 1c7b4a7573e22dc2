from .canonical import canonical_form, canonicalize, simplify
from .comparators import lt_from_ordering, make_comparator, sorted_term_permutation
from .matrix import IntMatrix
from .orderings import (
    GenOrdering,
    ModOrdering,
    ModuleOrdering,
    MonomialOrdering,
    OrderKind,
    ProdOrdering,
    combine,
    deglex,
    degrevlex,
    flatten,
    lex,
    matrix_ordering,
    module_ordering,
    negdeglex,
    negdegrevlex,
    neglex,
    negrevlex,
    ordering,
    revlex,
    singular,
    weight_ordering,
    wlex,
    wneglex,
    wnegrevlex,
    wrevlex,
)
from .ring import FreeModule, Polynomial, PolynomialRing, polynomial_ring
from .weights import weight_matrix

__all__ = [
    "FreeModule",
    "GenOrdering",
    "IntMatrix",
    "ModOrdering",
    "ModuleOrdering",
    "MonomialOrdering",
    "OrderKind",
    "Polynomial",
    "PolynomialRing",
    "ProdOrdering",
    "canonical_form",
    "canonicalize",
    "combine",
    "deglex",
    "degrevlex",
    "flatten",
    "lex",
    "lt_from_ordering",
    "make_comparator",
    "matrix_ordering",
    "module_ordering",
    "negdeglex",
    "negdegrevlex",
    "neglex",
    "negrevlex",
    "ordering",
    "polynomial_ring",
    "revlex",
    "simplify",
    "singular",
    "sorted_term_permutation",
    "weight_matrix",
    "weight_ordering",
    "wlex",
    "wneglex",
    "wnegrevlex",
    "wrevlex",
]
