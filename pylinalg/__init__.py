"""
pylinalg: dense linear algebra on immutable double-precision containers.

Arithmetic, norms, a recursive cofactor determinant, adjugate
inversion, unpivoted LU decomposition and a power-iteration solver for
the dominant eigenpair. Independent per-row and per-cell work can fan
out over a thread pool (workers=...) with index-ordered, deterministic
results.

Submodules:
    dense: Matrix, Vector and builders
    ops: Arithmetic, structural and norm operations
    determinant: Cofactor expansion engine (the function is exported as det)
    decomposition: Inverse and LU
    eigen: Power iteration and Rayleigh quotient
"""

__version__ = "0.1.0"

from pylinalg import dense
from pylinalg import ops
from pylinalg import determinant
from pylinalg import decomposition
from pylinalg import eigen

from pylinalg.dense import Matrix, Vector, identity, zero, ones
from pylinalg.ops import (
    add,
    multiply,
    transpose,
    kronecker_product,
    multiply_vector,
    vector_add,
    dot,
    magnitude,
    normalize,
    l1_norm,
    l2_norm,
    infinity_norm,
    trace,
)
from pylinalg.determinant import determinant as det
from pylinalg.decomposition import inverse, inverse_matrix, lu_decompose
from pylinalg.eigen import power_iteration, eigenvector, eigenvalue

__all__ = [
    "__version__",
    # Submodules
    "dense",
    "ops",
    "determinant",
    "decomposition",
    "eigen",
    # Containers
    "Matrix",
    "Vector",
    "identity",
    "zero",
    "ones",
    # Operations
    "add",
    "multiply",
    "transpose",
    "kronecker_product",
    "multiply_vector",
    "vector_add",
    "dot",
    "magnitude",
    "normalize",
    "l1_norm",
    "l2_norm",
    "infinity_norm",
    "trace",
    "det",
    "inverse",
    "inverse_matrix",
    "lu_decompose",
    "power_iteration",
    "eigenvector",
    "eigenvalue",
]
