"""
Arithmetic, structural and norm operations.

Public API:
    add, multiply, transpose, kronecker_product, multiply_vector
    vector_add, dot, magnitude, normalize
    l1_norm, l2_norm, infinity_norm, trace
"""

from pylinalg.ops.arithmetic import (
    add,
    multiply,
    transpose,
    kronecker_product,
    multiply_vector,
    vector_add,
    dot,
    magnitude,
    normalize,
)
from pylinalg.ops.norms import l1_norm, l2_norm, infinity_norm, trace

__all__ = [
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
]
