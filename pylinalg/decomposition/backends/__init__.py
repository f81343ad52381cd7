"""
Decomposition backends.

Available backends:
    CPUInverseBackend: adjugate inverse with per-cell cofactor fan-out
    CPULUBackend: Doolittle LU without pivoting
"""

from pylinalg.decomposition.backends.cpu import CPUInverseBackend, CPULUBackend

__all__ = [
    "CPUInverseBackend",
    "CPULUBackend",
]
