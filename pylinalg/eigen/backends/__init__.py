"""
Eigen backends.

Available backends:
    CPUPowerIterationBackend: power iteration with row-wise fan-out
"""

from pylinalg.eigen.backends.cpu import CPUPowerIterationBackend

__all__ = [
    "CPUPowerIterationBackend",
]
