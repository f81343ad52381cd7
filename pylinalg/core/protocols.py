"""
Core protocols for pylinalg.

Backends are matched structurally (Protocol) rather than by inheritance,
so a new execution strategy only has to provide a name and a solve().
"""

from typing import Protocol, TypeVar, runtime_checkable

D = TypeVar('D')  # Input type (Matrix or a design wrapper)
P = TypeVar('P')  # Parameter payload type


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for computational backends.

    Each backend takes a validated input and produces a Result wrapping
    an algorithm-specific payload. Backends hold only construction-time
    configuration (such as the worker count) and no mutable state, so a
    single instance can serve concurrent callers.

    Type Parameters:
        D: The input type this backend accepts
        P: The parameter payload type this backend produces
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{algorithm}'
        Examples: 'cpu_adjugate', 'cpu_doolittle', 'cpu_power'
        """
        ...

    def solve(self, design: D) -> 'Result[P]':
        """
        Execute the computation.

        Raises:
            ConvergenceError: If an iterative method fails to converge
            NumericalError: If the values prevent a solution (singularity)
            ValidationError: If the input is invalid for this backend
        """
        ...
