"""
Generic result container for pymatrix solvers.

The Result class provides a standardized envelope for solver output
(currently the Gauss-Jordan inversion). It keeps diagnostics such as
pivots, row swaps and timing next to the computed payload without
changing what the plain Matrix API returns.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (method, pivots, row swaps)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for matrix computations.

    Type Parameters:
        P: The solver-specific parameter payload type

    Attributes:
        params: Solver-specific payload (the inverse, pivots, ...)
        info: Structured metadata (method, row swaps, diagnostics)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the solver that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=InverseParams(inverse=inv, pivots=(1.0, 1.0), row_swaps=0),
        ...     info={'method': 'gauss_jordan', 'n': 2},
        ...     timing={'total_seconds': 0.0001},
        ...     backend_name='cpu_gauss_jordan'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
