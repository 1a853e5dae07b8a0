"""
Special functions used by the distribution catalog.

Thin, validated wrappers over :mod:`scipy.special`.
"""

__author__ = "PySATL project"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from scipy import special

from pysatl_continuous._numeric import as_result
from pysatl_continuous.constraints import check_constraints, positive
from pysatl_continuous.types import NumericInput, NumericResult


def beta(a: NumericInput, b: NumericInput) -> NumericResult:
    """
    Euler beta function.

    B(a, b) = Γ(a)Γ(b) / Γ(a + b)

    Parameters
    ----------
    a, b : NumericInput
        Positive arguments; arrays are broadcast against each other.

    Returns
    -------
    NumericResult
        ``B(a, b)``. It underflows to 0 for very large arguments,
        use :func:`log_beta` there.

    Raises
    ------
    DomainError
        If ``a <= 0`` or ``b <= 0``.

    Examples
    --------
    >>> round(beta(2, 2), 12)
    0.166666666667
    """
    check_constraints(positive("a", a), positive("b", b))
    return as_result(special.beta(a, b))


def log_beta(a: NumericInput, b: NumericInput) -> NumericResult:
    """Natural logarithm of the Euler beta function, ``a > 0`` and ``b > 0``."""
    check_constraints(positive("a", a), positive("b", b))
    return as_result(special.betaln(a, b))


__all__ = [
    "beta",
    "log_beta",
]
