from __future__ import annotations

__author__ = "PySATL project"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from math import inf
from typing import TYPE_CHECKING, Protocol, overload, runtime_checkable

import numpy as np

from pysatl_continuous.exceptions import DomainError
from pysatl_continuous.types import BoolArray, Interval1D, Number, NumericArray

if TYPE_CHECKING:
    from pysatl_continuous.types import NumericInput


@runtime_checkable
class Support(Protocol):
    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...


class ContinuousSupport(Interval1D, Support): ...


POSITIVE_HALF_LINE = ContinuousSupport(left=0.0, right=inf, left_closed=False)
UNIT_INTERVAL = ContinuousSupport(left=0.0, right=1.0)


def require_in_support(support: Support, x: NumericInput, name: str = "x") -> None:
    """
    Check that every point of ``x`` belongs to ``support``.

    Parameters
    ----------
    support : Support
        Admissible values.
    x : NumericInput
        Point or array of points.
    name : str
        Argument name used in the error message.

    Raises
    ------
    DomainError
        If at least one point lies outside the support.
    """
    if not np.all(support.contains(np.asarray(x, dtype=float))):
        raise DomainError(f"{name} must lie in {support}, got {x!r}")


__all__ = [
    "Support",
    "ContinuousSupport",
    "POSITIVE_HALF_LINE",
    "UNIT_INTERVAL",
    "require_in_support",
]
