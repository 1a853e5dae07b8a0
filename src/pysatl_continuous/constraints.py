"""
Parameter constraints for distribution functions.

A constraint pairs a human-readable description, such as ``"b > 0"``, with a
predicate over the already bound parameter values. Catalog functions build
their constraints and hand them to :func:`check_constraints`, which raises on
the first violation.
"""

from __future__ import annotations

__author__ = "PySATL project"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from pysatl_continuous.exceptions import DomainError

if TYPE_CHECKING:
    from collections.abc import Callable

    from pysatl_continuous.types import NumericInput


@dataclass(slots=True, frozen=True)
class ParameterConstraint:
    """
    Constraint on parameter values of a distribution function.

    Parameters
    ----------
    description : str
        Human-readable description of the constraint.
    check : Callable[[], bool]
        Validation function that returns True if constraint is satisfied.
    """

    description: str
    check: Callable[[], bool]

    def holds(self) -> bool:
        """Evaluate the predicate."""
        return bool(self.check())


def positive(name: str, value: NumericInput) -> ParameterConstraint:
    """
    Constraint ``name > 0``, required element-wise for array values.

    NaN never satisfies it.
    """
    return ParameterConstraint(
        description=f"{name} > 0",
        check=lambda: bool(np.all(np.asarray(value, dtype=float) > 0)),
    )


def less_than(
    left_name: str, left: NumericInput, right_name: str, right: NumericInput
) -> ParameterConstraint:
    """Constraint ``left_name < right_name``, required element-wise."""
    return ParameterConstraint(
        description=f"{left_name} < {right_name}",
        check=lambda: bool(
            np.all(np.asarray(left, dtype=float) < np.asarray(right, dtype=float))
        ),
    )


def check_constraints(*constraints: ParameterConstraint) -> None:
    """
    Validate constraints in the given order.

    Raises
    ------
    DomainError
        For the first constraint that is not satisfied.
    """
    for constraint in constraints:
        if not constraint.holds():
            raise DomainError(f'Constraint "{constraint.description}" does not hold')


__all__ = [
    "ParameterConstraint",
    "positive",
    "less_than",
    "check_constraints",
]
