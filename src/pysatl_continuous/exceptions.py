"""
Errors and warnings raised by the distribution catalog.
"""

__author__ = "PySATL project"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


class DomainError(ValueError):
    """
    A parameter or evaluation point lies outside its mathematical domain.

    Raised before any arithmetic is performed. Subclasses :class:`ValueError`
    so that callers catching the builtin keep working.
    """


class ReversedIntervalWarning(UserWarning):
    """The upper bound of a probability interval is below its lower bound."""


__all__ = [
    "DomainError",
    "ReversedIntervalWarning",
]
