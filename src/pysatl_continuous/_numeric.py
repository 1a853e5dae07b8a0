"""
Array conversion helpers shared by the numeric modules.
"""

__author__ = "PySATL project"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import cast

import numpy as np

from pysatl_continuous.types import NumericArray, NumericInput, NumericResult


def as_float_array(value: NumericInput) -> NumericArray:
    """Convert a number or array-like to a ``float64`` array."""
    return cast(NumericArray, np.asarray(value, dtype=np.float64))


def as_result(value: NumericInput) -> NumericResult:
    """
    Unwrap 0-d results.

    Scalar evaluations return a plain ``float``, array evaluations return a
    ``float64`` array of the broadcast shape.
    """
    arr = as_float_array(value)
    if np.ndim(arr) == 0:
        return float(arr)
    return arr
