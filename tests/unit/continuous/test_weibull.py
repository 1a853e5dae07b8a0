"""
Tests for the Weibull distribution functions.
"""

__author__ = "PySATL project"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest
from scipy.stats import weibull_min

from pysatl_continuous.continuous import weibull_cdf, weibull_pdf
from pysatl_continuous.exceptions import DomainError

from .base import BaseDistributionTest


class TestWeibullFunctions(BaseDistributionTest):
    """Test suite for Weibull PDF and CDF."""

    points = [-1.0, 0.1, 0.5, 1.0, 1.5, 2.0, 3.0, 5.0]

    def test_reference_values(self):
        assert weibull_cdf(1, 1, 0) == 0
        assert weibull_pdf(1, 1, 0) == 1.0

    def test_exponential_special_case(self):
        # k = 1 reduces to an exponential distribution with rate 1 / lam
        lam = 2.0
        assert weibull_pdf(1.0, lam, 3.0) == pytest.approx(math.exp(-1.5) / lam)
        assert weibull_cdf(1.0, lam, 3.0) == pytest.approx(1.0 - math.exp(-1.5))

    @pytest.mark.parametrize("shape", [0.5, 1.0, 1.5, 5.0])
    @pytest.mark.parametrize("scale", [0.5, 1.0, 3.0])
    @pytest.mark.parametrize(
        "func, scipy_func",
        [(weibull_pdf, weibull_min.pdf), (weibull_cdf, weibull_min.cdf)],
        ids=["pdf", "cdf"],
    )
    def test_array_input_matches_scipy(self, func, scipy_func, shape, scale):
        input_array = np.array(self.points)
        result_array = func(shape, scale, input_array)

        assert result_array.shape == input_array.shape
        expected_array = scipy_func(input_array, c=shape, scale=scale)
        self.assert_arrays_almost_equal(result_array, expected_array)

    @pytest.mark.parametrize("func", [weibull_pdf, weibull_cdf], ids=["pdf", "cdf"])
    def test_zero_below_support(self, func):
        # a non-integer shape makes (x / lam)^k undefined for negative x
        result = func(1.5, 2.0, np.array([-10.0, -1.0, -1e-12]))
        assert np.all(result == 0.0)

    def test_density_pole_at_zero_for_small_shape(self):
        assert weibull_pdf(0.5, 1.0, 0.0) == math.inf

    @pytest.mark.parametrize("x", [1e300, 1e200, 1e3])
    def test_density_vanishes_in_far_tail(self, x):
        # (x / lam)^(k - 1) overflows before exp(-(x / lam)^k) underflows to 0
        assert weibull_pdf(3.0, 1.0, x) == 0.0

    def test_far_tail_array_input(self):
        result = weibull_pdf(3.0, 1.0, np.array([1.0, 1e300, np.inf]))
        assert not np.any(np.isnan(result))
        np.testing.assert_array_equal(result[1:], [0.0, 0.0])

    def test_cdf_precision_near_zero(self):
        # 1 - exp(-t) ~ t for tiny t
        assert weibull_cdf(1.0, 1.0, 1e-20) == pytest.approx(1e-20, rel=1e-12)

    def test_cdf_is_non_decreasing(self):
        values = weibull_cdf(2.0, 1.5, np.linspace(-1.0, 10.0, 500))
        self.assert_non_decreasing(values)
        self.assert_is_probability(values)


class TestWeibullFunctionsEdgeCases:
    """Parameter validation for Weibull functions."""

    @pytest.mark.parametrize("func", [weibull_pdf, weibull_cdf], ids=["pdf", "cdf"])
    @pytest.mark.parametrize(
        "k, lam, message",
        [(0.0, 1.0, "k > 0"), (-1.0, 1.0, "k > 0"), (1.0, 0.0, "lam > 0"), (1.0, -1.0, "lam > 0")],
    )
    def test_non_positive_parameters(self, func, k, lam, message):
        with pytest.raises(DomainError, match=message):
            func(k, lam, 1.0)
