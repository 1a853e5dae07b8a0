"""
Continuous Distributions
========================

Closed-form probability functions of continuous distributions.

Every function is pure: it validates its arguments, raising
:class:`~pysatl_continuous.exceptions.DomainError` before any arithmetic when a
parameter or point lies outside its domain, and returns the density or
cumulative probability at ``x``. Parameters and points may be numbers or
array-likes; they are broadcast against each other. Scalar evaluations return
``float``, array evaluations return ``numpy.ndarray``.

- :func:`uniform_interval`: probability of ``[x1, x2]`` under ``U(a, b)``
- :func:`pareto_pdf`, :func:`pareto_cdf`
- :func:`weibull_pdf`, :func:`weibull_cdf`
- :func:`laplace_pdf`, :func:`laplace_cdf`
- :func:`logistic_pdf`, :func:`logistic_cdf`
- :func:`log_logistic_pdf`, :func:`log_logistic_cdf`
- :func:`beta_pdf`

Notes
-----
Pareto and Weibull return exactly ``0`` below their support instead of
raising, zero density there is a valid answer.
"""

from __future__ import annotations

__author__ = "PySATL project"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import warnings
from typing import TYPE_CHECKING

import numpy as np
from scipy.special import expit, xlog1py, xlogy

from pysatl_continuous import special
from pysatl_continuous._numeric import as_float_array, as_result
from pysatl_continuous.constraints import check_constraints, less_than, positive
from pysatl_continuous.exceptions import ReversedIntervalWarning
from pysatl_continuous.support import (
    POSITIVE_HALF_LINE,
    UNIT_INTERVAL,
    ContinuousSupport,
    require_in_support,
)

if TYPE_CHECKING:
    from pysatl_continuous.types import NumericInput, NumericResult


# =============================================================================
# UNIFORM
# =============================================================================


def uniform_interval(
    a: float, b: float, x1: NumericInput, x2: NumericInput
) -> NumericResult:
    """
    Probability of the interval between ``x1`` and ``x2`` under ``U(a, b)``.

    .. math::

        P = \\frac{x_2 - x_1}{b - a}

    Parameters
    ----------
    a : float
        Lower bound of the distribution.
    b : float
        Upper bound of the distribution, ``a < b``.
    x1 : NumericInput
        Lower bound of the probability interval, within ``[a, b]``.
    x2 : NumericInput
        Upper bound of the probability interval, within ``[a, b]``.

    Returns
    -------
    NumericResult
        The signed ratio ``(x2 - x1) / (b - a)``. It is negative when
        ``x2 < x1``; the bounds are not reordered.

    Raises
    ------
    DomainError
        If ``a >= b`` or if ``x1`` or ``x2`` lies outside ``[a, b]``.

    Warns
    -----
    ReversedIntervalWarning
        If ``x2 < x1`` for at least one pair of bounds.

    Examples
    --------
    >>> uniform_interval(0, 10, 2, 6)
    0.4
    """
    check_constraints(less_than("a", a, "b", b))
    support = ContinuousSupport(left=float(a), right=float(b))
    require_in_support(support, x1, name="x1")
    require_in_support(support, x2, name="x2")

    lower = as_float_array(x1)
    upper = as_float_array(x2)
    if np.any(upper < lower):
        warnings.warn(
            "x2 < x1: the interval probability is negative",
            ReversedIntervalWarning,
            stacklevel=2,
        )

    return as_result((upper - lower) / (float(b) - float(a)))


# =============================================================================
# PARETO
# =============================================================================


def pareto_pdf(a: NumericInput, b: NumericInput, x: NumericInput) -> NumericResult:
    """
    Pareto distribution - probability density function.

    .. math::

        f(x) = \\frac{a b^a}{x^{a + 1}}, \\quad x \\ge b

    and ``f(x) = 0`` for ``x < b``.

    Parameters
    ----------
    a : NumericInput
        Shape parameter, ``a > 0``.
    b : NumericInput
        Scale parameter (minimum of the support), ``b > 0``.
    x : NumericInput
        Points at which to evaluate the density.

    Returns
    -------
    NumericResult
        Probability density values at points x.

    Raises
    ------
    DomainError
        If ``a <= 0`` or ``b <= 0``.
    """
    check_constraints(positive("a", a), positive("b", b))
    shape, scale, x = as_float_array(a), as_float_array(b), as_float_array(x)

    # a * b^a / x^(a+1) rewritten so b^a cannot overflow on its own
    with np.errstate(divide="ignore", over="ignore", invalid="ignore"):
        density = (shape / x) * (scale / x) ** shape

    return as_result(np.where(x < scale, 0.0, density))


def pareto_cdf(a: NumericInput, b: NumericInput, x: NumericInput) -> NumericResult:
    """
    Pareto distribution - cumulative distribution function.

    ``F(x) = 1 - (b / x)^a`` for ``x >= b`` and ``0`` for ``x < b``.

    Raises
    ------
    DomainError
        If ``a <= 0`` or ``b <= 0``.
    """
    check_constraints(positive("a", a), positive("b", b))
    shape, scale, x = as_float_array(a), as_float_array(b), as_float_array(x)

    with np.errstate(divide="ignore", over="ignore", invalid="ignore"):
        probability = 1.0 - (scale / x) ** shape

    return as_result(np.where(x < scale, 0.0, probability))


# =============================================================================
# WEIBULL
# =============================================================================


def weibull_pdf(k: NumericInput, lam: NumericInput, x: NumericInput) -> NumericResult:
    """
    Weibull distribution - probability density function.

    .. math::

        f(x) = \\frac{k}{\\lambda} \\left(\\frac{x}{\\lambda}\\right)^{k - 1}
               e^{-(x / \\lambda)^k}, \\quad x \\ge 0

    and ``f(x) = 0`` for ``x < 0``.

    Parameters
    ----------
    k : NumericInput
        Shape parameter, ``k > 0``.
    lam : NumericInput
        Scale parameter, ``lam > 0``.
    x : NumericInput
        Points at which to evaluate the density.

    Returns
    -------
    NumericResult
        Probability density values at points x. At ``x = 0`` the density is
        ``inf`` for ``k < 1`` and ``1 / lam`` for ``k = 1``.

    Raises
    ------
    DomainError
        If ``k <= 0`` or ``lam <= 0``.
    """
    check_constraints(positive("k", k), positive("lam", lam))
    shape, scale, x = as_float_array(k), as_float_array(lam), as_float_array(x)

    scaled_x = x / scale
    with np.errstate(divide="ignore", over="ignore", invalid="ignore"):
        power_term = scaled_x ** (shape - 1)
        exp_term = np.exp(-(scaled_x**shape))
        density = (shape / scale) * power_term * exp_term

    # far tail: power_term overflows while exp_term underflows to 0
    density = np.where(exp_term == 0.0, 0.0, density)
    return as_result(np.where(x < 0, 0.0, density))


def weibull_cdf(k: NumericInput, lam: NumericInput, x: NumericInput) -> NumericResult:
    """
    Weibull distribution - cumulative distribution function.

    ``F(x) = 1 - exp(-(x / lam)^k)`` for ``x >= 0`` and ``0`` for ``x < 0``.

    Raises
    ------
    DomainError
        If ``k <= 0`` or ``lam <= 0``.
    """
    check_constraints(positive("k", k), positive("lam", lam))
    shape, scale, x = as_float_array(k), as_float_array(lam), as_float_array(x)

    scaled_x = x / scale
    with np.errstate(over="ignore", invalid="ignore"):
        # -expm1 keeps precision for small (x / lam)^k
        probability = -np.expm1(-(scaled_x**shape))

    return as_result(np.where(x < 0, 0.0, probability))


# =============================================================================
# LAPLACE
# =============================================================================


def laplace_pdf(mu: NumericInput, b: NumericInput, x: NumericInput) -> NumericResult:
    """
    Laplace distribution - probability density function.

    .. math::

        f(x \\mid \\mu, b) = \\frac{1}{2b} \\exp\\left(-\\frac{|x - \\mu|}{b}\\right)

    Parameters
    ----------
    mu : NumericInput
        Location parameter.
    b : NumericInput
        Scale (diversity) parameter, ``b > 0``.
    x : NumericInput
        Points at which to evaluate the density.

    Raises
    ------
    DomainError
        If ``b <= 0``.
    """
    check_constraints(positive("b", b))
    location, scale, x = as_float_array(mu), as_float_array(b), as_float_array(x)

    half_tail = 0.5 * np.exp(-np.abs(x - location) / scale)
    return as_result(half_tail / scale)


def laplace_cdf(mu: NumericInput, b: NumericInput, x: NumericInput) -> NumericResult:
    """
    Laplace distribution - cumulative distribution function.

    ``F(x) = exp((x - mu) / b) / 2`` if ``x < mu``,
    ``F(x) = 1 - exp(-(x - mu) / b) / 2`` if ``x >= mu``.

    Both branches share the non-positive exponent ``-|x - mu| / b``.

    Raises
    ------
    DomainError
        If ``b <= 0``.
    """
    check_constraints(positive("b", b))
    location, scale, x = as_float_array(mu), as_float_array(b), as_float_array(x)

    half_tail = 0.5 * np.exp(-np.abs(x - location) / scale)
    return as_result(np.where(x < location, half_tail, 1.0 - half_tail))


# =============================================================================
# LOGISTIC
# =============================================================================


def logistic_pdf(mu: NumericInput, s: NumericInput, x: NumericInput) -> NumericResult:
    """
    Logistic distribution - probability density function.

    .. math::

        f(x; \\mu, s) = \\frac{e^{-(x - \\mu)/s}}{s \\left(1 + e^{-(x - \\mu)/s}\\right)^2}

    The density is symmetric around ``mu``, so it is evaluated with
    ``|x - mu|`` and the exponential never overflows.

    Parameters
    ----------
    mu : NumericInput
        Location parameter.
    s : NumericInput
        Scale parameter, ``s > 0``.
    x : NumericInput
        Points at which to evaluate the density.

    Raises
    ------
    DomainError
        If ``s <= 0``.
    """
    check_constraints(positive("s", s))
    location, scale, x = as_float_array(mu), as_float_array(s), as_float_array(x)

    exp_term = np.exp(-np.abs(x - location) / scale)
    return as_result(exp_term / (scale * (1.0 + exp_term) ** 2))


def logistic_cdf(mu: NumericInput, s: NumericInput, x: NumericInput) -> NumericResult:
    """
    Logistic distribution - cumulative distribution function.

    ``F(x) = 1 / (1 + exp(-(x - mu) / s))``, the logistic sigmoid of
    ``(x - mu) / s``.

    Raises
    ------
    DomainError
        If ``s <= 0``.
    """
    check_constraints(positive("s", s))
    location, scale, x = as_float_array(mu), as_float_array(s), as_float_array(x)

    return as_result(expit((x - location) / scale))


# =============================================================================
# LOG-LOGISTIC
# =============================================================================


def _log_logistic_check(alpha: NumericInput, beta: NumericInput, x: NumericInput) -> None:
    check_constraints(positive("alpha", alpha), positive("beta", beta))
    require_in_support(POSITIVE_HALF_LINE, x)


def log_logistic_pdf(
    alpha: NumericInput, beta: NumericInput, x: NumericInput
) -> NumericResult:
    """
    Log-logistic (Fisk) distribution - probability density function.

    .. math::

        f(x; \\alpha, \\beta) = \\frac{(\\beta / \\alpha)(x / \\alpha)^{\\beta - 1}}
                                      {\\left(1 + (x / \\alpha)^\\beta\\right)^2}

    Evaluated as ``(beta / x) * F(x) * (1 - F(x))``, which is the same
    quantity without overflowing powers.

    Parameters
    ----------
    alpha : NumericInput
        Scale parameter, ``alpha > 0``.
    beta : NumericInput
        Shape parameter, ``beta > 0``.
    x : NumericInput
        Points at which to evaluate the density, ``x > 0``.

    Raises
    ------
    DomainError
        If ``alpha <= 0``, ``beta <= 0`` or ``x <= 0``.
    """
    _log_logistic_check(alpha, beta, x)
    scale, shape, x = as_float_array(alpha), as_float_array(beta), as_float_array(x)

    log_odds = shape * np.log(x / scale)
    return as_result((shape / x) * expit(log_odds) * expit(-log_odds))


def log_logistic_cdf(
    alpha: NumericInput, beta: NumericInput, x: NumericInput
) -> NumericResult:
    """
    Log-logistic (Fisk) distribution - cumulative distribution function.

    ``F(x) = 1 / (1 + (x / alpha)^-beta)``, computed as the logistic sigmoid
    of ``beta * log(x / alpha)``.

    Raises
    ------
    DomainError
        If ``alpha <= 0``, ``beta <= 0`` or ``x <= 0``.
    """
    _log_logistic_check(alpha, beta, x)
    scale, shape, x = as_float_array(alpha), as_float_array(beta), as_float_array(x)

    return as_result(expit(shape * np.log(x / scale)))


# =============================================================================
# BETA
# =============================================================================


def beta_pdf(alpha: NumericInput, beta: NumericInput, x: NumericInput) -> NumericResult:
    """
    Beta distribution - probability density function.

    .. math::

        f(x) = \\frac{x^{\\alpha - 1} (1 - x)^{\\beta - 1}}{B(\\alpha, \\beta)}

    Parameters
    ----------
    alpha : NumericInput
        Shape parameter, ``alpha > 0``.
    beta : NumericInput
        Shape parameter, ``beta > 0``.
    x : NumericInput
        Points at which to evaluate the density, ``0 <= x <= 1``.

    Returns
    -------
    NumericResult
        Probability density values at points x. The density is ``inf`` at
        ``x = 0`` when ``alpha < 1`` and at ``x = 1`` when ``beta < 1``.

    Raises
    ------
    DomainError
        If ``alpha <= 0``, ``beta <= 0`` or ``x`` lies outside ``[0, 1]``.

    Examples
    --------
    >>> round(beta_pdf(2, 2, 0.5), 12)
    1.5
    """
    check_constraints(positive("alpha", alpha), positive("beta", beta))
    require_in_support(UNIT_INTERVAL, x)
    a, b, x = as_float_array(alpha), as_float_array(beta), as_float_array(x)

    # B(a, b) underflows for large shapes; the density itself does not
    with np.errstate(divide="ignore", over="ignore"):
        log_density = xlogy(a - 1, x) + xlog1py(b - 1, -x) - special.log_beta(a, b)
        density = np.exp(log_density)

    return as_result(density)


__all__ = [
    "uniform_interval",
    "pareto_pdf",
    "pareto_cdf",
    "weibull_pdf",
    "weibull_cdf",
    "laplace_pdf",
    "laplace_cdf",
    "logistic_pdf",
    "logistic_cdf",
    "log_logistic_pdf",
    "log_logistic_cdf",
    "beta_pdf",
]
