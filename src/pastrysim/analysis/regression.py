"""
Fit mean hop counts to the Pastry scaling law.

Pastry routes in O(log N) hops, so the measured means are fitted to

    H(N) = a + b·log10(N)

by chi-square least squares with scipy.optimize.curve_fit, using each
size's standard deviation across trials as its measurement error. When no
usable errors are available the fit is unweighted and the parameter errors
are estimated from the scatter.
"""

from __future__ import annotations
from dataclasses import dataclass

import numpy as np
from scipy import stats
from scipy.optimize import curve_fit

from pastrysim.core.errors import ConfigurationError


@dataclass
class LogLinearFit:
    """Result of fitting H = a + b·log10(N)."""

    a: float
    b: float
    stddev_a: float
    stddev_b: float
    chi2: float
    p_value: float
    n_points: int
    weighted: bool

    def predict(self, node_counts) -> np.ndarray:
        """Evaluate the fitted law at the given network sizes."""
        return self.a + self.b * np.log10(np.asarray(node_counts, dtype=np.float64))

    def describe(self) -> str:
        """Multi-line summary in the usual report format."""
        return "\n".join([
            "H = a + b log N",
            f"a = {self.a:.2f}",
            f"b = {self.b:.2f}",
            f"stddev(a) = {self.stddev_a:.2f}",
            f"stddev(b) = {self.stddev_b:.2f}",
            f"chi^2 = {self.chi2:.6f}",
            f"p-value = {self.p_value:.6f}",
        ])


def _log_linear(x, a, b):
    return a + b * x


def fit_log_linear(
    node_counts,
    mean_hops,
    stddevs=None,
) -> LogLinearFit:
    """
    Fit mean hop counts against log10 of the network size.

    Args:
        node_counts: Network sizes N (positive)
        mean_hops: Mean hop count measured at each size
        stddevs: Standard deviation of each mean (None for an unweighted fit)

    Returns:
        LogLinearFit with parameters, their errors, χ² and goodness-of-fit p-value
    """
    n_arr = np.asarray(node_counts, dtype=np.float64)
    y = np.asarray(mean_hops, dtype=np.float64)

    if n_arr.shape != y.shape or n_arr.ndim != 1:
        raise ConfigurationError("node_counts and mean_hops must be 1D arrays of equal length")
    if len(n_arr) < 3:
        raise ConfigurationError(f"need at least 3 network sizes to fit, got {len(n_arr)}")
    if np.any(n_arr <= 0):
        raise ConfigurationError("network sizes must be positive")
    if len(np.unique(n_arr)) < 2:
        raise ConfigurationError("need at least 2 distinct network sizes to fit")

    x = np.log10(n_arr)

    weighted = False
    sigma = np.ones_like(y)
    if stddevs is not None:
        s = np.asarray(stddevs, dtype=np.float64)
        if s.shape != y.shape:
            raise ConfigurationError("stddevs must match mean_hops in length")
        # A zero error would give that point infinite weight
        if np.all(s > 0):
            sigma = s
            weighted = True

    popt, pcov = curve_fit(
        _log_linear, x, y,
        sigma=sigma if weighted else None,
        absolute_sigma=weighted,
    )
    a, b = (float(p) for p in popt)
    stddev_a, stddev_b = (float(e) for e in np.sqrt(np.diag(pcov)))

    residuals = (y - _log_linear(x, a, b)) / sigma
    chi2 = float((residuals ** 2).sum())

    if weighted:
        p_value = float(stats.chi2.sf(chi2, len(x) - 2))
    else:
        # Errors estimated from the scatter; goodness of fit is meaningless
        p_value = 1.0

    return LogLinearFit(
        a=a,
        b=b,
        stddev_a=stddev_a,
        stddev_b=stddev_b,
        chi2=chi2,
        p_value=p_value,
        n_points=len(x),
        weighted=weighted,
    )
