# gpreg/kernel/periodic.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
import gpreg.num as gnp
from .base import Kernel, check_positive


class PeriodicKernel(Kernel):
    """Periodic kernel, applied coordinate-wise.

    .. math::
        k(x_1, x_2) = s \\exp\\left(-\\frac{2}{\\sigma^2}
            \\sum_j \\sin^2\\left(\\frac{\\pi (x_{1,j} - x_{2,j})}{T}\\right)\\right)

    Parameters
    ----------
    period : float
        Period T.
    sigma : float
        Length scale.
    scale : float, optional
        Prior variance s (default 1).
    """

    param_names = ("period", "sigma", "scale")

    def __init__(self, period, sigma, scale=1.0):
        self.period = check_positive("period", period)
        self.sigma = check_positive("sigma", sigma)
        self.scale = check_positive("scale", scale)

    def covariance(self, x, y=None, pairwise=False):
        if y is None:
            y = x
        if pairwise:
            diff = x - y  # (n, d)
        else:
            diff = x[:, None, :] - y[None, :, :]  # (n, m, d)
        s2 = gnp.sum(gnp.sin(gnp.pi * diff / self.period) ** 2, axis=-1)
        return self.scale * gnp.exp(-2.0 * s2 / self.sigma**2)
