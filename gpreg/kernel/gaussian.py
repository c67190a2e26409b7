# gpreg/kernel/gaussian.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
import gpreg.num as gnp
from .base import Kernel, check_positive


def gaussian_kernel(h2):
    """Gaussian (squared exponential) kernel.

    .. math::
        k(h) = \\exp(-h^2 / 2)

    Parameters
    ----------
    h2 : gnp.array
        Squared scaled distances between points.

    Returns
    -------
    gnp.array
        Kernel values.
    """
    return gnp.exp(-0.5 * h2)


def rational_quadratic_kernel(alpha, h2):
    """Rational quadratic kernel.

    .. math::
        k(h) = (1 + h^2 / (2 \\alpha))^{-\\alpha}

    Parameters
    ----------
    alpha : float
        Shape parameter; the Gaussian kernel is the limit alpha -> inf.
    h2 : gnp.array
        Squared scaled distances between points.
    """
    return (1.0 + h2 / (2.0 * alpha)) ** (-alpha)


class GaussianKernel(Kernel):
    """Squared exponential kernel.

    .. math::
        k(x_1, x_2) = s \\exp\\left(-\\frac{\\|x_1 - x_2\\|^2}{2\\sigma^2}\\right)

    Parameters
    ----------
    sigma : float
        Length scale.
    scale : float, optional
        Prior variance s (default 1).
    """

    param_names = ("sigma", "scale")

    def __init__(self, sigma, scale=1.0):
        self.sigma = check_positive("sigma", sigma)
        self.scale = check_positive("scale", scale)

    def covariance(self, x, y=None, pairwise=False):
        if pairwise:
            d2 = gnp.sqdist_elementwise(x, y)
        else:
            d2 = gnp.sqdist(x, y)
        return self.scale * gaussian_kernel(d2 / self.sigma**2)


class RationalQuadraticKernel(Kernel):
    """Rational quadratic kernel, a scale mixture of Gaussian kernels.

    .. math::
        k(x_1, x_2) = s \\left(1 + \\frac{\\|x_1 - x_2\\|^2}{2\\alpha\\sigma^2}\\right)^{-\\alpha}
    """

    param_names = ("sigma", "alpha", "scale")

    def __init__(self, sigma, alpha, scale=1.0):
        self.sigma = check_positive("sigma", sigma)
        self.alpha = check_positive("alpha", alpha)
        self.scale = check_positive("scale", scale)

    def covariance(self, x, y=None, pairwise=False):
        if pairwise:
            d2 = gnp.sqdist_elementwise(x, y)
        else:
            d2 = gnp.sqdist(x, y)
        return self.scale * rational_quadratic_kernel(self.alpha, d2 / self.sigma**2)
