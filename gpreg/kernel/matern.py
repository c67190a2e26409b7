# gpreg/kernel/matern.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
from math import sqrt
import gpreg.num as gnp
from gpreg.core.errors import InvalidArgumentError
from .base import Kernel, check_positive


def maternp_kernel(p: int, h):
    """Matérn kernel with half-integer regularity :math:`\\nu = p + 1/2`.

    Using the half-integer simplification (Watson 1922; Abramowitz & Stegun):

    .. math::
        K(h) = \\exp(-2\\sqrt{\\nu}\\,h)\\,
               \\frac{\\Gamma(p+1)}{\\Gamma(2p+1)}
               \\sum_{i=0}^{p} \\frac{(p+i)!}{i!(p-i)!}\\,(4\\sqrt{\\nu}h)^{\\,p-i}

    Parameters
    ----------
    p : int
        Nonnegative integer with :math:`\\nu = p+1/2`.
    h : gnp.array
        Distances.

    Returns
    -------
    gnp.array
        Kernel values.
    """
    gln = gnp.compute_gammaln(p)
    h = gnp.inftobigf(h)
    c = 2.0 * sqrt(p + 0.5)
    twoch = 2.0 * c * h
    polynomial = gnp.ones(h.shape)
    for i in range(p):
        exp_log_combination = gnp.exp(
            gln[p + 1] - gln[2 * p + 1] + gln[p + i + 1] - gln[i + 1] - gln[p - i + 1]
        )
        polynomial += exp_log_combination * (twoch ** (p - i))
    return gnp.exp(-c * h) * polynomial


class MaternKernel(Kernel):
    """Matérn kernel with regularity :math:`\\nu = p + 1/2`.

    .. math::
        k(x_1, x_2) = s\\, K_p(\\|x_1 - x_2\\| / \\rho)

    Parameters
    ----------
    p : int
        Nonnegative integer; p = 0 is the exponential kernel, p = 1
        the Matérn 3/2 kernel. p is fixed and not part of the
        parameter vector.
    rho : float
        Length scale.
    scale : float, optional
        Prior variance s (default 1).
    """

    param_names = ("rho", "scale")

    def __init__(self, p, rho, scale=1.0):
        if int(p) != p or p < 0:
            raise InvalidArgumentError(f"p must be a nonnegative integer, got {p!r}")
        self.p = int(p)
        self.rho = check_positive("rho", rho)
        self.scale = check_positive("scale", scale)

    def covariance(self, x, y=None, pairwise=False):
        loginvrho = -gnp.log(self.rho)
        if pairwise:
            h = gnp.scaled_distance_elementwise(loginvrho, x, y)
        else:
            h = gnp.scaled_distance(loginvrho, x, x if y is None else y)
        return self.scale * maternp_kernel(self.p, h)

    def __repr__(self):
        return f"MaternKernel(p={self.p}, rho={self.rho:g}, scale={self.scale:g})"
