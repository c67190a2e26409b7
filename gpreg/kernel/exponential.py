# gpreg/kernel/exponential.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
import gpreg.num as gnp
from .base import Kernel, check_positive


def exponential_kernel(h):
    """Exponential kernel.

    .. math::
        k(h) = \\exp(-h)

    Parameters
    ----------
    h : gnp.array, shape (n,)
        Distances between points.

    Returns
    -------
    gnp.array, shape (n,)
        Kernel values.
    """
    return gnp.exp(-h)


class ExponentialKernel(Kernel):
    """Exponential kernel ``scale * exp(-|x1 - x2| / rho)``."""

    param_names = ("rho", "scale")

    def __init__(self, rho, scale=1.0):
        self.rho = check_positive("rho", rho)
        self.scale = check_positive("scale", scale)

    def covariance(self, x, y=None, pairwise=False):
        loginvrho = -gnp.log(self.rho)
        if pairwise:
            h = gnp.scaled_distance_elementwise(loginvrho, x, y)
        else:
            h = gnp.scaled_distance(loginvrho, x, x if y is None else y)
        return self.scale * exponential_kernel(h)
