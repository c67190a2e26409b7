# gpreg/kernel/__init__.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Covariance functions and likelihood-based parameter selection.

Modules
-------
base
    Kernel interface, sum/product kernels and white noise kernel.
gaussian
    Gaussian (squared exponential) and rational quadratic kernels.
exponential
    Exponential kernel.
matern
    Matérn family of kernels with half-integer regularity.
periodic
    Periodic kernel.
parameter_selection
    Negative log-likelihood criterion and maximum likelihood selection.

Public API
-----------
- Kernel classes:
    Kernel, GaussianKernel, RationalQuadraticKernel, ExponentialKernel,
    MaternKernel, PeriodicKernel, WhiteKernel, SumKernel, ProductKernel
- Kernel profiles:
    gaussian_kernel, rational_quadratic_kernel, exponential_kernel,
    maternp_kernel
- Parameter selection:
    get_model_param, set_model_param, make_selection_criterion,
    select_parameters_with_ml
"""

from .base import Kernel, WhiteKernel, SumKernel, ProductKernel
from .gaussian import (
    GaussianKernel,
    RationalQuadraticKernel,
    gaussian_kernel,
    rational_quadratic_kernel,
)
from .exponential import ExponentialKernel, exponential_kernel
from .matern import MaternKernel, maternp_kernel
from .periodic import PeriodicKernel
from .parameter_selection import (
    get_model_param,
    set_model_param,
    make_selection_criterion,
    select_parameters_with_ml,
)

__all__ = [
    # Kernels
    "Kernel",
    "GaussianKernel",
    "RationalQuadraticKernel",
    "ExponentialKernel",
    "MaternKernel",
    "PeriodicKernel",
    "WhiteKernel",
    "SumKernel",
    "ProductKernel",
    # Profiles
    "gaussian_kernel",
    "rational_quadratic_kernel",
    "exponential_kernel",
    "maternp_kernel",
    # Parameter selection
    "get_model_param",
    "set_model_param",
    "make_selection_criterion",
    "select_parameters_with_ml",
]
