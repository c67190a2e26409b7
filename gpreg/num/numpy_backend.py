# gpreg/num/numpy_backend.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""NumPy numerical backend for gpreg.

This module defines the NumPy / SciPy implementation of the gpreg.num API.
"""

import builtins
from typing import Any, Callable, Optional
from gpreg.config import get_config, get_logger
from .shared import derivative_finite_diff

ArrayLike = Any

_config = get_config()
_logger = get_logger()

_LINALG_ERROR_KEYWORDS = (
    "singular",
    "not positive definite",
    "not positive-definite",
    "cholesky",
    "decomposition",
    "factorization",
    "determinant",
    "matrix is not invertible",
    "svd did not converge",
    "eigenvalues did not converge",
    "ill-conditioned",
    "linalg",
    "lapack",
    "array must not contain infs or nans",
)


# -----------------------------------------------------
#
#                      NUMPY
#
# -----------------------------------------------------

import numpy

_np_dtype = numpy.float64
_config.dtype_resolved = _np_dtype

from numpy import (
    copy,
    array_equal,
    where,
    any,
    isfinite,
    allclose,
    hstack,
    vstack,
    concatenate,
    zeros_like,
    diag,
    arange,
    abs,
    sqrt,
    exp,
    log,
    sin,
    sum,
    min,
    max,
    maximum,
    einsum,
    matmul,
    all,
)
from numpy.linalg import norm, LinAlgError
from numpy import pi
from numpy import finfo
from scipy.special import gammaln
from scipy.linalg import (
    cho_factor,
    cho_solve,
    lu_factor,
    lu_solve,
    eigh,
    LinAlgWarning,
)
from scipy.spatial.distance import cdist


# ..................................................

eps = finfo(_np_dtype).eps
fmax = numpy.finfo(_np_dtype).max


# ..................................................


def _is_linalg_exception(exc: Exception) -> bool:
    if isinstance(exc, numpy.linalg.LinAlgError):
        return True
    msg = str(exc).lower()
    return builtins.any(keyword in msg for keyword in _LINALG_ERROR_KEYWORDS)


# ..................................................


def array(x, dtype=None):
    if dtype is not None:
        return numpy.array(x, dtype=dtype)
    out = numpy.array(x)
    if numpy.issubdtype(out.dtype, numpy.floating) or numpy.issubdtype(
        out.dtype, numpy.integer
    ):
        return out.astype(_np_dtype, copy=False)
    return out


def asarray(x, dtype=None):
    if dtype is not None:
        return numpy.asarray(x, dtype=dtype)
    if isinstance(x, numpy.ndarray):
        if numpy.issubdtype(x.dtype, numpy.floating):
            return x.astype(_np_dtype, copy=False)
        return x
    elif isinstance(x, (int, float)):
        dt = _np_dtype if isinstance(x, float) else None
        return numpy.array([x], dtype=dt)
    else:
        out = numpy.asarray(x)
        if numpy.issubdtype(out.dtype, numpy.floating):
            return out.astype(_np_dtype, copy=False)
        return out


def zeros(shape, dtype=None):
    return numpy.zeros(shape, dtype=_np_dtype if dtype is None else dtype)


def ones(shape, dtype=None):
    return numpy.ones(shape, dtype=_np_dtype if dtype is None else dtype)


def eye(n, m=None, k=0, dtype=None):
    return numpy.eye(n, M=m, k=k, dtype=_np_dtype if dtype is None else dtype)


def to_np(x):
    return x


def to_scalar(x):
    return numpy.asarray(x).item()


def inftobigf(a, bigf=fmax / 1000.0):
    a = where(numpy.isinf(a), numpy.full_like(a, bigf), a)
    return a


# ..................................................


def grad(f: Callable[[ArrayLike], ArrayLike]) -> Callable[[ArrayLike], ArrayLike]:
    """
    Return function that computes gradient of scalar f via finite differences.

    Uses 5-point central difference formula for accuracy.
    Suitable for low to moderate dimensional problems.

    Parameters
    ----------
    f : callable
        Scalar-valued function taking an array and returning a scalar.

    Returns
    -------
    callable
        Function grad_f(x) that computes nabla f(x) using finite differences.
    """

    def grad_f(x: ArrayLike, h: float = 1e-5) -> ArrayLike:
        x_arr = array(x)
        grad_vec = zeros_like(x_arr)

        for i in range(x_arr.shape[0]):

            def f_i(xi_scalar):
                x_copy = copy(x_arr)
                x_copy[i] = xi_scalar
                return f(x_copy)

            # derivative_finite_diff expects scalar input
            grad_vec[i] = derivative_finite_diff(f_i, float(x_arr[i]), h)

        return grad_vec

    return grad_f


# ..................................................


def scaled_distance(loginvrho: ArrayLike, x: ArrayLike, y: ArrayLike) -> ArrayLike:
    invrho = exp(loginvrho)
    xs = invrho * x
    ys = invrho * y
    return cdist(xs, ys)


def scaled_distance_elementwise(
    loginvrho: ArrayLike, x: ArrayLike, y: Optional[ArrayLike]
) -> ArrayLike:
    if x is y or y is None:
        d = zeros((x.shape[0],))
    else:
        invrho = exp(loginvrho)
        d = sqrt(sum((invrho * (x - y)) ** 2, axis=1))
    return d


def sqdist(x: ArrayLike, y: Optional[ArrayLike] = None) -> ArrayLike:
    """Squared Euclidean distances between the rows of x and y."""
    if y is None:
        y = x
    return cdist(x, y, "sqeuclidean")


def sqdist_elementwise(x: ArrayLike, y: Optional[ArrayLike]) -> ArrayLike:
    if x is y or y is None:
        return zeros((x.shape[0],))
    return sum((x - y) ** 2, axis=1)


# ..................................................


def symmetrize(A):
    return 0.5 * (A + A.T)


# ..................................................

# Build one global RNG (or let the user set the seed somewhere):
_np_rng = numpy.random.default_rng(seed=_config.seed)


def set_seed(seed: int) -> None:
    """Set the global NumPy generator seed."""
    global _np_rng
    _config.seed = seed
    _np_rng = numpy.random.default_rng(seed=seed)


def rand(*shape: int) -> ArrayLike:
    return _np_rng.random(shape, dtype=_np_dtype)


def randn(*shape: int) -> ArrayLike:
    return _np_rng.normal(loc=0, scale=1, size=shape).astype(_np_dtype, copy=False)
