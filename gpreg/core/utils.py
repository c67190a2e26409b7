# gpreg/core/utils.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Small utilities used across `gpreg.core` modules.

This file hosts shape/type validation & conversion helpers for
sample vectors and query points.
"""
from typing import Optional, Tuple
import gpreg.num as gnp
from .errors import DimensionMismatchError


def as_vector(v, name="x"):
    """Convert a scalar or a 1D array-like to a 1D float array.

    Parameters
    ----------
    v : scalar or array_like, shape (k,)
    name : str
        Name used in error messages.

    Returns
    -------
    gnp.array, shape (k,)

    Raises
    ------
    DimensionMismatchError
        If `v` has more than one non-singleton dimension or is empty.
    """
    v_ = gnp.array(v)
    if v_.ndim > 1:
        raise DimensionMismatchError(
            f"{name} should be a scalar or a 1D array, got shape {v_.shape}"
        )
    v_ = v_.reshape(-1)
    if v_.shape[0] == 0:
        raise DimensionMismatchError(f"{name} should not be empty")
    return v_


def as_points(x, dim: Optional[int] = None, name="x") -> Tuple[object, bool]:
    """Convert query points to a 2D array of shape (m, dim).

    Parameters
    ----------
    x : scalar, array_like of shape (dim,) or (m, dim)
        A single point or a batch of points. When `dim` is 1, a 1D
        array of shape (m,) is read as m points.
    dim : int, optional
        Expected input dimension.
    name : str
        Name used in error messages.

    Returns
    -------
    points : gnp.array, shape (m, dim)
    single : bool
        True if `x` denotes a single point.

    Raises
    ------
    DimensionMismatchError
        If the last dimension of `x` differs from `dim`.
    """
    x_ = gnp.array(x)
    if x_.ndim == 0:
        points, single = x_.reshape(1, 1), True
    elif x_.ndim == 1:
        if dim == 1 and x_.shape[0] != 1:
            points, single = x_.reshape(-1, 1), False
        else:
            points, single = x_.reshape(1, -1), True
    elif x_.ndim == 2:
        points, single = x_, False
    else:
        raise DimensionMismatchError(
            f"{name} should be at most 2D, got shape {x_.shape}"
        )
    if dim is not None and points.shape[1] != dim:
        raise DimensionMismatchError(
            f"{name} has dimension {points.shape[1]}, expected {dim}"
        )
    return points, single
