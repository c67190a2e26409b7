## --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
## --------------------------------------------------------------
import numpy as np


def regulargrid(dim, n, box):
    """
    Build a regular grid in the dim-dimensional hyperrectangle.

    If n is an integer, a grid of size n^dim is built;

    If n is a list of length dim, a grid of size prod(n) is built,
    with n_i points on coordinate i.

    The dim-dimensional hyperrectangle is specified by the argument
    box, which is a 2 x dim array where box_(1, i) and box_(2, i) are
    the lower- and upper-bound of the interval on the i^th coordinate.
    Both bounds belong to the grid.

    Parameters
    ----------
    dim : int
        Number of dimensions.
    n : int or list
        Number of points per dimension or a list with the number of points per dimension.
    box : list of lists
        List of lists containing the lower and upper bounds of the box.

    Returns
    -------
    x : numpy.ndarray, shape (prod(n), dim)
        Regular grid in the dim-dimensional hyperrectangle.
    """
    if not isinstance(n, list):
        n = [n for i in range(dim)]

    xmin, xmax = box[0], box[1]

    levels = [np.linspace(xmin[i], xmax[i], n[i]) for i in range(dim)]

    # full factorial design
    Xv = np.meshgrid(*levels, copy=True, sparse=False, indexing="ij")
    x = np.stack([v.reshape(-1) for v in Xv], axis=1)
    return x


def halfopen_grid(n, a, b):
    """
    Regular 1D grid x_i = a + i * (b - a) / n, i = 0, ..., n-1, on [a, b).

    Points are computed as i * (b - a) / n, so that grid points that
    coincide with round numbers (e.g. integers when (b - a) / n is a
    decimal fraction) are exact, unlike numpy.linspace which
    accumulates i * step.

    Returns
    -------
    x : numpy.ndarray, shape (n, 1)
    """
    i = np.arange(n, dtype=float)
    return (a + i * (b - a) / n).reshape(-1, 1)
