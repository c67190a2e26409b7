# gpreg/core/samples.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Ordered store of training samples.

Insertion order defines the row/column order of every matrix built
from the store (Gram matrix, label matrix, kriging weights).
"""
import gpreg.num as gnp
from . import utils
from .errors import DimensionMismatchError


class SampleStore:
    """Append-only collection of (input, output) pairs.

    All inputs share the same dimension ``input_dim`` and all outputs
    the same dimension ``output_dim``; both are fixed by the first
    sample. ``version`` is incremented on every mutation so that
    derived quantities can detect that they are stale.
    """

    def __init__(self):
        self._x = []
        self._y = []
        self._inputs = None
        self._labels = None
        self.version = 0

    def __len__(self):
        return len(self._x)

    def __repr__(self):
        return (
            f"<gpreg.core.SampleStore n={len(self)} "
            f"input_dim={self.input_dim} output_dim={self.output_dim}>"
        )

    def __getitem__(self, i):
        return self._x[i].copy(), self._y[i].copy()

    @property
    def input_dim(self):
        return self._x[0].shape[0] if self._x else None

    @property
    def output_dim(self):
        return self._y[0].shape[0] if self._y else None

    def _check(self, x, y, input_dim, output_dim):
        if input_dim is not None and x.shape[0] != input_dim:
            raise DimensionMismatchError(
                f"input has dimension {x.shape[0]}, expected {input_dim}"
            )
        if output_dim is not None and y.shape[0] != output_dim:
            raise DimensionMismatchError(
                f"output has dimension {y.shape[0]}, expected {output_dim}"
            )

    def add(self, x, y):
        """Append one sample. The store is left unchanged on error."""
        x_ = utils.as_vector(x, name="x")
        y_ = utils.as_vector(y, name="y")
        self._check(x_, y_, self.input_dim, self.output_dim)
        self._x.append(x_)
        self._y.append(y_)
        self._invalidate()

    def extend(self, x, y):
        """Append a batch of samples, all of them or none.

        Parameters
        ----------
        x : array_like, shape (n, d) or (n,) when d = 1
        y : array_like, shape (n, p) or (n,) when p = 1
        """
        x_ = gnp.array(x)
        y_ = gnp.array(y)
        if x_.ndim == 1:
            x_ = x_.reshape(-1, 1)
        if y_.ndim == 1:
            y_ = y_.reshape(-1, 1)
        if x_.ndim != 2 or y_.ndim != 2:
            raise DimensionMismatchError("x and y should be 1D or 2D arrays")
        if x_.shape[0] != y_.shape[0]:
            raise DimensionMismatchError(
                f"x and y must have the same number of rows "
                f"({x_.shape[0]} != {y_.shape[0]})"
            )
        input_dim, output_dim = self.input_dim, self.output_dim
        for xk, yk in zip(x_, y_):
            self._check(xk, yk, input_dim, output_dim)
            input_dim, output_dim = xk.shape[0], yk.shape[0]
        self._x.extend(gnp.copy(xk) for xk in x_)
        self._y.extend(gnp.copy(yk) for yk in y_)
        self._invalidate()

    def _invalidate(self):
        self._inputs = None
        self._labels = None
        self.version += 1

    @property
    def inputs(self):
        """Input matrix X, shape (n, input_dim). Read-only view."""
        if self._inputs is None:
            self._inputs = gnp.vstack(self._x) if self._x else gnp.zeros((0, 0))
            self._inputs.flags.writeable = False
        return self._inputs

    @property
    def labels(self):
        """Label matrix Y, shape (n, output_dim). Read-only view."""
        if self._labels is None:
            self._labels = gnp.vstack(self._y) if self._y else gnp.zeros((0, 0))
            self._labels.flags.writeable = False
        return self._labels
