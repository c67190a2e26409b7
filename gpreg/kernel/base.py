# gpreg/kernel/base.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Kernel interface, kernel algebra and the white-noise kernel.

A kernel is a symmetric positive-semidefinite function k(x1, x2). The
regression engine only relies on the vectorized form

    K = kernel(x, y=None, pairwise=False)

where x is (n x d) and y is either an (m x d) array or None, meaning
y := x. Pairwise indicates if an (n x m) covariance matrix
(pairwise == False) or an (n,) vector of k(x_i, y_i) (pairwise == True)
should be returned.

Kernel parameters are exposed on a log scale through `get_param` and
`set_param`, which is the parameterization used for likelihood-based
selection.
"""
import math
import gpreg.num as gnp
from gpreg.core.errors import DimensionMismatchError, InvalidArgumentError


def check_positive(name, value):
    """Return float(value), raise InvalidArgumentError unless value > 0."""
    try:
        v = float(value)
    except (TypeError, ValueError):
        raise InvalidArgumentError(f"{name} must be a real number, got {value!r}")
    if not (v > 0.0 and math.isfinite(v)):
        raise InvalidArgumentError(f"{name} must be positive and finite, got {v}")
    return v


class Kernel:
    """Base class of covariance functions.

    Subclasses define `param_names` (names of the positive parameters,
    stored as attributes) and implement `covariance(x, y, pairwise)`
    on 2D arrays.
    """

    param_names = ()

    def covariance(self, x, y=None, pairwise=False):
        raise NotImplementedError

    def __call__(self, x, y=None, pairwise=False):
        x_ = _as_2d(x)
        if y is None or y is x:
            return self.covariance(x_, None, pairwise)
        y_ = _as_2d(y)
        if x_.shape[1] != y_.shape[1]:
            raise DimensionMismatchError(
                f"x and y must have the same number of columns "
                f"({x_.shape[1]} != {y_.shape[1]})"
            )
        if pairwise and x_.shape[0] != y_.shape[0]:
            raise DimensionMismatchError(
                "pairwise evaluation needs x and y with the same number of rows"
            )
        return self.covariance(x_, y_, pairwise)

    def evaluate(self, x1, x2):
        """Return k(x1, x2) for two single points, as a float."""
        x1_ = gnp.array(x1).reshape(1, -1)
        x2_ = gnp.array(x2).reshape(1, -1)
        return float(self(x1_, x2_, pairwise=True)[0])

    # ------------------------------------------------------------------
    # Parameters
    # ------------------------------------------------------------------
    @property
    def n_params(self):
        return len(self.param_names)

    def get_param(self):
        """Log-parameters, shape (n_params,)."""
        return gnp.log(gnp.array([getattr(self, name) for name in self.param_names]))

    def set_param(self, param):
        self._assign(self._check_param(param))

    def _check_param(self, param):
        """Validate log-scale param, return the (name, value) pairs to assign."""
        param = gnp.array(param).reshape(-1)
        if param.shape[0] != self.n_params:
            raise DimensionMismatchError(
                f"{type(self).__name__} expects {self.n_params} parameters, "
                f"got {param.shape[0]}"
            )
        return [
            (name, check_positive(name, value))
            for name, value in zip(self.param_names, gnp.exp(param))
        ]

    def _assign(self, checked):
        for name, value in checked:
            setattr(self, name, value)

    # ------------------------------------------------------------------
    # Algebra
    # ------------------------------------------------------------------
    def __add__(self, other):
        return SumKernel(self, other)

    def __mul__(self, other):
        return ProductKernel(self, other)

    def __repr__(self):
        args = ", ".join(f"{name}={getattr(self, name):g}" for name in self.param_names)
        return f"{type(self).__name__}({args})"


def _as_2d(x):
    x_ = gnp.array(x)
    if x_.ndim == 0:
        return x_.reshape(1, 1)
    if x_.ndim == 1:
        return x_.reshape(-1, 1)
    if x_.ndim != 2:
        raise DimensionMismatchError(f"expected a 2D array, got shape {x_.shape}")
    return x_


class WhiteKernel(Kernel):
    """White noise kernel: ``scale`` on identical inputs, 0 elsewhere."""

    param_names = ("scale",)

    def __init__(self, scale=1.0):
        self.scale = check_positive("scale", scale)

    def covariance(self, x, y=None, pairwise=False):
        if pairwise:
            d2 = gnp.sqdist_elementwise(x, y)
        else:
            d2 = gnp.sqdist(x, y)
        return self.scale * (d2 == 0.0)


class _CompositeKernel(Kernel):
    symbol = "?"

    def __init__(self, first, second):
        if not isinstance(first, Kernel) or not isinstance(second, Kernel):
            raise InvalidArgumentError("both operands must be Kernel instances")
        self.first = first
        self.second = second

    @property
    def n_params(self):
        return self.first.n_params + self.second.n_params

    def get_param(self):
        return gnp.concatenate((self.first.get_param(), self.second.get_param()))

    def _check_param(self, param):
        param = gnp.array(param).reshape(-1)
        if param.shape[0] != self.n_params:
            raise DimensionMismatchError(
                f"{type(self).__name__} expects {self.n_params} parameters, "
                f"got {param.shape[0]}"
            )
        n1 = self.first.n_params
        # both halves are checked before either child is modified
        return (self.first._check_param(param[:n1]), self.second._check_param(param[n1:]))

    def _assign(self, checked):
        self.first._assign(checked[0])
        self.second._assign(checked[1])

    def __repr__(self):
        return f"({self.first!r} {self.symbol} {self.second!r})"


class SumKernel(_CompositeKernel):
    """k(x1, x2) = k1(x1, x2) + k2(x1, x2)."""

    symbol = "+"

    def covariance(self, x, y=None, pairwise=False):
        return self.first.covariance(x, y, pairwise) + self.second.covariance(
            x, y, pairwise
        )


class ProductKernel(_CompositeKernel):
    """k(x1, x2) = k1(x1, x2) * k2(x1, x2)."""

    symbol = "*"

    def covariance(self, x, y=None, pairwise=False):
        return self.first.covariance(x, y, pairwise) * self.second.covariance(
            x, y, pairwise
        )
