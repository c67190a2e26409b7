# gpreg/core/errors.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Exceptions raised by the regression engine.

Every error derives from `GPRegressionError` and from the builtin (or
numpy) exception that matches its nature, so that callers may catch
either the specific class or the generic one (e.g. ``ValueError`` for
bad input, ``numpy.linalg.LinAlgError`` for factorization failures).
"""
from numpy.linalg import LinAlgError


class GPRegressionError(Exception):
    """Base class of all gpreg errors."""


class DimensionMismatchError(GPRegressionError, ValueError):
    """Sample or query shape inconsistent with the sample store."""


class InvalidArgumentError(GPRegressionError, ValueError):
    """Argument outside its admissible range (e.g. negative noise level)."""


class NotInitializedError(GPRegressionError, RuntimeError):
    """Query on a model that has no valid factorization."""


class SingularMatrixError(GPRegressionError, LinAlgError):
    """The training covariance matrix cannot be factorized."""


class NotPositiveDefiniteError(SingularMatrixError):
    """The training covariance matrix is not positive definite."""


class NonPositiveDeterminantError(GPRegressionError, LinAlgError):
    """Likelihood evaluated on a covariance with a non-positive determinant."""
