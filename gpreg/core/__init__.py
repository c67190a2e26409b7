# gpreg/core/__init__.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------

"""
Core components of the gpreg package.

This subpackage contains the regression engine: sample storage,
factorization of the training covariance matrix, kriging predictors,
posterior sampling and the marginal log-likelihood.

Public API
----------
Model : class
    Gaussian process regression model façade combining all core routines.
SampleStore : class
    Ordered store of training samples.
Likelihood, GaussianLogLikelihood : classes
    Likelihood objectives evaluated on a trained model.
log_likelihood, negative_log_likelihood : functions
    Function forms of the Gaussian log-likelihood.
GPRegressionError and subclasses
    Error taxonomy, see `gpreg.core.errors`.
"""

from .errors import (
    GPRegressionError,
    DimensionMismatchError,
    InvalidArgumentError,
    NotInitializedError,
    SingularMatrixError,
    NotPositiveDefiniteError,
    NonPositiveDeterminantError,
)
from .samples import SampleStore
from .likelihood import (
    Likelihood,
    GaussianLogLikelihood,
    log_likelihood,
    negative_log_likelihood,
)
from .model import Model

__all__ = [
    "Model",
    "SampleStore",
    "Likelihood",
    "GaussianLogLikelihood",
    "log_likelihood",
    "negative_log_likelihood",
    "GPRegressionError",
    "DimensionMismatchError",
    "InvalidArgumentError",
    "NotInitializedError",
    "SingularMatrixError",
    "NotPositiveDefiniteError",
    "NonPositiveDeterminantError",
]
