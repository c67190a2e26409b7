# gpreg/core/likelihood.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Marginal log-likelihood of a trained model.

The likelihood objects read the label matrix and the cached
factorization of a `gpreg.core.Model` through the model's private
accessors `_label_matrix` and `_factorization`. Only the `Likelihood`
base class touches them, via `_label_matrix(model)` and
`_core_matrix(model)`; they are not part of the public model API.

For a model with n samples, label matrix Y (n x p) and core matrix
C = (K + sigma I)^{-1}, the log-likelihood of output column j is

    L_j = -0.5 * Y_jᵀ C Y_j - 0.5 * log det(K + sigma I) - (n / 2) log(2 pi)

These values are what an external optimizer maximizes over kernel
parameters and noise level: set the parameters, call
`model.initialize()`, evaluate again.
"""
import gpreg.num as gnp
from .errors import NonPositiveDeterminantError


class Likelihood:
    """Base class of likelihood objectives.

    Subclasses implement `__call__(model)` and return one value per
    output dimension.
    """

    def __call__(self, model):
        raise NotImplementedError(f"{type(self).__name__} is not callable")

    def __repr__(self):
        return f"{type(self).__name__}()"

    # methods reaching into the model internals
    @staticmethod
    def _label_matrix(model):
        return model._label_matrix()

    @staticmethod
    def _core_matrix(model):
        """Return (core_matrix, sign, logdet) of the model factorization."""
        factorization = model._factorization()
        return factorization.core_matrix, factorization.sign, factorization.logdet


class GaussianLogLikelihood(Likelihood):
    """Gaussian marginal log-likelihood, one value per output dimension."""

    def __call__(self, model):
        """Compute the log-likelihood vector.

        Parameters
        ----------
        model : gpreg.core.Model
            A trained model.

        Returns
        -------
        L : gnp.array, shape (p,)
            Log-likelihood of each output column.

        Raises
        ------
        NotInitializedError
            The model has no valid factorization.
        NonPositiveDeterminantError
            det(K + sigma I) <= 0: the covariance matrix is not a valid
            covariance matrix.
        """
        Y = self._label_matrix(model)
        C, sign, logdet = self._core_matrix(model)
        n = C.shape[0]

        # complexity penalty
        if not sign > 0.0:
            raise NonPositiveDeterminantError(
                "GaussianLogLikelihood: determinant of K + sigma I is smaller "
                "than or equal to zero."
            )
        cp = -0.5 * logdet

        # data fit, one quadratic form per column
        df = -0.5 * gnp.einsum("ij,ik,kj->j", Y, C, Y)

        # constant term
        ct = -0.5 * n * gnp.log(2.0 * gnp.pi)

        return df + (cp + ct)


def log_likelihood(model):
    """Gaussian log-likelihood vector of a trained model, shape (p,)."""
    return GaussianLogLikelihood()(model)


def negative_log_likelihood(model):
    """Negative Gaussian log-likelihood of a trained model, summed over outputs."""
    return -gnp.to_scalar(gnp.sum(log_likelihood(model)))
