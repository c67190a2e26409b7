# gpreg/core/kriging.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Posterior mean, covariance and variance of a trained model.

These routines are used by `gpreg.core.Model` once the training
covariance matrix has been factorized. With X the stored inputs, Y the
label matrix and C the core matrix (K(X, X) + sigma I)^{-1}:

- mean(x)        = k(x, X) C Y
- cov(x1, x2)    = k(x1, x2) - k(x1, X) C k(X, x2)

Functions
---------
posterior_mean(model, xt)
    Posterior mean at the rows of xt, shape (m, p).
posterior_variance(model, xt)
    Posterior variances at the rows of xt, shape (m,).
posterior_covariance(model, xt, yt=None)
    Posterior covariance matrix between the rows of xt and yt.
clamp_variances(v)
    Replace round-off negative variances with zeros.

Every query only reads the cached factorization, so that independent
queries may run concurrently on a trained model.
"""
import warnings
import gpreg.num as gnp
from gpreg.config import get_config


def kriging_weights(model, xt):
    """Compute the kriging weights lambda_t = C k(X, xt).

    Parameters
    ----------
    model : gpreg.core.Model
        A trained model.
    xt : array_like, shape (m, d)
        Prediction points.

    Returns
    -------
    lambda_t : array_like, shape (n, m)
        Kriging weights.
    Kit : array_like, shape (n, m)
        Cross-covariances k(X, xt).
    """
    Kit = model.kernel(model.samples.inputs, xt)
    core_matrix = model._factorization().core_matrix
    lambda_t = gnp.matmul(core_matrix, Kit)
    return lambda_t, Kit


def posterior_mean(model, xt):
    """Posterior mean k(xt, X) C Y, shape (m, p)."""
    Kti = model.kernel(xt, model.samples.inputs)
    return gnp.matmul(Kti, model._weights())


def posterior_variance(model, xt, zero_neg_variances=True):
    """Posterior variance k(x, x) - k(x, X) C k(X, x) at each row of xt.

    Parameters
    ----------
    model : gpreg.core.Model
    xt : array_like, shape (m, d)
    zero_neg_variances : bool, optional
        Whether to replace negative posterior variances with zeros, by
        default True. Negative variances can occur due to numerical
        errors.

    Returns
    -------
    zt_posterior_variance : array_like, shape (m,)
    """
    lambda_t, Kit = kriging_weights(model, xt)
    zt_prior_variance = model.kernel(xt, None, pairwise=True)
    zt_posterior_variance = zt_prior_variance - gnp.einsum("i..., i...", lambda_t, Kit)
    if zero_neg_variances:
        zt_posterior_variance = clamp_variances(zt_posterior_variance)
    return zt_posterior_variance


def posterior_covariance(model, xt, yt=None, zero_neg_variances=True):
    """Posterior covariance matrix between the rows of xt and yt.

    Parameters
    ----------
    model : gpreg.core.Model
    xt : array_like, shape (m, d)
    yt : array_like, shape (l, d), optional
        If None, yt := xt and the result is a symmetric (m, m) matrix
        whose diagonal holds posterior variances.
    zero_neg_variances : bool, optional
        When yt is None, replace negative diagonal entries with zeros.

    Returns
    -------
    array_like, shape (m, l)
    """
    lambda_t, Kit = kriging_weights(model, xt)
    if yt is None:
        zt_prior_covariance = model.kernel(xt)
        K = zt_prior_covariance - gnp.matmul(lambda_t.T, Kit)
        K = gnp.symmetrize(K)
        if zero_neg_variances:
            d = gnp.diag(K)
            K = K + gnp.diag(clamp_variances(d) - d)
        return K
    Kiy = model.kernel(model.samples.inputs, yt)
    zt_prior_covariance = model.kernel(xt, yt)
    return zt_prior_covariance - gnp.matmul(lambda_t.T, Kiy)


def clamp_variances(v, tolerance=None):
    """Clamp negative variances to zero.

    Values in [-tolerance, 0) are attributed to round-off and clamped
    silently; values below -tolerance also emit a RuntimeWarning.
    `tolerance` defaults to ``get_config().variance_tolerance``.
    """
    if tolerance is None:
        tolerance = get_config().variance_tolerance
    if gnp.any(v < -tolerance):
        warnings.warn(
            "Negative variances detected (min {:.3g}). Consider adding noise "
            "(sigma > 0) or revising kernel parameters.".format(gnp.min(v)),
            RuntimeWarning,
        )
    return gnp.maximum(v, 0.0)
