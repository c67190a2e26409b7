# gpreg/core/sample_paths.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Sampling routines for trained models.

This module provides:
- An eigendecomposition-based square root of a (possibly singular)
  covariance matrix.
- Draws from the posterior distribution on a grid `xt`.

Posterior covariances are only positive semidefinite: they vanish at
noiseless observations, and round-off produces tiny negative
eigenvalues. The Cholesky factorization used for prior sample paths
is therefore replaced by K = rot diag(lambda) rotᵀ restricted to the
eigenvalues above a tolerance.
"""
import gpreg.num as gnp
from gpreg.config import get_config, get_logger
from . import kriging
from .errors import DimensionMismatchError, InvalidArgumentError

_logger = get_logger()


def covariance_sqrt(K, tolerance=None):
    """Square-root factor of a symmetric positive semidefinite matrix.

    Parameters
    ----------
    K : array_like, shape (m, m)
        Covariance matrix.
    tolerance : float, optional
        Eigenpairs with eigenvalue <= tolerance are discarded. Defaults
        to ``get_config().eigen_tolerance``.

    Returns
    -------
    rot : array_like, shape (m, k)
        Eigenvectors of the k kept eigenvalues, by decreasing eigenvalue.
    scl : array_like, shape (k,)
        Square roots of the kept eigenvalues.

    Notes
    -----
    Q = rot diag(scl) satisfies Q Qᵀ ≈ K, the error being bounded by the
    discarded eigenvalues. Eigenvalues below -tolerance indicate that K
    is not a valid covariance matrix; they are dropped and logged.
    """
    if tolerance is None:
        tolerance = get_config().eigen_tolerance
    if not tolerance >= 0.0:
        raise InvalidArgumentError(f"tolerance must be nonnegative, got {tolerance}")

    eigvals, eigvecs = gnp.eigh(K)  # ascending order
    keep = eigvals > tolerance
    n_negative = int(gnp.sum(eigvals < -tolerance))
    if n_negative > 0:
        _logger.warning(
            "covariance_sqrt: dropping %d negative eigenvalue(s) (min %.3g); "
            "the covariance matrix is not positive semidefinite",
            n_negative,
            gnp.min(eigvals),
        )
    rot = eigvecs[:, keep][:, ::-1]
    scl = gnp.sqrt(eigvals[keep][::-1])
    _logger.debug(
        "covariance_sqrt: kept %d of %d eigenpairs", scl.shape[0], eigvals.shape[0]
    )
    return rot, scl


def standard_normal(rng, *shape):
    """Draw independent N(0, 1) variates from an injectable source.

    Parameters
    ----------
    rng : None, numpy.random.Generator or callable
        None uses the package generator (see `gnp.set_seed`). A
        Generator is used through ``rng.standard_normal(shape)``. A
        callable is called as ``rng(*shape)``.
    *shape : int
    """
    if rng is None:
        z = gnp.randn(*shape)
    elif hasattr(rng, "standard_normal"):
        z = rng.standard_normal(shape)
    elif callable(rng):
        z = rng(*shape)
    else:
        raise InvalidArgumentError(
            "rng must be None, a numpy Generator or a callable rng(*shape)"
        )
    z = gnp.array(z)
    if tuple(z.shape) != tuple(shape):
        raise DimensionMismatchError(
            f"random source returned shape {tuple(z.shape)}, expected {tuple(shape)}"
        )
    return z


def posterior_sqrt_factor(model, xt, tolerance=None):
    """Posterior mean, covariance and square-root factor on a grid.

    Parameters
    ----------
    model : gpreg.core.Model
        A trained model.
    xt : array_like, shape (m, d)
        Evaluation grid.
    tolerance : float, optional
        Eigenvalue threshold, see `covariance_sqrt`.

    Returns
    -------
    factor : array_like, shape (m, k)
        rot diag(scl), with factor factorᵀ ≈ cov.
    mean : array_like, shape (m, p)
        Posterior mean on the grid.
    cov : array_like, shape (m, m)
        Posterior covariance on the grid.
    """
    mean = kriging.posterior_mean(model, xt)
    cov = kriging.posterior_covariance(model, xt)
    rot, scl = covariance_sqrt(cov, tolerance)
    return rot * scl, mean, cov


def sample_posterior(model, xt, nb_samples, rng=None, output=0, tolerance=None):
    """Draw samples from the posterior distribution on the grid xt.

    Parameters
    ----------
    model : gpreg.core.Model
        A trained model.
    xt : array_like, shape (m, d)
        Evaluation grid.
    nb_samples : int
        Number of independent draws.
    rng : None, numpy.random.Generator or callable, optional
        Source of standard normal variates, see `standard_normal`.
    output : int or None, optional
        Output column to sample (default 0). If None, every output
        column is sampled with independent variates.
    tolerance : float, optional
        Eigenvalue threshold, see `covariance_sqrt`.

    Returns
    -------
    ztsim : array_like
        Shape (m, nb_samples) for a single output, (m, nb_samples, p)
        when output is None.

    Notes
    -----
    The output columns share the posterior covariance; only the means
    differ. A draw is mean + rot diag(scl) u with u ~ N(0, I_k), k the
    number of kept eigenpairs. At noiseless observations the
    posterior covariance has a zero row, so that every draw equals the
    mean there.
    """
    if int(nb_samples) != nb_samples or nb_samples < 1:
        raise InvalidArgumentError(
            f"nb_samples must be a positive integer, got {nb_samples!r}"
        )
    nb_samples = int(nb_samples)
    p = model.output_dim
    if output is not None and not (0 <= output < p):
        raise DimensionMismatchError(
            f"output must be in [0, {p}), got {output}"
        )

    factor, mean, _ = posterior_sqrt_factor(model, xt, tolerance)
    k = factor.shape[1]
    if output is None:
        u = standard_normal(rng, k, nb_samples * p).reshape(k, nb_samples, p)
        return gnp.einsum("ik,knp->inp", factor, u) + mean[:, None, :]
    u = standard_normal(rng, k, nb_samples)
    return gnp.matmul(factor, u) + mean[:, output][:, None]
