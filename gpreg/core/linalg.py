# gpreg/core/linalg.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Factorization of the training covariance matrix.

`factorize` turns the noise-augmented Gram matrix K + sigma I into a
`Factorization`, which bundles everything the predictors and the
likelihood need: the decomposition itself, the inverse ("core
matrix"), and the determinant given as (sign, log|det|). These
quantities are co-derived from a single O(n^3) decomposition.

Two decompositions are available:

- 'cholesky' (default): K + sigma I = L Lᵀ. Fails with
  `NotPositiveDefiniteError` when the matrix is not numerically
  positive definite, and with `SingularMatrixError` when the
  reciprocal condition estimate min(diag L)^2 / max(diag L)^2 falls
  below machine epsilon.
- 'lu': partial pivoting LU, which also accepts symmetric indefinite
  matrices (invalid kernel hyperparameters). The determinant sign may
  then be negative, which the likelihood rejects. Zero or negligible
  pivots raise `SingularMatrixError`.
"""
import warnings
from collections import namedtuple
import gpreg.num as gnp
from .errors import SingularMatrixError, NotPositiveDefiniteError

FACTORIZATIONS = ("cholesky", "lu")

Factorization = namedtuple(
    "Factorization",
    ["method", "factor", "core_matrix", "sign", "logdet"],
)
Factorization.__doc__ = """Cached decomposition of K + sigma I.

Fields
------
method : str
    'cholesky' or 'lu'.
factor : tuple
    Output of scipy's cho_factor or lu_factor.
core_matrix : gnp.array, shape (n, n)
    Symmetrized inverse of K + sigma I.
sign : float
    Sign of det(K + sigma I): 1.0, -1.0 (lu only) or 0.0.
logdet : float
    log|det(K + sigma I)|.
"""


def covariance_with_noise(K, sigma):
    """Return K + sigma I."""
    return K + sigma * gnp.eye(K.shape[0])


def factorize(A, method="cholesky"):
    """Factorize a symmetric matrix and derive its inverse and determinant.

    Parameters
    ----------
    A : array_like, shape (n, n)
        Noise-augmented covariance matrix K + sigma I.
    method : {'cholesky', 'lu'}, optional

    Returns
    -------
    Factorization

    Raises
    ------
    NotPositiveDefiniteError
        Cholesky decomposition failed.
    SingularMatrixError
        The matrix is numerically singular.
    ValueError
        Unknown method.
    """
    if method == "cholesky":
        return _factorize_cholesky(A)
    elif method == "lu":
        return _factorize_lu(A)
    else:
        raise ValueError(f"method must be one of {FACTORIZATIONS}, got {method!r}")


def _factorize_cholesky(A):
    n = A.shape[0]
    try:
        C, lower = gnp.cho_factor(A, lower=True, check_finite=True)
    except gnp.LinAlgError as exc:
        raise NotPositiveDefiniteError(
            f"Cholesky factorization of the {n}x{n} covariance matrix failed "
            f"({exc}). Duplicate inputs with sigma = 0 or invalid kernel "
            "parameters produce such matrices."
        ) from exc
    except ValueError as exc:
        # check_finite rejects infs and nans
        raise NotPositiveDefiniteError(str(exc)) from exc

    d = gnp.diag(C)
    rcond = (gnp.min(d) / gnp.max(d)) ** 2
    if not rcond > gnp.eps:
        raise SingularMatrixError(
            f"Covariance matrix is numerically singular (rcond estimate {rcond:.3g})."
        )
    core_matrix = gnp.symmetrize(gnp.cho_solve((C, lower), gnp.eye(n)))
    logdet = 2.0 * gnp.to_scalar(gnp.sum(gnp.log(d)))
    return Factorization("cholesky", (C, lower), core_matrix, 1.0, logdet)


def _factorize_lu(A):
    n = A.shape[0]
    if not gnp.all(gnp.isfinite(A)):
        raise SingularMatrixError("Covariance matrix contains infs or nans.")
    with warnings.catch_warnings():
        # exactly singular pivots are reported by the check below
        warnings.simplefilter("ignore", gnp.LinAlgWarning)
        lu, piv = gnp.lu_factor(A, check_finite=False)
    u = gnp.diag(lu)
    absu = gnp.abs(u)
    if not gnp.min(absu) > gnp.eps * n * gnp.max(absu):
        raise SingularMatrixError(
            f"Covariance matrix is numerically singular "
            f"(smallest pivot {gnp.min(absu):.3g})."
        )
    # each piv[i] != i is a row swap
    n_swaps = int(gnp.sum(piv != gnp.arange(n)))
    n_negative = int(gnp.sum(u < 0.0))
    sign = -1.0 if (n_swaps + n_negative) % 2 else 1.0
    logdet = gnp.to_scalar(gnp.sum(gnp.log(absu)))
    core_matrix = gnp.symmetrize(gnp.lu_solve((lu, piv), gnp.eye(n)))
    return Factorization("lu", (lu, piv), core_matrix, sign, logdet)


def solve(factorization, b):
    """Solve (K + sigma I) x = b with a cached factorization."""
    if factorization.method == "cholesky":
        return gnp.cho_solve(factorization.factor, b)
    return gnp.lu_solve(factorization.factor, b)


def determinant(factorization):
    """det(K + sigma I) as a float; may under/overflow, prefer sign/logdet."""
    return factorization.sign * gnp.exp(factorization.logdet)
