# gpreg/core/model.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Gaussian process regression model class.
"""
import math
from collections import namedtuple
import gpreg.num as gnp
from gpreg.config import get_logger

from . import kriging
from . import likelihood
from . import linalg
from . import sample_paths
from . import utils
from .samples import SampleStore
from .errors import (
    DimensionMismatchError,
    InvalidArgumentError,
    NotInitializedError,
)

_logger = get_logger()

_TrainedState = namedtuple("_TrainedState", ["key", "factorization", "weights"])


class Model:
    """Gaussian process regression model.

    The model owns a sample store, a kernel and a noise level sigma.
    `initialize` builds the Gram matrix K of the stored inputs,
    factorizes K + sigma I and caches its inverse (the core matrix);
    prediction, credible intervals, posterior sampling and the
    likelihood all read this cached factorization.

    Attributes
    ----------
    kernel : gpreg.kernel.Kernel
        Covariance function, called as

        K = self.kernel(x, y, pairwise),

        where x is (n x d) and y is either an (m x d) array or None,
        meaning y := x. The kernel may be shared between several
        models; changing its parameters puts every model using it back
        into the untrained state.
    samples : gpreg.core.SampleStore
        Training pairs, in insertion order.
    factorization : {'cholesky', 'lu'}
        Decomposition of K + sigma I, see `gpreg.core.linalg`.

    Notes
    -----
    The model is untrained after construction and after any change of
    the samples, of sigma or of the kernel parameters. Queries on an
    untrained model raise `NotInitializedError`. Concurrent queries on
    a trained model are safe; mutations must not run concurrently with
    anything else.

    Public API (methods)
    --------------------
    add_sample, add_samples
        Append training pairs.
    set_sigma
        Set the noise level.
    initialize
        Build and factorize the training covariance matrix.
    predict
        Posterior mean (and optionally variance) at query points.
    covariance (also ``model(x1, x2)``)
        Posterior covariance between query points.
    variance
        Posterior variance at query points.
    credible_interval
        Width 2 * sqrt(variance) of the credible interval.
    sample_posterior
        Draws from the posterior distribution on a grid.
    posterior_sqrt_factor
        Square-root factor of the posterior covariance on a grid.
    log_likelihood
        Gaussian log-likelihood vector of the samples.

    Examples
    --------
    >>> import gpreg as gp
    >>> model = gp.Model(gp.kernel.GaussianKernel(sigma=1.0), sigma=0.0)
    >>> for x, y in [(1, 0.0), (2, 1.0), (3, 0.5), (4, 1.0)]:
    ...     model.add_sample(x, y)
    >>> model.initialize()
    >>> zt_mean = model.predict([[1.5], [2.5]])
    >>> zt_ci = model.credible_interval([[1.5], [2.5]])
    """

    def __init__(self, kernel, sigma=0.0, factorization="cholesky"):
        """
        Parameters
        ----------
        kernel : gpreg.kernel.Kernel
            Covariance function.
        sigma : float, optional
            Nonnegative noise variance added to the diagonal of the
            training covariance matrix (default 0).
        factorization : {'cholesky', 'lu'}, optional
            Decomposition used by `initialize` (default 'cholesky').
        """
        if not callable(kernel):
            raise InvalidArgumentError("kernel must be a callable covariance function")
        if factorization not in linalg.FACTORIZATIONS:
            raise InvalidArgumentError(
                f"factorization must be one of {linalg.FACTORIZATIONS}, "
                f"got {factorization!r}"
            )
        self.kernel = kernel
        self.samples = SampleStore()
        self.factorization = factorization
        self._sigma = 0.0
        self._state = None
        self.set_sigma(sigma)

    def __repr__(self):
        output = str("<gpreg.core.Model object> " + hex(id(self)))
        return output

    def __str__(self):
        return (
            f"GP Model:\n"
            f"  Kernel: {self.kernel!r}\n"
            f"  Noise level (sigma): {self._sigma}\n"
            f"  Samples: {self.n_samples} "
            f"(input dim {self.input_dim}, output dim {self.output_dim})\n"
            f"  Factorization: {self.factorization}\n"
            f"  Initialized: {self.is_initialized}"
        )

    def __getstate__(self):
        # the factorization is a cache, recomputed by initialize()
        state = self.__dict__.copy()
        state["_state"] = None
        return state

    # ------------------------------------------------------------------
    # Samples and noise level
    # ------------------------------------------------------------------
    @property
    def n_samples(self):
        return len(self.samples)

    @property
    def input_dim(self):
        return self.samples.input_dim

    @property
    def output_dim(self):
        return self.samples.output_dim

    def add_sample(self, x, y):
        """Append a training pair (x, y).

        Parameters
        ----------
        x : scalar or array_like, shape (d,)
            Input vector.
        y : scalar or array_like, shape (p,)
            Output vector.

        Raises
        ------
        DimensionMismatchError
            If x or y disagrees with the stored dimensions. The store is
            left unchanged.
        """
        self.samples.add(x, y)

    def add_samples(self, x, y):
        """Append a batch of training pairs, all of them or none.

        Parameters
        ----------
        x : array_like, shape (n, d), or (n,) when d = 1
        y : array_like, shape (n, p), or (n,) when p = 1
        """
        self.samples.extend(x, y)

    @property
    def sigma(self):
        return self._sigma

    @sigma.setter
    def sigma(self, value):
        self.set_sigma(value)

    def set_sigma(self, value):
        """Set the noise variance added to the diagonal.

        Raises
        ------
        InvalidArgumentError
            If value is negative, not finite or not a number.
        """
        try:
            sigma = float(value)
        except (TypeError, ValueError):
            raise InvalidArgumentError(f"sigma must be a real number, got {value!r}")
        if not (sigma >= 0.0 and math.isfinite(sigma)):
            raise InvalidArgumentError(f"sigma must be nonnegative and finite, got {sigma}")
        self._sigma = sigma

    # ------------------------------------------------------------------
    # Training
    # ------------------------------------------------------------------
    def _snapshot(self):
        get_param = getattr(self.kernel, "get_param", None)
        kernel_param = tuple(gnp.to_np(get_param()).tolist()) if get_param else ()
        return (self.samples.version, self._sigma, kernel_param, self.factorization)

    @property
    def is_initialized(self):
        return self._state is not None and self._state.key == self._snapshot()

    def initialize(self):
        """Build and factorize the training covariance matrix K + sigma I.

        Returns
        -------
        self : Model

        Raises
        ------
        NotInitializedError
            If the sample store is empty.
        NotPositiveDefiniteError
            If the Cholesky factorization fails.
        SingularMatrixError
            If the matrix is numerically singular (e.g. duplicate inputs
            with sigma = 0).
        """
        self._state = None
        n = self.n_samples
        if n == 0:
            raise NotInitializedError("Cannot initialize a model without samples.")
        key = self._snapshot()
        xi = self.samples.inputs
        K = self.kernel(xi)
        if K.shape != (n, n):
            raise DimensionMismatchError(
                f"kernel returned a matrix of shape {K.shape}, expected {(n, n)}"
            )
        A = linalg.covariance_with_noise(K, self._sigma)
        factorization = linalg.factorize(A, self.factorization)
        weights = gnp.matmul(factorization.core_matrix, self.samples.labels)
        self._state = _TrainedState(key, factorization, weights)
        _logger.debug(
            "Model initialized: n=%d, d=%d, p=%d, sigma=%g, logdet=%.6g",
            n,
            self.input_dim,
            self.output_dim,
            self._sigma,
            factorization.logdet,
        )
        return self

    def _require_initialized(self):
        if self._state is None:
            raise NotInitializedError(
                "Model is not initialized. Call initialize() after adding samples."
            )
        if self._state.key != self._snapshot():
            raise NotInitializedError(
                "Samples, sigma or kernel parameters changed since the last "
                "initialize(). Call initialize() again."
            )
        return self._state

    # privileged accessors, used by gpreg.core.likelihood
    def _label_matrix(self):
        self._require_initialized()
        return self.samples.labels

    def _factorization(self):
        return self._require_initialized().factorization

    def _weights(self):
        return self._require_initialized().weights

    # ------------------------------------------------------------------
    # Inference
    # ------------------------------------------------------------------
    def _points(self, x, name="x"):
        self._require_initialized()
        return utils.as_points(x, dim=self.input_dim, name=name)

    def predict(self, x, return_variance=False):
        """Posterior mean at one or several query points.

        Parameters
        ----------
        x : scalar, array_like of shape (d,) or (m, d)
            A single point or a batch of points.
        return_variance : bool, optional
            Whether to return the posterior variances too (default False).

        Returns
        -------
        zt_posterior_mean : gnp.array, shape (p,) or (m, p)
            k(x, X) C Y.
        zt_posterior_variance : float or gnp.array of shape (m,), optional
            Only returned if return_variance=True.
        """
        xt, single = self._points(x)
        zt_posterior_mean = kriging.posterior_mean(self, xt)
        if return_variance:
            zt_posterior_variance = kriging.posterior_variance(self, xt)
            if single:
                return zt_posterior_mean[0], float(zt_posterior_variance[0])
            return zt_posterior_mean, zt_posterior_variance
        return zt_posterior_mean[0] if single else zt_posterior_mean

    def variance(self, x):
        """Posterior variance at one or several query points.

        Negative values caused by round-off are clamped to zero (with
        a RuntimeWarning below ``-config.variance_tolerance``).

        Returns
        -------
        float or gnp.array of shape (m,)
        """
        xt, single = self._points(x)
        zt_posterior_variance = kriging.posterior_variance(self, xt)
        return float(zt_posterior_variance[0]) if single else zt_posterior_variance

    def covariance(self, x1, x2=None):
        """Posterior covariance k(x1, x2) - k(x1, X) C k(X, x2).

        Parameters
        ----------
        x1 : scalar, array_like of shape (d,) or (m, d)
        x2 : scalar, array_like of shape (d,) or (l, d), optional
            Defaults to x1.

        Returns
        -------
        float or gnp.array of shape (m, l)
            A float when x1 and x2 are single points. When x1 and x2
            denote the same point, this is the (clamped) posterior
            variance at that point.
        """
        xt, single1 = self._points(x1, name="x1")
        if x2 is None:
            if single1:
                return float(kriging.posterior_variance(self, xt)[0])
            return kriging.posterior_covariance(self, xt)
        yt, single2 = self._points(x2, name="x2")
        if single1 and single2:
            if gnp.array_equal(xt, yt):
                return float(kriging.posterior_variance(self, xt)[0])
            return float(kriging.posterior_covariance(self, xt, yt)[0, 0])
        if gnp.array_equal(xt, yt):
            return kriging.posterior_covariance(self, xt)
        return kriging.posterior_covariance(self, xt, yt)

    __call__ = covariance

    def credible_interval(self, x):
        """Width of the credible interval, 2 * sqrt(posterior variance).

        For any point x, ``2 * sqrt(model(x, x)) - model.credible_interval(x)``
        is exactly zero.

        Returns
        -------
        float or gnp.array of shape (m,)
        """
        v = self.variance(x)
        if isinstance(v, float):
            return 2.0 * math.sqrt(v)
        return 2.0 * gnp.sqrt(v)

    # ------------------------------------------------------------------
    # Sampling (delegating to gpreg.core.sample_paths)
    # ------------------------------------------------------------------
    def sample_posterior(self, xt, nb_samples, rng=None, output=0, tolerance=None):
        """Draw samples from the posterior distribution on a grid.

        Parameters
        ----------
        xt : array_like, shape (m, d)
            Evaluation grid.
        nb_samples : int
            Number of independent draws.
        rng : None, numpy.random.Generator or callable, optional
            Source of standard normal variates. None uses the package
            generator (see ``gnp.set_seed``); a callable is called as
            ``rng(k, nb_samples)``.
        output : int or None, optional
            Output column to sample (default 0), or None for all.
        tolerance : float, optional
            Eigenvalues of the posterior covariance below this value are
            discarded (default ``config.eigen_tolerance``).

        Returns
        -------
        gnp.array, shape (m, nb_samples) or (m, nb_samples, p)
        """
        xt_, _ = self._points(xt, name="xt")
        return sample_paths.sample_posterior(
            self, xt_, nb_samples, rng=rng, output=output, tolerance=tolerance
        )

    def posterior_sqrt_factor(self, xt, tolerance=None):
        """Square-root factor of the posterior covariance on a grid.

        Returns
        -------
        factor : gnp.array, shape (m, k)
            With factor @ factor.T ≈ cov.
        mean : gnp.array, shape (m, p)
        cov : gnp.array, shape (m, m)
        """
        xt_, _ = self._points(xt, name="xt")
        return sample_paths.posterior_sqrt_factor(self, xt_, tolerance)

    # ------------------------------------------------------------------
    # Likelihood (delegating to gpreg.core.likelihood)
    # ------------------------------------------------------------------
    def log_likelihood(self):
        """Gaussian log-likelihood of each output dimension, shape (p,)."""
        return likelihood.log_likelihood(self)
