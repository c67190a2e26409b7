# gpreg/kernel/parameter_selection.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Likelihood-based selection of kernel parameters and noise level.

The selection criterion is the negative Gaussian log-likelihood of a
model, seen as a function of the normalized parameter vector

    p = [kernel.get_param(), log(sigma)]

The optimizer itself is SciPy's `minimize`; this module only builds the
criterion, its finite-difference gradient, and installs the result.
"""

import math
import time
import numpy as np
from scipy.optimize import minimize
import gpreg.num as gnp
from gpreg.config import get_config, get_logger
from gpreg.core.likelihood import negative_log_likelihood

_logger = get_logger()


# ------------------------ parameter vector access ---------------------
def get_model_param(model, optimize_sigma=True):
    """Return the normalized parameter vector of a model.

    Parameters
    ----------
    model : gpreg.core.Model
    optimize_sigma : bool, default True
        Whether log(sigma) is appended to the kernel parameters. A zero
        noise level is mapped to log(config.sigma_floor).

    Returns
    -------
    p : gnp.array, shape (n_params,) or (n_params + 1,)
    """
    p = gnp.array(model.kernel.get_param()).reshape(-1)
    if optimize_sigma:
        sigma = max(model.sigma, get_config().sigma_floor)
        p = gnp.concatenate((p, gnp.array([math.log(sigma)])))
    return p


def set_model_param(model, p, optimize_sigma=True, initialize=True):
    """Install a normalized parameter vector into a model.

    Parameters
    ----------
    model : gpreg.core.Model
    p : array_like
        Vector laid out as in `get_model_param`.
    optimize_sigma : bool, default True
        Whether the last entry of p is log(sigma).
    initialize : bool, default True
        Whether to call ``model.initialize()`` afterwards.

    Returns
    -------
    model : gpreg.core.Model
    """
    p = gnp.array(p).reshape(-1)
    if optimize_sigma:
        model.kernel.set_param(p[:-1])
        model.set_sigma(math.exp(float(p[-1])))
    else:
        model.kernel.set_param(p)
    if initialize:
        model.initialize()
    return model


# ---------------------- criterion + gradient maker --------------------
def make_selection_criterion(model, optimize_sigma=True):
    """Build the negative log-likelihood criterion and its gradient.

    Parameters
    ----------
    model : gpreg.core.Model
        Model with samples. Its kernel and noise level are modified by
        every criterion evaluation.
    optimize_sigma : bool, default True
        Whether the noise level is part of the parameter vector.

    Returns
    -------
    criterion : callable
        ``criterion(p) -> float``, the negative log-likelihood summed
        over output dimensions. Linear-algebra failures (non positive
        definite or singular matrices, non-positive determinants) are
        mapped to ``+inf``.
    gradient : callable
        ``gradient(p) -> gnp.array``, 5-point finite differences of
        ``criterion``.
    """

    def criterion(p):
        try:
            set_model_param(model, p, optimize_sigma=optimize_sigma)
            return negative_log_likelihood(model)
        except Exception as exc:
            if gnp._is_linalg_exception(exc):
                _logger.debug("selection criterion: %s at p=%s", exc, p)
                return math.inf
            raise

    gradient = gnp.grad(criterion)
    return criterion, gradient


# ------------------------------ optimizer -----------------------------
def select_parameters_with_ml(
    model,
    p0=None,
    optimize_sigma=True,
    bounds=None,
    bounds_delta=10.0,
    info=False,
    method="L-BFGS-B",
    method_options=None,
):
    """Select kernel parameters (and noise level) by maximum likelihood.

    Parameters
    ----------
    model : gpreg.core.Model
        Model with samples.
    p0 : array_like, optional
        Initial normalized parameters. Defaults to the current ones.
    optimize_sigma : bool, default True
        Whether the noise level is optimized too.
    bounds : sequence of tuple, optional
        Bounds in normalized space. Defaults to p0 +/- bounds_delta.
    bounds_delta : float, default 10.0
        Half-width of the default bounds.
    info : bool, default False
        If True, also return the SciPy result object.
    method : {"L-BFGS-B", "SLSQP"}, default "L-BFGS-B"
        Optimization method.
    method_options : dict, optional
        Additional options passed to SciPy ``minimize``.

    Returns
    -------
    model : gpreg.core.Model
        The model, initialized with the best parameters found.
    info_ret : scipy.optimize.OptimizeResult, optional
        Only returned if info=True. Carries ``history_params``,
        ``history_criterion``, ``initial_params``, ``best_value_returned``
        and ``total_time``.
    """
    tic = time.time()
    if p0 is None:
        p0 = get_model_param(model, optimize_sigma=optimize_sigma)
    p0 = np.asarray(p0, dtype=float).reshape(-1)
    if bounds is None:
        bounds = [(p - bounds_delta, p + bounds_delta) for p in p0]

    criterion, gradient = make_selection_criterion(model, optimize_sigma)

    history_params, history_criterion = [], []
    best_params, best_criterion = p0.copy(), math.inf

    def criterion_with_history(p):
        nonlocal best_params, best_criterion
        J = criterion(p)
        history_params.append(p.copy())
        history_criterion.append(J)
        if J < best_criterion:
            best_criterion, best_params = J, p.copy()
        return J

    options = {}
    if method == "L-BFGS-B":
        options.update(dict(maxcor=20, ftol=1e-9, gtol=1e-6, maxiter=15000, maxls=40))
    elif method == "SLSQP":
        options.update(dict(ftol=1e-9, maxiter=15000))
    else:
        raise ValueError("Optimization method not implemented.")
    if method_options is not None:
        options.update(method_options)

    r = minimize(
        criterion_with_history,
        p0,
        method=method,
        jac=gradient,
        bounds=bounds,
        options=options,
    )

    # ensure returning best seen
    if not r.fun <= best_criterion:
        r.x, r.fun, r.best_value_returned = best_params, best_criterion, False
    else:
        r.best_value_returned = True

    if not math.isfinite(best_criterion):
        # leave the model in a state consistent with p0
        set_model_param(model, p0, optimize_sigma=optimize_sigma, initialize=False)
        raise RuntimeError(
            "Parameter selection failed: the likelihood could not be evaluated "
            "at any visited parameter."
        )
    set_model_param(model, r.x, optimize_sigma=optimize_sigma)

    r.history_params = history_params
    r.history_criterion = history_criterion
    r.initial_params = p0
    r.total_time = time.time() - tic
    _logger.info(
        "select_parameters_with_ml: negative log-likelihood %.6g after %d "
        "evaluations (%.2fs)",
        r.fun,
        len(history_criterion),
        r.total_time,
    )

    return (model, r) if info else model
