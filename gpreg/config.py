# gpreg/config.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Package-wide configuration: logger, numerical tolerances and seed.

The configuration is a process-wide singleton obtained with
`get_config()`. A few settings may be overridden from the environment
before `gpreg` is imported:

- ``GPREG_LOG_LEVEL``: name of the logging level (e.g. ``DEBUG``).
- ``GPREG_EIGEN_TOLERANCE``: eigenvalue threshold used by posterior
  sampling.
"""
import os
import logging

# Read version from VERSION file
_version_file = os.path.join(os.path.dirname(__file__), "..", "VERSION")
try:
    with open(os.path.abspath(_version_file), "r") as f:
        __version__ = f.read().strip()
except FileNotFoundError:
    __version__ = "0.0.0"


def _float_from_env(name, default):
    value = os.environ.get(name)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        raise ValueError(f"{name} must be a float, got {value!r}")


class _GPRegConfig:
    def __init__(self):
        self.version = __version__
        self.backend = "numpy"
        self.dtype = float
        self.seed = 1234
        self.caches = {}
        # eigenpairs of a predictive covariance below this value are
        # discarded by posterior sampling
        self.eigen_tolerance = _float_from_env("GPREG_EIGEN_TOLERANCE", 1e-10)
        # negative predictive variances above -variance_tolerance are
        # clamped silently, below it a RuntimeWarning is emitted
        self.variance_tolerance = 1e-10
        # noise level used in place of sigma = 0 on a log scale
        self.sigma_floor = 1e-12
        # logger lives in config
        self.logger = logging.getLogger("gpreg")
        if not self.logger.handlers:
            h = logging.StreamHandler()
            h.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
            self.logger.addHandler(h)
        self.logger.setLevel(os.environ.get("GPREG_LOG_LEVEL", "INFO").upper())

    def __str__(self):
        return (
            f"GPRegConfig("
            f"version={self.version}, "
            f"backend={self.backend}, "
            f"dtype={self.dtype}, "
            f"seed={self.seed}, "
            f"eigen_tolerance={self.eigen_tolerance}, "
            f"variance_tolerance={self.variance_tolerance}, "
            f"caches={list(self.caches.keys())})"
        )

    def __repr__(self):
        return (
            f"<GPRegConfig "
            f"version={self.version!r}, "
            f"backend={self.backend!r}, "
            f"dtype={self.dtype!r}, "
            f"seed={self.seed!r}, "
            f"eigen_tolerance={self.eigen_tolerance!r}, "
            f"variance_tolerance={self.variance_tolerance!r}, "
            f"caches={list(self.caches.keys())}>"
        )

    def update(self, **kwargs):
        for k, v in kwargs.items():
            if not hasattr(self, k):
                raise AttributeError(f"Unknown configuration entry '{k}'")
            setattr(self, k, v)
        return self

    def clear_caches(self, name=None):
        if name is None:
            self.caches.clear()
        else:
            self.caches.pop(name, None)


_config = _GPRegConfig()


def get_config():
    return _config


def get_backend():
    return _config.backend


def set_eigen_tolerance(tol: float):
    if not tol >= 0.0:
        raise ValueError("eigen_tolerance must be nonnegative")
    _config.eigen_tolerance = float(tol)


def set_variance_tolerance(tol: float):
    if not tol >= 0.0:
        raise ValueError("variance_tolerance must be nonnegative")
    _config.variance_tolerance = float(tol)


def clear_caches(name=None):
    _config.clear_caches(name)


def get_logger():
    return _config.logger


def set_log_level(level):
    _config.logger.setLevel(level)
