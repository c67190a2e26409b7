# gpreg/num/__init__.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""Numerical backend facade for gpreg (``import gpreg.num as gnp``)."""

from gpreg.config import get_backend

from . import shared as _shared

_gpreg_backend_ = get_backend()

if _gpreg_backend_ == "numpy":
    from . import numpy_backend as _backend
else:
    raise RuntimeError(f"Unsupported numerical backend '{_gpreg_backend_}'.")

# Re-export backend API.
for _name in dir(_backend):
    if _name.startswith("__"):
        continue
    globals()[_name] = getattr(_backend, _name)

# Re-export backend-independent helpers from shared.py.
get_dtype = _shared.get_dtype
compute_gammaln = _shared.compute_gammaln
derivative_finite_diff = _shared.derivative_finite_diff
