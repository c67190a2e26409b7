# gpreg/misc/__init__.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Miscellaneous utility modules for gpreg.

`plotutils` depends on matplotlib and is imported on demand
(``import gpreg.misc.plotutils``).
"""

from . import designs
