# gpreg/__init__.py

from . import config
from . import num
from . import core
from . import kernel
from . import misc
from .core import Model
from .config import __version__

__all__ = ["num", "kernel", "Model", "__version__"]
