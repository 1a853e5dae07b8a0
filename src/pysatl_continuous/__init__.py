"""
PySATL Continuous
=================

Closed-form probability density and cumulative distribution functions of
continuous distributions, with domain validation of every parameter and
evaluation point.
"""

__author__ = "PySATL project"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from importlib.metadata import version

from .constraints import *
from .constraints import __all__ as _constraints_all
from .continuous import *
from .continuous import __all__ as _continuous_all
from .exceptions import *
from .exceptions import __all__ as _exceptions_all
from .special import *
from .special import __all__ as _special_all
from .support import *
from .support import __all__ as _support_all
from .types import *
from .types import __all__ as _types_all

__version__ = version("pysatl-continuous")
__all__ = [
    "__version__",
    *_continuous_all,
    *_special_all,
    *_exceptions_all,
    *_constraints_all,
    *_support_all,
    *_types_all,
]

del _constraints_all
del _continuous_all
del _exceptions_all
del _special_all
del _support_all
del _types_all
