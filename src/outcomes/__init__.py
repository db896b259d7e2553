"""outcomes -- Option, Result, Failure, Pair and ActionState value types."""

from outcomes.core import *  # noqa: F401,F403
from outcomes.core import __all__ as _core_all

__version__ = "0.1.0"

__all__ = [*_core_all, "__version__"]
