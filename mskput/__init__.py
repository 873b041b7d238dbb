__docformat__ = "restructuredtext"

# Let users know if they're missing any of our hard dependencies
hard_dependencies = ("numpy",)
missing_dependencies = []

for dependency in hard_dependencies:
    try:
        __import__(dependency)
    except ImportError as e:
        missing_dependencies.append(f"{dependency}: {e}")

if missing_dependencies:
    raise ImportError(
        "Unable to import required dependencies:\n" + "\n".join(missing_dependencies)
    )
del hard_dependencies, dependency, missing_dependencies

from mskput._config import (
    describe_option,
    get_option,
    option_context,
    reset_option,
    set_option,
)

# let init-time option registration happen
import mskput.core.config_init  # noqa:F401 isort:skip

from mskput.core.algorithms import mskput
from mskput.core.array_algos.putmask import PUT_MODES
from mskput.core.dtypes.cast import is_mostly_safe_cast
from mskput.core.dtypes.common import dtype_of
from mskput.core.dtypes.dtypes import DataType
from mskput.core.dtypes.inference import is_collection
from mskput import errors

__version__ = "0.1.0"

__all__ = [
    "DataType",
    "PUT_MODES",
    "describe_option",
    "dtype_of",
    "errors",
    "get_option",
    "is_collection",
    "is_mostly_safe_cast",
    "mskput",
    "option_context",
    "reset_option",
    "set_option",
]

# module level doc-string
__doc__ = """
mskput - masked in-place assignment for Python collections
==========================================================

**mskput** overwrites the elements of a list, NumPy array or ``array.array``
wherever a companion mask is falsy, drawing replacement values according to
a broadcasting mode.

Main Features
-------------
  - Five broadcasting modes: 'repeat', 'non_strict', 'strict', 'broadcast'
    and 'strict_broadcast'.
  - Data-type aware: values must be safely castable to the destination
    data type; real values are promoted when assigned into complex arrays.
  - All-or-nothing: every error is raised before the first write.
  - Package-wide defaults through ``get_option``/``set_option``.
"""
