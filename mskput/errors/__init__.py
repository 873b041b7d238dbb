"""
Expose public exceptions & warnings
"""

from mskput._config.config import OptionError  # noqa:F401


class InsufficientValuesError(ValueError):
    """
    Error raised by ``mskput`` when there are not enough values to fill
    every falsy position of the mask under the selected mode.

    Subclass of `ValueError`.

    Examples
    --------
    >>> mskput([1, 2, 3], [0, 0, 0], [10, 20], mode="non_strict")
    Traceback (most recent call last):
       ...
    InsufficientValuesError: invalid arguments. Insufficient values to satisfy mask array.
    """


class ValuesCountError(ValueError):
    """
    Error raised by ``mskput`` in a strict mode when the number of values is
    incompatible with the number of falsy mask values.

    Subclass of `ValueError`.
    """
