"""
Masked assignment with broadcasting rules, an analogue to np.putmask
that writes where the mask is *falsy*.
"""
from typing import List

import numpy as np

from mskput._typing import Collection, MutableCollection, PutMode
from mskput.core.dtypes.cast import maybe_box_native
from mskput.errors import InsufficientValuesError, ValuesCountError

PUT_MODES = ("repeat", "non_strict", "strict", "broadcast", "strict_broadcast")


def falsy_positions(mask: Collection, length: int) -> List[int]:
    """
    Return, in ascending order, the positions ``0..length-1`` where `mask`
    is falsy.
    """
    if isinstance(mask, np.ndarray) and mask.dtype.kind in "biufc":
        return np.flatnonzero(np.logical_not(mask[:length])).tolist()
    return [i for i in range(length) if not mask[i]]


def value_indexer(nlocs: int, nvalues: int, mode: PutMode) -> List[int]:
    """
    Compute which element of `values` each put target receives.

    Parameters
    ----------
    nlocs : int
        Number of put targets (falsy mask positions).
    nvalues : int
        Number of available values.
    mode : {'repeat', 'non_strict', 'strict', 'broadcast', 'strict_broadcast'}

    Returns
    -------
    list of int
        The k-th entry is the index into `values` for the k-th put target.

    Raises
    ------
    InsufficientValuesError
        ``repeat``/``broadcast`` with no values, or ``non_strict`` with fewer
        values than targets.
    ValuesCountError
        ``strict`` with a count other than `nlocs`, or ``strict_broadcast``
        with a count other than 1 or `nlocs`.
    ValueError
        Unknown `mode`.
    """
    if mode not in PUT_MODES:
        raise ValueError(
            f"invalid argument. Mode must be one of {', '.join(PUT_MODES)}. "
            f"Value: `{mode}`."
        )
    if nlocs == 0 and mode not in ("strict", "strict_broadcast"):
        return []

    if mode in ("broadcast", "strict_broadcast") and nvalues == 1:
        return [0] * nlocs

    if mode == "strict" or mode == "strict_broadcast":
        if nvalues != nlocs:
            if mode == "strict":
                msg = (
                    "invalid arguments. Number of values does not equal the "
                    "number of falsy mask values."
                )
            else:
                msg = (
                    "invalid arguments. Unable to broadcast the values array "
                    "to the number of falsy mask values."
                )
            raise ValuesCountError(msg)
        return list(range(nlocs))

    if mode == "non_strict":
        if nvalues < nlocs:
            raise InsufficientValuesError(
                "invalid arguments. Insufficient values to satisfy mask array."
            )
        return list(range(nlocs))

    # repeat / broadcast
    if nvalues == 0:
        raise InsufficientValuesError(
            "invalid arguments. Insufficient values to satisfy mask array."
        )
    return [k % nvalues for k in range(nlocs)]


def putmask_falsy(
    x: MutableCollection, mask: Collection, values: Collection, mode: PutMode = "repeat"
) -> MutableCollection:
    """
    Replace elements of `x` where `mask` is falsy, in place.

    Every count check happens before the first assignment, so a failing call
    leaves `x` untouched.

    Parameters
    ----------
    x : mutable collection
        Updated in-place.
    mask : collection
        Same length as `x`. Falsy entries mark the positions to replace.
    values : collection
        Replacement values, drawn according to `mode`.
    mode : str, default 'repeat'
        * 'repeat' : cycle through `values`.
        * 'non_strict' : take values in order, ignore any extras.
        * 'strict' : require exactly one value per falsy mask entry.
        * 'broadcast' : a single value fills every target, otherwise repeat.
        * 'strict_broadcast' : a single value fills every target, otherwise
          as 'strict'.

    Returns
    -------
    x : the same object, updated

    See Also
    --------
    numpy.putmask
    """
    locs = falsy_positions(mask, len(x))
    indexer = value_indexer(len(locs), len(values), mode)
    if not locs:
        return x

    if isinstance(x, np.ndarray) and isinstance(values, np.ndarray):
        x[locs] = values[indexer]
        return x

    for i, j in zip(locs, indexer):
        value = values[j]
        if not isinstance(x, np.ndarray):
            value = maybe_box_native(value)
        x[i] = value
    return x
