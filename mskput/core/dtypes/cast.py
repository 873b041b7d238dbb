"""
Routines for casting.
"""
from itertools import product
from typing import Dict, Tuple

import numpy as np

from mskput._typing import Collection, Dtype, Scalar
from mskput.core.dtypes.common import get_data_type, is_floating_dtype, is_real_dtype
from mskput.core.dtypes.dtypes import ALL_DTYPES, NUMERIC_DTYPES, DataType

CastTable = Dict[Tuple[DataType, DataType], bool]


def _build_cast_table(casting: str) -> CastTable:
    """
    Tabulate whether each source data type may be cast to each destination
    data type under the given NumPy casting rule.

    Rules for the non-numeric tags:

    * everything casts into ``generic``;
    * ``generic`` only casts into ``generic``;
    * ``bool`` only casts into ``bool`` (and ``generic``), and only ``bool``
      casts into ``bool``.
    """
    table: CastTable = {}
    for src, dst in product(ALL_DTYPES, ALL_DTYPES):
        if src is dst or dst is DataType.GENERIC:
            allowed = True
        elif src in NUMERIC_DTYPES and dst in NUMERIC_DTYPES:
            allowed = bool(
                np.can_cast(src.numpy_dtype, dst.numpy_dtype, casting=casting)
            )
        else:
            allowed = False
        table[(src, dst)] = allowed
    return table


_SAFE_CASTS = _build_cast_table("safe")
_SAME_KIND_CASTS = _build_cast_table("same_kind")


def is_safe_cast(from_dtype: Dtype, to_dtype: Dtype) -> bool:
    """
    Return whether casting `from_dtype` to `to_dtype` cannot lose precision
    or range.

    Parameters
    ----------
    from_dtype, to_dtype : DataType, str or np.dtype

    Returns
    -------
    bool

    Examples
    --------
    >>> is_safe_cast("int16", "float32")
    True
    >>> is_safe_cast("float64", "float32")
    False
    """
    key = (get_data_type(from_dtype), get_data_type(to_dtype))
    return _SAFE_CASTS[key]


def is_same_kind_cast(from_dtype: Dtype, to_dtype: Dtype) -> bool:
    """
    Return whether casting `from_dtype` to `to_dtype` is either safe or a
    cast within the same kind (e.g. float64 to float32).
    """
    key = (get_data_type(from_dtype), get_data_type(to_dtype))
    return _SAME_KIND_CASTS[key]


def is_mostly_safe_cast(from_dtype: Dtype, to_dtype: Dtype) -> bool:
    """
    Return whether values of `from_dtype` may be assigned into a collection
    of `to_dtype`.

    Safe casts are always allowed. Same-kind casts (i.e. downcasts) are only
    allowed when the destination is a floating-point data type, real or
    complex.

    Examples
    --------
    >>> is_mostly_safe_cast("float64", "float32")
    True
    >>> is_mostly_safe_cast("float64", "complex64")
    True
    >>> is_mostly_safe_cast("int64", "int8")
    False
    >>> is_mostly_safe_cast("float64", "uint8")
    False
    """
    if is_floating_dtype(to_dtype):
        return is_same_kind_cast(from_dtype, to_dtype)
    return is_safe_cast(from_dtype, to_dtype)


def convert_to_complex(values: Collection, dtype: Dtype) -> np.ndarray:
    """
    Convert a real-valued collection into a new complex array.

    Each real value becomes the real component of the corresponding
    element; imaginary components are zero.

    Parameters
    ----------
    values : collection of real numbers
    dtype : complex DataType, str or np.dtype
        Precision of the output.

    Returns
    -------
    np.ndarray

    Raises
    ------
    TypeError
        If `dtype` is not complex or `values` is not real-valued.
    """
    dtype = get_data_type(dtype)
    if dtype.kind != "c":
        raise TypeError(f"cannot convert to non-complex data type '{dtype}'")
    arr = np.asarray(values)
    if not is_real_dtype(arr):
        raise TypeError(
            f"expected a real-valued collection, got data type '{arr.dtype}'"
        )
    return arr.astype(dtype.numpy_dtype)


def maybe_box_native(value: Scalar) -> Scalar:
    """
    If passed a NumPy scalar, cast it to the equivalent native Python scalar.

    Parameters
    ----------
    value : scalar

    Returns
    -------
    scalar
    """
    if isinstance(value, np.generic):
        return value.item()
    return value
