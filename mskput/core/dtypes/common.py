"""
Common type operations.
"""
import array
from typing import Callable, Optional

import numpy as np

from mskput.core.dtypes.dtypes import DataType


def dtype_of(obj) -> Optional[DataType]:
    """
    Return the data-type tag of a collection's elements.

    Parameters
    ----------
    obj : collection
        The object whose element data type we want to know.

    Returns
    -------
    DataType or None
        ``None`` when `obj` carries no element-type metadata (a list, a
        tuple, ...) or when its metadata has no ``DataType`` counterpart.

    Examples
    --------
    >>> dtype_of(np.array([1, 2], dtype="int32"))
    <DataType.INT32: 'int32'>
    >>> dtype_of(array.array("d", [1.0]))
    <DataType.FLOAT64: 'float64'>
    >>> dtype_of([1, 2]) is None
    True
    """
    if isinstance(obj, array.array):
        if obj.typecode in ("u", "w"):
            # unicode characters
            return None
        return DataType.from_numpy_dtype(obj.typecode)
    dtype = getattr(obj, "dtype", None)
    if dtype is None:
        return None
    if isinstance(dtype, DataType):
        return dtype
    return DataType.from_numpy_dtype(dtype)


def get_data_type(arr_or_dtype) -> DataType:
    """
    Get the DataType associated with a collection or dtype-like object.

    Parameters
    ----------
    arr_or_dtype : DataType, str, np.dtype, numpy scalar type or collection

    Returns
    -------
    DataType

    Raises
    ------
    TypeError : The passed in object is None or not understood.
    """
    if arr_or_dtype is None:
        raise TypeError("Cannot deduce data type from null object")
    elif isinstance(arr_or_dtype, DataType):
        return arr_or_dtype
    elif isinstance(arr_or_dtype, str):
        return DataType.construct_from_string(arr_or_dtype)
    elif isinstance(arr_or_dtype, (np.dtype, type)):
        result = DataType.from_numpy_dtype(arr_or_dtype)
    else:
        result = dtype_of(arr_or_dtype)
    if result is None:
        raise TypeError(f"data type '{arr_or_dtype}' not understood")
    return result


def _is_dtype(arr_or_dtype, condition: Callable[[DataType], bool]) -> bool:
    """
    Return a boolean if the condition is satisfied for the arr_or_dtype.
    """
    if arr_or_dtype is None:
        return False
    try:
        dtype = get_data_type(arr_or_dtype)
    except TypeError:
        return False
    return condition(dtype)


def is_generic_dtype(arr_or_dtype) -> bool:
    return _is_dtype(arr_or_dtype, lambda dtype: dtype is DataType.GENERIC)


def is_bool_dtype(arr_or_dtype) -> bool:
    return _is_dtype(arr_or_dtype, lambda dtype: dtype.kind == "b")


def is_signed_integer_dtype(arr_or_dtype) -> bool:
    return _is_dtype(arr_or_dtype, lambda dtype: dtype.kind == "i")


def is_unsigned_integer_dtype(arr_or_dtype) -> bool:
    return _is_dtype(arr_or_dtype, lambda dtype: dtype.kind == "u")


def is_integer_dtype(arr_or_dtype) -> bool:
    """
    Check whether the provided array or dtype is of a fixed-width integer
    data type.

    Examples
    --------
    >>> is_integer_dtype("uint8")
    True
    >>> is_integer_dtype("float32")
    False
    >>> is_integer_dtype([1, 2])
    False
    """
    return _is_dtype(arr_or_dtype, lambda dtype: dtype.kind in "iu")


def is_float_dtype(arr_or_dtype) -> bool:
    """
    Check whether the provided array or dtype is of a real floating-point
    data type.
    """
    return _is_dtype(arr_or_dtype, lambda dtype: dtype.kind == "f")


def is_complex_dtype(arr_or_dtype) -> bool:
    """
    Check whether the provided array or dtype is of a complex floating-point
    data type.

    Examples
    --------
    >>> is_complex_dtype("complex64")
    True
    >>> is_complex_dtype(np.array([1 + 1j, 5]))
    True
    >>> is_complex_dtype("float64")
    False
    """
    return _is_dtype(arr_or_dtype, lambda dtype: dtype.kind == "c")


def is_floating_dtype(arr_or_dtype) -> bool:
    """
    Check whether the provided array or dtype is of a floating-point data
    type, real or complex.
    """
    return _is_dtype(arr_or_dtype, lambda dtype: dtype.kind in "fc")


def is_real_dtype(arr_or_dtype) -> bool:
    """
    Check whether the provided array or dtype is of a real-valued numeric
    data type (integer or real floating point; booleans are excluded).

    Examples
    --------
    >>> is_real_dtype("int16")
    True
    >>> is_real_dtype("complex128")
    False
    >>> is_real_dtype("bool")
    False
    """
    return _is_dtype(arr_or_dtype, lambda dtype: dtype.kind in "iuf")


def is_numeric_dtype(arr_or_dtype) -> bool:
    return _is_dtype(arr_or_dtype, lambda dtype: dtype.kind in "iufc")
