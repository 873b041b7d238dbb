"""
Define the closed set of element data types understood by mskput.
"""
from enum import Enum
from typing import Optional

import numpy as np


class DataType(str, Enum):
    """
    Data-type tag of a collection's elements.

    ``GENERIC`` stands for containers without element-type metadata
    (lists, tuples, object arrays). Every other member corresponds to a
    fixed-width NumPy dtype of the same name.
    """

    GENERIC = "generic"
    BOOL = "bool"
    INT8 = "int8"
    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"
    UINT8 = "uint8"
    UINT16 = "uint16"
    UINT32 = "uint32"
    UINT64 = "uint64"
    FLOAT16 = "float16"
    FLOAT32 = "float32"
    FLOAT64 = "float64"
    COMPLEX64 = "complex64"
    COMPLEX128 = "complex128"

    def __str__(self) -> str:
        return self.value

    @property
    def numpy_dtype(self) -> Optional[np.dtype]:
        """
        The equivalent NumPy dtype, ``None`` for ``GENERIC``.
        """
        if self is DataType.GENERIC:
            return None
        return np.dtype(self.value)

    @property
    def kind(self) -> str:
        """
        A character code identifying the general kind of data.

        Follows the NumPy convention ('b', 'i', 'u', 'f', 'c') and uses
        'O' for ``GENERIC``.
        """
        if self is DataType.GENERIC:
            return "O"
        return self.numpy_dtype.kind

    @classmethod
    def construct_from_string(cls, string: str) -> "DataType":
        """
        Construct a DataType from its name.

        Raises
        ------
        TypeError
            If `string` does not name a known data type.
        """
        if not isinstance(string, str):
            raise TypeError(
                f"'construct_from_string' expects a string, got {type(string)}"
            )
        try:
            return cls(string)
        except ValueError as err:
            raise TypeError(f"Cannot construct a 'DataType' from '{string}'") from err

    @classmethod
    def from_numpy_dtype(cls, dtype) -> Optional["DataType"]:
        """
        Map a NumPy dtype (or anything ``np.dtype`` accepts) to a DataType.

        Returns ``GENERIC`` for object dtype and ``None`` for dtypes with no
        counterpart (strings, datetimes, structured dtypes, ...).
        """
        if dtype is None:
            # np.dtype(None) is float64
            return None
        try:
            dtype = np.dtype(dtype)
        except (TypeError, ValueError):
            return None
        if dtype == np.dtype(object):
            return cls.GENERIC
        try:
            return cls(dtype.name)
        except ValueError:
            return None


# canonical orderings, used for building lookup tables and in tests
SIGNED_INT_DTYPES = [DataType.INT8, DataType.INT16, DataType.INT32, DataType.INT64]
UNSIGNED_INT_DTYPES = [
    DataType.UINT8,
    DataType.UINT16,
    DataType.UINT32,
    DataType.UINT64,
]
FLOAT_DTYPES = [DataType.FLOAT16, DataType.FLOAT32, DataType.FLOAT64]
COMPLEX_DTYPES = [DataType.COMPLEX64, DataType.COMPLEX128]
NUMERIC_DTYPES = SIGNED_INT_DTYPES + UNSIGNED_INT_DTYPES + FLOAT_DTYPES + COMPLEX_DTYPES
ALL_DTYPES = [DataType.GENERIC, DataType.BOOL] + NUMERIC_DTYPES
