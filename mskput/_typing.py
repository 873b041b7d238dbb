from typing import (
    TYPE_CHECKING,
    Any,
    MutableSequence,
    Sequence,
    Union,
)

import numpy as np

if TYPE_CHECKING:
    from mskput.core.dtypes.dtypes import DataType  # noqa: F401

# array-like

# anything that can be read by position: lists, tuples, ndarrays, array.array
Collection = Union[Sequence[Any], np.ndarray]
MutableCollection = Union[MutableSequence[Any], np.ndarray]

# scalars

PythonScalar = Union[int, float, complex, bool]
Scalar = Union[PythonScalar, np.generic]

# dtypes
Dtype = Union[str, np.dtype, "DataType"]

# put modes, see mskput.core.array_algos.putmask
PutMode = str
