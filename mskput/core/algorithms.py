"""
Generic data algorithms operating on one-dimensional collections.
"""
from typing import Any, Mapping, Optional

from mskput._config import get_option
from mskput._typing import Collection, MutableCollection
from mskput.core.array_algos.putmask import PUT_MODES, putmask_falsy
from mskput.core.dtypes.cast import convert_to_complex, is_mostly_safe_cast
from mskput.core.dtypes.common import dtype_of, is_complex_dtype, is_real_dtype
from mskput.core.dtypes.dtypes import DataType
from mskput.core.dtypes.inference import is_mutable_collection
from mskput.util._validators import validate_collection, validate_put_options


def mskput(
    x: MutableCollection,
    mask: Collection,
    values: Collection,
    options: Optional[Mapping[str, Any]] = None,
    **kwargs,
) -> MutableCollection:
    """
    Replace elements of a collection with provided values according to a
    mask, in place.

    Positions where `mask` is falsy are overwritten; positions where it is
    truthy are left alone.

    Parameters
    ----------
    x : mutable collection
        Input collection, updated in place.
    mask : collection
        Same length as `x`.
    values : collection
        Values to set. Their data type must be safely castable to the data
        type of `x`; same-kind downcasts are accepted only when `x` is
        floating point.
    options : mapping, optional
        Function options. Only 'mode' is recognized.
    **kwargs
        Options given as keywords, taking precedence over `options`.

        mode : {'repeat', 'non_strict', 'strict', 'broadcast', 'strict_broadcast'}
            Behavior when the number of values does not equal the number of
            falsy mask values. Defaults to the ``put.mode`` option
            ('repeat').

    Returns
    -------
    x : the input collection

    Raises
    ------
    TypeError
        If `x`, `mask` or `values` is not a collection, `x` does not support
        item assignment, options are malformed, or `values` cannot be safely
        cast to the data type of `x`.
    ValueError
        If `mask` and `x` differ in length, or either is not one-dimensional.
    InsufficientValuesError
        If there are not enough values for the selected mode.
    ValuesCountError
        If the number of values is incompatible with a strict mode.

    See Also
    --------
    numpy.putmask

    Examples
    --------
    >>> x = [1, 2, 3, 4]
    >>> out = mskput(x, [1, 0, 0, 1], [20, 30])
    >>> out
    [1, 20, 30, 4]
    >>> out is x
    True

    A single value is repeated:

    >>> mskput([1, 2, 3, 4], [1, 0, 0, 1], [30])
    [1, 30, 30, 4]

    As are shorter value lists, cyclically:

    >>> mskput([1, 2, 3, 4], [0, 0, 1, 0], [20, 30])
    [20, 30, 3, 20]
    """
    validate_collection(x, 0)
    validate_collection(mask, 1)
    validate_collection(values, 2)
    if not is_mutable_collection(x):
        raise TypeError(
            f"invalid argument. First argument must support item assignment. "
            f"Value: `{x!r}`."
        )
    opts = validate_put_options(
        options, kwargs, PUT_MODES, default_mode=get_option("put.mode")
    )

    if getattr(x, "ndim", 1) != 1:
        raise ValueError(
            f"invalid argument. First argument must be one-dimensional. "
            f"Number of dimensions: {x.ndim}."
        )
    if getattr(mask, "ndim", 1) != 1:
        raise ValueError(
            f"invalid argument. Second argument must be one-dimensional. "
            f"Number of dimensions: {mask.ndim}."
        )
    if len(mask) != len(x):
        raise ValueError(
            f"invalid arguments. Mask array must have the same length as the "
            f"input array. Lengths: [{len(x)}, {len(mask)}]."
        )

    xdt = dtype_of(x) or DataType.GENERIC
    vdt = dtype_of(values) or DataType.GENERIC

    # safe casts are always allowed, same kind casts (i.e., downcasts)
    # only when the input data type is floating-point
    if not is_mostly_safe_cast(vdt, xdt):
        raise TypeError(
            f"invalid argument. Third argument cannot be safely cast to the "
            f"input array data type. Data types: [{vdt}, {xdt}]."
        )
    # real values assigned into a complex array have zero imaginary parts
    if is_complex_dtype(xdt) and is_real_dtype(vdt):
        values = convert_to_complex(values, xdt)

    return putmask_falsy(x, mask, values, opts["mode"])
