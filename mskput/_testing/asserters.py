import array
from typing import Union

import numpy as np

from mskput.core.dtypes.common import dtype_of


def assert_class_equal(left, right, exact: bool = True, obj="Input"):
    """
    Checks classes are equal.
    """
    __tracebackhide__ = True

    if exact and type(left) != type(right):
        msg = f"{obj} classes are different"
        raise_assert_detail(obj, msg, type(left).__name__, type(right).__name__)


def assert_attr_equal(attr: str, left, right, obj: str = "Attributes"):
    """
    Check attributes are equal. Both objects must have attribute.

    Parameters
    ----------
    attr : str
        Attribute name being compared.
    left : object
    right : object
    obj : str, default 'Attributes'
        Specify object name being compared, internally used to show appropriate
        assertion message
    """
    __tracebackhide__ = True

    left_attr = getattr(left, attr)
    right_attr = getattr(right, attr)

    if left_attr is right_attr:
        return True

    if left_attr != right_attr:
        msg = f'Attribute "{attr}" are different'
        raise_assert_detail(obj, msg, left_attr, right_attr)


def raise_assert_detail(obj, message, left, right, diff=None):
    __tracebackhide__ = True

    msg = f"""{obj} are different

{message}"""

    msg += f"""
[left]:  {left!r}
[right]: {right!r}"""

    if diff is not None:
        msg += f"\n[diff]: {diff}"

    raise AssertionError(msg)


def assert_numpy_array_equal(
    left,
    right,
    check_dtype=True,
    err_msg=None,
    check_same=None,
    obj="numpy array",
):
    """
    Check that 'np.ndarray' is equivalent.

    Parameters
    ----------
    left, right : numpy.ndarray
        The two arrays to be compared.
    check_dtype : bool, default True
        Check dtype if both a and b are np.ndarray.
    err_msg : str, default None
        If provided, used as assertion message.
    check_same : None|'same'|'copy', default None
        Ensure left and right refer/do not refer to the same memory area.
    obj : str, default 'numpy array'
        Specify object name being compared, internally used to show appropriate
        assertion message.
    """
    __tracebackhide__ = True

    # instance validation
    # Show a detailed error message when classes are different
    assert_class_equal(left, right, obj=obj)
    if not isinstance(left, np.ndarray):
        raise AssertionError(f"{obj} Expected type {np.ndarray}, found {type(left)}")

    if check_same == "same":
        if left is not right:
            raise AssertionError(f"{repr(left)} is not {repr(right)}")
    elif check_same == "copy":
        if left is right:
            raise AssertionError(f"{repr(left)} is {repr(right)}")

    if not np.array_equal(left, right, equal_nan=left.dtype.kind in "fc"):
        if err_msg is not None:
            raise AssertionError(err_msg)
        if left.shape != right.shape:
            raise_assert_detail(
                obj, f"{obj} shapes are different", left.shape, right.shape
            )
        diff = np.count_nonzero(left != right) * 100.0 / left.size
        msg = f"{obj} values are different ({np.round(diff, 5)} %)"
        raise_assert_detail(obj, msg, left, right)

    if check_dtype:
        assert_attr_equal("dtype", left, right, obj=obj)


def assert_sequence_equal(
    left: Union[list, tuple, array.array, np.ndarray],
    right: Union[list, tuple, array.array, np.ndarray],
    check_dtype=True,
    obj="sequence",
):
    """
    Check that two collections have the same class, data type and elements.

    Dispatches to ``assert_numpy_array_equal`` for ndarrays.
    """
    __tracebackhide__ = True

    if isinstance(left, np.ndarray):
        assert_numpy_array_equal(left, right, check_dtype=check_dtype, obj=obj)
        return

    assert_class_equal(left, right, obj=obj)
    if check_dtype and dtype_of(left) != dtype_of(right):
        raise_assert_detail(
            obj, f"{obj} data types are different", dtype_of(left), dtype_of(right)
        )
    if len(left) != len(right):
        raise_assert_detail(obj, f"{obj} length are different", len(left), len(right))
    for i, (lval, rval) in enumerate(zip(left, right)):
        if lval != rval or type(lval) != type(rval):
            msg = f"{obj} values are different at position {i}"
            raise_assert_detail(obj, msg, left, right)


def assert_put_result(result, x, expected, check_dtype=True):
    """
    Check that a put returned its input object, and that the input now
    equals `expected`.
    """
    __tracebackhide__ = True

    if result is not x:
        raise AssertionError(
            f"put returned a new {type(result).__name__} instead of its input"
        )
    assert_sequence_equal(result, expected, check_dtype=check_dtype, obj="result")
