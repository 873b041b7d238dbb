from mskput._testing.asserters import (  # noqa:F401
    assert_attr_equal,
    assert_class_equal,
    assert_numpy_array_equal,
    assert_put_result,
    assert_sequence_equal,
    raise_assert_detail,
)

SIGNED_INT_DTYPES = ["int8", "int16", "int32", "int64"]
UNSIGNED_INT_DTYPES = ["uint8", "uint16", "uint32", "uint64"]
ALL_INT_DTYPES = UNSIGNED_INT_DTYPES + SIGNED_INT_DTYPES

FLOAT_DTYPES = ["float16", "float32", "float64"]
COMPLEX_DTYPES = ["complex64", "complex128"]
ALL_REAL_DTYPES = FLOAT_DTYPES + ALL_INT_DTYPES
BOOL_DTYPES = ["bool"]

ALL_NUMPY_DTYPES = ALL_REAL_DTYPES + COMPLEX_DTYPES + BOOL_DTYPES

PUT_MODES = ["repeat", "non_strict", "strict", "broadcast", "strict_broadcast"]

# objects which are not collections
NON_COLLECTIONS = ["5", 5, float("nan"), True, False, None, {}, lambda: None]
