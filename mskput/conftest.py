"""
Sections:
- Configuration / Settings
- Autouse fixtures
- Common arguments
- Dtypes
"""
import hypothesis
import numpy as np
import pytest

import mskput
import mskput._testing as tm

# ----------------------------------------------------------------
# Configuration / Settings
# ----------------------------------------------------------------
# pytest


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: mark a test as slow")


def pytest_addoption(parser):
    parser.addoption("--skip-slow", action="store_true", help="skip slow tests")
    parser.addoption("--only-slow", action="store_true", help="run only slow tests")


def pytest_runtest_setup(item):
    if "slow" in item.keywords and item.config.getoption("--skip-slow"):
        pytest.skip("skipping due to --skip-slow")

    if "slow" not in item.keywords and item.config.getoption("--only-slow"):
        pytest.skip("skipping due to --only-slow")


# Hypothesis
hypothesis.settings.register_profile(
    "ci",
    # Hypothesis timing checks are tuned for scalars by default, so we bump
    # them from 200ms to 500ms per test case as the global default.  If this
    # is too short for a specific test, (a) try to make it faster, and (b)
    # if it really is slow add `@settings(deadline=...)` with a working value,
    # or `deadline=None` to entirely disable timeouts for that test.
    deadline=500,
    suppress_health_check=(hypothesis.HealthCheck.too_slow,),
)
hypothesis.settings.load_profile("ci")


# ----------------------------------------------------------------
# Autouse fixtures
# ----------------------------------------------------------------
@pytest.fixture(autouse=True)
def configure_tests():
    """
    Configure settings for all tests and test modules.
    """
    with mskput.option_context("put.mode", "repeat"):
        yield


@pytest.fixture(autouse=True)
def add_imports(doctest_namespace):
    """
    Make `np` and `mskput` names available for doctests.
    """
    doctest_namespace["np"] = np
    doctest_namespace["mskput"] = mskput.mskput


# ----------------------------------------------------------------
# Common arguments
# ----------------------------------------------------------------
@pytest.fixture(params=tm.PUT_MODES)
def put_mode(request):
    """
    Fixture for every put mode.
    """
    return request.param


@pytest.fixture(params=["repeat", "broadcast"])
def cycling_mode(request):
    """
    Fixture for the put modes which cycle through a short values collection.
    """
    return request.param


@pytest.fixture(params=tm.NON_COLLECTIONS, ids=repr)
def non_collection(request):
    """
    Fixture for objects which are not collections.
    """
    return request.param


# ----------------------------------------------------------------
# Dtypes
# ----------------------------------------------------------------
@pytest.fixture(params=tm.FLOAT_DTYPES)
def float_dtype(request):
    """
    Parameterized fixture for float dtypes.

    * 'float16'
    * 'float32'
    * 'float64'
    """
    return request.param


@pytest.fixture(params=tm.COMPLEX_DTYPES)
def complex_dtype(request):
    """
    Parameterized fixture for complex dtypes.

    * 'complex64'
    * 'complex128'
    """
    return request.param


@pytest.fixture(params=tm.ALL_INT_DTYPES)
def any_int_dtype(request):
    """
    Parameterized fixture for any integer dtype.

    * 'uint8'
    * 'uint16'
    * 'uint32'
    * 'uint64'
    * 'int8'
    * 'int16'
    * 'int32'
    * 'int64'
    """
    return request.param


@pytest.fixture(params=tm.ALL_REAL_DTYPES)
def any_real_dtype(request):
    """
    Parameterized fixture for any (purely) real numeric dtype.
    """
    return request.param


@pytest.fixture(params=tm.ALL_NUMPY_DTYPES)
def any_numpy_dtype(request):
    """
    Parameterized fixture for every numpy dtype with a DataType counterpart.
    """
    return request.param
