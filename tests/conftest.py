import json
from os.path import dirname, abspath, join

import pytest
from polyrecover.names import *

# Initialize the list of backends with those that are always installed
backends = [GAUSS, SYMPY]

# Add FLINT to the list if the python-flint package is installed
try:
    import flint
    backends.append(FLINT)
except ImportError:
    pass  # FLINT is not installed

DATA_DIR = join(dirname(abspath(__file__)), "data")


@pytest.fixture(params=backends, scope="session")
def curr_backend(request: pytest.FixtureRequest) -> str:
    """Provide session-level fixture for parametrized backend names."""
    return request.param


@pytest.fixture(scope="session")
def testcase2_path() -> str:
    """Path of the bundled record with n=10, k=7."""
    return join(DATA_DIR, "testcase2.json")


@pytest.fixture
def testcase2(testcase2_path) -> dict:
    with open(testcase2_path, 'r') as fs:
        return json.load(fs)


@pytest.fixture
def record_square():
    """Record for y = x^2 + 3 with mixed bases and unused extra labels."""
    return {
        KEYS: {N: 6, K: 3},
        "1": {BASE: "10", VALUE: "4"},
        "2": {BASE: "2", VALUE: "111"},
        "3": {BASE: "16", VALUE: "C"},
        "4": {BASE: "2", VALUE: "not a numeral"},
        "6": {BASE: "4", VALUE: "213"},
    }
