import sys
import os
from tempfile import TemporaryDirectory
import pytest
# Ensure the project root and the shared test helpers are importable
TESTS_DIR = os.path.abspath(os.path.dirname(__file__))
sys.path.insert(0, os.path.abspath(os.path.join(TESTS_DIR, '..')))
sys.path.insert(0, TESTS_DIR)

@pytest.fixture
def temp_dir():
    """Create a temporary directory for test outputs."""
    with TemporaryDirectory() as dir_path:
        yield dir_path

@pytest.fixture
def samples_dir():
    return os.path.join(TESTS_DIR, "samples")

@pytest.fixture
def calculator_wsdl_path(samples_dir):
    return os.path.join(samples_dir, "calculator.wsdl")
