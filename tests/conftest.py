import os
import sys
from glob import glob
from typing import List

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from translator import Environment, Parser  # noqa: E402
from translator.error.communicator import ErrorRaiser, WarningRaiser  # noqa: E402
from tests.test_util import data_file  # noqa: E402


def valid_files() -> List[str]:
    return sorted(glob(data_file("valid", "*.tl")))


def invalid_files() -> List[str]:
    return sorted(glob(data_file("invalid", "*.tl")))


@pytest.fixture(autouse=True)
def clear_diagnostics():
    # Errors and warnings are collected on the class, start each test empty
    ErrorRaiser.ERRORS.clear()
    WarningRaiser.WARNINGS.clear()
    yield
    ErrorRaiser.ERRORS.clear()
    WarningRaiser.WARNINGS.clear()


@pytest.fixture
def environment() -> Environment:
    return Environment()


@pytest.fixture
def parser() -> Parser:
    return Parser()


@pytest.fixture(params=valid_files(), ids=os.path.basename)
def valid_file(request) -> str:
    return request.param


@pytest.fixture(params=invalid_files(), ids=os.path.basename)
def invalid_file(request) -> str:
    return request.param
