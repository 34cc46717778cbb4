# tests/conftest.py
import importlib

import pytest


@pytest.fixture(scope="module")
def main_module():
    return importlib.import_module("main")
