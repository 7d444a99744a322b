import importlib
import pytest

@pytest.fixture(scope="session")
def codec():
    return importlib.import_module("hex_codec.codec")

@pytest.fixture(scope="session")
def dump():
    return importlib.import_module("hex_codec.dump")
