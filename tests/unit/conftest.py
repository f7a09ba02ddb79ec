"""Shared fixtures for unit tests."""

import pytest
from artifactreq.loader import BasePluginLoader, SharedLibraryPluginHandle


class FakeFunction:
    """Stands in for a ctypes foreign function."""

    def __init__(self, value):
        self.value = value
        self.argtypes = None
        self.restype = None
        self.call_count = 0

    def __call__(self):
        self.call_count += 1
        return self.value


class FakeLibrary:
    """Stands in for a ctypes.CDLL exposing the given symbols."""

    def __init__(self, **symbols):
        for name, value in symbols.items():
            setattr(self, name, FakeFunction(value))


class FakeLibraryLoader(BasePluginLoader):
    """Loader returning shared library handles over a fake library."""

    def __init__(self, library):
        self.library = library

    @property
    def loader_name(self) -> str:
        return "fake"

    def open(self, path):
        return SharedLibraryPluginHandle(path, self.library)


@pytest.fixture
def fake_library():
    """Factory building a fake shared library from symbol=value pairs."""
    return FakeLibrary


@pytest.fixture
def fake_library_loader():
    """Factory building a loader over a fake shared library."""
    return FakeLibraryLoader
