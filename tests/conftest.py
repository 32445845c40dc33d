"""Pytest fixtures for urlzip tests."""
import pytest

from urlzip.compressor import StrCompressor
from urlzip.core.backend import BackendLoader, load_zstd_backend
from urlzip.core.config import CodecConfig


class CountingFactory:
    """Backend factory that records how often it was called."""

    def __init__(self, backend=None, error=None):
        self.backend = backend
        self.error = error
        self.calls = 0

    def __call__(self):
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.backend or load_zstd_backend()


@pytest.fixture
def compressor():
    """Returns a compressor with a ready backend."""
    instance = StrCompressor()
    instance.init_sync()
    return instance


@pytest.fixture
def cold_compressor():
    """Returns a compressor whose backend has not been loaded."""
    return StrCompressor()


@pytest.fixture
def counting_factory():
    return CountingFactory()


@pytest.fixture
def loader(counting_factory):
    """Returns a loader over the counting factory, initialized inline."""
    return BackendLoader(factory=counting_factory, config=CodecConfig.inline())


@pytest.fixture
def make_factory():
    """Returns the CountingFactory class for tests that need their own."""
    return CountingFactory
