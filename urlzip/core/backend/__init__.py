"""Compression backend: capability protocol, zstd adapter and loader."""
from .protocols import Backend, BackendFactory
from .zstd_backend import ZstdBackend, load_zstd_backend, ZSTD_LEVEL, MAX_CONTENT_SIZE
from .loader import BackendLoader, LoaderState

__all__ = [
    'Backend',
    'BackendFactory',
    'ZstdBackend',
    'load_zstd_backend',
    'ZSTD_LEVEL',
    'MAX_CONTENT_SIZE',
    'BackendLoader',
    'LoaderState',
]
