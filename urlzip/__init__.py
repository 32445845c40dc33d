"""
urlzip - Compact, URL-safe text compression.

Usage:
    >>> from urlzip import Compressor
    >>>
    >>> token = await Compressor.compress_async("Hello, World!")
    >>> await Compressor.decompress_async(token)
    'Hello, World!'
"""
import logging
from .compressor import StrCompressor, Compressor, get_compressor

# Backend
from .core.backend import BackendLoader, LoaderState, Backend, ZstdBackend

# Configuration
from .core.config import CodecConfig
from .core.rpc import RPCClient, RPCConfig, TimeoutConfig

# Errors
from .core.exceptions import (
    UrlzipException,
    InitializationError,
    NotInitializedError,
    DecodeError,
    CorruptDataError,
    RPCError,
)

# Collaborators
from .services import SocialService, PaginationParams

__version__ = '1.0.0'


def setup_logging(level=logging.INFO):
    """
    Configure logging for urlzip modules.

    This ensures that all urlzip loggers are properly configured
    to show log messages at the specified level.

    Args:
        level: Logging level (default: logging.INFO)
    """
    loggers = [
        'urlzip',
        'urlzip.backend',
        'urlzip.backend.zstd',
        'urlzip.rpc',
    ]

    for logger_name in loggers:
        logger = logging.getLogger(logger_name)
        logger.setLevel(level)
        logger.propagate = True


__all__ = [
    'StrCompressor',
    'Compressor',
    'get_compressor',
    'BackendLoader',
    'LoaderState',
    'Backend',
    'ZstdBackend',
    'CodecConfig',
    'RPCClient',
    'RPCConfig',
    'TimeoutConfig',
    'UrlzipException',
    'InitializationError',
    'NotInitializedError',
    'DecodeError',
    'CorruptDataError',
    'RPCError',
    'SocialService',
    'PaginationParams',
    'setup_logging',
]
