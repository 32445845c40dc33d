"""Core building blocks: backend, codec, configuration, errors and RPC."""
from .config import CodecConfig
from .exceptions import (
    UrlzipException,
    InitializationError,
    NotInitializedError,
    DecodeError,
    CorruptDataError,
    RPCError,
)

__all__ = [
    'CodecConfig',
    'UrlzipException',
    'InitializationError',
    'NotInitializedError',
    'DecodeError',
    'CorruptDataError',
    'RPCError',
]
