"""Byte codec and URL-safe encoding."""
from .byte_codec import ByteCodec
from .encoding import Base64Encoder, URL_SAFE_PATTERN

__all__ = [
    'ByteCodec',
    'Base64Encoder',
    'URL_SAFE_PATTERN',
]
