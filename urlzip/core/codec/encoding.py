"""Encoding utilities."""
import base64
import binascii
import re

from ..exceptions import DecodeError

URL_SAFE_PATTERN = re.compile(r'[A-Za-z0-9\-_]*')


class Base64Encoder:
    """Base64 URL-safe encoder/decoder without padding."""

    @staticmethod
    def to_url_safe(data: str) -> str:
        """Maps a standard Base64 string to the URL-safe alphabet and strips padding."""
        return data.replace('+', '-').replace('/', '_').rstrip('=')

    @staticmethod
    def from_url_safe(data: str) -> str:
        """Maps a URL-safe string back to standard Base64 and restores padding."""
        if not URL_SAFE_PATTERN.fullmatch(data):
            raise DecodeError("Input contains characters outside the URL-safe alphabet")

        remainder = len(data) % 4
        if remainder == 1:
            raise DecodeError(f"Invalid Base64 length: {len(data)}")

        data = data.replace('-', '+').replace('_', '/')
        if remainder:
            data += '=' * (4 - remainder)
        return data

    @staticmethod
    def encode(data: bytes) -> str:
        """Encodes bytes to Base64 URL-safe without padding."""
        return Base64Encoder.to_url_safe(base64.b64encode(data).decode('ascii'))

    @staticmethod
    def decode(data: str) -> bytes:
        """Decodes unpadded Base64 URL-safe. Unused trailing bits must be zero."""
        standard = Base64Encoder.from_url_safe(data)
        try:
            decoded = base64.b64decode(standard, validate=True)
        except binascii.Error as e:
            raise DecodeError(f"Invalid Base64 data: {e}") from e

        # Each byte string has exactly one accepted token
        if Base64Encoder.encode(decoded) != data:
            raise DecodeError("Non-canonical Base64 encoding")
        return decoded
