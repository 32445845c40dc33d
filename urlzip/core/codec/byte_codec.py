"""Byte-level codec over a compression backend."""
from ..backend.protocols import Backend
from ..exceptions import CorruptDataError


class ByteCodec:
    """Compresses and decompresses raw byte buffers."""

    def __init__(self, backend: Backend):
        self._backend = backend

    def compress_bytes(self, data: bytes) -> bytes:
        """
        Compress bytes.

        Empty input is valid and yields a non-empty stream.
        """
        return self._backend.compress(data)

    def decompress_bytes(self, data: bytes) -> bytes:
        """
        Decompress bytes.

        Raises:
            CorruptDataError: If data is empty or not a valid stream
        """
        if not data:
            raise CorruptDataError("Empty buffer is not a valid compressed stream")
        return self._backend.decompress(data)
