"""
Backend protocols.

Defines the capability the codec borrows from the loader.
"""
from typing import Callable, Protocol, runtime_checkable


@runtime_checkable
class Backend(Protocol):
    """
    Protocol for compression backends.

    A backend is immutable once constructed and may be shared by every
    caller. Implementations wrap a concrete compression library.
    """

    def compress(self, data: bytes) -> bytes:
        """
        Compress a byte buffer.

        Args:
            data: Raw bytes (may be empty)

        Returns:
            A complete compressed stream
        """
        ...

    def decompress(self, data: bytes) -> bytes:
        """
        Decompress a complete stream.

        Args:
            data: Compressed stream

        Returns:
            Original bytes

        Raises:
            CorruptDataError: If the stream is not valid for the algorithm
        """
        ...


BackendFactory = Callable[[], Backend]
