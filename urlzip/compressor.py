"""
String compressor.

Turns arbitrary text into a compact URL-safe string and back.

Usage:
    >>> from urlzip import Compressor
    >>>
    >>> token = await Compressor.compress_async("Hello, World!")
    >>> Compressor.decompress(token)
    'Hello, World!'
"""
from typing import Optional

from .core.backend import BackendLoader
from .core.codec import Base64Encoder, ByteCodec
from .core.config import CodecConfig
from .core.exceptions import DecodeError, NotInitializedError


class StrCompressor:
    """
    URL-safe string compressor.

    The synchronous methods need a ready backend and fail fast otherwise.
    The asynchronous methods wait for readiness and then run the
    synchronous method, so both paths produce identical output.

    Example:
        >>> compressor = StrCompressor()
        >>> await compressor.init()
        >>> compressor.decompress(compressor.compress("abc"))
        'abc'
    """

    def __init__(
        self,
        loader: Optional[BackendLoader] = None,
        config: Optional[CodecConfig] = None
    ):
        """
        Initialize compressor.

        Args:
            loader: Backend loader to share (a new one is created if not provided)
            config: Codec configuration, used when creating the loader
        """
        self._config = config or CodecConfig.default()
        self._loader = loader or BackendLoader(config=self._config)
        self._encoder = Base64Encoder()

    @property
    def loader(self) -> BackendLoader:
        return self._loader

    @property
    def is_ready(self) -> bool:
        """Whether synchronous calls can run."""
        return self._loader.is_ready

    async def init(self) -> None:
        """Initialize the backend (safe to call many times, concurrently)."""
        await self._loader.ensure_ready()

    def init_sync(self) -> None:
        """Initialize the backend without an event loop."""
        self._loader.load_blocking()

    def _codec(self) -> ByteCodec:
        backend = self._loader.try_get()
        if backend is None:
            raise NotInitializedError(
                f"Compressor is {self._loader.state.value}; "
                "call init() or use the async methods"
            )
        return ByteCodec(backend)

    def compress(self, text: str) -> str:
        """
        Compress text into a URL-safe string.

        Args:
            text: Any string (may be empty)

        Returns:
            String over [A-Za-z0-9-_] without padding

        Raises:
            NotInitializedError: If the backend is not ready
        """
        codec = self._codec()
        compressed = codec.compress_bytes(text.encode('utf-8'))
        return self._encoder.encode(compressed)

    def decompress(self, encoded: str) -> str:
        """
        Restore text from a string produced by compress().

        Args:
            encoded: URL-safe compressed string

        Returns:
            Original text

        Raises:
            NotInitializedError: If the backend is not ready
            DecodeError: If the input is not valid compressed data
        """
        codec = self._codec()
        data = codec.decompress_bytes(self._encoder.decode(encoded))
        try:
            return data.decode('utf-8')
        except UnicodeDecodeError as e:
            raise DecodeError(f"Decompressed payload is not valid UTF-8: {e}") from e

    async def compress_async(self, text: str) -> str:
        """Compress text, initializing the backend first if needed."""
        await self.init()
        return self.compress(text)

    async def decompress_async(self, encoded: str) -> str:
        """Decompress text, initializing the backend first if needed."""
        await self.init()
        return self.decompress(encoded)

    def __repr__(self) -> str:
        return f"<StrCompressor state={self._loader.state.value}>"


# Process-wide instance; its backend loads on first init() or async call
Compressor = StrCompressor()


def get_compressor() -> StrCompressor:
    """Return the shared compressor."""
    return Compressor


__all__ = [
    'StrCompressor',
    'Compressor',
    'get_compressor',
]
