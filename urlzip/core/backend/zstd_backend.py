"""Zstandard backend adapter."""
from ..exceptions import CorruptDataError
from ..logging import get_logger

logger = get_logger('backend.zstd')

# Fixed level; the codec's output must not depend on caller settings
ZSTD_LEVEL = 19

# Largest content size a frame may declare
MAX_CONTENT_SIZE = 64 * 1024 * 1024


class ZstdBackend:
    """
    Backend implemented with the ``zstandard`` library.

    Contexts are created once and reused. Frames are written with the
    content size so one-shot decompression works for every output.
    Decompression accepts exactly one frame whose declared size is
    known and at most MAX_CONTENT_SIZE.
    """

    def __init__(self, module):
        self._zstd = module
        self._compressor = module.ZstdCompressor(level=ZSTD_LEVEL, write_content_size=True)
        self._decompressor = module.ZstdDecompressor()

    @property
    def version(self) -> str:
        return getattr(self._zstd, '__version__', 'unknown')

    def compress(self, data: bytes) -> bytes:
        return self._compressor.compress(data)

    def decompress(self, data: bytes) -> bytes:
        try:
            size = self._zstd.frame_content_size(data)
        except self._zstd.ZstdError as e:
            raise CorruptDataError(f"Invalid zstd frame header: {e}") from e
        if size < 0:
            raise CorruptDataError("Frame does not declare its content size")
        if size > MAX_CONTENT_SIZE:
            raise CorruptDataError(f"Declared content size {size} exceeds {MAX_CONTENT_SIZE}")

        try:
            return self._decompressor.decompress(data, allow_extra_data=False)
        except self._zstd.ZstdError as e:
            raise CorruptDataError(f"Invalid zstd stream: {e}") from e
        except MemoryError as e:
            raise CorruptDataError(f"Cannot allocate {size} bytes for zstd stream") from e


def load_zstd_backend() -> ZstdBackend:
    """
    Import ``zstandard`` and build the backend.

    Importing the native extension is the slow part, which is why the
    loader runs this function in an executor.

    Returns:
        Ready ZstdBackend instance
    """
    import zstandard
    backend = ZstdBackend(zstandard)
    logger.debug(f"Loaded zstandard {backend.version} (level {ZSTD_LEVEL})")
    return backend
