"""
Backend loader.

Owns the single backend instance and its initialization state machine.
"""
import asyncio
from enum import Enum
from typing import Optional

from ..config import CodecConfig
from ..exceptions import InitializationError, NotInitializedError
from ..logging import get_logger
from .protocols import Backend, BackendFactory
from .zstd_backend import load_zstd_backend


class LoaderState(Enum):
    """Initialization states. Transitions only move forward."""
    UNINITIALIZED = 'uninitialized'
    INITIALIZING = 'initializing'
    READY = 'ready'
    FAILED = 'failed'


class BackendLoader:
    """
    Acquires and caches one compression backend.

    Initialization is single-flight: concurrent ``ensure_ready()`` calls
    attach to one stored task and all receive the same backend.

    Example:
        >>> loader = BackendLoader()
        >>> backend = await loader.ensure_ready()
        >>> loader.try_get() is backend
        True
    """

    def __init__(
        self,
        factory: Optional[BackendFactory] = None,
        config: Optional[CodecConfig] = None
    ):
        """
        Initialize loader.

        Args:
            factory: Callable that builds the backend (zstd by default)
            config: Codec configuration (uses defaults if not provided)
        """
        self._factory = factory or load_zstd_backend
        self._config = config or CodecConfig.default()
        self._state = LoaderState.UNINITIALIZED
        self._backend: Optional[Backend] = None
        self._error: Optional[InitializationError] = None
        self._task: Optional[asyncio.Task] = None
        self._logger = get_logger('backend')

    @property
    def state(self) -> LoaderState:
        """Current initialization state."""
        return self._state

    @property
    def is_ready(self) -> bool:
        return self._state is LoaderState.READY

    def try_get(self) -> Optional[Backend]:
        """
        Return the backend without waiting.

        Returns:
            Backend if ready, None otherwise
        """
        if self._state is LoaderState.READY:
            return self._backend
        return None

    async def ensure_ready(self) -> Backend:
        """
        Wait until the backend is ready, starting construction if needed.

        Cancelling the caller does not cancel construction; other callers
        may be waiting on the same task.

        Returns:
            The shared backend

        Raises:
            InitializationError: If construction failed (now or earlier)
        """
        if self._state is LoaderState.READY:
            return self._backend
        if self._state is LoaderState.FAILED:
            raise self._error

        if self._task is None:
            self._state = LoaderState.INITIALIZING
            self._logger.debug("Backend initialization started")
            self._task = asyncio.get_running_loop().create_task(self._initialize())

        return await asyncio.shield(self._task)

    def load_blocking(self) -> Backend:
        """
        Construct the backend synchronously.

        For applications that use the synchronous API without an event
        loop.

        Returns:
            The shared backend

        Raises:
            NotInitializedError: If an asynchronous initialization is in flight
            InitializationError: If construction failed (now or earlier)
        """
        if self._state is LoaderState.READY:
            return self._backend
        if self._state is LoaderState.FAILED:
            raise self._error
        if self._state is LoaderState.INITIALIZING:
            raise NotInitializedError(
                "Backend initialization is in progress; await ensure_ready() instead"
            )

        try:
            backend = self._factory()
        except Exception as e:
            raise self._fail(e) from e
        return self._succeed(backend)

    async def _initialize(self) -> Backend:
        try:
            if self._config.offload_init:
                loop = asyncio.get_running_loop()
                backend = await loop.run_in_executor(None, self._factory)
            else:
                backend = self._factory()
        except Exception as e:
            raise self._fail(e) from e
        return self._succeed(backend)

    def _succeed(self, backend: Backend) -> Backend:
        self._backend = backend
        self._state = LoaderState.READY
        self._logger.debug(f"Backend ready: {type(backend).__name__}")
        return backend

    def _fail(self, cause: Exception) -> InitializationError:
        self._error = InitializationError(f"Failed to initialize compression backend: {cause}")
        self._state = LoaderState.FAILED
        self._logger.debug("Backend initialization failed")
        return self._error
