"""
Async remote procedure client.

Calls query and mutation procedures over HTTP with JSON payloads.
"""
import json
from typing import Any, Dict, Optional

import aiohttp

from ..exceptions import RPCError
from ..logging import get_logger
from .config import RPCConfig


class RPCClient:
    """
    Asynchronous procedure client.

    Queries are sent as ``GET {url}?input=<json>``, mutations as
    ``POST {url}`` with a JSON body. No retry, no caching.

    Example:
        >>> async with RPCClient(RPCConfig(base_url=url)) as client:
        ...     counts = await client.query('market.social.getFollowCounts', {'userId': 1})
    """

    def __init__(self, config: Optional[RPCConfig] = None):
        """
        Initialize RPC client.

        Args:
            config: RPC configuration (uses defaults if not provided)
        """
        self._config = config or RPCConfig.default()
        self._session: Optional[aiohttp.ClientSession] = None
        self._logger = get_logger('rpc')

    @property
    def config(self) -> RPCConfig:
        """Get current configuration."""
        return self._config

    async def __aenter__(self) -> 'RPCClient':
        """Async context manager entry."""
        await self._ensure_session()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()

    async def _ensure_session(self) -> aiohttp.ClientSession:
        """Ensure session is created and open."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(**self._config.get_session_kwargs())
        return self._session

    async def close(self):
        """Close client and release resources."""
        if self._session and not self._session.closed:
            await self._session.close()
        self._session = None

    async def query(self, path: str, input: Optional[Dict[str, Any]] = None) -> Any:
        """
        Call a query procedure.

        Args:
            path: Dotted procedure path
            input: Procedure input (serialized as JSON)

        Returns:
            Procedure result

        Raises:
            RPCError: If the call fails
        """
        params = {'input': json.dumps(_drop_none(input))} if input is not None else None
        return await self._call('GET', path, params=params)

    async def mutate(self, path: str, input: Optional[Dict[str, Any]] = None) -> Any:
        """
        Call a mutation procedure.

        Args:
            path: Dotted procedure path
            input: Procedure input (sent as JSON body)

        Returns:
            Procedure result

        Raises:
            RPCError: If the call fails
        """
        body = json.dumps(_drop_none(input)) if input is not None else None
        return await self._call('POST', path, data=body)

    async def _call(self, method: str, path: str, **kwargs) -> Any:
        session = await self._ensure_session()
        url = self._config.build_url(path)
        self._logger.debug(f"{method} {url}")

        try:
            async with session.request(method, url, **kwargs) as response:
                response_text = await response.text()
                if response.status >= 400:
                    raise RPCError(
                        f"Procedure {path} failed with HTTP {response.status}: {response_text[:200]}",
                        path=path,
                        status=response.status
                    )
                return self._parse_response(path, response_text)
        except aiohttp.ClientError as e:
            raise RPCError(f"Network error calling {path}: {e}", path=path) from e

    @staticmethod
    def _parse_response(path: str, response_text: str) -> Any:
        """Parse a response, unwrapping the ``result.data`` envelope."""
        if not response_text:
            return None
        try:
            result = json.loads(response_text)
        except json.JSONDecodeError as e:
            raise RPCError(f"Invalid JSON from {path}: {e}", path=path) from e

        if isinstance(result, dict) and isinstance(result.get('result'), dict):
            return result['result'].get('data')
        return result


def _drop_none(data: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """Remove keys whose value is None; absent and undefined are the same on the wire."""
    return {k: v for k, v in (data or {}).items() if v is not None}
