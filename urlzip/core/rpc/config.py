"""
RPC configuration module.

Provides configuration for the remote procedure client.
"""
from dataclasses import dataclass, field
from typing import Optional, Dict, Any


@dataclass
class TimeoutConfig:
    """
    Timeout configuration.

    Granular control over different timeout types.
    """
    total: float = 30.0  # Total request timeout
    connect: float = 10.0  # Connection timeout
    sock_read: float = 20.0  # Socket read timeout

    def to_aiohttp_timeout(self):
        """Convert to aiohttp ClientTimeout."""
        import aiohttp
        return aiohttp.ClientTimeout(
            total=self.total,
            connect=self.connect,
            sock_read=self.sock_read
        )


@dataclass
class RPCConfig:
    """
    Remote procedure client configuration.

    Procedures are addressed as ``{base_url}/{path}``.
    """
    base_url: str = 'http://localhost:3010/trpc/lambda'

    # User agent
    user_agent: str = 'urlzip/1.0.0'

    # Bearer token sent with every call
    access_token: Optional[str] = None

    timeout: TimeoutConfig = field(default_factory=TimeoutConfig)

    # Additional headers
    extra_headers: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def default(cls) -> 'RPCConfig':
        """Create default configuration."""
        return cls()

    def build_url(self, path: str) -> str:
        """Build the URL for a procedure path."""
        return f"{self.base_url.rstrip('/')}/{path}"

    def get_session_kwargs(self) -> Dict[str, Any]:
        """Get kwargs for aiohttp ClientSession."""
        headers = {
            'User-Agent': self.user_agent,
            'Content-Type': 'application/json',
            **self.extra_headers
        }
        if self.access_token:
            headers['Authorization'] = f"Bearer {self.access_token}"

        return {
            'headers': headers,
            'timeout': self.timeout.to_aiohttp_timeout(),
        }
