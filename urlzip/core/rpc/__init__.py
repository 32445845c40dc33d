"""Remote procedure client used by the service layer."""
from .client import RPCClient
from .config import RPCConfig, TimeoutConfig

__all__ = [
    'RPCClient',
    'RPCConfig',
    'TimeoutConfig',
]
