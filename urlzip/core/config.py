"""
Codec configuration module.

Provides configuration for the string compressor and its backend loader.
"""
from dataclasses import dataclass


@dataclass
class CodecConfig:
    """
    String codec configuration.

    The algorithm and its level are fixed; only how the backend is
    brought up can be tuned.
    """
    # Construct the backend in the default executor instead of on the loop
    offload_init: bool = True

    @classmethod
    def default(cls) -> 'CodecConfig':
        """Create default configuration."""
        return cls()

    @classmethod
    def inline(cls, **kwargs) -> 'CodecConfig':
        """Create configuration that builds the backend on the event loop."""
        return cls(offload_init=False, **kwargs)
