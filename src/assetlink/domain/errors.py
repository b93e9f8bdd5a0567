from __future__ import annotations

"""
Domain Error Types.

Failures raised by the generation core. Callback exceptions are never
wrapped; they reach the caller exactly as the user code raised them.
"""


class AssetLinkError(Exception):
    """Base class for errors raised by assetlink itself."""


class ConfigError(AssetLinkError):
    """Raised when a configuration is rejected in strict validation mode."""


class InvalidPatternError(AssetLinkError, ValueError):
    """
    Raised when an exclude pattern does not compile after translation.

    Attributes:
        pattern: The exclude pattern as written in the configuration.
    """

    def __init__(self, pattern: str, reason: str):
        super().__init__(f"Invalid exclude pattern '{pattern}': {reason}")
        self.pattern = pattern
