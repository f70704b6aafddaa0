"""Exceptions raised by clawmeta.

Resolution of author-supplied metadata never raises; these cover the
configuration surface only.
"""


class ClawmetaError(Exception):
    """Base exception for clawmeta."""

    pass


class ConfigLoadError(ClawmetaError, ValueError):
    """Raised when configuration YAML cannot be parsed."""

    pass


class ConfigValidationError(ClawmetaError, ValueError):
    """Raised when configuration values fail validation."""

    def __init__(self, source: str, message: str) -> None:
        self.source = source
        super().__init__(f"Invalid configuration in {source}: {message}")
