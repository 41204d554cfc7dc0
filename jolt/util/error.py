"""Utility layer errors."""


class UtilError(Exception):
    """Raised by process-level helpers (settings, startup checks)."""


class ConfigurationError(UtilError):
    """The process is configured unsafely and must not serve traffic."""
