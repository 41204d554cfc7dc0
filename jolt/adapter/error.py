"""Adapter layer errors."""


class AdapterError(Exception):
    """Raised by adapters that talk to systems outside the identity store."""


class ProviderError(AdapterError):
    """A provider assertion was malformed, expired or wrongly signed."""
