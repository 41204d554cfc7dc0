"""Base class for domain services."""


class Service:
    """Marker base for identity domain services.

    Services hold no per-request state of their own; everything they know
    about an identity comes from the repositories they are given.
    """
