"""SafeRoute: community safety incident reporting backend."""

__version__ = "0.1.0"
