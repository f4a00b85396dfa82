"""Origin authenticator for cross-origin WebSocket connection requests."""

__version__ = "0.1.0"
__all__ = ["authenticator"]