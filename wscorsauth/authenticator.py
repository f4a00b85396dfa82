"""Origin authentication for cross-origin WebSocket handshake requests."""

from __future__ import annotations


class CorsAuthenticator:
    """Carries the origin of a connection request and whether it is accepted.

    A server hands one of these to an application hook. The hook inspects
    ``origin`` and sets ``allowed`` to accept or reject the request. Every
    origin is accepted by default.

    Checking the origin only means something for browser clients: any other
    client can send whatever Origin header it likes.
    """

    __slots__ = ("_origin", "allowed")

    def __init__(self, origin: str, allowed: bool = True) -> None:
        self._origin = origin
        self.allowed = allowed

    @property
    def origin(self) -> str:
        """The origin this authenticator decides on."""
        return self._origin

    def swap(self, other: CorsAuthenticator) -> None:
        """Exchange origin and decision with ``other``."""
        if other is self:
            return
        self._origin, other._origin = other._origin, self._origin
        self.allowed, other.allowed = other.allowed, self.allowed

    def copy(self) -> CorsAuthenticator:
        """Return an independent authenticator with the same state."""
        return CorsAuthenticator(self._origin, self.allowed)

    __copy__ = copy

    def __repr__(self) -> str:
        return f"CorsAuthenticator(origin={self._origin!r}, allowed={self.allowed!r})"