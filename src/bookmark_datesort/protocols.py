"""Protocols for the host environment that runs a sort."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class NotifierProtocol(Protocol):
    """User-facing notification channel (an alert dialog in a PDF viewer)."""

    def alert(self, message: str) -> None:
        """Show ``message`` to the user."""
        ...
