"""Port for the key-value record store."""

from collections.abc import Callable
from typing import Any, Protocol

ChangeListener = Callable[[], None]


class RecordStorePort(Protocol):
    """Port exposing named JSON record collections.

    Every ``save`` fires a store-wide change notification; listeners are not
    told which key changed.
    """

    def load(self, key: str, default: list[Any] | None = None) -> list[Any]:
        """Return the parsed array at ``key``, or ``default``.

        Absent keys, corrupt payloads and storage failures all yield
        ``default`` (an empty list when omitted).
        """

    def save(self, key: str, records: list[Any]) -> None:
        """Replace the array at ``key`` and notify subscribers."""

    def subscribe(self, listener: ChangeListener) -> None:
        """Register a listener called after every write."""

    def unsubscribe(self, listener: ChangeListener) -> None:
        """Remove a previously registered listener."""


__all__ = ["ChangeListener", "RecordStorePort"]
