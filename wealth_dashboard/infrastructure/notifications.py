"""Store-wide change notification channel."""

from wealth_dashboard.application.ports.record_store import ChangeListener


class ChangeNotifier:
    """Fan out change signals to registered listeners.

    Listeners are called synchronously, in subscription order. Exceptions
    raised by a listener propagate to the caller of ``notify``.
    """

    def __init__(self) -> None:
        self._listeners: list[ChangeListener] = []

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def subscribe(self, listener: ChangeListener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: ChangeListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def notify(self) -> None:
        for listener in list(self._listeners):
            listener()


__all__ = ["ChangeNotifier"]
