"""Observer list used by the services to broadcast events."""

import logging
from threading import Lock
from typing import Any, Generic, TypeVar

logger = logging.getLogger(__name__)


T = TypeVar("T", bound=object)


class ObserverManager(Generic[T]):
    """
    Ordered set of observers, notified by callback name.

    Notification works on a snapshot taken under the lock, so callbacks may
    register or unregister observers (including themselves). An observer
    that raises is logged with its traceback and the remaining observers
    still run.

    Example:
        ```python
        observers = ObserverManager[SelectionObserver](observer_type_name="selection")
        observers.register(panel)
        observers.notify("on_selection_event", SelectionEvent.TAPPED, config)
        ```
    """

    def __init__(self, lock: "Lock | None" = None, observer_type_name: str = "observer"):
        self._items: list[T] = []
        self._lock = lock if lock is not None else Lock()
        self._kind = observer_type_name

    def register(self, observer: T) -> None:
        with self._lock:
            added = observer not in self._items
            if added:
                self._items.append(observer)
        if added:
            logger.info(f"Added {self._kind} observer {observer!r}")

    def unregister(self, observer: T) -> None:
        with self._lock:
            try:
                self._items.remove(observer)
            except ValueError:
                logger.warning(f"Ignoring removal of unknown {self._kind} observer {observer!r}")
                return
        logger.debug(f"Removed {self._kind} observer {observer!r}")

    def notify(self, callback_name: str, *args: Any, **kwargs: Any) -> None:
        """Invoke ``observer.<callback_name>(*args, **kwargs)`` on each observer."""
        with self._lock:
            snapshot = tuple(self._items)

        for observer in snapshot:
            method = getattr(observer, callback_name, None)
            if method is None:
                logger.error(f"{self._kind} observer {observer!r} has no method '{callback_name}'")
                continue
            try:
                method(*args, **kwargs)
            except Exception as e:
                logger.error(f"{self._kind} observer {observer!r} failed in {callback_name}: {e}", exc_info=True)

    def clear(self) -> None:
        with self._lock:
            dropped = len(self._items)
            self._items = []
        logger.debug(f"Dropped {dropped} {self._kind} observer(s)")

    def __contains__(self, observer: object) -> bool:
        with self._lock:
            return observer in self._items

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def __bool__(self) -> bool:
        return len(self) > 0
