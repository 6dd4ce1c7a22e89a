import logging
from typing import Callable, Dict, List

logger = logging.getLogger(__name__)


class EventEmitter:
    """
    Minimal named-event dispatcher for framework-agnostic core objects.
    Listeners run synchronously in the emitting thread.
    """
    def __init__(self):
        self._listeners: Dict[str, List[Callable]] = {}

    def on(self, event_name: str, callback: Callable):
        """Register a callback for an event."""
        self._listeners.setdefault(event_name, []).append(callback)

    def off(self, event_name: str, callback: Callable):
        """Unregister a callback. Unknown callbacks are ignored."""
        listeners = self._listeners.get(event_name, [])
        if callback in listeners:
            listeners.remove(callback)

    def emit(self, event_name: str, *args, **kwargs):
        """Call every listener of `event_name`; a failing listener does not stop the others."""
        for callback in list(self._listeners.get(event_name, [])):
            try:
                callback(*args, **kwargs)
            except Exception:
                logger.exception(f"Error in event listener for '{event_name}'")

    def clear(self):
        """Remove all listeners."""
        self._listeners.clear()
