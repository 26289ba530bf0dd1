"""Named event handlers."""

from __future__ import annotations

from typing import Callable

EventHandler = Callable[[], object]


class EventRegistry:
    """Maps event names to handlers; the latest registration for a name wins."""

    def __init__(self) -> None:
        self._handlers: dict[str, EventHandler] = {}

    def __contains__(self, name: object) -> bool:
        return name in self._handlers

    def register(self, name: str, handler: EventHandler) -> None:
        """Register a handler for an event name."""
        self._handlers[name] = handler
        print(f"[EVENT] Registered: {name}")

    def trigger(self, name: str) -> bool:
        """Run the handler for the event; return whether one was found."""
        handler = self._handlers.get(name)
        if handler is None:
            print(f"[EVENT] Not found: {name}")
            return False
        print(f"[EVENT] Triggered: {name}")
        handler()
        return True