"""Change notification base for all molecular model objects."""

from __future__ import annotations

import copy
from typing import Any, Dict, List, Optional, Protocol, runtime_checkable


class ChemObjectChangeEvent:
    """Event passed to listeners when a chemical object changes."""

    __slots__ = ("_source",)

    def __init__(self, source: ChemObject):
        """Initialize the event.

        Args:
            source: Object whose state changed.
        """
        self._source = source

    @property
    def source(self) -> ChemObject:
        """Object that fired the event."""
        return self._source

    def __repr__(self) -> str:
        return f"ChemObjectChangeEvent(source={type(self._source).__name__})"


@runtime_checkable
class ChemObjectListener(Protocol):
    """Anything that wants to hear about changes of a ChemObject."""

    def state_changed(self, event: ChemObjectChangeEvent) -> None:
        ...


class ChemObject:
    """Base class carrying listeners, properties and flags.

    Every mutation reported through ``notify_changed`` reaches all registered
    listeners synchronously, before the mutating call returns.
    """

    def __init__(self):
        """Initialize an object with no listeners, properties or flags."""
        self._listeners: List[ChemObjectListener] = []
        self._properties: Dict[Any, Any] = {}
        self._flags: Dict[int, bool] = {}
        self._notification = True

    def add_listener(self, listener: ChemObjectListener) -> None:
        """Register a listener. Registering the same listener twice is a no-op.

        Args:
            listener: Object implementing ``state_changed``.
        """
        if not any(registered is listener for registered in self._listeners):
            self._listeners.append(listener)

    def remove_listener(self, listener: ChemObjectListener) -> None:
        """Unregister a listener if it is registered.

        Args:
            listener: Listener to drop.
        """
        for index, registered in enumerate(self._listeners):
            if registered is listener:
                del self._listeners[index]
                return

    @property
    def listener_count(self) -> int:
        """Number of registered listeners."""
        return len(self._listeners)

    @property
    def notification(self) -> bool:
        """Whether listeners are told about changes."""
        return self._notification

    @notification.setter
    def notification(self, value: bool) -> None:
        self._notification = bool(value)

    def notify_changed(self, event: Optional[ChemObjectChangeEvent] = None) -> None:
        """Tell every listener that this object changed.

        Args:
            event: Event to forward. A new event sourced at this object is
                created when omitted.
        """
        if not self._notification or not self._listeners:
            return
        if event is None:
            event = ChemObjectChangeEvent(self)
        # Listeners may unregister themselves while being called.
        for listener in list(self._listeners):
            listener.state_changed(event)

    def set_property(self, key: Any, value: Any) -> None:
        self._properties[key] = value
        self.notify_changed()

    def get_property(self, key: Any, default: Any = None) -> Any:
        return self._properties.get(key, default)

    def remove_property(self, key: Any) -> None:
        self._properties.pop(key, None)
        self.notify_changed()

    @property
    def properties(self) -> Dict[Any, Any]:
        """Copy of the property table."""
        return dict(self._properties)

    def set_flag(self, index: int, value: bool) -> None:
        self._flags[index] = bool(value)
        self.notify_changed()

    def get_flag(self, index: int) -> bool:
        return self._flags.get(index, False)

    def clone(self) -> ChemObject:
        """Create a copy of this object that nobody listens to.

        Returns:
            New object of the same type with copied properties and flags.
        """
        clone = copy.copy(self)
        clone._listeners = []
        clone._properties = dict(self._properties)
        clone._flags = dict(self._flags)
        return clone
