"""Building blocks shared by the MPRIS interfaces.

The pieces here are the signal source that models and views inherit from, a
message bus that records what is published on it, and the base class each
exported interface derives from.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from itertools import count
from typing import Any

from gmpvkit.defs import MPRIS_OBJ_ROOT_PATH

log = logging.getLogger(__name__)

PROPERTIES_INTERFACE = "org.freedesktop.DBus.Properties"
PROPERTIES_CHANGED = "PropertiesChanged"


class Observable:
    """An object that emits named signals to connected handlers."""

    def __init__(self) -> None:
        self._handlers: dict[int, tuple[str, Callable[..., Any]]] = {}
        self._ids = count(1)

    def connect(self, signal: str, handler: Callable[..., Any]) -> int:
        """Connect a handler to a signal and return its handler id."""
        handler_id = next(self._ids)
        self._handlers[handler_id] = (signal, handler)
        return handler_id

    def disconnect(self, handler_id: int) -> None:
        """Disconnect a handler; raise KeyError if the id is not connected."""
        try:
            del self._handlers[handler_id]
        except KeyError:
            raise KeyError(f"no handler with id {handler_id}") from None

    def emit(self, signal: str, *args: Any) -> list[Any]:
        """Call every handler of the signal in connection order; return results."""
        handlers = [h for s, h in list(self._handlers.values()) if s == signal]
        return [handler(*args) for handler in handlers]


@dataclass(frozen=True)
class EmittedSignal:
    """A signal published on a message bus."""

    object_path: str
    interface: str
    name: str
    args: tuple[Any, ...]


class MessageBus:
    """A message bus connection that keeps exported objects and sent signals."""

    def __init__(self) -> None:
        self.signals: list[EmittedSignal] = []
        self.registrations: dict[int, tuple[str, str, Any]] = {}
        self._ids = count(1)

    def emit_signal(
        self, object_path: str, interface: str, name: str, args: tuple[Any, ...]
    ) -> EmittedSignal:
        """Publish a signal and return the record of it."""
        signal = EmittedSignal(object_path, interface, name, tuple(args))
        self.signals.append(signal)
        return signal

    def register_object(self, object_path: str, interface: str, handler: Any) -> int:
        """Export a handler for an interface at a path; return the registration id."""
        registration_id = next(self._ids)
        self.registrations[registration_id] = (object_path, interface, handler)
        return registration_id

    def unregister_object(self, registration_id: int) -> bool:
        """Remove an export; return whether it was registered."""
        return self.registrations.pop(registration_id, None) is not None


class MprisModule(ABC):
    """One exported MPRIS interface with its table of property values."""

    def __init__(self, conn: MessageBus, interface_name: str) -> None:
        self.conn = conn
        self.interface_name = interface_name
        self._signal_ids: list[tuple[Observable, int]] = []
        self._properties: dict[str, Any] = {}

    def connect_signal(
        self, instance: Observable, signal: str, handler: Callable[..., Any]
    ) -> int:
        """Connect a handler that is disconnected when the module is disposed."""
        handler_id = instance.connect(signal, handler)
        self._signal_ids.insert(0, (instance, handler_id))
        return handler_id

    def get_property(self, name: str) -> Any:
        """Return the stored value of a property, or None if it is unset."""
        return self._properties.get(name)

    def get_properties(self, *args: str) -> tuple[Any, ...]:
        """Return the stored values of the named properties, in order."""
        return tuple(self._properties.get(name) for name in args)

    def set_properties(
        self, properties: Mapping[str, Any], send_new_value: bool = True
    ) -> EmittedSignal:
        """Store property values and announce the change.

        With ``send_new_value`` the new values are sent; otherwise only the
        names are sent as invalidated.
        """
        changed: dict[str, Any] = {}
        invalidated: list[str] = []

        log.debug("Preparing property change event")
        for name, value in properties.items():
            if value is None:
                continue
            self._properties[name] = value
            log.debug('Adding property "%s"', name)
            if send_new_value:
                changed[name] = value
            else:
                invalidated.append(name)

        log.debug("Emitting property change event on interface %s", self.interface_name)
        return self.conn.emit_signal(
            MPRIS_OBJ_ROOT_PATH,
            PROPERTIES_INTERFACE,
            PROPERTIES_CHANGED,
            (self.interface_name, changed, invalidated),
        )

    def register(self) -> None:
        """Export the interface on the bus."""
        self.register_interface()

    def unregister(self) -> None:
        """Withdraw the interface from the bus."""
        self.unregister_interface()

    def dispose(self) -> None:
        """Disconnect every handler connected through the module and drop properties."""
        for instance, handler_id in self._signal_ids:
            instance.disconnect(handler_id)
        self._signal_ids.clear()
        self._properties.clear()

    @abstractmethod
    def register_interface(self) -> None:
        """Connect to the player and export the interface."""

    @abstractmethod
    def unregister_interface(self) -> None:
        """Remove the exported interface."""