"""Locale change notifications.

The registry announces changes of its current locale through a Notifier.
The transport is up to the host application (GUI toolkit signals, web
framework events, message bus); InProcessNotifier is the default transport
dispatching synchronously to callables subscribed in the same process.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol

from l10ntree.constants import LOCALE_CHANGED

if TYPE_CHECKING:
    from l10ntree.localization.localization import Localization

__all__ = [
    "InProcessNotifier",
    "Listener",
    "LocaleChangedEvent",
    "Notifier",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LocaleChangedEvent:
    """Event published when the current locale of a registry changes.

    Attributes:
        detail: Newly current Localization, None after the registry was cleared
        type: Event type, always LOCALE_CHANGED
    """

    detail: Localization | None
    type: str = LOCALE_CHANGED


type Listener = Callable[[LocaleChangedEvent], object]
"""Callable invoked with each published event of a subscribed type."""


class Notifier(Protocol):
    """Protocol for publishing events and managing their subscribers.

    This is a Protocol (structural typing) rather than ABC so host bindings
    can adapt existing event systems without inheriting from l10ntree.
    """

    def subscribe(self, event_type: str, listener: Listener) -> None:
        """Invoke listener for every event of event_type published later."""

    def unsubscribe(self, event_type: str, listener: Listener) -> None:
        """Stop invoking listener for events of event_type."""

    def publish(self, event: LocaleChangedEvent) -> None:
        """Deliver event to all listeners subscribed to its type."""


@dataclass(slots=True)
class InProcessNotifier:
    """Synchronous in-process Notifier.

    Listeners are invoked in subscription order. Subscribing the same
    listener twice delivers each event twice, like most event emitters.

    Example:
        >>> notifier = InProcessNotifier()
        >>> seen = []
        >>> notifier.subscribe("locale-changed", seen.append)
        >>> notifier.publish(LocaleChangedEvent(detail=None))
        >>> seen
        [LocaleChangedEvent(detail=None, type='locale-changed')]
    """

    _listeners: dict[str, list[Listener]] = field(default_factory=dict, init=False)

    def subscribe(self, event_type: str, listener: Listener) -> None:
        """Invoke listener for every event of event_type published later."""
        self._listeners.setdefault(event_type, []).append(listener)

    def unsubscribe(self, event_type: str, listener: Listener) -> None:
        """Stop invoking listener for events of event_type.

        Removes one subscription; unknown listeners are ignored.
        """
        listeners = self._listeners.get(event_type, [])
        if listener in listeners:
            listeners.remove(listener)

    def clear(self, event_type: str | None = None) -> None:
        """Remove all listeners of event_type, or of every type if None."""
        if event_type is None:
            self._listeners.clear()
        else:
            self._listeners.pop(event_type, None)

    def listener_count(self, event_type: str) -> int:
        """Number of subscriptions for event_type."""
        return len(self._listeners.get(event_type, ()))

    def publish(self, event: LocaleChangedEvent) -> None:
        """Deliver event to all listeners subscribed to its type.

        Listeners see a snapshot of subscriptions: subscribing or
        unsubscribing from inside a listener affects later events only.
        """
        listeners = tuple(self._listeners.get(event.type, ()))
        logger.debug("Publishing %s to %d listener(s)", event.type, len(listeners))
        for listener in listeners:
            listener(event)
