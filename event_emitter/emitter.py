"""Synchronous publish/subscribe registry."""

import logging
from dataclasses import dataclass
from functools import partial
from typing import Any, Callable, Dict, List

logger = logging.getLogger(__name__)

# Contexts of these types match by value, everything else by identity
_SCALAR_TYPES = (str, bytes, int, float, bool)

# Default ``original`` for subscriptions made by ``on``
_NO_ORIGINAL = object()


@dataclass(eq=False)
class Subscription:
    """A handler stored under an event name.

    ``original`` is only set for once-wrappers and points back at the
    handler the caller registered, so ``off`` can find the wrapper.
    """
    handler: Callable
    context: Any = None
    original: Any = _NO_ORIGINAL

    def matches(self, handler: Callable, context: Any) -> bool:
        """Check whether this subscription was registered as handler + context."""
        matches_handler = (
            self.handler == handler
            or (self.original is not _NO_ORIGINAL and self.original == handler)
        )
        return matches_handler and _same_context(self.context, context)


def _same_context(stored: Any, context: Any) -> bool:
    if stored is context:
        return True
    if isinstance(stored, _SCALAR_TYPES) and isinstance(context, _SCALAR_TYPES):
        return stored == context
    return False


class EventEmitter:
    """Registry of named-event handlers.

    Handlers run synchronously inside ``emit``, in the order they were
    registered. A handler registered with a context receives it as its
    first positional argument, the way a method receives ``self``.

    Example:
        >>> emitter = EventEmitter()
        >>> off = emitter.on('change', lambda value: print(f"Changed: {value}"))
        >>> emitter.emit('change', 42)
        Changed: 42
        >>> off()
        >>> emitter.emit('change', 43)
    """

    def __init__(self):
        """Initialize an empty subscription registry."""
        self._subscriptions: Dict[str, List[Subscription]] = {}

    def on(self, name: str, handler: Callable, context: Any = None) -> Callable[[], None]:
        """Register a handler, invoked every time the event is emitted.

        Args:
            name: Event name to listen for
            handler: Callable to invoke when the event is emitted
            context: Optional receiver passed as the handler's first argument

        Returns:
            Zero-argument callable that de-registers this handler + context
        """
        self._subscribe(name, Subscription(handler=handler, context=context))
        return partial(self.off, name, handler, context)

    def once(self, name: str, handler: Callable, context: Any = None) -> Callable[[], None]:
        """Register a handler that is invoked for the next emit only.

        Args:
            name: Event name to listen for
            handler: Callable to invoke when the event is emitted
            context: Optional receiver passed as the handler's first argument

        Returns:
            Zero-argument callable that de-registers the pending handler
        """
        fired = False

        def once_handler(*args, **kwargs):
            nonlocal fired
            off()
            # A re-entrant emit can reach the wrapper from an older snapshot
            if fired:
                return
            fired = True
            handler(*args, **kwargs)

        self._subscribe(
            name,
            Subscription(handler=once_handler, context=context, original=handler),
        )
        off = partial(self.off, name, once_handler, context)
        return off

    def emit(self, name: str, /, *args, **kwargs) -> None:
        """Invoke all handlers registered for an event.

        Dispatch runs over a snapshot of the handlers taken when the call
        starts: handlers added while dispatching wait for the next emit, and
        handlers removed while dispatching still run this time. Exceptions
        raised by a handler propagate to the caller and skip the rest.

        Args:
            name: Event name to emit
            *args: Positional arguments passed to every handler
            **kwargs: Keyword arguments passed to every handler
        """
        subscriptions = list(self._subscriptions.get(name, ()))
        logger.debug("Emitting '%s' to %d handler(s)", name, len(subscriptions))

        for subscription in subscriptions:
            if subscription.context is None:
                subscription.handler(*args, **kwargs)
            else:
                subscription.handler(subscription.context, *args, **kwargs)

    def off(self, name: str, handler: Callable, context: Any = None) -> None:
        """De-register the first handler + context match for an event.

        ``handler`` may be the callable given to ``once``; the wrapper that
        ``once`` stored is matched through it. Nothing happens when there
        is no match.
        """
        subscriptions = self._subscriptions.get(name)
        if subscriptions is None:
            return

        for index, subscription in enumerate(subscriptions):
            if subscription.matches(handler, context):
                del subscriptions[index]
                logger.debug("Removed handler from '%s'", name)
                break
        else:
            logger.debug("No matching handler on '%s' to remove", name)

        if not subscriptions:
            del self._subscriptions[name]

    def _subscribe(self, name: str, subscription: Subscription) -> None:
        if name not in self._subscriptions:
            self._subscriptions[name] = []
        self._subscriptions[name].append(subscription)
        logger.debug(
            "Subscribed to '%s' (%d handler(s))", name, len(self._subscriptions[name])
        )
