"""Append-only message store for one chat session.

Hidden design decisions:
- Messages are kept in an immutable tuple that is replaced, never edited,
  so readers always see a complete sequence
- Timestamps double as identity keys and are issued by a clock that never
  repeats a value
"""

import logging
import time
from collections.abc import Callable

from ..errors import DuplicateTimestampError
from .models import Message

logger = logging.getLogger(__name__)

StoreListener = Callable[[tuple[Message, ...]], None]


class MessageClock:
    """Issues strictly increasing millisecond timestamps.

    Two reads within the same millisecond (or a wall clock that steps
    backwards) are bumped past the previous value.
    """

    def __init__(self, source: Callable[[], float] = time.time):
        self._source = source
        self._last: int | None = None

    def now(self) -> int:
        """Current time in ms, always greater than any earlier result."""
        current = int(self._source() * 1000)
        if self._last is not None and current <= self._last:
            current = self._last + 1
        self._last = current
        return current


class SessionStore:
    """Ordered history of the messages in one session."""

    def __init__(self) -> None:
        self._messages: tuple[Message, ...] = ()
        self._timestamps: frozenset[int] = frozenset()
        self._listeners: list[StoreListener] = []

    @property
    def messages(self) -> tuple[Message, ...]:
        """All messages, oldest first."""
        return self._messages

    def __len__(self) -> int:
        return len(self._messages)

    def last(self) -> Message | None:
        """Most recent message, if any."""
        return self._messages[-1] if self._messages else None

    def append(self, message: Message) -> None:
        """Add a message at the end of the history.

        Raises:
            DuplicateTimestampError: If the timestamp is already in use
        """
        if message.timestamp in self._timestamps:
            raise DuplicateTimestampError(
                f"Timestamp {message.timestamp} already used in this session"
            )
        self._timestamps = self._timestamps | {message.timestamp}
        self._messages = self._messages + (message,)
        logger.debug("Appended %s message (%d total)", message.role.value, len(self._messages))
        self._notify()

    def clear(self) -> None:
        """Drop every message at once."""
        self._messages = ()
        self._timestamps = frozenset()
        logger.debug("Cleared session history")
        self._notify()

    def snapshot(self) -> tuple[Message, ...]:
        """The history in original order, for sending to the provider."""
        return self._messages

    def subscribe(self, listener: StoreListener) -> Callable[[], None]:
        """Call ``listener`` with the new history after every change.

        Returns:
            A function that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        snapshot = self._messages
        for listener in list(self._listeners):
            listener(snapshot)
