"""Ordered chat transcript with change notification."""

import itertools
from collections.abc import Callable, Iterator

from novicegpt.models.schemas import Message, MessageRole

Listener = Callable[[], None]


class Transcript:
    """Owns the ordered list of chat messages.

    Insertion order is display order. At most one pending message exists,
    and when present it is the last entry.
    """

    def __init__(self) -> None:
        self._messages: list[Message] = []
        self._listeners: list[Listener] = []
        self._ids = itertools.count(1)

    def __iter__(self) -> Iterator[Message]:
        return iter(self._messages)

    def __len__(self) -> int:
        return len(self._messages)

    @property
    def messages(self) -> list[Message]:
        return list(self._messages)

    @property
    def pending(self) -> Message | None:
        if self._messages and self._messages[-1].is_pending:
            return self._messages[-1]
        return None

    def add_listener(self, listener: Listener) -> None:
        """Register a callback run after every mutation."""
        self._listeners.append(listener)

    def new_message(self, role: MessageRole, content: str) -> Message:
        """Create a message with the next id, without appending it."""
        return Message(id=next(self._ids), role=role, content=content)

    def append(self, message: Message) -> bool:
        """Add a message to the end.

        User messages that are blank after trimming are ignored.

        Returns:
            True if the transcript changed.

        Raises:
            ValueError: If a second pending message is appended.
        """
        if message.role is MessageRole.USER and not message.content.strip():
            return False
        if message.is_pending and self.pending is not None:
            raise ValueError("Transcript already has a pending message")

        self._messages.append(message)
        self.notify()
        return True

    def resolve_pending(self, final_message: Message) -> None:
        """Replace the pending placeholder with the final message.

        If nothing is pending the message is appended as is.
        """
        if final_message.is_pending:
            raise ValueError("A pending message cannot resolve another")

        if self.pending is not None:
            self._messages.pop()
        self._messages.append(final_message)
        self.notify()

    def clear(self) -> None:
        self._messages.clear()
        self.notify()

    def notify(self) -> None:
        for listener in self._listeners:
            listener()
