"""Messages exchanged between the application and its states."""

from collections import deque
from dataclasses import dataclass
from enum import IntEnum

from dropcatch.ids import StateId


class MessageType(IntEnum):
    CLOSE_APP = 0
    STATE_STACK_PUSH = 1
    STATE_STACK_POP = 2
    STATE_STACK_CLEAR = 3
    STATE_PROCESS = 4


@dataclass(frozen=True)
class Message:
    """A message; ``state_id``, ``update`` and ``render`` apply to state messages."""

    type: MessageType
    state_id: StateId = StateId.UNDEFINED
    update: bool = False
    render: bool = False


class MessageBus:
    """Message queue where messages sent while draining wait for the next round.

    A message sent after ``poll`` has returned a message is held back; it becomes
    visible only after ``poll`` has reported the queue empty once.
    """

    def __init__(self) -> None:
        self._polling = False
        self._messages: deque[Message] = deque()
        self._pending: deque[Message] = deque()

    def poll(self) -> Message | None:
        """Return the next message, or None when this round is exhausted."""
        self._polling = bool(self._messages)
        if self._polling:
            return self._messages.popleft()
        if self._pending:
            self._messages, self._pending = self._pending, self._messages
        return None

    def send(self, message: Message) -> None:
        (self._pending if self._polling else self._messages).append(message)

    def send_close_app(self) -> None:
        self.send(Message(MessageType.CLOSE_APP))

    def send_state_stack_push(self, state_id: StateId) -> None:
        self.send(Message(MessageType.STATE_STACK_PUSH, state_id=StateId(state_id)))

    def send_state_stack_pop(self) -> None:
        self.send(Message(MessageType.STATE_STACK_POP))

    def send_state_stack_clear(self) -> None:
        self.send(Message(MessageType.STATE_STACK_CLEAR))

    def send_state_process(self, state_id: StateId, update: bool, render: bool) -> None:
        self.send(
            Message(
                MessageType.STATE_PROCESS,
                state_id=StateId(state_id),
                update=bool(update),
                render=bool(render),
            )
        )