"""Game states and the stack that runs them."""

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass

from dropcatch.ids import StateId
from dropcatch.message_bus import Message, MessageType

WINDOW_SIZE = (480, 640)


class State(ABC):
    """One screen of the game, with access to the shared context."""

    def __init__(self, context) -> None:
        self._context = context

    @property
    def context(self):
        return self._context

    @property
    def keyboard(self):
        return self._context.keyboard

    @property
    def mouse(self):
        return self._context.mouse

    @property
    def cursor(self):
        return self._context.cursor

    @property
    def message_bus(self):
        return self._context.message_bus

    @property
    def resources(self):
        return self._context.resources

    @abstractmethod
    def create(self) -> None:
        """Prepare the state; raise if it cannot be set up."""

    @abstractmethod
    def handle_message(self, message: Message) -> None:
        """React to a message from the bus."""

    @abstractmethod
    def update(self, dt: float) -> None:
        """Advance the state by ``dt`` seconds."""

    @abstractmethod
    def render(self, target) -> None:
        """Draw the state onto ``target``."""


@dataclass
class _Slot:
    state: State | None = None
    update: bool = True
    render: bool = True


class StateStack:
    """Registered states and the stack of those currently running.

    Each identifier has one slot holding its state and its update and render
    flags; the stack refers to slots, so a state pushed twice runs twice.
    """

    def __init__(self, context) -> None:
        self._context = context
        self._slots: dict[StateId, _Slot] = {
            state_id: _Slot() for state_id in StateId if state_id is not StateId.UNDEFINED
        }
        self._stack: list[_Slot] = []

    def _slot(self, state_id) -> _Slot:
        try:
            return self._slots[StateId(state_id)]
        except (ValueError, KeyError):
            raise KeyError(f"unknown state id {state_id!r}") from None

    def add_state(self, state_id: StateId, factory: Callable[..., State], *args) -> State:
        """Build a state with ``factory(context, *args)`` and register it."""
        slot = self._slot(state_id)
        state = factory(self._context, *args)
        slot.state = state
        return state

    def get(self, state_id: StateId) -> State | None:
        return self._slot(state_id).state

    def create(self) -> None:
        """Create every registered state in identifier order."""
        for slot in self._slots.values():
            if slot.state is not None:
                slot.state.create()

    def handle_message(self, message: Message) -> None:
        """Apply stack messages, then pass the message to every running state."""
        kind = message.type
        if kind == MessageType.STATE_STACK_PUSH:
            slot = self._slot(message.state_id)
            if slot.state is None:
                raise KeyError(f"no state registered for {message.state_id!r}")
            self._stack.append(slot)
        elif kind == MessageType.STATE_STACK_POP:
            if not self._stack:
                raise IndexError("pop from an empty state stack")
            self._stack.pop()
        elif kind == MessageType.STATE_STACK_CLEAR:
            self._stack.clear()
        elif kind == MessageType.STATE_PROCESS:
            slot = self._slot(message.state_id)
            slot.update = bool(message.update)
            slot.render = bool(message.render)

        for slot in list(self._stack):
            if slot.state is not None:
                slot.state.handle_message(message)

    def update(self, dt: float) -> None:
        for slot in list(self._stack):
            if slot.state is not None and slot.update:
                slot.state.update(dt)

    def render(self, target) -> None:
        for slot in list(self._stack):
            if slot.state is not None and slot.render:
                slot.state.render(target)

    @property
    def active_states(self) -> tuple[State, ...]:
        """States on the stack, bottom first."""
        return tuple(slot.state for slot in self._stack if slot.state is not None)

    @property
    def is_empty(self) -> bool:
        return not self._stack

    def __len__(self) -> int:
        return len(self._stack)