import pytest

from dropcatch.context import Context
from dropcatch.ids import StateId
from dropcatch.input import Cursor, Keyboard, Mouse
from dropcatch.message_bus import Message, MessageBus, MessageType
from dropcatch.resources import Resources
from dropcatch.state import State, StateStack


class Recorder(State):
    def __init__(self, context, tag="state"):
        super().__init__(context)
        self.tag = tag
        self.log = []

    def create(self):
        self.log.append("create")

    def handle_message(self, message):
        self.log.append(("message", message.type))

    def update(self, dt):
        self.log.append(("update", dt))

    def render(self, target):
        self.log.append(("render", target))


@pytest.fixture
def context():
    return Context(Keyboard(), Mouse(), Cursor(), MessageBus(), Resources())


@pytest.fixture
def stack(context):
    return StateStack(context)


def push(stack, state_id):
    stack.handle_message(Message(MessageType.STATE_STACK_PUSH, state_id=state_id))


def test_state_is_abstract(context):
    with pytest.raises(TypeError):
        State(context)


def test_state_exposes_context_services(context):
    state = Recorder(context)
    assert state.context is context
    assert state.keyboard is context.keyboard
    assert state.mouse is context.mouse
    assert state.cursor is context.cursor
    assert state.message_bus is context.message_bus
    assert state.resources is context.resources


def test_add_state_passes_context_and_args(stack, context):
    state = stack.add_state(StateId.GAME, Recorder, "extra")
    assert state.context is context
    assert state.tag == "extra"
    assert stack.get(StateId.GAME) is state


def test_add_state_replaces_previous(stack):
    first = stack.add_state(StateId.GAME, Recorder)
    second = stack.add_state(StateId.GAME, Recorder)
    assert stack.get(StateId.GAME) is second
    assert first is not second


def test_add_state_rejects_undefined_id(stack):
    with pytest.raises(KeyError):
        stack.add_state(StateId.UNDEFINED, Recorder)


def test_create_calls_every_state(stack):
    a = stack.add_state(StateId.MENU_MAIN, Recorder)
    b = stack.add_state(StateId.GAME_OVER, Recorder)
    stack.create()
    assert a.log == ["create"]
    assert b.log == ["create"]


def test_new_stack_is_empty(stack):
    assert stack.is_empty
    assert len(stack) == 0


def test_push_adds_state_and_forwards_message(stack):
    state = stack.add_state(StateId.MENU_MAIN, Recorder)
    push(stack, StateId.MENU_MAIN)
    assert stack.active_states == (state,)
    assert not stack.is_empty
    assert state.log == [("message", MessageType.STATE_STACK_PUSH)]


def test_push_unregistered_state_raises(stack):
    with pytest.raises(KeyError):
        push(stack, StateId.GAME)
    assert stack.is_empty
    assert len(stack) == 0


def test_push_undefined_raises(stack):
    with pytest.raises(KeyError):
        push(stack, StateId.UNDEFINED)
    assert stack.is_empty
    assert len(stack) == 0


def test_pop_removes_top(stack):
    bottom = stack.add_state(StateId.GAME, Recorder)
    stack.add_state(StateId.MENU_IN_GAME, Recorder)
    push(stack, StateId.GAME)
    push(stack, StateId.MENU_IN_GAME)
    stack.handle_message(Message(MessageType.STATE_STACK_POP))
    assert stack.active_states == (bottom,)


def test_pop_on_empty_raises(stack):
    with pytest.raises(IndexError):
        stack.handle_message(Message(MessageType.STATE_STACK_POP))


def test_clear_empties_stack(stack):
    state = stack.add_state(StateId.MENU_MAIN, Recorder)
    push(stack, StateId.MENU_MAIN)
    state.log.clear()
    stack.handle_message(Message(MessageType.STATE_STACK_CLEAR))
    assert stack.is_empty
    assert state.log == []


def test_update_and_render_reach_running_states(stack):
    state = stack.add_state(StateId.GAME, Recorder)
    push(stack, StateId.GAME)
    state.log.clear()
    stack.update(0.25)
    stack.render("screen")
    assert state.log == [("update", 0.25), ("render", "screen")]


def test_state_process_switches_update_off(stack):
    state = stack.add_state(StateId.GAME, Recorder)
    push(stack, StateId.GAME)
    stack.handle_message(
        Message(MessageType.STATE_PROCESS, state_id=StateId.GAME, update=False, render=True)
    )
    state.log.clear()
    stack.update(0.5)
    stack.render("screen")
    assert state.log == [("render", "screen")]


def test_state_process_applies_before_push(stack):
    state = stack.add_state(StateId.GAME, Recorder)
    stack.handle_message(
        Message(MessageType.STATE_PROCESS, state_id=StateId.GAME, update=True, render=False)
    )
    push(stack, StateId.GAME)
    state.log.clear()
    stack.update(0.5)
    stack.render("screen")
    assert state.log == [("update", 0.5)]


def test_states_not_on_stack_receive_nothing(stack):
    running = stack.add_state(StateId.GAME, Recorder)
    idle = stack.add_state(StateId.GAME_OVER, Recorder)
    push(stack, StateId.GAME)
    stack.update(0.1)
    assert idle.log == []
    assert ("update", 0.1) in running.log


def test_same_state_pushed_twice_runs_twice(stack):
    state = stack.add_state(StateId.GAME, Recorder)
    push(stack, StateId.GAME)
    push(stack, StateId.GAME)
    state.log.clear()
    stack.update(0.1)
    assert state.log == [("update", 0.1), ("update", 0.1)]
    assert len(stack) == 2