# dropcatch

A small arcade game built on pygame. Circles fall from the top of a
480×640 window. You steer a box along the bottom and catch them. If a circle
falls past the bottom edge, the game is over.

After every eleven catches the game speeds up. The next circle falls 10 units
per second faster, and the gap between spawns shrinks by 0.01 s. The gap
starts at 3 s and never drops below 0.05 s. Each circle moves in one of three
patterns: straight down, zigzag or spiral.

## Installing

```
pip install .
```

This installs `pygame`, which provides the window, input and drawing.

## Playing

```
dropcatch
dropcatch --assets path/to/assets
```

The game loads its textures from `<assets>/images/`. The assets directory
defaults to `assets` in the current directory. It needs these five files:

- `button_start.png`
- `button_exit.png`
- `button_continue.png`
- `circle.png`
- `box.png`

If one of them is missing or cannot be read, `dropcatch` prints the error to
stderr and exits with status 1.

Controls:

- **A** / **D**: move left / right
- **Esc**: pause the game and open the in-game menu (Continue / Exit)
- **Left mouse button**: click menu buttons. A click counts when the button
  is released over the button it was pressed on.

The main menu has Start and Exit. The game-over pop-up has Exit only.

## What it does not do

The game shows no score and plays no sound. It has no restart: after a game
over the only choice is to exit. It saves nothing between runs.

## Using the parts

The modules also work on their own:

- `dropcatch.message_bus`: `MessageBus` queues `Message` objects. It has
  helpers such as `send_state_stack_push`, `send_state_stack_pop`,
  `send_state_stack_clear`, `send_state_process` and `send_close_app`.
  `poll()` returns the next message, or `None` once the current round is used
  up. Messages sent while a round is being drained are held back for the
  next round.
- `dropcatch.input`: `Keyboard`, `Mouse` and `Cursor` take `InputEvent`s from
  `dropcatch.events`. They record what happened in each frame, which
  `FrameCounter.update_frame()` advances:
  - `is_clicked(code)` is true while the code is held.
  - `is_just_clicked(code)` is true in the frame it went down.
  - `is_released(code)` is true in the frame it went up.
- `dropcatch.events`: `KeyHandler`, `MouseButtonHandler` and
  `CursorPosHandler` turn raw callbacks into queued `InputEvent`s.
- `dropcatch.event_manager`: `EventManager` passes pygame events to those
  handlers, and `poll_events()` yields the queued input events.
- `dropcatch.state`: `StateStack` holds one `State` per `StateId` and runs the
  states that are pushed. `MenuMain`, `MenuInGame` and `GameOver` live in
  `dropcatch.menus`, and `Game` lives in `dropcatch.game`.
- `dropcatch.units`: `Player`, `Enemy`, `Box`, `Movement` / `MovementType` and
  `EnemySpawner`. You can pass a `random.Random` to `EnemySpawner` to get
  repeatable spawns.
- `dropcatch.draw_manager`: `DrawManager` draws layered `Drawable` objects
  onto its own surface, then tints it and blits it onto a target.
- `dropcatch.clock`: `Clock.elapsed()` returns the seconds since its
  previous call. The time source can be replaced.
- `dropcatch.application`: `Application` ties these parts together and runs
  the loop. `main()` is the `dropcatch` command.

```python
from dropcatch.ids import StateId
from dropcatch.message_bus import MessageBus, MessageType

bus = MessageBus()
bus.send_state_stack_push(StateId.GAME)
message = bus.poll()
assert message.type is MessageType.STATE_STACK_PUSH
assert message.state_id is StateId.GAME
assert bus.poll() is None
```

```python
from dropcatch.events import EventType, InputEvent
from dropcatch.input import FrameCounter, Keyboard

keyboard = Keyboard()
keyboard.handle_event(InputEvent(EventType.KEY_PRESSED, code=97))
assert keyboard.is_just_clicked(97)
FrameCounter.update_frame()
assert keyboard.is_clicked(97) and not keyboard.is_just_clicked(97)
```