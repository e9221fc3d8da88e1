"""Keyboard and mouse state, read from a window backend each frame."""

from __future__ import annotations

from enum import IntEnum
from typing import Callable, Optional, Protocol, Tuple

from cometa.assertion import warning
from cometa.singleton import SingletonManager

RELEASE = 0
PRESS = 1
KEY_ESCAPE = 256
MOUSE_BUTTON_LEFT = 0
CURSOR_NORMAL = 0x00034001


class InputType(IntEnum):
    KEY_PRESSED = 1
    KEY_RELEASED = 2
    KEY_HOLD = 3
    MOUSE_MOVED = 4
    MOUSE_BUTTON_PRESSED = 5
    MOUSE_BUTTON_RELEASED = 6
    MOUSE_SCROLL = 7


class CursorMode(IntEnum):
    NONE = 0
    ENABLED = 1
    DISABLED = 2
    HIDDEN = 4
    LOCKED = 8


class InputBackend(Protocol):
    """The window operations input needs."""

    def poll_events(self) -> None: ...

    def get_cursor_pos(self) -> Tuple[float, float]: ...

    def get_key(self, key: int) -> int: ...

    def get_mouse_button(self, button: int) -> int: ...

    def set_cursor_mode(self, mode: int) -> None: ...


class Input(SingletonManager):
    """Tracks cursor movement and answers key and button queries."""

    def __init__(
        self,
        backend: Optional[InputBackend] = None,
        on_close: Optional[Callable[[], None]] = None,
    ) -> None:
        self.backend = backend
        self.on_close = on_close
        self.position = (0.0, 0.0)
        self.delta = (0.0, 0.0)
        self.cursor_mode = CursorMode.NONE

    def _window(self) -> InputBackend:
        if self.backend is None:
            raise RuntimeError("input has no window backend")
        return self.backend

    def _cursor(self) -> Tuple[float, float]:
        x, y = self._window().get_cursor_pos()
        return float(x), float(y)

    def init(self) -> None:
        self.position = self._cursor()

    def update(self) -> None:
        window = self._window()
        window.poll_events()
        x, y = self._cursor()
        if self.cursor_mode != CursorMode.ENABLED:
            self.delta = (x - self.position[0], y - self.position[1])
            self.position = (x, y)

    def close(self) -> None:
        pass

    def is_key_pressed(self, keycode: int) -> bool:
        return self._window().get_key(keycode) == PRESS

    def is_key_released(self, keycode: int) -> bool:
        return self._window().get_key(keycode) == RELEASE

    def is_mouse_button_pressed(self, button: int) -> bool:
        return self._window().get_mouse_button(button) == PRESS

    def mouse_position(self) -> Tuple[float, float]:
        """Current cursor position read from the window."""
        return self._cursor()

    def mouse_delta(self) -> Tuple[float, float]:
        """Cursor movement measured on the last update."""
        return self.delta

    def handle_key(
        self,
        key: int,
        action: int,
        want_capture_keyboard: bool = False,
        want_capture_mouse: bool = False,
    ) -> bool:
        """React to a key or button action; return True when it belongs to the UI."""
        if key == KEY_ESCAPE and action == PRESS:
            mode = self.cursor_mode
            if mode in (CursorMode.HIDDEN, CursorMode.DISABLED):
                self._window().set_cursor_mode(CURSOR_NORMAL)
                self.delta = (0.0, 0.0)
                self.cursor_mode = CursorMode.ENABLED
            elif mode == CursorMode.ENABLED:
                if self.on_close is not None:
                    self.on_close()
                self.cursor_mode = CursorMode.NONE
            elif mode != CursorMode.NONE:
                warning("Not implemented cursor change of state")
            return False

        if key == MOUSE_BUTTON_LEFT and action == PRESS:
            mode = self.cursor_mode
            if mode in (CursorMode.ENABLED, CursorMode.NONE):
                print(f"IO want to capture keyboard: {int(want_capture_keyboard)}")
                print(f"IO want to capture mouse: {int(want_capture_mouse)}")
                return bool(want_capture_keyboard or want_capture_mouse)
            if mode not in (CursorMode.DISABLED, CursorMode.HIDDEN):
                warning("Not implemented cursor change of state")
        return False