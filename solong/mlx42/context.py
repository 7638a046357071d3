"""The window context: images, render queue, input hooks and the main loop."""

from __future__ import annotations

import os
import time
from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, Mapping

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from solong.mlx42.errors import MlxErrno, MlxError  # noqa: E402
from solong.mlx42.images import Image, Instance  # noqa: E402
from solong.mlx42.renderqueue import DrawCall, sort_render_queue  # noqa: E402
from solong.mlx42.textures import Texture  # noqa: E402
from solong.mlx42.textures import texture_to_image as _texture_to_image  # noqa: E402

__all__ = ["Setting", "Key", "Action", "KeyData", "Mlx"]

_CLEAR_COLOR = (51, 51, 51)


class Setting(IntEnum):
    """Options that shape the window created by :class:`Mlx`."""

    STRETCH_IMAGE = 0
    FULLSCREEN = 1
    MAXIMIZED = 2
    DECORATED = 3
    HEADLESS = 4


_DEFAULT_SETTINGS: dict[Setting, int] = {
    Setting.STRETCH_IMAGE: False,
    Setting.FULLSCREEN: False,
    Setting.MAXIMIZED: False,
    Setting.DECORATED: True,
    Setting.HEADLESS: False,
}


class Key(IntEnum):
    """Keyboard key codes."""

    UNKNOWN = -1
    SPACE = 32
    APOSTROPHE = 39
    COMMA = 44
    MINUS = 45
    PERIOD = 46
    SLASH = 47
    DIGIT_0 = 48
    DIGIT_1 = 49
    DIGIT_2 = 50
    DIGIT_3 = 51
    DIGIT_4 = 52
    DIGIT_5 = 53
    DIGIT_6 = 54
    DIGIT_7 = 55
    DIGIT_8 = 56
    DIGIT_9 = 57
    SEMICOLON = 59
    EQUAL = 61
    A = 65
    B = 66
    C = 67
    D = 68
    E = 69
    F = 70
    G = 71
    H = 72
    I = 73  # noqa: E741
    J = 74
    K = 75
    L = 76
    M = 77
    N = 78
    O = 79  # noqa: E741
    P = 80
    Q = 81
    R = 82
    S = 83
    T = 84
    U = 85
    V = 86
    W = 87
    X = 88
    Y = 89
    Z = 90
    LEFT_BRACKET = 91
    BACKSLASH = 92
    RIGHT_BRACKET = 93
    GRAVE_ACCENT = 96
    ESCAPE = 256
    ENTER = 257
    TAB = 258
    BACKSPACE = 259
    INSERT = 260
    DELETE = 261
    RIGHT = 262
    LEFT = 263
    DOWN = 264
    UP = 265
    PAGE_UP = 266
    PAGE_DOWN = 267
    HOME = 268
    END = 269
    CAPS_LOCK = 280
    SCROLL_LOCK = 281
    NUM_LOCK = 282
    PRINT_SCREEN = 283
    PAUSE = 284
    F1 = 290
    F2 = 291
    F3 = 292
    F4 = 293
    F5 = 294
    F6 = 295
    F7 = 296
    F8 = 297
    F9 = 298
    F10 = 299
    F11 = 300
    F12 = 301
    LEFT_SHIFT = 340
    LEFT_CONTROL = 341
    LEFT_ALT = 342
    LEFT_SUPER = 343
    RIGHT_SHIFT = 344
    RIGHT_CONTROL = 345
    RIGHT_ALT = 346
    RIGHT_SUPER = 347
    MENU = 348


class Action(IntEnum):
    """What happened to a key or mouse button."""

    RELEASE = 0
    PRESS = 1
    REPEAT = 2


@dataclass(frozen=True)
class KeyData:
    """Details of one keyboard event passed to the key hook."""

    key: int
    action: Action
    scancode: int
    modifier: int


_SPECIAL_KEYS: dict[int, Key] = {
    pygame.K_ESCAPE: Key.ESCAPE,
    pygame.K_RETURN: Key.ENTER,
    pygame.K_TAB: Key.TAB,
    pygame.K_BACKSPACE: Key.BACKSPACE,
    pygame.K_INSERT: Key.INSERT,
    pygame.K_DELETE: Key.DELETE,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_UP: Key.UP,
    pygame.K_PAGEUP: Key.PAGE_UP,
    pygame.K_PAGEDOWN: Key.PAGE_DOWN,
    pygame.K_HOME: Key.HOME,
    pygame.K_END: Key.END,
    pygame.K_CAPSLOCK: Key.CAPS_LOCK,
    pygame.K_SCROLLLOCK: Key.SCROLL_LOCK,
    pygame.K_NUMLOCK: Key.NUM_LOCK,
    pygame.K_PRINTSCREEN: Key.PRINT_SCREEN,
    pygame.K_PAUSE: Key.PAUSE,
    pygame.K_F1: Key.F1,
    pygame.K_F2: Key.F2,
    pygame.K_F3: Key.F3,
    pygame.K_F4: Key.F4,
    pygame.K_F5: Key.F5,
    pygame.K_F6: Key.F6,
    pygame.K_F7: Key.F7,
    pygame.K_F8: Key.F8,
    pygame.K_F9: Key.F9,
    pygame.K_F10: Key.F10,
    pygame.K_F11: Key.F11,
    pygame.K_F12: Key.F12,
    pygame.K_LSHIFT: Key.LEFT_SHIFT,
    pygame.K_LCTRL: Key.LEFT_CONTROL,
    pygame.K_LALT: Key.LEFT_ALT,
    pygame.K_LSUPER: Key.LEFT_SUPER,
    pygame.K_RSHIFT: Key.RIGHT_SHIFT,
    pygame.K_RCTRL: Key.RIGHT_CONTROL,
    pygame.K_RALT: Key.RIGHT_ALT,
    pygame.K_RSUPER: Key.RIGHT_SUPER,
    pygame.K_MENU: Key.MENU,
}

# Mouse buttons numbered left, right, middle, then the extra buttons.
_MOUSE_BUTTONS = {1: 0, 3: 1, 2: 2, 6: 3, 7: 4, 8: 5, 9: 6, 10: 7}


def _translate_key(code: int) -> int:
    if ord("a") <= code <= ord("z"):
        return Key(code - 32)
    if code in _SPECIAL_KEYS:
        return _SPECIAL_KEYS[code]
    if 32 <= code <= 96:
        try:
            return Key(code)
        except ValueError:
            pass
    return Key.UNKNOWN


def _require_callable(func: object) -> None:
    if not callable(func):
        raise TypeError("hook must be callable")


class Mlx:
    """A window with its images, render queue, input hooks and main loop."""

    def __init__(
        self,
        width: int,
        height: int,
        title: str,
        resize: bool = False,
        settings: Mapping[Setting, int] | None = None,
    ) -> None:
        if width <= 0:
            raise ValueError("Window width must be positive")
        if height <= 0:
            raise ValueError("Window height must be positive")
        if title is None:
            raise ValueError("Window title can't be null")

        self.settings = dict(_DEFAULT_SETTINGS)
        for setting, value in (settings or {}).items():
            self.settings[Setting(setting)] = value

        self.width = width
        self.height = height
        self.title = title
        self.resizable = bool(resize)
        self.delta_time = 0.0
        self._initial_size = (width, height)
        self._images: list[Image] = []
        self._queue: list[DrawCall] = []
        self._needs_sort = False
        self._zdepth = 0
        self._loop_hooks: list[Callable[[], None]] = []
        self._key_hook: Callable[[KeyData], None] | None = None
        self._mouse_hook: Callable[[int, Action, int], None] | None = None
        self._scroll_hook: Callable[[float, float], None] | None = None
        self._cursor_hook: Callable[[float, float], None] | None = None
        self._close_hook: Callable[[], None] | None = None
        self._resize_hook: Callable[[int, int], None] | None = None
        self._held_keys: set[int] = set()
        self._should_close = False
        self._terminated = False
        self._open_window()
        self._start_time = time.perf_counter()

    # Window management

    def _window_flags(self) -> int:
        flags = 0
        if self.resizable:
            flags |= pygame.RESIZABLE
        if not self.settings[Setting.DECORATED]:
            flags |= pygame.NOFRAME
        if self.settings[Setting.FULLSCREEN]:
            flags |= pygame.FULLSCREEN
        return flags

    def _open_window(self) -> None:
        headless = bool(self.settings[Setting.HEADLESS])
        previous = os.environ.get("SDL_VIDEODRIVER")
        if headless:
            os.environ["SDL_VIDEODRIVER"] = "dummy"
        try:
            pygame.display.init()
        except pygame.error as exc:
            raise MlxError(MlxErrno.GLFWFAIL) from exc
        finally:
            if headless:
                if previous is None:
                    os.environ.pop("SDL_VIDEODRIVER", None)
                else:
                    os.environ["SDL_VIDEODRIVER"] = previous
        size = (self.width, self.height)
        if self.settings[Setting.MAXIMIZED] and not headless:
            info = pygame.display.Info()
            size = (info.current_w or self.width, info.current_h or self.height)
        try:
            pygame.display.set_mode(size, self._window_flags())
        except pygame.error as exc:
            pygame.display.quit()
            raise MlxError(MlxErrno.WINFAIL) from exc
        pygame.display.set_caption(self.title)

    def _check_alive(self) -> None:
        if self._terminated:
            raise RuntimeError("context has been terminated")

    def set_window_size(self, width: int, height: int) -> None:
        """Resize the window."""
        self._check_alive()
        self.width = width
        self.height = height
        pygame.display.set_mode((width, height), self._window_flags())

    def set_window_title(self, title: str) -> None:
        """Change the window title."""
        self._check_alive()
        if title is None:
            raise ValueError("Window title can't be null")
        self.title = title
        pygame.display.set_caption(title)

    # Images and the render queue

    def new_image(self, width: int, height: int) -> Image:
        """Create a blank image owned by this context."""
        self._check_alive()
        image = Image(width, height)
        self._images.insert(0, image)
        return image

    def texture_to_image(self, texture: Texture) -> Image:
        """Create an image owned by this context from a whole texture."""
        self._check_alive()
        image = _texture_to_image(texture)
        self._images.insert(0, image)
        return image

    def image_to_window(self, image: Image, x: int, y: int) -> int:
        """Place a new instance of ``image`` at ``(x, y)``; return its index."""
        self._check_alive()
        if image is None:
            raise ValueError("image can't be null")
        index = image.add_instance(x, y, self._zdepth)
        self._zdepth += 1
        self._queue.insert(0, DrawCall(image, index))
        self._needs_sort = True
        return index

    def delete_image(self, image: Image) -> None:
        """Remove ``image`` and all of its instances from this context."""
        if image is None:
            raise ValueError("image can't be null")
        self._queue = [call for call in self._queue if call.image is not image]
        self._images = [owned for owned in self._images if owned is not image]

    def set_instance_depth(self, instance: Instance, zdepth: int) -> None:
        """Change the depth of ``instance``; the queue is re-sorted lazily."""
        if instance is None:
            raise ValueError("instance can't be null")
        if instance.z == zdepth:
            return
        instance.z = zdepth
        self._needs_sort = True

    def render_order(self) -> list[DrawCall]:
        """Return the draw calls that would be drawn, back to front."""
        if self._needs_sort:
            self._needs_sort = False
            self._queue = sort_render_queue(self._queue)
        return [
            call
            for call in self._queue
            if call.image.enabled and call.image.instances[call.instance_id].enabled
        ]

    # Hooks

    def loop_hook(self, func: Callable[[], None]) -> None:
        """Add a function called once per frame, in the order added."""
        _require_callable(func)
        self._loop_hooks.append(func)

    def key_hook(self, func: Callable[[KeyData], None]) -> None:
        """Set the function called with each keyboard event."""
        _require_callable(func)
        self._key_hook = func

    def mouse_hook(self, func: Callable[[int, Action, int], None]) -> None:
        """Set the function called with ``(button, action, mods)``."""
        _require_callable(func)
        self._mouse_hook = func

    def scroll_hook(self, func: Callable[[float, float], None]) -> None:
        """Set the function called with ``(xoffset, yoffset)`` on scrolling."""
        _require_callable(func)
        self._scroll_hook = func

    def cursor_hook(self, func: Callable[[float, float], None]) -> None:
        """Set the function called with the cursor position when it moves."""
        _require_callable(func)
        self._cursor_hook = func

    def close_hook(self, func: Callable[[], None]) -> None:
        """Set the function called when the window is asked to close."""
        _require_callable(func)
        self._close_hook = func

    def resize_hook(self, func: Callable[[int, int], None]) -> None:
        """Set the function called with the new size when the window resizes."""
        _require_callable(func)
        self._resize_hook = func

    def is_key_down(self, key: int) -> bool:
        """Tell whether ``key`` is currently held down."""
        return key in self._held_keys

    # Main loop

    def _dispatch(self, event: pygame.event.Event) -> None:
        kind = event.type
        if kind == pygame.QUIT:
            self._should_close = True
            if self._close_hook:
                self._close_hook()
        elif kind in (pygame.KEYDOWN, pygame.KEYUP):
            key = _translate_key(event.key)
            action = Action.PRESS if kind == pygame.KEYDOWN else Action.RELEASE
            if action is Action.PRESS:
                self._held_keys.add(key)
            else:
                self._held_keys.discard(key)
            if self._key_hook:
                data = KeyData(
                    key,
                    action,
                    getattr(event, "scancode", 0),
                    getattr(event, "mod", 0),
                )
                self._key_hook(data)
        elif kind in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP):
            button = _MOUSE_BUTTONS.get(event.button)
            if button is not None and self._mouse_hook:
                action = (
                    Action.PRESS if kind == pygame.MOUSEBUTTONDOWN else Action.RELEASE
                )
                self._mouse_hook(button, action, pygame.key.get_mods())
        elif kind == pygame.MOUSEWHEEL:
            if self._scroll_hook:
                self._scroll_hook(float(event.x), float(event.y))
        elif kind == pygame.MOUSEMOTION:
            if self._cursor_hook:
                x, y = event.pos
                self._cursor_hook(float(x), float(y))
        elif kind == pygame.VIDEORESIZE:
            if self._resize_hook:
                self._resize_hook(event.w, event.h)

    def _run_loop_hooks(self) -> None:
        for hook in list(self._loop_hooks):
            if self._should_close:
                break
            hook()

    def _render(self) -> None:
        stretch = bool(self.settings[Setting.STRETCH_IMAGE])
        canvas_size = self._initial_size if stretch else (self.width, self.height)
        canvas = pygame.Surface(canvas_size)
        canvas.fill(_CLEAR_COLOR)
        surfaces: dict[int, pygame.Surface] = {}
        for call in self.render_order():
            image = call.image
            surface = surfaces.get(id(image))
            if surface is None:
                surface = pygame.image.frombuffer(
                    bytes(image.pixels), (image.width, image.height), "RGBA"
                )
                surfaces[id(image)] = surface
            instance = image.instances[call.instance_id]
            canvas.blit(surface, (instance.x, instance.y))
        display = pygame.display.get_surface()
        if display is None:
            return
        if canvas.get_size() != display.get_size():
            canvas = pygame.transform.scale(canvas, display.get_size())
        display.blit(canvas, (0, 0))
        pygame.display.flip()

    def loop(self) -> None:
        """Run frames until the window is closed."""
        self._check_alive()
        previous = 0.0
        while not self._should_close:
            now = time.perf_counter() - self._start_time
            self.delta_time = now - previous
            previous = now
            display = pygame.display.get_surface()
            if display is not None:
                self.width, self.height = display.get_size()
            self._run_loop_hooks()
            self._render()
            for event in pygame.event.get():
                self._dispatch(event)

    def close_window(self) -> None:
        """Ask the loop to stop after the current frame."""
        self._should_close = True

    def terminate(self) -> None:
        """Close the window and release every image, hook and draw call."""
        if self._terminated:
            return
        self._terminated = True
        self._should_close = True
        pygame.display.quit()
        self._loop_hooks.clear()
        self._queue.clear()
        self._images.clear()
        self._held_keys.clear()

    def __enter__(self) -> Mlx:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.terminate()