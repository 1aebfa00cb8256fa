"""Named input events bound to keys and mouse buttons."""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Callable, Dict, Iterable, Optional, Sequence, Tuple

from .mouse import translate_mouse_position
from .vectors import Vec2f

__all__ = ["MappingType", "Mapping", "Keyboard", "Input", "KEYMOUSE", "CONTROLLER", "TOUCH"]

KEYMOUSE = 0
CONTROLLER = 1
TOUCH = 2

# Codes below this are treated as mouse buttons.
_MOUSE_BUTTON_LIMIT = 10


class MappingType(Enum):
    KEY = auto()
    MOUSE_BUTTON = auto()
    CONTROLLER = auto()


@dataclass(frozen=True)
class Mapping:
    """Binds a key or button code to the name of an input event."""

    mapping_type: MappingType
    key: int
    event: str


Poll = Callable[[MappingType, int], bool]


class Keyboard:
    """Sets input events from the state of their mapped keys and buttons."""

    def __init__(self, mappings: Iterable[Mapping] = ()) -> None:
        self.mappings: Tuple[Mapping, ...] = tuple(mappings)

    def update(self, poll: Poll, events: Dict[str, bool]) -> None:
        """Store ``poll(mapping_type, key)`` for every mapped event."""
        for mapping in self.mappings:
            events[mapping.event] = bool(poll(mapping.mapping_type, mapping.key))


def _read_json(path: str) -> Any:
    with open(path, encoding="utf-8") as stream:
        return json.load(stream)


class Input:
    """Input events and cursor position of a scene.

    An event file is a JSON object with an ``events`` list of names and an
    optional ``keyboard_mapping`` path to an object mapping names to codes.
    Events start out as triggered until the first update.
    """

    def __init__(self, event_path: Optional[str] = None) -> None:
        self.keyboard = Keyboard()
        self.input_type = KEYMOUSE
        self.cursor_pos = Vec2f(0.0, 0.0)
        self.events: Dict[str, bool] = {}
        if event_path is not None:
            self.load(event_path)

    def load(self, event_path: str) -> None:
        """Register the events and key bindings described at ``event_path``."""
        values = _read_json(event_path)
        if not isinstance(values, dict):
            raise ValueError(f"{event_path}: expected a JSON object")
        for name in values.get("events", []):
            self.events.setdefault(str(name), True)
        if "keyboard_mapping" not in values:
            return
        bindings = _read_json(values["keyboard_mapping"])
        if not isinstance(bindings, dict):
            raise ValueError(f"{values['keyboard_mapping']}: expected a JSON object")
        mappings = []
        for name in self.events:
            if name in bindings:
                code = int(bindings[name])
                kind = MappingType.MOUSE_BUTTON if code < _MOUSE_BUTTON_LIMIT else MappingType.KEY
                mappings.append(Mapping(kind, code, name))
            self.events[name] = True
        self.keyboard = Keyboard(mappings)

    def update(
        self,
        poll: Poll,
        cursor: Sequence[float],
        window_size: Sequence[int],
        fov: float,
    ) -> None:
        """Refresh events and the cursor position from the current device state."""
        if self.input_type == KEYMOUSE:
            self.keyboard.update(poll, self.events)
            x, y = cursor
            width, height = window_size
            self.cursor_pos = translate_mouse_position(fov, x, y, width, height)

    def is_event(self, event_key: str) -> bool:
        """Whether the named event is triggered; unknown names raise KeyError."""
        return self.events[event_key]