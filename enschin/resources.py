"""Loading of colours, models, terrains and sprites from JSON descriptions."""

from __future__ import annotations

import json
import re
from typing import Any, Callable, Dict, Iterable, List, Optional, TypeVar

from .color import Color
from .model import Model
from .sprites import Sprite, SpriteSheet
from .terrain import TerrainDefinition
from .vectors import Vec2f, Vec2i

__all__ = ["CommonResources"]

T = TypeVar("T")


def _read_json(path: str) -> Any:
    with open(path, encoding="utf-8") as stream:
        return json.load(stream)


def _read_object(path: str) -> Dict[str, Any]:
    values = _read_json(path)
    if not isinstance(values, dict):
        raise ValueError(f"{path}: expected a JSON object")
    return values


def _padded(values: Iterable[Any], size: int, convert: Callable[[Any], T], empty: T) -> List[T]:
    items = [convert(v) for v in list(values)[:size]]
    return items + [empty] * (size - len(items))


def _floats(values: Iterable[Any], size: int) -> List[float]:
    return _padded(values, size, float, 0.0)


def _uints(values: Iterable[Any], size: int) -> List[int]:
    return _padded(values, size, int, 0)


def _stem(path: str) -> str:
    name = re.split(r"[/\\]", path)[-1]
    return name.rpartition(".")[0] if "." in name else name


def _insert(table: Dict[str, T], key: str, factory: Callable[[], T]) -> None:
    """Add an entry unless the key is already taken."""
    if key not in table:
        table[key] = factory()


class CommonResources:
    """Named resources shared by scenes.

    A resource file is a JSON object whose optional members list further
    files: ``ressources`` (nested resource files), ``colors``, ``terrains``,
    ``models`` and ``sprite_sheets``, plus ``sprites`` listing image paths.
    A name that is already known keeps its first definition.
    """

    def __init__(self, path: Optional[str] = None) -> None:
        self._terrains: Dict[str, TerrainDefinition] = {}
        self._models: Dict[str, Model] = {}
        self._sprite_sheets: Dict[str, SpriteSheet] = {}
        self._sprites: Dict[str, Sprite] = {}
        self._colors: Dict[str, Color] = {}
        if path is not None:
            self.load(path)

    def load(self, path: str) -> None:
        """Load every resource described by the file at ``path``."""
        values = _read_object(path)
        for nested in values.get("ressources", []):
            self.load(nested)
        for file in values.get("colors", []):
            for name, rgba in _read_object(file).items():
                _insert(self._colors, name, lambda rgba=rgba: Color(*_floats(rgba, 4)))
        for file in values.get("terrains", []):
            for name, entry in _read_object(file).items():
                _insert(self._terrains, name, lambda entry=entry: self._terrain(entry))
        for file in values.get("models", []):
            for name, entry in _read_object(file).items():
                model = self._model(entry)
                if model is not None:
                    _insert(self._models, name, lambda model=model: model)
        for file in values.get("sprite_sheets", []):
            for name, entry in _read_object(file).items():
                _insert(self._sprite_sheets, name, lambda entry=entry: self._sprite_sheet(entry))
        for texture_path in values.get("sprites", []):
            _insert(self._sprites, _stem(texture_path), lambda p=texture_path: Sprite(p))

    @staticmethod
    def _terrain(entry: Dict[str, Any]) -> TerrainDefinition:
        amount = int(entry.get("amount_of_vertices", 0))
        return TerrainDefinition(_floats(entry.get("vertices", []), amount * 4), amount)

    @staticmethod
    def _model(entry: Dict[str, Any]) -> Optional[Model]:
        if "amount_of_vertices" in entry:
            vertex_count = int(entry["amount_of_vertices"])
            index_count = int(entry.get("amount_of_indices", 0))
            return Model(
                _floats(entry.get("vertices", []), vertex_count * 4),
                False,
                _uints(entry.get("indices", []), index_count),
            )
        if "width" in entry:
            return Model.from_size(
                Vec2f(float(entry.get("width", 0.0)), float(entry.get("height", 0.0)))
            )
        if "radius" in entry:
            return Model.from_radius(float(entry["radius"]))
        return None

    @staticmethod
    def _sprite_sheet(entry: Dict[str, Any]) -> SpriteSheet:
        return SpriteSheet(
            entry["texture"],
            Vec2i(int(entry.get("sprite_width", 0)), int(entry.get("sprite_height", 0))),
            int(entry.get("fps", 0)),
        )

    def get_model(self, key: str) -> Model:
        return self._models[key]

    def get_sprite_sheet(self, key: str) -> SpriteSheet:
        return self._sprite_sheets[key]

    def get_sprite(self, key: str) -> Sprite:
        return self._sprites[key]

    def get_terrain(self, key: str) -> TerrainDefinition:
        return self._terrains[key]

    def get_color(self, key: str) -> Color:
        return self._colors[key]