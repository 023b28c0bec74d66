"""Data model of an Excalidraw drawing and its JSON form."""

from __future__ import annotations

import json
import random
import string
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union

ID_CHARSET = string.ascii_uppercase + string.ascii_lowercase + string.digits + "-_"
ID_LENGTH = 22
DEFAULT_SOURCE = "https://excalidraw.com"
_U64_MAX = 2**64 - 1


def rand_element_id() -> str:
    """Return a random element id of 22 URL-safe characters."""
    return "".join(random.choices(ID_CHARSET, k=ID_LENGTH))


def updated_timestamp() -> int:
    """Return the current time in milliseconds since the Unix epoch."""
    return time.time_ns() // 1_000_000


class Side(Enum):
    """A side of a rectangle that an arrow can attach to."""

    RIGHT = "right"
    LEFT = "left"
    TOP = "top"
    BOTTOM = "bottom"


def _coerce(value: Any, kind: type, key: str) -> Any:
    if kind is float and type(value) is int:
        return float(value)
    if isinstance(value, bool) != (kind is bool) or not isinstance(value, kind):
        raise ValueError(f"field {key!r} must be of type {kind.__name__}")
    return value


def _mapping(data: Any, what: str) -> dict:
    if not isinstance(data, dict):
        raise ValueError(f"{what} must be a JSON object")
    return data


def _typed(data: dict, key: str, kind: type, optional: bool = False) -> Any:
    if optional:
        value = data.get(key)
        return None if value is None else _coerce(value, kind, key)
    if key not in data:
        raise ValueError(f"missing field {key!r}")
    return _coerce(data[key], kind, key)


def _point(value: Any, key: str) -> tuple[float, float]:
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        raise ValueError(f"field {key!r} must hold pairs of numbers")
    x, y = (_coerce(v, float, key) for v in value)
    return (x, y)


@dataclass
class Roundness:
    """Corner rounding of an element."""

    kind: int = 3

    def to_dict(self) -> dict:
        return {"type": self.kind}

    @classmethod
    def from_dict(cls, data: Any) -> Roundness:
        data = _mapping(data, "roundness")
        return cls(kind=_typed(data, "type", int))


@dataclass
class BoundElement:
    """Reference from an element to another element bound to it."""

    id: str
    kind: str

    def to_dict(self) -> dict:
        return {"id": self.id, "type": self.kind}

    @classmethod
    def from_dict(cls, data: Any) -> BoundElement:
        data = _mapping(data, "bound element")
        return cls(id=_typed(data, "id", str), kind=_typed(data, "type", str))


@dataclass
class Binding:
    """Attachment of an arrow end to an element."""

    element_id: str
    focus: float = 0.0
    gap: float = 10.0

    def to_dict(self) -> dict:
        return {"elementId": self.element_id, "focus": self.focus, "gap": self.gap}

    @classmethod
    def from_dict(cls, data: Any) -> Binding:
        data = _mapping(data, "binding")
        return cls(
            element_id=_typed(data, "elementId", str),
            focus=_typed(data, "focus", float),
            gap=_typed(data, "gap", float),
        )


@dataclass
class LockedMultiSelections:
    """Locked multi-selections of the editor; always empty here."""

    def to_dict(self) -> dict:
        return {}


@dataclass
class AppState:
    """Editor state stored alongside the drawing."""

    grid_size: int = 20
    grid_step: int = 5
    grid_mode_enabled: bool = False
    view_background_color: str = "#ffffff"
    locked_multi_selections: LockedMultiSelections = field(
        default_factory=LockedMultiSelections
    )

    def to_dict(self) -> dict:
        return {
            "gridSize": self.grid_size,
            "gridStep": self.grid_step,
            "gridModeEnabled": self.grid_mode_enabled,
            "viewBackgroundColor": self.view_background_color,
            "lockedMultiSelections": self.locked_multi_selections.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Any) -> AppState:
        data = _mapping(data, "appState")
        _mapping(_typed(data, "lockedMultiSelections", dict), "lockedMultiSelections")
        return cls(
            grid_size=_typed(data, "gridSize", int),
            grid_step=_typed(data, "gridStep", int),
            grid_mode_enabled=_typed(data, "gridModeEnabled", bool),
            view_background_color=_typed(data, "viewBackgroundColor", str),
            locked_multi_selections=LockedMultiSelections(),
        )


@dataclass
class Files:
    """Embedded files of a drawing; always empty here."""

    def to_dict(self) -> dict:
        return {}


@dataclass
class _ElementBase:
    id: str = field(default_factory=rand_element_id)
    kind: str = ""
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0
    angle: int = 0
    stroke_color: str = "#000000"
    background_color: str = "transparent"
    fill_style: str = "solid"
    stroke_width: int = 1
    stroke_style: str = "solid"
    roughness: int = 1
    opacity: int = 100
    group_ids: list[str] = field(default_factory=list)
    frame_id: str | None = None
    index: str = ""
    roundness: Roundness | None = None
    seed: int = 0
    version: int = 1
    version_nonce: int = 0
    is_deleted: bool = False
    bound_elements: Any = None
    updated: int = field(default_factory=updated_timestamp)
    link: str | None = None
    locked: bool = False

    def _base_dict(self, bound_elements: Any) -> dict:
        return {
            "id": self.id,
            "type": self.kind,
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
            "angle": self.angle,
            "strokeColor": self.stroke_color,
            "backgroundColor": self.background_color,
            "fillStyle": self.fill_style,
            "strokeWidth": self.stroke_width,
            "strokeStyle": self.stroke_style,
            "roughness": self.roughness,
            "opacity": self.opacity,
            "groupIds": list(self.group_ids),
            "frameId": self.frame_id,
            "index": self.index,
            "roundness": None if self.roundness is None else self.roundness.to_dict(),
            "seed": self.seed,
            "version": self.version,
            "versionNonce": self.version_nonce,
            "isDeleted": self.is_deleted,
            "boundElements": bound_elements,
            "updated": self.updated,
            "link": self.link,
            "locked": self.locked,
        }

    @staticmethod
    def _base_kwargs(data: dict) -> dict:
        group_ids = _typed(data, "groupIds", list)
        roundness = data.get("roundness")
        return {
            "id": _typed(data, "id", str),
            "kind": _typed(data, "type", str),
            "x": _typed(data, "x", float),
            "y": _typed(data, "y", float),
            "width": _typed(data, "width", float),
            "height": _typed(data, "height", float),
            "angle": _typed(data, "angle", int),
            "stroke_color": _typed(data, "strokeColor", str),
            "background_color": _typed(data, "backgroundColor", str),
            "fill_style": _typed(data, "fillStyle", str),
            "stroke_width": _typed(data, "strokeWidth", int),
            "stroke_style": _typed(data, "strokeStyle", str),
            "roughness": _typed(data, "roughness", int),
            "opacity": _typed(data, "opacity", int),
            "group_ids": [_coerce(g, str, "groupIds") for g in group_ids],
            "frame_id": _typed(data, "frameId", str, optional=True),
            "index": _typed(data, "index", str),
            "roundness": None if roundness is None else Roundness.from_dict(roundness),
            "seed": _typed(data, "seed", int),
            "version": _typed(data, "version", int),
            "version_nonce": _typed(data, "versionNonce", int),
            "is_deleted": _typed(data, "isDeleted", bool),
            "updated": _typed(data, "updated", int),
            "link": _typed(data, "link", str, optional=True),
            "locked": _typed(data, "locked", bool),
        }


@dataclass
class ExcalidrawRectangle(_ElementBase):
    """A rectangle element."""

    kind: str = "rectangle"
    index: str = "b01"
    roundness: Roundness | None = field(default_factory=lambda: Roundness(3))
    seed: int = 1
    version: int = 12
    version_nonce: int = field(default_factory=lambda: random.randrange(_U64_MAX))
    bound_elements: list[BoundElement] | None = None

    def to_dict(self) -> dict:
        bound = (
            None
            if self.bound_elements is None
            else [b.to_dict() for b in self.bound_elements]
        )
        return self._base_dict(bound)

    @classmethod
    def from_dict(cls, data: Any) -> ExcalidrawRectangle:
        data = _mapping(data, "rectangle")
        raw = data.get("boundElements")
        if raw is not None and not isinstance(raw, list):
            raise ValueError("field 'boundElements' must be a list")
        bound = None if raw is None else [BoundElement.from_dict(b) for b in raw]
        return cls(bound_elements=bound, **cls._base_kwargs(data))


@dataclass
class ExcalidrawArrow(_ElementBase):
    """An arrow element, drawn from its (x, y) along relative points."""

    kind: str = "arrow"
    points: list[tuple[float, float]] = field(
        default_factory=lambda: [(0.0, 0.0), (0.0, 0.0)]
    )
    last_committed_point: tuple[float, float] | None = None
    start_binding: Binding | None = None
    end_binding: Binding | None = None
    start_arrowhead: str | None = None
    end_arrowhead: str | None = "arrow"
    elbowed: bool = False

    def to_dict(self) -> dict:
        result = self._base_dict(self.bound_elements)
        result.update(
            {
                "points": [list(p) for p in self.points],
                "lastCommittedPoint": (
                    None
                    if self.last_committed_point is None
                    else list(self.last_committed_point)
                ),
                "startBinding": (
                    None if self.start_binding is None else self.start_binding.to_dict()
                ),
                "endBinding": (
                    None if self.end_binding is None else self.end_binding.to_dict()
                ),
                "startArrowhead": self.start_arrowhead,
                "endArrowhead": self.end_arrowhead,
                "elbowed": self.elbowed,
            }
        )
        return result

    @classmethod
    def from_dict(cls, data: Any) -> ExcalidrawArrow:
        data = _mapping(data, "arrow")
        last = data.get("lastCommittedPoint")
        start = data.get("startBinding")
        end = data.get("endBinding")
        return cls(
            bound_elements=data.get("boundElements"),
            points=[_point(p, "points") for p in _typed(data, "points", list)],
            last_committed_point=None if last is None else _point(last, "lastCommittedPoint"),
            start_binding=None if start is None else Binding.from_dict(start),
            end_binding=None if end is None else Binding.from_dict(end),
            start_arrowhead=_typed(data, "startArrowhead", str, optional=True),
            end_arrowhead=_typed(data, "endArrowhead", str, optional=True),
            elbowed=_typed(data, "elbowed", bool),
            **cls._base_kwargs(data),
        )


Element = Union[ExcalidrawRectangle, ExcalidrawArrow]


def element_from_dict(data: Any) -> Element:
    """Build a rectangle or an arrow from its JSON object, chosen by its type."""
    data = _mapping(data, "element")
    kind = data.get("type")
    if kind == "rectangle":
        return ExcalidrawRectangle.from_dict(data)
    if kind == "arrow":
        return ExcalidrawArrow.from_dict(data)
    raise ValueError(f"unknown element type {kind!r}")


@dataclass
class ExcalidrawFile:
    """A whole Excalidraw document."""

    kind: str = "excalidraw"
    version: int = 2
    source: str = DEFAULT_SOURCE
    elements: list[Element] = field(default_factory=list)
    app_state: AppState = field(default_factory=AppState)
    files: Files = field(default_factory=Files)

    def to_dict(self) -> dict:
        return {
            "type": self.kind,
            "version": self.version,
            "source": self.source,
            "elements": [e.to_dict() for e in self.elements],
            "appState": self.app_state.to_dict(),
            "files": self.files.to_dict(),
        }

    def to_json(self) -> str:
        """Serialise to compact JSON."""
        return json.dumps(self.to_dict(), separators=(",", ":"))

    @classmethod
    def from_dict(cls, data: Any) -> ExcalidrawFile:
        data = _mapping(data, "file")
        _mapping(_typed(data, "files", dict), "files")
        return cls(
            kind=_typed(data, "type", str),
            version=_typed(data, "version", int),
            source=_typed(data, "source", str),
            elements=[element_from_dict(e) for e in _typed(data, "elements", list)],
            app_state=AppState.from_dict(_typed(data, "appState", dict)),
            files=Files(),
        )

    @classmethod
    def from_json(cls, text: str) -> ExcalidrawFile:
        """Parse a document from JSON text; raise ValueError if it is malformed."""
        return cls.from_dict(json.loads(text))