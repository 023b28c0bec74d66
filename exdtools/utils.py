"""Helpers for building drawings: element factories, indices and arrows."""

from __future__ import annotations

import math
import string
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from .structures import (
    Binding,
    BoundElement,
    Element,
    ExcalidrawArrow,
    ExcalidrawFile,
    ExcalidrawRectangle,
    Side,
)

INDEX_ALPHABET = string.digits + string.ascii_lowercase


def generate_index(index: int) -> str:
    """Return the fractional index string for a running element number."""
    base = len(INDEX_ALPHABET)
    if index < 0:
        raise ValueError("index must not be negative")
    if index >= base * base:
        raise ValueError("index too high")
    first, last = divmod(index, base)
    return f"b{INDEX_ALPHABET[first]}{INDEX_ALPHABET[last]}"


@dataclass
class Generator:
    """Creates rectangles with consecutive indices."""

    index: int = 0

    def _next_index(self) -> str:
        self.index += 1
        return generate_index(self.index)

    def small_rectangle(self, x: float, y: float) -> ExcalidrawRectangle:
        return ExcalidrawRectangle(x=x, y=y, index=self._next_index())

    def big_rectangle(self, x: float, y: float) -> ExcalidrawRectangle:
        return ExcalidrawRectangle(
            x=x, y=y, width=100.0, height=100.0, index=self._next_index()
        )


def simple_drawing(elements: Iterable[Element]) -> ExcalidrawFile:
    """Wrap elements in a document with default settings."""
    return ExcalidrawFile(elements=list(elements))


_ANCHORS: dict[Side, Callable[[ExcalidrawRectangle], tuple[float, float]]] = {
    Side.LEFT: lambda r: (r.x, r.y + r.height / 2.0),
    Side.RIGHT: lambda r: (r.x + r.width, r.y + r.height / 2.0),
    Side.TOP: lambda r: (r.x + r.width / 2.0, r.y),
    Side.BOTTOM: lambda r: (r.x + r.width / 2.0, r.y + r.height),
}


def arrow_from_to(
    this: ExcalidrawRectangle,
    other: ExcalidrawRectangle,
    this_side: Side,
    other_side: Side,
) -> ExcalidrawArrow:
    """Create an arrow between the middles of two rectangle sides and bind it.

    The arrow is appended to the bound elements of ``this``; ``other`` is left
    bound to this arrow alone.
    """
    start_x, start_y = _ANCHORS[this_side](this)
    end_x, end_y = _ANCHORS[other_side](other)
    dx, dy = end_x - start_x, end_y - start_y
    arrow = ExcalidrawArrow(
        x=start_x,
        y=start_y,
        width=1.5,
        height=math.hypot(dx, dy),
        points=[(0.0, 0.0), (dx, dy)],
        start_binding=Binding(element_id=this.id, focus=0.0, gap=10.0),
        end_binding=Binding(element_id=other.id, focus=0.0, gap=10.0),
    )
    bound = BoundElement(id=arrow.id, kind="arrow")
    if this.bound_elements is None:
        this.bound_elements = [bound]
    else:
        this.bound_elements.append(bound)
    other.bound_elements = [BoundElement(id=arrow.id, kind="arrow")]
    return arrow