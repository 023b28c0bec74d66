"""Command that prints a small demonstration drawing as JSON."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from .structures import ExcalidrawFile, Side
from .utils import Generator, arrow_from_to, simple_drawing


def build_demo() -> ExcalidrawFile:
    """Build three rectangles with two arrows from the lower one to the others."""
    g = Generator()
    first = g.big_rectangle(100.0, 100.0)
    second = g.big_rectangle(-100.0, 100.0)
    third = g.big_rectangle(0.0, 0.0)
    arrow = arrow_from_to(third, second, Side.BOTTOM, Side.TOP)
    arrow2 = arrow_from_to(third, first, Side.BOTTOM, Side.TOP)
    return simple_drawing([first, second, third, arrow, arrow2])


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="exd-tools",
        description="Print a demonstration Excalidraw drawing as JSON.",
    )
    parser.parse_args(argv)
    print(build_demo().to_json())
    return 0