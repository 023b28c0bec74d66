"""Build Excalidraw drawings of rectangles and bound arrows, as JSON."""

__version__ = "0.1.0"
__all__ = ["structures", "utils", "cli"]