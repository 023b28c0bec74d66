# exdtools

exdtools writes Excalidraw drawings from Python. It models Excalidraw
rectangles, arrows and the document that holds them. It can write a document
as JSON and read one back. Helpers place rectangles and join them with bound
arrows.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install .[test]
```

## Command line

```
exdtools
```

This prints a small demonstration drawing to standard output as compact JSON.
The drawing has three 100×100 rectangles. Two arrows run from the bottom of the
rectangle at (0, 0) to the tops of the other two rectangles. The command takes
no options apart from `--help`. To open the drawing in Excalidraw, save it to a
file:

```
exdtools > demo.excalidraw
```

## Library use

```python
from exdtools.structures import Side
from exdtools.utils import Generator, arrow_from_to, simple_drawing

gen = Generator()
a = gen.big_rectangle(0.0, 0.0)
b = gen.big_rectangle(200.0, 0.0)
arrow = arrow_from_to(a, b, Side.RIGHT, Side.LEFT)

drawing = simple_drawing([a, b, arrow])
print(drawing.to_json())
```

### `exdtools.utils`

- `Generator.big_rectangle(x, y)` makes a 100×100 rectangle.
  `Generator.small_rectangle(x, y)` makes a zero-sized rectangle.
  - Every call gives the rectangle the next fractional index: `b01`, `b02`, and so on.
  - The running count is kept in `Generator.index`.
- `generate_index(n)` returns the index string for `n`.
  - `0` gives `b00`, `37` gives `b11` and `1295` gives `bzz`.
  - It raises `ValueError` when `n` is negative or greater than 1295.
- `arrow_from_to(this, other, this_side, other_side)` makes an arrow from the middle of one side of `this` to the middle of one side of `other`.
  - Each side is a `Side` member: `RIGHT`, `LEFT`, `TOP` or `BOTTOM`.
  - Both ends of the arrow are bound to their rectangles.
  - The arrow is appended to the bound elements of `this`.
  - The bound elements of `other` are replaced by this arrow alone.
- `simple_drawing(elements)` wraps elements in an `ExcalidrawFile` that has default settings.

### `exdtools.structures`

- `ExcalidrawRectangle` and `ExcalidrawArrow` are dataclasses.
  - Their defaults match what Excalidraw writes.
  - Each new element gets a random 22-character id and the current time in milliseconds.
- `ExcalidrawFile` is a whole document, with its `AppState` and its `Files`.
- `to_dict()` and `from_dict()` convert objects to and from JSON-ready dictionaries. `ExcalidrawFile` also has `to_json()` and `from_json()`.
- `element_from_dict(data)` builds a rectangle or an arrow, chosen by the object's `type`.
- When data is malformed, reading raises `ValueError`. This covers a missing field, a wrong type and an unknown element type.

## Limitations

- Only rectangles and arrows are supported. Reading any other element type raises `ValueError`.
- Embedded files (`files`) and locked multi-selections are always empty. Anything stored in them is dropped when a document is read.
- The command line tool only prints the fixed demonstration drawing. It does not read, edit or render drawings.