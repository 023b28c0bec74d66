import pytest

from exdtools.structures import ExcalidrawRectangle, Side
from exdtools.utils import Generator, arrow_from_to, generate_index, simple_drawing


@pytest.mark.parametrize(
    "index, expected",
    [(0, "b00"), (1, "b01"), (37, "b11"), (36 * 36 - 1, "bzz")],
)
def test_generate_index(index, expected):
    assert generate_index(index) == expected


@pytest.mark.parametrize("index", [36 * 36, 5000, -1])
def test_generate_index_out_of_range(index):
    with pytest.raises(ValueError):
        generate_index(index)


def test_generator_counts_up():
    g = Generator()
    small = g.small_rectangle(3.0, 4.0)
    big = g.big_rectangle(-1.0, 2.0)
    assert small.index == "b01"
    assert (small.x, small.y, small.width, small.height) == (3.0, 4.0, 0.0, 0.0)
    assert big.index == "b02"
    assert (big.x, big.y, big.width, big.height) == (-1.0, 2.0, 100.0, 100.0)
    assert g.index == 2


def test_generator_exhausts_indices():
    g = Generator(index=36 * 36 - 1)
    with pytest.raises(ValueError):
        g.big_rectangle(0.0, 0.0)


def test_arrow_right_to_left():
    a = ExcalidrawRectangle(x=0.0, y=0.0, width=100.0, height=100.0)
    b = ExcalidrawRectangle(x=200.0, y=0.0, width=100.0, height=100.0)
    arrow = arrow_from_to(a, b, Side.RIGHT, Side.LEFT)
    assert (arrow.x, arrow.y) == (100.0, 50.0)
    assert arrow.points == [(0.0, 0.0), (100.0, 0.0)]
    assert arrow.width == 1.5
    assert arrow.height == 100.0
    assert arrow.start_binding.element_id == a.id
    assert arrow.end_binding.element_id == b.id
    assert arrow.start_binding.gap == 10.0
    assert arrow.end_binding.focus == 0.0


def test_arrow_height_is_length():
    a = ExcalidrawRectangle(x=0.0, y=0.0)
    b = ExcalidrawRectangle(x=30.0, y=40.0)
    arrow = arrow_from_to(a, b, Side.TOP, Side.TOP)
    assert arrow.height == 50.0


_THIS = ExcalidrawRectangle(x=10.0, y=20.0, width=100.0, height=60.0)
_THIS_ANCHORS = {
    Side.RIGHT: (110.0, 50.0),
    Side.LEFT: (10.0, 50.0),
    Side.TOP: (60.0, 20.0),
    Side.BOTTOM: (60.0, 80.0),
}
_OTHER_ANCHORS = {
    Side.RIGHT: (540.0, 325.0),
    Side.LEFT: (500.0, 325.0),
    Side.TOP: (520.0, 300.0),
    Side.BOTTOM: (520.0, 350.0),
}


@pytest.mark.parametrize("this_side", list(Side))
@pytest.mark.parametrize("other_side", list(Side))
def test_arrow_anchors_for_every_side(this_side, other_side):
    this = ExcalidrawRectangle(x=10.0, y=20.0, width=100.0, height=60.0)
    other = ExcalidrawRectangle(x=500.0, y=300.0, width=40.0, height=50.0)
    arrow = arrow_from_to(this, other, this_side, other_side)
    assert (arrow.x, arrow.y) == _THIS_ANCHORS[this_side]
    dx, dy = arrow.points[1]
    assert (arrow.x + dx, arrow.y + dy) == _OTHER_ANCHORS[other_side]


def test_simple_drawing_keeps_elements():
    g = Generator()
    rects = [g.big_rectangle(0.0, 0.0), g.small_rectangle(1.0, 1.0)]
    drawing = simple_drawing(iter(rects))
    assert drawing.elements == rects
    assert drawing.kind == "excalidraw"
    assert drawing.version == 2