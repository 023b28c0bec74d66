import json

from exdtools.cli import build_demo, main
from exdtools.structures import ExcalidrawArrow, ExcalidrawFile, ExcalidrawRectangle


def test_build_demo_structure():
    drawing = build_demo()
    kinds = [type(e) for e in drawing.elements]
    assert kinds == [ExcalidrawRectangle] * 3 + [ExcalidrawArrow] * 2
    first, second, third, arrow, arrow2 = drawing.elements
    assert [r.index for r in (first, second, third)] == ["b01", "b02", "b03"]
    assert arrow.start_binding.element_id == third.id
    assert arrow.end_binding.element_id == second.id
    assert arrow2.end_binding.element_id == first.id
    assert [e.id for e in third.bound_elements] == [arrow.id, arrow2.id]
    assert [e.id for e in second.bound_elements] == [arrow.id]
    assert [e.id for e in first.bound_elements] == [arrow2.id]


def test_demo_arrows_end_at_top_middles():
    drawing = build_demo()
    first, second, third, arrow, arrow2 = drawing.elements
    assert (arrow.x, arrow.y) == (third.x + third.width / 2, third.y + third.height)
    end = (arrow.x + arrow.points[1][0], arrow.y + arrow.points[1][1])
    assert end == (second.x + second.width / 2, second.y)
    end2 = (arrow2.x + arrow2.points[1][0], arrow2.y + arrow2.points[1][1])
    assert end2 == (first.x + first.width / 2, first.y)


def test_main_prints_parsable_document(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    data = json.loads(out)
    assert data["type"] == "excalidraw"
    assert [e["type"] for e in data["elements"]] == ["rectangle"] * 3 + ["arrow"] * 2
    restored = ExcalidrawFile.from_json(out)
    assert len(restored.elements) == 5
    assert restored.to_dict() == data