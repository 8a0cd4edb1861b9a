import pytest

from runngun.hitbox import Hitbox
from runngun.render import RED, Renderer
from runngun.utils import Viewport


def test_identical_boxes_overlap():
    a = Hitbox(10, 10, 50.0, 50.0)
    assert a.overlaps(Hitbox(10, 10, 50.0, 50.0))


def test_distant_boxes_do_not_overlap():
    a = Hitbox(10, 10, 0.0, 0.0)
    b = Hitbox(10, 10, 500.0, 0.0)
    assert not a.overlaps(b)
    assert not b.overlaps(a)


def test_touching_edges_count_as_overlap():
    a = Hitbox(10, 10, 0.0, 0.0)
    assert a.overlaps(Hitbox(10, 10, 0.0, 10.0))
    assert a.overlaps(Hitbox(10, 10, 10.0, 0.0))


def test_gap_of_one_pixel_is_no_overlap():
    a = Hitbox(10, 10, 0.0, 0.0)
    assert not a.overlaps(Hitbox(10, 10, 0.0, 11.0))
    assert not a.overlaps(Hitbox(10, 10, 11.0, 0.0))


def test_small_box_inside_large_box_overlaps():
    big = Hitbox(100, 100, 0.0, 0.0)
    small = Hitbox(5, 5, 10.0, -10.0)
    assert big.overlaps(small)
    assert small.overlaps(big)


@pytest.mark.parametrize(
    "a,b",
    [
        (Hitbox(20, 20, 0, 0), Hitbox(10, 10, 14, 3)),
        (Hitbox(20, 20, 0, 0), Hitbox(10, 10, 16, 0)),
        (Hitbox(10000, 50, 300, 0), Hitbox(20, 20, 301, 160)),
        (Hitbox(5, 5, 0, 0), Hitbox(5, 5, -4, -4)),
    ],
)
def test_overlap_is_symmetric(a, b):
    assert a.overlaps(b) == b.overlaps(a)


def test_draw_subtracts_camera_offset():
    box = Hitbox(10, 20, 100.0, 50.0)
    view = Viewport(offset_x=30.0, offset_y=10.0, width=800, height=600)
    r = Renderer()
    box.draw(r, view)
    assert len(r.commands) == 1
    cmd = r.commands[0]
    assert cmd.kind == "rectangle"
    x1, y1, x2, y2, color = cmd.args
    assert color == RED
    assert x2 - x1 == box.hor
    assert y2 - y1 == box.vert
    assert (x1 + x2) / 2 == box.x - view.offset_x
    assert (y1 + y2) / 2 == box.y - view.offset_y