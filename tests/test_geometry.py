import pytest

from flappyweb.geometry import Rect


def test_overlapping_rects_intersect():
    a = Rect(0, 0, 10, 10)
    b = Rect(5, 5, 10, 10)
    assert a.intersects(b) is True
    assert b.intersects(a) is True


def test_edge_touching_rects_do_not_intersect():
    a = Rect(0, 0, 10, 10)
    right_neighbour = Rect(10, 0, 10, 10)
    below_neighbour = Rect(0, 10, 10, 10)
    assert a.intersects(right_neighbour) is False
    assert a.intersects(below_neighbour) is False


def test_separate_rects_do_not_intersect():
    assert Rect(0, 0, 10, 10).intersects(Rect(50, 50, 10, 10)) is False


def test_contained_rect_intersects():
    outer = Rect(0, 0, 100, 100)
    inner = Rect(40, 40, 5, 5)
    assert outer.intersects(inner) is True
    assert inner.intersects(outer) is True


@pytest.mark.parametrize("empty", [Rect(5, 5, 0, 10), Rect(5, 5, 10, 0), Rect(5, 5, -3, 4)])
def test_empty_rect_never_intersects(empty):
    big = Rect(0, 0, 100, 100)
    assert big.intersects(empty) is False
    assert empty.intersects(big) is False


def test_intersects_with_itself():
    r = Rect(3, 4, 7, 8)
    assert r.intersects(r) is True


@pytest.mark.parametrize("point", [(10, 20), (40, 20), (10, 70), (40, 70), (25, 45)])
def test_contains_point_includes_edges(point):
    r = Rect(10, 20, 30, 50)
    assert r.contains_point(*point) is True


@pytest.mark.parametrize("point", [(9, 20), (41, 20), (10, 19), (10, 71)])
def test_contains_point_excludes_outside(point):
    r = Rect(10, 20, 30, 50)
    assert r.contains_point(*point) is False


def test_moved_round_trip_and_original_unchanged():
    r = Rect(10, 20, 30, 40)
    shifted = r.moved(7, -9)
    assert shifted != r
    assert (shifted.w, shifted.h) == (r.w, r.h)
    assert shifted.moved(-7, 9) == r
    assert r == Rect(10, 20, 30, 40)


def test_right_and_bottom_edges():
    r = Rect(10, 20, 30, 40)
    assert r.moved(r.w, r.h).x == r.right
    assert r.moved(r.w, r.h).y == r.bottom


def test_rect_is_immutable():
    r = Rect(1, 2, 3, 4)
    with pytest.raises(AttributeError):
        r.x = 5
    assert (r.x, r.y, r.w, r.h) == (1, 2, 3, 4)
    assert r == Rect(1, 2, 3, 4)