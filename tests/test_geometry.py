import copy

import pytest

from practicekit.geometry import Human, Point, summarize


def test_add_floats():
    p1 = Point(1.1, 1.1)
    p2 = Point(2.1, 2.1)
    p12 = p1 + p2
    assert p12.x == pytest.approx(3.2, abs=1e-4)
    assert p12.y == pytest.approx(3.2, abs=1e-4)


def test_add_ints():
    p34 = Point(1, 1) + Point(2, 2)
    assert p34 == Point(3, 3)


def test_add_rejects_other_types():
    with pytest.raises(TypeError):
        Point(1, 1) + 1


def test_summarize_as_parameter():
    assert summarize(Point(3, 4)) == "Point{x: 3, y: 4}"
    assert summarize(Point(3.1, 4.1)) == "Point{x: 3.1, y: 4.1}"


def test_summarize_whole_floats():
    assert Point(5.0, 4).summarize() == "Point{x: 5, y: 4}"


def test_returned_summary():
    assert Point(1, 2).summarize() == "Point{x: 1, y: 2}"


def test_mixup():
    p3 = Point(5, 10).mixup(Point("Hello", "中"))
    assert p3.x == 5
    assert p3.y == "中"


def test_copy_is_equal():
    p1 = Point(1, 1)
    assert copy.copy(p1) == p1


def test_human_flies():
    person = Human()
    assert person.pilot_fly() == "This is your captain speaking."
    assert person.wizard_fly() == "Up!"
    assert person.fly() == "*waving arms furiously*"