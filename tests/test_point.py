import pytest

from sysdemos.point import Point, main


def test_initialization():
    p1 = Point(3, 0)
    p2 = Point(0, 4)
    p3 = Point()
    assert p1.x == pytest.approx(3.0)
    assert p1.y == pytest.approx(0.0)
    assert p2.x == pytest.approx(0.0)
    assert p2.y == pytest.approx(4.0)
    assert p3.x == pytest.approx(0.0)
    assert p3.y == pytest.approx(0.0)


def test_add():
    p3 = Point()
    p3.add(Point(3, 0))
    p3.add(Point(0, 4))
    assert p3.x == pytest.approx(3.0)
    assert p3.y == pytest.approx(4.0)


def test_distance():
    assert Point(3, 0).distance(Point(0, 4)) == pytest.approx(5.0)


def test_distance_is_symmetric():
    a, b = Point(1.5, -2.0), Point(-3.0, 7.25)
    assert a.distance(b) == pytest.approx(b.distance(a))
    assert a.distance(a) == 0.0


def test_str():
    assert str(Point(3, 0)) == "point(3.000000, 0.000000)"


def test_demo_output(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out == "p1 = point(3.000000, 0.000000) p2 = point(0.000000, 4.000000) distance = 5.000000\n"