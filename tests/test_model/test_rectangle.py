"""Tests for the Rectangle model."""

from selectorkit.model import Rectangle


class TestRectangle:
    def test_fields(self):
        r = Rectangle(10, 20)
        assert r.width == 10
        assert r.height == 20

    def test_area(self):
        assert Rectangle(10, 20).area() == 200

    def test_area_is_not_cached(self):
        r = Rectangle(10, 20)
        assert r.area() == 200
        r.width = 5
        assert r.area() == 100

    def test_zero_area(self):
        assert Rectangle(0, 7).area() == 0

    def test_float_dimensions(self):
        assert Rectangle(2.5, 4).area() == 10.0

    def test_instances_independent(self):
        a = Rectangle(1, 2)
        b = Rectangle(3, 4)
        assert a.area() == 2
        assert b.area() == 12

    def test_equality(self):
        assert Rectangle(1, 2) == Rectangle(1, 2)
