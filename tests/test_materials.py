"""Tests for materials."""

import pytest

from prismtrace.color import Color
from prismtrace.materials import GLASS, VACUUM, Material
from prismtrace.patterns import StripePattern


class TestMaterialDefaults:
    """Test the default material."""

    def test_defaults(self):
        m = Material()
        assert m.color == Color(1, 1, 1)
        assert m.ambient == 0.1
        assert m.diffuse == 0.9
        assert m.specular == 0.9
        assert m.shininess == 200.0
        assert m.reflective == 0.0
        assert m.transparency == 0.0
        assert m.refractive_index == VACUUM
        assert m.pattern is None

    def test_colors_not_shared(self):
        a, b = Material(), Material()
        assert a.color is not b.color


class TestMaterialValidation:
    """Test range checks."""

    @pytest.mark.parametrize("field, value", [
        ('ambient', -0.1),
        ('diffuse', -1.0),
        ('specular', -0.5),
        ('shininess', -10.0),
        ('reflective', 1.5),
        ('reflective', -0.1),
        ('transparency', 2.0),
        ('refractive_index', 0.5),
    ])
    def test_out_of_range(self, field, value):
        with pytest.raises(ValueError):
            Material(**{field: value})

    def test_glass_values(self):
        m = Material(transparency=1.0, refractive_index=GLASS)
        assert m.refractive_index == 1.5


class TestMaterialCopy:
    """Test Material.copy()."""

    def test_copy_with_changes(self):
        m = Material(ambient=0.3)
        c = m.copy(diffuse=0.5)
        assert c.ambient == 0.3
        assert c.diffuse == 0.5
        assert m.diffuse == 0.9

    def test_copy_shares_pattern(self):
        pattern = StripePattern(Color(1, 1, 1), Color(0, 0, 0))
        m = Material(pattern=pattern)
        assert m.copy().pattern is pattern

    def test_copy_validates(self):
        with pytest.raises(ValueError):
            Material().copy(reflective=3.0)
