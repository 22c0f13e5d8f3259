"""
Surface materials for the Phong shading model.

A material holds the reflectance coefficients used by `lighting` plus the
reflective/refractive properties used by the recursive shading pipeline.
"""

from __future__ import annotations
from dataclasses import dataclass, field, replace
from typing import Optional

from .color import Color
from .patterns import Pattern

# Refractive indices of common media.
VACUUM = 1.0
AIR = 1.00029
WATER = 1.333
GLASS = 1.5
DIAMOND = 2.417


@dataclass
class Material:
    """Phong material.

    Attributes:
        color: Base surface color, used when no pattern is set
        ambient: Fraction of light reflected regardless of orientation
        diffuse: Fraction of light reflected from matte surfaces
        specular: Strength of the highlight
        shininess: Highlight tightness (larger is smaller and sharper)
        reflective: 0 is not reflective, 1 is a perfect mirror
        transparency: 0 is opaque, 1 lets all light through
        refractive_index: Index of refraction of the medium inside the surface
        pattern: Optional procedural color, shared between copies
    """
    color: Color = field(default_factory=lambda: Color(1.0, 1.0, 1.0))
    ambient: float = 0.1
    diffuse: float = 0.9
    specular: float = 0.9
    shininess: float = 200.0
    reflective: float = 0.0
    transparency: float = 0.0
    refractive_index: float = VACUUM
    pattern: Optional[Pattern] = None

    def __post_init__(self):
        for name in ('ambient', 'diffuse', 'specular', 'shininess'):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative, got {getattr(self, name)}")
        if not 0.0 <= self.reflective <= 1.0:
            raise ValueError(f"reflective must be in [0, 1], got {self.reflective}")
        if not 0.0 <= self.transparency <= 1.0:
            raise ValueError(f"transparency must be in [0, 1], got {self.transparency}")
        if self.refractive_index < 1.0:
            raise ValueError(f"refractive_index must be >= 1, got {self.refractive_index}")

    def copy(self, **changes) -> Material:
        """Return a copy with optional field changes; the pattern is shared."""
        return replace(self, **changes)
