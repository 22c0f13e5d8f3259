"""
Prismtrace - A Python Ray Tracing Renderer

A deterministic Whitted-style ray tracer with support for:
- Tagged point/vector algebra and 4x4 affine transforms
- Spheres and planes in their own object space
- Phong shading with hard shadows
- Recursive reflection and refraction with Schlick blending
- Procedural patterns (stripes, gradients, rings, checkers)
- Row-parallel rendering and PPM/PNG output
"""

__version__ = "0.1.0"
__author__ = "Prismtrace Team"

from .constants import EPSILON, DEFAULT_MAX_DEPTH
from .errors import PrismtraceError, TupleTypeError, NoInverseError, PixelOutOfBoundsError, MissingLightError
from .vec3 import Vec3, VecKind, point, vector, ORIGIN
from .color import Color, BLACK, WHITE
from .matrix import Matrix, identity
from .transforms import translation, scaling, rotation_x, rotation_y, rotation_z, shearing, view_transform
from .ray import Ray
from .intersection import Intersection, Intersections, intersections
from .shapes import Shape, Sphere, Plane, glass_sphere
from .patterns import (
    Pattern, StripePattern, GradientPattern, RingPattern, CheckerPattern, PositionPattern
)
from .materials import Material
from .lights import PointLight, lighting
from .computations import Computations, prepare_computations, schlick
from .world import World, default_world
from .camera import Camera
from .canvas import Canvas
from .renderer import Renderer, RenderSettings, render, render_parallel
from .scene_parser import SceneParser, SceneParseError, load_scene, parse_scene
