"""
Scene description language parser.

Supports a YAML-based scene description format with:
- Light
- Camera configuration
- Render settings
- Pattern and material libraries
- Objects (shapes with transforms and materials)

Transforms are lists of steps applied in order, so an object is
scaled, then rotated, then moved in the example below.

Example scene file:
```yaml
light:
  position: [-10, 10, -10]
  intensity: [1, 1, 1]

camera:
  width: 400
  height: 200
  fov: 60            # degrees
  from: [0, 1.5, -5]
  to: [0, 1, 0]
  up: [0, 1, 0]

render:
  max_depth: 5
  threads: 0
  band_height: 16

patterns:
  stripes:
    type: stripe
    a: [1, 1, 1]
    b: [0.2, 0.2, 0.2]
    transform:
      - [scale, 0.25, 0.25, 0.25]

materials:
  glass:
    color: [0.1, 0.1, 0.1]
    transparency: 0.9
    reflective: 0.9
    refractive_index: 1.5

objects:
  - type: plane
    material:
      pattern: stripes
      specular: 0

  - type: sphere
    material: glass
    transform:
      - [scale, 0.5, 0.5, 0.5]
      - [rotate_y, 0.785]
      - [translate, 0, 1, 0]
```
"""

from __future__ import annotations
import json
import logging
import math
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from .camera import Camera
from .color import Color
from .errors import NoInverseError, PrismtraceError
from .lights import PointLight
from .materials import Material
from .matrix import Matrix, identity
from .patterns import (
    CheckerPattern, GradientPattern, Pattern, PositionPattern, RingPattern, StripePattern
)
from .renderer import RenderSettings
from .shapes import Plane, Shape, Sphere
from .transforms import view_transform
from .vec3 import Vec3, point, vector
from .world import World

logger = logging.getLogger(__name__)

SHAPE_TYPES = {
    'sphere': Sphere,
    'plane': Plane,
}

PATTERN_TYPES = {
    'stripe': StripePattern,
    'gradient': GradientPattern,
    'ring': RingPattern,
    'checker': CheckerPattern,
}

# Step name -> number of arguments
TRANSFORM_STEPS = {
    'translate': 3,
    'scale': 3,
    'rotate_x': 1,
    'rotate_y': 1,
    'rotate_z': 1,
    'shear': 6,
}

MATERIAL_FIELDS = (
    'ambient', 'diffuse', 'specular', 'shininess',
    'reflective', 'transparency', 'refractive_index',
)


class SceneParseError(PrismtraceError):
    """Error during scene parsing."""
    pass


class SceneParser:
    """Parser for scene description files."""

    def __init__(self):
        self.patterns: Dict[str, Pattern] = {}
        self.materials: Dict[str, Material] = {}
        self.world: World = World()
        self.camera: Optional[Camera] = None
        self.settings: Optional[RenderSettings] = None

    def parse_file(self, filepath: str) -> Tuple[World, Camera, RenderSettings]:
        """Parse a scene file.

        Args:
            filepath: Path to the scene file (YAML or JSON)

        Returns:
            Tuple of (world, camera, settings)
        """
        path = Path(filepath)
        if not path.exists():
            raise SceneParseError(f"Scene file not found: {filepath}")

        content = path.read_text()

        if path.suffix == '.json':
            try:
                data = json.loads(content)
            except json.JSONDecodeError as exc:
                raise SceneParseError(f"Invalid JSON in {filepath}: {exc}") from exc
        else:
            import yaml

            try:
                data = yaml.safe_load(content)
            except yaml.YAMLError as exc:
                raise SceneParseError(f"Invalid YAML in {filepath}: {exc}") from exc

        if not isinstance(data, dict):
            raise SceneParseError(f"Scene file must contain a mapping: {filepath}")

        result = self.parse_dict(data)
        logger.info("Loaded scene %s with %d objects", path, len(self.world))
        return result

    def parse_dict(self, data: Dict[str, Any]) -> Tuple[World, Camera, RenderSettings]:
        """Parse a scene from a dictionary.

        Args:
            data: Scene description dictionary

        Returns:
            Tuple of (world, camera, settings)
        """
        # Patterns first (materials reference them), then materials
        # (objects reference them).
        for name, pattern_data in self._section(data, 'patterns', dict).items():
            self.patterns[name] = self._parse_pattern(pattern_data)

        for name, mat_data in self._section(data, 'materials', dict).items():
            self.materials[name] = self._parse_material(mat_data)

        for obj_data in self._section(data, 'objects', list):
            self.world.add(self._parse_object(obj_data))

        self.world.light = self._parse_light(self._section(data, 'light', dict))
        self.camera = self._parse_camera(self._section(data, 'camera', dict))
        self.settings = self._parse_settings(self._section(data, 'render', dict))

        return self.world, self.camera, self.settings

    def _section(self, data: Dict[str, Any], key: str, kind: type) -> Any:
        """Get a top-level section, empty when absent."""
        if key not in data:
            return kind()
        section = data[key]
        if not isinstance(section, kind):
            raise SceneParseError(
                f"Section '{key}' must be a {'mapping' if kind is dict else 'list'}, got: {section!r}"
            )
        return section

    def _number(self, value: Any, what: str, cast: type = float) -> Any:
        """Convert a scalar, reporting bad values as SceneParseError."""
        if isinstance(value, bool):
            raise SceneParseError(f"{what} must be a number, got: {value!r}")
        try:
            return cast(value)
        except (TypeError, ValueError) as exc:
            raise SceneParseError(f"{what} must be a number, got: {value!r}") from exc

    def _parse_vec3(self, data: Any) -> Tuple[float, float, float]:
        """Parse three floats from a list or an x/y/z mapping."""
        if isinstance(data, (list, tuple)):
            if len(data) != 3:
                raise SceneParseError(f"Vec3 must have 3 components, got {len(data)}")
            return tuple(self._number(v, "Vec3 component") for v in data)
        elif isinstance(data, dict):
            return (
                self._number(data.get('x', 0), "Vec3 x"),
                self._number(data.get('y', 0), "Vec3 y"),
                self._number(data.get('z', 0), "Vec3 z")
            )
        else:
            raise SceneParseError(f"Cannot parse Vec3 from: {data}")

    def _parse_point(self, data: Any) -> Vec3:
        return point(*self._parse_vec3(data))

    def _parse_vector(self, data: Any) -> Vec3:
        return vector(*self._parse_vec3(data))

    def _parse_color(self, data: Any) -> Color:
        """Parse a Color from various formats."""
        if isinstance(data, (list, tuple)):
            if len(data) != 3:
                raise SceneParseError(f"Color must have 3 components, got {len(data)}")
            return Color(*(self._number(v, "Color component") for v in data))
        elif isinstance(data, dict):
            return Color(
                self._number(data.get('r', 0), "Color r"),
                self._number(data.get('g', 0), "Color g"),
                self._number(data.get('b', 0), "Color b")
            )
        elif isinstance(data, str):
            # Handle hex colors
            if data.startswith('#'):
                hex_color = data[1:]
                if len(hex_color) == 6:
                    try:
                        r = int(hex_color[0:2], 16) / 255.0
                        g = int(hex_color[2:4], 16) / 255.0
                        b = int(hex_color[4:6], 16) / 255.0
                    except ValueError as exc:
                        raise SceneParseError(f"Invalid hex color: {data}") from exc
                    return Color(r, g, b)
            raise SceneParseError(f"Cannot parse color from string: {data}")
        else:
            raise SceneParseError(f"Cannot parse Color from: {data}")

    def _parse_transform(self, steps: Any) -> Matrix:
        """Fold a list of [step, args...] entries into one matrix."""
        if steps is None:
            return identity()
        if not isinstance(steps, list):
            raise SceneParseError(f"Transform must be a list of steps, got: {steps}")

        matrix = identity()
        for step in steps:
            if not isinstance(step, (list, tuple)) or not step:
                raise SceneParseError(f"Invalid transform step: {step}")
            name, args = str(step[0]).lower(), step[1:]
            if name not in TRANSFORM_STEPS:
                raise SceneParseError(f"Unknown transform step: {name}")
            if len(args) != TRANSFORM_STEPS[name]:
                raise SceneParseError(
                    f"Transform step {name} takes {TRANSFORM_STEPS[name]} arguments, got {len(args)}"
                )
            matrix = getattr(matrix, name)(*(self._number(a, f"Argument of {name}") for a in args))
        return matrix

    def _parse_pattern(self, pattern_data: Any) -> Pattern:
        """Parse a pattern reference or inline definition."""
        if isinstance(pattern_data, str):
            if pattern_data not in self.patterns:
                raise SceneParseError(f"Unknown pattern: {pattern_data}")
            return self.patterns[pattern_data]
        if not isinstance(pattern_data, dict):
            raise SceneParseError(f"Invalid pattern: {pattern_data}")

        pattern_type = str(pattern_data.get('type', 'stripe')).lower()
        transform = self._parse_transform(pattern_data.get('transform'))
        try:
            if pattern_type == 'position':
                return PositionPattern(transform)
            if pattern_type not in PATTERN_TYPES:
                raise SceneParseError(f"Unknown pattern type: {pattern_type}")
            a = self._parse_color(pattern_data.get('a', [1, 1, 1]))
            b = self._parse_color(pattern_data.get('b', [0, 0, 0]))
            return PATTERN_TYPES[pattern_type](a, b, transform)
        except NoInverseError as exc:
            raise SceneParseError(f"Pattern transform is not invertible: {exc}") from exc

    def _parse_material(self, mat_data: Any) -> Material:
        """Parse a material definition; unset fields keep their defaults."""
        if not isinstance(mat_data, dict):
            raise SceneParseError(f"Invalid material: {mat_data}")

        kwargs: Dict[str, Any] = {}
        if 'color' in mat_data:
            kwargs['color'] = self._parse_color(mat_data['color'])
        for name in MATERIAL_FIELDS:
            if name in mat_data:
                kwargs[name] = self._number(mat_data[name], f"Material {name}")
        if 'pattern' in mat_data:
            kwargs['pattern'] = self._parse_pattern(mat_data['pattern'])

        try:
            return Material(**kwargs)
        except ValueError as exc:
            raise SceneParseError(f"Invalid material: {exc}") from exc

    def _get_material(self, mat_ref: Any) -> Material:
        """Get a material by name or inline definition."""
        if mat_ref is None:
            return Material()
        if isinstance(mat_ref, str):
            if mat_ref not in self.materials:
                raise SceneParseError(f"Unknown material: {mat_ref}")
            # Each object owns its material; named ones are copied.
            return self.materials[mat_ref].copy()
        elif isinstance(mat_ref, dict):
            return self._parse_material(mat_ref)
        else:
            raise SceneParseError(f"Invalid material reference: {mat_ref}")

    def _parse_object(self, obj_data: Dict[str, Any]) -> Shape:
        """Parse one entry of the objects section."""
        if not isinstance(obj_data, dict):
            raise SceneParseError(f"Object must be a mapping, got: {obj_data!r}")
        obj_type = str(obj_data.get('type', 'sphere')).lower()
        if obj_type not in SHAPE_TYPES:
            raise SceneParseError(f"Unknown object type: {obj_type}")

        material = self._get_material(obj_data.get('material'))
        if 'pattern' in obj_data:
            material.pattern = self._parse_pattern(obj_data['pattern'])
        transform = self._parse_transform(obj_data.get('transform'))
        try:
            return SHAPE_TYPES[obj_type](transform, material)
        except NoInverseError as exc:
            raise SceneParseError(f"Transform of {obj_type} is not invertible: {exc}") from exc

    def _parse_light(self, light_data: Dict[str, Any]) -> PointLight:
        """Parse the light section."""
        position = self._parse_point(light_data.get('position', [-10, 10, -10]))
        intensity = self._parse_color(light_data.get('intensity', [1, 1, 1]))
        return PointLight(position, intensity)

    def _parse_camera(self, camera_data: Dict[str, Any]) -> Camera:
        """Parse camera section."""
        width = self._number(camera_data.get('width', 400), "Camera width", int)
        height = self._number(camera_data.get('height', 200), "Camera height", int)
        fov = math.radians(self._number(camera_data.get('fov', 60), "Camera fov"))
        from_point = self._parse_point(camera_data.get('from', [0, 1.5, -5]))
        to = self._parse_point(camera_data.get('to', [0, 1, 0]))
        up = self._parse_vector(camera_data.get('up', [0, 1, 0]))

        try:
            return Camera(width, height, fov, view_transform(from_point, to, up))
        except (ValueError, ZeroDivisionError) as exc:
            raise SceneParseError(f"Invalid camera: {exc}") from exc

    def _parse_settings(self, settings_data: Dict[str, Any]) -> RenderSettings:
        """Parse render settings section."""
        try:
            return RenderSettings(
                max_depth=self._number(settings_data.get('max_depth', 5), "max_depth", int),
                num_threads=self._number(settings_data.get('threads', 0), "threads", int),
                band_height=self._number(settings_data.get('band_height', 16), "band_height", int),
            )
        except ValueError as exc:
            raise SceneParseError(f"Invalid render settings: {exc}") from exc


def load_scene(filepath: str) -> Tuple[World, Camera, RenderSettings]:
    """Convenience function to load a scene file.

    Args:
        filepath: Path to the scene file

    Returns:
        Tuple of (world, camera, settings)
    """
    parser = SceneParser()
    return parser.parse_file(filepath)


def parse_scene(data: Dict[str, Any]) -> Tuple[World, Camera, RenderSettings]:
    """Convenience function to parse a scene from a dictionary.

    Args:
        data: Scene description dictionary

    Returns:
        Tuple of (world, camera, settings)
    """
    parser = SceneParser()
    return parser.parse_dict(data)
