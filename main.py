#!/usr/bin/env python3
"""
Prismtrace - A Python Whitted-style Ray Tracer

Main entry point for rendering scenes.
"""

import argparse
import logging
import math
import sys
import time
from pathlib import Path

from prismtrace.camera import Camera
from prismtrace.color import Color
from prismtrace.lights import PointLight
from prismtrace.materials import GLASS, Material
from prismtrace.patterns import CheckerPattern, StripePattern
from prismtrace.renderer import Renderer, RenderSettings
from prismtrace.scene_parser import SceneParseError, load_scene
from prismtrace.shapes import Plane, Sphere
from prismtrace.transforms import rotation_x, rotation_z, scaling, translation, view_transform
from prismtrace.vec3 import point, vector
from prismtrace.world import World


def create_demo_scene() -> World:
    """Create a demo room: three spheres between two walls."""
    world = World(PointLight(point(-5, 5, -10), Color(1, 1, 1)))

    # Floor
    checkers = CheckerPattern(Color(0.9, 0.9, 0.9), Color(0.3, 0.3, 0.3))
    world.add(Plane(material=Material(pattern=checkers, specular=0.0, reflective=0.2)))

    # Side walls and ceiling
    world.add(Plane(
        translation(-15, 0, 0) @ rotation_z(math.pi / 2),
        Material(color=Color(1, 0.9, 0.3), specular=0.2),
    ))
    world.add(Plane(
        translation(15, 0, 0) @ rotation_z(math.pi / 2),
        Material(color=Color(1, 0.9, 0.3), specular=0.5),
    ))
    world.add(Plane(
        translation(0, 10, 0),
        Material(color=Color(0.5, 0.8, 0.9), specular=0.9),
    ))

    # Middle sphere - striped
    stripes = StripePattern(Color(1, 1, 1), Color(0, 0, 0), scaling(0.2, 0.2, 0.2) @ rotation_x(math.pi))
    world.add(Sphere(
        translation(-0.5, 1, 0.5),
        Material(color=Color(0.1, 1, 0.5), diffuse=0.7, specular=0.3, pattern=stripes),
    ))

    # Right sphere - glass
    world.add(Sphere(
        translation(1.5, 0.5, -0.5) @ scaling(0.5, 0.5, 0.5),
        Material(color=Color(0.1, 0.1, 0.1), diffuse=0.1, specular=1.0, shininess=300,
                 reflective=0.9, transparency=0.9, refractive_index=GLASS),
    ))

    # Left sphere - shiny
    world.add(Sphere(
        translation(-1.5, 0.33, -0.75) @ scaling(0.33, 0.33, 0.33),
        Material(color=Color(1, 0.8, 0.4), diffuse=0.7, specular=0.8),
    ))

    return world


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description='Prismtrace - A Python Ray Tracer',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='''
Examples:
  python main.py --demo --output render.ppm
  python main.py --demo --width 1200 --height 800 --output demo.png
  python main.py --scene scenes/room.yaml --threads 8 --output room.png
        '''
    )

    source = parser.add_mutually_exclusive_group()
    source.add_argument('--scene', type=str, help='Scene file to render (YAML or JSON)')
    source.add_argument('--demo', action='store_true', help='Render the built-in demo scene (default)')

    parser.add_argument('--width', type=int, help='Image width (default: 400, or the scene camera)')
    parser.add_argument('--height', type=int, help='Image height (default: 200, or the scene camera)')
    parser.add_argument('--depth', type=int, help='Max recursion depth (default: 5)')
    parser.add_argument('--threads', type=int, help='Number of threads (0=auto)')
    parser.add_argument('--output', type=str, default='output/render.ppm',
                        help='Output filename, .ppm or any format Pillow writes')
    parser.add_argument('--sequential', action='store_true', help='Render on a single thread')
    parser.add_argument('--verbose', '-v', action='store_true', help='Enable debug logging')

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s %(name)s %(levelname)s: %(message)s',
    )

    # Print header
    print("=" * 60)
    print("Prismtrace Ray Tracer")
    print("=" * 60)

    # Create scene
    if args.scene:
        print(f"\nLoading scene: {args.scene}")
        try:
            world, camera, settings = load_scene(args.scene)
        except SceneParseError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 1
    else:
        print("\nCreating scene: demo")
        world = create_demo_scene()
        camera = Camera(
            400, 200, math.pi / 3,
            view_transform(point(0, 1.5, -5), point(0, 1, 0), vector(0, 1, 0)),
        )
        settings = RenderSettings()

    if any(size is not None and size <= 0 for size in (args.width, args.height)):
        print("Error: --width and --height must be positive", file=sys.stderr)
        return 1
    if args.width or args.height:
        camera = Camera(
            args.width or camera.hsize,
            args.height or camera.vsize,
            camera.field_of_view,
            camera.transform,
        )

    try:
        settings = RenderSettings(
            max_depth=args.depth if args.depth is not None else settings.max_depth,
            num_threads=args.threads if args.threads is not None else settings.num_threads,
            band_height=settings.band_height,
        )
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(f"  Objects in scene: {len(world)}")
    print(f"\nRender Settings:")
    print(f"  Resolution: {camera.hsize}x{camera.vsize}")
    print(f"  Max Depth: {settings.max_depth}")
    print(f"  Threads: {1 if args.sequential else settings.num_threads}")

    # Create renderer
    renderer = Renderer(settings)

    # Progress tracking
    last_progress = [0]

    def progress_callback(progress: float):
        pct = int(progress * 100)
        if pct > last_progress[0]:
            last_progress[0] = pct
            bar_len = 40
            filled = int(bar_len * progress)
            bar = '#' * filled + '-' * (bar_len - filled)
            print(f'\rRendering: [{bar}] {pct}%', end='', flush=True)

    renderer.set_progress_callback(progress_callback)

    # Render
    print("\nRendering...")
    start_time = time.time()

    if args.sequential:
        canvas = renderer.render(camera, world)
    else:
        canvas = renderer.render_parallel(camera, world)

    elapsed = time.time() - start_time
    print(f"\nRender completed in {elapsed:.2f} seconds")
    print(f"  Primary rays per second: {(camera.hsize * camera.vsize) / max(elapsed, 1e-9):.0f}")

    # Ensure output directory exists
    output_path = Path(args.output)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    # Save image
    print(f"\nSaving to: {args.output}")
    canvas.save(output_path)

    print("\nDone!")
    return 0


if __name__ == '__main__':
    sys.exit(main())
