"""
Mesh Primitives - Main CLI

Generates one canonical solid and optionally writes it to an OBJ file.

Usage:
    python -m mesh_primitives.main SHAPE [options]

Example:
    python -m mesh_primitives.main sphere --radius 2 --depth 4 --output sphere.obj
    python -m mesh_primitives.main cuboid --size 1 2 3 --wireframe
"""

import argparse
import logging
import sys
from typing import List, Optional

from . import __version__
from .config import (
    DEFAULT_CUBOID_SIZE,
    DEFAULT_HEIGHT,
    DEFAULT_RADIUS,
    GeneratorConfig,
)
from .generators.shape_generator import (
    ShapeRequest,
    ShapeType,
    expected_counts,
    generate_shape,
)
from .generators.validation import InvalidParameter
from .io.obj_exporter import export_obj
from .models.geometry import Vector3
from .models.mesh import MeshKind, create_mesh


def setup_logging(verbose: bool = False, log_file: Optional[str] = None) -> None:
    """
    Configure logging to console and optionally to file.

    Args:
        verbose: If True, use DEBUG level; otherwise INFO
        log_file: Optional path to log file. If provided, logs will be written to file.
    """
    level = logging.DEBUG if verbose else logging.INFO

    formatter = logging.Formatter(
        '%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        datefmt='%H:%M:%S'
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Clear any existing handlers
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)  # Always log DEBUG to file
        file_formatter = logging.Formatter(
            '%(asctime)s [%(levelname)s] %(name)s: %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        file_handler.setFormatter(file_formatter)
        root_logger.addHandler(file_handler)


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        description='Mesh Primitives - Generate flat-shaded meshes for canonical solids'
    )

    parser.add_argument(
        'shape',
        choices=[s.value for s in ShapeType],
        help='Shape to generate'
    )

    parser.add_argument(
        '--size',
        type=float,
        nargs=3,
        metavar=('X', 'Y', 'Z'),
        default=list(DEFAULT_CUBOID_SIZE),
        help='Cuboid size on x, y and z (default: 1 1 1)'
    )

    parser.add_argument(
        '--radius',
        type=float,
        default=DEFAULT_RADIUS,
        help=f'Sphere, cylinder or cone radius (default: {DEFAULT_RADIUS})'
    )

    parser.add_argument(
        '--height',
        type=float,
        default=DEFAULT_HEIGHT,
        help=f'Cylinder or cone height (default: {DEFAULT_HEIGHT})'
    )

    parser.add_argument(
        '--depth',
        type=int,
        default=None,
        help='Sphere subdivision depth (default: 3)'
    )

    parser.add_argument(
        '--segments',
        type=int,
        default=None,
        help='Cylinder or cone rim segments (default: 24)'
    )

    parser.add_argument(
        '--wireframe',
        action='store_true',
        help='Generate the cuboid outline instead of solid faces (cuboid only)'
    )

    parser.add_argument(
        '--output', '-o',
        default=None,
        help='Write the mesh to this OBJ file'
    )

    parser.add_argument(
        '--log-file',
        default=None,
        help='Also write DEBUG logs to this file'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable verbose logging'
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    setup_logging(args.verbose, args.log_file)
    logger = logging.getLogger(__name__)

    shape = ShapeType.from_name(args.shape)
    kind = MeshKind.WIREFRAME if args.wireframe else MeshKind.SOLID

    if args.wireframe and shape is not ShapeType.CUBOID:
        logger.error(f"--wireframe is only supported for cuboids, not {shape.value}")
        return 1

    overrides = dict(
        size=Vector3(*args.size),
        radius=args.radius,
        height=args.height,
    )
    if args.depth is not None:
        overrides['depth'] = args.depth
    if args.segments is not None:
        overrides['segments'] = args.segments

    config = GeneratorConfig(verbose=args.verbose)
    request = ShapeRequest.from_config(shape, config, **overrides)
    mesh = create_mesh(kind)

    try:
        expected_vertices, expected_indices = expected_counts(request, kind)
        logger.debug(
            f"Expecting {expected_vertices} vertices, {expected_indices} indices"
        )
        result = generate_shape(mesh, request)
    except (InvalidParameter, TypeError) as e:
        logger.error(f"Cannot generate {shape.value}: {e}")
        return 1

    print(f"\nGenerated {result.shape.value} ({result.kind.value})")
    print(f"  Vertices: {result.vertices_added}")
    print(f"  Indices: {result.indices_added}")

    bounds = mesh.compute_bounds()
    if bounds:
        (min_x, min_y, min_z), (max_x, max_y, max_z) = bounds
        print(f"  Bounds: ({min_x:.3f}, {min_y:.3f}, {min_z:.3f}) - "
              f"({max_x:.3f}, {max_y:.3f}, {max_z:.3f})")

    if args.output:
        try:
            stats = export_obj(
                mesh,
                args.output,
                comment=f"{shape.value} generated by mesh_primitives {__version__}",
                vertex_precision=config.vertex_precision,
                normal_precision=config.normal_precision,
            )
        except OSError as e:
            logger.error(f"Failed to write {args.output}: {e}")
            return 1
        print(f"Output file: {args.output} ({stats.file_size_bytes} bytes)")

    return 0


if __name__ == '__main__':
    sys.exit(main())
