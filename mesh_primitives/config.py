"""
Configuration constants for Mesh Primitives.

Contains the tunable parameters for shape generation and export,
plus a runtime configuration object for the command-line front end.
"""

from dataclasses import dataclass


# =============================================================================
# SPHERE
# =============================================================================

# Subdivision passes applied to the base octahedron
# Triangle count is 8 * 4^depth (depth 3 -> 512 triangles)
DEFAULT_SPHERE_DEPTH = 3

# =============================================================================
# CYLINDER AND CONE
# =============================================================================

# Rim segments around the y axis (24 segments = 15 degree steps)
DEFAULT_SEGMENTS = 24

# Fewer than 3 rim points cannot enclose a cap
MIN_SEGMENTS = 3

# =============================================================================
# SHAPE DEFAULTS (CLI)
# =============================================================================

DEFAULT_CUBOID_SIZE = (1.0, 1.0, 1.0)
DEFAULT_RADIUS = 1.0
DEFAULT_HEIGHT = 2.0

# =============================================================================
# EXPORT SETTINGS
# =============================================================================

# OBJ export precision (decimal places)
OBJ_VERTEX_PRECISION = 6
OBJ_NORMAL_PRECISION = 6


# =============================================================================
# RUNTIME CONFIGURATION
# =============================================================================

@dataclass
class GeneratorConfig:
    """
    Runtime configuration for shape generation.

    Holds the defaults applied when a request leaves depth or segment
    count unset, and the export settings used by the CLI.
    """

    sphere_depth: int = DEFAULT_SPHERE_DEPTH
    segments: int = DEFAULT_SEGMENTS

    # Export
    vertex_precision: int = OBJ_VERTEX_PRECISION
    normal_precision: int = OBJ_NORMAL_PRECISION

    # Debug/report
    verbose: bool = False

    def __post_init__(self):
        """Validate configuration values."""
        if isinstance(self.sphere_depth, bool) or not isinstance(self.sphere_depth, int):
            raise ValueError("sphere_depth must be an integer")

        if self.sphere_depth < 0:
            raise ValueError("sphere_depth must be non-negative")

        if isinstance(self.segments, bool) or not isinstance(self.segments, int):
            raise ValueError("segments must be an integer")

        if self.segments < MIN_SEGMENTS:
            raise ValueError(f"segments must be at least {MIN_SEGMENTS}")

        if self.vertex_precision < 1 or self.normal_precision < 1:
            raise ValueError("export precision must be at least 1")


# Default configuration instance
DEFAULT_CONFIG = GeneratorConfig()
