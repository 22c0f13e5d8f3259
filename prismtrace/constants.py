"""Numeric constants shared across the ray tracer."""

# Tolerance for float equality and the surface offset used for
# over/under points.
EPSILON = 1e-5

# Default reflect/refract recursion budget.
DEFAULT_MAX_DEPTH = 5
