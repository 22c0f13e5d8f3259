"""Exception types raised by prismtrace."""


class PrismtraceError(Exception):
    """Base class for all project-specific errors."""


class TupleTypeError(PrismtraceError, TypeError):
    """An operation was applied to the wrong kind of tuple (point vs vector)."""


class NoInverseError(PrismtraceError, ValueError):
    """A transform matrix has a zero determinant and cannot be inverted."""


class PixelOutOfBoundsError(PrismtraceError, IndexError):
    """A pixel write or read addressed a location outside the canvas."""


class MissingLightError(PrismtraceError):
    """A world was shaded before a light was assigned to it."""
