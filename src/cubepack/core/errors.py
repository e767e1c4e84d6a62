"""
Packing errors.

Everything raised by the core is a programmer-contract violation: a caller
broke a precondition.  An unsolvable packing is NOT an error; it is reported
through the container's unfilled volume.
"""


class PackingError(Exception):
    """Base class for all cubepack errors."""


class InvalidDimensionError(PackingError, ValueError):
    """A container dimension or cube edge length is not a positive integer."""


class CapacityExceededError(PackingError):
    """A commit would take more volume than the container has left."""


class ReCommitError(PackingError):
    """A cube that is already placed was committed again."""


# Raised by cubepack.simulator.validator when a finished packing is inspected

class OutOfBoundsError(PackingError):
    """A placed cube extends outside the container."""


class OverlapError(PackingError):
    """Two placed cubes share interior volume."""


class VolumeMismatchError(PackingError):
    """Filled and unfilled volume no longer add up to the container volume."""
