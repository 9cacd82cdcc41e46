"""Exceptions raised by the clustering core."""


class InvalidArgument(ValueError):
    """A caller-supplied argument violates a precondition of the operation."""
