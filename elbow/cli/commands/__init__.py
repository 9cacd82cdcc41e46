"""CLI command modules."""

from .cluster import ClusterCommand
from .sweep import SweepCommand

__all__ = [
    'ClusterCommand',
    'SweepCommand'
]
