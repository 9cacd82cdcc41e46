"""Synthetic point clouds for demos and tests."""

from .generators import PointGenerator, generate_points

__all__ = [
    'PointGenerator',
    'generate_points'
]
