"""K-means clustering of point sets with elbow-curve sweeps."""

from .clustering import (
    ClusterResult,
    KMeansClusterer,
    SweepEvaluator,
    SweepResult,
    cluster,
    evaluate_sweep,
)
from .exceptions import InvalidArgument

__version__ = '1.0.0'

__all__ = [
    'ClusterResult',
    'KMeansClusterer',
    'SweepEvaluator',
    'SweepResult',
    'cluster',
    'evaluate_sweep',
    'InvalidArgument'
]
