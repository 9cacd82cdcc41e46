"""Clustering algorithms and utilities."""

from .base import Clusterer
from .kmeans import KMeansClusterer, cluster
from .sweep import SweepEvaluator, evaluate_sweep
from .results import ClusterResult, SweepResult
from .metrics import (
    compute_inertia,
    evaluate_clustering,
    inertia_drops,
    find_elbow
)

__all__ = [
    'Clusterer',
    'KMeansClusterer',
    'cluster',
    'SweepEvaluator',
    'evaluate_sweep',
    'ClusterResult',
    'SweepResult',
    'compute_inertia',
    'evaluate_clustering',
    'inertia_drops',
    'find_elbow'
]
