"""Clustering metrics and elbow-curve helpers."""

from typing import TYPE_CHECKING, Dict, Union

import numpy as np
from sklearn.metrics import silhouette_score, calinski_harabasz_score, davies_bouldin_score

from ..exceptions import InvalidArgument

if TYPE_CHECKING:
    from .results import SweepResult


def compute_inertia(points: np.ndarray,
                    labels: np.ndarray,
                    centroids: np.ndarray) -> float:
    """
    Sum of squared Euclidean distances from each point to its centroid.
    
    Args:
        points: Point coordinates (n_samples, n_features)
        labels: Cluster index of every point
        centroids: Centroid coordinates (k, n_features)
        
    Returns:
        Inertia (0.0 for an empty point set)
    """
    if len(labels) == 0:
        return 0.0
    
    residuals = np.asarray(points, dtype=np.float64) - np.asarray(centroids)[labels]
    return float(np.sum(residuals * residuals))


def evaluate_clustering(
    points: np.ndarray,
    labels: np.ndarray
) -> Dict[str, Union[int, float]]:
    """
    Evaluate clustering quality using multiple metrics.
    
    Args:
        points: Point coordinates
        labels: Cluster labels
        
    Returns:
        Dictionary of metric scores
    """
    metrics: Dict[str, Union[int, float]] = {}
    
    n_clusters = len(np.unique(labels))
    metrics['n_clusters'] = n_clusters
    
    # The scores are only defined for 2 <= clusters <= n_samples - 1 and
    # finite coordinates; degenerate inputs just report the cluster count
    if 1 < n_clusters < len(labels) and np.isfinite(points).all():
        # Silhouette score (higher is better, -1 to 1)
        metrics['silhouette'] = float(silhouette_score(points, labels))
        
        # Calinski-Harabasz score (higher is better)
        metrics['calinski_harabasz'] = float(calinski_harabasz_score(points, labels))
        
        # Davies-Bouldin score (lower is better)
        metrics['davies_bouldin'] = float(davies_bouldin_score(points, labels))
    
    return metrics


def inertia_drops(sweep: 'SweepResult') -> Dict[int, float]:
    """Improvement in inertia gained by each k over k - 1."""
    inertias = sweep.inertias()
    return {
        k: inertias[k - 1] - inertia
        for k, inertia in inertias.items()
        if k - 1 in inertias
    }


def find_elbow(sweep: 'SweepResult') -> int:
    """
    Suggest the k at the elbow of the inertia curve.
    
    Both axes are scaled to [0, 1] and the elbow is taken as the point with
    the greatest perpendicular distance from the chord between the first and
    last points of the curve. Short or flat curves fall back to the smallest k.
    
    Args:
        sweep: Sweep results
        
    Returns:
        Suggested number of clusters
    """
    if len(sweep) == 0:
        raise InvalidArgument("Cannot find the elbow of an empty sweep")
    
    ks = np.array(sweep.ks, dtype=np.float64)
    inertias = np.array(list(sweep.inertias().values()), dtype=np.float64)
    
    if len(ks) < 3:
        return int(ks[0])
    
    span = inertias.max() - inertias.min()
    if not np.isfinite(span) or span == 0:
        return int(ks[0])
    
    x = (ks - ks[0]) / (ks[-1] - ks[0])
    y = (inertias - inertias.min()) / span
    
    dx = x[-1] - x[0]
    dy = y[-1] - y[0]
    distances = np.abs(dy * (x - x[0]) - dx * (y - y[0])) / np.hypot(dx, dy)
    
    return int(ks[np.argmax(distances)])
