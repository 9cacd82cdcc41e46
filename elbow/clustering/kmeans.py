"""K-Means clustering using Lloyd's iteration."""

from typing import Any, Dict, Optional, Union

import numpy as np
from scipy.spatial.distance import cdist
from sklearn.utils import check_random_state

from ..config.constants import DEFAULT_MAX_ITERATIONS
from ..exceptions import InvalidArgument
from ..utils.logging import get_logger
from ..utils.validation import validate_points
from .base import Clusterer
from .metrics import compute_inertia
from .results import ClusterResult

logger = get_logger(__name__)

# Label of a point before the first assignment pass
UNASSIGNED = -1

RandomSource = Union[None, int, np.random.RandomState]


class KMeansClusterer(Clusterer):
    """
    K-Means clustering algorithm.
    
    Centroids are seeded from k distinct input points chosen uniformly at
    random, then refined by alternating nearest-centroid assignment and
    mean updates until no label changes or ``max_iter`` passes have run.
    A cluster that loses all of its points keeps its previous centroid.
    """
    
    def __init__(self,
                 n_clusters: int,
                 max_iter: int = DEFAULT_MAX_ITERATIONS,
                 init: Optional[Any] = None,
                 random_state: RandomSource = None):
        """
        Initialize K-Means clusterer.
        
        Args:
            n_clusters: Number of clusters; zero or less yields an empty result
            max_iter: Maximum number of assignment passes
            init: Optional explicit starting centroids (n_clusters, n_features)
            random_state: Seed or RandomState used to pick seed points
        """
        self.n_clusters = n_clusters
        self.max_iter = max_iter
        self.init = init
        self.random_state = random_state
        
        self.labels_: Optional[np.ndarray] = None
        self.cluster_centers_: Optional[np.ndarray] = None
        self.inertia_: Optional[float] = None
        self.n_iter_: Optional[int] = None
        
    def fit(self, points: Any) -> ClusterResult:
        """
        Run Lloyd's iteration on a point set.
        
        Args:
            points: Point coordinates (n_samples, n_features); never modified
            
        Returns:
            ClusterResult with one label per point and one centroid per cluster
            
        Raises:
            InvalidArgument: If n_clusters exceeds the number of points, or
                max_iter is smaller than one
        """
        points = validate_points(points)
        n_samples, n_features = points.shape
        k = self.n_clusters
        
        if self.max_iter < 1:
            raise InvalidArgument(f"max_iter must be at least 1, got {self.max_iter}")
        
        if k <= 0:
            return self._store(ClusterResult.empty(n_features))
        
        if k > n_samples:
            raise InvalidArgument(
                f"k exceeds point count (k={k}, n_samples={n_samples})"
            )
        
        centroids = self._initial_centroids(points, k)
        labels = np.full(n_samples, UNASSIGNED, dtype=np.intp)
        converged = False
        n_iter = 0
        
        while n_iter < self.max_iter:
            n_iter += 1
            new_labels = self._assign(points, centroids)
            moved = bool(np.any(new_labels != labels))
            labels = new_labels
            self._update_centroids(points, labels, centroids)
            if not moved:
                converged = True
                break
        
        inertia = compute_inertia(points, labels, centroids)
        logger.debug(
            f"k={k}: {'converged' if converged else 'stopped'} after "
            f"{n_iter} passes, inertia={inertia:.4f}"
        )
        
        return self._store(ClusterResult(
            labels=labels,
            centroids=centroids,
            inertia=inertia,
            n_iter=n_iter,
            converged=converged
        ))
    
    def _initial_centroids(self, points: np.ndarray, k: int) -> np.ndarray:
        """Copy k starting centroids, either the explicit init or k distinct random points."""
        if self.init is not None:
            centroids = validate_points(self.init)
            if centroids.shape != (k, points.shape[1]):
                raise InvalidArgument(
                    f"init has shape {centroids.shape}, expected {(k, points.shape[1])}"
                )
            return centroids
        
        rng = check_random_state(self.random_state)
        seed_indices = rng.choice(len(points), size=k, replace=False)
        return points[seed_indices].copy()
    
    @staticmethod
    def _assign(points: np.ndarray, centroids: np.ndarray) -> np.ndarray:
        """Index of the nearest centroid for every point, lowest index on ties."""
        distances = cdist(points, centroids, metric='sqeuclidean')
        # A NaN distance never beats a real one
        distances[np.isnan(distances)] = np.inf
        return np.argmin(distances, axis=1)
    
    @staticmethod
    def _update_centroids(points: np.ndarray,
                          labels: np.ndarray,
                          centroids: np.ndarray) -> None:
        """Move every non-empty cluster's centroid to the mean of its points, in place."""
        for j in range(len(centroids)):
            members = points[labels == j]
            if len(members) == 0:
                continue
            centroids[j] = members.mean(axis=0)
    
    def _store(self, result: ClusterResult) -> ClusterResult:
        self.labels_ = result.labels
        self.cluster_centers_ = result.centroids
        self.inertia_ = result.inertia
        self.n_iter_ = result.n_iter
        return result
    
    def get_params(self) -> Dict[str, Any]:
        """Get clustering parameters."""
        return {
            'algorithm': 'kmeans',
            'n_clusters': self.n_clusters,
            'max_iter': self.max_iter,
            'random_state': self.random_state,
            'n_iter': self.n_iter_,
            'inertia': self.inertia_
        }


def cluster(points: Any,
            k: int,
            max_iterations: int = DEFAULT_MAX_ITERATIONS,
            random_state: RandomSource = None,
            init: Optional[Any] = None) -> ClusterResult:
    """
    Cluster a point set into k groups.
    
    Args:
        points: Point coordinates (n_samples, n_features)
        k: Number of clusters
        max_iterations: Maximum number of assignment passes
        random_state: Seed or RandomState used to pick seed points
        init: Optional explicit starting centroids
        
    Returns:
        ClusterResult of the run
    """
    clusterer = KMeansClusterer(
        n_clusters=k,
        max_iter=max_iterations,
        init=init,
        random_state=random_state
    )
    return clusterer.fit(points)
