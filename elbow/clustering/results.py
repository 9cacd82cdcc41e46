"""Value objects returned by clustering runs and sweeps."""

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Iterator, List

import numpy as np

from ..utils.numpy_helpers import readonly


def labels_to_clusters(labels: np.ndarray) -> Dict[int, List[int]]:
    """
    Convert cluster labels to dictionary format.
    
    Args:
        labels: Array of cluster labels
        
    Returns:
        Dict mapping cluster IDs to lists of sample indices
    """
    clusters: Dict[int, List[int]] = {}
    
    for idx, label in enumerate(labels):
        clusters.setdefault(int(label), []).append(idx)
    
    return clusters


@dataclass(frozen=True, eq=False)
class ClusterResult:
    """
    Outcome of a single k-means run.
    
    Attributes:
        labels: Cluster index of every input point, aligned with the input order
        centroids: Final centroid coordinates, shape (k, n_features)
        inertia: Sum of squared distances from each point to its centroid
        n_iter: Number of assignment passes that were executed
        converged: Whether the last pass left every label unchanged
    """
    labels: np.ndarray
    centroids: np.ndarray
    inertia: float
    n_iter: int = 0
    converged: bool = True
    
    def __post_init__(self):
        readonly(self.labels)
        readonly(self.centroids)
    
    def __setstate__(self, state):
        # Arrays unpickled from joblib workers come back writeable
        self.__dict__.update(state)
        self.__post_init__()
    
    @classmethod
    def empty(cls, n_features: int = 2) -> 'ClusterResult':
        """Result of a run that was asked for no clusters at all."""
        return cls(
            labels=np.empty(0, dtype=np.intp),
            centroids=np.empty((0, n_features), dtype=np.float64),
            inertia=0.0
        )
    
    @property
    def k(self) -> int:
        return len(self.centroids)
    
    def clusters(self) -> Dict[int, List[int]]:
        """Indices of the points in each non-empty cluster."""
        return labels_to_clusters(self.labels)
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            'k': self.k,
            'labels': self.labels.tolist(),
            'centroids': self.centroids.tolist(),
            'inertia': float(self.inertia),
            'n_iter': self.n_iter,
            'converged': self.converged
        }


class SweepResult(Mapping):
    """Read-only mapping of k to the ClusterResult computed for it, in ascending k."""
    
    def __init__(self, results: Dict[int, ClusterResult]):
        self._results = MappingProxyType(dict(sorted(results.items())))
    
    def __getitem__(self, k: int) -> ClusterResult:
        return self._results[k]
    
    def __iter__(self) -> Iterator[int]:
        return iter(self._results)
    
    def __len__(self) -> int:
        return len(self._results)
    
    def __repr__(self) -> str:
        return f"SweepResult(ks={self.ks})"
    
    @property
    def ks(self) -> List[int]:
        return list(self._results)
    
    def inertias(self) -> Dict[int, float]:
        """Elbow curve: inertia of every evaluated k."""
        return {k: float(result.inertia) for k, result in self._results.items()}
    
    def select(self, k: int) -> ClusterResult:
        """
        Return the stored result for a chosen k.
        
        Raises:
            KeyError: If k was not part of the sweep
        """
        if k not in self._results:
            raise KeyError(f"k={k} was not evaluated (sweep covers {self.ks})")
        return self._results[k]
    
    def to_dict(self) -> Dict[int, Dict[str, Any]]:
        return {k: result.to_dict() for k, result in self._results.items()}
