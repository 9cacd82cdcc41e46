"""Base interface for clustering algorithms."""

from abc import ABC, abstractmethod
from typing import Any, Dict, List

import numpy as np

from .results import ClusterResult, labels_to_clusters


class Clusterer(ABC):
    """Abstract base class for clustering algorithms."""
    
    @abstractmethod
    def fit(self, points: Any) -> ClusterResult:
        """
        Run the algorithm on a point set.
        
        Args:
            points: Point coordinates (n_samples, n_features)
            
        Returns:
            Labels, centroids and inertia of the run
        """
        pass
    
    @abstractmethod
    def get_params(self) -> Dict[str, Any]:
        """Get clustering parameters."""
        pass
    
    def cluster(self, points: Any) -> Dict[int, List[int]]:
        """
        Perform clustering and group sample indices by cluster.
        
        Args:
            points: Point coordinates (n_samples, n_features)
            
        Returns:
            Dict mapping cluster IDs to lists of sample indices
        """
        return self.prepare_clusters(self.fit(points).labels)
    
    def prepare_clusters(self, labels: np.ndarray) -> Dict[int, List[int]]:
        """Convert cluster labels to dictionary format."""
        return labels_to_clusters(labels)
