"""Unit tests for clustering metrics and elbow selection."""

import pytest
import numpy as np

from elbow.clustering.metrics import (
    compute_inertia,
    evaluate_clustering,
    find_elbow,
    inertia_drops
)
from elbow.clustering.results import ClusterResult, SweepResult
from elbow.exceptions import InvalidArgument


def make_sweep(inertias):
    """Sweep with placeholder assignments and the given inertia per k."""
    return SweepResult({
        k: ClusterResult(
            labels=np.zeros(1, dtype=np.intp),
            centroids=np.zeros((k, 2)),
            inertia=inertia
        )
        for k, inertia in enumerate(inertias, start=1)
    })


class TestComputeInertia:
    """Test cases for compute_inertia."""
    
    def test_sum_of_squared_distances(self):
        points = np.array([[0, 0], [0, 2], [3, 4]], dtype=float)
        labels = np.array([0, 0, 1])
        centroids = np.array([[0, 1], [0, 0]], dtype=float)
        
        # 1 + 1 + 25
        assert compute_inertia(points, labels, centroids) == 27.0
    
    def test_empty_assignment(self):
        points = np.empty((0, 2))
        assert compute_inertia(points, np.empty(0, dtype=np.intp), np.empty((0, 2))) == 0.0


class TestEvaluateClustering:
    """Test cases for evaluate_clustering."""
    
    def setup_method(self):
        np.random.seed(42)
        self.data = np.vstack([
            np.random.randn(10, 2) + [0, 0],
            np.random.randn(10, 2) + [8, 8],
        ])
        self.labels = np.array([0] * 10 + [1] * 10)
    
    def test_scores_for_valid_partition(self):
        metrics = evaluate_clustering(self.data, self.labels)
        
        assert metrics['n_clusters'] == 2
        assert 0 < metrics['silhouette'] <= 1
        assert metrics['calinski_harabasz'] > 0
        assert metrics['davies_bouldin'] >= 0
    
    def test_single_cluster_has_no_scores(self):
        metrics = evaluate_clustering(self.data, np.zeros(20, dtype=int))
        
        assert metrics == {'n_clusters': 1}
    
    def test_non_finite_points_have_no_scores(self):
        data = self.data.copy()
        data[3] = np.nan
        
        metrics = evaluate_clustering(data, self.labels)
        
        assert metrics == {'n_clusters': 2}


class TestElbow:
    """Test cases for elbow helpers."""
    
    def test_inertia_drops(self):
        sweep = make_sweep([100.0, 20.0, 15.0])
        
        assert inertia_drops(sweep) == {2: 80.0, 3: 5.0}
    
    def test_find_elbow_at_sharpest_bend(self):
        sweep = make_sweep([100.0, 20.0, 15.0, 12.0, 10.0])
        
        assert find_elbow(sweep) == 2
    
    def test_find_elbow_later_bend(self):
        sweep = make_sweep([100.0, 90.0, 80.0, 10.0, 9.0, 8.0])
        
        assert find_elbow(sweep) == 4
    
    def test_flat_curve_falls_back_to_smallest_k(self):
        sweep = make_sweep([0.0, 0.0, 0.0, 0.0])
        
        assert find_elbow(sweep) == 1
    
    def test_short_curve_falls_back_to_smallest_k(self):
        assert find_elbow(make_sweep([10.0, 1.0])) == 1
    
    def test_nan_curve_falls_back_to_smallest_k(self):
        assert find_elbow(make_sweep([np.nan, 1.0, 0.5])) == 1
    
    def test_empty_sweep(self):
        with pytest.raises(InvalidArgument):
            find_elbow(SweepResult({}))


if __name__ == '__main__':
    pytest.main([__file__])
