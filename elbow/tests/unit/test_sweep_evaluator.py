"""Unit tests for the elbow sweep."""

import pytest
import numpy as np
from joblib import parallel_backend

from elbow.clustering.sweep import SweepEvaluator, evaluate_sweep
from elbow.clustering.metrics import compute_inertia
from elbow.exceptions import InvalidArgument


class TestSweepEvaluator:
    """Test cases for SweepEvaluator."""
    
    def setup_method(self):
        """Set up test fixtures."""
        np.random.seed(0)
        self.data = np.vstack([
            np.random.randn(15, 2) * 0.5 + [-5, -3],
            np.random.randn(15, 2) * 0.5 + [0, 4],
            np.random.randn(15, 2) * 0.5 + [4, -1],
        ])
    
    def test_one_entry_per_k(self):
        """The sweep holds exactly max_k results keyed 1..max_k."""
        sweep = evaluate_sweep(self.data, 6, random_state=0)
        
        assert len(sweep) == 6
        assert list(sweep) == [1, 2, 3, 4, 5, 6]
        for k, result in sweep.items():
            assert result.k == k
            assert result.labels.shape == (len(self.data),)
    
    def test_single_k(self):
        """max_k=1 is the smallest valid sweep."""
        sweep = evaluate_sweep(self.data, 1)
        
        assert sweep.ks == [1]
        assert np.allclose(sweep[1].centroids[0], self.data.mean(axis=0))
    
    def test_results_are_self_consistent(self):
        """Each stored inertia matches its own labels and centroids."""
        sweep = evaluate_sweep(self.data, 5, random_state=3)
        
        for result in sweep.values():
            assert compute_inertia(self.data, result.labels, result.centroids) == result.inertia
    
    def test_more_clusters_fit_separated_blobs_better(self):
        """Three clusters fit three blobs far better than one."""
        sweep = evaluate_sweep(self.data, 4, random_state=1)
        inertias = sweep.inertias()
        
        assert inertias[3] < inertias[1]
        assert inertias[2] < inertias[1]
    
    @pytest.mark.parametrize('max_k', [0, -3])
    def test_max_k_below_one(self, max_k):
        """A sweep needs at least one k."""
        with pytest.raises(InvalidArgument):
            evaluate_sweep(self.data, max_k)
    
    def test_max_k_exceeds_point_count(self):
        """The k > n guard is reported before any run starts."""
        with pytest.raises(InvalidArgument, match='k exceeds point count'):
            evaluate_sweep(self.data[:3], 4)
    
    def test_reproducible_with_seed(self):
        """A seeded sweep gives the same per-k results every time."""
        sweep1 = SweepEvaluator(random_state=11).evaluate(self.data, 5)
        sweep2 = SweepEvaluator(random_state=11).evaluate(self.data, 5)
        
        for k in sweep1:
            assert np.array_equal(sweep1[k].labels, sweep2[k].labels)
            assert sweep1[k].inertia == sweep2[k].inertia
    
    def test_parallel_matches_sequential(self):
        """Running the ks concurrently does not change any result."""
        sequential = SweepEvaluator(random_state=5).evaluate(self.data, 5)
        with parallel_backend('threading'):
            parallel = SweepEvaluator(random_state=5, n_jobs=2).evaluate(self.data, 5)
        
        for k in sequential:
            assert np.array_equal(sequential[k].labels, parallel[k].labels)
            assert np.array_equal(sequential[k].centroids, parallel[k].centroids)
            assert sequential[k].inertia == parallel[k].inertia
    
    def test_runs_are_independently_seeded(self):
        """Each k gets its own seed drawn up front from the sweep's source."""
        evaluator = SweepEvaluator(random_state=9)
        seeds = evaluator._draw_seeds(4)
        
        assert len(seeds) == 4
        assert evaluator._draw_seeds(4) == seeds
    
    def test_accepts_random_state_instance(self):
        """A RandomState can be threaded through instead of a seed."""
        sweep = evaluate_sweep(self.data, 3, random_state=np.random.RandomState(2))
        
        assert sweep.ks == [1, 2, 3]
    
    def test_points_not_mutated(self):
        """The sweep leaves the caller's points untouched."""
        points = self.data.copy()
        evaluate_sweep(points, 4, random_state=0)
        
        assert np.array_equal(points, self.data)
    
    def test_max_iterations_applied_to_every_run(self):
        """The iteration cap reaches each per-k run."""
        sweep = evaluate_sweep(self.data, 4, max_iterations=1, random_state=0)
        
        assert all(result.n_iter == 1 for result in sweep.values())


if __name__ == '__main__':
    pytest.main([__file__])
