"""Elbow sweep: one independent k-means run for every k in 1..max_k."""

from typing import Any, List, Optional

import numpy as np
from joblib import Parallel, delayed
from sklearn.utils import check_random_state

from ..config.constants import DEFAULT_MAX_ITERATIONS, DEFAULT_N_JOBS
from ..exceptions import InvalidArgument
from ..utils.logging import get_logger
from ..utils.validation import validate_points
from .kmeans import KMeansClusterer, RandomSource
from .results import ClusterResult, SweepResult

logger = get_logger(__name__)


def _run_single_k(points: np.ndarray, k: int, max_iter: int, seed: int) -> ClusterResult:
    result = KMeansClusterer(n_clusters=k, max_iter=max_iter, random_state=seed).fit(points)
    logger.debug(f"Sweep k={k}: inertia={result.inertia:.4f}")
    return result


class SweepEvaluator:
    """
    Runs k-means for every k from 1 to max_k on the same point set.
    
    Each run draws its own seed from the evaluator's random source before
    any clustering starts, so a seeded sweep gives the same per-k results
    whether the runs execute sequentially or in parallel.
    """
    
    def __init__(self,
                 max_iter: int = DEFAULT_MAX_ITERATIONS,
                 random_state: RandomSource = None,
                 n_jobs: Optional[int] = DEFAULT_N_JOBS):
        """
        Initialize sweep evaluator.
        
        Args:
            max_iter: Maximum assignment passes per run
            random_state: Seed or RandomState the per-k seeds are drawn from
            n_jobs: joblib worker count (None runs sequentially, -1 uses all cores)
        """
        self.max_iter = max_iter
        self.random_state = random_state
        self.n_jobs = n_jobs
    
    def evaluate(self, points: Any, max_k: int) -> SweepResult:
        """
        Cluster the points for k = 1..max_k.
        
        Args:
            points: Point coordinates (n_samples, n_features); never modified
            max_k: Largest number of clusters to evaluate
            
        Returns:
            SweepResult with exactly max_k entries keyed 1..max_k
            
        Raises:
            InvalidArgument: If max_k is below one or exceeds the point count
        """
        points = validate_points(points)
        n_samples = len(points)
        
        if max_k < 1:
            raise InvalidArgument(f"max_k must be at least 1, got {max_k}")
        
        if max_k > n_samples:
            raise InvalidArgument(
                f"k exceeds point count (max_k={max_k}, n_samples={n_samples})"
            )
        
        ks = list(range(1, max_k + 1))
        seeds = self._draw_seeds(len(ks))
        
        logger.info(f"Sweeping k=1..{max_k} over {n_samples} points")
        runs = Parallel(n_jobs=self.n_jobs)(
            delayed(_run_single_k)(points, k, self.max_iter, seed)
            for k, seed in zip(ks, seeds)
        )
        sweep = SweepResult(dict(zip(ks, runs)))
        logger.info(
            f"Sweep finished: inertia {sweep[1].inertia:.4f} at k=1, "
            f"{sweep[max_k].inertia:.4f} at k={max_k}"
        )
        
        return sweep
    
    def _draw_seeds(self, count: int) -> List[int]:
        rng = check_random_state(self.random_state)
        return [int(seed) for seed in rng.randint(np.iinfo(np.int32).max, size=count)]


def evaluate_sweep(points: Any,
                   max_k: int,
                   max_iterations: int = DEFAULT_MAX_ITERATIONS,
                   random_state: RandomSource = None,
                   n_jobs: Optional[int] = DEFAULT_N_JOBS) -> SweepResult:
    """
    Run an elbow sweep over k = 1..max_k.
    
    Args:
        points: Point coordinates (n_samples, n_features)
        max_k: Largest number of clusters to evaluate
        max_iterations: Maximum assignment passes per run
        random_state: Seed or RandomState the per-k seeds are drawn from
        n_jobs: joblib worker count
        
    Returns:
        SweepResult keyed 1..max_k
    """
    evaluator = SweepEvaluator(
        max_iter=max_iterations,
        random_state=random_state,
        n_jobs=n_jobs
    )
    return evaluator.evaluate(points, max_k)
