"""Synthetic 2D point cloud generators."""

from typing import Optional, Union

import numpy as np
from sklearn.utils import check_random_state

from ..config.constants import (
    BLOB_CENTERS,
    BLOB_SCALE,
    CONCRETE_DISTRIBUTIONS,
    DEFAULT_DISTRIBUTION,
    DISTRIBUTION_BLOBS,
    DISTRIBUTION_NORMAL,
    DISTRIBUTION_RANDOM,
    DISTRIBUTION_UNIFORM,
    NORMAL_SCALE,
    SUPPORTED_DISTRIBUTIONS,
    UNIFORM_HIGH,
    UNIFORM_LOW,
)
from ..exceptions import InvalidArgument
from ..utils.logging import get_logger

logger = get_logger(__name__)


class PointGenerator:
    """Draws 2D point clouds from a few simple distributions."""
    
    def __init__(self, random_state: Union[None, int, np.random.RandomState] = None):
        self.rng = check_random_state(random_state)
    
    def generate(self, distribution: str = DEFAULT_DISTRIBUTION, n: int = 300) -> np.ndarray:
        """
        Generate n points.
        
        Args:
            distribution: 'uniform', 'normal', 'blobs' or 'random' (one of
                the other three, picked at random)
            n: Number of points
            
        Returns:
            Array of shape (n, 2)
        """
        if n < 0:
            raise InvalidArgument(f"Number of points must be non-negative, got {n}")
        
        if distribution not in SUPPORTED_DISTRIBUTIONS:
            raise InvalidArgument(
                f"Unknown distribution '{distribution}', expected one of {SUPPORTED_DISTRIBUTIONS}"
            )
        
        if distribution == DISTRIBUTION_RANDOM:
            distribution = CONCRETE_DISTRIBUTIONS[self.rng.randint(len(CONCRETE_DISTRIBUTIONS))]
            logger.info(f"Random distribution resolved to '{distribution}'")
        
        samplers = {
            DISTRIBUTION_UNIFORM: self.uniform,
            DISTRIBUTION_NORMAL: self.normal,
            DISTRIBUTION_BLOBS: self.blobs
        }
        return samplers[distribution](n)
    
    def uniform(self, n: int) -> np.ndarray:
        return self.rng.uniform(UNIFORM_LOW, UNIFORM_HIGH, size=(n, 2))
    
    def normal(self, n: int) -> np.ndarray:
        return self.rng.normal(0.0, NORMAL_SCALE, size=(n, 2))
    
    def blobs(self, n: int) -> np.ndarray:
        """Points dealt round-robin to three fixed centres with Gaussian jitter."""
        centers = np.asarray(BLOB_CENTERS, dtype=np.float64)
        assigned = centers[np.arange(n) % len(centers)]
        return assigned + self.rng.normal(0.0, BLOB_SCALE, size=(n, 2))


def generate_points(distribution: str = DEFAULT_DISTRIBUTION,
                    n: int = 300,
                    random_state: Optional[int] = None) -> np.ndarray:
    """Generate a point cloud with a fresh PointGenerator."""
    return PointGenerator(random_state).generate(distribution, n)
