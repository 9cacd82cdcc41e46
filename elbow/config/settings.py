"""Sweep configuration."""

from dataclasses import dataclass, asdict, fields
from typing import Any, Dict, Optional

from .constants import (
    DEFAULT_DISTRIBUTION,
    DEFAULT_MAX_ITERATIONS,
    DEFAULT_MAX_K,
    DEFAULT_N_JOBS,
    DEFAULT_N_POINTS,
    DEFAULT_RANDOM_STATE,
    MAX_MAX_K,
    MIN_MAX_K,
)


@dataclass
class SweepConfig:
    """Parameters for generating a point cloud and sweeping k over it."""
    n_points: int = DEFAULT_N_POINTS
    distribution: str = DEFAULT_DISTRIBUTION
    max_k: int = DEFAULT_MAX_K
    max_iterations: int = DEFAULT_MAX_ITERATIONS
    random_state: Optional[int] = DEFAULT_RANDOM_STATE
    n_jobs: Optional[int] = DEFAULT_N_JOBS
    
    @classmethod
    def default(cls) -> 'SweepConfig':
        """Create default configuration."""
        return cls()
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SweepConfig':
        """
        Build a configuration from a mapping, e.g. a parsed JSON file.
        
        Keys that are not configuration fields are ignored.
        """
        config = cls.default()
        known = {f.name for f in fields(cls)}
        for key, value in data.items():
            if key in known:
                setattr(config, key, value)
        return config
    
    def requested_max_k(self) -> Optional[int]:
        """max_k as an integer, or None when it cannot be parsed."""
        try:
            return int(self.max_k)
        except (TypeError, ValueError):
            return None
    
    def clamped_max_k(self) -> int:
        """Largest k to sweep, forced into the range the controls allow."""
        max_k = self.requested_max_k()
        if max_k is None:
            max_k = DEFAULT_MAX_K
        return max(MIN_MAX_K, min(MAX_MAX_K, max_k))
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return asdict(self)
