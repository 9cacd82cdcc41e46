"""Configuration module for clustering sweeps."""

from .settings import SweepConfig

from .constants import (
    DEFAULT_MAX_ITERATIONS,
    DEFAULT_MAX_K,
    MIN_MAX_K,
    MAX_MAX_K,
    DEFAULT_N_POINTS,
    DEFAULT_RANDOM_STATE,
    DEFAULT_N_JOBS,
    DEFAULT_DISTRIBUTION,
    SUPPORTED_DISTRIBUTIONS,
    LOG_LEVELS
)

__all__ = [
    'SweepConfig',
    'DEFAULT_MAX_ITERATIONS',
    'DEFAULT_MAX_K',
    'MIN_MAX_K',
    'MAX_MAX_K',
    'DEFAULT_N_POINTS',
    'DEFAULT_RANDOM_STATE',
    'DEFAULT_N_JOBS',
    'DEFAULT_DISTRIBUTION',
    'SUPPORTED_DISTRIBUTIONS',
    'LOG_LEVELS'
]
