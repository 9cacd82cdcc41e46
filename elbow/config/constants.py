"""Shared constants for clustering and sweeps."""

# Lloyd's iteration
DEFAULT_MAX_ITERATIONS = 100

# Sweep range accepted from user-facing controls
DEFAULT_MAX_K = 10
MIN_MAX_K = 2
MAX_MAX_K = 50

# Default parameters
DEFAULT_N_POINTS = 300
DEFAULT_RANDOM_STATE = None  # Fresh entropy on every run
DEFAULT_N_JOBS = None  # Sequential; -1 uses all available cores

# Point cloud distributions
DISTRIBUTION_UNIFORM = 'uniform'
DISTRIBUTION_NORMAL = 'normal'
DISTRIBUTION_BLOBS = 'blobs'
DISTRIBUTION_RANDOM = 'random'

CONCRETE_DISTRIBUTIONS = [
    DISTRIBUTION_UNIFORM,
    DISTRIBUTION_NORMAL,
    DISTRIBUTION_BLOBS
]

SUPPORTED_DISTRIBUTIONS = CONCRETE_DISTRIBUTIONS + [DISTRIBUTION_RANDOM]

DEFAULT_DISTRIBUTION = DISTRIBUTION_RANDOM

# Generator shapes
UNIFORM_LOW = -5.0
UNIFORM_HIGH = 5.0
NORMAL_SCALE = 2.0
BLOB_CENTERS = [(-5.0, -3.0), (0.0, 4.0), (4.0, -1.0)]
BLOB_SCALE = 0.8

# Logging levels
LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR']
