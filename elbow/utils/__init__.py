"""Utility modules for the clustering core."""

from .logging import get_logger
from .numpy_helpers import to_numpy_array, readonly
from .validation import validate_points, validate_input_data, validate_file_exists

__all__ = [
    'get_logger',
    'to_numpy_array',
    'readonly',
    'validate_points',
    'validate_input_data',
    'validate_file_exists'
]
