"""Input validation utilities."""

from pathlib import Path
from typing import Any, Dict, List, Union

import numpy as np

from ..exceptions import InvalidArgument
from .numpy_helpers import to_numpy_array


def validate_file_exists(path: Union[str, Path]) -> Path:
    """
    Validate that file exists.
    
    Args:
        path: File path
        
    Returns:
        Path object
        
    Raises:
        FileNotFoundError: If file doesn't exist
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"File not found: {path}")
    return path


def validate_input_data(data: Dict[str, Any], 
                       required_keys: List[str]) -> None:
    """
    Validate input data has required keys.
    
    Raises:
        InvalidArgument: If required keys are missing
    """
    missing_keys = set(required_keys) - set(data.keys())
    if missing_keys:
        raise InvalidArgument(f"Missing required keys: {sorted(missing_keys)}")


def validate_points(points: Any) -> np.ndarray:
    """
    Normalise a point set to a float ``(n, d)`` array.
    
    The returned array is always a copy, so callers' point sets are never
    touched by the clustering code. NaN and infinite coordinates are
    accepted and simply flow through the arithmetic.
    
    Args:
        points: Sequence of coordinate tuples or a 2D array
        
    Returns:
        Float64 array of shape (n, d)
        
    Raises:
        InvalidArgument: If the input is not numeric or not two-dimensional
    """
    try:
        array = to_numpy_array(points)
    except (TypeError, ValueError) as e:
        raise InvalidArgument(f"Points must be numeric coordinate pairs: {e}") from e
    
    if array.ndim == 1 and array.size == 0:
        return array.reshape(0, 2)
    
    if array.ndim != 2:
        raise InvalidArgument(
            f"Expected 2D array of points, got {array.ndim}D array with shape {array.shape}"
        )
    
    if array.shape[1] == 0:
        raise InvalidArgument("Points have zero dimensions")
    
    return array
