"""NumPy array utilities."""

import numpy as np
from typing import List, Union


def to_numpy_array(data: Union[List, np.ndarray], dtype: type = np.float64) -> np.ndarray:
    """
    Convert data to a numpy array that does not share memory with the input.
    
    Args:
        data: Input data
        dtype: Target data type
        
    Returns:
        NumPy array
    """
    return np.array(data, dtype=dtype, copy=True)


def readonly(array: np.ndarray) -> np.ndarray:
    """Mark an array as read-only and return it."""
    array.flags.writeable = False
    return array
