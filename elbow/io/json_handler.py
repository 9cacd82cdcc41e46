"""JSON handling for point sets and clustering results."""

import json
from pathlib import Path
from typing import Any, Dict, Union

import numpy as np

from ..clustering.results import ClusterResult, SweepResult
from ..exceptions import InvalidArgument
from ..utils.validation import validate_file_exists, validate_input_data, validate_points


class NumpyJSONEncoder(json.JSONEncoder):
    """JSON encoder that handles numpy arrays and clustering results."""
    
    def default(self, obj):
        if isinstance(obj, np.ndarray):
            return obj.tolist()
        if isinstance(obj, np.integer):
            return int(obj)
        if isinstance(obj, np.floating):
            return float(obj)
        if isinstance(obj, (ClusterResult, SweepResult)):
            return obj.to_dict()
        return super().default(obj)


def read_json(path: Union[str, Path]) -> Any:
    """
    Read JSON file.
    
    Raises:
        FileNotFoundError: If file doesn't exist
        json.JSONDecodeError: If file is not valid JSON
    """
    path = validate_file_exists(path)
    
    with open(path, 'r', encoding='utf-8') as f:
        return json.load(f)


def load_points(filepath: Union[str, Path]) -> np.ndarray:
    """
    Load a point set from JSON file.
    
    Expected format, either
    [[x, y], ...]
    or
    {"points": [[x, y], ...]}
    
    Args:
        filepath: Path to points JSON
        
    Returns:
        Array of shape (n, d)
    """
    data = read_json(filepath)
    
    if isinstance(data, dict):
        validate_input_data(data, ['points'])
        data = data['points']
    
    if not isinstance(data, list):
        raise InvalidArgument(f"Expected a list of points, got {type(data).__name__}")
    
    return validate_points(data)


def to_json(data: Any, indent: int = 2) -> str:
    """Serialise data that may contain numpy values or results."""
    return json.dumps(data, cls=NumpyJSONEncoder, indent=indent)


def sweep_summary(sweep: SweepResult, elbow_k: int) -> Dict[str, Any]:
    """Elbow curve of a sweep without the per-point labels."""
    return {
        'ks': sweep.ks,
        'inertias': sweep.inertias(),
        'elbow_k': elbow_k,
        'converged': {k: result.converged for k, result in sweep.items()}
    }
