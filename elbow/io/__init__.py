"""I/O handlers for point sets and results."""

from .json_handler import (
    NumpyJSONEncoder,
    read_json,
    load_points,
    to_json,
    sweep_summary
)

__all__ = [
    'NumpyJSONEncoder',
    'read_json',
    'load_points',
    'to_json',
    'sweep_summary'
]
