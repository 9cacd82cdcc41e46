"""Unit tests for JSON handling."""

import json

import pytest
import numpy as np

from elbow.clustering.kmeans import cluster
from elbow.exceptions import InvalidArgument
from elbow.io import load_points, to_json


class TestLoadPoints:
    """Test cases for load_points."""
    
    def test_list_of_pairs(self, tmp_path):
        path = tmp_path / 'points.json'
        path.write_text(json.dumps([[0, 0], [1.5, 2]]))
        
        points = load_points(path)
        
        assert points.shape == (2, 2)
        assert points.dtype == np.float64
        assert points[1].tolist() == [1.5, 2.0]
    
    def test_wrapped_points(self, tmp_path):
        path = tmp_path / 'points.json'
        path.write_text(json.dumps({'points': [[0, 0], [1, 1], [2, 2]]}))
        
        assert load_points(path).shape == (3, 2)
    
    def test_missing_points_key(self, tmp_path):
        path = tmp_path / 'points.json'
        path.write_text(json.dumps({'coords': []}))
        
        with pytest.raises(InvalidArgument, match='Missing required keys'):
            load_points(path)
    
    def test_ragged_points(self, tmp_path):
        path = tmp_path / 'points.json'
        path.write_text(json.dumps([[0, 0], [1]]))
        
        with pytest.raises(InvalidArgument):
            load_points(path)
    
    def test_not_a_list(self, tmp_path):
        path = tmp_path / 'points.json'
        path.write_text(json.dumps('0,0'))
        
        with pytest.raises(InvalidArgument):
            load_points(path)
    
    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_points(tmp_path / 'absent.json')


class TestToJson:
    """Test cases for JSON serialisation."""
    
    def test_serialises_results_and_numpy_values(self):
        result = cluster([[0, 0], [0, 1], [10, 0], [10, 1]], 2, init=[[0, 0], [10, 0]])
        
        data = json.loads(to_json({
            'result': result,
            'count': np.int64(4),
            'score': np.float32(0.5),
            'array': np.arange(3)
        }))
        
        assert data['result']['labels'] == [0, 0, 1, 1]
        assert data['result']['inertia'] == 1.0
        assert data['count'] == 4
        assert data['score'] == 0.5
        assert data['array'] == [0, 1, 2]


if __name__ == '__main__':
    pytest.main([__file__])
