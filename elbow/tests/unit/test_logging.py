"""Unit tests for logging configuration."""

import io
import logging

import pytest

from elbow.utils.logging import get_logger


class TestGetLogger:
    """Test cases for get_logger."""
    
    def test_records_propagate_to_root(self, caplog):
        logger = get_logger('elbow.tests.propagation')
        
        with caplog.at_level(logging.INFO):
            logger.info('sweep started')
        
        assert 'sweep started' in caplog.text
    
    def test_package_logs_reach_host_handlers(self, caplog):
        from elbow.clustering.sweep import evaluate_sweep
        
        with caplog.at_level(logging.INFO, logger='elbow'):
            evaluate_sweep([[0, 0], [1, 1], [5, 5]], 2, random_state=0)
        
        assert any(record.name == 'elbow.clustering.sweep' for record in caplog.records)
    
    def test_stream_handler_attached_once(self):
        stream = io.StringIO()
        logger = get_logger('elbow.tests.stream', level='INFO', stream=stream)
        get_logger('elbow.tests.stream', stream=stream)
        
        logger.info('hello')
        
        assert stream.getvalue().count('hello') == 1
        assert ' - elbow.tests.stream - INFO - hello' in stream.getvalue()
    
    def test_level(self):
        assert get_logger('elbow.tests.level', level='debug').level == logging.DEBUG


if __name__ == '__main__':
    pytest.main([__file__])
