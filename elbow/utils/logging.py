"""Logging configuration."""

import logging
from typing import Optional, TextIO

PACKAGE_LOGGER = 'elbow'
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

# Records reach whatever the host application (or the CLI) configures
logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


def get_logger(name: str,
               level: Optional[str] = None,
               stream: Optional[TextIO] = None) -> logging.Logger:
    """
    Get configured logger.
    
    Args:
        name: Logger name, usually ``__name__``
        level: Log level name; when omitted the level is inherited so the
            CLI's ``--log-level`` applies
        stream: Optional stream to attach a formatted handler to, in
            addition to propagating to the root logger
        
    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)
    
    if stream is not None and not any(
        isinstance(handler, logging.StreamHandler) and handler.stream is stream
        for handler in logger.handlers
    ):
        handler = logging.StreamHandler(stream)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)
    
    if level is not None:
        logger.setLevel(getattr(logging, level.upper()))
    return logger
