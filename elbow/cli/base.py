"""Base classes and utilities for CLI commands."""

import argparse
import sys
from abc import ABC, abstractmethod
from typing import Any, Optional

import numpy as np

from ..config import (
    DEFAULT_DISTRIBUTION,
    DEFAULT_MAX_ITERATIONS,
    DEFAULT_N_POINTS,
    LOG_LEVELS,
    SUPPORTED_DISTRIBUTIONS,
)
from ..data import generate_points
from ..io import load_points, to_json
from ..utils.logging import get_logger


class BaseCommand(ABC):
    """Base class for CLI commands."""
    
    def __init__(self, args: argparse.Namespace):
        self.args = args
        self.logger = get_logger(f"{__name__}.{self.__class__.__name__}")
    
    @abstractmethod
    def execute(self) -> None:
        """Execute the command."""
        pass
    
    def load_points(self,
                    n_points: Optional[int] = None,
                    distribution: Optional[str] = None,
                    random_state: Optional[int] = None) -> np.ndarray:
        """Read the point set from --points, or generate one."""
        if self.args.points:
            self.logger.info(f"Loading points from {self.args.points}")
            return load_points(self.args.points)
        
        n_points = DEFAULT_N_POINTS if n_points is None else n_points
        distribution = distribution or DEFAULT_DISTRIBUTION
        self.logger.info(f"Generating {n_points} '{distribution}' points")
        return generate_points(distribution, n_points, random_state)
    
    def emit(self, data: Any) -> None:
        """Write command output to stdout as JSON."""
        sys.stdout.write(to_json(data) + '\n')


def add_common_arguments(parser: argparse.ArgumentParser) -> None:
    """Add common arguments to parser."""
    parser.add_argument(
        '--log-level',
        default='WARNING',
        choices=LOG_LEVELS,
        help='Logging level'
    )
    parser.add_argument(
        '--quiet', '-q',
        action='store_true',
        help='Only log errors'
    )


def add_point_arguments(parser: argparse.ArgumentParser) -> None:
    """Add arguments selecting or generating the point set."""
    parser.add_argument(
        '--points', '-p',
        help='JSON file with [[x, y], ...] points (generated when omitted)'
    )
    parser.add_argument(
        '--n',
        type=int,
        default=None,
        help=f'Number of generated points (default {DEFAULT_N_POINTS})'
    )
    parser.add_argument(
        '--distribution', '-d',
        choices=SUPPORTED_DISTRIBUTIONS,
        default=None,
        help='Distribution of generated points (default random)'
    )
    parser.add_argument(
        '--seed',
        type=int,
        default=None,
        help='Seed for point generation and centroid seeding'
    )
    parser.add_argument(
        '--max-iter',
        type=int,
        default=None,
        help=f'Maximum assignment passes per run (default {DEFAULT_MAX_ITERATIONS})'
    )
