"""Main CLI entry point."""

import argparse
import logging
import sys
from typing import List, Optional

from ..exceptions import InvalidArgument
from ..utils.logging import DATE_FORMAT, LOG_FORMAT
from .base import add_common_arguments, add_point_arguments
from .commands import ClusterCommand, SweepCommand


def create_parser():
    """Create argument parser for CLI."""
    parser = argparse.ArgumentParser(
        prog='elbow-kmeans',
        description='K-means clustering and elbow sweeps over 2D point sets'
    )
    
    add_common_arguments(parser)
    
    subparsers = parser.add_subparsers(
        dest='command',
        help='Available commands'
    )
    
    # Cluster command
    cluster_parser = subparsers.add_parser(
        'cluster',
        help='Run k-means for a single k'
    )
    add_point_arguments(cluster_parser)
    cluster_parser.add_argument(
        '-k',
        type=int,
        required=True,
        help='Number of clusters'
    )
    cluster_parser.add_argument(
        '--metrics',
        action='store_true',
        help='Add silhouette, Calinski-Harabasz and Davies-Bouldin scores'
    )
    
    # Sweep command
    sweep_parser = subparsers.add_parser(
        'sweep',
        help='Run k-means for every k in 1..max-k and report the elbow curve'
    )
    add_point_arguments(sweep_parser)
    sweep_parser.add_argument(
        '--max-k',
        type=int,
        default=None,
        help='Largest k to evaluate, clamped to [2, 50] (default 10)'
    )
    sweep_parser.add_argument(
        '--n-jobs',
        type=int,
        default=None,
        help='Parallel workers across k (-1 for all cores)'
    )
    sweep_parser.add_argument(
        '--select',
        type=int,
        default=None,
        help='Also print the full result stored for this k'
    )
    sweep_parser.add_argument(
        '--config-file',
        help='JSON file with sweep configuration'
    )
    
    return parser


def main(argv: Optional[List[str]] = None):
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)
    
    # Configure logging
    logging.basicConfig(
        level=logging.ERROR if args.quiet else getattr(logging, args.log_level),
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT
    )
    
    # Execute command
    if args.command == 'cluster':
        command = ClusterCommand(args)
    elif args.command == 'sweep':
        command = SweepCommand(args)
    else:
        parser.print_help()
        sys.exit(1)
    
    try:
        command.execute()
    except InvalidArgument as e:
        logging.error(f"Invalid argument: {e}")
        sys.exit(2)
    except Exception as e:
        logging.error(f"Command failed: {e}", exc_info=True)
        sys.exit(1)


if __name__ == '__main__':
    main()
