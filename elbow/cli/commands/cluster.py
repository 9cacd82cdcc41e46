"""Cluster command implementation."""

from ...clustering import KMeansClusterer, evaluate_clustering
from ...config import DEFAULT_MAX_ITERATIONS
from ..base import BaseCommand


class ClusterCommand(BaseCommand):
    """Command to run k-means once for a fixed k."""
    
    def execute(self) -> None:
        """Execute a single clustering run."""
        points = self.load_points(
            n_points=self.args.n,
            distribution=self.args.distribution,
            random_state=self.args.seed
        )
        
        clusterer = KMeansClusterer(
            n_clusters=self.args.k,
            max_iter=DEFAULT_MAX_ITERATIONS if self.args.max_iter is None else self.args.max_iter,
            random_state=self.args.seed
        )
        
        self.logger.info(f"Clustering {len(points)} points with k={self.args.k}")
        result = clusterer.fit(points)
        
        output = result.to_dict()
        if self.args.metrics:
            output['metrics'] = evaluate_clustering(points, result.labels)
        
        self.emit(output)
