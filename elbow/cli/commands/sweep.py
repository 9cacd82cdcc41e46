"""Sweep command implementation."""

from ...clustering import SweepEvaluator, find_elbow
from ...config import SweepConfig
from ...exceptions import InvalidArgument
from ...io import read_json, sweep_summary
from ..base import BaseCommand


class SweepCommand(BaseCommand):
    """Command to compute the elbow curve for k = 1..max_k."""
    
    def build_config(self) -> SweepConfig:
        """Configuration file values, overridden by explicit flags."""
        if self.args.config_file:
            config = SweepConfig.from_dict(read_json(self.args.config_file))
        else:
            config = SweepConfig.default()
        
        overrides = {
            'n_points': self.args.n,
            'distribution': self.args.distribution,
            'max_k': self.args.max_k,
            'max_iterations': self.args.max_iter,
            'random_state': self.args.seed,
            'n_jobs': self.args.n_jobs
        }
        for key, value in overrides.items():
            if value is not None:
                setattr(config, key, value)
        
        return config
    
    def execute(self) -> None:
        """Execute the sweep."""
        config = self.build_config()
        points = self.load_points(
            n_points=config.n_points,
            distribution=config.distribution,
            random_state=config.random_state
        )
        
        max_k = config.clamped_max_k()
        if max_k != config.requested_max_k():
            self.logger.warning(f"max_k {config.max_k} clamped to {max_k}")
        
        evaluator = SweepEvaluator(
            max_iter=config.max_iterations,
            random_state=config.random_state,
            n_jobs=config.n_jobs
        )
        sweep = evaluator.evaluate(points, max_k)
        
        output = sweep_summary(sweep, find_elbow(sweep))
        if self.args.select is not None:
            if self.args.select not in sweep:
                raise InvalidArgument(f"--select {self.args.select} is outside k=1..{max_k}")
            output['selected'] = sweep.select(self.args.select).to_dict()
        
        self.emit(output)
