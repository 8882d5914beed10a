"""Configuration classes for idxgraph components."""

from dataclasses import dataclass


@dataclass
class SolverConfig:
    """Configuration for the shortest-path solver."""

    # Skip heap entries whose distance is worse than the node's settled distance.
    # Results are identical either way; skipping avoids redundant edge scans.
    skip_stale_entries: bool = True

    # Solves taking longer than this many seconds are logged at INFO level
    slow_solve_seconds: float = 1.0

    def is_slow(self, elapsed: float) -> bool:
        """Return True if a solve of ``elapsed`` seconds should be reported."""
        return elapsed >= self.slow_solve_seconds


# Global configuration instance
SOLVER_CONFIG = SolverConfig()
