"""Configuration classes for pathgraph components."""

from dataclasses import dataclass


@dataclass
class PathFinderConfig:
    """Configuration for all-simple-paths enumeration."""

    # Keep whole-query results keyed by (source id, target id)
    cache_results: bool = True

    # Log a warning when one query enumerates more paths than this
    path_count_warning: int = 10_000

    def should_warn(self, path_count: int) -> bool:
        """Return True if ``path_count`` exceeds the warning threshold."""
        return self.path_count_warning > 0 and path_count > self.path_count_warning


# Global configuration instance
PATHFINDER_CONFIG = PathFinderConfig()
