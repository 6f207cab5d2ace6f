"""JSON reporting for batches of class-file lookups."""

import json
import time
from typing import Any

from src.compute_config_hash import compute_config_hash
from src.resolution_result import ResolutionResult
from src.resolver_config import ResolverConfig


class ResolutionReport:
    """Collects lookup results and writes them as a JSON report."""

    def __init__(self, config: ResolverConfig) -> None:
        """Initialize an empty report for the given configuration."""
        self.config = config
        self.config_hash = compute_config_hash(config)
        self.results: list[ResolutionResult] = []
        self.start_time = time.time()

    def add_result(self, result: ResolutionResult) -> None:
        """Record the outcome of one lookup."""
        self.results.append(result)

    def to_dict(self) -> dict[str, Any]:
        """Build the report payload."""
        return {
            "meta": {
                "timestamp": time.time(),
                "duration": time.time() - self.start_time,
                "config_hash": self.config_hash,
                "total_items": len(self.results),
            },
            "config": self.config.to_dict(),
            "results": [
                {
                    "qualified_name": r.qualified_name,
                    "loaded_path": r.loaded_path,
                    "skipped": r.skipped,
                    "candidates": r.candidates,
                }
                for r in self.results
            ],
            "stats": self._compute_stats(),
        }

    def generate_report(self, path: str) -> None:
        """Write the report to ``path``."""
        with open(path, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=2)

    def _compute_stats(self) -> dict[str, int]:
        stats = {"found": 0, "missing": 0, "skipped": 0}
        for r in self.results:
            if r.skipped:
                stats["skipped"] += 1
            elif r.found:
                stats["found"] += 1
            else:
                stats["missing"] += 1
        return stats
