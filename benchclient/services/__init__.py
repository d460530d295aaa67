"""Business logic services"""

from benchclient.services.benchmark import BenchmarkRunner

__all__ = [
    "BenchmarkRunner",
]
