"""Shared dependencies for API endpoints"""

from fastapi import Depends

from benchclient.config import Settings, get_settings
from benchclient.core.metrics import BenchMetrics, get_bench_metrics
from benchclient.services.benchmark import BenchmarkRunner


def get_benchmark_runner(
    settings: Settings = Depends(get_settings),
    metrics: BenchMetrics = Depends(get_bench_metrics),
) -> BenchmarkRunner:
    """Dependency providing a runner bound to the configured backend."""
    return BenchmarkRunner(
        generate_url=settings.generate_url,
        metrics=metrics,
        runtime=settings.runtime_label,
        test_env=settings.test_env_label,
        timeout=settings.request_timeout,
    )
