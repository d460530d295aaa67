"""Prometheus metrics for benchmark runs.

All observations share the ``{model, runtime, test_env}`` label set; the
request counter additionally carries ``status``. The prometheus_client
metric objects are thread-safe, so concurrent runs record into the same
registry without extra locking.
"""

import logging
from dataclasses import asdict, dataclass
from typing import TYPE_CHECKING, Optional

from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    GCCollector,
    Gauge,
    Histogram,
    PlatformCollector,
    ProcessCollector,
    generate_latest,
)

from benchclient.config import get_settings

if TYPE_CHECKING:
    from benchclient.services.benchmark.metrics import BenchmarkResult

logger = logging.getLogger(__name__)

LABEL_NAMES = ("model", "runtime", "test_env")

STATUS_OK = "ok"
STATUS_ERROR = "error"


@dataclass(frozen=True)
class BenchmarkLabels:
    """Label set attached to every observation of one run"""

    model: str
    runtime: str
    test_env: str

    def as_dict(self) -> dict[str, str]:
        return asdict(self)

    def with_status(self, status: str) -> dict[str, str]:
        return {**self.as_dict(), "status": status}


class BenchMetrics:
    """Registry holding the TTFT/total histograms, TPS gauge and request counter."""

    def __init__(
        self,
        registry: Optional[CollectorRegistry] = None,
        collect_process_metrics: bool = False,
    ):
        self.registry = registry if registry is not None else CollectorRegistry()

        if collect_process_metrics:
            ProcessCollector(registry=self.registry)
            PlatformCollector(registry=self.registry)
            GCCollector(registry=self.registry)

        self.ttft = Histogram(
            "inference_ttft_seconds",
            "Time to first token (seconds).",
            labelnames=LABEL_NAMES,
            registry=self.registry,
        )
        self.total = Histogram(
            "inference_total_time_seconds",
            "Total time from request to completion (seconds).",
            labelnames=LABEL_NAMES,
            registry=self.registry,
        )
        self.tokens_per_second = Gauge(
            "inference_tokens_per_second",
            "Tokens per second (as reported by runtime if available).",
            labelnames=LABEL_NAMES,
            registry=self.registry,
        )
        self.requests = Counter(
            "inference_requests",
            "Total benchmarked requests.",
            labelnames=LABEL_NAMES + ("status",),
            registry=self.registry,
        )

    def record_success(self, labels: BenchmarkLabels, result: "BenchmarkResult") -> None:
        """Record latency/throughput observations and count a successful run."""
        key = labels.as_dict()
        self.ttft.labels(**key).observe(result.ttft_seconds)
        self.total.labels(**key).observe(result.total_seconds)
        if result.tokens_per_second is not None:
            self.tokens_per_second.labels(**key).set(result.tokens_per_second)
        self.requests.labels(**labels.with_status(STATUS_OK)).inc()

    def record_failure(self, labels: BenchmarkLabels) -> None:
        """Count a failed run. No latency observations are taken."""
        self.requests.labels(**labels.with_status(STATUS_ERROR)).inc()

    def render(self) -> bytes:
        """Serialize the registry in the Prometheus text format."""
        return generate_latest(self.registry)

    @property
    def content_type(self) -> str:
        return CONTENT_TYPE_LATEST


_bench_metrics: Optional[BenchMetrics] = None


def get_bench_metrics() -> BenchMetrics:
    """Process-wide metrics instance, created on first use."""
    global _bench_metrics
    if _bench_metrics is None:
        settings = get_settings()
        _bench_metrics = BenchMetrics(
            collect_process_metrics=settings.collect_process_metrics,
        )
        logger.debug("Benchmark metrics registry initialized")
    return _bench_metrics
