"""
Benchmark Metrics

Result record for a single benchmark run and the throughput calculation
derived from backend-reported token counts.
"""

from dataclasses import dataclass
from typing import Any

NANOS_PER_SECOND = 1e9


def compute_tokens_per_second(
    eval_count: int | None,
    eval_duration_ns: int | None,
) -> float | None:
    """Tokens per second from the terminal chunk, or None when not computable"""
    if not eval_count or eval_duration_ns is None:
        return None

    seconds = eval_duration_ns / NANOS_PER_SECOND
    if seconds <= 0:
        return None

    return eval_count / seconds


@dataclass
class BenchmarkResult:
    """Outcome of one successful benchmark run"""

    model: str
    runtime: str
    test_env: str
    ttft_seconds: float = 0.0  # 0.0 when no content chunk arrived
    total_seconds: float = 0.0
    tokens_per_second: float | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary"""
        return {
            "model": self.model,
            "runtime": self.runtime,
            "test_env": self.test_env,
            "ttft_seconds": self.ttft_seconds,
            "total_seconds": self.total_seconds,
            "tokens_per_second": self.tokens_per_second,
        }
