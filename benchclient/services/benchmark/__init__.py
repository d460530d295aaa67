"""
Benchmark Module

Single-request latency and throughput measurement for streaming
text-generation backends.

Usage:
    from benchclient.core.metrics import BenchMetrics
    from benchclient.services.benchmark import BenchmarkRunner

    runner = BenchmarkRunner(
        generate_url="http://localhost:11434/api/generate",
        metrics=BenchMetrics(),
        runtime="ollama",
        test_env="in-cluster",
    )
    result = await runner.run({"model": "llama3.2", "prompt": "Hello"})

    print(f"TTFT: {result.ttft_seconds:.3f} s")
    print(f"Throughput: {result.tokens_per_second} TPS")
"""

from .metrics import BenchmarkResult, compute_tokens_per_second
from .runner import DEFAULT_MODEL, BenchmarkRunner
from .stream import LineFramer, StreamChunk, decode_chunk
from .timing import TimingState, TimingTracker

__all__ = [
    # Stream
    "LineFramer",
    "StreamChunk",
    "decode_chunk",
    # Timing
    "TimingState",
    "TimingTracker",
    # Metrics
    "BenchmarkResult",
    "compute_tokens_per_second",
    # Runner
    "BenchmarkRunner",
    "DEFAULT_MODEL",
]
