"""
Benchmark Runner

Executes a single streaming generate call against an Ollama-compatible
backend and measures TTFT, end-to-end latency and tokens per second.
"""

import logging
import time
from collections.abc import Callable, Mapping
from typing import Any

import httpx

from benchclient.core.exceptions import BackendError, TransportError
from benchclient.core.metrics import BenchmarkLabels, BenchMetrics

from .metrics import BenchmarkResult, compute_tokens_per_second
from .stream import LineFramer, StreamChunk, decode_chunk
from .timing import TimingTracker

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "unknown"


class BenchmarkRunner:
    """
    Runs benchmark calls against one configured backend.

    The runner itself holds configuration only. Framing buffers and timing
    state are created per :meth:`run` call, so one runner can serve any
    number of concurrent requests.
    """

    def __init__(
        self,
        generate_url: str,
        metrics: BenchMetrics,
        runtime: str,
        test_env: str,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        clock: Callable[[], float] = time.perf_counter,
    ):
        self.generate_url = generate_url
        self.metrics = metrics
        self.runtime = runtime
        self.test_env = test_env
        self.timeout = timeout
        self._transport = transport
        self._clock = clock

    def build_labels(self, model: str) -> BenchmarkLabels:
        return BenchmarkLabels(model=model, runtime=self.runtime, test_env=self.test_env)

    @staticmethod
    def build_payload(request: Mapping[str, Any], model: str) -> dict[str, Any]:
        """Copy caller parameters, pin the model and force streaming on"""
        payload = dict(request)
        payload["model"] = model
        payload["stream"] = True
        return payload

    async def run(self, request: Mapping[str, Any]) -> BenchmarkResult:
        """
        Execute one benchmark call.

        Raises:
            BackendError: backend answered with a non-success status
            TransportError: connection or stream failure
        """
        model = request.get("model")
        if model is None:
            model = DEFAULT_MODEL
        labels = self.build_labels(model)
        payload = self.build_payload(request, model)

        tracker = TimingTracker(clock=self._clock)
        framer = LineFramer()
        terminal: StreamChunk | None = None
        skipped = 0

        def consume(line: str) -> None:
            nonlocal terminal, skipped
            chunk = decode_chunk(line)
            if chunk is None:
                if line.strip():
                    skipped += 1
                return
            tracker.observe(chunk)
            if chunk.done:
                terminal = chunk

        tracker.start()
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                async with client.stream("POST", self.generate_url, json=payload) as response:
                    if not response.is_success:
                        status_text = response.reason_phrase or f"HTTP {response.status_code}"
                        raise BackendError(status_text, backend_status=response.status_code)

                    # Read until the backend closes the stream, even past done=true
                    async for fragment in response.aiter_bytes():
                        for line in framer.feed(fragment):
                            consume(line)

                    for line in framer.flush():
                        consume(line)
                    tracker.complete()

        except BackendError as e:
            logger.warning(f"Backend returned {e.details.get('backend_status')} for model {model}: {e.message}")
            self.metrics.record_failure(labels)
            raise
        except Exception as e:
            logger.error(f"Benchmark request for model {model} failed: {e!r}")
            self.metrics.record_failure(labels)
            raise TransportError(str(e) or type(e).__name__) from e

        if skipped:
            logger.debug(f"Skipped {skipped} undecodable stream line(s) for model {model}")

        result = BenchmarkResult(
            model=model,
            runtime=self.runtime,
            test_env=self.test_env,
            ttft_seconds=tracker.ttft_seconds,
            total_seconds=tracker.total_seconds,
            tokens_per_second=compute_tokens_per_second(
                terminal.eval_count if terminal else None,
                terminal.eval_duration if terminal else None,
            ),
        )
        self.metrics.record_success(labels, result)

        logger.debug(
            f"Benchmark completed: model={model}, TTFT={result.ttft_seconds:.3f}s, "
            f"total={result.total_seconds:.3f}s, tps={result.tokens_per_second}"
        )
        return result
