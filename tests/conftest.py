"""
Test fixtures and configuration for pytest.
"""

import itertools
import json
from collections.abc import AsyncIterator
from typing import AsyncGenerator, Optional

import httpx
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from prometheus_client import CollectorRegistry

from benchclient.core.deps import get_benchmark_runner
from benchclient.core.metrics import BenchMetrics, get_bench_metrics
from benchclient.main import app
from benchclient.services.benchmark import BenchmarkRunner

GENERATE_URL = "http://ollama.test/api/generate"
RUNTIME = "ollama"
TEST_ENV = "ci"


class FakeBackend:
    """Scriptable stand-in for Ollama's streaming /api/generate."""

    def __init__(self):
        self.status_code = 200
        self.fragments: list[bytes] = []
        self.fail_after: Optional[int] = None  # raise ReadError after N fragments
        self.connect_error = False
        self.requests: list[dict] = []

    def stream_lines(self, *records: dict | str, terminate_last: bool = True):
        """Queue records as NDJSON, one fragment per line."""
        lines = [r if isinstance(r, str) else json.dumps(r) for r in records]
        for i, line in enumerate(lines):
            last = i == len(lines) - 1
            self.fragments.append((line + ("" if last and not terminate_last else "\n")).encode())

    async def _body(self) -> AsyncIterator[bytes]:
        for i, fragment in enumerate(self.fragments):
            if self.fail_after is not None and i >= self.fail_after:
                raise httpx.ReadError("connection reset by peer")
            yield fragment

    def handler(self, request: httpx.Request) -> httpx.Response:
        if self.connect_error:
            raise httpx.ConnectError("Connection refused", request=request)
        self.requests.append(json.loads(request.content))
        if self.status_code >= 400:
            return httpx.Response(self.status_code)
        return httpx.Response(
            self.status_code,
            headers={"content-type": "application/x-ndjson"},
            content=self._body(),
        )

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


def step_clock():
    """Monotonic fake clock advancing one second per reading."""
    counter = itertools.count()
    return lambda: float(next(counter))


def sample(registry: CollectorRegistry, name: str, model: str = "llama3", **extra) -> Optional[float]:
    labels = {"model": model, "runtime": RUNTIME, "test_env": TEST_ENV, **extra}
    return registry.get_sample_value(name, labels)


@pytest.fixture
def backend() -> FakeBackend:
    """Fake inference backend."""
    return FakeBackend()


@pytest.fixture
def bench_metrics() -> BenchMetrics:
    """Metrics bound to a private registry."""
    return BenchMetrics(registry=CollectorRegistry())


@pytest.fixture
def runner(backend: FakeBackend, bench_metrics: BenchMetrics) -> BenchmarkRunner:
    """Runner talking to the fake backend with a stepping clock."""
    return BenchmarkRunner(
        generate_url=GENERATE_URL,
        metrics=bench_metrics,
        runtime=RUNTIME,
        test_env=TEST_ENV,
        transport=backend.transport,
        clock=step_clock(),
    )


@pytest_asyncio.fixture(scope="function")
async def async_client(
    runner: BenchmarkRunner, bench_metrics: BenchMetrics
) -> AsyncGenerator[AsyncClient, None]:
    """Create an async test client."""
    app.dependency_overrides[get_benchmark_runner] = lambda: runner
    app.dependency_overrides[get_bench_metrics] = lambda: bench_metrics

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()
