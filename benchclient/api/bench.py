"""Benchmark API - run one measured generate call"""

from typing import Optional

from fastapi import APIRouter, Depends

from benchclient.core.deps import get_benchmark_runner
from benchclient.schemas.bench import BenchmarkRequest, BenchmarkResponse, ErrorResponse
from benchclient.services.benchmark import BenchmarkRunner

router = APIRouter()


@router.post(
    "/bench",
    response_model=BenchmarkResponse,
    responses={500: {"model": ErrorResponse}},
)
async def run_bench(
    payload: Optional[BenchmarkRequest] = None,
    runner: BenchmarkRunner = Depends(get_benchmark_runner),
):
    """Forward one streaming request to the backend and report its timings.

    Backend and transport failures propagate as BenchClientError and are
    rendered by the application's exception handler.
    """
    body = payload.model_dump() if payload is not None else {}
    result = await runner.run(body)
    return result.to_dict()
