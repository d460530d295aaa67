"""Prometheus scrape endpoint"""

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from benchclient.core.metrics import BenchMetrics, get_bench_metrics

router = APIRouter()


@router.get("/metrics")
async def metrics(bench_metrics: BenchMetrics = Depends(get_bench_metrics)):
    """Expose benchmark and process metrics in Prometheus text format."""
    return Response(
        content=bench_metrics.render(),
        media_type=bench_metrics.content_type,
    )
