"""API routes"""

from fastapi import APIRouter

from benchclient.api import bench, metrics

api_router = APIRouter()

api_router.include_router(bench.router, tags=["bench"])
api_router.include_router(metrics.router, tags=["metrics"])
