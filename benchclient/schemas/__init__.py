"""Pydantic schemas"""

from benchclient.schemas.bench import BenchmarkRequest, BenchmarkResponse, ErrorResponse

__all__ = [
    "BenchmarkRequest",
    "BenchmarkResponse",
    "ErrorResponse",
]
