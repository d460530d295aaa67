"""Benchmark Pydantic schemas"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from benchclient.services.benchmark import DEFAULT_MODEL


class BenchmarkRequest(BaseModel):
    """Benchmark call parameters.

    Only ``model`` is interpreted here; every other field is forwarded to the
    backend untouched (prompt, options, keep_alive, ...).
    """

    model_config = ConfigDict(extra="allow")

    model: str = DEFAULT_MODEL

    @field_validator("model", mode="before")
    @classmethod
    def default_model(cls, v: Any) -> Any:
        if v is None:
            return DEFAULT_MODEL
        # Numeric ids become their string form, e.g. 123 -> "123"
        if isinstance(v, (bool, int, float)):
            return str(v)
        return v


class BenchmarkResponse(BaseModel):
    """Measurements from one benchmark call"""

    model: str
    runtime: str
    test_env: str
    ttft_seconds: float
    total_seconds: float
    tokens_per_second: Optional[float] = None


class ErrorResponse(BaseModel):
    """Failed benchmark call"""

    error: str
    type: str
