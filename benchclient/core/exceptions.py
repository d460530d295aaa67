"""Custom exceptions for BenchClient.

Only failures that end a benchmark run are modelled here. Malformed stream
lines and uncomputable throughput are absorbed by the runner and never
surface as exceptions.
"""

from typing import Any, Optional


class BenchClientError(Exception):
    """Base exception for all BenchClient errors."""

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        error_type: str = "internal_error",
        details: Optional[dict[str, Any]] = None,
    ):
        self.message = message
        self.status_code = status_code
        self.error_type = error_type
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response format."""
        return {
            "error": self.message,
            "type": self.error_type,
            **self.details,
        }


class BackendError(BenchClientError):
    """Inference backend answered with a non-success status."""

    def __init__(self, status_text: str, backend_status: Optional[int] = None):
        details = {"backend_status": backend_status} if backend_status is not None else {}
        super().__init__(
            message=status_text,
            status_code=500,
            error_type="backend_error",
            details=details,
        )


class TransportError(BenchClientError):
    """Network or stream failure while talking to the backend."""

    def __init__(self, message: str):
        super().__init__(
            message=message,
            status_code=500,
            error_type="transport_error",
        )
