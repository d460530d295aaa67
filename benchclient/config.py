"""Application configuration"""

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings"""

    app_name: str = "BenchClient"
    debug: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = 8080

    # Inference backend (Ollama-compatible /api/generate)
    ollama_base: str = "http://localhost:11434"

    # Constant metric labels for every observation made by this process
    runtime_label: str = "ollama"
    test_env_label: str = "in-cluster"

    # Outbound request deadline in seconds; unset means wait for the stream to close
    request_timeout: Optional[float] = None

    # Register process/platform/gc collectors alongside the benchmark metrics
    collect_process_metrics: bool = True

    log_level: str = "INFO"

    @property
    def generate_url(self) -> str:
        """Full URL of the streaming generate endpoint."""
        return f"{self.ollama_base.rstrip('/')}/api/generate"

    class Config:
        env_file = ".env"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
