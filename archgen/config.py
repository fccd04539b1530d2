"""
Application configuration using Pydantic Settings.
All environment-specific values are centralized here.
"""

from functools import lru_cache
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # ── App ──────────────────────────────────────────────
    app_name: str = "ArchitectureGen"
    debug: bool = True

    # ── API server ───────────────────────────────────────
    api_host: str = "0.0.0.0"
    api_port: int = 8000

    # ── Diagram rendering ────────────────────────────────
    diagram_renderer_url: str = "https://kroki.io"  # any Kroki-compatible service
    diagram_render_timeout: float = 10.0

    # ── CLI output ───────────────────────────────────────
    output_dir: str = "./output"

    # ── Logging ──────────────────────────────────────────
    log_level: str = "INFO"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }


@lru_cache()
def get_settings() -> Settings:
    """Return cached application settings (singleton)."""
    return Settings()
