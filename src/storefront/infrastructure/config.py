"""Runtime settings, read once from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from storefront.infrastructure.ai.gemini_client import DEFAULT_MODEL

# When installed in editable mode the project root is the repo root.
DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


@dataclass(frozen=True)
class Settings:
    data_dir: Path = DEFAULT_DATA_DIR
    log_level: str = "WARNING"
    gemini_api_key: str | None = None
    gemini_model: str = DEFAULT_MODEL
    ai_timeout: float = 30.0

    @classmethod
    def from_env(cls) -> Settings:
        data_dir = os.getenv("STOREFRONT_DATA_DIR")
        return cls(
            data_dir=Path(data_dir) if data_dir else DEFAULT_DATA_DIR,
            log_level=os.getenv("STOREFRONT_LOG_LEVEL", "WARNING").upper(),
            gemini_api_key=os.getenv("GEMINI_API_KEY") or os.getenv("API_KEY"),
            gemini_model=os.getenv("STOREFRONT_GEMINI_MODEL", DEFAULT_MODEL),
            ai_timeout=float(os.getenv("STOREFRONT_AI_TIMEOUT", "30")),
        )
