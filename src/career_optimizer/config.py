"""Application configuration loaded from config.yaml."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from career_optimizer.errors import ConfigError

API_KEY_ENV = "ANTHROPIC_API_KEY"


@dataclass(frozen=True)
class LLMConfig:
    model: str = "claude-haiku-4-5-20251001"
    timeout: int = 60
    max_tokens: int = 4096
    temperature: float = 0.0

    def __post_init__(self) -> None:
        if not 1 <= self.timeout <= 600:
            raise ValueError(f"llm.timeout must be between 1 and 600, got {self.timeout}")
        if self.max_tokens < 1:
            raise ValueError(f"llm.max_tokens must be positive, got {self.max_tokens}")
        if not 0.0 <= self.temperature <= 1.0:
            raise ValueError(f"llm.temperature must be between 0 and 1, got {self.temperature}")


@dataclass(frozen=True)
class UploadConfig:
    max_file_mb: int = 10

    def __post_init__(self) -> None:
        if not 1 <= self.max_file_mb <= 50:
            raise ValueError(f"upload.max_file_mb must be between 1 and 50, got {self.max_file_mb}")

    @property
    def max_file_bytes(self) -> int:
        return self.max_file_mb * 1024 * 1024


@dataclass(frozen=True)
class AppConfig:
    llm: LLMConfig = field(default_factory=LLMConfig)
    upload: UploadConfig = field(default_factory=UploadConfig)


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load config from YAML file, falling back to defaults."""
    if path is None:
        # Look for config.yaml relative to the project root
        candidates = [
            Path.cwd() / "config.yaml",
            Path(__file__).resolve().parent.parent.parent / "config.yaml",
        ]
        for c in candidates:
            if c.exists():
                path = c
                break

    raw: dict = {}
    if path is not None:
        p = Path(path)
        if p.exists():
            raw = yaml.safe_load(p.read_text()) or {}

    return AppConfig(
        llm=LLMConfig(**raw.get("llm", {})),
        upload=UploadConfig(**raw.get("upload", {})),
    )


def require_api_key() -> str:
    """Read the model API credential once at start-up.

    Raises:
        ConfigError: if ``ANTHROPIC_API_KEY`` is unset or blank.
    """
    key = os.environ.get(API_KEY_ENV, "").strip()
    if not key:
        raise ConfigError(f"{API_KEY_ENV} is not set. Add it to your environment or .env file.")
    return key
