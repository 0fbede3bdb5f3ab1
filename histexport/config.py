"""Runtime settings: module defaults with HISTEXPORT_* environment overrides."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from .errors import ConfigurationError
from .paths import default_output_dir
from .schemas import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE

# ---- Remote API ----
DEFAULT_BASE_URL = "https://api.hipchat.com"
DEFAULT_HTTP_TIMEOUT = 30.0

# ---- Logging ----
LOG_MAX_BYTES = 1_000_000
LOG_BACKUPS = 3


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from None


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}") from None


@dataclass(slots=True)
class Settings:
    base_url: str = DEFAULT_BASE_URL
    output_dir: Path | None = None
    page_size: int = DEFAULT_PAGE_SIZE
    timeout: float = DEFAULT_HTTP_TIMEOUT
    debug: bool = False
    quiet: bool = False
    log_file: str | None = None

    def __post_init__(self):
        if not 1 <= self.page_size <= MAX_PAGE_SIZE:
            raise ConfigurationError(f"page size must be in 1..{MAX_PAGE_SIZE}, got {self.page_size}")
        if self.timeout <= 0:
            raise ConfigurationError(f"timeout must be positive, got {self.timeout}")
        if self.output_dir is None:
            self.output_dir = default_output_dir()

    @classmethod
    def from_env(cls) -> Settings:
        """Create settings with environment variable overrides."""
        return cls(
            base_url=os.getenv("HISTEXPORT_BASE_URL") or DEFAULT_BASE_URL,
            output_dir=default_output_dir(),
            page_size=_env_int("HISTEXPORT_PAGE_SIZE", DEFAULT_PAGE_SIZE),
            timeout=_env_float("HISTEXPORT_TIMEOUT", DEFAULT_HTTP_TIMEOUT),
            debug=os.getenv("HISTEXPORT_DEBUG") == "1",
            quiet=os.getenv("HISTEXPORT_QUIET") == "1",
            log_file=os.getenv("HISTEXPORT_LOG_FILE") or None,
        )
