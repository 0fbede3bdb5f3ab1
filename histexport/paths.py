"""Output directory checks and export file locations for HistoryExport."""

from __future__ import annotations

import os
from pathlib import Path

from .errors import ConfigurationError
from .timestamps import filename_safe

__all__ = ["default_output_dir", "validate_output_dir", "export_filename", "export_path"]


def default_output_dir() -> Path:
    """
    Directory the exports go to when the caller does not pass one.

    Override (for scripts/tests): set env HISTEXPORT_OUTPUT_DIR.
    Otherwise: the current working directory.
    """
    override = os.getenv("HISTEXPORT_OUTPUT_DIR")
    if override:
        return Path(override).expanduser()
    return Path.cwd()


def validate_output_dir(path: str | os.PathLike) -> Path:
    """
    Return the absolute, resolved output directory.

    Raises ConfigurationError when it is missing, not a directory or not writable.
    Nothing is created here: a missing directory is an operator mistake.
    """
    p = Path(path).expanduser()
    if not p.exists():
        raise ConfigurationError(f"Directory [{p}] does not exist")
    if not p.is_dir():
        raise ConfigurationError(f"Directory [{p}] is not a directory")
    if not os.access(p, os.W_OK | os.X_OK):
        raise ConfigurationError(f"Directory [{p}] must be writable")
    return p.resolve()


def export_filename(as_of: str, user: str) -> str:
    """`{as_of}.{user}.json` with colons of the timestamp replaced by hyphens."""
    return f"{filename_safe(as_of)}.{user}.json"


def export_path(output_dir: Path, as_of: str, user: str) -> Path:
    return Path(output_dir) / export_filename(as_of, user)
