"""Persist one user's export batch as a pretty-printed JSON file."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from tempfile import NamedTemporaryFile

from .errors import WriteError
from .paths import export_path
from .schemas import HistoryRecord

__all__ = ["dump_records", "write_export"]

_log = logging.getLogger(__name__)

JSON_INDENT = 4


def _current_umask() -> int:
    mask = os.umask(0)
    os.umask(mask)
    return mask


def dump_records(records: list[HistoryRecord]) -> str:
    return json.dumps(records, indent=JSON_INDENT)


def write_export(
    output_dir: Path,
    as_of: str,
    user: str,
    records: list[HistoryRecord],
    *,
    logger: logging.Logger | None = None,
) -> Path:
    """
    Write `records` to `{output_dir}/{as_of}.{user}.json` and return the path.

    The file is written next to the target under a temporary name and then
    renamed over it, so an existing export is replaced in one step and a
    failed write leaves no half-written file behind.

    Raises WriteError naming the path when anything on disk fails.
    """
    log = logger or _log
    path = export_path(output_dir, as_of, user)
    text = dump_records(records)

    tmp_name: str | None = None
    try:
        with NamedTemporaryFile(
            "w",
            encoding="utf-8",
            prefix=f"{path.name}-",
            suffix=".tmp",
            dir=path.parent,
            delete=False,
        ) as f:
            tmp_name = f.name
            f.write(text)
            f.flush()
            os.fsync(f.fileno())
        # NamedTemporaryFile создаёт 0600; выставляем то, что дал бы обычный open()
        os.chmod(tmp_name, 0o666 & ~_current_umask())
        os.replace(tmp_name, path)
    except OSError as e:
        if tmp_name is not None:
            Path(tmp_name).unlink(missing_ok=True)
        raise WriteError(f"Impossible to write the file [{path}]: {e}", path) from e

    log.info("File [%s] created", path)
    return path
