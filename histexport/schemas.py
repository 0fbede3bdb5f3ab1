"""Data contracts (DTO) for the history export. No business logic here."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal

# Max page size accepted by the history endpoint
DEFAULT_PAGE_SIZE: int = 1000
MAX_PAGE_SIZE: int = 1000

HistoryRecord = dict[str, Any]
Page = list[HistoryRecord]
FailureStage = Literal["fetch", "write"]


@dataclass(slots=True)
class ExportRequest:
    """One user's unit of work; `as_of` is shared by every request of the run."""

    token: str
    user: str
    as_of: str


@dataclass(slots=True)
class ExportResult:
    """
    Outcome of one user's export.

    On success `path` points to the written file and `error` is None.
    On failure `path` is None (no file is produced) and `stage` tells
    whether the fetch or the write went wrong.
    """

    user: str
    path: Path | None = None
    records: int = 0
    error: str | None = None
    stage: FailureStage | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(slots=True)
class RunReport:
    as_of: str
    results: list[ExportResult] = field(default_factory=list)

    @property
    def succeeded(self) -> list[ExportResult]:
        return [r for r in self.results if r.ok]

    @property
    def failed(self) -> list[ExportResult]:
        return [r for r in self.results if not r.ok]
