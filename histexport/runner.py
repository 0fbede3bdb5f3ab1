"""Per-user export loop: Pager, then Exporter, one user after another."""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Iterable
from datetime import datetime

from .config import DEFAULT_BASE_URL, DEFAULT_HTTP_TIMEOUT
from .errors import ExportError
from .exporter import write_export
from .identifiers import normalize_user, user_kind
from .pager import fetch_history
from .paths import validate_output_dir
from .schemas import DEFAULT_PAGE_SIZE, ExportRequest, ExportResult, RunReport
from .timestamps import _now_default, as_of_timestamp


class HistoryExporter:
    """
    Export one-to-one chat history for a list of users.

    The output directory is checked here, before any request is made:
    a ConfigurationError from the constructor means nothing was exported.
    """

    def __init__(  # noqa: PLR0913
        self,
        output_dir: str | os.PathLike,
        *,
        base_url: str = DEFAULT_BASE_URL,
        page_size: int = DEFAULT_PAGE_SIZE,
        timeout: float | None = DEFAULT_HTTP_TIMEOUT,
        logger: logging.Logger | None = None,
        now_fn: Callable[[], datetime] = _now_default,
        _get: Callable[..., object] | None = None,
    ):
        self.output_dir = validate_output_dir(output_dir)
        self.base_url = base_url
        self.page_size = page_size
        self.timeout = timeout
        self.logger = logger or logging.getLogger("histexport")
        self.now_fn = now_fn
        self._get = _get

    def run(self, token: str, users: Iterable[str]) -> RunReport:
        """Process `users` in order; one timestamp for the whole run."""
        report = RunReport(as_of=as_of_timestamp(now_fn=self.now_fn))
        for user in users:
            report.results.append(self.export_user(ExportRequest(token=token, user=user, as_of=report.as_of)))

        self.logger.info(
            "Export finished: %d succeeded, %d failed",
            len(report.succeeded),
            len(report.failed),
        )
        return report

    def export_user(self, request: ExportRequest) -> ExportResult:
        """Fetch and save one user; failures are captured, never raised."""
        self.logger.info("Working on user %s...", request.user)
        try:
            user = normalize_user(request.user)
            self.logger.debug("user=%s kind=%s", user, user_kind(user))
            records = fetch_history(
                request.token,
                user,
                as_of=request.as_of,
                page_size=self.page_size,
                base_url=self.base_url,
                timeout=self.timeout,
                logger=self.logger,
                _get=self._get,
            )
            path = write_export(self.output_dir, request.as_of, user, records, logger=self.logger)
        except ExportError as e:
            self.logger.error("Export failed for user %s (%s): %s", request.user, e.stage, e)
            return ExportResult(user=request.user, error=str(e), stage=e.stage)

        return ExportResult(user=user, path=path, records=len(records))
