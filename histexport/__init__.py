__version__ = "0.1.0"

from .errors import (
    ConfigurationError,
    ExportError,
    InvalidUserError,
    MalformedResponseError,
    RemoteClientError,
    RemoteUnavailableError,
    WriteError,
)
from .exporter import write_export
from .logging_utils import setup_logging
from .pager import fetch_history, fetch_page
from .runner import HistoryExporter
from .schemas import ExportRequest, ExportResult, RunReport
from .timestamps import as_of_timestamp, filename_safe

__all__ = [
    "ConfigurationError",
    "ExportError",
    "InvalidUserError",
    "MalformedResponseError",
    "RemoteClientError",
    "RemoteUnavailableError",
    "WriteError",
    "write_export",
    "setup_logging",
    "fetch_history",
    "fetch_page",
    "HistoryExporter",
    "ExportRequest",
    "ExportResult",
    "RunReport",
    "as_of_timestamp",
    "filename_safe",
]
