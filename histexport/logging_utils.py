import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


def setup_logging(
    *,
    console: bool = True,
    debug: bool = False,
    logger_name: str = "histexport",
    file_path: str | None = None,
    max_bytes: int = 1_000_000,
    backups: int = 3,
) -> logging.Logger:
    """
    Configure the export logger and return it.

    console=False (HISTEXPORT_QUIET) drops the stderr handler; the log file,
    when set, still receives every record. With no handler at all a
    NullHandler keeps logging's last-resort stderr output quiet.

    Raises OSError when the log file cannot be opened.
    """
    logger = logging.getLogger(logger_name)

    # повторный вызов заменяет хендлеры, а не добавляет
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()

    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    fmt = logging.Formatter(LOG_FORMAT)

    if file_path:
        Path(file_path).parent.mkdir(parents=True, exist_ok=True)
        fh = RotatingFileHandler(file_path, maxBytes=max_bytes, backupCount=backups, encoding="utf-8")
        fh.setFormatter(fmt)
        logger.addHandler(fh)

    if console:
        sh = logging.StreamHandler()
        sh.setFormatter(fmt)
        logger.addHandler(sh)

    if not logger.handlers:
        logger.addHandler(logging.NullHandler())

    return logger
