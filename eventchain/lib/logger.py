import logging
import logging.handlers
import os
from datetime import datetime
from pathlib import Path


def clean_old_logs(log_dir: Path, max_files: int = 5):
    """Remove old log files, keeping only the most recent `max_files` logs

    Log files in the directory are sorted by modification time and the oldest are removed
    until only `max_files` remain. A missing directory is left alone.

    Args:
        log_dir (Path): The directory where the log files are stored.
        max_files (int, optional): The maximum number of log files to keep. Defaults to 5.

    Raises:
        PermissionError: If there is no permission to delete log files.
    """
    if not log_dir.exists():
        return

    log_files = sorted(log_dir.glob("*.log"), key=os.path.getmtime)
    while len(log_files) > max_files:
        old_log = log_files.pop(0)
        old_log.unlink()


class CustomFormatter(logging.Formatter):
    def format(self, record):
        record.levelname = record.levelname.ljust(8)
        return super().format(record)


def configure_logger(
    log_level: int = logging.DEBUG, log_dir: Path | None = None, max_log_files: int = 5
) -> Path | None:
    """Configures the root logger for applications embedding eventchain

    The console always gets a short format without date and time. When `log_dir` is given,
    a rotating log file named after the current date and time is added with the detailed
    format, and older log files beyond `max_log_files` are removed.

    Args:
        log_level (int): The log level to log at. logging.[DEBUG | INFO | ERROR | CRITICAL | WARN ].
            Defaults to logging.DEBUG.
        log_dir (Path | None): Where to store the logs. Defaults to console only.
        max_log_files (int): Keeps only the previous (n) number of log files. Defaults to 5.

    Returns:
        Path | None: The log file path, or None when logging to the console only.
    """
    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(
        logging.Formatter("%(levelname)s %(message)s", datefmt="%H:%M:%S")
    )
    handlers: list[logging.Handler] = [stream_handler]

    log_filename = None
    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(exist_ok=True, parents=True)
        clean_old_logs(log_dir=log_dir, max_files=max_log_files)

        log_filename = log_dir / datetime.now().strftime("%Y-%m-%d_%H-%M-%S.log")
        file_handler = logging.handlers.RotatingFileHandler(
            log_filename, maxBytes=10 * 1024**2, backupCount=5
        )
        file_handler.setFormatter(
            CustomFormatter("[%(asctime)s] %(levelname)s %(message)s", datefmt="%d.%m.%Y %H:%M:%S")
        )
        handlers.append(file_handler)

    logging.basicConfig(level=log_level, handlers=handlers, force=True)
    return log_filename
