import logging
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

from config import LOG_BACKUP_DAYS, LOG_DIR, LOG_FILENAME


def setup_logger(log_dir: Path | None = None) -> logging.Logger:
    """
    Attach handlers to the "warehouse" logger and return it.

    Every demo writes through a child of this logger ("warehouse.inventory",
    "warehouse.grading", ...). Records go to the console and to
    <log_dir>/warehouse.log, which rolls over at midnight and keeps
    LOG_BACKUP_DAYS old files. Only the first call configures anything;
    later calls hand back the same logger untouched.
    """

    log_dir = Path(log_dir) if log_dir is not None else LOG_DIR
    log_dir.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger("warehouse")
    logger.setLevel(logging.INFO)

    if logger.handlers:
        return logger

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    # one file per day
    file_handler = TimedRotatingFileHandler(
        filename=log_dir / LOG_FILENAME,
        when="midnight",
        interval=1,
        backupCount=LOG_BACKUP_DAYS,
        encoding="utf-8"
    )
    console_handler = logging.StreamHandler()

    for handler in (file_handler, console_handler):
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.info(f"Logging to {log_dir / LOG_FILENAME}")
    return logger
