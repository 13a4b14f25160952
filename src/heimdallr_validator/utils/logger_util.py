import logging
from pathlib import Path

from heimdallr_validator.config import get_settings


def get_logger(name: str, level=None, log_dir: str | None = None, propagate: bool | None = None) -> logging.Logger:
    """Get a named logger with standard formatting.

    Level, log directory and propagation default to the
    ``HEIMDALLR_LOG_LEVEL``, ``HEIMDALLR_LOG_DIR`` and
    ``HEIMDALLR_LOG_PROPAGATE`` settings. Without a log directory only a
    stream handler is attached. With propagation on, no handlers are attached
    and records go to the host application's logging config.

    Example:
        logger = get_logger(__name__)
        logger.info("This is an info message.")

    Returns:
        logging.Logger: Configured logger instance.
    """
    if level is None or log_dir is None or propagate is None:
        settings = get_settings()
        if level is None:
            level = settings.level
        if log_dir is None:
            log_dir = settings.log_dir
        if propagate is None:
            propagate = settings.propagate_logs

    logger = logging.getLogger(name)
    logger.setLevel(level)

    if propagate:
        logger.propagate = True
        return logger

    # avoid adding duplicate handlers if called repeatedly (common in tests)
    if logger.handlers:
        return logger

    formatter = logging.Formatter(
        '%(asctime)s     || %(name)s \n%(levelname)s   || %(message)s \n',
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    if log_dir:
        logs_dir = Path(log_dir)
        try:
            logs_dir.mkdir(parents=True, exist_ok=True)
        except OSError:
            # fall back to streaming only
            logs_dir = None
        if logs_dir is not None:
            filehandler = logging.FileHandler(str(logs_dir / f"{name}.log"), encoding="utf-8")
            filehandler.setFormatter(formatter)
            logger.addHandler(filehandler)

    # stop passing records to the root logger (avoid duplicated messages)
    logger.propagate = False

    logger.debug("'%s' initialized with level %s", name, logging.getLevelName(level))
    return logger
