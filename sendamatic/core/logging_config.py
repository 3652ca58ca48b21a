import logging

from sendamatic.core.config import LogLevel

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: LogLevel | str = LogLevel.INFO, handler: logging.Handler | None = None) -> logging.Logger:
    """
    Attach a handler to the package logger. The library never configures the
    root logger; applications that already do can skip this entirely.
    """
    package_logger = logging.getLogger("sendamatic")
    package_logger.setLevel(level.value if isinstance(level, LogLevel) else level)

    if handler is None:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
    if handler not in package_logger.handlers:
        package_logger.addHandler(handler)
    return package_logger
