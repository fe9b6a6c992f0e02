import logging
import logging.handlers
import sys
from typing import Optional

LOGGER_NAMES = [
    "iscsiha",
    "iscsiha.lib",
]

# pylint:disable=invalid-name
library = logging.getLogger("iscsiha.lib")


class Formatter(logging.Formatter):
    """
    Format records, those coming from reports carry their report code
    """

    default_time_format = "%Y-%m-%dT%H:%M:%S"
    # It produces `datetime.milliseconds`
    default_msec_format = "%s.%03d"

    def __init__(self):
        super().__init__(
            fmt="{levelname[0]}, [{asctime}] {levelname:>8s} -- {name}"
            "{code_part}: {message}",
            datefmt=None,
            style="{",
        )

    def format(self, record):
        code = getattr(record, "report_code", None)
        record.code_part = f" [{code}]" if code else ""
        return super().format(record)


def setup(log_file: Optional[str] = None) -> logging.Handler:
    """
    Send iscsiha logs to a file, or to stderr if no file is specified

    Returns the installed handler.
    """
    handler: logging.Handler
    if log_file:
        handler = logging.handlers.WatchedFileHandler(
            log_file, encoding="utf8"
        )
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(Formatter())
    handler.setLevel(logging.INFO)

    # handlers are only attached to the top logger, the rest propagate to it
    logger = logging.getLogger(LOGGER_NAMES[0])
    logger.addHandler(handler)
    for logger_name in LOGGER_NAMES:
        logging.getLogger(logger_name).setLevel(logging.INFO)
    return handler


def enable_debug() -> None:
    # Debug messages won't be written if we call setLevel(logging.DEBUG) on the
    # handler when loggers itself have an higher level. So the level is set to
    # the loggers as well.
    for logger_name in LOGGER_NAMES:
        logger = logging.getLogger(logger_name)
        logger.setLevel(logging.DEBUG)
        for handler in logger.handlers:
            handler.setLevel(logging.DEBUG)
