import abc
import logging
from typing import Mapping

from .item import (
    ReportItem,
    ReportItemList,
    ReportItemSeverity,
)
from .types import SeverityLevel


class ReportProcessor(abc.ABC):
    def __init__(self) -> None:
        self._has_errors = False

    @property
    def has_errors(self) -> bool:
        return self._has_errors

    def report(self, report_item: ReportItem) -> "ReportProcessor":
        if _is_error(report_item):
            self._has_errors = True
        self._do_report(report_item)
        return self

    @abc.abstractmethod
    def _do_report(self, report_item: ReportItem) -> None:
        raise NotImplementedError()


def has_errors(report_list: ReportItemList) -> bool:
    return any(_is_error(report_item) for report_item in report_list)


def _is_error(report_item: ReportItem) -> bool:
    return report_item.severity.level == ReportItemSeverity.ERROR


_LOG_LEVELS: Mapping[SeverityLevel, int] = {
    ReportItemSeverity.ERROR: logging.ERROR,
    ReportItemSeverity.WARNING: logging.WARNING,
    ReportItemSeverity.INFO: logging.INFO,
    ReportItemSeverity.DEBUG: logging.DEBUG,
}


class ReportProcessorToLog(ReportProcessor):
    """
    Write reports to a logger, the report code goes along as an extra field
    """

    def __init__(self, logger: logging.Logger):
        super().__init__()
        self._logger = logger

    def _do_report(self, report_item: ReportItem) -> None:
        try:
            level = _LOG_LEVELS[report_item.severity.level]
        except KeyError as e:
            raise AssertionError("Unknown report severity") from e
        self._logger.log(
            level,
            report_item.message.message,
            extra={"report_code": report_item.message.code},
        )
