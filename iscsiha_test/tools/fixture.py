from typing import (
    Any,
    Mapping,
    NamedTuple,
)

from iscsiha.common import reports


class ReportItemFixture(NamedTuple):
    """
    Expected report item: severity, message code and payload
    """

    severity: reports.types.SeverityLevel
    code: reports.types.MessageCode
    payload: Mapping[str, Any]

    def adapt(self, **payload):
        updated_payload = dict(self.payload)
        updated_payload.update(**payload)
        return type(self)(self.severity, self.code, updated_payload)


def debug(code: reports.types.MessageCode, **kwargs) -> ReportItemFixture:
    return ReportItemFixture(reports.ReportItemSeverity.DEBUG, code, kwargs)


def warn(code: reports.types.MessageCode, **kwargs) -> ReportItemFixture:
    return ReportItemFixture(reports.ReportItemSeverity.WARNING, code, kwargs)


def error(code: reports.types.MessageCode, **kwargs) -> ReportItemFixture:
    return ReportItemFixture(reports.ReportItemSeverity.ERROR, code, kwargs)


def info(code: reports.types.MessageCode, **kwargs) -> ReportItemFixture:
    return ReportItemFixture(reports.ReportItemSeverity.INFO, code, kwargs)
