from dataclasses import (
    dataclass,
    fields,
)
from typing import List

from iscsiha.common.interface.dto import ImplementsToDto

from .dto import (
    ReportItemDto,
    ReportItemMessageDto,
    ReportItemSeverityDto,
)
from .types import (
    MessageCode,
    SeverityLevel,
)


@dataclass(frozen=True)
class ReportItemSeverity(ImplementsToDto):
    ERROR = SeverityLevel("ERROR")
    WARNING = SeverityLevel("WARNING")
    INFO = SeverityLevel("INFO")
    DEBUG = SeverityLevel("DEBUG")

    level: SeverityLevel

    def to_dto(self) -> ReportItemSeverityDto:
        return ReportItemSeverityDto(level=self.level)


@dataclass(frozen=True, init=False)
class ReportItemMessage(ImplementsToDto):
    """
    Base of all messages

    Subclasses are frozen dataclasses. Their fields make the payload, the
    code is a class attribute and the text is built by the message property.
    """

    _code = MessageCode("")

    @property
    def message(self) -> str:
        raise NotImplementedError()

    @property
    def code(self) -> MessageCode:
        return self._code

    def to_dto(self) -> ReportItemMessageDto:
        return ReportItemMessageDto(
            code=self.code,
            message=self.message,
            payload={
                field.name: getattr(self, field.name) for field in fields(self)
            },
        )


@dataclass
class ReportItem(ImplementsToDto):
    severity: ReportItemSeverity
    message: ReportItemMessage

    @classmethod
    def error(cls, message: ReportItemMessage) -> "ReportItem":
        return cls(ReportItemSeverity(ReportItemSeverity.ERROR), message)

    @classmethod
    def warning(cls, message: ReportItemMessage) -> "ReportItem":
        return cls(ReportItemSeverity(ReportItemSeverity.WARNING), message)

    @classmethod
    def info(cls, message: ReportItemMessage) -> "ReportItem":
        return cls(ReportItemSeverity(ReportItemSeverity.INFO), message)

    @classmethod
    def debug(cls, message: ReportItemMessage) -> "ReportItem":
        return cls(ReportItemSeverity(ReportItemSeverity.DEBUG), message)

    def to_dto(self) -> ReportItemDto:
        return ReportItemDto(
            severity=self.severity.to_dto(),
            message=self.message.to_dto(),
        )


ReportItemList = List[ReportItem]
