from . import (
    codes,
    item,
    messages,
    processor,
    types,
)
from .dto import ReportItemDto
from .item import (
    ReportItem,
    ReportItemList,
    ReportItemMessage,
    ReportItemSeverity,
)
from .processor import (
    ReportProcessor,
    has_errors,
)
