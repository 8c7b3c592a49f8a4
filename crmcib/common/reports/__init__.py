from . import (
    codes,
    item,
    messages,
    types,
)
from .dto import ReportItemDto
from .item import (
    ReportItem,
    ReportItemContext,
    ReportItemList,
    ReportItemMessage,
    ReportItemSeverity,
)
from .processor import (
    ReportProcessor,
    has_errors,
)
