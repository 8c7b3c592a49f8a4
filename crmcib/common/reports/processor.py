import abc
import logging
from logging import Logger

from crmcib.common.reports.utils import add_context_to_message

from .item import (
    ReportItem,
    ReportItemList,
    ReportItemSeverity,
)

_SEVERITY_TO_LOG_LEVEL = {
    ReportItemSeverity.ERROR: logging.ERROR,
    ReportItemSeverity.WARNING: logging.WARNING,
    ReportItemSeverity.INFO: logging.INFO,
    ReportItemSeverity.DEBUG: logging.DEBUG,
}


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

    def report_list(self, report_list: ReportItemList) -> "ReportProcessor":
        for report_item in report_list:
            self.report(report_item)
        return self

    @abc.abstractmethod
    def _do_report(self, report_item: ReportItem) -> None:
        raise NotImplementedError()


def has_errors(report_list: ReportItemList) -> bool:
    return any(_is_error(report_item) for report_item in report_list)


def _is_error(report_item: ReportItem) -> bool:
    return report_item.severity.level == ReportItemSeverity.ERROR


class ReportProcessorToLog(ReportProcessor):
    """
    Forward report items to a logger, severity decides the log level
    """

    def __init__(self, logger: Logger):
        super().__init__()
        self._logger = logger

    def _do_report(self, report_item: ReportItem) -> None:
        try:
            level = _SEVERITY_TO_LOG_LEVEL[report_item.severity.level]
        except KeyError as e:
            raise AssertionError("Unknown report severity") from e

        context_dto = None
        if report_item.context:
            context_dto = report_item.context.to_dto()

        self._logger.log(
            level,
            add_context_to_message(report_item.message.message, context_dto),
        )


class ReportProcessorInMemory(ReportProcessor):
    def __init__(self) -> None:
        super().__init__()
        self._reports: list[ReportItem] = []

    def _do_report(self, report_item: ReportItem) -> None:
        self._reports.append(report_item)

    @property
    def reports(self) -> ReportItemList:
        return self._reports
