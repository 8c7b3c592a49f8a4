import logging
from unittest import mock

from crmcib.common.reports import (
    ReportItemSeverity,
    ReportProcessor,
)
from crmcib.lib.env import LibraryEnvironment
from crmcib.lib.external import CommandRunner

from crmcib_test.tools.assertions import assert_report_item_list_equal


def get_runner_mock(stdout="", stderr="", returncode=0, env_vars=None):
    runner = mock.MagicMock(spec_set=CommandRunner)
    runner.run.return_value = (stdout, stderr, returncode)
    runner.env_vars = env_vars if env_vars else {}
    return runner


class MockLibraryReportProcessor(ReportProcessor):
    def __init__(self, debug=True):
        super().__init__()
        self.debug = debug
        self.items = []

    def _do_report(self, report_item):
        if self.debug or report_item.severity.level != ReportItemSeverity.DEBUG:
            self.items.append(report_item)

    @property
    def report_item_list(self):
        return self.items

    def assert_reports(self, expected_report_info_list, hint=""):
        assert_report_item_list_equal(
            self.report_item_list, expected_report_info_list, hint=hint
        )


class LibraryEnvironmentMock(LibraryEnvironment):
    """
    Library environment running commands by a mocked runner

    Set runner.run.side_effect to a list of (stdout, stderr, retval) to
    describe outputs of consecutive cibadmin runs.
    """

    def __init__(self, runner=None):
        super().__init__(
            mock.MagicMock(logging.Logger), MockLibraryReportProcessor()
        )
        self.runner = runner if runner else get_runner_mock()

    def cmd_runner(self):
        return self.runner

    @property
    def pushed_cib_list(self):
        return [
            call.kwargs["stdin_string"]
            for call in self.runner.run.call_args_list
            if "--replace" in call.args[0]
        ]
