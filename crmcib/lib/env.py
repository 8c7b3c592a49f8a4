from logging import Logger
from typing import (
    Mapping,
    Optional,
)

from lxml.etree import _Element

from crmcib.common import reports
from crmcib.lib.external import CommandRunner
from crmcib.lib.pacemaker.live import (
    get_cib,
    get_cib_xml,
    replace_cib,
)


class LibraryEnvironment:
    """
    Provides the library commands with their collaborators: a logger, a report
    processor, a command runner and access to the CIB of the live cluster.

    No CIB is kept here. Every get_cib call reads the CIB anew and the caller
    owns the returned document until it pushes it.
    """

    def __init__(
        self,
        logger: Logger,
        report_processor: reports.ReportProcessor,
        env_vars: Optional[Mapping[str, str]] = None,
    ):
        self._logger = logger
        self._report_processor = report_processor
        self._env_vars = dict(env_vars) if env_vars else {}

    @property
    def logger(self) -> Logger:
        return self._logger

    @property
    def report_processor(self) -> reports.ReportProcessor:
        return self._report_processor

    def cmd_runner(self) -> CommandRunner:
        runner_env = {
            # make sure to get output of external processes in English and ASCII
            "LC_ALL": "C",
        }
        # allows to point pacemaker tools to a CIB in a file (CIB_file)
        runner_env.update(self._env_vars)
        return CommandRunner(self.logger, self.report_processor, runner_env)

    def get_cib(self) -> _Element:
        """
        Read the CIB of the live cluster
        """
        return get_cib(get_cib_xml(self.cmd_runner(), self.logger), self.logger)

    def push_cib(self, cib: Optional[_Element]) -> None:
        """
        Replace the CIB of the live cluster, do nothing if there is no CIB

        cib -- the whole cib previously obtained by get_cib
        """
        if cib is None:
            return
        replace_cib(self.cmd_runner(), cib)
