import signal
import subprocess
from logging import Logger
from shlex import quote as shell_quote
from typing import (
    Dict,
    Mapping,
    Optional,
    Tuple,
)

from crmcib.common import reports
from crmcib.common.reports import ReportProcessor
from crmcib.common.reports.item import ReportItem
from crmcib.common.tools import format_os_error
from crmcib.common.types import StringSequence
from crmcib.lib.errors import LibraryError


class CommandRunner:
    """
    Run external commands, log them and report their results
    """

    def __init__(
        self,
        logger: Logger,
        reporter: ReportProcessor,
        env_vars: Optional[Mapping[str, str]] = None,
    ):
        self._logger = logger
        self._reporter = reporter
        # Reset environment variables by empty dict is desired here. We need
        # to get rid of defaults - we do not know the context and environment
        # where the library runs. We also get rid of PATH settings, so all
        # executables must be specified with full path unless the PATH variable
        # is set from outside.
        self._env_vars = env_vars if env_vars else {}

    @property
    def env_vars(self) -> Dict[str, str]:
        return dict(self._env_vars)

    def run(
        self,
        args: StringSequence,
        stdin_string: Optional[str] = None,
        env_extend: Optional[Mapping[str, str]] = None,
    ) -> Tuple[str, str, int]:
        """
        Run a command, return its stdout, stderr and exit code

        args -- the command and its arguments, no shell is involved
        stdin_string -- data to be passed to the command's stdin
        env_extend -- environment variables to add to the default ones
        """
        # A piece of code may want to point a pacemaker tool to a CIB in a file
        # (CIB_file) instead of the live cluster, so extending is allowed.
        env_vars = dict(self._env_vars)
        env_vars.update(dict(env_extend) if env_extend else {})

        log_args = " ".join([shell_quote(x) for x in args])
        self._logger.debug(
            "Running: %s\nEnvironment:%s%s",
            log_args,
            "".join(
                f"\n  {key}={val}" for key, val in sorted(env_vars.items())
            ),
            (
                ""
                if not stdin_string
                else f"\n--Debug Input Start--\n{stdin_string}"
                "\n--Debug Input End--"
            ),
        )
        self._reporter.report(
            ReportItem.debug(
                reports.messages.RunExternalProcessStarted(
                    log_args,
                    stdin_string,
                    env_vars,
                )
            )
        )

        try:
            # pylint: disable=subprocess-popen-preexec-fn, consider-using-with
            # this is OK as the library is single-threaded
            process = subprocess.Popen(
                args,
                # cibadmin reads a document from stdin when --xml-pipe is used
                stdin=(
                    subprocess.PIPE
                    if stdin_string is not None
                    else subprocess.DEVNULL
                ),
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                preexec_fn=(
                    lambda: signal.signal(signal.SIGPIPE, signal.SIG_DFL)
                ),
                close_fds=True,
                shell=False,
                env=env_vars,
                universal_newlines=True,
            )
            out_std, out_err = process.communicate(stdin_string)
            retval = process.returncode
        except OSError as e:
            raise LibraryError(
                ReportItem.error(
                    reports.messages.RunExternalProcessError(
                        log_args,
                        format_os_error(e),
                    )
                )
            ) from e

        self._logger.debug(
            (
                "Finished running: %s\nReturn value: %s"
                "\n--Debug Stdout Start--\n%s\n--Debug Stdout End--"
                "\n--Debug Stderr Start--\n%s\n--Debug Stderr End--"
            ),
            log_args,
            retval,
            out_std,
            out_err,
        )
        self._reporter.report(
            ReportItem.debug(
                reports.messages.RunExternalProcessFinished(
                    log_args,
                    retval,
                    out_std,
                    out_err,
                )
            )
        )
        return out_std, out_err, retval
