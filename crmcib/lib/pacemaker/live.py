from logging import Logger

from lxml import etree
from lxml.etree import _Element

from crmcib import settings
from crmcib.common import reports
from crmcib.common.reports.item import ReportItem
from crmcib.common.str_tools import join_multilines
from crmcib.common.tools import xml_fromstring
from crmcib.lib.cib.tools import get_cib_root
from crmcib.lib.errors import LibraryError
from crmcib.lib.external import CommandRunner
from crmcib.lib.xml_tools import etree_to_str


def get_cib_xml(runner: CommandRunner, logger: Logger) -> str:
    """
    Return the CIB of the live cluster as a string

    runner -- runs cibadmin
    logger -- receives the cibadmin diagnostics in case of a failure
    """
    try:
        stdout, stderr, retval = runner.run([settings.cibadmin_exec, "--query"])
    except LibraryError as e:
        for report_item in e.args:
            logger.error("Unable to get cib: %s", report_item.message.message)
        raise LibraryError(
            ReportItem.error(reports.messages.CibLoadError())
        ) from e
    if retval != 0:
        # The cause depends on the transport used by cibadmin and it is not
        # useful for the caller, so it only goes to the log.
        logger.error(
            "Unable to get cib, cibadmin exited with %s: %s",
            retval,
            join_multilines([stderr, stdout]),
        )
        raise LibraryError(ReportItem.error(reports.messages.CibLoadError()))
    return stdout


def get_cib(xml: str, logger: Logger) -> _Element:
    """
    Parse a CIB string, return the cib root element

    xml -- the CIB
    logger -- receives the parser error in case of a failure
    """
    try:
        cib = xml_fromstring(xml)
    except etree.XMLSyntaxError as e:
        logger.error("Unable to parse cib: %s", e)
        raise LibraryError(
            ReportItem.error(reports.messages.CibLoadError())
        ) from e
    return get_cib_root(cib)


def _run_cibadmin_with_input(
    runner: CommandRunner, cmd_options: list[str], xml: str
) -> None:
    try:
        stdout, stderr, retval = runner.run(
            [settings.cibadmin_exec] + cmd_options, stdin_string=xml
        )
    except LibraryError as e:
        raise LibraryError(
            ReportItem.error(
                reports.messages.CibPushError(
                    join_multilines(
                        [report_item.message.message for report_item in e.args]
                    ),
                    xml,
                )
            )
        ) from e
    if retval != 0:
        raise LibraryError(
            ReportItem.error(
                reports.messages.CibPushError(
                    join_multilines([stderr, stdout]), xml
                )
            )
        )


def replace_cib(runner: CommandRunner, cib: _Element) -> None:
    """
    Replace the CIB of the live cluster with the specified one

    runner -- runs cibadmin
    cib -- the whole cib to be pushed
    """
    _run_cibadmin_with_input(
        runner, ["--replace", "--xml-pipe"], etree_to_str(cib)
    )


def create_cib_fragment(runner: CommandRunner, xml: str) -> None:
    """
    Add an entity described by a CIB fragment to the live cluster

    runner -- runs cibadmin
    xml -- the fragment, e.g. a primitive element
    """
    _run_cibadmin_with_input(
        runner, ["--modify", "--allow-create", "--xml-pipe"], xml
    )
