import time
from dataclasses import dataclass
from typing import Optional

from crmcib import settings
from crmcib.common import reports
from crmcib.common.pacemaker.resource import (
    ResourceRunStateDto,
    ResourceRunStateListDto,
)
from crmcib.common.reports.item import ReportItem
from crmcib.common.types import (
    RunState,
    StringIterable,
    StringSequence,
)
from crmcib.lib.cib import (
    remove_elements,
    resource,
    status,
)
from crmcib.lib.cib.tools import find_primitive
from crmcib.lib.env import LibraryEnvironment
from crmcib.lib.pacemaker.live import create_cib_fragment


@dataclass(frozen=True)
class PollConfig:
    """
    Limits of waiting for resources to stop

    max_retries -- how many times the CIB is re-read before giving up
    retry_delay -- seconds to sleep before each re-read
    """

    max_retries: int = settings.wait_stop_max_retries
    retry_delay: float = settings.wait_stop_retry_delay


def start(env: LibraryEnvironment, resource_id: str) -> None:
    """
    Set a resource to be started by the cluster

    resource_id -- id of the primitive
    """
    cib = env.get_cib()
    resource.set_target_role(cib, resource_id, True)
    env.push_cib(cib)


def stop(env: LibraryEnvironment, resource_id: str) -> None:
    """
    Set a resource to be stopped by the cluster

    resource_id -- id of the primitive
    """
    cib = env.get_cib()
    resource.set_target_role(cib, resource_id, False)
    env.push_cib(cib)


def create(env: LibraryEnvironment, fragment_xml: str) -> None:
    """
    Add a new entity to the CIB

    fragment_xml -- CIB fragment describing the entity, e.g. a primitive
    """
    create_cib_fragment(env.cmd_runner(), fragment_xml)


def get_run_state(env: LibraryEnvironment, resource_id: str) -> RunState:
    return status.get_resource_run_state(
        env.get_cib(), resource_id, env.report_processor
    )


def get_node_of_resource(
    env: LibraryEnvironment, resource_id: str
) -> Optional[str]:
    """
    Return the name of a node the resource is running on, None if the
    resource is not running anywhere

    resource_id -- id of the primitive
    """
    return status.get_node_of_resource(
        env.get_cib(), resource_id, env.report_processor
    )


def get_run_states(
    env: LibraryEnvironment, resource_ids: StringIterable
) -> ResourceRunStateListDto:
    """
    Return run states of several resources evaluated on a single CIB read

    resource_ids -- ids of the primitives
    """
    cib = env.get_cib()
    return ResourceRunStateListDto(
        resources=[
            ResourceRunStateDto(
                resource_id=resource_id,
                run_state=status.get_resource_run_state(
                    cib, resource_id, env.report_processor
                ),
                node=status.get_node_of_resource(
                    cib, resource_id, env.report_processor
                ),
            )
            for resource_id in resource_ids
        ]
    )


def dissolve_constraints(
    env: LibraryEnvironment, resource_ids: StringIterable
) -> None:
    """
    Remove constraints and operation history of resources being deleted

    resource_ids -- ids of the resources
    """
    cib = env.get_cib()
    remove_elements.dissolve_constraints(
        cib, resource_ids, env.report_processor
    )
    env.push_cib(cib)


def wait_for_resources_stop(
    env: LibraryEnvironment,
    resource_ids: StringSequence,
    poll_config: Optional[PollConfig] = None,
) -> bool:
    """
    Wait until all specified resources are stopped. Return False if they are
    not stopped within the retry budget.

    resource_ids -- ids of the resources; ids of missing resources are ignored
    poll_config -- limits of waiting, defaults from settings when not set
    """
    if poll_config is None:
        poll_config = PollConfig()
    report_processor = env.report_processor

    cib = env.get_cib()
    waiting_ids = []
    for resource_id in resource_ids:
        if find_primitive(cib, resource_id) is None:
            report_processor.report(
                ReportItem.warning(
                    reports.messages.ResourceNotFoundIgnored(resource_id)
                )
            )
        else:
            waiting_ids.append(resource_id)

    report_processor.report(
        ReportItem.info(
            reports.messages.WaitForResourcesStopStarted(waiting_ids)
        )
    )
    retries = 0
    while True:
        not_stopped_ids = [
            resource_id
            for resource_id in waiting_ids
            if status.get_resource_run_state(
                cib, resource_id, report_processor
            )
            != RunState.STOPPED
        ]
        if not not_stopped_ids:
            report_processor.report(
                ReportItem.info(
                    reports.messages.ResourcesStopped(waiting_ids)
                )
            )
            return True
        if retries >= poll_config.max_retries:
            report_processor.report(
                ReportItem.warning(
                    reports.messages.WaitForResourcesStopTimedOut(
                        not_stopped_ids, retries
                    )
                )
            )
            return False
        time.sleep(poll_config.retry_delay)
        cib = env.get_cib()
        retries += 1
