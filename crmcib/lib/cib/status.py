"""
Knowledge of the status section of the cib: states of nodes and the
operation history of resources on them.

<status>
  <node_state id="1" uname="node1" in_ccm="true" crmd="online"
    join="member" expected="member">
    <lrm id="1">
      <lrm_resources>
        <lrm_resource id="R1" type="Dummy" class="ocf" provider="heartbeat">
          <lrm_rsc_op id="R1_last_0" operation="stop" rc-code="0" .../>
        </lrm_resource>
      </lrm_resources>
    </lrm>
  </node_state>
</status>
"""

from typing import (
    List,
    Optional,
    cast,
)

from lxml.etree import _Element

from crmcib.common import reports
from crmcib.common.pacemaker.node import (
    NodeDto,
    NodeStateDto,
)
from crmcib.common.reports import ReportProcessor
from crmcib.common.reports.item import ReportItem
from crmcib.common.types import (
    JoinState,
    RunState,
    str_to_enum,
)
from crmcib.lib.cib import const
from crmcib.lib.cib.tools import (
    find_lrm_resources,
    get_node_states,
)
from crmcib.lib.errors import LibraryError
from crmcib.lib.pacemaker.values import (
    OCF_NOT_RUNNING,
    OCF_RUNNING_MASTER,
    OCF_SUCCESS,
)

_ATTR_IN_CCM = "in_ccm"
_ATTR_CRMD = "crmd"
_ATTR_JOIN = "join"
_ATTR_EXPECTED = "expected"
_CRMD_ONLINE = "online"


def _find_operation(
    lrm_resource_el: _Element, operation: str
) -> Optional[_Element]:
    op_list = cast(
        List[_Element],
        lrm_resource_el.xpath(
            "./lrm_rsc_op[@operation=$operation]", operation=operation
        ),
    )
    return op_list[0] if op_list else None


def _get_rc_code(
    resource_id: str,
    op_el: _Element,
    reporter: ReportProcessor,
) -> Optional[int]:
    rc_code = op_el.get(const.ATTR_RC_CODE)
    try:
        if rc_code is not None:
            return int(rc_code)
    except ValueError:
        pass
    reporter.report(
        ReportItem.warning(
            reports.messages.LrmOperationMissingRcCode(
                resource_id, str(op_el.get(const.ATTR_OPERATION))
            )
        )
    )
    return None


def update_run_state(
    resource_id: str,
    lrm_resource_el: _Element,
    run_state: RunState,
    reporter: ReportProcessor,
) -> RunState:
    """
    Evaluate the operation history of a resource on one node and return the
    updated run state. A stop operation takes precedence over a monitor
    operation which takes precedence over a start operation. A successful
    outcome is only taken into account when the state is not known yet.

    resource_id -- id of the evaluated resource
    lrm_resource_el -- lrm_resource element of the resource on a node
    run_state -- run state evaluated so far
    reporter -- receives warnings about malformed operation records
    """
    op_el = _find_operation(lrm_resource_el, const.OPERATION_STOP)
    if op_el is not None:
        rc_code = _get_rc_code(resource_id, op_el, reporter)
        if rc_code is None:
            return run_state
        if rc_code == OCF_SUCCESS:
            if run_state == RunState.UNKNOWN:
                return RunState.STOPPED
            return run_state
        return RunState.RUNNING

    op_el = _find_operation(lrm_resource_el, const.OPERATION_MONITOR)
    if op_el is not None:
        rc_code = _get_rc_code(resource_id, op_el, reporter)
        if rc_code is None:
            return run_state
        if rc_code == OCF_NOT_RUNNING:
            if run_state == RunState.UNKNOWN:
                return RunState.STOPPED
            return run_state
        return RunState.RUNNING

    op_el = _find_operation(lrm_resource_el, const.OPERATION_START)
    if op_el is not None:
        rc_code = _get_rc_code(resource_id, op_el, reporter)
        if rc_code is None:
            return run_state
        if rc_code in (OCF_SUCCESS, OCF_RUNNING_MASTER):
            if run_state == RunState.UNKNOWN:
                return RunState.RUNNING
            return run_state
        return RunState.STOPPED

    return run_state


def get_resource_run_state(
    cib: _Element, resource_id: str, reporter: ReportProcessor
) -> RunState:
    """
    Return the run state of a resource in the whole cluster

    cib -- the whole cib
    resource_id -- id of the resource
    reporter -- receives warnings about malformed operation records
    """
    run_state = RunState.UNKNOWN
    for lrm_resource_el in find_lrm_resources(cib, resource_id):
        run_state = update_run_state(
            resource_id, lrm_resource_el, run_state, reporter
        )
    return run_state


def get_node_of_resource(
    cib: _Element, resource_id: str, reporter: ReportProcessor
) -> Optional[str]:
    """
    Return the name of the first node the resource is running on or None if
    it is not running anywhere

    cib -- the whole cib
    resource_id -- id of the resource
    reporter -- receives warnings about malformed operation records
    """
    for position, node_state_el in enumerate(get_node_states(cib), 1):
        uname = node_state_el.get(const.ATTR_UNAME)
        if not uname:
            reporter.report(
                ReportItem.debug(
                    reports.messages.NodeStateMissingUname(position)
                )
            )
            continue
        run_state = RunState.UNKNOWN
        for lrm_resource_el in find_lrm_resources(node_state_el, resource_id):
            run_state = update_run_state(
                resource_id, lrm_resource_el, run_state, reporter
            )
        if run_state == RunState.RUNNING:
            return uname
    return None


def _get_required_attr(node_state_el: _Element, node: str, attr: str) -> str:
    value = node_state_el.get(attr)
    if value is None:
        raise LibraryError(
            ReportItem.error(
                reports.messages.NodeStateMissingAttribute(node, attr)
            )
        )
    return str(value)


def _get_join_state(node_state_el: _Element, node: str, attr: str) -> JoinState:
    value = _get_required_attr(node_state_el, node, attr)
    join_state = str_to_enum(JoinState, value)
    if join_state is None:
        raise LibraryError(
            ReportItem.error(
                reports.messages.NodeStateInvalidJoinValue(
                    node,
                    attr,
                    value,
                    sorted(item.value for item in JoinState),
                )
            )
        )
    return join_state


def _node_state_to_dto(node_state_el: _Element, node: str) -> NodeStateDto:
    return NodeStateDto(
        in_ccm=_get_required_attr(node_state_el, node, _ATTR_IN_CCM) == "true",
        crmd=(
            _get_required_attr(node_state_el, node, _ATTR_CRMD)
            == _CRMD_ONLINE
        ),
        join=_get_join_state(node_state_el, node, _ATTR_JOIN),
        expected=_get_join_state(node_state_el, node, _ATTR_EXPECTED),
    )


def get_node_state(cib: _Element, uname: str) -> NodeStateDto:
    """
    Return the state of a node as recorded in the status section

    cib -- the whole cib
    uname -- name of the node
    """
    for node_state_el in get_node_states(cib):
        if node_state_el.get(const.ATTR_UNAME) == uname:
            return _node_state_to_dto(node_state_el, uname)
    raise LibraryError(
        ReportItem.error(
            reports.messages.NodeNotFound(
                uname, searched_types=[const.TAG_NODE_STATE]
            )
        )
    )


def list_nodes(cib: _Element) -> List[NodeDto]:
    """
    Return all nodes known in the status section with their states

    cib -- the whole cib
    """
    node_list = []
    for position, node_state_el in enumerate(get_node_states(cib), 1):
        uname = node_state_el.get(const.ATTR_UNAME)
        if not uname:
            raise LibraryError(
                ReportItem.error(
                    reports.messages.NodeStateMissingAttribute(
                        f"#{position}", const.ATTR_UNAME
                    )
                )
            )
        node_list.append(
            NodeDto(
                uname=str(uname),
                state=_node_state_to_dto(node_state_el, str(uname)),
            )
        )
    return node_list
