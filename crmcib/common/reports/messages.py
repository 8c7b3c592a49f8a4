from dataclasses import (
    dataclass,
    field,
)
from typing import (
    List,
    Mapping,
    Optional,
)

from crmcib.common.str_tools import (
    format_list,
    format_optional,
    format_plural,
)

from . import codes
from .item import ReportItemMessage

_type_translation = {
    "cluster_property_set": "cluster property set",
    "lrm_resource": "resource operation history",
    "node": "node",
    "node_state": "node state",
    "primitive": "resource",
    "rsc_colocation": "colocation constraint",
    "rsc_location": "location constraint",
    "rsc_order": "order constraint",
}


def _type_to_string(type_name: str) -> str:
    return _type_translation.get(type_name, type_name)


def _build_node_description(node_types: List[str]) -> str:
    if not node_types:
        return "Node"
    if len(node_types) == 1:
        return _type_to_string(node_types[0]).capitalize()
    return "nor " + " or ".join(
        sorted(_type_to_string(ntype) for ntype in node_types)
    )


@dataclass(frozen=True)
class RunExternalProcessStarted(ReportItemMessage):
    """
    Information about running an external process

    command -- the external process command
    stdin -- passed to the external process via its stdin
    environment -- process environment variables
    """

    command: str
    stdin: Optional[str]
    environment: Mapping[str, str]
    _code = codes.RUN_EXTERNAL_PROCESS_STARTED

    @property
    def message(self) -> str:
        stdin = format_optional(
            self.stdin,
            "\n--Debug Input Start--\n{}\n--Debug Input End--",
        )
        env = "\n".join(
            f"  {key}={val}" for key, val in sorted(self.environment.items())
        )
        return f"Running: {self.command}\nEnvironment:{env}{stdin}\n"


@dataclass(frozen=True)
class RunExternalProcessFinished(ReportItemMessage):
    """
    Information about result of running an external process

    command -- the external process command
    return_value -- external process's return (exit) code
    stdout -- external process's stdout
    stderr -- external process's stderr
    """

    command: str
    return_value: int
    stdout: str
    stderr: str
    _code = codes.RUN_EXTERNAL_PROCESS_FINISHED

    @property
    def message(self) -> str:
        return (
            f"Finished running: {self.command}\n"
            f"Return value: {self.return_value}\n"
            "--Debug Stdout Start--\n"
            f"{self.stdout}\n"
            "--Debug Stdout End--\n"
            "--Debug Stderr Start--\n"
            f"{self.stderr}\n"
            "--Debug Stderr End--\n"
        )


@dataclass(frozen=True)
class RunExternalProcessError(ReportItemMessage):
    """
    Attempt to run an external process failed

    command -- the external process command
    reason -- error description
    """

    command: str
    reason: str
    _code = codes.RUN_EXTERNAL_PROCESS_ERROR

    @property
    def message(self) -> str:
        return f"unable to run command {self.command}: {self.reason}"


@dataclass(frozen=True)
class CibLoadError(ReportItemMessage):
    """
    Cannot load the CIB, either cibadmin failed or its output is not a valid
    XML. The details are logged, not transported in the report.
    """

    _code = codes.CIB_LOAD_ERROR

    @property
    def message(self) -> str:
        return (
            "Failed to read the CRM configuration. Maybe the cluster is not "
            "started on this node?"
        )


@dataclass(frozen=True)
class CibLoadErrorBadRoot(ReportItemMessage):
    """
    The loaded document is not a CIB, its root element is not 'cib'

    root_tag -- tag of the root element actually found
    """

    root_tag: str
    _code = codes.CIB_LOAD_ERROR_BAD_ROOT

    @property
    def message(self) -> str:
        return (
            "invalid cib state: root element 'cib' not found, "
            f"found '{self.root_tag}'"
        )


@dataclass(frozen=True)
class CibPushError(ReportItemMessage):
    """
    Cannot push cib to cibadmin, cibadmin exited with non-zero code

    reason -- error description
    pushed_cib -- cib which failed to be pushed
    """

    reason: str
    pushed_cib: str
    _code = codes.CIB_PUSH_ERROR

    @property
    def message(self) -> str:
        return f"Unable to update cib\n{self.reason}\n{self.pushed_cib}"


@dataclass(frozen=True)
class CibRemoveDependantElement(ReportItemMessage):
    """
    An element referencing a removed resource has been removed from the CIB

    element_type -- tag of the removed element
    element_id -- id of the removed element
    resource_id -- the resource the element referenced
    """

    element_type: str
    element_id: str
    resource_id: str
    _code = codes.CIB_REMOVE_DEPENDANT_ELEMENT

    @property
    def message(self) -> str:
        return (
            f"Deleting {_type_to_string(self.element_type)} "
            f"'{self.element_id}' referencing '{self.resource_id}'"
        )


@dataclass(frozen=True)
class ClusterPropertyValueNotBoolean(ReportItemMessage):
    """
    Value of a cluster property is expected to be a boolean

    property_name -- name of the property
    property_value -- value found in the CIB
    """

    property_name: str
    property_value: str
    _code = codes.CLUSTER_PROPERTY_VALUE_NOT_BOOLEAN

    @property
    def message(self) -> str:
        return (
            f"Value '{self.property_value}' of cluster property "
            f"'{self.property_name}' cannot be interpreted as a boolean"
        )


@dataclass(frozen=True)
class LrmOperationMissingRcCode(ReportItemMessage):
    """
    A recorded resource operation has no usable result code, it is ignored

    resource_id -- resource the operation belongs to
    operation -- name of the operation
    """

    resource_id: str
    operation: str
    _code = codes.LRM_OPERATION_MISSING_RC_CODE

    @property
    def message(self) -> str:
        return (
            f"Found '{self.operation}' operation data of resource "
            f"'{self.resource_id}' without a status code"
        )


@dataclass(frozen=True)
class NodeIdMissing(ReportItemMessage):
    """
    A node in the CIB node list has no id

    node -- name of the node
    """

    node: str
    _code = codes.NODE_ID_MISSING

    @property
    def message(self) -> str:
        return f"Node '{self.node}' does not have an id attribute"


@dataclass(frozen=True)
class NodeNotFound(ReportItemMessage):
    """
    Specified node does not exist

    node -- specified node
    searched_types -- types of elements the node was looked up as
    """

    node: str
    searched_types: List[str] = field(default_factory=list)
    _code = codes.NODE_NOT_FOUND

    @property
    def message(self) -> str:
        desc = _build_node_description(self.searched_types)
        return f"{desc} '{self.node}' does not appear to exist in configuration"


@dataclass(frozen=True)
class NodeStateMissingAttribute(ReportItemMessage):
    """
    A node_state element lacks an attribute needed to describe the node

    node -- name of the node
    attribute -- the missing attribute
    """

    node: str
    attribute: str
    _code = codes.NODE_STATE_MISSING_ATTRIBUTE

    @property
    def message(self) -> str:
        return (
            f"missing attribute '{self.attribute}' on state of node "
            f"{self.node}"
        )


@dataclass(frozen=True)
class NodeStateMissingUname(ReportItemMessage):
    """
    A node_state element has no uname

    position -- position of the node_state element in the status section
    """

    position: int
    _code = codes.NODE_STATE_MISSING_UNAME

    @property
    def message(self) -> str:
        return f"missing uname on node element #{self.position}"


@dataclass(frozen=True)
class NodeStateInvalidJoinValue(ReportItemMessage):
    """
    A join phase of a node is not one of the known values

    node -- name of the node
    attribute -- attribute holding the value
    value -- the value found
    allowed_values -- the values known to pacemaker
    """

    node: str
    attribute: str
    value: str
    allowed_values: List[str]
    _code = codes.NODE_STATE_INVALID_JOIN_VALUE

    @property
    def message(self) -> str:
        return (
            f"'{self.value}' is not a valid '{self.attribute}' value on state "
            f"of node {self.node}, use {format_list(self.allowed_values)}"
        )


@dataclass(frozen=True)
class ResourceNotFound(ReportItemMessage):
    """
    A resource with the specified id does not exist in the CIB

    resource_id -- the resource looked up
    """

    resource_id: str
    _code = codes.RESOURCE_NOT_FOUND

    @property
    def message(self) -> str:
        return (
            f"CRM resource '{self.resource_id}' not found in the CIB, cannot "
            "modify role."
        )


@dataclass(frozen=True)
class ResourceNotFoundIgnored(ReportItemMessage):
    """
    A resource to wait for does not exist, it is dropped from the wait

    resource_id -- the dropped resource
    """

    resource_id: str
    _code = codes.RESOURCE_NOT_FOUND_IGNORED

    @property
    def message(self) -> str:
        return (
            f"Resource '{self.resource_id}' not found in the CIB, will be "
            "ignored."
        )


@dataclass(frozen=True)
class WaitForResourcesStopStarted(ReportItemMessage):
    """
    Waiting for resources to stop has started

    resource_id_list -- resources being waited for
    """

    resource_id_list: List[str]
    _code = codes.WAIT_FOR_RESOURCES_STOP_STARTED

    @property
    def message(self) -> str:
        return (
            "Waiting for the following CRM "
            f"{format_plural(self.resource_id_list, 'resource')} to stop: "
            f"{format_list(self.resource_id_list)}"
        )


@dataclass(frozen=True)
class ResourcesStopped(ReportItemMessage):
    """
    All resources which were waited for are stopped

    resource_id_list -- the stopped resources
    """

    resource_id_list: List[str]
    _code = codes.RESOURCES_STOPPED

    @property
    def message(self) -> str:
        return (
            f"The {format_plural(self.resource_id_list, 'resource')} "
            f"{format_list(self.resource_id_list)} "
            f"{format_plural(self.resource_id_list, 'is', 'are')} stopped"
        )


@dataclass(frozen=True)
class WaitForResourcesStopTimedOut(ReportItemMessage):
    """
    Resources have not been confirmed as stopped in the given retry budget

    resource_id_list -- resources not confirmed as stopped
    retries -- number of CIB re-reads made
    """

    resource_id_list: List[str]
    retries: int
    _code = codes.WAIT_FOR_RESOURCES_STOP_TIMED_OUT

    @property
    def message(self) -> str:
        return (
            "Could not confirm that the "
            f"{format_plural(self.resource_id_list, 'resource')} "
            f"{format_list(self.resource_id_list)} "
            f"{format_plural(self.resource_id_list, 'is', 'are')} stopped "
            f"after {self.retries} "
            f"{format_plural(self.retries, 'retry', 'retries')}"
        )
