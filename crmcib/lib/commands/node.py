from crmcib.common.pacemaker.node import (
    NodeListDto,
    NodeStateDto,
)
from crmcib.lib.cib import (
    node,
    status,
)
from crmcib.lib.env import LibraryEnvironment


def standby(env: LibraryEnvironment, uname: str) -> None:
    """
    Put a node to standby mode

    uname -- name of the node
    """
    cib = env.get_cib()
    node.set_standby(cib, uname)
    env.push_cib(cib)


def unstandby(env: LibraryEnvironment, uname: str) -> None:
    """
    Take a node out of standby mode

    uname -- name of the node
    """
    cib = env.get_cib()
    node.clear_standby(cib, uname)
    env.push_cib(cib)


def is_standby(env: LibraryEnvironment, uname: str) -> bool:
    return node.is_standby(env.get_cib(), uname)


def get_node_state(env: LibraryEnvironment, uname: str) -> NodeStateDto:
    return status.get_node_state(env.get_cib(), uname)


def list_nodes(env: LibraryEnvironment) -> NodeListDto:
    return NodeListDto(nodes=status.list_nodes(env.get_cib()))
