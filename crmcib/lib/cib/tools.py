from typing import (
    List,
    Optional,
    cast,
)

from lxml.etree import _Element

from crmcib.common import reports
from crmcib.common.reports.item import ReportItem
from crmcib.lib.cib import (
    const,
    sections,
)
from crmcib.lib.errors import LibraryError
from crmcib.lib.xml_tools import get_root


def get_cib_root(tree: _Element) -> _Element:
    """
    Return the root element of the cib, raise if the document is not a cib

    tree -- any element of the document
    """
    root = get_root(tree)
    if root.tag != const.TAG_CIB:
        raise LibraryError(
            ReportItem.error(reports.messages.CibLoadErrorBadRoot(root.tag))
        )
    return root


def find_primitive(cib: _Element, resource_id: str) -> Optional[_Element]:
    """
    Return a primitive resource element with the specified id or None

    cib -- the whole cib
    resource_id -- id of the primitive
    """
    element_list = cast(
        List[_Element],
        get_root(cib).xpath(
            ".//primitive[@id=$resource_id]", resource_id=resource_id
        ),
    )
    return element_list[0] if element_list else None


def find_node(cib: _Element, uname: str) -> Optional[_Element]:
    """
    Return a node element from the node list with the specified name or None

    cib -- the whole cib
    uname -- name of the node
    """
    nodes = sections.find(get_root(cib), sections.NODES)
    if nodes is None:
        return None
    element_list = cast(
        List[_Element], nodes.xpath("./node[@uname=$uname]", uname=uname)
    )
    return element_list[0] if element_list else None


def get_node_states(cib: _Element) -> List[_Element]:
    """
    Return all node_state elements of the status section

    cib -- the whole cib
    """
    status = sections.find(get_root(cib), sections.STATUS)
    if status is None:
        return []
    return cast(List[_Element], status.findall(f"./{const.TAG_NODE_STATE}"))


def find_lrm_resources(
    context_element: _Element, resource_id: str
) -> List[_Element]:
    """
    Return lrm_resource elements of the specified resource

    context_element -- the whole cib or a node_state element
    resource_id -- id of the resource
    """
    if context_element.tag == const.TAG_NODE_STATE:
        xpath = "./lrm/lrm_resources/lrm_resource[@id=$resource_id]"
    else:
        xpath = (
            "./status/node_state/lrm/lrm_resources"
            "/lrm_resource[@id=$resource_id]"
        )
        context_element = get_root(context_element)
    return cast(
        List[_Element],
        context_element.xpath(xpath, resource_id=resource_id),
    )
