from typing import (
    List,
    cast,
)

from lxml.etree import _Element

from crmcib.common import reports
from crmcib.common.reports.item import ReportItem
from crmcib.lib.cib import const
from crmcib.lib.cib.nvpair import (
    get_value,
    remove_nvpair_from_nvset,
    set_nvpair_in_nvset,
)
from crmcib.lib.cib.tools import find_node
from crmcib.lib.errors import LibraryError
from crmcib.lib.xml_tools import get_sub_element


def _get_node_el(cib: _Element, uname: str) -> _Element:
    node_el = find_node(cib, uname)
    if node_el is None:
        raise LibraryError(
            ReportItem.error(
                reports.messages.NodeNotFound(
                    uname, searched_types=[const.TAG_NODE]
                )
            )
        )
    return node_el


def _find_standby_nvpairs(node_el: _Element) -> List[_Element]:
    return cast(
        List[_Element],
        node_el.xpath(
            "./instance_attributes/nvpair[@name=$name]",
            name=const.NODE_ATTR_STANDBY,
        ),
    )


def set_standby(cib: _Element, uname: str) -> None:
    """
    Put a node to standby mode

    cib -- the whole cib
    uname -- name of the node
    """
    node_el = _get_node_el(cib, uname)
    node_id = node_el.get(const.ATTR_ID)
    if not node_id:
        raise LibraryError(
            ReportItem.error(reports.messages.NodeIdMissing(uname))
        )
    standby_list = _find_standby_nvpairs(node_el)
    if standby_list:
        standby_list[0].set(const.ATTR_VALUE, const.NODE_STANDBY_ON)
        return
    # If there are more instance_attributes, crm_attribute adds a new nvpair
    # to the first one found. So we just mimic this behavior here.
    attrs_el = get_sub_element(
        node_el, const.TAG_INSTANCE_ATTRIBUTES, new_id=f"nodes-{node_id}"
    )
    set_nvpair_in_nvset(
        attrs_el,
        f"nodes-{node_id}-{const.NODE_ATTR_STANDBY}",
        const.NODE_ATTR_STANDBY,
        const.NODE_STANDBY_ON,
    )


def clear_standby(cib: _Element, uname: str) -> None:
    """
    Take a node out of standby mode, do nothing if it is not in standby

    cib -- the whole cib
    uname -- name of the node
    """
    node_el = _get_node_el(cib, uname)
    for attrs_el in node_el.iterfind(f"./{const.TAG_INSTANCE_ATTRIBUTES}"):
        remove_nvpair_from_nvset(attrs_el, const.NODE_ATTR_STANDBY)


def is_standby(cib: _Element, uname: str) -> bool:
    """
    Check whether a node is in standby mode

    cib -- the whole cib
    uname -- name of the node
    """
    return (
        get_value(
            const.TAG_INSTANCE_ATTRIBUTES,
            _get_node_el(cib, uname),
            const.NODE_ATTR_STANDBY,
            default="",
        )
        == const.NODE_STANDBY_ON
    )
