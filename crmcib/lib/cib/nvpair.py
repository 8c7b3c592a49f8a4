from typing import (
    List,
    Optional,
    cast,
)

from lxml import etree
from lxml.etree import _Element

from crmcib.lib.cib import const


def find_nvpair_by_name(
    nvset_element: _Element, name: str
) -> Optional[_Element]:
    """
    Return the first nvpair with the specified name in an nvset or None

    nvset_element -- element containing nvpairs
    name -- name of the nvpair
    """
    nvpair_list = cast(
        List[_Element], nvset_element.xpath("./nvpair[@name=$name]", name=name)
    )
    return nvpair_list[0] if nvpair_list else None


def find_nvpair_by_id(
    nvset_element: _Element, nvpair_id: str
) -> Optional[_Element]:
    """
    Return the nvpair with the specified id in an nvset or None

    nvset_element -- element containing nvpairs
    nvpair_id -- id of the nvpair
    """
    nvpair_list = cast(
        List[_Element],
        nvset_element.xpath("./nvpair[@id=$nvpair_id]", nvpair_id=nvpair_id),
    )
    return nvpair_list[0] if nvpair_list else None


def set_nvpair_in_nvset(
    nvset_element: _Element, nvpair_id: str, name: str, value: str
) -> _Element:
    """
    Set the value of an nvpair specified by its name, create the nvpair if it
    doesn't exist yet. Return the nvpair.

    nvset_element -- element in which the nvpair should be added or updated
    nvpair_id -- id of the nvpair if it is going to be created
    name -- name of the nvpair
    value -- value of the nvpair
    """
    nvpair = find_nvpair_by_name(nvset_element, name)
    if nvpair is None:
        nvpair = etree.SubElement(
            nvset_element,
            const.TAG_NVPAIR,
            {const.ATTR_ID: nvpair_id, const.ATTR_NAME: name},
        )
    nvpair.set(const.ATTR_VALUE, value)
    return nvpair


def remove_nvpair_from_nvset(nvset_element: _Element, name: str) -> bool:
    """
    Remove an nvpair specified by its name. Keep the nvset element even if it
    becomes empty. Return True if an nvpair has been removed.

    nvset_element -- element from which the nvpair is removed
    name -- name of the nvpair
    """
    # Do not ever remove the nvset element, even if it is empty. There may be
    # ACLs set in pacemaker which allow "write" for nvpairs (adding, changing
    # and removing) but not nvsets.
    nvpair = find_nvpair_by_name(nvset_element, name)
    if nvpair is None:
        return False
    nvset_element.remove(nvpair)
    return True


def get_value(
    tag_name: str,
    context_element: _Element,
    name: str,
    default: Optional[str] = None,
) -> Optional[str]:
    """
    Return a value from an nvpair

    WARNING: does not solve multiple nvsets (with the same tag_name) in the
    context_element nor multiple nvpair with the same name

    tag_name -- "instance_attributes" or "meta_attributes"
    context_element -- searched element
    name -- nvpair name
    default -- default return value
    """
    value_list = context_element.xpath(
        """
            ./*[local-name()=$tag_name]
            /nvpair[@name=$name]
            /@value
        """,
        tag_name=tag_name,
        name=name,
    )
    return str(cast(List[str], value_list)[0]) if value_list else default
