from typing import (
    List,
    Optional,
    Union,
    cast,
)

from lxml import etree
from lxml.etree import (
    _Element,
    _ElementTree,
)


def get_root(tree: Union[_Element, _ElementTree]) -> _Element:
    # ElementTree has getroot, Element has getroottree
    if isinstance(tree, _ElementTree):
        return tree.getroot()
    # getroot() turns _ElementTree to _Element
    return tree.getroottree().getroot()


def get_sub_element(
    element: _Element,
    sub_element_tag: str,
    new_id: Optional[str] = None,
) -> _Element:
    """
    Returns the FIRST sub-element sub_element_tag of element. It will create
    and append a new element if such doesn't exist yet.

    element -- parent element
    sub_element_tag -- tag of the wanted new element
    new_id -- id of the new element, None means no id will be set
    """
    sub_element_list = cast(
        List[_Element],
        element.xpath("./*[local-name()=$tag_name]", tag_name=sub_element_tag),
    )
    if sub_element_list:
        return sub_element_list[0]
    sub_element = etree.SubElement(element, sub_element_tag)
    if new_id:
        sub_element.set("id", new_id)
    return sub_element


def get_sub_element_by_id(
    element: _Element,
    sub_element_tag: str,
    element_id: str,
) -> _Element:
    """
    Returns the sub-element sub_element_tag of element with the specified id.
    It will create and append a new element if such doesn't exist yet.

    element -- parent element
    sub_element_tag -- tag of the wanted element
    element_id -- id of the wanted element
    """
    sub_element_list = cast(
        List[_Element],
        element.xpath(
            "./*[local-name()=$tag_name and @id=$element_id]",
            tag_name=sub_element_tag,
            element_id=element_id,
        ),
    )
    if sub_element_list:
        return sub_element_list[0]
    return etree.SubElement(element, sub_element_tag, id=element_id)


def remove_one_element(element: _Element) -> None:
    """
    Remove an element from its parent. Do nothing for a root element.

    element -- the element to be removed
    """
    parent = element.getparent()
    if parent is not None:
        parent.remove(element)


def etree_to_str(tree: _Element) -> str:
    """
    Export a lxml tree to a string

    tree - the tree to be exported
    """
    # etree returns string in bytes: b'xml'
    # run(...) calls subprocess.Popen.communicate which calls encode...
    # so there is bytes to str conversion
    raw = etree.tostring(tree)
    return raw.decode() if isinstance(raw, bytes) else raw
