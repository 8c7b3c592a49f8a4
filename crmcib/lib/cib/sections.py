"""
This module defines paths of cib sections relative to the cib root element. It
provides functions for getting existing sections from the cib (lxml) tree and
for creating the configuration sections when they are missing.
"""

from typing import Optional

from lxml.etree import _Element

from crmcib.lib.xml_tools import get_sub_element

CONFIGURATION = "configuration"
CONSTRAINTS = "configuration/constraints"
CRM_CONFIG = "configuration/crm_config"
NODES = "configuration/nodes"
RESOURCES = "configuration/resources"
STATUS = "status"

__SECTIONS = frozenset(
    [
        CONFIGURATION,
        CONSTRAINTS,
        CRM_CONFIG,
        NODES,
        RESOURCES,
        STATUS,
    ]
)


def _check_section_name(section_name: str) -> None:
    if section_name not in __SECTIONS:
        raise AssertionError(f"Unknown cib section '{section_name}'")


def find(cib: _Element, section_name: str) -> Optional[_Element]:
    """
    Return the element which represents section 'section_name' in the cib or
    None if the section is missing.

    cib -- the root element of the cib
    section_name -- name of desired section; it is strongly recommended to use
        constants defined in this module
    """
    _check_section_name(section_name)
    return cib.find(f"./{section_name}")


def ensure(cib: _Element, section_name: str) -> _Element:
    """
    Return the element which represents section 'section_name' in the cib.
    The section and all its missing parents are created.

    cib -- the root element of the cib
    section_name -- name of desired section
    """
    _check_section_name(section_name)
    element = cib
    for tag in section_name.split("/"):
        element = get_sub_element(element, tag)
    return element
