from lxml.etree import _Element

from crmcib.common import reports
from crmcib.common.reports.item import ReportItem
from crmcib.lib.cib import const
from crmcib.lib.cib.nvpair import set_nvpair_in_nvset
from crmcib.lib.cib.tools import find_primitive
from crmcib.lib.errors import LibraryError
from crmcib.lib.xml_tools import get_sub_element


def get_primitive(cib: _Element, resource_id: str) -> _Element:
    """
    Return a primitive resource element, raise LibraryError if it is missing

    cib -- the whole cib
    resource_id -- id of the primitive
    """
    resource_el = find_primitive(cib, resource_id)
    if resource_el is None:
        raise LibraryError(
            ReportItem.error(reports.messages.ResourceNotFound(resource_id))
        )
    return resource_el


def set_target_role(cib: _Element, resource_id: str, started: bool) -> None:
    """
    Set the desired state of a resource

    cib -- the whole cib
    resource_id -- id of the primitive
    started -- True for Started, False for Stopped
    """
    resource_el = get_primitive(cib, resource_id)
    meta_el = get_sub_element(
        resource_el,
        const.TAG_META_ATTRIBUTES,
        new_id=f"{resource_id}-{const.TAG_META_ATTRIBUTES}",
    )
    set_nvpair_in_nvset(
        meta_el,
        f"{resource_id}-{const.TAG_META_ATTRIBUTES}-{const.META_TARGET_ROLE}",
        const.META_TARGET_ROLE,
        (
            const.TARGET_ROLE_STARTED
            if started
            else const.TARGET_ROLE_STOPPED
        ),
    )
