from typing import (
    List,
    cast,
)

from lxml.etree import _Element

from crmcib.common import reports
from crmcib.common.reports import ReportProcessor
from crmcib.common.reports.item import ReportItem
from crmcib.common.types import StringIterable
from crmcib.lib.cib import const
from crmcib.lib.cib.tools import get_cib_root
from crmcib.lib.xml_tools import remove_one_element

# Resource ids are only ever passed in as xpath variables.
_DEPENDANT_ELEMENTS_XPATH = """
    ./configuration/constraints/rsc_colocation[@rsc=$id or @with-rsc=$id]
    |
    ./configuration/constraints/rsc_order[@first=$id or @then=$id]
    |
    ./configuration/constraints/rsc_location[
        @rsc=$id
        or
        ./resource_set/resource_ref[@id=$id]
    ]
    |
    ./status/node_state/lrm/lrm_resources/lrm_resource[@id=$id]
"""


def find_dependant_elements(cib: _Element, resource_id: str) -> List[_Element]:
    """
    Return constraints and operation history records referencing a resource

    cib -- the whole cib
    resource_id -- id of the resource
    """
    return cast(
        List[_Element],
        get_cib_root(cib).xpath(_DEPENDANT_ELEMENTS_XPATH, id=resource_id),
    )


def dissolve_constraints(
    cib: _Element,
    resource_ids: StringIterable,
    reporter: ReportProcessor,
) -> None:
    """
    Remove all constraints referencing any of the specified resources as well
    as the operation history of the resources. A location constraint with
    a resource set is removed as a whole when any of the set members is
    the removed resource.

    cib -- the whole cib
    resource_ids -- ids of resources being deleted
    reporter -- receives a debug report about every removed element
    """
    for resource_id in resource_ids:
        for element in find_dependant_elements(cib, resource_id):
            remove_one_element(element)
            element_id = element.get(const.ATTR_ID)
            if element_id:
                reporter.report(
                    ReportItem.debug(
                        reports.messages.CibRemoveDependantElement(
                            str(element.tag), str(element_id), resource_id
                        )
                    )
                )
