"""
Cluster properties live in the bootstrap property set:

<cib>
  <configuration>
    <crm_config>
      <cluster_property_set id="cib-bootstrap-options">
        <nvpair id="cib-bootstrap-options-stonith-enabled"
          name="stonith-enabled" value="false"/>
        ...
      </cluster_property_set>
    </crm_config>
  </configuration>
</cib>
"""

from typing import (
    List,
    cast,
)

from lxml import etree
from lxml.etree import _Element

from crmcib import settings
from crmcib.lib.cib import (
    const,
    sections,
)
from crmcib.lib.cib.nvpair import find_nvpair_by_id
from crmcib.lib.cib.tools import get_cib_root
from crmcib.lib.xml_tools import get_sub_element_by_id

STONITH_ENABLED = "stonith-enabled"
CLUSTER_NAME = "cluster-name"


def get_property_nvpair_id(property_name: str) -> str:
    return f"{settings.cib_bootstrap_options_id}-{property_name}"


def get_cluster_property(cib: _Element, property_name: str) -> str:
    """
    Return the value of a cluster property. If the crm_config section, the
    property set, the nvpair or its value is missing, the property is not set
    and an empty string is returned.

    cib -- the whole cib
    property_name -- name of the property, e.g. 'stonith-enabled'
    """
    value_list = cast(
        List[str],
        get_cib_root(cib).xpath(
            """
                ./configuration/crm_config
                /cluster_property_set[@id=$set_id]
                /nvpair[@id=$nvpair_id]
                /@value
            """,
            set_id=settings.cib_bootstrap_options_id,
            nvpair_id=get_property_nvpair_id(property_name),
        ),
    )
    return str(value_list[0]) if value_list else ""


def set_cluster_property(
    cib: _Element, property_name: str, value: str
) -> _Element:
    """
    Set the value of a cluster property, create the property and all its
    missing parent elements. Return the property nvpair.

    cib -- the whole cib
    property_name -- name of the property, e.g. 'stonith-enabled'
    value -- new value of the property
    """
    property_set = get_sub_element_by_id(
        sections.ensure(get_cib_root(cib), sections.CRM_CONFIG),
        const.TAG_CLUSTER_PROPERTY_SET,
        settings.cib_bootstrap_options_id,
    )
    nvpair_id = get_property_nvpair_id(property_name)
    nvpair = find_nvpair_by_id(property_set, nvpair_id)
    if nvpair is None:
        nvpair = etree.SubElement(
            property_set,
            const.TAG_NVPAIR,
            {const.ATTR_ID: nvpair_id, const.ATTR_NAME: property_name},
        )
    nvpair.set(const.ATTR_VALUE, value)
    return nvpair
