from unittest import TestCase

from lxml import etree

from crmcib.common.reports import codes as report_codes
from crmcib.lib.cib import remove_elements
from crmcib.lib.xml_tools import etree_to_str

from crmcib_test.tools import fixture
from crmcib_test.tools.assertions import assert_xml_equal
from crmcib_test.tools.custom_mock import MockLibraryReportProcessor

FIXTURE_LOCATION_SET = """
    <rsc_location id="lo_target" resource-discovery="never">
        <resource_set id="lo_target-0">
            <resource_ref id="p_lu1"/>
            <resource_ref id="p_target"/>
        </resource_set>
        <rule score="-INFINITY" id="lo_target-rule">
            <expression attribute="#uname" operation="ne" value="li0"
                id="lo_target-rule-expression-0"
            />
        </rule>
    </rsc_location>
"""
FIXTURE_LOCATION_LU1 = """
    <rsc_location id="lo_lu1" rsc="p_lu1" resource-discovery="never">
        <rule score="0" id="lo_lu1-rule">
            <expression attribute="#uname" operation="ne" value="li0"
                id="lo_lu1-rule-expression-0"
            />
        </rule>
    </rsc_location>
"""
FIXTURE_CO_PBLOCK = """
    <rsc_colocation id="co_pblock" score="INFINITY" rsc="p_pblock"
        with-rsc="p_ip"
    />
"""
FIXTURE_CO_TARGET = """
    <rsc_colocation id="co_target" score="INFINITY" rsc="p_target"
        with-rsc="p_pblock"
    />
"""
FIXTURE_CO_LU1 = """
    <rsc_colocation id="co_lu1" score="INFINITY" rsc="p_lu1"
        with-rsc="p_target"
    />
"""
FIXTURE_CO_PUNBLOCK = """
    <rsc_colocation id="co_punblock" score="INFINITY" rsc="p_punblock"
        with-rsc="p_ip"
    />
"""
FIXTURE_O_PBLOCK = """
    <rsc_order id="o_pblock" score="INFINITY" first="p_ip" then="p_pblock"/>
"""
FIXTURE_O_TARGET = """
    <rsc_order id="o_target" score="INFINITY" first="p_pblock"
        then="p_target"
    />
"""
FIXTURE_O_LU1 = """
    <rsc_order id="o_lu1" score="INFINITY" first="p_target" then="p_lu1"/>
"""
FIXTURE_O_PUNBLOCK = """
    <rsc_order id="o_punblock" score="INFINITY" first="p_lu1"
        then="p_punblock"
    />
"""
LRM_RESOURCE_IDS = ["p_ip", "p_pblock", "p_target", "p_lu1", "p_punblock"]


def _cib(constraints, lrm_resource_ids):
    lrm_resources = "".join(
        f'<lrm_resource id="{resource_id}" class="ocf"/>'
        for resource_id in lrm_resource_ids
    )
    return f"""
        <cib>
            <configuration><constraints>{"".join(constraints)}</constraints>
            </configuration>
            <status><node_state><lrm id="171"><lrm_resources>
                {lrm_resources}
            </lrm_resources></lrm></node_state></status>
        </cib>
    """


FIXTURE_CIB = _cib(
    [
        FIXTURE_LOCATION_SET,
        FIXTURE_CO_PBLOCK,
        FIXTURE_CO_TARGET,
        FIXTURE_CO_LU1,
        FIXTURE_CO_PUNBLOCK,
        FIXTURE_LOCATION_LU1,
        FIXTURE_O_PBLOCK,
        FIXTURE_O_TARGET,
        FIXTURE_O_LU1,
        FIXTURE_O_PUNBLOCK,
    ],
    LRM_RESOURCE_IDS,
)


class DissolveConstraints(TestCase):
    def setUp(self):
        self.cib = etree.fromstring(FIXTURE_CIB)
        self.reporter = MockLibraryReportProcessor()

    def dissolve(self, resource_ids):
        remove_elements.dissolve_constraints(
            self.cib, resource_ids, self.reporter
        )

    def test_remove_target(self):
        self.dissolve(["p_target"])
        assert_xml_equal(
            _cib(
                [
                    FIXTURE_CO_PBLOCK,
                    FIXTURE_CO_PUNBLOCK,
                    FIXTURE_LOCATION_LU1,
                    FIXTURE_O_PBLOCK,
                    FIXTURE_O_PUNBLOCK,
                ],
                ["p_ip", "p_pblock", "p_lu1", "p_punblock"],
            ),
            etree_to_str(self.cib),
        )
        self.reporter.assert_reports(
            [
                fixture.debug(
                    report_codes.CIB_REMOVE_DEPENDANT_ELEMENT,
                    element_type=element_type,
                    element_id=element_id,
                    resource_id="p_target",
                )
                for element_type, element_id in [
                    ("rsc_location", "lo_target"),
                    ("rsc_colocation", "co_target"),
                    ("rsc_colocation", "co_lu1"),
                    ("rsc_order", "o_target"),
                    ("rsc_order", "o_lu1"),
                    ("lrm_resource", "p_target"),
                ]
            ]
        )

    def test_remove_target_lu(self):
        self.dissolve(["p_target", "p_lu1"])
        assert_xml_equal(
            _cib(
                [FIXTURE_CO_PBLOCK, FIXTURE_CO_PUNBLOCK, FIXTURE_O_PBLOCK],
                ["p_ip", "p_pblock", "p_punblock"],
            ),
            etree_to_str(self.cib),
        )

    def test_remove_target_lu_ip(self):
        self.dissolve(["p_target", "p_lu1", "p_ip"])
        assert_xml_equal(
            _cib([], ["p_pblock", "p_punblock"]),
            etree_to_str(self.cib),
        )

    def test_remove_all(self):
        self.dissolve(LRM_RESOURCE_IDS)
        assert_xml_equal(_cib([], []), etree_to_str(self.cib))

    def test_unknown_resource(self):
        self.dissolve(["p_other"])
        assert_xml_equal(FIXTURE_CIB, etree_to_str(self.cib))
        self.reporter.assert_reports([])

    def test_no_constraints_section(self):
        cib_xml = "<cib><configuration/><status/></cib>"
        self.cib = etree.fromstring(cib_xml)
        self.dissolve(["p_target"])
        assert_xml_equal(cib_xml, etree_to_str(self.cib))

    def test_id_is_not_interpreted(self):
        self.dissolve(["p_target' or @id!='"])
        assert_xml_equal(FIXTURE_CIB, etree_to_str(self.cib))
