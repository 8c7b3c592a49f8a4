from unittest import TestCase

from lxml import etree

from crmcib.common.reports import codes as report_codes
from crmcib.lib.cib import cluster_property
from crmcib.lib.xml_tools import etree_to_str

from crmcib_test.tools import fixture
from crmcib_test.tools.assertions import (
    assert_raise_library_error,
    assert_xml_equal,
)

FIXTURE_STONITH_DISABLED = """
    <cib><configuration><crm_config>
        <cluster_property_set id="cib-bootstrap-options">
            <nvpair id="cib-bootstrap-options-stonith-enabled"
                name="stonith-enabled" value="false"
            />
        </cluster_property_set>
    </crm_config></configuration></cib>
"""


class SetClusterProperty(TestCase):
    def assert_set(self, cib_xml, expected_xml):
        cib = etree.fromstring(cib_xml)
        cluster_property.set_cluster_property(cib, "stonith-enabled", "false")
        assert_xml_equal(expected_xml, etree_to_str(cib))

    def test_add_nvpair(self):
        self.assert_set(
            """
            <cib><configuration><crm_config>
                <cluster_property_set id="cib-bootstrap-options">
                    <nvpair id="cib-bootstrap-options-cluster-name"
                        name="cluster-name" value="la"
                    />
                </cluster_property_set>
            </crm_config></configuration></cib>
            """,
            """
            <cib><configuration><crm_config>
                <cluster_property_set id="cib-bootstrap-options">
                    <nvpair id="cib-bootstrap-options-cluster-name"
                        name="cluster-name" value="la"
                    />
                    <nvpair id="cib-bootstrap-options-stonith-enabled"
                        name="stonith-enabled" value="false"
                    />
                </cluster_property_set>
            </crm_config></configuration></cib>
            """,
        )

    def test_update_nvpair(self):
        self.assert_set(
            """
            <cib><configuration><crm_config>
                <cluster_property_set id="cib-bootstrap-options">
                    <nvpair id="cib-bootstrap-options-stonith-enabled"
                        name="stonith-enabled" value="true"
                    />
                </cluster_property_set>
            </crm_config></configuration></cib>
            """,
            FIXTURE_STONITH_DISABLED,
        )

    def test_no_configuration(self):
        self.assert_set("<cib/>", FIXTURE_STONITH_DISABLED)

    def test_no_crm_config(self):
        self.assert_set(
            "<cib><configuration/></cib>", FIXTURE_STONITH_DISABLED
        )

    def test_no_property_set(self):
        self.assert_set(
            "<cib><configuration><crm_config/></configuration></cib>",
            FIXTURE_STONITH_DISABLED,
        )

    def test_other_property_set_untouched(self):
        self.assert_set(
            """
            <cib><configuration><crm_config>
                <cluster_property_set id="other-options"/>
            </crm_config></configuration></cib>
            """,
            """
            <cib><configuration><crm_config>
                <cluster_property_set id="other-options"/>
                <cluster_property_set id="cib-bootstrap-options">
                    <nvpair id="cib-bootstrap-options-stonith-enabled"
                        name="stonith-enabled" value="false"
                    />
                </cluster_property_set>
            </crm_config></configuration></cib>
            """,
        )

    def test_idempotent(self):
        cib = etree.fromstring("<cib/>")
        cluster_property.set_cluster_property(cib, "stonith-enabled", "false")
        cluster_property.set_cluster_property(cib, "stonith-enabled", "false")
        assert_xml_equal(FIXTURE_STONITH_DISABLED, etree_to_str(cib))

    def test_bad_root(self):
        assert_raise_library_error(
            lambda: cluster_property.set_cluster_property(
                etree.fromstring("<configuration/>"), "stonith-enabled", "1"
            ),
            fixture.error(
                report_codes.CIB_LOAD_ERROR_BAD_ROOT,
                root_tag="configuration",
            ),
        )


class GetClusterProperty(TestCase):
    def assert_get(self, cib_xml, expected_value):
        self.assertEqual(
            cluster_property.get_cluster_property(
                etree.fromstring(cib_xml), "stonith-enabled"
            ),
            expected_value,
        )

    def test_bad_root(self):
        assert_raise_library_error(
            lambda: cluster_property.get_cluster_property(
                etree.fromstring("<someotherroot/>"), "stonith-enabled"
            ),
            fixture.error(
                report_codes.CIB_LOAD_ERROR_BAD_ROOT,
                root_tag="someotherroot",
            ),
        )

    def test_no_configuration(self):
        self.assert_get("<cib/>", "")

    def test_no_crm_config(self):
        self.assert_get("<cib><configuration/></cib>", "")

    def test_no_property_set(self):
        self.assert_get(
            "<cib><configuration><crm_config/></configuration></cib>", ""
        )

    def test_no_nvpair(self):
        self.assert_get(
            """
            <cib><configuration><crm_config>
                <cluster_property_set id="cib-bootstrap-options"/>
            </crm_config></configuration></cib>
            """,
            "",
        )

    def test_no_value(self):
        self.assert_get(
            """
            <cib><configuration><crm_config>
                <cluster_property_set id="cib-bootstrap-options">
                    <nvpair id="cib-bootstrap-options-stonith-enabled"/>
                </cluster_property_set>
            </crm_config></configuration></cib>
            """,
            "",
        )

    def test_value(self):
        self.assert_get(FIXTURE_STONITH_DISABLED, "false")
