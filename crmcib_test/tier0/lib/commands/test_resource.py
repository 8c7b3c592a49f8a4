from unittest import (
    TestCase,
    mock,
)

from crmcib import settings
from crmcib.common import reports
from crmcib.common.pacemaker.resource import (
    ResourceRunStateDto,
    ResourceRunStateListDto,
)
from crmcib.common.reports import codes as report_codes
from crmcib.common.reports.item import ReportItem
from crmcib.common.types import RunState
from crmcib.lib.commands import resource
from crmcib.lib.errors import LibraryError

from crmcib_test.tools import fixture
from crmcib_test.tools.assertions import (
    assert_raise_library_error,
    assert_xml_equal,
)
from crmcib_test.tools.custom_mock import LibraryEnvironmentMock
from crmcib_test.tools.misc import create_patcher

patch_resource = create_patcher(resource)


def _fixture_cib(history):
    return f"""
        <cib>
            <configuration><resources>
                <primitive id="R1"/>
                <primitive id="R2"/>
            </resources></configuration>
            <status>
                <node_state uname="node1"><lrm id="1"><lrm_resources>
                    {history}
                </lrm_resources></lrm></node_state>
            </status>
        </cib>
    """


def _fixture_history(resource_id, operation, rc_code):
    return f"""
        <lrm_resource id="{resource_id}">
            <lrm_rsc_op operation="{operation}" rc-code="{rc_code}"/>
        </lrm_resource>
    """


FIXTURE_RUNNING = _fixture_cib(
    _fixture_history("R1", "start", 0) + _fixture_history("R2", "start", 0)
)
FIXTURE_R1_STOPPED = _fixture_cib(
    _fixture_history("R1", "stop", 0) + _fixture_history("R2", "start", 0)
)
FIXTURE_STOPPED = _fixture_cib(
    _fixture_history("R1", "stop", 0) + _fixture_history("R2", "monitor", 7)
)
FIXTURE_PRIMITIVE = """
    <cib><configuration><resources>
        <primitive id="R"/>
    </resources></configuration></cib>
"""
FIXTURE_NO_PRIMITIVE = "<cib><configuration><resources/></configuration></cib>"


def _get_env(*cib_xml_list):
    env = LibraryEnvironmentMock()
    env.runner.run.side_effect = [(xml, "", 0) for xml in cib_xml_list] + [
        ("", "", 0)
    ]
    return env


def _count_reads(env):
    return len(
        [
            call
            for call in env.runner.run.call_args_list
            if call.args[0] == [settings.cibadmin_exec, "--query"]
        ]
    )


class TargetRole(TestCase):
    def test_start(self):
        env = _get_env(FIXTURE_PRIMITIVE)
        resource.start(env, "R")
        assert_xml_equal(
            """
            <cib><configuration><resources>
                <primitive id="R">
                    <meta_attributes id="R-meta_attributes">
                        <nvpair id="R-meta_attributes-target-role"
                            name="target-role" value="Started"
                        />
                    </meta_attributes>
                </primitive>
            </resources></configuration></cib>
            """,
            env.pushed_cib_list[0],
        )

    def test_stop(self):
        env = _get_env(FIXTURE_PRIMITIVE)
        resource.stop(env, "R")
        assert_xml_equal(
            """
            <cib><configuration><resources>
                <primitive id="R">
                    <meta_attributes id="R-meta_attributes">
                        <nvpair id="R-meta_attributes-target-role"
                            name="target-role" value="Stopped"
                        />
                    </meta_attributes>
                </primitive>
            </resources></configuration></cib>
            """,
            env.pushed_cib_list[0],
        )

    def test_not_found(self):
        env = _get_env(FIXTURE_NO_PRIMITIVE)
        assert_raise_library_error(
            lambda: resource.stop(env, "R"),
            fixture.error(report_codes.RESOURCE_NOT_FOUND, resource_id="R"),
        )
        self.assertEqual(env.pushed_cib_list, [])


class Create(TestCase):
    def test_success(self):
        env = LibraryEnvironmentMock()
        fragment = '<primitive id="R" class="ocf" type="Dummy"/>'
        resource.create(env, fragment)
        env.runner.run.assert_called_once_with(
            [
                settings.cibadmin_exec,
                "--modify",
                "--allow-create",
                "--xml-pipe",
            ],
            stdin_string=fragment,
        )


class RunStates(TestCase):
    def test_get_run_state(self):
        env = _get_env(FIXTURE_R1_STOPPED)
        self.assertEqual(resource.get_run_state(env, "R1"), RunState.STOPPED)

    def test_get_node_of_resource(self):
        env = _get_env(FIXTURE_R1_STOPPED)
        self.assertEqual(resource.get_node_of_resource(env, "R2"), "node1")

    def test_get_node_of_stopped_resource(self):
        env = _get_env(FIXTURE_R1_STOPPED)
        self.assertIsNone(resource.get_node_of_resource(env, "R1"))

    def test_get_run_states(self):
        env = _get_env(FIXTURE_R1_STOPPED)
        self.assertEqual(
            resource.get_run_states(env, ["R1", "R2", "R3"]),
            ResourceRunStateListDto(
                resources=[
                    ResourceRunStateDto("R1", RunState.STOPPED, None),
                    ResourceRunStateDto("R2", RunState.RUNNING, "node1"),
                    ResourceRunStateDto("R3", RunState.UNKNOWN, None),
                ]
            ),
        )
        self.assertEqual(_count_reads(env), 1)


class DissolveConstraints(TestCase):
    def test_success(self):
        env = _get_env(
            """
            <cib>
                <configuration><constraints>
                    <rsc_order id="o1" first="R1" then="R2"/>
                    <rsc_order id="o2" first="R2" then="R3"/>
                </constraints></configuration>
                <status/>
            </cib>
            """
        )
        resource.dissolve_constraints(env, ["R1"])
        assert_xml_equal(
            """
            <cib>
                <configuration><constraints>
                    <rsc_order id="o2" first="R2" then="R3"/>
                </constraints></configuration>
                <status/>
            </cib>
            """,
            env.pushed_cib_list[0],
        )


@patch_resource("time.sleep")
class WaitForResourcesStop(TestCase):
    def setUp(self):
        self.poll_config = resource.PollConfig(max_retries=3, retry_delay=0.5)

    def test_stopped_immediately(self, mock_sleep):
        env = _get_env(FIXTURE_STOPPED)
        self.assertTrue(
            resource.wait_for_resources_stop(
                env, ["R1", "R2"], self.poll_config
            )
        )
        self.assertEqual(_count_reads(env), 1)
        mock_sleep.assert_not_called()
        env.report_processor.assert_reports(
            [
                fixture.info(
                    report_codes.WAIT_FOR_RESOURCES_STOP_STARTED,
                    resource_id_list=["R1", "R2"],
                ),
                fixture.info(
                    report_codes.RESOURCES_STOPPED,
                    resource_id_list=["R1", "R2"],
                ),
            ]
        )

    def test_stopped_after_retries(self, mock_sleep):
        env = _get_env(FIXTURE_RUNNING, FIXTURE_R1_STOPPED, FIXTURE_STOPPED)
        self.assertTrue(
            resource.wait_for_resources_stop(
                env, ["R1", "R2"], self.poll_config
            )
        )
        self.assertEqual(_count_reads(env), 3)
        mock_sleep.assert_has_calls([mock.call(0.5), mock.call(0.5)])
        self.assertEqual(mock_sleep.call_count, 2)

    def test_timeout(self, mock_sleep):
        env = _get_env(*([FIXTURE_R1_STOPPED] * 4))
        self.assertFalse(
            resource.wait_for_resources_stop(
                env, ["R1", "R2"], self.poll_config
            )
        )
        # the first read and exactly max_retries re-reads
        self.assertEqual(_count_reads(env), 4)
        self.assertEqual(mock_sleep.call_count, 3)
        env.report_processor.assert_reports(
            [
                fixture.info(
                    report_codes.WAIT_FOR_RESOURCES_STOP_STARTED,
                    resource_id_list=["R1", "R2"],
                ),
                fixture.warn(
                    report_codes.WAIT_FOR_RESOURCES_STOP_TIMED_OUT,
                    resource_id_list=["R2"],
                    retries=3,
                ),
            ]
        )

    def test_unknown_resource_ignored(self, mock_sleep):
        env = _get_env(FIXTURE_STOPPED)
        self.assertTrue(
            resource.wait_for_resources_stop(
                env, ["R1", "RX"], self.poll_config
            )
        )
        mock_sleep.assert_not_called()
        env.report_processor.assert_reports(
            [
                fixture.warn(
                    report_codes.RESOURCE_NOT_FOUND_IGNORED, resource_id="RX"
                ),
                fixture.info(
                    report_codes.WAIT_FOR_RESOURCES_STOP_STARTED,
                    resource_id_list=["R1"],
                ),
                fixture.info(
                    report_codes.RESOURCES_STOPPED, resource_id_list=["R1"]
                ),
            ]
        )

    def test_read_error_aborts(self, mock_sleep):
        env = LibraryEnvironmentMock()
        env.runner.run.side_effect = [
            (FIXTURE_RUNNING, "", 0),
            ("", "not connected", 102),
        ]
        assert_raise_library_error(
            lambda: resource.wait_for_resources_stop(
                env, ["R1"], self.poll_config
            ),
            fixture.error(report_codes.CIB_LOAD_ERROR),
        )
        self.assertEqual(mock_sleep.call_count, 1)

    def test_cibadmin_not_runnable_aborts(self, mock_sleep):
        env = LibraryEnvironmentMock()
        env.runner.run.side_effect = [
            (FIXTURE_RUNNING, "", 0),
            LibraryError(
                ReportItem.error(
                    reports.messages.RunExternalProcessError(
                        "cibadmin --query", "Permission denied"
                    )
                )
            ),
        ]
        assert_raise_library_error(
            lambda: resource.wait_for_resources_stop(
                env, ["R1"], self.poll_config
            ),
            fixture.error(report_codes.CIB_LOAD_ERROR),
        )
        self.assertEqual(mock_sleep.call_count, 1)

    def test_default_config(self, mock_sleep):
        read_count = settings.wait_stop_max_retries + 1
        env = _get_env(*([FIXTURE_RUNNING] * read_count))
        self.assertFalse(resource.wait_for_resources_stop(env, ["R1"]))
        self.assertEqual(_count_reads(env), read_count)
        mock_sleep.assert_called_with(settings.wait_stop_retry_delay)
