from crmcib.common import reports
from crmcib.common.reports.item import ReportItem
from crmcib.lib.cib import cluster_property
from crmcib.lib.env import LibraryEnvironment
from crmcib.lib.errors import LibraryError
from crmcib.lib.pacemaker.values import (
    is_false,
    is_true,
)

STONITH_ENABLED_DEFAULT = True


def get_cluster_property(env: LibraryEnvironment, property_name: str) -> str:
    """
    Return the value of a cluster property, empty string if it is not set

    property_name -- name of the property
    """
    return cluster_property.get_cluster_property(env.get_cib(), property_name)


def set_cluster_property(
    env: LibraryEnvironment, property_name: str, value: str
) -> None:
    """
    Set the value of a cluster property

    property_name -- name of the property
    value -- new value of the property
    """
    cib = env.get_cib()
    cluster_property.set_cluster_property(cib, property_name, value)
    env.push_cib(cib)


def get_stonith_enabled(env: LibraryEnvironment) -> bool:
    value = get_cluster_property(env, cluster_property.STONITH_ENABLED)
    if not value:
        # pacemaker enables stonith unless told otherwise
        return STONITH_ENABLED_DEFAULT
    if is_true(value):
        return True
    if is_false(value):
        return False
    raise LibraryError(
        ReportItem.error(
            reports.messages.ClusterPropertyValueNotBoolean(
                cluster_property.STONITH_ENABLED, value
            )
        )
    )


def set_stonith_enabled(env: LibraryEnvironment, enabled: bool) -> None:
    set_cluster_property(
        env,
        cluster_property.STONITH_ENABLED,
        "true" if enabled else "false",
    )


def get_cluster_name(env: LibraryEnvironment) -> str:
    return get_cluster_property(env, cluster_property.CLUSTER_NAME)


def set_cluster_name(env: LibraryEnvironment, name: str) -> None:
    set_cluster_property(env, cluster_property.CLUSTER_NAME, name)
