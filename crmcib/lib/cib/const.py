from typing import Final

TAG_CIB: Final = "cib"
TAG_CLUSTER_PROPERTY_SET: Final = "cluster_property_set"
TAG_INSTANCE_ATTRIBUTES: Final = "instance_attributes"
TAG_META_ATTRIBUTES: Final = "meta_attributes"
TAG_NODE: Final = "node"
TAG_NODE_STATE: Final = "node_state"
TAG_NVPAIR: Final = "nvpair"

ATTR_ID: Final = "id"
ATTR_NAME: Final = "name"
ATTR_VALUE: Final = "value"
ATTR_OPERATION: Final = "operation"
ATTR_RC_CODE: Final = "rc-code"
ATTR_UNAME: Final = "uname"

META_TARGET_ROLE: Final = "target-role"
TARGET_ROLE_STARTED: Final = "Started"
TARGET_ROLE_STOPPED: Final = "Stopped"

NODE_ATTR_STANDBY: Final = "standby"
NODE_STANDBY_ON: Final = "on"

OPERATION_MONITOR: Final = "monitor"
OPERATION_START: Final = "start"
OPERATION_STOP: Final = "stop"
