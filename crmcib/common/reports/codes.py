from .types import MessageCode as M

CIB_LOAD_ERROR = M("CIB_LOAD_ERROR")
CIB_LOAD_ERROR_BAD_ROOT = M("CIB_LOAD_ERROR_BAD_ROOT")
CIB_PUSH_ERROR = M("CIB_PUSH_ERROR")
CIB_REMOVE_DEPENDANT_ELEMENT = M("CIB_REMOVE_DEPENDANT_ELEMENT")
CLUSTER_PROPERTY_VALUE_NOT_BOOLEAN = M("CLUSTER_PROPERTY_VALUE_NOT_BOOLEAN")
LRM_OPERATION_MISSING_RC_CODE = M("LRM_OPERATION_MISSING_RC_CODE")
NODE_ID_MISSING = M("NODE_ID_MISSING")
NODE_NOT_FOUND = M("NODE_NOT_FOUND")
NODE_STATE_INVALID_JOIN_VALUE = M("NODE_STATE_INVALID_JOIN_VALUE")
NODE_STATE_MISSING_ATTRIBUTE = M("NODE_STATE_MISSING_ATTRIBUTE")
NODE_STATE_MISSING_UNAME = M("NODE_STATE_MISSING_UNAME")
RESOURCE_NOT_FOUND = M("RESOURCE_NOT_FOUND")
RESOURCE_NOT_FOUND_IGNORED = M("RESOURCE_NOT_FOUND_IGNORED")
RESOURCES_STOPPED = M("RESOURCES_STOPPED")
RUN_EXTERNAL_PROCESS_ERROR = M("RUN_EXTERNAL_PROCESS_ERROR")
RUN_EXTERNAL_PROCESS_FINISHED = M("RUN_EXTERNAL_PROCESS_FINISHED")
RUN_EXTERNAL_PROCESS_STARTED = M("RUN_EXTERNAL_PROCESS_STARTED")
WAIT_FOR_RESOURCES_STOP_STARTED = M("WAIT_FOR_RESOURCES_STOP_STARTED")
WAIT_FOR_RESOURCES_STOP_TIMED_OUT = M("WAIT_FOR_RESOURCES_STOP_TIMED_OUT")
