from typing import Final

# OCF resource agent exit codes as recorded in lrm_rsc_op rc-code
OCF_SUCCESS: Final = 0
OCF_NOT_RUNNING: Final = 7
OCF_RUNNING_MASTER: Final = 8

_BOOLEAN_TRUE = frozenset(["true", "on", "yes", "y", "1"])
_BOOLEAN_FALSE = frozenset(["false", "off", "no", "n", "0"])


def is_true(val: str) -> bool:
    """
    Does pacemaker consider a value to be true?
    Pacemaker ignores case of this values.
    See crm_str_to_boolean in pacemaker/lib/common/strings.c

    val -- checked value
    """
    return val.lower() in _BOOLEAN_TRUE


def is_false(val: str) -> bool:
    """
    Does pacemaker consider a value to be false?
    Pacemaker ignores case of this values.

    val -- checked value
    """
    return val.lower() in _BOOLEAN_FALSE
