from collections.abc import Set
from enum import Enum
from typing import (
    Generator,
    MutableSequence,
    Optional,
    Type,
    TypeVar,
    Union,
)

StringSequence = Union[MutableSequence[str], tuple[str, ...]]
StringIterable = Union[StringSequence, Set[str], Generator[str, None, None]]


class RunState(str, Enum):
    """
    Run state of a resource inferred from its operation history
    """

    UNKNOWN = "Unknown"
    RUNNING = "Running"
    STOPPED = "Stopped"

    def __str__(self) -> str:
        return self.value


class JoinState(str, Enum):
    """
    Join phase of a node as recorded by the cluster controller
    """

    DOWN = "down"
    PENDING = "pending"
    MEMBER = "member"
    BANNED = "banned"

    def __str__(self) -> str:
        return self.value


T = TypeVar("T", bound=Enum)


def str_to_enum(enum_type: Type[T], value: Optional[str]) -> Optional[T]:
    if value:
        if value in {item.value for item in enum_type}:
            return enum_type(value)
    return None
