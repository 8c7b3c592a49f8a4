from dataclasses import dataclass
from typing import (
    Optional,
    Sequence,
)

from crmcib.common.interface.dto import DataTransferObject
from crmcib.common.types import RunState


@dataclass(frozen=True)
class ResourceRunStateDto(DataTransferObject):
    resource_id: str
    run_state: RunState
    node: Optional[str]


@dataclass(frozen=True)
class ResourceRunStateListDto(DataTransferObject):
    resources: Sequence[ResourceRunStateDto]
