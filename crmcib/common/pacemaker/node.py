from dataclasses import dataclass
from typing import Sequence

from crmcib.common.interface.dto import DataTransferObject
from crmcib.common.types import JoinState


@dataclass(frozen=True)
class NodeStateDto(DataTransferObject):
    in_ccm: bool
    crmd: bool
    join: JoinState
    expected: JoinState


@dataclass(frozen=True)
class NodeDto(DataTransferObject):
    uname: str
    state: NodeStateDto


@dataclass(frozen=True)
class NodeListDto(DataTransferObject):
    nodes: Sequence[NodeDto]
