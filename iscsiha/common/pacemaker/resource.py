from dataclasses import dataclass
from typing import (
    Optional,
    Sequence,
)

from iscsiha.common.interface.dto import DataTransferObject


@dataclass(frozen=True)
class NvpairDto(DataTransferObject):
    name: str
    value: str
    id: Optional[str] = None  # pylint: disable=invalid-name


@dataclass(frozen=True)
class NvsetDto(DataTransferObject):
    nvpairs: Sequence[NvpairDto]
    id: Optional[str] = None  # pylint: disable=invalid-name


@dataclass(frozen=True)
class ResourceAgentNameDto(DataTransferObject):
    type: str
    standard: Optional[str] = None
    provider: Optional[str] = None


@dataclass(frozen=True)
class PrimitiveDto(DataTransferObject):
    id: str  # pylint: disable=invalid-name
    agent_name: ResourceAgentNameDto
    instance_attributes: Sequence[NvsetDto] = ()


@dataclass(frozen=True)
class GroupDto(DataTransferObject):
    id: str  # pylint: disable=invalid-name
    member_ids: Sequence[str]


@dataclass(frozen=True)
class ResourcesConfigDto(DataTransferObject):
    primitives: Sequence[PrimitiveDto] = ()
    groups: Sequence[GroupDto] = ()


def get_instance_attribute(
    primitive: PrimitiveDto, name: str
) -> Optional[str]:
    """
    Return the value of the first instance attribute called name, if any
    """
    for nvset in primitive.instance_attributes:
        for nvpair in nvset.nvpairs:
            if nvpair.name == name:
                return nvpair.value
    return None


def find_group_of_primitive(
    config: ResourcesConfigDto, primitive_id: str
) -> Optional[GroupDto]:
    for group in config.groups:
        if primitive_id in group.member_ids:
            return group
    return None
