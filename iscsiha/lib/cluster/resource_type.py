from dataclasses import dataclass
from enum import Enum
from typing import (
    Mapping,
    Optional,
)

from iscsiha.common.pacemaker.resource import (
    PrimitiveDto,
    get_instance_attribute,
)

PORTBLOCK_AGENT = "portblock"
PORTBLOCK_ACTION_ATTRIBUTE = "action"
PORTBLOCK_ACTION_BLOCK = "block"


class ResourceType(Enum):
    RBD = "RBD"
    PORTBLOCK_ON = "PORTBLOCK_ON"
    VIP = "VIP"
    TARGET = "TARGET"
    LUN = "LUN"
    PORTBLOCK_OFF = "PORTBLOCK_OFF"


@dataclass(frozen=True)
class ResourceTypeInfo:
    # resource agent type as reported in agent_name.type
    agent_name: str
    # members of a group are kept sorted by this, lower goes first
    order_in_group: int


RESOURCE_TYPE_INFO: Mapping[ResourceType, ResourceTypeInfo] = {
    ResourceType.RBD: ResourceTypeInfo("rbd", 0),
    ResourceType.PORTBLOCK_ON: ResourceTypeInfo(PORTBLOCK_AGENT, 1),
    ResourceType.VIP: ResourceTypeInfo("IPaddr2", 2),
    ResourceType.TARGET: ResourceTypeInfo("iSCSITarget", 3),
    ResourceType.LUN: ResourceTypeInfo("iSCSILogicalUnit", 4),
    ResourceType.PORTBLOCK_OFF: ResourceTypeInfo(PORTBLOCK_AGENT, 5),
}

_AGENT_TO_TYPE: Mapping[str, ResourceType] = {
    info.agent_name: resource_type
    for resource_type, info in RESOURCE_TYPE_INFO.items()
    if info.agent_name != PORTBLOCK_AGENT
}


def get_order_in_group(resource_type: ResourceType) -> int:
    return RESOURCE_TYPE_INFO[resource_type].order_in_group


def classify_primitive(primitive: PrimitiveDto) -> Optional[ResourceType]:
    """
    Tell which of our resource types a primitive is, None if none of them

    Both port block types share one agent and differ in the 'action'
    instance attribute.
    """
    agent = primitive.agent_name.type
    if agent == PORTBLOCK_AGENT:
        action = get_instance_attribute(primitive, PORTBLOCK_ACTION_ATTRIBUTE)
        return (
            ResourceType.PORTBLOCK_ON
            if action == PORTBLOCK_ACTION_BLOCK
            else ResourceType.PORTBLOCK_OFF
        )
    return _AGENT_TO_TYPE.get(agent)
