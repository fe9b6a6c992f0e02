from dataclasses import dataclass
from typing import Optional

from iscsiha.lib.cluster.resource_type import ResourceType


@dataclass(frozen=True)
class ResourceGroup:
    name: str


@dataclass
class Resource:
    name: str
    resource_type: ResourceType
    # a back reference, groups do not hold their members
    resource_group: Optional[ResourceGroup] = None

    def is_in_group(self, group_name: str) -> bool:
        return (
            self.resource_group is not None
            and self.resource_group.name == group_name
        )
