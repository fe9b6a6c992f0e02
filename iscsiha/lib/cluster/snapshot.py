from typing import (
    List,
    Optional,
)

from iscsiha.common.pacemaker.resource import (
    ResourcesConfigDto,
    find_group_of_primitive,
)
from iscsiha.lib.cluster.resource import (
    Resource,
    ResourceGroup,
)
from iscsiha.lib.cluster.resource_type import (
    ResourceType,
    classify_primitive,
)
from iscsiha.lib.external import CommandRunner
from iscsiha.lib.pacemaker.live import get_resources_config


def resources_from_config(config: ResourcesConfigDto) -> List[Resource]:
    """
    Turn pcs resources config to our resources

    Primitives of unknown agents are skipped, so are targets outside of a
    group as those are leftovers of an incomplete setup.
    """
    resource_list = []
    for primitive in config.primitives:
        resource_type = classify_primitive(primitive)
        if resource_type is None:
            continue
        group_dto = find_group_of_primitive(config, primitive.id)
        group = ResourceGroup(group_dto.id) if group_dto else None
        if resource_type == ResourceType.TARGET and group is None:
            continue
        resource_list.append(Resource(primitive.id, resource_type, group))
    return resource_list


class ResourceSnapshotCache:
    """
    Resources known to the cluster manager, loaded once and then patched

    The snapshot is loaded by one query on the first read. Library commands
    patch it after their commands succeed. Changes done by anyone else are
    not noticed until invalidate is called. Updating, disabling and enabling
    a resource do not change what the snapshot holds.
    """

    def __init__(self) -> None:
        self._resources: Optional[List[Resource]] = None

    @property
    def is_loaded(self) -> bool:
        return self._resources is not None

    def get(self, runner: CommandRunner) -> List[Resource]:
        if self._resources is None:
            self._resources = resources_from_config(
                get_resources_config(runner)
            )
        return self._resources

    def get_by_name(
        self, runner: CommandRunner, name: str
    ) -> Optional[Resource]:
        for resource in self.get(runner):
            if resource.name == name:
                return resource
        return None

    def get_group_members(
        self, runner: CommandRunner, group_name: str
    ) -> List[Resource]:
        return [
            resource
            for resource in self.get(runner)
            if resource.is_in_group(group_name)
        ]

    def invalidate(self) -> None:
        self._resources = None

    # The following methods do nothing if the snapshot has not been loaded
    # yet, the first read gets the current state anyway.

    def append(self, resource: Resource) -> None:
        if self._resources is not None:
            self._resources.append(resource)

    def remove_by_name(self, name: str) -> None:
        if self._resources is not None:
            self._resources[:] = [
                resource
                for resource in self._resources
                if resource.name != name
            ]

    def set_group(self, name: str, group: Optional[ResourceGroup]) -> None:
        if self._resources is None:
            return
        for resource in self._resources:
            if resource.name == name:
                resource.resource_group = group
        if group is None:
            # a target out of a group would not survive a reload either
            self._resources[:] = [
                resource
                for resource in self._resources
                if resource.name != name
                or resource.resource_type != ResourceType.TARGET
            ]

    def remove_by_group(self, group_name: str) -> None:
        if self._resources is not None:
            self._resources[:] = [
                resource
                for resource in self._resources
                if not resource.is_in_group(group_name)
            ]
