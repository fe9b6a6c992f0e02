from dataclasses import dataclass
from typing import Optional

from iscsiha.common import reports
from iscsiha.common.reports import ReportItem
from iscsiha.lib.cluster.resource import ResourceGroup
from iscsiha.lib.cluster.resource_type import ResourceType
from iscsiha.lib.env import LibraryEnvironment
from iscsiha.lib.errors import ResolutionError
from iscsiha.lib.pacemaker import live


@dataclass(frozen=True)
class GroupAnchors:
    target_primitive_id: str
    port_block_off_id: str


def get_anchors_for_group(
    env: LibraryEnvironment, group: ResourceGroup
) -> GroupAnchors:
    """
    Find the target and the unblocking port block primitives of a group

    The members are walked in the order pacemaker keeps them in the group,
    the first member of each type wins.
    """
    runner = env.cmd_runner()
    members = env.resource_cache.get_group_members(runner, group.name)
    if not members:
        raise ResolutionError(
            ReportItem.error(
                reports.messages.ResourceGroupHasNoMembers(group.name)
            )
        )

    config = live.get_resources_config(runner)
    group_dto = next(
        (dto for dto in config.groups if dto.id == group.name), None
    )
    if group_dto is None:
        raise ResolutionError(
            ReportItem.error(reports.messages.ResourceGroupNotFound(group.name))
        )

    members_by_id = {member.name: member for member in members}
    target_id: Optional[str] = None
    port_block_off_id: Optional[str] = None
    for member_id in group_dto.member_ids:
        member = members_by_id.get(member_id)
        if member is None:
            continue
        if target_id is None and member.resource_type == ResourceType.TARGET:
            target_id = member.name
        if (
            port_block_off_id is None
            and member.resource_type == ResourceType.PORTBLOCK_OFF
        ):
            port_block_off_id = member.name
        if target_id and port_block_off_id:
            break

    if target_id is None:
        raise ResolutionError(
            ReportItem.error(
                reports.messages.ResourceGroupAnchorMissing(
                    group.name, ResourceType.TARGET.value
                )
            )
        )
    if port_block_off_id is None:
        raise ResolutionError(
            ReportItem.error(
                reports.messages.ResourceGroupAnchorMissing(
                    group.name, ResourceType.PORTBLOCK_OFF.value
                )
            )
        )
    return GroupAnchors(target_id, port_block_off_id)
