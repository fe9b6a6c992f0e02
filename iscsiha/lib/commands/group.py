from typing import (
    List,
    Optional,
)

from iscsiha.common import reports
from iscsiha.common.reports import ReportItem
from iscsiha.lib.cluster.resource import (
    Resource,
    ResourceGroup,
)
from iscsiha.lib.cluster.resource_type import get_order_in_group
from iscsiha.lib.env import LibraryEnvironment
from iscsiha.lib.pacemaker import live


def find_insert_before(
    resource: Resource, group_members: List[Resource]
) -> Optional[Resource]:
    """
    Find the member a resource must be put in front of to keep a group sorted

    Returns None if the resource belongs to the end of the group. A resource
    goes in front of members of the same order so it never ends up behind
    members it should precede.
    """
    order = get_order_in_group(resource.resource_type)
    # sorted is stable, members of the same order keep their positions
    for member in sorted(
        group_members,
        key=lambda member: get_order_in_group(member.resource_type),
    ):
        if order <= get_order_in_group(member.resource_type):
            return member
    return None


def add_resource_to_group(
    env: LibraryEnvironment, resource: Resource, group: ResourceGroup
) -> None:
    """
    Put a resource into a group at the position given by its type

    env -- provides all for communication with externals
    resource -- the resource to be put into the group
    group -- the target group, pcs creates it if it does not exist
    """
    runner = env.cmd_runner()
    members = [
        member
        for member in env.resource_cache.get_group_members(runner, group.name)
        if member.name != resource.name
    ]
    before = find_insert_before(resource, members)
    before_id = before.name if before else None

    live.group_add(runner, group.name, resource.name, before_id)

    resource.resource_group = group
    env.resource_cache.set_group(resource.name, group)
    env.report_processor.report(
        ReportItem.info(
            reports.messages.ResourceGroupMemberAdded(
                resource.name, group.name, before_id
            )
        )
    )


def remove_resource_from_group(
    env: LibraryEnvironment, group_name: str, resource_name: str
) -> None:
    live.ungroup(env.cmd_runner(), group_name, resource_name)
    env.resource_cache.set_group(resource_name, None)
    env.report_processor.report(
        ReportItem.info(
            reports.messages.ResourceGroupMemberRemoved(
                resource_name, group_name
            )
        )
    )
