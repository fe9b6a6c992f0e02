from iscsiha import settings
from iscsiha.common import reports
from iscsiha.common.reports import ReportItem
from iscsiha.lib.cluster.resource import (
    Resource,
    ResourceGroup,
)
from iscsiha.lib.env import LibraryEnvironment
from iscsiha.lib.pacemaker import live

# Constraints are not tracked locally. They are created with these ids so that
# they can be removed knowing just the resource and the group. The ids are the
# same pcs would generate itself.


def colocation_constraint_id(resource_id: str, group_id: str) -> str:
    return "colocation-{0}-{1}-{2}".format(
        resource_id, group_id, settings.colocation_constraint_score
    )


def order_constraint_id(resource_id: str, group_id: str) -> str:
    return "order-{0}-{1}-{2}".format(
        resource_id, group_id, settings.order_constraint_kind
    )


def constrain_resource_to_group(
    env: LibraryEnvironment, resource: Resource, group: ResourceGroup
) -> str:
    """
    Make a resource run on the node the group runs on, return constraint id
    """
    constraint_id = colocation_constraint_id(resource.name, group.name)
    live.add_colocation(
        env.cmd_runner(), resource.name, group.name, constraint_id
    )
    _report_created(env, constraint_id)
    return constraint_id


def unconstrain_resource_from_group(
    env: LibraryEnvironment, resource_name: str, group_name: str
) -> None:
    """
    Remove the colocation created by constrain_resource_to_group

    resource_name -- full resource id including its kind prefix, e.g.
        RBD_disk1, as in Resource.name
    group_name -- id of the group
    """
    _remove(env, colocation_constraint_id(resource_name, group_name))


def order_resource_before_group(
    env: LibraryEnvironment, resource: Resource, group: ResourceGroup
) -> str:
    """
    Make a resource start before the group starts, return constraint id
    """
    constraint_id = order_constraint_id(resource.name, group.name)
    live.add_order(env.cmd_runner(), resource.name, group.name, constraint_id)
    _report_created(env, constraint_id)
    return constraint_id


def remove_resource_from_order_group(
    env: LibraryEnvironment, resource_name: str, group_name: str
) -> None:
    """
    Remove the order constraint created by order_resource_before_group

    resource_name -- full resource id including its kind prefix, e.g.
        RBD_disk1, as in Resource.name
    group_name -- id of the group
    """
    _remove(env, order_constraint_id(resource_name, group_name))


def _report_created(env: LibraryEnvironment, constraint_id: str) -> None:
    env.report_processor.report(
        ReportItem.info(reports.messages.ConstraintCreated(constraint_id))
    )


def _remove(env: LibraryEnvironment, constraint_id: str) -> None:
    live.remove_constraint(env.cmd_runner(), constraint_id)
    env.report_processor.report(
        ReportItem.info(reports.messages.ConstraintRemoved(constraint_id))
    )
