from typing import (
    Dict,
    List,
    Optional,
    Tuple,
)

from iscsiha import settings
from iscsiha.common import reports
from iscsiha.common.reports import ReportItem
from iscsiha.lib.cluster.resource import ResourceGroup
from iscsiha.lib.env import LibraryEnvironment
from iscsiha.lib.errors import (
    InactiveGroupError,
    ResolutionError,
)
from iscsiha.lib.pacemaker import live
from iscsiha.lib.pacemaker.status import parse_group_node_from_status

MemberNodes = List[Tuple[str, Optional[str]]]

STRATEGY_UNANIMOUS = "all members agreeing"
STRATEGY_VIP_MEMBER = "virtual IP member"
STRATEGY_TARGET_MEMBER = "target member"
STRATEGY_MAJORITY = "majority of members"
STRATEGY_STATUS_TEXT = "cluster status"


def _node_of_member_with_marker(
    member_nodes: MemberNodes, marker: str
) -> Optional[str]:
    for member_id, node in member_nodes:
        if node and marker in member_id:
            return node
    return None


def _majority_node(member_nodes: MemberNodes) -> Optional[str]:
    # dicts keep insertion order, on a tie the node reported first wins
    counts: Dict[str, int] = {}
    for _, node in member_nodes:
        if node:
            counts[node] = counts.get(node, 0) + 1
    best_node = None
    best_count = 0
    for node, count in counts.items():
        if count > best_count:
            best_node, best_count = node, count
    return best_node


def resolve_node_from_members(
    member_nodes: MemberNodes,
) -> Tuple[Optional[str], Optional[str]]:
    """
    Decide where a group runs based on where its members run

    member_nodes -- (member id, node or None if not running) for all members

    Returns the node and the name of the strategy which picked it, or
    (None, None) if no member runs anywhere.
    """
    distinct_nodes = {node for _, node in member_nodes if node}
    if not distinct_nodes:
        return None, None
    if len(distinct_nodes) == 1:
        return distinct_nodes.pop(), STRATEGY_UNANIMOUS

    # Members disagree, the group is probably moving. Trust the members which
    # define where clients connect.
    for marker, strategy in (
        (settings.vip_resource_id_marker, STRATEGY_VIP_MEMBER),
        (settings.target_resource_id_marker, STRATEGY_TARGET_MEMBER),
    ):
        node = _node_of_member_with_marker(member_nodes, marker)
        if node:
            return node, strategy

    return _majority_node(member_nodes), STRATEGY_MAJORITY


def get_group_active_node(
    env: LibraryEnvironment, group: ResourceGroup
) -> str:
    """
    Find out which node runs a group

    env -- provides all for communication with externals
    group -- the group to look for

    Every member is located first. If no member is running, the group is
    looked up in the cluster status text.
    """
    runner = env.cmd_runner()
    members = env.resource_cache.get_group_members(runner, group.name)
    if not members:
        raise ResolutionError(
            ReportItem.error(
                reports.messages.ResourceGroupHasNoMembers(group.name)
            )
        )

    member_nodes: MemberNodes = [
        (member.name, live.locate_resource(runner, member.name))
        for member in members
    ]
    node, strategy = resolve_node_from_members(member_nodes)

    if node is None:
        node = parse_group_node_from_status(
            live.get_status_text(runner), group.name
        )
        strategy = STRATEGY_STATUS_TEXT

    if node is None or strategy is None:
        raise InactiveGroupError(
            ReportItem.error(
                reports.messages.ResourceGroupInactive(
                    group.name, member_nodes
                )
            )
        )

    env.report_processor.report(
        ReportItem.debug(
            reports.messages.ResourceGroupActiveNodeResolved(
                group.name, node, strategy
            )
        )
    )
    return node
