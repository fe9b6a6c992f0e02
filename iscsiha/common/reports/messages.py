from dataclasses import dataclass
from typing import (
    List,
    Mapping,
    Optional,
    Tuple,
)

from iscsiha.common.str_tools import (
    format_list_dont_sort,
    format_optional,
    indent,
)

from . import codes
from .item import ReportItemMessage


def _format_reason(reason: str) -> str:
    if not reason.strip():
        return ""
    return "\n" + "\n".join(indent(reason.strip().splitlines()))


@dataclass(frozen=True)
class RunExternalProcessStarted(ReportItemMessage):
    """
    Information about running an external process

    command -- the external process command
    environment -- environment variables for the command
    """

    command: str
    environment: Mapping[str, str]
    _code = codes.RUN_EXTERNAL_PROCESS_STARTED

    @property
    def message(self) -> str:
        return "Running: {command}\nEnvironment:{env_part}\n".format(
            command=self.command,
            env_part=(
                ""
                if not self.environment
                else "\n"
                + "\n".join(
                    [
                        f"  {key}={val}"
                        for key, val in sorted(self.environment.items())
                    ]
                )
            ),
        )


@dataclass(frozen=True)
class RunExternalProcessFinished(ReportItemMessage):
    """
    Information about result of running an external process

    command -- the external process command
    return_value -- external process's return (exit) code
    stdout -- external process's stdout
    stderr -- external process's stderr
    """

    command: str
    return_value: int
    stdout: str
    stderr: str
    _code = codes.RUN_EXTERNAL_PROCESS_FINISHED

    @property
    def message(self) -> str:
        return (
            f"Finished running: {self.command}\n"
            f"Return value: {self.return_value}\n"
            "--Debug Stdout Start--\n"
            f"{self.stdout}\n"
            "--Debug Stdout End--\n"
            "--Debug Stderr Start--\n"
            f"{self.stderr}\n"
            "--Debug Stderr End--\n"
        )


@dataclass(frozen=True)
class RunExternalProcessError(ReportItemMessage):
    """
    Attempt to run an external process failed

    command -- the external process command
    reason -- error description
    """

    command: str
    reason: str
    _code = codes.RUN_EXTERNAL_PROCESS_ERROR

    @property
    def message(self) -> str:
        return f"unable to run command {self.command}: {self.reason}"


@dataclass(frozen=True)
class PcsCommandError(ReportItemMessage):
    """
    A pcs command exited with a non-zero code

    command -- the command which failed
    reason -- stderr and stdout of the command
    """

    command: str
    reason: str
    _code = codes.PCS_COMMAND_ERROR

    @property
    def message(self) -> str:
        return f"Command '{self.command}' failed{_format_reason(self.reason)}"


@dataclass(frozen=True)
class ClusterStatusError(ReportItemMessage):
    """
    Cannot load the cluster status text

    reason -- error description
    """

    reason: str
    _code = codes.CLUSTER_STATUS_ERROR

    @property
    def message(self) -> str:
        return (
            "Failed to query cluster status, is pacemaker running?"
            f"{_format_reason(self.reason)}"
        )


@dataclass(frozen=True)
class InvalidResourcesConfigFormat(ReportItemMessage):
    """
    Resources configuration returned by pcs cannot be decoded

    reason -- error description
    """

    reason: str
    _code = codes.INVALID_RESOURCES_CONFIG_FORMAT

    @property
    def message(self) -> str:
        return (
            "Unable to get current resources configuration, output could not "
            f"be decoded: {self.reason}"
        )


@dataclass(frozen=True)
class MultilineValueNotAllowed(ReportItemMessage):
    """
    A value which ends up on a command line spans more than one line

    option_name -- what the value stands for
    """

    option_name: str
    _code = codes.MULTILINE_VALUE_NOT_ALLOWED

    @property
    def message(self) -> str:
        return f"{self.option_name} must be a single line"


@dataclass(frozen=True)
class EmptyValueNotAllowed(ReportItemMessage):
    """
    A required value was not specified

    option_name -- what the value stands for
    """

    option_name: str
    _code = codes.EMPTY_VALUE_NOT_ALLOWED

    @property
    def message(self) -> str:
        return f"{self.option_name} cannot be empty"


@dataclass(frozen=True)
class ResourceCreated(ReportItemMessage):
    resource_id: str
    resource_type: str
    _code = codes.RESOURCE_CREATED

    @property
    def message(self) -> str:
        return (
            f"Resource '{self.resource_id}' ({self.resource_type}) created"
        )


@dataclass(frozen=True)
class ResourceDeleted(ReportItemMessage):
    resource_id: str
    _code = codes.RESOURCE_DELETED

    @property
    def message(self) -> str:
        return f"Resource '{self.resource_id}' deleted"


@dataclass(frozen=True)
class ResourceGroupDeleted(ReportItemMessage):
    group_id: str
    _code = codes.RESOURCE_GROUP_DELETED

    @property
    def message(self) -> str:
        return f"Resource group '{self.group_id}' deleted"


@dataclass(frozen=True)
class ResourceGroupMemberAdded(ReportItemMessage):
    """
    A resource has been put into a group

    resource_id -- the resource
    group_id -- the group
    before_id -- the member the resource was placed in front of, if any
    """

    resource_id: str
    group_id: str
    before_id: Optional[str]
    _code = codes.RESOURCE_GROUP_MEMBER_ADDED

    @property
    def message(self) -> str:
        position = format_optional(self.before_id, " before '{}'")
        return (
            f"Resource '{self.resource_id}' added to group "
            f"'{self.group_id}'{position}"
        )


@dataclass(frozen=True)
class ResourceGroupMemberRemoved(ReportItemMessage):
    resource_id: str
    group_id: str
    _code = codes.RESOURCE_GROUP_MEMBER_REMOVED

    @property
    def message(self) -> str:
        return (
            f"Resource '{self.resource_id}' removed from group "
            f"'{self.group_id}'"
        )


@dataclass(frozen=True)
class ConstraintCreated(ReportItemMessage):
    constraint_id: str
    _code = codes.CONSTRAINT_CREATED

    @property
    def message(self) -> str:
        return f"Constraint '{self.constraint_id}' created"


@dataclass(frozen=True)
class ConstraintRemoved(ReportItemMessage):
    constraint_id: str
    _code = codes.CONSTRAINT_REMOVED

    @property
    def message(self) -> str:
        return f"Constraint '{self.constraint_id}' removed"


@dataclass(frozen=True)
class ResourceNotFound(ReportItemMessage):
    resource_id: str
    _code = codes.RESOURCE_NOT_FOUND

    @property
    def message(self) -> str:
        return f"Resource '{self.resource_id}' does not exist"


@dataclass(frozen=True)
class ResourceGroupNotFound(ReportItemMessage):
    group_id: str
    _code = codes.RESOURCE_GROUP_NOT_FOUND

    @property
    def message(self) -> str:
        return (
            f"Group '{self.group_id}' not found in resources configuration"
        )


@dataclass(frozen=True)
class ResourceGroupHasNoMembers(ReportItemMessage):
    group_id: str
    _code = codes.RESOURCE_GROUP_HAS_NO_MEMBERS

    @property
    def message(self) -> str:
        return f"Group '{self.group_id}' not found or has no members"


@dataclass(frozen=True)
class ResourceGroupAnchorMissing(ReportItemMessage):
    """
    A group lacks a member of a type other logic anchors to

    group_id -- the group
    resource_type -- name of the missing resource type
    """

    group_id: str
    resource_type: str
    _code = codes.RESOURCE_GROUP_ANCHOR_MISSING

    @property
    def message(self) -> str:
        return (
            f"No {self.resource_type} primitive found in group "
            f"'{self.group_id}'"
        )


@dataclass(frozen=True)
class ResourceGroupInactive(ReportItemMessage):
    """
    No node could be determined as running the group

    group_id -- the group
    member_nodes -- (member id, node or None) for each member in query order
    """

    group_id: str
    member_nodes: List[Tuple[str, Optional[str]]]
    _code = codes.RESOURCE_GROUP_INACTIVE

    @property
    def message(self) -> str:
        members = format_list_dont_sort(
            [member for member, _ in self.member_nodes]
        )
        per_member = ", ".join(
            f"{member}->{node or 'NOT RUNNING'}"
            for member, node in self.member_nodes
        )
        return (
            f"Group '{self.group_id}' appears inactive (no started members). "
            f"members=[{members}]; perMember=[{per_member}]"
        )


@dataclass(frozen=True)
class ResourceGroupActiveNodeResolved(ReportItemMessage):
    """
    The node running a group has been determined

    group_id -- the group
    node -- the node running the group
    strategy -- how the node was determined
    """

    group_id: str
    node: str
    strategy: str
    _code = codes.RESOURCE_GROUP_ACTIVE_NODE_RESOLVED

    @property
    def message(self) -> str:
        return (
            f"Group '{self.group_id}' is running on '{self.node}' "
            f"(resolved by {self.strategy})"
        )


@dataclass(frozen=True)
class InvalidCommandArguments(ReportItemMessage):
    """
    Arguments passed to a cluster manager command cannot be split

    option_name -- what the arguments stand for
    reason -- error description
    """

    option_name: str
    reason: str
    _code = codes.INVALID_COMMAND_ARGUMENTS

    @property
    def message(self) -> str:
        return f"{self.option_name} cannot be parsed: {self.reason}"
