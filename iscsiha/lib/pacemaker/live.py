import json
from typing import Optional

from iscsiha import settings
from iscsiha.common import reports
from iscsiha.common.interface.dto import (
    PayloadConversionError,
    from_dict,
)
from iscsiha.common.pacemaker.resource import ResourcesConfigDto
from iscsiha.common.reports.item import ReportItem
from iscsiha.common.str_tools import join_multilines
from iscsiha.common.types import StringSequence
from iscsiha.lib.errors import (
    ParsingError,
    RemoteQueryError,
)
from iscsiha.lib.external import CommandRunner
from iscsiha.lib.pacemaker.status import parse_locate_output


def _run_pcs(
    runner: CommandRunner, args: StringSequence, superuser: bool = False
) -> str:
    cmd = [settings.pcs_exec] + list(args)
    stdout, stderr, retval = runner.run(cmd, superuser=superuser)
    if retval != 0:
        raise RemoteQueryError(
            ReportItem.error(
                reports.messages.PcsCommandError(
                    " ".join(cmd), join_multilines([stderr, stdout])
                )
            )
        )
    return stdout


### resources config


def get_resources_config(
    runner: CommandRunner, resource_id: Optional[str] = None
) -> ResourcesConfigDto:
    """
    Load primitives and groups, of one resource if resource_id is specified
    """
    args = ["resource", "config", "--output-format", "json"]
    if resource_id:
        args.append(resource_id)
    stdout = _run_pcs(runner, args)
    try:
        return from_dict(ResourcesConfigDto, json.loads(stdout))
    except (json.JSONDecodeError, PayloadConversionError) as e:
        raise ParsingError(
            ReportItem.error(
                reports.messages.InvalidResourcesConfigFormat(str(e))
            )
        ) from e


### resources


def create_resource(
    runner: CommandRunner, resource_id: str, creation_args: StringSequence
) -> None:
    _run_pcs(
        runner,
        ["resource", "create", resource_id] + list(creation_args),
        superuser=True,
    )


def delete_resource(runner: CommandRunner, resource_id: str) -> None:
    # also deletes a group with all its members if a group id is given
    _run_pcs(runner, ["resource", "delete", resource_id], superuser=True)


def disable_resource(runner: CommandRunner, resource_id: str) -> None:
    _run_pcs(runner, ["resource", "disable", resource_id], superuser=True)


def enable_resource(runner: CommandRunner, resource_id: str) -> None:
    _run_pcs(runner, ["resource", "enable", resource_id], superuser=True)


def update_resource(
    runner: CommandRunner, resource_id: str, parameters: StringSequence
) -> None:
    _run_pcs(
        runner,
        ["resource", "update", resource_id] + list(parameters),
        superuser=True,
    )


### groups


def group_add(
    runner: CommandRunner,
    group_id: str,
    resource_id: str,
    before_id: Optional[str] = None,
) -> None:
    """
    Put a resource into a group, creating the group if it does not exist

    before_id -- place the resource in front of this member, append the
        resource to the end of the group if not specified
    """
    position = ["--before", before_id] if before_id else []
    _run_pcs(
        runner,
        ["resource", "group", "add", group_id] + position + [resource_id],
        superuser=True,
    )


def ungroup(runner: CommandRunner, group_id: str, resource_id: str) -> None:
    _run_pcs(
        runner, ["resource", "ungroup", group_id, resource_id], superuser=True
    )


### constraints


def add_colocation(
    runner: CommandRunner,
    resource_id: str,
    with_resource_id: str,
    constraint_id: str,
) -> None:
    _run_pcs(
        runner,
        [
            "constraint",
            "colocation",
            "add",
            resource_id,
            "with",
            with_resource_id,
            settings.colocation_constraint_score,
            f"id={constraint_id}",
        ],
        superuser=True,
    )


def add_order(
    runner: CommandRunner,
    first_resource_id: str,
    then_resource_id: str,
    constraint_id: str,
) -> None:
    _run_pcs(
        runner,
        [
            "constraint",
            "order",
            "start",
            first_resource_id,
            "then",
            then_resource_id,
            f"id={constraint_id}",
        ],
        superuser=True,
    )


def remove_constraint(runner: CommandRunner, constraint_id: str) -> None:
    _run_pcs(runner, ["constraint", "remove", constraint_id], superuser=True)


### status


def locate_resource(runner: CommandRunner, resource_id: str) -> Optional[str]:
    """
    Return the node running the resource or None if it is not running

    The exit code is not checked, crm_resource exits non-zero for a stopped
    resource. Only a failure to start the command is raised, by the runner.
    """
    stdout, dummy_stderr, dummy_retval = runner.run(
        [settings.crm_resource_exec, "--locate", "--resource", resource_id]
    )
    return parse_locate_output(stdout)


def get_status_text(runner: CommandRunner) -> str:
    stdout, stderr, retval = runner.run([settings.pcs_exec, "status"])
    if retval != 0:
        raise RemoteQueryError(
            ReportItem.error(
                reports.messages.ClusterStatusError(
                    join_multilines([stderr, stdout])
                )
            )
        )
    return stdout
