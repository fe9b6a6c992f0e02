from typing import (
    Dict,
    List,
    Optional,
)

from iscsiha import settings
from iscsiha.common import reports
from iscsiha.common.pacemaker.resource import (
    PrimitiveDto,
    get_instance_attribute,
)
from iscsiha.common.reports import ReportItem
from iscsiha.common.types import StringSequence
from iscsiha.lib.cluster.resource import Resource
from iscsiha.lib.cluster.resource_type import ResourceType
from iscsiha.lib.env import LibraryEnvironment
from iscsiha.lib.errors import ResolutionError
from iscsiha.lib.pacemaker import live
from iscsiha.lib.validate import (
    raise_on_errors,
    split_arguments,
    validate_not_empty,
)


def normalize_resource_id(name: str) -> str:
    """
    Make a resource id pacemaker accepts out of a resource name
    """
    for char in settings.resource_id_forbidden_chars:
        name = name.replace(char, settings.resource_id_replacement_char)
    return name


def fetch_resources(env: LibraryEnvironment) -> List[Resource]:
    """
    Return all known resources, loads them from the cluster on first use
    """
    return env.resource_cache.get(env.cmd_runner())


def fetch_resource_by_name(
    env: LibraryEnvironment, name: str
) -> Optional[Resource]:
    return env.resource_cache.get_by_name(env.cmd_runner(), name)


def invalidate_cache(env: LibraryEnvironment) -> None:
    env.resource_cache.invalidate()


def create_resource(
    env: LibraryEnvironment,
    name: str,
    creation_args: str,
    resource_type: ResourceType,
) -> Resource:
    """
    Create a new resource

    env -- provides all for communication with externals
    name -- resource name, characters pacemaker refuses in ids get replaced
    creation_args -- agent and its options as one line, e.g.
        "ocf:ceph:rbd pool=rbd name=disk1"
    resource_type -- the kind of the created resource
    """
    arg_list, report_list = split_arguments(
        creation_args, "Resource creation arguments"
    )
    report_list += validate_not_empty(name, "Resource name")
    raise_on_errors(report_list)

    resource_id = normalize_resource_id(name)
    live.create_resource(env.cmd_runner(), resource_id, arg_list)

    resource = Resource(resource_id, resource_type)
    env.resource_cache.append(resource)
    env.report_processor.report(
        ReportItem.info(
            reports.messages.ResourceCreated(resource_id, resource_type.value)
        )
    )
    return resource


def delete_resource(env: LibraryEnvironment, name: str) -> None:
    live.delete_resource(env.cmd_runner(), name)
    env.resource_cache.remove_by_name(name)
    env.report_processor.report(
        ReportItem.info(reports.messages.ResourceDeleted(name))
    )


def disable_resource(env: LibraryEnvironment, name: str) -> None:
    live.disable_resource(env.cmd_runner(), name)


def enable_resource(env: LibraryEnvironment, name: str) -> None:
    live.enable_resource(env.cmd_runner(), name)


def delete_resource_group(env: LibraryEnvironment, group_name: str) -> None:
    """
    Delete a group together with all its members
    """
    live.delete_resource(env.cmd_runner(), group_name)
    env.resource_cache.remove_by_group(group_name)
    env.report_processor.report(
        ReportItem.info(reports.messages.ResourceGroupDeleted(group_name))
    )


def update_resource(
    env: LibraryEnvironment, name: str, parameters: str
) -> None:
    """
    Change options of a resource

    parameters -- name=value pairs as one line, e.g. "portals=10.0.0.1:3260"
    """
    arg_list, report_list = split_arguments(
        parameters, "Resource update parameters"
    )
    raise_on_errors(report_list)
    live.update_resource(env.cmd_runner(), name, arg_list)


def fetch_resource_config(env: LibraryEnvironment, name: str) -> PrimitiveDto:
    """
    Load full configuration of one primitive, bypassing the snapshot
    """
    config = live.get_resources_config(env.cmd_runner(), name)
    for primitive in config.primitives:
        if primitive.id == name:
            return primitive
    raise ResolutionError(
        ReportItem.error(reports.messages.ResourceNotFound(name))
    )


def get_instance_attribute_value(
    env: LibraryEnvironment, name: str, attribute_name: str
) -> Optional[str]:
    return get_instance_attribute(
        fetch_resource_config(env, name), attribute_name
    )


def get_instance_attribute_values(
    env: LibraryEnvironment, name: str, attribute_names: StringSequence
) -> Dict[str, Optional[str]]:
    """
    Get several instance attributes of a resource with one query

    Attributes the resource does not have are mapped to None.
    """
    primitive = fetch_resource_config(env, name)
    return {
        attribute_name: get_instance_attribute(primitive, attribute_name)
        for attribute_name in attribute_names
    }
