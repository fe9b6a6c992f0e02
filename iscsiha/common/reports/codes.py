from .types import MessageCode as M

CLUSTER_STATUS_ERROR = M("CLUSTER_STATUS_ERROR")
CONSTRAINT_CREATED = M("CONSTRAINT_CREATED")
CONSTRAINT_REMOVED = M("CONSTRAINT_REMOVED")
EMPTY_VALUE_NOT_ALLOWED = M("EMPTY_VALUE_NOT_ALLOWED")
INVALID_COMMAND_ARGUMENTS = M("INVALID_COMMAND_ARGUMENTS")
INVALID_RESOURCES_CONFIG_FORMAT = M("INVALID_RESOURCES_CONFIG_FORMAT")
MULTILINE_VALUE_NOT_ALLOWED = M("MULTILINE_VALUE_NOT_ALLOWED")
PCS_COMMAND_ERROR = M("PCS_COMMAND_ERROR")
RESOURCE_CREATED = M("RESOURCE_CREATED")
RESOURCE_DELETED = M("RESOURCE_DELETED")
RESOURCE_GROUP_ACTIVE_NODE_RESOLVED = M("RESOURCE_GROUP_ACTIVE_NODE_RESOLVED")
RESOURCE_GROUP_ANCHOR_MISSING = M("RESOURCE_GROUP_ANCHOR_MISSING")
RESOURCE_GROUP_DELETED = M("RESOURCE_GROUP_DELETED")
RESOURCE_GROUP_HAS_NO_MEMBERS = M("RESOURCE_GROUP_HAS_NO_MEMBERS")
RESOURCE_GROUP_INACTIVE = M("RESOURCE_GROUP_INACTIVE")
RESOURCE_GROUP_MEMBER_ADDED = M("RESOURCE_GROUP_MEMBER_ADDED")
RESOURCE_GROUP_MEMBER_REMOVED = M("RESOURCE_GROUP_MEMBER_REMOVED")
RESOURCE_GROUP_NOT_FOUND = M("RESOURCE_GROUP_NOT_FOUND")
RESOURCE_NOT_FOUND = M("RESOURCE_NOT_FOUND")
RUN_EXTERNAL_PROCESS_ERROR = M("RUN_EXTERNAL_PROCESS_ERROR")
RUN_EXTERNAL_PROCESS_FINISHED = M("RUN_EXTERNAL_PROCESS_FINISHED")
RUN_EXTERNAL_PROCESS_STARTED = M("RUN_EXTERNAL_PROCESS_STARTED")
