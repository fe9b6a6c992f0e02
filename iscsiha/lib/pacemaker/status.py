import re
from typing import Optional

_LOCATE_RUNNING_ON = re.compile(r"is running on:\s+(\S+)", re.IGNORECASE)
_GROUP_HEADER_ANY = re.compile(r"^\s*\*\s*Resource\s+Group:", re.IGNORECASE)
_MEMBER_STARTED = re.compile(r"^\s*\*\s*.*?\bStarted\s+(\S+)", re.IGNORECASE)


def parse_locate_output(text: str) -> Optional[str]:
    """
    Get the node name from 'crm_resource --locate' output

    Returns None if the resource is not running anywhere.
    """
    match = _LOCATE_RUNNING_ON.search(text)
    return match.group(1) if match else None


def parse_group_node_from_status(text: str, group_id: str) -> Optional[str]:
    """
    Find the node of the first started member of a group in 'pcs status'

    text -- plaintext cluster status
    group_id -- id of the group to look for
    """
    header = re.compile(
        r"^\s*\*\s*Resource\s+Group:\s*{0}\s*:".format(re.escape(group_id)),
        re.IGNORECASE | re.MULTILINE,
    )
    header_match = header.search(text)
    if not header_match:
        return None
    # the first item is the rest of the header line
    for line in text[header_match.end() :].splitlines()[1:]:
        if _GROUP_HEADER_ANY.match(line):
            break
        started_match = _MEMBER_STARTED.match(line)
        if started_match:
            return started_match.group(1)
    return None
