import shlex
from typing import (
    List,
    Tuple,
)

from iscsiha.common import reports
from iscsiha.common.reports import (
    ReportItem,
    ReportItemList,
)
from iscsiha.common.str_tools import is_multiline
from iscsiha.lib.errors import ValidationError


def validate_not_empty(value: str, option_name: str) -> ReportItemList:
    if not value.strip():
        return [
            ReportItem.error(
                reports.messages.EmptyValueNotAllowed(option_name)
            )
        ]
    return []


def validate_single_line(value: str, option_name: str) -> ReportItemList:
    # Values are passed to the cluster manager as command arguments. Another
    # line could sneak in an option or a whole command.
    if is_multiline(value):
        return [
            ReportItem.error(
                reports.messages.MultilineValueNotAllowed(option_name)
            )
        ]
    return []


def split_arguments(
    value: str, option_name: str
) -> Tuple[List[str], ReportItemList]:
    """
    Split a single line of command line options into an argument list

    value -- options as a user would type them, e.g. "pool=rbd name='a b'"
    option_name -- what the options stand for, used in reports
    """
    report_list = validate_single_line(value, option_name)
    if report_list:
        return [], report_list
    try:
        return shlex.split(value), []
    except ValueError as e:
        return [], [
            ReportItem.error(
                reports.messages.InvalidCommandArguments(option_name, str(e))
            )
        ]


def raise_on_errors(report_list: ReportItemList) -> None:
    if reports.has_errors(report_list):
        raise ValidationError(*report_list)
