from typing import (
    Any,
    List,
)

from iscsiha.common.types import StringSequence


def indent(line_list: StringSequence, indent_step: int = 2) -> List[str]:
    """
    Prefix each non-empty line with indent_step spaces
    """
    return [f"{' ' * indent_step}{line}" if line else line for line in line_list]


def quote_items(item_list: StringSequence) -> List[str]:
    return [f"'{item}'" for item in item_list]


def format_list_dont_sort(
    item_list: StringSequence, separator: str = ", "
) -> str:
    """
    Quote and join items keeping their order, used where the order matters,
    e.g. members of a group
    """
    return separator.join(quote_items(item_list))


def join_multilines(strings: StringSequence) -> str:
    """
    Join stripped non-empty outputs of a command, one per line
    """
    return "\n".join([a.strip() for a in strings if a.strip()])


def is_multiline(value: str) -> bool:
    # a lone carriage return ends a line for some tools as well
    return "\n" in value or "\r" in value


def format_optional(
    value: Any, template: str = "{} ", empty_case: str = ""
) -> str:
    """
    Put a value into a template, return empty_case if there is no value

    Zero is a value, False is not.
    """
    if value or (
        isinstance(value, int) and not isinstance(value, bool) and value == 0
    ):
        return template.format(value)
    return empty_case
