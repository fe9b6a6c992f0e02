from iscsiha.common import reports
from iscsiha.lib.errors import LibraryError

from iscsiha_test.tools.fixture import ReportItemFixture


def _report_item_to_fixture(report_item):
    report_dto = report_item.to_dto()
    return ReportItemFixture(
        report_dto.severity.level,
        report_dto.message.code,
        report_dto.message.payload,
    )


def _format_list(item_list):
    return "\n  ".join(repr(tuple(item)) for item in item_list)


def assert_report_item_equal(real_report_item, report_item_info):
    real = _report_item_to_fixture(real_report_item)
    if real != tuple(report_item_info):
        raise AssertionError(
            "ReportItem not equal\nexpected: {0}\nactual:   {1}".format(
                repr(tuple(report_item_info)), repr(tuple(real))
            )
        )


def assert_report_item_list_equal(
    real_report_item_list, expected_report_info_list, hint=""
):
    """
    Check reports regardless of their order

    Debug reports which are not expected are ignored.
    """
    real_list = [
        _report_item_to_fixture(item) for item in real_report_item_list
    ]
    remaining_expected = [tuple(info) for info in expected_report_info_list]
    hint = f"{hint}\n" if hint else ""
    for real in real_list:
        if tuple(real) in remaining_expected:
            remaining_expected.remove(tuple(real))
            continue
        if real.severity == reports.ReportItemSeverity.DEBUG:
            continue
        raise AssertionError(
            "{hint}Unexpected report given:\n  {real}\n"
            "expected reports:\n  {expected}\n"
            "all real reports:\n  {all_real}".format(
                hint=hint,
                real=repr(tuple(real)),
                expected=_format_list(expected_report_info_list),
                all_real=_format_list(real_list),
            )
        )
    if remaining_expected:
        raise AssertionError(
            "{hint}Missing reports:\n  {missing}\n"
            "all real reports:\n  {all_real}".format(
                hint=hint,
                missing=_format_list(remaining_expected),
                all_real=_format_list(real_list),
            )
        )


def assert_raise_library_error(callable_obj, *report_info_list):
    try:
        callable_obj()
    except LibraryError as e:
        assert_report_item_list_equal(e.args, list(report_info_list))
        return
    raise AssertionError("LibraryError not raised")
