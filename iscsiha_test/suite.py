import os
import sys
import unittest
from importlib import import_module
from typing import (
    Optional,
    Union,
)

PACKAGE_DIR = os.path.realpath(
    os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
)


def prepare_test_name(test_name):
    """
    Accept tests in fs path format like "iscsiha_test/tier0/lib/test_external"
    as well as in module path format the loader needs

    The name may include the .py extension, it is removed in such case.
    """
    candidate = test_name.replace("/", ".")
    py_extension = ".py"
    if not candidate.endswith(py_extension):
        return candidate
    try:
        import_module(candidate)
        return candidate
    except ImportError:
        return candidate[: -len(py_extension)]


def tests_from_suite(
    test_candidate: Union[unittest.TestCase, unittest.TestSuite],
) -> list[str]:
    if isinstance(test_candidate, unittest.TestCase):
        return [test_candidate.id()]
    test_id_list = []
    for test in test_candidate:
        test_id_list.extend(tests_from_suite(test))
    return test_id_list


def autodiscover_tests(tier: Optional[int] = None) -> unittest.TestSuite:
    test_dir = os.path.join(PACKAGE_DIR, "iscsiha_test")
    if tier is not None:
        test_dir = os.path.join(test_dir, f"tier{tier}")
    return unittest.TestLoader().discover(
        start_dir=test_dir,
        pattern="test_*.py",
        top_level_dir=PACKAGE_DIR,
    )


def discover_tests(
    explicitly_enumerated_tests: list[str],
    exclude_enumerated_tests: bool = False,
    tier: Optional[int] = None,
) -> list[str]:
    if not explicitly_enumerated_tests:
        return tests_from_suite(autodiscover_tests(tier=tier))
    if exclude_enumerated_tests:
        return [
            test_name
            for test_name in tests_from_suite(autodiscover_tests(tier=tier))
            if test_name not in explicitly_enumerated_tests
        ]
    return tests_from_suite(
        unittest.defaultTestLoader.loadTestsFromNames(
            sorted(set(explicitly_enumerated_tests))
        )
    )


def main() -> None:
    sys.path.insert(0, PACKAGE_DIR)

    explicitly_enumerated_tests = [
        prepare_test_name(arg)
        for arg in sys.argv[1:]
        if arg not in ("-v", "--all-but", "--list", "--tier0")
    ]
    tier = 0 if "--tier0" in sys.argv else None

    discovered_tests = discover_tests(
        explicitly_enumerated_tests, "--all-but" in sys.argv, tier=tier
    )
    if "--list" in sys.argv:
        print("\n".join(sorted(discovered_tests)))
        print("{0} tests found".format(len(discovered_tests)))
        sys.exit()

    test_runner = unittest.TextTestRunner(
        verbosity=2 if "-v" in sys.argv else 1
    )
    test_result = test_runner.run(
        unittest.defaultTestLoader.loadTestsFromNames(discovered_tests)
    )
    if not test_result.wasSuccessful():
        sys.exit(1)


if __name__ == "__main__":
    main()


# assume that we are in the project root dir
#
# run all tests:
# ./iscsiha_test/suite.py
#
# run and print tests' names:
# iscsiha_test/suite.py -v
#
# run specific test:
# iscsiha_test/suite.py iscsiha_test.tier0.lib.test_external.CommandRunnerTest -v
#
# run all tests except some:
# iscsiha_test/suite.py iscsiha_test.tier0.lib.test_external --all-but
