import logging
from unittest import mock

from iscsiha import settings
from iscsiha.lib.env import LibraryEnvironment

from iscsiha_test.tools.custom_mock import MockLibraryReportProcessor


def bad_call(order_num, expected_command, entered_command):
    return "As {0}. command expected\n    '{1}'\nbut was\n    '{2}'".format(
        order_num, expected_command, entered_command
    )


class Call:
    def __init__(
        self,
        command,
        stdout="",
        stderr="",
        returncode=0,
        superuser=False,
    ):
        self.command = list(command)
        self.stdout = stdout
        self.stderr = stderr
        self.returncode = returncode
        self.superuser = superuser

    def __repr__(self):
        return str("<Runner '{0}' returncode='{1}' superuser='{2}'>").format(
            self.command, self.returncode, self.superuser
        )


class CallQueue:
    def __init__(self):
        self.__calls = []
        self.__taken = 0

    def add(self, call):
        self.__calls.append(call)

    @property
    def remaining(self):
        return self.__calls[self.__taken :]

    def take(self, command):
        if self.__taken >= len(self.__calls):
            raise AssertionError(
                "No more commands expected, but was\n    '{0}'".format(command)
            )
        call = self.__calls[self.__taken]
        self.__taken += 1
        return self.__taken, call


class Runner:
    def __init__(self, call_queue, env_vars=None):
        self.__call_queue = call_queue
        self.__env_vars = env_vars if env_vars else {}

    @property
    def env_vars(self):
        return self.__env_vars

    def run(self, args, superuser=False):
        i, call = self.__call_queue.take(args)
        if list(args) != call.command:
            raise AssertionError(bad_call(i, call.command, args))
        if superuser != call.superuser:
            raise AssertionError(
                f"Command #{i} '{args}': superuser expected "
                f"{call.superuser}, was {superuser}"
            )
        return call.stdout, call.stderr, call.returncode


class RunnerConfig:
    def __init__(self, call_queue):
        self.__call_queue = call_queue

    def pcs(self, args, stdout="", stderr="", returncode=0, superuser=True):
        self.__call_queue.add(
            Call(
                [settings.pcs_exec] + list(args),
                stdout=stdout,
                stderr=stderr,
                returncode=returncode,
                superuser=superuser,
            )
        )
        return self

    def resources_config(
        self, stdout, resource_id=None, stderr="", returncode=0
    ):
        args = ["resource", "config", "--output-format", "json"]
        if resource_id:
            args.append(resource_id)
        return self.pcs(
            args,
            stdout=stdout,
            stderr=stderr,
            returncode=returncode,
            superuser=False,
        )

    def locate(
        self, resource_id, node=None, stdout=None, stderr="", returncode=0
    ):
        if stdout is None:
            stdout = (
                f"resource {resource_id} is running on: {node}\n"
                if node
                else ""
            )
            if not node and not stderr:
                stderr = f"resource {resource_id} is NOT running\n"
        self.__call_queue.add(
            Call(
                [
                    settings.crm_resource_exec,
                    "--locate",
                    "--resource",
                    resource_id,
                ],
                stdout=stdout,
                stderr=stderr,
                returncode=returncode,
            )
        )
        return self

    def status(self, stdout, stderr="", returncode=0):
        return self.pcs(
            ["status"],
            stdout=stdout,
            stderr=stderr,
            returncode=returncode,
            superuser=False,
        )


class EnvAssist:
    """
    Provide a library environment whose commands are checked against a list
    of expected calls

    class MyTest(TestCase):
        def setUp(self):
            self.env_assist = EnvAssist(self)
        def test_something(self):
            self.env_assist.runner.pcs(["resource", "disable", "A"])
            disable_resource(self.env_assist.get_env(), "A")
    """

    def __init__(self, test_case):
        self.__call_queue = CallQueue()
        self.runner = RunnerConfig(self.__call_queue)
        self.report_processor = MockLibraryReportProcessor(debug=False)
        self.__env = LibraryEnvironment(
            mock.MagicMock(logging.Logger), self.report_processor
        )
        patcher = mock.patch.object(
            self.__env,
            "cmd_runner",
            side_effect=lambda: Runner(self.__call_queue),
        )
        patcher.start()
        test_case.addCleanup(patcher.stop)
        test_case.addCleanup(self.__assert_all_calls_done)

    def get_env(self):
        return self.__env

    def assert_reports(self, expected_report_info_list):
        self.report_processor.assert_reports(expected_report_info_list)

    def __assert_all_calls_done(self):
        if self.__call_queue.remaining:
            raise AssertionError(
                "There are remaining expected commands:\n    {0}".format(
                    "\n    ".join(
                        repr(call) for call in self.__call_queue.remaining
                    )
                )
            )
