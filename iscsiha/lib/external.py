import os
import signal
import subprocess
from logging import Logger
from shlex import quote as shell_quote
from typing import (
    Dict,
    List,
    Mapping,
    Optional,
    Tuple,
)

from iscsiha import settings
from iscsiha.common import reports
from iscsiha.common.reports import ReportProcessor
from iscsiha.common.reports.item import ReportItem
from iscsiha.common.types import StringSequence
from iscsiha.lib.errors import RemoteQueryError


def _is_superuser() -> bool:
    return os.geteuid() == 0


class CommandRunner:
    def __init__(
        self,
        logger: Logger,
        reporter: ReportProcessor,
        env_vars: Optional[Mapping[str, str]] = None,
    ):
        self._logger = logger
        self._reporter = reporter
        # Reset environment variables by empty dict is desired here.  We need
        # to get rid of defaults - we do not know the context and environment
        # where the library runs.  We also get rid of PATH settings, so all
        # executables must be specified with full path unless the PATH variable
        # is set from outside.
        self._env_vars = env_vars if env_vars else {}

    @property
    def env_vars(self) -> Dict[str, str]:
        return dict(self._env_vars)

    def run(
        self, args: StringSequence, superuser: bool = False
    ) -> Tuple[str, str, int]:
        """
        Run a command given as an argv list, never through a shell

        args -- the command and its arguments
        superuser -- run the command elevated, sudo is used unless we already
            are root
        """
        env_vars = dict(self._env_vars)

        cmd: List[str] = list(args)
        if superuser and not _is_superuser():
            cmd = [settings.sudo_exec] + settings.sudo_options + cmd

        log_args = " ".join([shell_quote(x) for x in cmd])
        env = (
            ""
            if not env_vars
            else (
                "\n"
                + "\n".join(
                    [
                        "  {0}={1}".format(key, val)
                        for key, val in sorted(env_vars.items())
                    ]
                )
            )
        )
        self._logger.debug("Running: %s\nEnvironment:%s", log_args, env)
        self._reporter.report(
            ReportItem.debug(
                reports.messages.RunExternalProcessStarted(log_args, env_vars)
            )
        )

        try:
            # pylint: disable=subprocess-popen-preexec-fn, consider-using-with
            # this is OK as the library is single-threaded
            process = subprocess.Popen(
                cmd,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                preexec_fn=(
                    lambda: signal.signal(signal.SIGPIPE, signal.SIG_DFL)
                ),
                close_fds=True,
                shell=False,
                env=env_vars,
                # decodes newlines and converts bytes to str
                universal_newlines=True,
            )
            out_std, out_err = process.communicate()
            retval = process.returncode
        except OSError as e:
            raise RemoteQueryError(
                ReportItem.error(
                    reports.messages.RunExternalProcessError(
                        log_args,
                        e.strerror,
                    )
                )
            ) from e

        self._logger.debug(
            (
                "Finished running: %s\nReturn value: %s"
                "\n--Debug Stdout Start--\n%s\n--Debug Stdout End--"
                "\n--Debug Stderr Start--\n%s\n--Debug Stderr End--"
            ),
            log_args,
            retval,
            out_std,
            out_err,
        )
        self._reporter.report(
            ReportItem.debug(
                reports.messages.RunExternalProcessFinished(
                    log_args,
                    retval,
                    out_std,
                    out_err,
                )
            )
        )
        return out_std, out_err, retval
