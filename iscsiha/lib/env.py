from logging import Logger
from typing import Optional

from iscsiha import log
from iscsiha.common import reports
from iscsiha.common.reports.processor import ReportProcessorToLog
from iscsiha.lib.cluster.snapshot import ResourceSnapshotCache
from iscsiha.lib.external import CommandRunner


class LibraryEnvironment:
    """
    Everything library commands need to talk to the outside world

    One environment stands for one orchestrator. It owns the resources
    snapshot, so commands run in the same environment share it.
    """

    def __init__(
        self,
        logger: Logger,
        report_processor: reports.ReportProcessor,
        resource_cache: Optional[ResourceSnapshotCache] = None,
    ):
        self._logger = logger
        self._report_processor = report_processor
        self._resource_cache = (
            resource_cache
            if resource_cache is not None
            else ResourceSnapshotCache()
        )

    @property
    def logger(self) -> Logger:
        return self._logger

    @property
    def report_processor(self) -> reports.ReportProcessor:
        return self._report_processor

    @property
    def resource_cache(self) -> ResourceSnapshotCache:
        return self._resource_cache

    def cmd_runner(self) -> CommandRunner:
        runner_env = {
            # make sure to get output of external processes in English and ASCII
            "LC_ALL": "C",
        }
        return CommandRunner(self.logger, self.report_processor, runner_env)


def get_logged_environment(
    logger: Optional[Logger] = None,
) -> LibraryEnvironment:
    """
    Create an environment sending all reports to the library logger
    """
    if logger is None:
        logger = log.library
    return LibraryEnvironment(logger, ReportProcessorToLog(logger))
