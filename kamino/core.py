"""Core functionality for kamino"""

from concurrent.futures import ThreadPoolExecutor
from contextlib import closing
from pathlib import Path
from typing import Iterator, List, Optional, Union

from kamino.config import Config
from kamino.logging_config import get_logger
from kamino.models.report import RepoReport
from kamino.services.display_service import DisplayService
from kamino.services.scan_service import ScanService
from kamino.utils.threading import get_optimal_worker_count

logger = get_logger(__name__)


class Kamino:
    """Scans a directory of repository clones for drift from their remotes."""

    def __init__(self, config: Union[Config, dict], display_service: Optional[DisplayService] = None):
        """Initialize Kamino.

        Args:
            config: Configuration dict or Config object
            display_service: Where results are printed (a default one if None)
        """
        if isinstance(config, dict):
            self.config = Config.from_dict(config)
        else:
            self.config = config
        self.root = Path(self.config.root)
        self.keep_going = self.config.keep_going

        self.scan_service = ScanService(self.config)
        self.display_service = display_service or DisplayService(verbose=self.config.verbose)

        self.reports: List[RepoReport] = []
        self.stats = {"scanned": 0, "drifted": 0, "failed": 0, "skipped": 0}

    def run(self) -> bool:
        """Scan every repository under the root and print the results.

        Returns:
            True if every repository was scanned without error

        Raises:
            NotADirectoryError: If the root is not a directory
        """
        dirs = self.scan_service.candidate_dirs(self.root)
        self.display_service.show_banner(self.root.resolve())

        halted = False
        with closing(self._iter_reports(dirs)) as reports:
            for report in reports:
                self._record(report)
                self.display_service.show_report(report)
                if report.failed and not self.keep_going:
                    halted = True
                    break

        if halted:
            self.display_service.show_halted()
        else:
            self.display_service.show_summary(self.stats)
        return self.stats["failed"] == 0

    def _record(self, report: RepoReport) -> None:
        logger.debug(f"Scanned {report}")
        self.reports.append(report)
        self.stats["scanned"] += 1
        if report.failed:
            self.stats["failed"] += 1
        elif report.has_findings:
            self.stats["drifted"] += 1

    def _iter_reports(self, dirs: List[Path]) -> Iterator[RepoReport]:
        if not self.config.parallel:
            yield from self._iter_reports_sequential(dirs)
        else:
            yield from self._iter_reports_parallel(dirs)

    def _iter_reports_sequential(self, dirs: List[Path]) -> Iterator[RepoReport]:
        for path in dirs:
            report = self.scan_service.scan_path(path)
            if report is None:
                self.stats["skipped"] += 1
                continue
            yield report

    def _iter_reports_parallel(self, dirs: List[Path]) -> Iterator[RepoReport]:
        """Scan in parallel but yield reports in directory order."""
        workers = get_optimal_worker_count(self.config.workers, task_count=len(dirs))
        logger.info(f"Scanning {len(dirs)} directories with {workers} workers")
        executor = ThreadPoolExecutor(max_workers=workers)
        try:
            futures = [executor.submit(self.scan_service.scan_path, path) for path in dirs]
            for future in futures:
                report = future.result()
                if report is None:
                    self.stats["skipped"] += 1
                    continue
                yield report
        finally:
            # Pending scans are dropped when the caller stops early
            executor.shutdown(wait=True, cancel_futures=True)
