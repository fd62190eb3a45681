"""Locate metrics log files below a root path"""
import os
from pathlib import Path
from typing import List
from metrics.errors import CrawlError
from metrics.models import METRIC_FILE_PREFIX, METRIC_FILE_SUFFIX
from logging_config import get_logger
from .base import BaseCollector

logger = get_logger(__name__)


def is_metric_file_name(file_name: str) -> bool:
    """Check a base name against the metrics*.out pattern (case-sensitive)"""
    return file_name.startswith(METRIC_FILE_PREFIX) and file_name.endswith(METRIC_FILE_SUFFIX)


class MetricFileCollector(BaseCollector[Path]):
    """Depth-first crawl collecting files named metrics*.out"""

    def __init__(self, root_path):
        self.root_path = Path(root_path)

    def collect(self) -> List[Path]:
        files: List[Path] = []
        self._crawl(self.root_path, files)
        logger.debug("Crawl finished", root_path=str(self.root_path), files=len(files))
        return files

    def _crawl(self, path: Path, files: List[Path]) -> None:
        if path.is_dir():
            try:
                with os.scandir(path) as entries:
                    children = [Path(entry.path) for entry in entries]
            except OSError as e:
                raise CrawlError(path, e) from e

            for child in children:
                self._crawl(child, files)
        elif path.is_file():
            if is_metric_file_name(path.name):
                files.append(path)
        # Sockets, fifos, broken links and missing paths are skipped
