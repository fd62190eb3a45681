"""Scan pipeline: crawl, extract events, filter metrics, aggregate"""
import time
from pathlib import Path
from typing import Callable, Optional, TypeVar
from config import Config
from collectors.events import EventCollector
from collectors.files import MetricFileCollector
from metrics.aggregator import collect_unique_metric_names, count_metric_types
from metrics.exporters.unique_names import UniqueNamesExporter
from metrics.filter import extract_metric_events
from metrics.models import ScanReport, StageTiming
from logging_config import get_logger, log_stage_timing

logger = get_logger(__name__)

T = TypeVar("T")

STAGE_CRAWL = "crawl"
STAGE_EVENTS = "extract events"
STAGE_METRICS = "extract metric events"
STAGE_UNIQUE = "collect unique metrics"
STAGE_TYPES = "count metric types"


class ScanPipeline:
    """Runs every stage in order; the first error aborts the scan"""

    def __init__(self, config: Optional[Config] = None):
        self.config = config or Config()

    def run(self, root_path, write_unique: bool = False) -> ScanReport:
        root_path = Path(root_path)
        report = ScanReport(root_path=root_path)

        logger.info("Crawling", root_path=str(root_path))
        report.files = self._timed(report, STAGE_CRAWL, MetricFileCollector(root_path).collect, len)

        logger.info("Extracting events", files=len(report.files))
        events = self._timed(report, STAGE_EVENTS, EventCollector(report.files).collect, len)
        report.event_count = len(events)

        logger.info("Extracting metric events", events=report.event_count)
        metrics = self._timed(report, STAGE_METRICS, lambda: extract_metric_events(events), len)
        report.metric_count = len(metrics)

        if write_unique:
            report.unique_names = self._timed(report, STAGE_UNIQUE, lambda: collect_unique_metric_names(metrics), len)
        report.type_counts = self._timed(report, STAGE_TYPES, lambda: count_metric_types(metrics), lambda c: sum(c.values()))

        if write_unique:
            exporter = UniqueNamesExporter(self.config.unique_metrics_file)
            report.unique_metrics_file = exporter.write_names_file(report.unique_names)
            logger.info("Wrote unique metrics", path=str(report.unique_metrics_file), count=len(report.unique_names))

        return report

    def _timed(self, report: ScanReport, stage: str, func: Callable[[], T], size: Callable[[T], int]) -> T:
        start = time.perf_counter()
        result = func()
        elapsed = time.perf_counter() - start

        report.timings.append(StageTiming(stage=stage, elapsed=elapsed))
        log_stage_timing(logger, stage, elapsed, size(result))
        return result
