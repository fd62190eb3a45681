"""Metric log data models"""
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional, Set

# One decoded JSON object line of a metrics log
Event = Dict[str, Any]
# The object found under an event's "metric" key
Metric = Dict[str, Any]

METRIC_FILE_PREFIX = "metrics"
METRIC_FILE_SUFFIX = ".out"
DEFAULT_UNIQUE_METRICS_FILE = "unique_metrics.txt"


class MetricType(Enum):
    """Recognized metric types, in the order they are matched"""
    GAUGE = "gauge"
    COUNTER = "counter"
    HISTOGRAM = "histogram"
    DISTRIBUTION = "distribution"


def empty_type_counts() -> Dict[str, int]:
    """Zeroed counts for every metric type, keyed in match order"""
    return {metric_type.value: 0 for metric_type in MetricType}


@dataclass
class StageTiming:
    """Wall-clock duration of one pipeline stage"""
    stage: str
    elapsed: float


@dataclass
class ScanReport:
    """Result of one scan over a root path"""
    root_path: Path
    files: List[Path] = field(default_factory=list)
    event_count: int = 0
    metric_count: int = 0
    type_counts: Dict[str, int] = field(default_factory=empty_type_counts)
    unique_names: Optional[Set[str]] = None
    timings: List[StageTiming] = field(default_factory=list)
    unique_metrics_file: Optional[Path] = None

    @property
    def file_count(self) -> int:
        return len(self.files)

    @property
    def unique_count(self) -> Optional[int]:
        if self.unique_names is None:
            return None
        return len(self.unique_names)
