"""Errors raised by the scan pipeline

Every failure is fatal: stages raise, nothing is retried, and the CLI turns
the exception into a non-zero exit.
"""
from pathlib import Path
from typing import Optional, Union

PathLike = Union[str, Path]


class MetricScanError(Exception):
    """Base class for fatal scan failures."""


class CrawlError(MetricScanError):
    """Raised when a directory under the root path cannot be listed."""

    def __init__(self, path: PathLike, reason: Exception):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Failed to read dir {self.path}: {reason}")


class EventReadError(MetricScanError):
    """Raised when a metrics file cannot be read as text."""

    def __init__(self, path: PathLike, reason: Exception):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Failed to read file {self.path}: {reason}")


class EventParseError(MetricScanError):
    """Raised when a line of a metrics file is not valid JSON."""

    def __init__(self, path: PathLike, line_number: int, reason: Exception):
        self.path = Path(path)
        self.line_number = line_number
        self.reason = reason
        super().__init__(f"Failed to parse file {self.path} (line {line_number}): {reason}")


class MetricSchemaError(MetricScanError):
    """Raised when a metric violates the expected shape."""

    def __init__(self, expectation: str, metric: Optional[object] = None):
        self.expectation = expectation
        self.metric = metric
        super().__init__(f"Expected {expectation}")


class UniqueMetricsWriteError(MetricScanError):
    """Raised when the unique metric names file cannot be written."""

    def __init__(self, path: PathLike, reason: Exception):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Failed to write {self.path}: {reason}")
