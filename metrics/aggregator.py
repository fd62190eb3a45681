"""Aggregate extracted metrics into type counts and unique names"""
import json
from typing import Any, Dict, Iterable, Optional, Set
from .errors import MetricSchemaError
from .models import Metric, MetricType, empty_type_counts
from logging_config import get_logger

logger = get_logger(__name__)

NAME_KEY = "name"


def _metric_name(metric: Metric) -> Any:
    if NAME_KEY not in metric:
        raise MetricSchemaError("'name' key to have a string value", metric)
    return metric[NAME_KEY]


def canonical_name(name: Any) -> str:
    """Compact JSON text of a name value; a string keeps its quotes"""
    return json.dumps(name, separators=(",", ":"), ensure_ascii=False)


def classify_metric(metric: Metric) -> Optional[MetricType]:
    """First recognized type key present on the metric, or None"""
    for metric_type in MetricType:
        if metric_type.value in metric:
            return metric_type
    return None


def count_metric_types(metrics: Iterable[Metric]) -> Dict[str, int]:
    """Count metrics per type; metrics of no known type are logged, not counted"""
    counts = empty_type_counts()

    for metric in metrics:
        metric_type = classify_metric(metric)
        if metric_type is not None:
            counts[metric_type.value] += 1
            continue

        name = _metric_name(metric)
        logger.warning("Unknown metric", name=name, event_type="unknown_metric")

    return counts


def collect_unique_metric_names(metrics: Iterable[Metric]) -> Set[str]:
    """Distinct metric names keyed by their JSON text.

    A name "foo" is stored as '"foo"' (with quotes), so the string "1" and
    the number 1 stay two distinct names.
    """
    return {canonical_name(_metric_name(metric)) for metric in metrics}
