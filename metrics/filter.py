"""Select the metric objects embedded in events"""
import copy
from typing import Iterable, List
from .errors import MetricSchemaError
from .models import Event, Metric

METRIC_KEY = "metric"


def extract_metric_events(events: Iterable[Event]) -> List[Metric]:
    """Return a copy of every event's "metric" object, in event order.

    Events without a "metric" key are skipped. A "metric" value that is not
    an object is a fatal schema error.
    """
    metrics: List[Metric] = []

    for event in events:
        if METRIC_KEY not in event:
            continue

        metric = event[METRIC_KEY]
        if not isinstance(metric, dict):
            raise MetricSchemaError("'metric' key to have an object value", metric)

        metrics.append(copy.deepcopy(metric))

    return metrics
