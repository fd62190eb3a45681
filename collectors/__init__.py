"""Input stages: metrics file discovery and event extraction"""
from .files import MetricFileCollector
from .events import EventCollector

__all__ = [
    'MetricFileCollector',
    'EventCollector'
]
