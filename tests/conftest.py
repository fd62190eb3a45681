"""Shared fixtures for scanner tests"""
import json
import logging
from pathlib import Path
import pytest
import structlog


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo logging configuration made by a test"""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    structlog.reset_defaults()
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


def write_lines(path: Path, lines) -> Path:
    """Write raw lines (or JSON-encoded values) to path, creating parents"""
    path.parent.mkdir(parents=True, exist_ok=True)
    encoded = [line if isinstance(line, str) else json.dumps(line) for line in lines]
    path.write_text("\n".join(encoded) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def metrics_tree(tmp_path):
    """A small tree of metrics logs with one file of each metric type"""
    write_lines(tmp_path / "metrics.out", [
        {"metric": {"gauge": {"value": 1.5}, "name": "cpu.load"}},
        {"message": "no metric here"},
    ])
    write_lines(tmp_path / "service-a" / "metrics-1.out", [
        {"metric": {"counter": {"value": 3}, "name": "requests"}},
        {"metric": {"histogram": {"buckets": []}, "name": "latency"}},
    ])
    write_lines(tmp_path / "service-a" / "deep" / "er" / "metrics-2.out", [
        {"metric": {"distribution": {"samples": [1, 2]}, "name": "latency"}},
        [1, 2, 3],
    ])
    write_lines(tmp_path / "service-a" / "app.log", [
        {"metric": {"gauge": {"value": 9}, "name": "ignored"}},
    ])
    write_lines(tmp_path / "other" / "Metrics.out", [
        {"metric": {"gauge": {"value": 9}, "name": "ignored"}},
    ])
    return tmp_path
