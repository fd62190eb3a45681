"""Human-readable console report for a scan"""
from typing import List
from metrics.models import ScanReport


def format_duration(seconds: float) -> str:
    if seconds < 1e-3:
        return f"{seconds * 1e6:.1f}µs"
    if seconds < 1:
        return f"{seconds * 1e3:.3f}ms"
    return f"{seconds:.3f}s"


def render_report(report: ScanReport) -> List[str]:
    """Report lines: stage durations, summary counts, then per-type counts"""
    lines = [f"Took {format_duration(t.elapsed)} to {t.stage}" for t in report.timings]

    lines.append(f"Total number of files: {report.file_count}")
    lines.append(f"Total number of events: {report.event_count}")
    lines.append(f"Total number of metrics: {report.metric_count}")
    if report.unique_count is not None:
        lines.append(f"Total number of unique metrics: {report.unique_count}")

    lines.append("Metric types:")
    for metric_type, count in report.type_counts.items():
        lines.append(f"  {metric_type}: {count}")

    if report.unique_metrics_file is not None:
        lines.append(f"Unique metrics written to {report.unique_metrics_file}")

    return lines
