#!/usr/bin/env python3
"""Main entry point for the metrics log scanner"""
from pathlib import Path
from typing import Optional
import click
from pydantic import ValidationError
from config import Config
from app.pipeline import ScanPipeline
from app.report import render_report
from metrics.errors import MetricScanError
from logging_config import setup_structured_logging, get_logger, log_scan_startup, log_error

__version__ = "1.0.0"

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("root_path", type=click.Path(path_type=Path))
@click.argument("write_unique", type=click.Choice(["true", "false"]), default="false", required=False)
@click.option("--log-level", type=click.Choice(LOG_LEVELS, case_sensitive=False), default=None,
              help="Override the LOG_LEVEL setting.")
@click.version_option(__version__, prog_name="metrics-log-scanner")
def main(root_path: Path, write_unique: str, log_level: Optional[str]):
    """Count metric types in the metrics*.out files found under ROOT_PATH.

    Pass "true" as WRITE_UNIQUE to also write the unique metric names to
    unique_metrics.txt in the current directory.
    """
    try:
        config = Config() if log_level is None else Config(log_level=log_level.upper())
    except ValidationError as e:
        raise click.ClickException(f"Invalid configuration: {e}")

    setup_structured_logging(config)
    logger = get_logger(__name__)

    write = write_unique == "true"
    log_scan_startup(logger, config, root_path, write)

    try:
        report = ScanPipeline(config).run(root_path, write_unique=write)
    except MetricScanError as e:
        log_error(logger, e, {"component": "main", "root_path": str(root_path)})
        raise click.ClickException(str(e))

    for line in render_report(report):
        click.echo(line)


if __name__ == '__main__':
    main()
