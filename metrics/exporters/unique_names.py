"""Plain-text exporter for unique metric names"""
from pathlib import Path
from typing import Iterable
from ..errors import UniqueMetricsWriteError
from ..models import DEFAULT_UNIQUE_METRICS_FILE
from logging_config import get_logger

logger = get_logger(__name__)


class UniqueNamesExporter:
    """Write unique metric names, one per line"""

    def __init__(self, output_file=DEFAULT_UNIQUE_METRICS_FILE):
        self.output_file = Path(output_file)

    def export_names(self, names: Iterable[str]) -> str:
        """Newline-joined names without a trailing newline"""
        return "\n".join(names)

    def write_names_file(self, names: Iterable[str]) -> Path:
        """Overwrite the output file with the given names"""
        # Encode first so an unencodable name leaves any existing file untouched
        try:
            content = self.export_names(names).encode("utf-8")
        except UnicodeError as e:
            raise UniqueMetricsWriteError(self.output_file, e) from e

        try:
            with open(self.output_file, 'wb') as f:
                f.write(content)
        except OSError as e:
            raise UniqueMetricsWriteError(self.output_file, e) from e

        logger.debug("Wrote unique metric names", path=str(self.output_file), bytes=len(content))
        return self.output_file
