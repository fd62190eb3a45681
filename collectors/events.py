"""Extract JSON object events from metrics log files"""
import json
from pathlib import Path
from typing import Iterable, List
from metrics.errors import EventParseError, EventReadError
from metrics.models import Event
from logging_config import get_logger
from .base import BaseCollector

logger = get_logger(__name__)


def _reject_constant(constant: str):
    # json accepts NaN and Infinity, strict JSON does not
    raise ValueError(f"Invalid JSON constant: {constant}")


def parse_event_line(line: str):
    """Decode one line as strict JSON"""
    value = json.loads(line, parse_constant=_reject_constant)
    # json decodes "\ud800" escapes to lone surrogates, which are not valid Unicode text
    if "\\u" in line:
        json.dumps(value, ensure_ascii=False).encode("utf-8")
    return value


class EventCollector(BaseCollector[Event]):
    """Reads every located file and keeps the lines that decode to JSON objects"""

    def __init__(self, files: Iterable[Path]):
        self.files = [Path(path) for path in files]

    def collect(self) -> List[Event]:
        events: List[Event] = []
        for path in self.files:
            events.extend(self.extract_file(path))
        return events

    def extract_file(self, path: Path) -> List[Event]:
        """Parse one file; any invalid line aborts the whole extraction"""
        try:
            contents = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise EventReadError(path, e) from e

        events: List[Event] = []
        # Only "\n" ends a line; JSON strings may carry other Unicode line separators
        for line_number, line in enumerate(contents.split("\n"), start=1):
            if not line.strip():
                continue

            try:
                value = parse_event_line(line)
            except (ValueError, RecursionError) as e:
                raise EventParseError(path, line_number, e) from e

            if isinstance(value, dict):
                events.append(value)
            else:
                logger.warning(
                    "Ignoring non-object",
                    value=value,
                    path=str(path),
                    line_number=line_number,
                    event_type="non_object_skipped"
                )

        return events
