"""
Counter reading per-term counts from a local CSV table.

Format: one `URI,COUNT` pair per line, comma separated, no quoting. An
optional header line whose first field is `URI` is skipped.
"""

import logging
from pathlib import Path
from typing import Optional, Tuple, Union

from core.constants import CSV_HEADER_MARKER
from .lookup_counter import LookupNodeCounter

logger = logging.getLogger(__name__)


def parse_count_row(line: str) -> Optional[Tuple[str, int]]:
    """
    Parse one row of a counts table.

    Args:
        line: Raw line, without the trailing newline

    Returns:
        (uri, count), or None for a blank or header line

    Raises:
        ValueError: If the URI or the COUNT column cannot be parsed
    """
    if not line.strip():
        return None

    tokens = line.split(',')
    uri = tokens[0].strip()
    if uri == CSV_HEADER_MARKER:
        return None
    if not uri or any(ch.isspace() for ch in uri):
        raise ValueError(f"URI column could not be parsed: '{tokens[0]}'")

    if len(tokens) < 2:
        raise ValueError("COUNT column is missing")
    try:
        count = int(tokens[1].strip())
    except ValueError:
        raise ValueError(f"COUNT column could not be parsed: '{tokens[1]}'") from None
    if count < 0:
        raise ValueError(f"COUNT column is negative: {count}")

    return uri, count


class CsvNodeCounter(LookupNodeCounter):
    """
    Node counter backed by a local CSV file.

    Malformed rows are logged and skipped; a missing or unreadable file
    fails initialization.
    """

    def __init__(self, csv_path: Union[str, Path]):
        super().__init__()
        self.csv_path = Path(csv_path)

    def lookup_counts(self) -> None:
        logger.info("Loading node counts from %s...", self.csv_path)

        skipped = 0
        with open(self.csv_path, 'r', encoding='utf-8') as f:
            for line_number, line in enumerate(f, 1):
                try:
                    row = parse_count_row(line.rstrip('\r\n'))
                except ValueError as e:
                    logger.error("Failed to read line %d: %s", line_number, e)
                    skipped += 1
                    continue

                if row is not None:
                    self.set_count(*row)

        if skipped:
            logger.warning("Skipped %d malformed lines in %s", skipped, self.csv_path)
