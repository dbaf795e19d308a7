"""
Asana CSV export reader.

Reads an export into the flat rows the RecordMapper consumes. Quoting,
escaping and multi-line notes are left to the ``csv`` module.
"""

import csv
import logging
from pathlib import Path
from typing import Union

from .constants import DEFAULT_ENCODING, Column
from .exceptions import SourceReadError

logger = logging.getLogger(__name__)


def read_records(
    path: Union[str, Path], encoding: str = DEFAULT_ENCODING
) -> list[dict[str, str]]:
    """
    Read an Asana CSV export.

    Args:
        path: Path to the CSV file
        encoding: File encoding; the default strips Asana's byte order mark

    Returns:
        One dict per row, keyed by column header. Short rows are padded
        with empty strings.

    Raises:
        SourceReadError: If the file is missing, undecodable, malformed
            or has no header row
    """
    path = Path(path)

    try:
        with open(path, newline="", encoding=encoding) as f:
            reader = csv.DictReader(f, restval="")
            if not reader.fieldnames:
                raise SourceReadError(f"{path} has no header row")
            records = [dict(row) for row in reader]
            fieldnames = list(reader.fieldnames)
    except OSError as e:
        raise SourceReadError(f"Cannot read {path}: {e}") from e
    except (csv.Error, UnicodeDecodeError) as e:
        raise SourceReadError(f"Malformed CSV in {path}: {e}") from e

    missing = [c.value for c in Column if c.value not in fieldnames]
    if missing:
        logger.warning(f"{path} is missing columns: {', '.join(missing)}")

    logger.debug(f"Read {len(records)} records from {path}")
    return records
