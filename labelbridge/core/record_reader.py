"""
Label record file reader.

A record file is a CSV (UTF-8, comma separated, no header) holding::

    FORM_NAME,V00,V01,..,Vnn

or, with ``has_declared_count``::

    FORM_NAME,Variable_count,V00,V01,..,Vnn

Fields of all rows are read in order, so a record may span several lines.
Fields are kept exactly as written, the form name included; the printer gets
them byte for byte.
"""

import csv
from dataclasses import dataclass, field
from typing import List, Optional

from ..exceptions import RecordError
from ..logger_module import logger


@dataclass
class LabelRecord:
    form_name: str
    values: List[str] = field(default_factory=list)
    declared_count: Optional[int] = None


def read_values(file_path: str) -> List[str]:
    """Read every field of the CSV file, row after row.

    Raises:
        RecordError: IO and decoding errors
    """
    logger.info(f"Reading data {file_path}")
    try:
        with open(file_path, 'r', encoding='utf-8-sig', newline='') as f:
            values = [value for row in csv.reader(f, delimiter=',') for value in row]
    except (OSError, UnicodeDecodeError, csv.Error) as e:
        raise RecordError(f"Error reading file. {e}", context={"path": file_path}, original_exception=e) from e

    logger.debug(f"Acquired data: {','.join(values)}")
    return values


def read_record(file_path: str, has_declared_count: bool = False) -> LabelRecord:
    """Read a label record.

    Args:
        file_path: Path of the CSV file
        has_declared_count: Second field is the number of variables

    Returns:
        LabelRecord: Form name and ordered substitution values

    Raises:
        RecordError: If the file cannot be read or holds no form name
    """
    values = read_values(file_path)
    if not values or not values[0].strip():
        raise RecordError("Error reading file. No form name found.", context={"path": file_path})

    form_name = values[0]
    rest = values[1:]
    declared_count = None

    if has_declared_count:
        if not rest:
            raise RecordError("Error reading file. Missing variable count.", context={"path": file_path})
        try:
            declared_count = int(rest[0].strip())
        except ValueError as e:
            raise RecordError(
                f"Error reading file. Invalid variable count: {rest[0]!r}",
                context={"path": file_path},
                original_exception=e,
            ) from e
        rest = rest[1:]

    logger.info(f"Element count: {len(rest)}")
    return LabelRecord(form_name=form_name, values=rest, declared_count=declared_count)
