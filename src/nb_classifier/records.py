"""Record sources for training and test corpora.

A record is a mapping of field name to string value. Each training or
test record carries at least a label field and a content field. The
``CsvRecordSource`` reads records from a delimited text file with a
header row; any other iterable of mappings works as a source too.
"""

from __future__ import annotations

import csv
import logging
from collections.abc import Iterator, Mapping
from pathlib import Path

from .errors import DataSourceError

logger = logging.getLogger(__name__)

Record = Mapping[str, str]

DEFAULT_LABEL_FIELD = "label"
DEFAULT_CONTENT_FIELD = "content"


class CsvRecordSource:
    """Iterable of records read from a CSV file.

    The file is opened and its header validated when iteration starts,
    before the first record is produced, so an unreadable file or a
    missing column fails without yielding anything. Each iteration
    re-reads the file from the start.

    Example::

        source = CsvRecordSource("train.csv")
        for record in source:
            print(record["tag"], record["content"])

    Args:
        path: Path to the CSV file.
        label_field: Name of the column holding the label.
        content_field: Name of the column holding the document text.
        delimiter: Field delimiter.
    """

    def __init__(
        self,
        path: str | Path,
        label_field: str = DEFAULT_LABEL_FIELD,
        content_field: str = DEFAULT_CONTENT_FIELD,
        delimiter: str = ",",
    ) -> None:
        self.path = Path(path)
        self.label_field = label_field
        self.content_field = content_field
        self.delimiter = delimiter

    @property
    def required_fields(self) -> tuple[str, str]:
        return (self.label_field, self.content_field)

    def __iter__(self) -> Iterator[dict[str, str]]:
        if not self.path.is_file():
            raise DataSourceError(f"Error opening file: {self.path}")

        try:
            handle = open(self.path, "r", encoding="utf-8", newline="")
        except OSError as exc:
            raise DataSourceError(f"Error opening file: {self.path}") from exc

        with handle:
            reader = csv.DictReader(handle, delimiter=self.delimiter)
            try:
                header = reader.fieldnames
            except (csv.Error, UnicodeDecodeError) as exc:
                raise DataSourceError(f"Cannot read header of {self.path}: {exc}") from exc

            missing = [f for f in self.required_fields if f not in (header or [])]
            if missing:
                raise DataSourceError(
                    f"{self.path} is missing required column(s) {missing}. "
                    f"Found: {header or []}"
                )
            logger.debug("Reading records from %s (columns: %s)", self.path, header)

            try:
                for row in reader:
                    yield self._validate_row(row, reader.line_num)
            except (csv.Error, UnicodeDecodeError) as exc:
                raise DataSourceError(f"Malformed record in {self.path}: {exc}") from exc

    def _validate_row(self, row: dict, line_no: int) -> dict[str, str]:
        for name in self.required_fields:
            if row.get(name) is None:
                raise DataSourceError(
                    f"{self.path}, line {line_no}: record has no value for {name!r}"
                )
        return row


def require_field(record: Record, name: str) -> str:
    """Return ``record[name]``, raising ``DataSourceError`` if it is absent."""
    try:
        value = record[name]
    except KeyError as exc:
        raise DataSourceError(f"Record has no {name!r} field: {dict(record)}") from exc
    if value is None:
        raise DataSourceError(f"Record has no value for {name!r}: {dict(record)}")
    return value


def read_records(
    path: str | Path,
    label_field: str = DEFAULT_LABEL_FIELD,
    content_field: str = DEFAULT_CONTENT_FIELD,
) -> list[dict[str, str]]:
    """Read every record of a CSV file into a list.

    Raises:
        DataSourceError: If the file cannot be read or is malformed.
    """
    return list(CsvRecordSource(path, label_field=label_field, content_field=content_field))
