"""Generic CSV export aggregator.

Concrete exporters supply a row producer (:meth:`CsvExportAggregator.get_data`)
and a :class:`CsvSchema` describing the columns. Columns are bound to explicit
positions; a position without a binding renders as an empty cell in the header
and in every row so the remaining columns keep their place.

The whole file is rendered in memory and handed to storage in a single call,
so a failing exporter never leaves a partial artifact behind.
"""

from __future__ import annotations

import csv
import dataclasses
import io
import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from report_toolkit.core.extension import Extension
from report_toolkit.errors import CsvExportError
from report_toolkit.storage.base import data_path

if TYPE_CHECKING:
    from collections.abc import Sequence

    from report_toolkit.core.configuration import Configuration
    from report_toolkit.core.launch import LaunchResults
    from report_toolkit.storage.base import ReportStorage

logger = logging.getLogger(__name__)

RowT = TypeVar("RowT")

Accessor = str | Callable[[Any], Any]


@dataclass(frozen=True)
class CsvColumn:
    """Binding of a header name and a row accessor to a column position."""

    position: int
    name: str
    accessor: Accessor

    def value(self, row: Any) -> Any:
        """Extract this column's value from ``row``."""
        if callable(self.accessor):
            return self.accessor(row)
        if isinstance(row, Mapping):
            return row[self.accessor]
        return getattr(row, self.accessor)


@dataclass(frozen=True)
class CsvSchema:
    """Declared column layout for a row type.

    Either ``columns`` (positional bindings) or ``fields`` (plain field names
    used as header and accessor) may be given. With neither, the layout is
    derived from the first row at export time.
    """

    columns: tuple[CsvColumn, ...] = ()
    fields: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        columns = tuple(sorted(self.columns, key=lambda column: column.position))
        positions = [column.position for column in columns]
        if any(position < 0 for position in positions):
            message = "CSV column positions must be non-negative"
            raise ValueError(message)
        if len(set(positions)) != len(positions):
            message = f"Duplicate CSV column positions: {positions}"
            raise ValueError(message)
        object.__setattr__(self, "columns", columns)
        object.__setattr__(self, "fields", tuple(self.fields))

    @classmethod
    def of(cls, *columns: tuple[int, str, Accessor]) -> CsvSchema:
        """Build a schema from ``(position, name, accessor)`` tuples."""
        return cls(columns=tuple(CsvColumn(*column) for column in columns))

    @classmethod
    def from_fields(cls, *names: str) -> CsvSchema:
        return cls(fields=names)

    @classmethod
    def for_type(cls, row_type: type) -> CsvSchema:
        """Derive a field-name schema from a dataclass or pydantic model type."""
        return cls(fields=field_names(row_type))

    @property
    def is_positional(self) -> bool:
        return bool(self.columns)

    def resolve(self, rows: Sequence[Any]) -> CsvSchema:
        """Return a schema with a concrete layout, deriving fields from ``rows``."""
        if self.columns or self.fields or not rows:
            return self
        return CsvSchema(fields=field_names(rows[0]))

    @property
    def width(self) -> int:
        if self.columns:
            return self.columns[-1].position + 1
        return len(self.fields)

    def header(self) -> list[str]:
        """Return header cells, with empty cells for unbound positions."""
        if not self.columns:
            return list(self.fields)
        cells = [""] * self.width
        for column in self.columns:
            cells[column.position] = column.name
        return cells

    def cells(self, row: Any) -> list[Any]:
        """Return ``row`` rendered as positional cells."""
        if not self.columns:
            return [
                _cell(CsvColumn(index, name, name).value(row))
                for index, name in enumerate(self.fields)
            ]
        cells: list[Any] = [""] * self.width
        for column in self.columns:
            cells[column.position] = _cell(column.value(row))
        return cells


def field_names(row: Any) -> tuple[str, ...]:
    """Return field names of a dataclass, pydantic model, or mapping row."""
    if dataclasses.is_dataclass(row):
        return tuple(item.name for item in dataclasses.fields(row))
    row_type = row if isinstance(row, type) else type(row)
    model_fields = getattr(row_type, "model_fields", None)
    if isinstance(model_fields, Mapping):
        return tuple(model_fields)
    if isinstance(row, Mapping):
        return tuple(str(key) for key in row)
    message = f"Cannot derive CSV fields from {type(row).__name__}"
    raise TypeError(message)


def _cell(value: Any) -> Any:
    return "" if value is None else value


class CsvExportAggregator(Extension, ABC, Generic[RowT]):
    """Aggregator that exports derived rows to ``data/<file_name>``."""

    def __init__(self, file_name: str, schema: CsvSchema | None = None) -> None:
        self._file_name = file_name
        self._schema = schema or CsvSchema()

    @property
    def file_name(self) -> str:
        return self._file_name

    @property
    def schema(self) -> CsvSchema:
        return self._schema

    @abstractmethod
    def get_data(self, launches_results: Sequence[LaunchResults]) -> list[RowT]:
        """Derive the rows to export. Must not mutate its input."""

    def aggregate(
        self,
        configuration: Configuration,  # noqa: ARG002 - interface consistency
        launches_results: Sequence[LaunchResults],
        storage: ReportStorage,
    ) -> None:
        """Render every row and commit the file to storage in one write."""
        rows = list(self.get_data(tuple(launches_results)))
        payload = self.render(rows)
        storage.add_data_binary(data_path(self._file_name), payload)
        logger.debug("Exported %d row(s) to %s", len(rows), data_path(self._file_name))

    def render(self, rows: Sequence[RowT]) -> bytes:
        """Render ``rows`` as UTF-8 CSV bytes."""
        schema = self._schema
        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="\n")
        try:
            schema = schema.resolve(rows)
            if not schema.width:
                return b""
            writer.writerow(schema.header())
            for row in rows:
                writer.writerow(schema.cells(row))
            return buffer.getvalue().encode("utf-8")
        except (AttributeError, KeyError, TypeError, ValueError, csv.Error) as exc:
            message = f"Could not export {self._file_name}: {exc}"
            raise CsvExportError(message) from exc
