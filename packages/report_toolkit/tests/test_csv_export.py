from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

import pytest
from pydantic import BaseModel
from report_toolkit.aggregation import CsvColumn, CsvExportAggregator, CsvSchema
from report_toolkit.core import ConfigurationBuilder, LaunchResults
from report_toolkit.errors import CsvExportError
from report_toolkit.storage import InMemoryReportStorage


class StaticExport(CsvExportAggregator[Any]):
    def __init__(self, file_name: str, rows: list[Any], schema: CsvSchema | None = None) -> None:
        super().__init__(file_name, schema)
        self.rows = rows

    def get_data(self, launches_results):
        return list(self.rows)


@dataclass(frozen=True)
class GappedRow:
    second: str
    ignored: str
    first: str


class PointRow(BaseModel):
    x: int
    y: int


def _run(aggregator: CsvExportAggregator[Any]) -> InMemoryReportStorage:
    storage = InMemoryReportStorage()
    aggregator.aggregate(ConfigurationBuilder().build(), [LaunchResults()], storage)
    return storage


def test_exports_rows_to_data_path() -> None:
    schema = CsvSchema.of((0, "x", "x"), (1, "y", "y"))
    rows = [{"x": "a", "y": "1"}, {"x": "b", "y": "2"}]

    storage = _run(StaticExport("report.csv", rows, schema))

    assert storage.paths() == ["data/report.csv"]
    assert storage.get("data/report.csv") == b"x,y\na,1\nb,2\n"


def test_unbound_position_renders_empty_cells() -> None:
    schema = CsvSchema(
        columns=(
            CsvColumn(2, "Second", "second"),
            CsvColumn(0, "First", "first"),
        )
    )
    rows = [GappedRow(second="s1", ignored="zzz", first="f1")]

    storage = _run(StaticExport("gapped.csv", rows, schema))

    assert storage.get("data/gapped.csv") == b"First,,Second\nf1,,s1\n"


def test_callable_accessor_and_none_values() -> None:
    schema = CsvSchema.of(
        (0, "Name", "name"),
        (1, "Upper", lambda row: row["name"].upper()),
        (2, "Missing", "missing"),
    )
    rows = [{"name": "alpha", "missing": None}]

    storage = _run(StaticExport("callable.csv", rows, schema))

    assert storage.get("data/callable.csv") == b"Name,Upper,Missing\nalpha,ALPHA,\n"


def test_values_needing_quotes_are_quoted() -> None:
    schema = CsvSchema.of((0, "text", "text"))
    storage = _run(StaticExport("quoted.csv", [{"text": "a,b"}], schema))

    assert storage.get("data/quoted.csv") == b'text\n"a,b"\n'


def test_schema_without_bindings_uses_dataclass_field_names() -> None:
    rows = [GappedRow(second="s", ignored="i", first="f")]

    storage = _run(StaticExport("fields.csv", rows))

    assert storage.get("data/fields.csv") == b"second,ignored,first\ns,i,f\n"


def test_schema_for_pydantic_type() -> None:
    schema = CsvSchema.for_type(PointRow)
    storage = _run(StaticExport("points.csv", [PointRow(x=1, y=2)], schema))

    assert schema.fields == ("x", "y")
    assert storage.get("data/points.csv") == b"x,y\n1,2\n"


def test_empty_rows_still_write_declared_header() -> None:
    schema = CsvSchema.from_fields("a", "b")
    storage = _run(StaticExport("empty.csv", [], schema))

    assert storage.get("data/empty.csv") == b"a,b\n"


def test_empty_rows_without_schema_write_empty_file() -> None:
    storage = _run(StaticExport("nothing.csv", []))

    assert storage.get("data/nothing.csv") == b""


def test_schema_rejects_duplicate_and_negative_positions() -> None:
    with pytest.raises(ValueError, match="Duplicate"):
        CsvSchema.of((0, "a", "a"), (0, "b", "b"))
    with pytest.raises(ValueError, match="non-negative"):
        CsvSchema.of((-1, "a", "a"))


def test_row_mapping_failure_is_wrapped_and_nothing_is_written() -> None:
    schema = CsvSchema.of((0, "x", "x"), (1, "y", "y"))
    rows = [{"x": "a", "y": "1"}, {"x": "b"}]
    storage = InMemoryReportStorage()
    aggregator = StaticExport("broken.csv", rows, schema)

    with pytest.raises(CsvExportError) as excinfo:
        aggregator.aggregate(ConfigurationBuilder().build(), [], storage)

    assert isinstance(excinfo.value, OSError)
    assert isinstance(excinfo.value.__cause__, KeyError)
    assert "broken.csv" not in storage
    assert len(storage) == 0


def test_row_producer_failure_writes_nothing() -> None:
    class PartialExport(CsvExportAggregator[dict[str, str]]):
        def get_data(self, launches_results) -> Iterator[dict[str, str]]:  # type: ignore[override]
            yield {"x": "a"}
            message = "results exhausted"
            raise RuntimeError(message)

    storage = InMemoryReportStorage()
    aggregator = PartialExport("partial.csv", CsvSchema.from_fields("x"))

    with pytest.raises(RuntimeError, match="results exhausted"):
        aggregator.aggregate(ConfigurationBuilder().build(), [], storage)

    assert storage.get("data/partial.csv") is None
    assert len(storage) == 0


def test_get_data_receives_all_launches_unmodified() -> None:
    seen: list[tuple[LaunchResults, ...]] = []

    class Recording(CsvExportAggregator[dict[str, Any]]):
        def get_data(self, launches_results):
            seen.append(launches_results)
            return [{"count": len(launch.results)} for launch in launches_results]

    launches = [LaunchResults(results=({"name": "t1"},)), LaunchResults()]
    storage = InMemoryReportStorage()
    Recording("counts.csv").aggregate(ConfigurationBuilder().build(), launches, storage)

    assert seen == [tuple(launches)]
    assert len(launches) == 2
    assert storage.get("data/counts.csv") == b"count\n1\n0\n"
