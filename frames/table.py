# frames/table.py
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple
from frames.attribute_value import ColumnKind, Record, record_from_wire
from frames.column_discovery import discover_columns
from frames.materializer import materialize_columns

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Column:
    name: str
    kind: ColumnKind
    values: Tuple[str, ...] = field(default_factory=tuple)

    def __len__(self):
        return len(self.values)


@dataclass(frozen=True)
class Table:
    """Ordered columns sharing one row count. Column names are unique.
    `rows` is the batch length, kept even when the batch has no fields at all."""

    columns: Tuple[Column, ...] = field(default_factory=tuple)
    rows: int = 0

    @property
    def row_count(self) -> int:
        return self.rows

    @property
    def column_names(self) -> List[str]:
        return [c.name for c in self.columns]

    def column(self, name: str) -> Optional[Column]:
        for c in self.columns:
            if c.name == name:
                return c
        return None

    def to_dict(self) -> Dict[str, List[str]]:
        return {c.name: list(c.values) for c in self.columns}


def assemble_table(kinds: Mapping[str, ColumnKind], cells: Mapping[str, Sequence[str]],
                   row_count: Optional[int] = None) -> Table:
    """
    Package discovered columns and their cells into a Table.
    Column order follows `kinds` (first-seen order from discover_columns).
    row_count: batch length; taken from the columns when omitted.
    """
    columns = []
    for name, kind in kinds.items():
        columns.append(Column(name=name, kind=kind, values=tuple(cells.get(name, ()))))
    if row_count is None:
        row_count = len(columns[0]) if columns else 0
    lengths = {len(c) for c in columns}
    if lengths - {row_count}:
        raise ValueError(f"columns do not match {row_count} rows: {sorted(lengths)}")
    return Table(columns=tuple(columns), rows=row_count)


def extract_table(items: Iterable[Mapping[str, Any]]) -> Table:
    """
    Full pipeline: record batch -> discovery -> materialization -> Table.
    `items` may be Records or raw scanned items in DynamoDB wire form.
    """
    records: List[Record] = [record_from_wire(it) for it in items]
    kinds = discover_columns(records)
    cells = materialize_columns(records, kinds)
    table = assemble_table(kinds, cells, row_count=len(records))
    logger.debug("extracted table", extra={"records": len(records), "columns": len(table.columns)})
    return table
