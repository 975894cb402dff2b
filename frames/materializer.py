# frames/materializer.py
from typing import Dict, List, Mapping, Optional, Sequence
from frames.attribute_value import AttributeValue, ColumnKind, Record, from_wire

# substitute cell for absent fields and for values that cannot be rendered as text
PLACEHOLDER = "N/A"

RENDERABLE_KINDS = (ColumnKind.STRING, ColumnKind.NUMBER, ColumnKind.BINARY)


def _as_text(value: AttributeValue) -> str:
    if value.kind == ColumnKind.BINARY:
        # raw bytes reinterpreted as text; lossy for non-UTF-8 payloads
        return value.payload.decode("utf-8", errors="replace")
    return value.payload


def render_cell(value: Optional[AttributeValue], column_kind: Optional[ColumnKind] = None) -> str:
    """
    Render one cell.
      - missing value -> PLACEHOLDER
      - S / N / B -> text
      - BOOL, M, L, NULL, UNKNOWN -> PLACEHOLDER
      - value kind differs from the column kind (when given) -> PLACEHOLDER
    """
    if value is None:
        return PLACEHOLDER
    if not isinstance(value, AttributeValue):
        value = from_wire(value)
    if value.kind not in RENDERABLE_KINDS:
        return PLACEHOLDER
    if column_kind is not None and value.kind != column_kind:
        return PLACEHOLDER
    return _as_text(value)


def materialize_column(records: Sequence[Record], name: str, column_kind: Optional[ColumnKind] = None) -> List[str]:
    """One string cell per record, in batch order."""
    return [render_cell(rec.get(name), column_kind) for rec in records]


def materialize_columns(records: Sequence[Record], columns: Mapping[str, ColumnKind]) -> Dict[str, List[str]]:
    """
    Walk the batch for every discovered column.
    Returns dict: field -> cells (len == len(records)). Never raises.
    """
    return {name: materialize_column(records, name, kind) for name, kind in columns.items()}
