# frames/column_discovery.py
from typing import Dict, Iterable
from frames.attribute_value import ColumnKind, Record, classify


def discover_columns(records: Iterable[Record]) -> Dict[str, ColumnKind]:
    """
    Single pass over a record batch.
    Returns dict: field -> kind, in first-seen order (record order, then each record's key order).

    The kind of a field is the kind of its value in the first record that has it.
    Later records never change it, even when their value has another kind.
    """
    columns: Dict[str, ColumnKind] = {}
    for rec in records:
        for name, value in rec.items():
            if name in columns:
                continue
            columns[name] = classify(value)
    return columns
