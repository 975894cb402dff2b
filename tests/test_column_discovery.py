from frames.attribute_value import AttributeValue, ColumnKind
from frames.column_discovery import discover_columns


def test_empty_batch_has_no_columns():
    assert discover_columns([]) == {}


def test_first_seen_kind_wins():
    records = [
        {"x": AttributeValue.string("a")},
        {"x": AttributeValue.number("1")},
        {"x": AttributeValue.boolean(True)},
    ]
    assert discover_columns(records) == {"x": ColumnKind.STRING}


def test_every_field_appears_once_in_first_seen_order():
    records = [
        {"b": AttributeValue.string("1"), "a": AttributeValue.number("2")},
        {"c": AttributeValue.null(), "a": AttributeValue.string("3")},
        {},
        {"d": AttributeValue.list([])},
    ]
    columns = discover_columns(records)
    assert list(columns) == ["b", "a", "c", "d"]
    assert columns == {
        "b": ColumnKind.STRING,
        "a": ColumnKind.NUMBER,
        "c": ColumnKind.NULL,
        "d": ColumnKind.LIST,
    }


def test_unknown_values_still_register_a_column():
    records = [{"tags": AttributeValue.unknown()}, {"tags": AttributeValue.string("x")}]
    assert discover_columns(records) == {"tags": ColumnKind.UNKNOWN}


def test_wire_values_are_classified_directly():
    assert discover_columns([{"flag": {"BOOL": False}}]) == {"flag": ColumnKind.BOOLEAN}
