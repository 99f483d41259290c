from decimal import Decimal

import pytest

from querychain import Select
from querychain.typing import (
    ColumnSpec,
    Number,
    OrderSpec,
    RawExpression,
    SortDirection,
    TableRef,
    Text,
    is_builder,
    to_column_spec,
    to_order_spec,
    to_raw,
    to_value,
)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("x", Text("x")),
        (5, Number(5)),
        (Decimal("2.0"), Number(Decimal("2.0"))),
        (True, RawExpression("TRUE")),
        (None, RawExpression("NULL")),
        (RawExpression("NOW()"), RawExpression("NOW()")),
    ],
)
def test_to_value(value: object, expected: object) -> None:
    assert to_value(value) == expected


def test_value_rendering() -> None:
    """Test the quoting asymmetry between text and the other variants."""
    assert Text("x").render() == "'x'"
    assert Number(5).render() == "5"
    assert RawExpression("a.b").render() == "a.b"


def test_to_raw_does_not_quote() -> None:
    assert to_raw("abc") == "abc"
    assert to_raw(3) == "3"
    assert to_raw(Text("abc")) == "'abc'"


def test_to_column_spec() -> None:
    assert to_column_spec("a") == ColumnSpec("a")
    assert to_column_spec(("a", "b")) == ColumnSpec("a", "b")
    assert to_column_spec(["a", None]) == ColumnSpec("a")
    assert to_column_spec(("",)) is None
    assert to_column_spec(42) is None


def test_column_and_table_rendering() -> None:
    assert ColumnSpec("a", "b").render() == "a AS b"
    assert TableRef("t").render() == "t"
    assert TableRef("t", "x").render() == "t AS x"
    assert TableRef("SELECT 1", "s", is_subquery=True).render() == "( SELECT 1 ) AS s"


def test_to_order_spec() -> None:
    assert to_order_spec(("a", "desc")) == OrderSpec("a", SortDirection.DESC)
    assert to_order_spec(("a", SortDirection.ASC)) == OrderSpec("a", SortDirection.ASC)
    assert to_order_spec(("a", "down")) is None
    assert OrderSpec("a").render() == "a"


def test_is_builder() -> None:
    assert is_builder(Select())
    assert not is_builder("SELECT 1")
    assert not is_builder(Text("x"))
