"""Unit tests for WHERE conditions and their operators."""

from decimal import Decimal
from typing import Any, Callable

import pytest

from querychain import Number, RawExpression, Select, Text
from querychain.builder import ConditionState
from querychain.exceptions import (
    BuilderErrorCode,
    InvalidColumnNameError,
    InvalidComparisonOperatorError,
    InvalidInListError,
    InvalidNotEqualsToOperatorError,
    InvalidPatternError,
    MultipleWhereStatementError,
    NoPreviousSelectStatementError,
    NoPreviousWhereStatementError,
)


@pytest.fixture
def where_builder() -> Select:
    """Fixture providing a builder with an open WHERE condition."""
    return Select().select("column_one").from_("table_one").where("column_one")


def test_where_opens_condition(where_builder: Select) -> None:
    assert where_builder.render() == "SELECT column_one FROM table_one WHERE column_one"
    assert where_builder.condition_state is ConditionState.OPEN


def test_where_without_select_raises(builder: Select) -> None:
    with pytest.raises(NoPreviousSelectStatementError):
        builder.where("column_one")


def test_where_empty_column_raises(builder: Select) -> None:
    builder.select("column_one")

    with pytest.raises(InvalidColumnNameError, match="Invalid WHERE statement column name."):
        builder.where("")


def test_where_twice_raises(where_builder: Select) -> None:
    where_builder.equals_to(1)

    with pytest.raises(MultipleWhereStatementError):
        where_builder.where("column_two")

    assert where_builder.render() == "SELECT column_one FROM table_one WHERE column_one = 1"


def test_chained_where() -> None:
    """Test the chained WHERE scenario."""
    query = (
        Select()
        .select(("column_one", "co"))
        .from_("t")
        .where("column_one")
        .equals_to(2)
        .and_("column_two")
        .equals_to(5)
        .render()
    )

    assert "WHERE column_one = 2 AND column_two = 5" in query


def test_equals_to_quotes_strings(where_builder: Select) -> None:
    where_builder.equals_to("x")

    assert where_builder.render().endswith("WHERE column_one = 'x'")


def test_equals_to_leaves_numbers_unquoted(where_builder: Select) -> None:
    where_builder.equals_to(5)

    assert where_builder.render().endswith("WHERE column_one = 5")


def test_string_values_are_not_escaped(where_builder: Select) -> None:
    where_builder.equals_to("O'Brien")

    assert where_builder.render().endswith("= 'O'Brien'")


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (Decimal("1.50"), "= 1.50"),
        (2.5, "= 2.5"),
        (True, "= TRUE"),
        (False, "= FALSE"),
        (None, "= NULL"),
        (Number(7), "= 7"),
        (Text("7"), "= '7'"),
        (RawExpression("other_column"), "= other_column"),
    ],
)
def test_equals_to_value_variants(where_builder: Select, value: Any, expected: str) -> None:
    where_builder.equals_to(value)

    assert where_builder.render().endswith(expected)


@pytest.mark.parametrize(
    ("method", "operator"),
    [
        ("equals_to", "="),
        ("less_than", "<"),
        ("less_than_equals_to", "<="),
        ("greater_than", ">"),
        ("greater_than_equals_to", ">="),
    ],
)
def test_comparison_operators(where_builder: Select, method: str, operator: str) -> None:
    getattr(where_builder, method)(10)

    assert where_builder.render() == f"SELECT column_one FROM table_one WHERE column_one {operator} 10"
    assert where_builder.condition_state is ConditionState.BOUND


@pytest.mark.parametrize("operator", ["!=", "<>"])
def test_not_equals_to(where_builder: Select, operator: str) -> None:
    where_builder.not_equals_to("active", operator)

    assert where_builder.render().endswith(f"WHERE column_one {operator} 'active'")


def test_not_equals_to_defaults_to_bang_equals(where_builder: Select) -> None:
    where_builder.not_equals_to(3)

    assert where_builder.render().endswith("WHERE column_one != 3")


def test_not_equals_to_invalid_operator(where_builder: Select) -> None:
    with pytest.raises(InvalidNotEqualsToOperatorError, match="Invalid not equals to operator: =") as exc_info:
        where_builder.not_equals_to(3, "=")

    assert exc_info.value.code == BuilderErrorCode.INVALID_NOT_EQUALS_TO_OPERATOR
    assert where_builder.render() == "SELECT column_one FROM table_one WHERE column_one"


def test_compare_invalid_operator(where_builder: Select) -> None:
    with pytest.raises(InvalidComparisonOperatorError):
        where_builder.compare("~", 3)


@pytest.mark.parametrize(
    "call",
    [
        lambda b: b.equals_to(1),
        lambda b: b.not_equals_to(1),
        lambda b: b.less_than(1),
        lambda b: b.less_than_equals_to(1),
        lambda b: b.greater_than(1),
        lambda b: b.greater_than_equals_to(1),
        lambda b: b.and_("column_two"),
        lambda b: b.or_("column_two"),
        lambda b: b.not_("column_two"),
        lambda b: b.like("a%"),
        lambda b: b.not_like("a%"),
        lambda b: b.between(1, 2),
        lambda b: b.not_between(1, 2),
        lambda b: b.in_([1, 2]),
        lambda b: b.not_in([1, 2]),
        lambda b: b.is_null(),
        lambda b: b.is_not_null(),
    ],
)
def test_operators_require_where(call: Callable[[Select], Any]) -> None:
    """Test that every condition operator fails before where() has been called."""
    builder = Select().select("column_one").from_("table_one")

    with pytest.raises(NoPreviousWhereStatementError) as exc_info:
        call(builder)

    assert exc_info.value.code == BuilderErrorCode.NO_PREVIOUS_WHERE_STATEMENT
    assert builder.render() == "SELECT column_one FROM table_one"


def test_logical_operators(where_builder: Select) -> None:
    where_builder.equals_to(1).or_("column_two").less_than(3).not_("column_three")

    assert where_builder.render() == (
        "SELECT column_one FROM table_one WHERE column_one = 1 OR column_two < 3 NOT column_three"
    )
    assert where_builder.condition_state is ConditionState.OPEN


@pytest.mark.parametrize("method", ["and_", "or_", "not_"])
def test_logical_operator_empty_column_raises(where_builder: Select, method: str) -> None:
    with pytest.raises(InvalidColumnNameError):
        getattr(where_builder, method)("")


def test_like(where_builder: Select) -> None:
    where_builder.like("%abc%")

    assert where_builder.render().endswith("WHERE column_one LIKE '%abc%'")


def test_not_like(where_builder: Select) -> None:
    where_builder.not_like("abc%")

    assert where_builder.render().endswith("WHERE column_one NOT LIKE 'abc%'")


@pytest.mark.parametrize("method", ["like", "not_like"])
def test_empty_pattern_raises(where_builder: Select, method: str) -> None:
    with pytest.raises(InvalidPatternError) as exc_info:
        getattr(where_builder, method)("")

    assert exc_info.value.code == BuilderErrorCode.INVALID_PATTERN


def test_between_renders_raw_bounds(where_builder: Select) -> None:
    where_builder.between(1, 10)

    assert where_builder.render().endswith("WHERE column_one BETWEEN 1 AND 10")


def test_between_does_not_quote_strings(where_builder: Select) -> None:
    where_builder.between("'2024-01-01'", "'2024-12-31'")

    assert where_builder.render().endswith("BETWEEN '2024-01-01' AND '2024-12-31'")


def test_not_between(where_builder: Select) -> None:
    where_builder.not_between(5, 6)

    assert where_builder.render().endswith("WHERE column_one NOT BETWEEN 5 AND 6")


def test_in_list(where_builder: Select) -> None:
    where_builder.in_([1, 2, 3])

    assert where_builder.render().endswith("WHERE column_one IN (1, 2, 3)")


def test_in_list_strings_render_as_given(where_builder: Select) -> None:
    where_builder.in_(["'a'", "b"])

    assert where_builder.render().endswith("IN ('a', b)")


def test_not_in_list(where_builder: Select) -> None:
    where_builder.not_in((1, 2, 3))

    assert where_builder.render().endswith("WHERE column_one NOT IN (1, 2, 3)")


def test_in_subquery_builder(where_builder: Select) -> None:
    subquery = Select().select("id").from_("other")

    where_builder.in_(subquery)

    assert where_builder.render().endswith("WHERE column_one IN (SELECT id FROM other)")


def test_in_empty_list_raises(where_builder: Select) -> None:
    with pytest.raises(InvalidInListError):
        where_builder.in_([])


def test_null_checks(where_builder: Select) -> None:
    where_builder.is_null().and_("column_two").is_not_null()

    assert where_builder.render().endswith("WHERE column_one IS NULL AND column_two IS NOT NULL")


def test_operators_on_bound_condition_still_append(where_builder: Select) -> None:
    where_builder.is_not_null().equals_to(1)

    assert where_builder.render().endswith("WHERE column_one IS NOT NULL = 1")


@pytest.mark.parametrize("method", ["and_", "or_", "not_"])
def test_logical_operator_needs_bound_condition(where_builder: Select, method: str) -> None:
    """Test that a logical operator is rejected while the previous column still waits for its operator."""
    with pytest.raises(NoPreviousWhereStatementError, match="pending column") as exc_info:
        getattr(where_builder, method)("column_two")

    assert exc_info.value.code == BuilderErrorCode.NO_PREVIOUS_WHERE_STATEMENT
    assert where_builder.render() == "SELECT column_one FROM table_one WHERE column_one"
    assert where_builder.condition_state is ConditionState.OPEN


def test_logical_operator_after_logical_operator_raises(where_builder: Select) -> None:
    where_builder.equals_to(1).and_("column_two")

    with pytest.raises(NoPreviousWhereStatementError):
        where_builder.or_("column_three")

    assert where_builder.render().endswith("WHERE column_one = 1 AND column_two")
