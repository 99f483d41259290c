from typing import TYPE_CHECKING, Any, Union, cast

from mypy_extensions import trait
from typing_extensions import Self

from querychain.builder._base import ConditionState
from querychain.builder._nodes import WhereClause
from querychain.exceptions import (
    InvalidColumnNameError,
    InvalidComparisonOperatorError,
    InvalidInListError,
    InvalidNotEqualsToOperatorError,
    InvalidPatternError,
    MultipleWhereStatementError,
    NoPreviousWhereStatementError,
)
from querychain.typing import Text, is_builder, to_raw, to_value

if TYPE_CHECKING:
    from collections.abc import Iterable

    from querychain.builder.protocols import BuilderProtocol
    from querychain.typing import ValueInput

__all__ = ("COMPARISON_OPERATORS", "NOT_EQUALS_OPERATORS", "WhereClauseMixin")

NOT_EQUALS_OPERATORS = frozenset({"!=", "<>"})
COMPARISON_OPERATORS = frozenset({"=", "<", "<=", ">", ">=", *NOT_EQUALS_OPERATORS})


@trait
class WhereClauseMixin:
    """Mixin providing the WHERE clause and the condition operators.

    Operators attach to the most recently opened condition, which is either
    the WHERE clause or a HAVING clause.
    """

    __slots__ = ()

    def where(self, column: str) -> Self:
        """Open a ``WHERE column`` condition.

        Raises:
            NoPreviousSelectStatementError: If SELECT has not been added yet.
            InvalidColumnNameError: If ``column`` is empty.
            MultipleWhereStatementError: If the statement already has a WHERE clause.

        Returns:
            The current builder instance for method chaining.
        """
        builder = cast("BuilderProtocol", self)
        builder._require_select("WHERE")
        if not column:
            msg = "Invalid WHERE statement column name."
            raise InvalidColumnNameError(msg)
        if builder._where is not None:
            msg = "Statement already has a WHERE clause, use and_() or or_() to extend it."
            raise MultipleWhereStatementError(msg)
        clause = WhereClause(column)
        builder._append_clause(clause)
        builder._where = clause
        return self

    # Comparison operators

    def compare(self, operator: str, value: "ValueInput") -> Self:
        """Append ``<operator> value`` to the open condition.

        Strings are rendered single-quoted, numbers and raw expressions as-is.

        Raises:
            NoPreviousWhereStatementError: If no condition is open.
            InvalidComparisonOperatorError: If ``operator`` is not a supported comparison.

        Returns:
            The current builder instance for method chaining.
        """
        builder = cast("BuilderProtocol", self)
        builder._require_condition(operator)
        if operator not in COMPARISON_OPERATORS:
            msg = f"Invalid comparison operator: {operator}"
            raise InvalidComparisonOperatorError(msg)
        builder._extend_condition(operator, f"{operator} {to_value(value).render()}", ConditionState.BOUND)
        return self

    def equals_to(self, value: "ValueInput") -> Self:
        return self.compare("=", value)

    def not_equals_to(self, value: "ValueInput", operator: str = "!=") -> Self:
        """Append a ``!=`` or ``<>`` comparison.

        Raises:
            NoPreviousWhereStatementError: If no condition is open.
            InvalidNotEqualsToOperatorError: If ``operator`` is neither ``!=`` nor ``<>``.

        Returns:
            The current builder instance for method chaining.
        """
        builder = cast("BuilderProtocol", self)
        builder._require_condition(operator)
        if operator not in NOT_EQUALS_OPERATORS:
            msg = f"Invalid not equals to operator: {operator}"
            raise InvalidNotEqualsToOperatorError(msg)
        return self.compare(operator, value)

    def less_than(self, value: "ValueInput") -> Self:
        return self.compare("<", value)

    def less_than_equals_to(self, value: "ValueInput") -> Self:
        return self.compare("<=", value)

    def greater_than(self, value: "ValueInput") -> Self:
        return self.compare(">", value)

    def greater_than_equals_to(self, value: "ValueInput") -> Self:
        return self.compare(">=", value)

    # Logical operators

    def _logical(self, keyword: str, column: str) -> Self:
        builder = cast("BuilderProtocol", self)
        condition = builder._require_condition(keyword)
        if not column:
            msg = f"Invalid {keyword} statement column name."
            raise InvalidColumnNameError(msg)
        if builder._condition_state is not ConditionState.BOUND:
            msg = f"Operator {keyword} needs a completed condition, {condition.render()!r} has a pending column."
            raise NoPreviousWhereStatementError(msg)
        builder._extend_condition(keyword, f"{keyword} {column}", ConditionState.OPEN)
        return self

    def and_(self, column: str) -> Self:
        """Continue the open condition with ``AND column``."""
        return self._logical("AND", column)

    def or_(self, column: str) -> Self:
        """Continue the open condition with ``OR column``."""
        return self._logical("OR", column)

    def not_(self, column: str) -> Self:
        """Continue the open condition with ``NOT column``."""
        return self._logical("NOT", column)

    # Pattern matching

    def _pattern(self, keyword: str, pattern: str) -> Self:
        builder = cast("BuilderProtocol", self)
        builder._require_condition(keyword)
        if not pattern:
            msg = f"Invalid {keyword} pattern."
            raise InvalidPatternError(msg)
        builder._extend_condition(keyword, f"{keyword} {Text(pattern).render()}", ConditionState.BOUND)
        return self

    def like(self, pattern: str) -> Self:
        return self._pattern("LIKE", pattern)

    def not_like(self, pattern: str) -> Self:
        return self._pattern("NOT LIKE", pattern)

    # Ranges

    def _range(self, keyword: str, start: Any, end: Any) -> Self:
        builder = cast("BuilderProtocol", self)
        builder._require_condition(keyword)
        builder._extend_condition(keyword, f"{keyword} {to_raw(start)} AND {to_raw(end)}", ConditionState.BOUND)
        return self

    def between(self, start: Any, end: Any) -> Self:
        """Append ``BETWEEN start AND end``.

        Bounds are rendered unquoted; quote string bounds before passing them.
        """
        return self._range("BETWEEN", start, end)

    def not_between(self, start: Any, end: Any) -> Self:
        return self._range("NOT BETWEEN", start, end)

    # Lists

    def _list(self, keyword: str, values: "Union[Iterable[Any], str, Any]") -> Self:
        builder = cast("BuilderProtocol", self)
        builder._require_condition(keyword)
        if is_builder(values):
            items = values.render()
        elif isinstance(values, str):
            items = values
        else:
            items = ", ".join(to_raw(value) for value in values)
        if not items:
            msg = f"{keyword} list can't be empty."
            raise InvalidInListError(msg)
        builder._extend_condition(keyword, f"{keyword} ({items})", ConditionState.BOUND)
        return self

    def in_(self, values: "Union[Iterable[Any], str, Any]") -> Self:
        """Append ``IN (v1, v2, ...)``.

        Values are rendered unquoted. A builder or a string is treated as a
        subquery and placed inside the parentheses as-is.
        """
        return self._list("IN", values)

    def not_in(self, values: "Union[Iterable[Any], str, Any]") -> Self:
        return self._list("NOT IN", values)

    # Null checks

    def is_null(self) -> Self:
        builder = cast("BuilderProtocol", self)
        builder._extend_condition("IS NULL", "IS NULL", ConditionState.BOUND)
        return self

    def is_not_null(self) -> Self:
        builder = cast("BuilderProtocol", self)
        builder._extend_condition("IS NOT NULL", "IS NOT NULL", ConditionState.BOUND)
        return self
