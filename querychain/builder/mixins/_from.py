from typing import TYPE_CHECKING, Any, Optional, Union, cast

from mypy_extensions import trait
from typing_extensions import Self

from querychain.builder._nodes import FromClause
from querychain.exceptions import InvalidAliasError, InvalidTableNameError, MultipleFromStatementError
from querychain.typing import TableRef, is_builder

if TYPE_CHECKING:
    from querychain.builder.protocols import BuilderProtocol

__all__ = ("FromClauseMixin",)


@trait
class FromClauseMixin:
    """Mixin providing the FROM clause for SELECT builders."""

    __slots__ = ()

    def _validate_from(self, table_name: str) -> None:
        builder = cast("BuilderProtocol", self)
        builder._require_select("FROM")
        if not table_name:
            raise InvalidTableNameError
        if builder._from is not None:
            raise MultipleFromStatementError

    def from_(self, table_name: str, alias: Optional[str] = None) -> Self:
        """Add a ``FROM table [AS alias]`` clause.

        Raises:
            NoPreviousSelectStatementError: If SELECT has not been added yet.
            InvalidTableNameError: If ``table_name`` is empty.
            MultipleFromStatementError: If the statement already has a FROM clause.

        Returns:
            The current builder instance for method chaining.
        """
        self._validate_from(table_name)
        builder = cast("BuilderProtocol", self)
        clause = FromClause(TableRef(table_name, alias or None))
        builder._append_clause(clause)
        builder._from = clause
        return self

    def from_subquery(self, subquery: "Union[str, Any]", alias: Optional[str]) -> Self:
        """Add a ``FROM ( subquery ) AS alias`` clause.

        Args:
            subquery: Rendered SQL text or another builder, rendered as-is.
            alias: Mandatory alias for the derived table.

        Raises:
            InvalidAliasError: If ``alias`` is missing.
            MultipleFromStatementError: If the statement already has a FROM clause.

        Returns:
            The current builder instance for method chaining.
        """
        if not alias:
            msg = "FROM alias is mandatory when it's used with sub-query."
            raise InvalidAliasError(msg)
        subquery_sql = subquery.render() if is_builder(subquery) else subquery
        self._validate_from(subquery_sql)
        builder = cast("BuilderProtocol", self)
        clause = FromClause(TableRef(subquery_sql, alias, is_subquery=True))
        builder._append_clause(clause)
        builder._from = clause
        return self
