"""Factory object for creating statement builders.

Example:
    ```python
    from querychain import sql

    query = sql.select(("id", "user_id"), "name").from_("users").where("age").greater_than(18)
    ```
"""

from dataclasses import replace
from typing import TYPE_CHECKING, Any, Optional

from sqlglot.dialects.dialect import DialectType

from querychain.builder import Select
from querychain.config import BuilderConfig
from querychain.typing import ColumnSpec, Number, OrderSpec, RawExpression, SortDirection, TableRef, Text, is_builder

if TYPE_CHECKING:
    from querychain.typing import ColumnInput

__all__ = ("SQLFactory", "sql")


class SQLFactory:
    """Factory for statement builders and literal helpers."""

    def __init__(self, config: Optional[BuilderConfig] = None, dialect: Optional[DialectType] = None) -> None:
        """Initialize the SQL factory.

        Args:
            config: Default configuration handed to every builder.
            dialect: Default SQL dialect, overriding the one in ``config``.
        """
        config = config or BuilderConfig()
        if dialect is not None:
            config = replace(config, dialect=dialect)
        self.config = config

    def select(self, *columns: "ColumnInput", dialect: Optional[DialectType] = None) -> Select:
        """Create a SELECT builder.

        Args:
            *columns: Columns for the SELECT clause. With none, the SELECT
                clause is left for the caller to add.
            dialect: SQL dialect to use (overrides factory default).

        Returns:
            Select: A new builder.
        """
        config = replace(self.config, dialect=dialect) if dialect is not None else replace(self.config)
        builder = Select(config=config)
        if columns:
            builder.select(*columns)
        return builder

    @staticmethod
    def raw(sql_text: str) -> RawExpression:
        """Mark text as a raw SQL expression that renders unquoted."""
        return RawExpression(sql_text)

    @staticmethod
    def text(value: str) -> Text:
        return Text(value)

    @staticmethod
    def number(value: Any) -> Number:
        return Number(value)

    @staticmethod
    def column(name: str, alias: Optional[str] = None) -> ColumnSpec:
        return ColumnSpec(name, alias)

    @staticmethod
    def table(source: str, alias: Optional[str] = None) -> TableRef:
        return TableRef(source, alias)

    @staticmethod
    def subquery(source: Any, alias: str) -> TableRef:
        """Build a subquery join target from rendered SQL or a builder."""
        rendered = source.render() if is_builder(source) else source
        return TableRef(rendered, alias, is_subquery=True)

    @staticmethod
    def asc(column: str) -> OrderSpec:
        return OrderSpec(column, SortDirection.ASC)

    @staticmethod
    def desc(column: str) -> OrderSpec:
        return OrderSpec(column, SortDirection.DESC)


sql = SQLFactory()
