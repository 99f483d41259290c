"""Fluent SELECT statement builder."""

from dataclasses import dataclass

from querychain.builder._base import QueryBuilder
from querychain.builder.mixins import (
    FromClauseMixin,
    GroupByClauseMixin,
    HavingClauseMixin,
    JoinClauseMixin,
    LimitOffsetClauseMixin,
    OrderByClauseMixin,
    SelectColumnsMixin,
    SetOperationMixin,
    WhereClauseMixin,
)

__all__ = ("Select",)


@dataclass
class Select(
    QueryBuilder,
    SelectColumnsMixin,
    FromClauseMixin,
    WhereClauseMixin,
    JoinClauseMixin,
    HavingClauseMixin,
    GroupByClauseMixin,
    OrderByClauseMixin,
    LimitOffsetClauseMixin,
    SetOperationMixin,
):
    """Builds SELECT statements one clause at a time.

    Example:
        ```python
        query = (
            Select()
            .select(("column_one", "co"), ("column_two", "ct"))
            .from_("table_one")
            .where("column_one")
            .equals_to(2)
            .render()
        )
        # SELECT column_one AS co, column_two AS ct FROM table_one WHERE column_one = 2
        ```
    """
