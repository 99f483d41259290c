"""SQL statement builders."""

from querychain.builder._base import ConditionState, QueryBuilder, RenderedQuery
from querychain.builder._nodes import (
    Clause,
    ConditionClause,
    FromClause,
    GroupByClause,
    HavingClause,
    JoinClause,
    LimitClause,
    OrderByClause,
    SelectClause,
    UnionClause,
    WhereClause,
)
from querychain.builder._select import Select

__all__ = (
    "Clause",
    "ConditionClause",
    "ConditionState",
    "FromClause",
    "GroupByClause",
    "HavingClause",
    "JoinClause",
    "LimitClause",
    "OrderByClause",
    "QueryBuilder",
    "RenderedQuery",
    "Select",
    "SelectClause",
    "UnionClause",
    "WhereClause",
)
