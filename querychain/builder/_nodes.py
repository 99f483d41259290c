"""Typed clause nodes that make up a statement.

A builder keeps an ordered list of these nodes. Rendering joins each node's
text with single spaces in insertion order, so a clause appended after WHERE
is rendered after WHERE.
"""

from dataclasses import dataclass, field
from typing import Optional

from querychain.typing import ColumnSpec, JoinType, OrderSpec, TableRef

__all__ = (
    "Clause",
    "ConditionClause",
    "FromClause",
    "GroupByClause",
    "HavingClause",
    "JoinClause",
    "LimitClause",
    "OrderByClause",
    "SelectClause",
    "UnionClause",
    "WhereClause",
)


class Clause:
    """Base class for statement clauses."""

    keyword: str = ""

    def render(self) -> str:
        raise NotImplementedError


@dataclass
class SelectClause(Clause):
    columns: "tuple[ColumnSpec, ...]"
    keyword = "SELECT"

    def render(self) -> str:
        return f"SELECT {', '.join(column.render() for column in self.columns)}"


@dataclass
class FromClause(Clause):
    target: TableRef
    keyword = "FROM"

    def render(self) -> str:
        return f"FROM {self.target.render()}"


@dataclass
class ConditionClause(Clause):
    """A WHERE or HAVING condition that operators keep extending in place."""

    head: str
    parts: "list[str]" = field(default_factory=list)

    def extend(self, text: str) -> None:
        self.parts.append(text)

    def render(self) -> str:
        return " ".join((self.keyword, self.head, *self.parts))


@dataclass
class WhereClause(ConditionClause):
    keyword = "WHERE"


@dataclass
class HavingClause(ConditionClause):
    keyword = "HAVING"


@dataclass
class JoinClause(Clause):
    """``<TYPE> JOIN target ON right = left``.

    The ON columns are emitted right column first.
    """

    join_type: JoinType
    target: TableRef
    left_column: str
    right_column: str
    keyword = "JOIN"

    def render(self) -> str:
        return (
            f"{self.join_type.value} JOIN {self.target.render()} ON {self.right_column} = {self.left_column}"
        )


@dataclass
class GroupByClause(Clause):
    columns: "tuple[str, ...]"
    keyword = "GROUP BY"

    def render(self) -> str:
        return f"GROUP BY {', '.join(self.columns)}"


@dataclass
class OrderByClause(Clause):
    specs: "tuple[OrderSpec, ...]"
    keyword = "ORDER BY"

    def render(self) -> str:
        return f"ORDER BY {', '.join(spec.render() for spec in self.specs)}"


@dataclass
class LimitClause(Clause):
    limit: int
    offset: Optional[int] = None
    keyword = "LIMIT"

    def render(self) -> str:
        if self.offset is None:
            return f"LIMIT {self.limit}"
        return f"LIMIT {self.limit} OFFSET {self.offset}"


@dataclass
class UnionClause(Clause):
    query: str
    union_all: bool = False
    keyword = "UNION"

    def render(self) -> str:
        if self.union_all:
            return f"UNION ALL {self.query}"
        return f"UNION {self.query}"
