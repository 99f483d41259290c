"""Value and clause descriptor types shared by the builders."""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import TYPE_CHECKING, Any, Optional, Union

from typing_extensions import TypeAlias, TypeGuard

if TYPE_CHECKING:
    from collections.abc import Sequence

__all__ = (
    "ColumnInput",
    "ColumnSpec",
    "JoinType",
    "Number",
    "OrderInput",
    "OrderSpec",
    "RawExpression",
    "SQLValue",
    "SortDirection",
    "TableRef",
    "Text",
    "ValueInput",
    "is_builder",
    "to_column_spec",
    "to_order_spec",
    "to_raw",
    "to_value",
)


@dataclass(frozen=True)
class Number:
    """A numeric literal, rendered unquoted."""

    value: Union[int, float, Decimal]

    def render(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Text:
    """A string literal, rendered inside single quotes.

    The value is not escaped. Embedded quotes are the caller's responsibility.
    """

    value: str

    def render(self) -> str:
        return f"'{self.value}'"


@dataclass(frozen=True)
class RawExpression:
    """Verbatim SQL text such as a column reference or function call."""

    sql: str

    def render(self) -> str:
        return self.sql


SQLValue: TypeAlias = Union[Number, Text, RawExpression]
ValueInput: TypeAlias = Union[SQLValue, str, int, float, Decimal, bool, None]


def to_value(value: Any) -> SQLValue:
    """Coerce a Python value into one of the literal variants.

    ``str`` becomes :class:`Text`, numbers become :class:`Number`, ``bool`` and
    ``None`` become the matching SQL keywords. Anything else is rendered with
    ``str()`` as a :class:`RawExpression`.

    Returns:
        The literal variant for ``value``.
    """
    if isinstance(value, (Number, Text, RawExpression)):
        return value
    if isinstance(value, bool):
        return RawExpression("TRUE" if value else "FALSE")
    if value is None:
        return RawExpression("NULL")
    if isinstance(value, (int, float, Decimal)):
        return Number(value)
    if isinstance(value, str):
        return Text(value)
    return RawExpression(str(value))


def to_raw(value: Any) -> str:
    """Render a range or list operand as given, without quoting."""
    if isinstance(value, (Number, Text, RawExpression)):
        return value.render()
    return str(value)


@dataclass(frozen=True)
class ColumnSpec:
    """A SELECT list entry."""

    name: str
    alias: Optional[str] = None

    def render(self) -> str:
        if self.alias:
            return f"{self.name} AS {self.alias}"
        return self.name


ColumnInput: TypeAlias = "Union[ColumnSpec, str, Sequence[Optional[str]]]"


def to_column_spec(column: Any) -> Optional[ColumnSpec]:
    """Normalize a column argument.

    Accepts a :class:`ColumnSpec`, a bare name, or a ``(name,)`` /
    ``(name, alias)`` sequence.

    Returns:
        The column spec, or ``None`` when the input has no usable name.
    """
    if isinstance(column, ColumnSpec):
        return column if column.name else None
    if isinstance(column, str):
        return ColumnSpec(column) if column else None
    if isinstance(column, (list, tuple)) and 1 <= len(column) <= 2:
        name = column[0]
        alias = column[1] if len(column) == 2 else None
        if not name or not isinstance(name, str):
            return None
        return ColumnSpec(name, alias or None)
    return None


@dataclass(frozen=True)
class TableRef:
    """A FROM or JOIN target: a table name or rendered subquery text."""

    source: str
    alias: Optional[str] = None
    is_subquery: bool = False

    def render(self) -> str:
        target = f"( {self.source} )" if self.is_subquery else self.source
        if self.alias:
            return f"{target} AS {self.alias}"
        return target


class JoinType(str, Enum):
    INNER = "INNER"
    LEFT = "LEFT"
    RIGHT = "RIGHT"
    FULL = "FULL"
    CROSS = "CROSS"
    SELF = "SELF"
    NATURAL = "NATURAL"


class SortDirection(str, Enum):
    ASC = "ASC"
    DESC = "DESC"


@dataclass(frozen=True)
class OrderSpec:
    """An ORDER BY entry. No direction means the database default."""

    column: str
    direction: Optional[SortDirection] = None

    def render(self) -> str:
        if self.direction is None:
            return self.column
        return f"{self.column} {self.direction.value}"


OrderInput: TypeAlias = "Union[OrderSpec, str, Sequence[Optional[str]]]"


def to_order_spec(spec: Any) -> Optional[OrderSpec]:
    """Normalize an ORDER BY argument.

    Accepts an :class:`OrderSpec`, a bare column name, or a ``(column,)`` /
    ``(column, direction)`` sequence; direction is matched case-insensitively.

    Returns:
        The order spec, or ``None`` when the column is missing or the direction
        is not ``asc``/``desc``.
    """
    if isinstance(spec, OrderSpec):
        return spec if spec.column else None
    if isinstance(spec, str):
        return OrderSpec(spec) if spec else None
    if isinstance(spec, (list, tuple)) and 1 <= len(spec) <= 2:
        column = spec[0]
        if not column or not isinstance(column, str):
            return None
        raw_direction = spec[1] if len(spec) == 2 else None
        if raw_direction is None or raw_direction == "":
            return OrderSpec(column)
        if isinstance(raw_direction, SortDirection):
            return OrderSpec(column, raw_direction)
        try:
            return OrderSpec(column, SortDirection(str(raw_direction).upper()))
        except ValueError:
            return None
    return None


def is_builder(obj: Any) -> TypeGuard[Any]:
    """Check whether ``obj`` is a statement builder that can be rendered inline."""
    return hasattr(obj, "render") and hasattr(obj, "_clauses")
