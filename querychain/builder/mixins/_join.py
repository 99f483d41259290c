from typing import TYPE_CHECKING, Any, Optional, Union, cast

from mypy_extensions import trait
from typing_extensions import Self, TypeAlias

from querychain.builder._nodes import JoinClause
from querychain.exceptions import InvalidJoinInfoError
from querychain.typing import JoinType, TableRef, is_builder

if TYPE_CHECKING:
    from collections.abc import Sequence

    from querychain.builder.protocols import BuilderProtocol

    JoinTarget: TypeAlias = Union[TableRef, Sequence[Any]]
    JoinOn: TypeAlias = Sequence[str]

__all__ = ("JoinClauseMixin",)


def _is_pair(value: Any) -> bool:
    return isinstance(value, (list, tuple)) and len(value) == 2


def _parse_target(target: Any, subquery: bool) -> Optional[TableRef]:
    """Normalize a join target into a :class:`TableRef`.

    Returns:
        The table reference, or ``None`` if the target is not a well-formed
        ``(table, alias)`` pair.
    """
    if isinstance(target, TableRef):
        source, alias = target.source, target.alias
        subquery = subquery or target.is_subquery
    elif _is_pair(target):
        source, alias = target
    else:
        return None
    if is_builder(source):
        source = source.render()
    if not source or not alias or not isinstance(source, str) or not isinstance(alias, str):
        return None
    return TableRef(source, alias, is_subquery=subquery)


@trait
class JoinClauseMixin:
    """Mixin providing JOIN clauses.

    Joins have no prerequisite clause and are appended at the current end of
    the statement.
    """

    __slots__ = ()

    def join(
        self,
        join_type: Union[JoinType, str],
        target: "JoinTarget",
        on: "JoinOn",
        subquery: bool = False,
    ) -> Self:
        """Add ``<TYPE> JOIN target AS alias ON right = left``.

        Args:
            join_type: One of the :class:`~querychain.typing.JoinType` keywords.
            target: ``(table, alias)`` pair or :class:`~querychain.typing.TableRef`.
                With ``subquery`` set, ``table`` is rendered SQL or a builder.
            on: ``(left_column, right_column)`` pair.
            subquery: Wrap the target in parentheses.

        Raises:
            InvalidJoinInfoError: If the join type, target or ON columns are malformed.

        Returns:
            The current builder instance for method chaining.
        """
        try:
            resolved_type = JoinType(join_type.upper() if isinstance(join_type, str) else join_type)
        except ValueError as e:
            msg = f"Invalid {join_type} JOIN info."
            raise InvalidJoinInfoError(msg) from e
        table_ref = _parse_target(target, subquery)
        if table_ref is None or not _is_pair(on) or not all(isinstance(c, str) and c for c in on):
            msg = f"Invalid {resolved_type.value} JOIN info."
            raise InvalidJoinInfoError(msg)
        left_column, right_column = on
        builder = cast("BuilderProtocol", self)
        builder._append_clause(JoinClause(resolved_type, table_ref, left_column, right_column))
        return self

    def inner_join(self, target: "JoinTarget", on: "JoinOn") -> Self:
        return self.join(JoinType.INNER, target, on)

    def inner_join_sub(self, target: "JoinTarget", on: "JoinOn") -> Self:
        return self.join(JoinType.INNER, target, on, subquery=True)

    def left_join(self, target: "JoinTarget", on: "JoinOn") -> Self:
        return self.join(JoinType.LEFT, target, on)

    def left_join_sub(self, target: "JoinTarget", on: "JoinOn") -> Self:
        return self.join(JoinType.LEFT, target, on, subquery=True)

    def right_join(self, target: "JoinTarget", on: "JoinOn") -> Self:
        return self.join(JoinType.RIGHT, target, on)

    def right_join_sub(self, target: "JoinTarget", on: "JoinOn") -> Self:
        return self.join(JoinType.RIGHT, target, on, subquery=True)

    def full_join(self, target: "JoinTarget", on: "JoinOn") -> Self:
        return self.join(JoinType.FULL, target, on)

    def full_join_sub(self, target: "JoinTarget", on: "JoinOn") -> Self:
        return self.join(JoinType.FULL, target, on, subquery=True)

    def cross_join(self, target: "JoinTarget", on: "JoinOn") -> Self:
        return self.join(JoinType.CROSS, target, on)

    def cross_join_sub(self, target: "JoinTarget", on: "JoinOn") -> Self:
        return self.join(JoinType.CROSS, target, on, subquery=True)

    def self_join(self, target: "JoinTarget", on: "JoinOn") -> Self:
        return self.join(JoinType.SELF, target, on)

    def self_join_sub(self, target: "JoinTarget", on: "JoinOn") -> Self:
        return self.join(JoinType.SELF, target, on, subquery=True)

    def natural_join(self, target: "JoinTarget", on: "JoinOn") -> Self:
        return self.join(JoinType.NATURAL, target, on)

    def natural_join_sub(self, target: "JoinTarget", on: "JoinOn") -> Self:
        return self.join(JoinType.NATURAL, target, on, subquery=True)
