from typing import TYPE_CHECKING, cast

from mypy_extensions import trait
from typing_extensions import Self

from querychain.builder._nodes import GroupByClause
from querychain.exceptions import InvalidGroupByColumnsError

if TYPE_CHECKING:
    from querychain.builder.protocols import BuilderProtocol

__all__ = ("GroupByClauseMixin",)


@trait
class GroupByClauseMixin:
    """Mixin providing GROUP BY clause."""

    __slots__ = ()

    def group_by(self, *columns: str) -> Self:
        """Add ``GROUP BY c1, c2, ...``.

        Raises:
            InvalidGroupByColumnsError: If no column is given or a column is empty.

        Returns:
            The current builder instance for method chaining.
        """
        if not columns or not all(isinstance(column, str) and column for column in columns):
            msg = "Invalid GROUP BY columns."
            raise InvalidGroupByColumnsError(msg)
        builder = cast("BuilderProtocol", self)
        builder._append_clause(GroupByClause(tuple(columns)))
        return self
