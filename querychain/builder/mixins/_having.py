from typing import TYPE_CHECKING, cast

from mypy_extensions import trait
from typing_extensions import Self

from querychain.builder._nodes import HavingClause
from querychain.exceptions import InvalidHavingStatementError

if TYPE_CHECKING:
    from querychain.builder.protocols import BuilderProtocol

__all__ = ("HavingClauseMixin",)


@trait
class HavingClauseMixin:
    """Mixin providing the HAVING clause."""

    __slots__ = ()

    def having(self, expression: str) -> Self:
        """Add ``HAVING expression`` and make it the open condition.

        Comparison and logical operators called next extend this HAVING
        clause, never the WHERE clause.

        Raises:
            InvalidHavingStatementError: If ``expression`` is empty or the statement
                already has a HAVING clause.

        Returns:
            The current builder instance for method chaining.
        """
        if not expression:
            msg = "Invalid HAVING statement."
            raise InvalidHavingStatementError(msg)
        builder = cast("BuilderProtocol", self)
        if builder._having is not None:
            msg = "Statement already has a HAVING clause, use and_() or or_() to extend it."
            raise InvalidHavingStatementError(msg)
        clause = HavingClause(expression)
        builder._append_clause(clause)
        builder._having = clause
        return self
