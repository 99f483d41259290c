from typing import TYPE_CHECKING, cast

from mypy_extensions import trait
from typing_extensions import Self

from querychain.builder._nodes import SelectClause
from querychain.exceptions import InvalidColumnNameError, MultipleSelectStatementError
from querychain.typing import to_column_spec

if TYPE_CHECKING:
    from querychain.builder.protocols import BuilderProtocol
    from querychain.typing import ColumnInput

__all__ = ("SelectColumnsMixin",)


@trait
class SelectColumnsMixin:
    """Mixin providing the SELECT column list."""

    __slots__ = ()

    def select(self, *columns: "ColumnInput") -> Self:
        """Add the SELECT clause.

        Args:
            *columns: Column names, ``(name, alias)`` pairs or :class:`~querychain.typing.ColumnSpec` instances.

        Raises:
            InvalidColumnNameError: If no column is given or any column has an empty name.
            MultipleSelectStatementError: If the statement already has a SELECT clause.

        Returns:
            The current builder instance for method chaining.
        """
        builder = cast("BuilderProtocol", self)
        if builder._select is not None:
            raise MultipleSelectStatementError
        if not columns:
            msg = "Invalid SELECT statement columns."
            raise InvalidColumnNameError(msg)
        specs = []
        for column in columns:
            spec = to_column_spec(column)
            if spec is None:
                msg = "Invalid SELECT statement columns."
                raise InvalidColumnNameError(msg)
            specs.append(spec)
        clause = SelectClause(tuple(specs))
        builder._append_clause(clause)
        builder._select = clause
        return self
