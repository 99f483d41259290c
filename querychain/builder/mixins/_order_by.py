from typing import TYPE_CHECKING, cast

from mypy_extensions import trait
from typing_extensions import Self

from querychain.builder._nodes import OrderByClause
from querychain.exceptions import InvalidOrderByColumnsError, InvalidOrderColumnNameError
from querychain.typing import to_order_spec

if TYPE_CHECKING:
    from querychain.builder.protocols import BuilderProtocol
    from querychain.typing import OrderInput

__all__ = ("OrderByClauseMixin",)


@trait
class OrderByClauseMixin:
    """Mixin providing ORDER BY clause."""

    __slots__ = ()

    def order_by(self, *items: "OrderInput") -> Self:
        """Add ORDER BY clause.

        Args:
            *items: Column names, ``(column, direction)`` pairs or
                :class:`~querychain.typing.OrderSpec` instances. Without a
                direction no keyword is emitted; ``"desc"`` in any case emits ``DESC``.

        Raises:
            InvalidOrderByColumnsError: If no item is given.
            InvalidOrderColumnNameError: If an item has no column or an unknown direction.

        Returns:
            The current builder instance for method chaining.
        """
        if not items:
            msg = "Invalid ORDER BY columns."
            raise InvalidOrderByColumnsError(msg)
        specs = []
        for item in items:
            spec = to_order_spec(item)
            if spec is None:
                msg = "Invalid ORDER BY column name."
                raise InvalidOrderColumnNameError(msg)
            specs.append(spec)
        builder = cast("BuilderProtocol", self)
        builder._append_clause(OrderByClause(tuple(specs)))
        return self
