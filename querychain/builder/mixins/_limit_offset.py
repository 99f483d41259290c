from typing import TYPE_CHECKING, Any, Optional, cast

from mypy_extensions import trait
from typing_extensions import Self

from querychain.builder._nodes import LimitClause
from querychain.exceptions import InvalidPaginationError

if TYPE_CHECKING:
    from querychain.builder.protocols import BuilderProtocol

__all__ = ("LimitOffsetClauseMixin",)


def _is_non_negative_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


@trait
class LimitOffsetClauseMixin:
    """Mixin providing LIMIT and OFFSET clauses."""

    __slots__ = ()

    def pagination(self, limit: int, offset: Optional[int] = None) -> Self:
        """Add ``LIMIT limit [OFFSET offset]``.

        Raises:
            InvalidPaginationError: If pagination validation is enabled and a value
                is not a non-negative integer.

        Returns:
            The current builder instance for method chaining.
        """
        builder = cast("BuilderProtocol", self)
        if builder.config.validate_pagination and (
            not _is_non_negative_int(limit) or (offset is not None and not _is_non_negative_int(offset))
        ):
            msg = f"LIMIT and OFFSET must be non-negative integers, got limit={limit!r}, offset={offset!r}."
            raise InvalidPaginationError(msg)
        builder._append_clause(LimitClause(limit, offset))
        return self

    def limit(self, value: int) -> Self:
        return self.pagination(value)
