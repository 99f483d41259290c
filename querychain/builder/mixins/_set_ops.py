from typing import TYPE_CHECKING, Any, Union, cast

from mypy_extensions import trait
from typing_extensions import Self

from querychain.builder._nodes import UnionClause
from querychain.exceptions import InvalidUnionQueryError
from querychain.typing import is_builder

if TYPE_CHECKING:
    from querychain.builder.protocols import BuilderProtocol

__all__ = ("SetOperationMixin",)


@trait
class SetOperationMixin:
    """Mixin providing UNION and UNION ALL.

    The other statement is embedded as rendered text; it is not checked for
    validity.
    """

    __slots__ = ()

    def _set_operation(self, other: "Union[str, Any]", union_all: bool) -> Self:
        keyword = "UNION ALL" if union_all else "UNION"
        query = other.render() if is_builder(other) else other
        if not query or not isinstance(query, str):
            msg = f"Invalid {keyword} query."
            raise InvalidUnionQueryError(msg)
        builder = cast("BuilderProtocol", self)
        builder._append_clause(UnionClause(query, union_all=union_all))
        return self

    def union(self, other: "Union[str, Any]") -> Self:
        """Append ``UNION <other>``.

        Args:
            other: A fully rendered statement or another builder.

        Raises:
            InvalidUnionQueryError: If ``other`` is empty.

        Returns:
            The current builder instance for method chaining.
        """
        return self._set_operation(other, union_all=False)

    def union_all(self, other: "Union[str, Any]") -> Self:
        return self._set_operation(other, union_all=True)
