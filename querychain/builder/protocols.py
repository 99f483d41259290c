from typing import TYPE_CHECKING, Optional, Protocol

if TYPE_CHECKING:
    from querychain.builder._base import ConditionState
    from querychain.builder._nodes import Clause, ConditionClause, FromClause, HavingClause, SelectClause, WhereClause
    from querychain.config import BuilderConfig

__all__ = ("BuilderProtocol",)


class BuilderProtocol(Protocol):
    config: "BuilderConfig"
    _clauses: "list[Clause]"
    _select: "Optional[SelectClause]"
    _from: "Optional[FromClause]"
    _where: "Optional[WhereClause]"
    _having: "Optional[HavingClause]"
    _condition: "Optional[ConditionClause]"
    _condition_state: "ConditionState"

    def render(self) -> str: ...

    def _require_select(self, clause_name: str) -> None: ...

    def _require_condition(self, operator: str) -> "ConditionClause": ...

    def _append_clause(self, clause: "Clause") -> None: ...

    def _extend_condition(self, operator: str, text: str, state: "ConditionState") -> None: ...
