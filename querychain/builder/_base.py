"""Statement builder base with clause bookkeeping and rendering.

This module provides the shared machinery behind the fluent builders: the
ordered clause list, the open WHERE/HAVING condition cursor and the
rendering entry points.
"""

import copy
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Optional

import sqlglot
from sqlglot import exp
from sqlglot.dialects.dialect import DialectType
from sqlglot.errors import ParseError as SQLGlotParseError
from typing_extensions import Self

from querychain.builder._nodes import (
    Clause,
    ConditionClause,
    FromClause,
    HavingClause,
    SelectClause,
    WhereClause,
)
from querychain.config import BuilderConfig
from querychain.exceptions import (
    NoPreviousSelectStatementError,
    NoPreviousWhereStatementError,
    SQLParsingError,
)
from querychain.utils.logging import get_logger, log_builder_event

if TYPE_CHECKING:
    from collections.abc import Sequence

__all__ = (
    "ConditionState",
    "QueryBuilder",
    "RenderedQuery",
)

logger = get_logger("builder")


class ConditionState(Enum):
    """Where the open WHERE/HAVING condition stands.

    ``OPEN`` means a column is waiting for its operator, ``BOUND`` means the
    last column already has one.
    """

    NONE = "none"
    OPEN = "open"
    BOUND = "bound"


@dataclass(frozen=True)
class RenderedQuery:
    """A rendered SQL statement."""

    sql: str
    dialect: Optional[DialectType] = None

    def __str__(self) -> str:
        return self.sql


@dataclass
class QueryBuilder:
    """Base class for SQL statement builders.

    Holds the ordered clause nodes of one statement. Instances are not safe to
    share between threads; build subqueries and union operands with separate
    instances.
    """

    config: BuilderConfig = field(default_factory=BuilderConfig)
    _clauses: "list[Clause]" = field(default_factory=list, init=False, repr=False, compare=False)
    _select: Optional[SelectClause] = field(default=None, init=False, repr=False, compare=False)
    _from: Optional[FromClause] = field(default=None, init=False, repr=False, compare=False)
    _where: Optional[WhereClause] = field(default=None, init=False, repr=False, compare=False)
    _having: Optional[HavingClause] = field(default=None, init=False, repr=False, compare=False)
    _condition: Optional[ConditionClause] = field(default=None, init=False, repr=False, compare=False)
    _condition_state: ConditionState = field(default=ConditionState.NONE, init=False, repr=False, compare=False)

    @property
    def dialect(self) -> Optional[DialectType]:
        return self.config.dialect

    @property
    def condition_state(self) -> ConditionState:
        return self._condition_state

    @property
    def clauses(self) -> "Sequence[Clause]":
        """The clause nodes in rendering order."""
        return tuple(self._clauses)

    def _require_select(self, clause_name: str) -> None:
        if self._select is None:
            msg = f"No previous SELECT statement for {clause_name} statement."
            raise NoPreviousSelectStatementError(msg)

    def _require_condition(self, operator: str) -> ConditionClause:
        """Return the open condition that ``operator`` attaches to.

        Raises:
            NoPreviousWhereStatementError: If no WHERE or HAVING condition is open.
        """
        if self._condition is None:
            msg = f"Operator {operator} must have a previous WHERE statement."
            raise NoPreviousWhereStatementError(msg)
        return self._condition

    def _append_clause(self, clause: Clause) -> None:
        self._clauses.append(clause)
        if isinstance(clause, ConditionClause):
            self._condition = clause
            self._condition_state = ConditionState.OPEN
        elif self.config.strict_fragments:
            self._condition = None
            self._condition_state = ConditionState.NONE
        log_builder_event(
            logger, "Appended %s clause", clause.keyword, clause=clause.keyword, clause_count=len(self._clauses)
        )

    def _extend_condition(self, operator: str, text: str, state: ConditionState) -> None:
        """Append ``text`` to the open condition and move the condition cursor to ``state``."""
        condition = self._require_condition(operator)
        condition.extend(text)
        self._condition_state = state
        log_builder_event(logger, "Extended %s clause with %s", condition.keyword, operator, clause=condition.keyword)

    def render(self) -> str:
        """Render the accumulated clauses to SQL text.

        Returns:
            The SQL statement built so far. Calling it again without further
            changes returns the same text.
        """
        return " ".join(clause.render() for clause in self._clauses)

    def to_sql(self) -> str:
        return self.render()

    def __str__(self) -> str:
        return self.render()

    def build(self) -> RenderedQuery:
        """Render the statement together with the configured dialect.

        Returns:
            RenderedQuery: The SQL text and dialect.
        """
        sql = self.render()
        log_builder_event(logger, "Rendered statement", sql=sql, dialect=self.dialect)
        return RenderedQuery(sql=sql, dialect=self.dialect)

    def to_expression(self) -> exp.Expression:
        """Parse the rendered statement into a sqlglot expression tree.

        The builder never parses its own text while assembling it; this is a
        hand-off for callers that want to inspect or transpile the result.

        Raises:
            SQLParsingError: If sqlglot can't parse the rendered text.

        Returns:
            exp.Expression: The parsed statement.
        """
        sql = self.render()
        if not sql:
            msg = "Cannot parse an empty statement."
            raise SQLParsingError(msg)
        try:
            return sqlglot.parse_one(sql, read=self.dialect)
        except SQLGlotParseError as e:
            msg = f"Failed to parse rendered statement: {e!s}"
            raise SQLParsingError(msg) from e

    def copy(self) -> Self:
        """Return an independent builder holding the same clauses and cursors."""
        return copy.deepcopy(self)
