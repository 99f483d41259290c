"""Configuration for statement builders."""

from dataclasses import dataclass
from typing import Optional

from sqlglot.dialects.dialect import DialectType

__all__ = ("BuilderConfig",)


@dataclass
class BuilderConfig:
    """Configuration for builder behavior."""

    dialect: Optional[DialectType] = None
    """Dialect handed to sqlglot by ``to_expression()`` and recorded on ``build()`` results."""
    validate_pagination: bool = True
    """Reject negative or non-integer LIMIT/OFFSET values."""
    strict_fragments: bool = True
    """Close the open WHERE/HAVING condition as soon as another clause is appended.

    When disabled, condition operators keep binding to the last WHERE or HAVING
    clause even after unrelated clauses were added.
    """
