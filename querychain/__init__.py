"""querychain: fluent assembly of SQL SELECT statements."""

from querychain import builder, exceptions, typing, utils
from querychain.__metadata__ import __version__
from querychain._sql import SQLFactory, sql
from querychain.builder import ConditionState, QueryBuilder, RenderedQuery, Select
from querychain.config import BuilderConfig
from querychain.exceptions import BuilderErrorCode, QueryChainError, SQLBuilderError, SQLParsingError
from querychain.typing import ColumnSpec, JoinType, Number, OrderSpec, RawExpression, SortDirection, TableRef, Text
from querychain.utils.logging import configure_logging, get_logger

__all__ = (
    "BuilderConfig",
    "BuilderErrorCode",
    "ColumnSpec",
    "ConditionState",
    "JoinType",
    "Number",
    "OrderSpec",
    "QueryBuilder",
    "QueryChainError",
    "RawExpression",
    "RenderedQuery",
    "SQLBuilderError",
    "SQLFactory",
    "SQLParsingError",
    "Select",
    "SortDirection",
    "TableRef",
    "Text",
    "__version__",
    "builder",
    "configure_logging",
    "exceptions",
    "get_logger",
    "sql",
    "typing",
    "utils",
)
