from enum import IntEnum
from typing import Any, Optional

__all__ = (
    "BuilderErrorCode",
    "InvalidAliasError",
    "InvalidColumnNameError",
    "InvalidComparisonOperatorError",
    "InvalidGroupByColumnsError",
    "InvalidHavingStatementError",
    "InvalidInListError",
    "InvalidJoinInfoError",
    "InvalidNotEqualsToOperatorError",
    "InvalidOrderByColumnsError",
    "InvalidOrderColumnNameError",
    "InvalidPaginationError",
    "InvalidPatternError",
    "InvalidTableNameError",
    "InvalidUnionQueryError",
    "MultipleFromStatementError",
    "MultipleSelectStatementError",
    "MultipleWhereStatementError",
    "NoPreviousSelectStatementError",
    "NoPreviousWhereStatementError",
    "QueryChainError",
    "SQLBuilderError",
    "SQLParsingError",
)


class BuilderErrorCode(IntEnum):
    """Stable numeric codes for statement assembly errors."""

    INVALID_COLUMN_NAME = 1000
    NO_PREVIOUS_SELECT_STATEMENT = 1001
    INVALID_TABLE_NAME = 1002
    INVALID_ALIAS = 1003
    NO_PREVIOUS_WHERE_STATEMENT = 1004
    MULTIPLE_FROM_STATEMENT = 1005
    INVALID_COMPARISON_OPERATOR = 1007
    INVALID_NOT_EQUALS_TO_OPERATOR = 1008
    INVALID_PATTERN = 1009
    INVALID_JOIN_INFO = 1010
    INVALID_UNION_QUERY = 1011
    INVALID_GROUP_BY_COLUMNS = 1012
    INVALID_ORDER_BY_COLUMNS = 1013
    INVALID_ORDER_COLUMN_NAME = 1014
    INVALID_HAVING_STATEMENT = 1015
    MULTIPLE_SELECT_STATEMENT = 1016
    MULTIPLE_WHERE_STATEMENT = 1017
    INVALID_IN_LIST = 1018
    INVALID_PAGINATION = 1019

    def __str__(self) -> str:
        """String representation.

        Returns:
            The name of the code in lower case.
        """
        return self.name.lower()


class QueryChainError(Exception):
    """Base exception class from which all querychain exceptions inherit."""

    detail: str

    def __init__(self, *args: Any, detail: str = "") -> None:
        """Initialize ``QueryChainError``.

        Args:
            *args: args are converted to :class:`str` before passing to :class:`Exception`
            detail: detail of the exception.
        """
        str_args = [str(arg) for arg in args if arg]
        if not detail:
            if str_args:
                detail, *str_args = str_args
            elif hasattr(self, "detail"):
                detail = self.detail
        self.detail = detail
        super().__init__(*str_args)

    def __repr__(self) -> str:
        if self.detail:
            return f"{self.__class__.__name__} - {self.detail}"
        return self.__class__.__name__

    def __str__(self) -> str:
        return " ".join((*self.args, self.detail)).strip()


class SQLParsingError(QueryChainError):
    """Issues parsing a rendered SQL statement."""

    def __init__(self, message: Optional[str] = None) -> None:
        if message is None:
            message = "Issues parsing SQL statement."
        super().__init__(message)


class SQLBuilderError(QueryChainError):
    """Issues building SQL statements.

    Every subclass pins one :class:`BuilderErrorCode` so callers can match on
    ``exc.code`` as well as on the exception type.
    """

    code: Optional[BuilderErrorCode] = None
    default_message: str = "Issues building SQL statement."

    def __init__(self, message: Optional[str] = None, code: Optional[BuilderErrorCode] = None) -> None:
        if message is None:
            message = self.default_message
        if code is not None:
            self.code = code
        super().__init__(message)

    def __repr__(self) -> str:
        if self.code is None:
            return super().__repr__()
        return f"{self.__class__.__name__}[{int(self.code)}] - {self.detail}"


class InvalidColumnNameError(SQLBuilderError):
    """A column name is empty or missing."""

    code = BuilderErrorCode.INVALID_COLUMN_NAME
    default_message = "Invalid column name."


class NoPreviousSelectStatementError(SQLBuilderError):
    """A clause that needs SELECT was added before it."""

    code = BuilderErrorCode.NO_PREVIOUS_SELECT_STATEMENT
    default_message = "No previous SELECT statement."


class InvalidTableNameError(SQLBuilderError):
    code = BuilderErrorCode.INVALID_TABLE_NAME
    default_message = "Table name can't be empty."


class InvalidAliasError(SQLBuilderError):
    code = BuilderErrorCode.INVALID_ALIAS
    default_message = "Invalid alias."


class NoPreviousWhereStatementError(SQLBuilderError):
    """A condition operator was used without an open WHERE or HAVING condition."""

    code = BuilderErrorCode.NO_PREVIOUS_WHERE_STATEMENT
    default_message = "No previous WHERE statement."


class MultipleFromStatementError(SQLBuilderError):
    code = BuilderErrorCode.MULTIPLE_FROM_STATEMENT
    default_message = "SELECT statement can't have multiple FROM statements."


class InvalidComparisonOperatorError(SQLBuilderError):
    code = BuilderErrorCode.INVALID_COMPARISON_OPERATOR
    default_message = "Invalid comparison operator."


class InvalidNotEqualsToOperatorError(SQLBuilderError):
    code = BuilderErrorCode.INVALID_NOT_EQUALS_TO_OPERATOR
    default_message = "Invalid not equals to operator."


class InvalidPatternError(SQLBuilderError):
    code = BuilderErrorCode.INVALID_PATTERN
    default_message = "Invalid LIKE pattern."


class InvalidJoinInfoError(SQLBuilderError):
    code = BuilderErrorCode.INVALID_JOIN_INFO
    default_message = "Invalid JOIN info."


class InvalidUnionQueryError(SQLBuilderError):
    code = BuilderErrorCode.INVALID_UNION_QUERY
    default_message = "Invalid UNION query."


class InvalidGroupByColumnsError(SQLBuilderError):
    code = BuilderErrorCode.INVALID_GROUP_BY_COLUMNS
    default_message = "Invalid GROUP BY columns."


class InvalidOrderByColumnsError(SQLBuilderError):
    code = BuilderErrorCode.INVALID_ORDER_BY_COLUMNS
    default_message = "Invalid ORDER BY columns."


class InvalidOrderColumnNameError(SQLBuilderError):
    code = BuilderErrorCode.INVALID_ORDER_COLUMN_NAME
    default_message = "Invalid ORDER BY column name."


class InvalidHavingStatementError(SQLBuilderError):
    code = BuilderErrorCode.INVALID_HAVING_STATEMENT
    default_message = "Invalid HAVING statement."


class MultipleSelectStatementError(SQLBuilderError):
    code = BuilderErrorCode.MULTIPLE_SELECT_STATEMENT
    default_message = "Statement already has a SELECT clause."


class MultipleWhereStatementError(SQLBuilderError):
    code = BuilderErrorCode.MULTIPLE_WHERE_STATEMENT
    default_message = "Statement already has a WHERE clause."


class InvalidInListError(SQLBuilderError):
    code = BuilderErrorCode.INVALID_IN_LIST
    default_message = "IN list can't be empty."


class InvalidPaginationError(SQLBuilderError):
    code = BuilderErrorCode.INVALID_PAGINATION
    default_message = "LIMIT and OFFSET must be non-negative integers."
