"""SQL statement builder mixins."""

from querychain.builder.mixins._from import FromClauseMixin
from querychain.builder.mixins._group_by import GroupByClauseMixin
from querychain.builder.mixins._having import HavingClauseMixin
from querychain.builder.mixins._join import JoinClauseMixin
from querychain.builder.mixins._limit_offset import LimitOffsetClauseMixin
from querychain.builder.mixins._order_by import OrderByClauseMixin
from querychain.builder.mixins._select_columns import SelectColumnsMixin
from querychain.builder.mixins._set_ops import SetOperationMixin
from querychain.builder.mixins._where import WhereClauseMixin

__all__ = (
    "FromClauseMixin",
    "GroupByClauseMixin",
    "HavingClauseMixin",
    "JoinClauseMixin",
    "LimitOffsetClauseMixin",
    "OrderByClauseMixin",
    "SelectColumnsMixin",
    "SetOperationMixin",
    "WhereClauseMixin",
)
