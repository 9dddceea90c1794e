"""Per-operation SQL statement builders."""

from .delete import build_delete_by_id
from .insert import build_insert
from .select import build_select, build_select_by_id
from .update import build_soft_delete_by_id, build_update_by_id

__all__ = [
    "build_insert",
    "build_select",
    "build_select_by_id",
    "build_update_by_id",
    "build_soft_delete_by_id",
    "build_delete_by_id",
]
