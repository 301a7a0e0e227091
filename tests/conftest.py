"""Common utilities for tests."""

from __future__ import annotations

import itertools
from collections.abc import Callable
from typing import Any, Optional

from mockfirestore import CollectionReference, Query


def patch_mockfirestore() -> None:
    """Apply monkeypatches to mockfirestore to support FieldFilter."""

    def collection_where(
        self: Any,
        field_path: Optional[str] = None,
        op_string: Optional[str] = None,
        value: Any = None,
        filter: Any = None,
    ) -> Any:
        if filter:
            return self._where(filter.field_path, filter.op_string, filter.value)
        return self._where(field_path, op_string, value)

    if not hasattr(CollectionReference, "_where"):
        CollectionReference._where = CollectionReference.where
        CollectionReference.where = collection_where

    def query_where(
        self: Any,
        field_path: Optional[str] = None,
        op_string: Optional[str] = None,
        value: Any = None,
        filter: Any = None,
    ) -> Any:
        if filter:
            return self._where(filter.field_path, filter.op_string, filter.value)
        return self._where(field_path, op_string, value)

    if not hasattr(Query, "_where"):
        Query._where = Query.where
        Query.where = query_where


def sequential_ids(prefix: str = "id") -> Callable[[], str]:
    """Return an id factory yielding ``prefix1``, ``prefix2``, ..."""
    counter = itertools.count(1)
    return lambda: f"{prefix}{next(counter)}"
