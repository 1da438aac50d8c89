"""Shared type aliases for lookup keys."""
from __future__ import annotations

from typing import TypeAlias, Union

# Keys accepted by ``get``/``parse``/``includes``: a member name or its value.
LookupKey: TypeAlias = Union[str, int]
