"""Per-family member tables.

A :class:`Family` owns every member of one concrete enum type: the name table,
the value table and the declaration order. It is written only while the family
class is being created; :meth:`Family.close` ends the declaration phase and all
later access is read-only, so closed families can be shared between threads
without locking.
"""
from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Any, Dict, Iterator, List, Optional

from enumerant.core.errors import (
    DuplicateKey,
    FamilyClosed,
    InvalidKeyCase,
    InvalidKeyName,
    InvalidMemberValue,
)
from enumerant.core.types import LookupKey

if TYPE_CHECKING:
    from .enum import NumericEnum

logger = logging.getLogger("enumerant.registry")

_LEADING_DIGITS = re.compile(r"\d+", re.ASCII)
_INTEGER_TEXT = re.compile(r"[+-]?\d+", re.ASCII)


def _coerce_value(name: str, value: Any) -> int:
    """Convert a declared value to ``int``; only ints and integer strings qualify."""

    if isinstance(value, bool):
        raise InvalidMemberValue(f"Value for key {name} must be an integer, got {value!r}")
    if isinstance(value, int):
        return int(value)
    if isinstance(value, str) and _INTEGER_TEXT.fullmatch(value.strip()):
        try:
            return int(value.strip())
        except ValueError as exc:
            # int() refuses digit strings beyond sys.get_int_max_str_digits()
            raise InvalidMemberValue(f"Value for key {name} is too long to convert") from exc
    raise InvalidMemberValue(f"Value for key {name} must be an integer, got {value!r}")


class Family:
    """Name and value tables for one :class:`NumericEnum` subclass."""

    def __init__(self, owner: type["NumericEnum"]) -> None:
        self._owner = owner
        self._by_name: Dict[str, "NumericEnum"] = {}
        self._by_value: Dict[int, "NumericEnum"] = {}
        self._declaration_order: List[str] = []
        self._closed = False

    @property
    def name(self) -> str:
        return self._owner.__name__

    @property
    def owner(self) -> type["NumericEnum"]:
        return self._owner

    @property
    def closed(self) -> bool:
        return self._closed

    # Declaration -------------------------------------------------------
    def define(self, name: str, value: Any) -> "NumericEnum":
        """Register ``name`` for ``value`` and return the member holding it.

        A value seen before gains ``name`` as an alias on its existing member;
        a new value gets a new member with ``name`` as its primary name.
        """

        if self._closed:
            raise FamilyClosed(f"Cannot define key {name} on closed family {self.name}")
        if not isinstance(name, str) or not name:
            raise InvalidKeyName(f"Key must be a non-empty string, got {name!r}")
        if name != name.lower():
            raise InvalidKeyCase(f"Key {name} is not lower case")
        if name in self._by_name:
            raise DuplicateKey(f"Key {name} already defined in {self.name}")

        val = _coerce_value(name, value)
        member = self._by_value.get(val)
        if member is not None:
            member._add_alias(name)
            logger.debug(
                "Registered enum alias",
                extra={"enum_family": self.name, "enum_key": name, "enum_value": val, "enum_primary": member.name},
            )
        else:
            member = self._owner._new_member(name, val)
            self._by_value[val] = member
            logger.debug(
                "Defined enum member",
                extra={"enum_family": self.name, "enum_key": name, "enum_value": val},
            )

        self._by_name[name] = member
        self._declaration_order.append(name)
        return member

    def close(self) -> None:
        """End the declaration phase; later ``define`` calls raise :class:`FamilyClosed`."""

        self._closed = True
        logger.debug(
            "Closed enum family",
            extra={
                "enum_family": self.name,
                "key_count": self.key_count(),
                "value_count": self.value_count(),
            },
        )

    # Lookup ------------------------------------------------------------
    def get_by_name(self, name: str) -> Optional["NumericEnum"]:
        if not isinstance(name, str):
            return None
        return self._by_name.get(name)

    def get_by_value(self, value: int) -> Optional["NumericEnum"]:
        if isinstance(value, bool) or not isinstance(value, int):
            return None
        return self._by_value.get(value)

    def get(self, key: LookupKey) -> Optional["NumericEnum"]:
        """Exact lookup by name or value; ``None`` when nothing matches."""

        if isinstance(key, str):
            return self.get_by_name(key)
        return self.get_by_value(key)

    def parse(self, key: LookupKey) -> Optional["NumericEnum"]:
        """Lenient lookup: strings are trimmed and lower-cased first.

        A normalized string starting with digits is read as the integer formed
        by its leading digit run and resolved by value, so ``" 2 "`` and ``"2"``
        both find the member with value 2.
        """

        if not isinstance(key, str):
            return self.get_by_value(key)
        normalized = key.strip().lower()
        match = _LEADING_DIGITS.match(normalized)
        if match:
            try:
                value = int(match.group())
            except ValueError:
                return None
            return self._by_value.get(value)
        return self._by_name.get(normalized)

    def includes(self, key: LookupKey) -> bool:
        return self.get(key) is not None

    def __getitem__(self, key: LookupKey) -> "NumericEnum":
        member = self.get(key)
        if member is None:
            raise KeyError(key)
        return member

    def __contains__(self, key: object) -> bool:
        return self.includes(key)  # type: ignore[arg-type]

    # Enumeration -------------------------------------------------------
    def count(self) -> int:
        return len(self._declaration_order)

    key_count = count

    def value_count(self) -> int:
        return len(self._by_value)

    def members(self) -> tuple["NumericEnum", ...]:
        """Distinct members ordered by value."""

        return tuple(self._by_value[value] for value in sorted(self._by_value))

    def keys(self) -> list[str]:
        """All names, ordered by member value then alphabetically per member."""

        return [key for member in self.members() for key in sorted(member.keys())]

    def values(self) -> list[int]:
        return sorted(self._by_value)

    def has_key(self, name: str) -> bool:
        return isinstance(name, str) and name in self._by_name

    def declaration_order(self) -> tuple[str, ...]:
        return tuple(self._declaration_order)

    def __iter__(self) -> Iterator["NumericEnum"]:
        return iter(self.members())

    def __len__(self) -> int:
        return self.count()

    def __repr__(self) -> str:
        state = "closed" if self._closed else "open"
        return f"<Family {self.name} keys={self.key_count()} values={self.value_count()} {state}>"
