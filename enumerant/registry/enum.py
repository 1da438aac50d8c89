"""Base type for closed families of integer-valued names.

Concrete families subclass :class:`NumericEnum` and declare members in the
class body::

    class DbOps(NumericEnum):
        INSERT = define("insert", 1)
        SELECT = define("select", 2)
        CREATE = define("create", 1)  # alias: DbOps.CREATE is DbOps.INSERT

Creating the class replays the declarations in class-body order through the
class's own :class:`~enumerant.registry.family.Family`, binds every attribute
to the resulting member and closes the family. Declaration errors propagate
out of the ``class`` statement.
"""
from __future__ import annotations

import types
from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional

from enumerant.core.errors import EnumDefinitionError, FamilyClosed, IllegalConstruction
from enumerant.core.types import LookupKey

from .family import Family


@dataclass(frozen=True, slots=True)
class Declaration:
    """Pending ``name -> value`` entry recorded in a family class body."""

    name: str
    value: Any


def define(name: str, value: Any) -> Declaration:
    """Declare a member inside a :class:`NumericEnum` class body."""

    return Declaration(name, value)


def _reserved_attributes(bases: tuple[type, ...]) -> set[str]:
    """Public names of the metaclass and of inherited classes that a member must not shadow."""

    reserved = {attr for attr in vars(EnumFamilyMeta) if not attr.startswith("_")}
    for base in bases:
        for klass in base.__mro__:
            reserved.update(attr for attr in vars(klass) if not attr.startswith("_"))
    return reserved


class EnumFamilyMeta(type):
    """Metaclass giving each family class its own registry and lookup API."""

    def __new__(mcs, cls_name: str, bases: tuple[type, ...], namespace: dict[str, Any], **kwargs: Any):
        for base in bases:
            if isinstance(base, EnumFamilyMeta) and base.key_count():
                raise FamilyClosed(f"Cannot extend {base.__name__}: it already declares members")

        declarations = [(attr, decl) for attr, decl in namespace.items() if isinstance(decl, Declaration)]
        reserved = _reserved_attributes(bases)
        for attr, decl in declarations:
            if attr in reserved:
                raise EnumDefinitionError(
                    f"Cannot bind key {decl.name} to {cls_name}.{attr}: the name is part of the family API"
                )
        cls = super().__new__(mcs, cls_name, bases, namespace, **kwargs)
        family = Family(cls)
        type.__setattr__(cls, "_family", family)
        for attr, decl in declarations:
            type.__setattr__(cls, attr, family.define(decl.name, decl.value))
        family.close()
        return cls

    def __call__(cls, *args: Any, **kwargs: Any):
        raise IllegalConstruction(
            f"{cls.__name__} members are created by their family declaration only; "
            f"use {cls.__name__}.get() or {cls.__name__}.parse() to look one up"
        )

    def __setattr__(cls, attr: str, value: Any) -> None:
        if isinstance(cls.__dict__.get(attr), cls):
            raise AttributeError(f"Cannot reassign member {cls.__name__}.{attr}")
        super().__setattr__(attr, value)

    def __delattr__(cls, attr: str) -> None:
        if isinstance(cls.__dict__.get(attr), cls):
            raise AttributeError(f"Cannot delete member {cls.__name__}.{attr}")
        super().__delattr__(attr)

    @property
    def family(cls) -> Family:
        return cls.__dict__["_family"]

    def get(cls, key: LookupKey):
        """Member by exact name or value, ``None`` when absent."""

        return cls.family.get(key)

    def get_by_name(cls, name: str):
        return cls.family.get_by_name(name)

    def get_by_value(cls, value: int):
        return cls.family.get_by_value(value)

    def parse(cls, key: LookupKey):
        """Member by trimmed, case-insensitive name or numeric text, ``None`` when absent."""

        return cls.family.parse(key)

    def includes(cls, key: LookupKey) -> bool:
        return cls.family.includes(key)

    def count(cls) -> int:
        return cls.family.count()

    def key_count(cls) -> int:
        return cls.family.key_count()

    def value_count(cls) -> int:
        return cls.family.value_count()

    def values(cls) -> list[int]:
        return cls.family.values()

    def members(cls) -> tuple:
        return cls.family.members()

    def __getitem__(cls, key: LookupKey):
        return cls.family[key]

    def __contains__(cls, key: object) -> bool:
        return key in cls.family

    def __iter__(cls) -> Iterator:
        return iter(cls.family)

    def __len__(cls) -> int:
        return len(cls.family)

    def __bool__(cls) -> bool:
        return True


class _FamilyOrMember:
    """Method answering from the family on the class and from the member on an instance.

    ``DbOps.keys()`` lists every name in the family while ``DbOps.INSERT.keys()``
    lists the names of one member; both spellings share one attribute.
    """

    def __init__(self, func: Callable[..., Any]) -> None:
        self._func = func
        self.__doc__ = func.__doc__

    def __set_name__(self, owner: type, name: str) -> None:
        self._name = name

    def __get__(self, instance: Optional["NumericEnum"], owner: type["NumericEnum"]):
        if instance is None:
            return getattr(owner.family, self._name)
        return types.MethodType(self._func, instance)


def _restore_member(family_cls: EnumFamilyMeta, value: int) -> "NumericEnum":
    return family_cls.family[value]


class NumericEnum(metaclass=EnumFamilyMeta):
    """One named integer constant of a family; compare with ``==`` or ``is``."""

    __slots__ = ("_name", "_value", "_aliases")

    @classmethod
    def _new_member(cls, name: str, value: int) -> "NumericEnum":
        # Only Family.define calls this; EnumFamilyMeta.__call__ refuses public construction.
        member = object.__new__(cls)
        object.__setattr__(member, "_name", name)
        object.__setattr__(member, "_value", value)
        object.__setattr__(member, "_aliases", [])
        return member

    def _add_alias(self, name: str) -> None:
        self._aliases.append(name)

    def __setattr__(self, attr: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} members are read-only")

    def __delattr__(self, attr: str) -> None:
        raise AttributeError(f"{type(self).__name__} members are read-only")

    @property
    def name(self) -> str:
        return self._name

    @property
    def key(self) -> str:
        return self._name

    @property
    def value(self) -> int:
        return self._value

    @_FamilyOrMember
    def keys(self) -> tuple[str, ...]:
        """Primary name first, then aliases in declaration order."""

        return (self._name, *self._aliases)

    def names(self) -> list[str]:
        return list(self.keys())

    @_FamilyOrMember
    def has_key(self, name: str) -> bool:
        return name == self._name or name in self._aliases

    def to_integer(self) -> int:
        return self._value

    def __int__(self) -> int:
        return self._value

    def __eq__(self, other: object) -> bool:
        if other is None or isinstance(other, bool):
            return False
        if isinstance(other, int):
            return other == self._value
        if type(other) is type(self):
            return other is self or other._value == self._value
        return False

    def __hash__(self) -> int:
        return hash(self._value)

    def __copy__(self) -> "NumericEnum":
        return self

    def __deepcopy__(self, memo: dict) -> "NumericEnum":
        return self

    def __reduce__(self):
        return _restore_member, (type(self), self._value)

    def __str__(self) -> str:
        return f"{type(self).__name__}::{self._name.upper()}"

    def __repr__(self) -> str:
        return f"<{type(self).__name__}.{self._name.upper()}: {self._value}>"
