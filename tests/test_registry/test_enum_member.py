from __future__ import annotations

import copy
import pickle

import pytest

from enumerant.registry import NumericEnum, define


class Alpha(NumericEnum):
    ONE = define("one", 1)


class Beta(NumericEnum):
    ONE = define("one", 1)


def test_member_has_string_name_key_and_integer_value(db_ops) -> None:
    insert = db_ops.INSERT
    assert insert.name == "insert"
    assert insert.key == "insert"
    assert insert.value == 1
    assert insert.to_integer() == 1
    assert int(insert) == 1


def test_member_lists_all_names_in_declaration_order(db_ops) -> None:
    insert = db_ops.INSERT
    assert insert.names() == ["insert", "create"]
    assert insert.keys() == ("insert", "create")
    assert db_ops.UPDATE.keys() == ("update",)


def test_member_has_key_checks_primary_and_aliases(db_ops) -> None:
    assert db_ops.SELECT.has_key("select") is True
    assert db_ops.SELECT.has_key("read") is True
    assert db_ops.SELECT.has_key("insert") is False


def test_aliases_should_return_the_same_object(db_ops) -> None:
    assert db_ops.CREATE is db_ops.INSERT
    assert id(db_ops.READ) == id(db_ops.SELECT)


def test_member_string_forms(db_ops) -> None:
    assert str(db_ops.CREATE) == "DbOps::INSERT"
    assert repr(db_ops.DELETE) == "<DbOps.DELETE: 4>"


def test_member_equals_integer_value(db_ops) -> None:
    assert db_ops.INSERT == 1
    assert 1 == db_ops.INSERT
    assert db_ops.INSERT != 2
    assert db_ops.INSERT == db_ops.get(1)
    assert db_ops.INSERT == db_ops.get("create")


@pytest.mark.parametrize("other", [None, True, "insert", "1", 1.0, object()])
def test_member_never_equals_other_shapes(db_ops, other: object) -> None:
    assert (db_ops.INSERT == other) is False


def test_member_never_equals_other_family() -> None:
    assert Alpha.ONE == 1
    assert Beta.ONE == 1
    assert Alpha.ONE != Beta.ONE
    assert (Alpha.ONE == Beta.ONE) is False


def test_member_hash_matches_value(db_ops) -> None:
    lookup = {db_ops.INSERT: "write"}
    assert lookup[1] == "write"
    assert lookup[db_ops.CREATE] == "write"


def test_member_copies_should_keep_identity(db_ops) -> None:
    assert copy.copy(db_ops.INSERT) is db_ops.INSERT
    assert copy.deepcopy(db_ops.READ) is db_ops.SELECT


def test_member_pickle_should_restore_the_same_object() -> None:
    assert pickle.loads(pickle.dumps(Alpha.ONE)) is Alpha.ONE
