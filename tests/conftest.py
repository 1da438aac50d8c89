from __future__ import annotations

import logging
from typing import Iterator

import pytest

from enumerant.registry import NumericEnum, define


class DbOps(NumericEnum):
    INSERT = define("insert", 1)
    SELECT = define("select", 2)
    UPDATE = define("update", 3)
    DELETE = define("delete", 4)

    CREATE = define("create", 1)
    READ = define("read", 2)


class Numbers(NumericEnum):
    ONE = define("one", 1)
    TWO = define("two", 2)
    THREE = define("three", 3)


class Ordinals(NumericEnum):
    FIRST = define("first", 1)
    PRIMARY = define("primary", 1)


@pytest.fixture(scope="session")
def db_ops() -> type[DbOps]:
    return DbOps


@pytest.fixture(scope="session")
def numbers() -> type[Numbers]:
    return Numbers


@pytest.fixture(scope="session")
def ordinals() -> type[Ordinals]:
    return Ordinals


@pytest.fixture
def enumerant_logger() -> Iterator[logging.Logger]:
    """Hand out the package logger and undo configure_logging() side effects afterwards."""

    logger = logging.getLogger("enumerant")
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
