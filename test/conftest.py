"""
Fixtures for pytest.  Functions defined here can be passed as arguments to
pytest tests.  scope parameter describes how often they are recreated e.g.
once per module.
"""
import datetime as dt
import logging
import sqlite3
from collections import namedtuple
from dataclasses import dataclass
from textwrap import dedent

import pytest

from sqlinsert import (
    column,
    log_to_console,
    reset_default_config,
)

CANDY_COLUMNS = ('id', 'candy_name', 'form_factor', 'description',
                 'manufacturer', 'weight_grams', 'ts')


@dataclass
class Candy:
    id: str = column('id')
    name: str = column('candy_name')
    form_factor: str = column('form_factor')
    description: str = column('description')
    mfr: str = column('manufacturer')
    weight: float = column('weight_grams')
    timestamp: dt.datetime = column('ts')


CandyRow = namedtuple('CandyRow', CANDY_COLUMNS)


@pytest.fixture(scope="function")
def logger() -> logging.Logger:
    """
    Return an enabled sqlinsert logger for tests.
    The logger handler is cleared afterwards.
    """
    log_to_console()
    logger = logging.getLogger("sqlinsert")
    yield logger
    logger.handlers.clear()


@pytest.fixture(autouse=True)
def default_config():
    """Restore the process-wide default config around every test."""
    reset_default_config()
    yield
    reset_default_config()


@pytest.fixture(scope='module')
def candy():
    """Return a single Candy record."""
    return Candy(
        id='c0600afd-78a7-4a1a-87c5-1bc48cafd14e',
        name='Gougat',
        form_factor='Package',
        description='tastes like gopher feed',
        mfr='Gouggle',
        weight=1.1618,
        timestamp=dt.datetime(2018, 12, 7, 13, 1, 59),
    )


@pytest.fixture(scope='module')
def five_candies():
    """Return list of five Candy records."""
    return [
        Candy(c, c, c, c, c, weight, dt.datetime(2018, 12, 7))
        for c, weight in zip('abcde', (1.1, 2.1, 3.1, 4.1, 5.1))
    ]


@pytest.fixture(scope='module')
def candy_dict(candy):
    """Return the candy record as a dictionary keyed by column name."""
    return dict(zip(CANDY_COLUMNS, candy_values(candy)))


@pytest.fixture(scope='module')
def candy_namedtuple(candy):
    """Return the candy record as a namedtuple."""
    return CandyRow(*candy_values(candy))


def candy_values(candy):
    return (candy.id, candy.name, candy.form_factor, candy.description,
            candy.mfr, candy.weight, candy.timestamp)


@pytest.fixture(scope='function')
def sqlite_conn():
    """Return in-memory SQLite connection with empty candy table."""
    create_sql = dedent("""
        CREATE TABLE candy
          (
            id text primary key,
            candy_name text,
            form_factor text,
            description text,
            manufacturer text,
            weight_grams real,
            ts timestamp
          )
          ;""").strip()

    conn = sqlite3.connect(':memory:')
    conn.execute(create_sql)
    conn.commit()
    yield conn
    conn.close()
