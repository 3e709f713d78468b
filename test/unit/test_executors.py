"""Unit tests for DBAPI executor."""
import sqlite3
from unittest.mock import MagicMock

import pytest

from sqlinsert import CancelToken, DbApiExecutor, Insert
from sqlinsert.exceptions import SQLInsertAbort

# pylint: disable=missing-docstring


@pytest.fixture(scope='function')
def mock_conn():
    # Test uses sqlite3 connection, but all dbapi compliant connections will be the same.
    mock_conn = MagicMock(sqlite3.Connection)
    mock_conn.cursor.return_value.rowcount = 2
    return mock_conn


def test_prepare_opens_cursor(mock_conn):
    statement = DbApiExecutor(mock_conn).prepare('INSERT INTO t (a) VALUES (?)')

    mock_conn.cursor.assert_called_once_with()
    assert statement.query == 'INSERT INTO t (a) VALUES (?)'
    assert statement.cursor is mock_conn.cursor.return_value


def test_execute_passes_args_as_tuple(mock_conn):
    statement = DbApiExecutor(mock_conn).prepare('INSERT INTO t (a, b) VALUES (?, ?)')

    rowcount = statement.execute('x', 1.5)

    assert rowcount == 2
    statement.cursor.execute.assert_called_once_with(
        'INSERT INTO t (a, b) VALUES (?, ?)', ('x', 1.5))


def test_close_only_closes_cursor_once(mock_conn):
    statement = DbApiExecutor(mock_conn).prepare('SELECT 1')

    statement.close()
    statement.close()

    statement.cursor.close.assert_called_once_with()
    assert statement.closed


def test_no_commit(mock_conn):
    Insert('t', {'a': 1}).insert(DbApiExecutor(mock_conn))

    mock_conn.commit.assert_not_called()
    mock_conn.cursor.return_value.close.assert_called_once_with()


def test_prepare_context_cancelled(mock_conn):
    ctx = CancelToken()
    ctx.cancel()

    with pytest.raises(SQLInsertAbort, match='before prepare'):
        Insert('t', {'a': 1}).insert_context(ctx, DbApiExecutor(mock_conn))

    mock_conn.cursor.assert_not_called()


def test_execute_context_cancelled(mock_conn):
    ctx = CancelToken()
    statement = DbApiExecutor(mock_conn).prepare_context(ctx, 'SELECT 1')
    ctx.cancel()

    with pytest.raises(SQLInsertAbort, match='before execute'):
        statement.execute_context(ctx)

    statement.cursor.execute.assert_not_called()


def test_repr(mock_conn):
    assert repr(DbApiExecutor(mock_conn)).startswith('DbApiExecutor(')
