"""
Functions for building parameterised INSERT statements and bind arguments
from records, and for running them with an executor.
"""
from __future__ import annotations

import logging
from typing import Any, Optional

from sqlinsert.cancel import CancelToken
from sqlinsert.config import InsertConfig, get_default_config
from sqlinsert.records import as_records, record_fields
from sqlinsert.tokens import TokenKind, tokenize
from sqlinsert.types import (
    Args,
    ContextExecutor,
    Data,
    Executor,
)

logger = logging.getLogger('sqlinsert')


class Insert:
    """
    The data needed to produce an INSERT statement with bind args.

    `data` is a single record or a list/tuple of records.  Column names and
    placeholders are taken from the first record only; all records must have
    the same fields in the same order.

    Table and column names are used exactly as given.  They are not quoted or
    validated, so they must come from a trusted source.

    Multi-row statements repeat the first row's placeholder group once per
    record.  With TokenKind.ORDINAL_NUMBER every group therefore restarts at
    $1, e.g. VALUES ($1, $2), ($1, $2).  Drivers that need numbers to be
    unique across the whole statement must insert one record at a time.
    """

    def __init__(self, table: str, data: Data,
                 config: Optional[InsertConfig] = None):
        self.table = table
        self.data = data
        self.config = config if config is not None else get_default_config()

    def __repr__(self):
        return (f"Insert(table={self.table!r}, data={self.data!r}, "
                f"config={self.config!r})")

    def _records(self):
        return as_records(self.data)

    def _first_fields(self):
        return record_fields(self._records()[0], self.config.tag_key)

    def tokenize(self, kind: TokenKind) -> str:
        """
        Return the unwrapped tokens of the first record for the given kind.
        """
        return tokenize(self._first_fields(), kind, self.config.token_format)

    def columns(self) -> str:
        """Return the column list e.g. (id, name)."""
        return self.config.token_format.wrap(self.tokenize(TokenKind.COLUMN_NAME))

    def params(self, kind: Optional[TokenKind] = None) -> str:
        """
        Return the placeholder groups for the VALUES clause e.g. (?, ?), (?, ?)

        :param kind: placeholder TokenKind, defaults to config.token_kind
        """
        if kind is None:
            kind = self.config.token_kind
        token_format = self.config.token_format

        group = token_format.wrap(self.tokenize(kind))
        return token_format.join([group] * len(self._records()))

    def sql(self, kind: Optional[TokenKind] = None) -> str:
        """
        Return the full parameterised INSERT statement.

        :param kind: placeholder TokenKind, defaults to config.token_kind
        """
        return f"INSERT INTO {self.table} {self.columns()} VALUES {self.params(kind)}"

    def args(self) -> Args:
        """
        Return the values of every record, row by row, in field order.  The
        order matches the placeholders returned by params().
        """
        tag_key = self.config.tag_key
        return [field.value
                for record in self._records()
                for field in record_fields(record, tag_key)]

    def insert(self, executor: Executor,
               kind: Optional[TokenKind] = None) -> Any:
        """
        Prepare the INSERT statement with executor, then execute it with the
        bind args.  The prepared statement is always closed before returning.
        Errors from the executor are raised unchanged.

        :param executor: object with prepare(query) returning a statement
                         with execute(*args) and close()
        :param kind: placeholder TokenKind, defaults to config.token_kind
        :return: the result of statement.execute
        """
        query = self.sql(kind)
        args = self.args()
        self._log_execution(query, args, executor)

        try:
            statement = executor.prepare(query)
        except Exception as exc:
            self._log_failure("prepare", query, kind, exc)
            raise

        try:
            return statement.execute(*args)
        except Exception as exc:
            self._log_failure("execute", query, kind, exc)
            raise
        finally:
            _close_statement(statement)

    def insert_context(self, ctx: CancelToken, executor: ContextExecutor,
                       kind: Optional[TokenKind] = None) -> Any:
        """
        As insert(), but pass the cancel token ctx to the executor's
        prepare_context and the statement's execute_context methods.  The
        executor is responsible for honouring cancellation.

        :param ctx: CancelToken forwarded to the executor
        :param executor: object with prepare_context(ctx, query) returning a
                         statement with execute_context(ctx, *args) and close()
        :param kind: placeholder TokenKind, defaults to config.token_kind
        :return: the result of statement.execute_context
        """
        query = self.sql(kind)
        args = self.args()
        self._log_execution(query, args, executor)

        try:
            statement = executor.prepare_context(ctx, query)
        except Exception as exc:
            self._log_failure("prepare", query, kind, exc)
            raise

        try:
            return statement.execute_context(ctx, *args)
        except Exception as exc:
            self._log_failure("execute", query, kind, exc)
            raise
        finally:
            _close_statement(statement)

    def _log_execution(self, query, args, executor):
        logger.info("Executing insert (rows=%s)", len(self._records()))
        logger.debug(f"Executing:\n\n{query}\n\nwith parameters:\n\n"
                     f"{args}\n\nagainst:\n\n{executor}")

    def _log_failure(self, step, query, kind, exc):
        if kind is None:
            kind = self.config.token_kind
        logger.debug(f"Failed to {step} insert.\n\n{query}\n\n"
                     f"Token kind: {TokenKind(kind).name}\n\n{exc}\n")


def _close_statement(statement):
    # Close errors must not replace the execute error or result
    try:
        statement.close()
    except Exception as exc:
        logger.debug(f"Failed to close statement.\n\n{exc}\n")


def new_insert(table: str, data: Data,
               config: Optional[InsertConfig] = None) -> Insert:
    """
    Return an Insert for table and data.

    :param table: name of table
    :param data: a record or a list/tuple of records
    :param config: InsertConfig, defaults to the process-wide default
    """
    return Insert(table, data, config=config)


def generate_insert_sql(
        table: str,
        data: Data,
        kind: Optional[TokenKind] = None,
        config: Optional[InsertConfig] = None
        ) -> str:
    """
    Generate insert SQL for table, getting column names from the first
    record of data.

    :param table: name of table
    :param data: a record or a list/tuple of records
    :param kind: placeholder TokenKind, defaults to config.token_kind
    :param config: InsertConfig, defaults to the process-wide default
    :return: SQL statement to insert data into the given table
    """
    return Insert(table, data, config=config).sql(kind)


def insert(
        table: str,
        data: Data,
        executor: Executor,
        kind: Optional[TokenKind] = None,
        config: Optional[InsertConfig] = None
        ) -> Any:
    """
    Insert data into table using executor.  See Insert.insert for details.

    :param table: name of table
    :param data: a record or a list/tuple of records
    :param executor: object with prepare(query)
    :param kind: placeholder TokenKind, defaults to config.token_kind
    :param config: InsertConfig, defaults to the process-wide default
    :return: the result of statement.execute
    """
    return Insert(table, data, config=config).insert(executor, kind)


def insert_context(
        ctx: CancelToken,
        table: str,
        data: Data,
        executor: ContextExecutor,
        kind: Optional[TokenKind] = None,
        config: Optional[InsertConfig] = None
        ) -> Any:
    """
    Insert data into table using a cancellation-aware executor.  See
    Insert.insert_context for details.
    """
    return Insert(table, data, config=config).insert_context(ctx, executor, kind)
