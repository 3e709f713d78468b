"""
Executor for DBAPI (PEP 249) connections.

DBAPI has no separate prepare step, so a prepared statement is an open cursor
paired with the query text.  Drivers that cache statements (e.g. sqlite3,
psycopg) will reuse the plan when the same query text is executed again.
Transactions are not committed here; that is left to the caller.
"""
import logging

from sqlinsert.types import Connection, Cursor

logger = logging.getLogger('sqlinsert')


class DbApiStatement:
    """A query bound to an open DBAPI cursor."""

    def __init__(self, cursor: Cursor, query: str):
        self.cursor = cursor
        self.query = query
        self.closed = False

    def execute(self, *args):
        """
        Execute the query with positional bind args.

        :return: the cursor rowcount (-1 if the driver does not report it)
        """
        self.cursor.execute(self.query, args)
        return self.cursor.rowcount

    def execute_context(self, ctx, *args):
        ctx.raise_if_cancelled("Insert cancelled before execute")
        return self.execute(*args)

    def close(self):
        if not self.closed:
            self.cursor.close()
            self.closed = True


class DbApiExecutor:
    """
    Prepare statements on a DBAPI connection.

    The paramstyle of the driver must match the TokenKind used to build the
    INSERT e.g. QUESTION_MARK for sqlite3 and pyodbc.  Args are always bound
    as a positional tuple, so named styles such as COLON need a driver that
    binds them by position e.g. oracledb.
    """

    def __init__(self, conn: Connection):
        self.conn = conn

    def __repr__(self):
        return f"DbApiExecutor({self.conn!r})"

    def prepare(self, query):
        logger.debug("Opening cursor for:\n\n%s", query)
        return DbApiStatement(self.conn.cursor(), query)

    def prepare_context(self, ctx, query):
        ctx.raise_if_cancelled("Insert cancelled before prepare")
        return self.prepare(query)
