"""
Library to build parameterised SQL INSERT statements from records
"""
import logging
import sys
from importlib.metadata import (
    PackageNotFoundError,
    version,
)
from typing import TextIO

# Import helper functions here for more convenient access
from sqlinsert.cancel import CancelToken
from sqlinsert.config import (
    InsertConfig,
    get_default_config,
    reset_default_config,
    set_default_config,
)
from sqlinsert.executors import DbApiExecutor
from sqlinsert.builder import (
    Insert,
    generate_insert_sql,
    insert,
    insert_context,
    new_insert,
)
from sqlinsert.records import (
    Field,
    column,
    record_fields,
)
from sqlinsert.tokens import (
    TokenFormat,
    TokenKind,
    tokenize,
)

try:
    __version__ = version(__name__)
except PackageNotFoundError:
    __version__ = "0.0.0"

# Create sqlinsert logger and clear the logger handlers
# This prevents a new logger from being created when running 'logging.getLogger("sqlinsert")'
# with default handlers
logging.getLogger("sqlinsert").handlers.clear()


def log_to_console(
    level: int = logging.INFO,
    output: TextIO = sys.stderr,
) -> None:
    """
    Log sqlinsert messages to the given output.

    :param level: logger level
    :param output: the output location of the logger messages
    """
    logger = logging.getLogger('sqlinsert')
    # Clear all existing handlers to prevent duplicate output
    logger.handlers.clear()

    # Debug messages hold multi-line SQL so are printed without a prefix
    class CleanDebugMessageFormatter(logging.Formatter):
        default_fmt = logging.Formatter('%(asctime)s %(funcName)s: %(message)s')
        debug_fmt = logging.Formatter('%(message)s')

        def format(self, record: logging.LogRecord) -> str:
            if record.levelno < logging.INFO:
                return self.debug_fmt.format(record)
            else:
                return self.default_fmt.format(record)

    handler = logging.StreamHandler(output)
    handler.setFormatter(CleanDebugMessageFormatter())

    logger.addHandler(handler)
    logger.setLevel(level=level)


__all__ = [
    "CancelToken",
    "DbApiExecutor",
    "Field",
    "Insert",
    "InsertConfig",
    "TokenFormat",
    "TokenKind",
    "column",
    "generate_insert_sql",
    "get_default_config",
    "insert",
    "insert_context",
    "log_to_console",
    "new_insert",
    "record_fields",
    "reset_default_config",
    "set_default_config",
    "tokenize",
]
