"""
Tokens are the text fragments of an INSERT statement that stand for a column
name or a bind placeholder.  Placeholder styles vary between drivers:

  + QUESTION_MARK    ?, ?, ... ?             (qmark: sqlite3, pyodbc, MySQL)
  + AT_COLUMN_NAME   @foo, @bar, ... @baz    (SQL Server, SingleStore)
  + ORDINAL_NUMBER   $1, $2, ... $n          (PostgreSQL e.g. asyncpg)
  + COLON            :foo, :bar, ... :baz    (named: oracledb)

"""
from __future__ import annotations

from collections.abc import Iterable, Sequence
from enum import IntEnum
from typing import NamedTuple, TYPE_CHECKING

from sqlinsert.exceptions import SQLInsertConfigError

if TYPE_CHECKING:
    from sqlinsert.records import Field


class TokenKind(IntEnum):
    """Rendering style for a token in an INSERT statement."""
    # INSERT INTO tbl (foo, bar, ... baz)
    COLUMN_NAME = 0
    QUESTION_MARK = 1
    AT_COLUMN_NAME = 2
    ORDINAL_NUMBER = 3
    COLON = 4


VALUE_TOKEN_KINDS = (
    TokenKind.QUESTION_MARK,
    TokenKind.AT_COLUMN_NAME,
    TokenKind.ORDINAL_NUMBER,
    TokenKind.COLON,
)


class TokenFormat(NamedTuple):
    """
    Separator and enclosure used to render token lists.  The same format is
    used for the column list, each placeholder group and between the groups
    of a multi-row VALUES clause.
    """
    separator: str = ', '
    prefix: str = '('
    suffix: str = ')'

    def join(self, tokens: Iterable[str]) -> str:
        return self.separator.join(tokens)

    def wrap(self, text: str) -> str:
        return f"{self.prefix}{text}{self.suffix}"


DEFAULT_TOKEN_FORMAT = TokenFormat()

_TEMPLATES = {
    TokenKind.COLUMN_NAME: "{name}",
    TokenKind.QUESTION_MARK: "?",
    TokenKind.AT_COLUMN_NAME: "@{name}",
    TokenKind.ORDINAL_NUMBER: "${position}",
    TokenKind.COLON: ":{name}",
}


def tokenize(
        fields: Sequence[Field],
        kind: TokenKind,
        token_format: TokenFormat = DEFAULT_TOKEN_FORMAT
        ) -> str:
    """
    Translate fields into the tokens of a SQL column or value expression,
    joined by the separator of token_format.  The result is not wrapped; use
    token_format.wrap() for that.

    Ordinal tokens use the 1-based position of each field within its own
    record, so every row starts again at $1.

    :param fields: ordered fields of a single record
    :param kind: the TokenKind to render
    :param token_format: separator and enclosure settings
    :return: joined tokens, or an empty string if there are no fields
    :raises SQLInsertConfigError: if kind is not a TokenKind
    """
    try:
        template = _TEMPLATES[TokenKind(kind)]
    except ValueError:
        msg = f"Unknown token kind: {kind!r}"
        raise SQLInsertConfigError(msg) from None

    return token_format.join(
        template.format(name=field.name, position=field.position)
        for field in fields)
