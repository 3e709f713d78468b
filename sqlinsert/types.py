from __future__ import annotations

from collections.abc import (
    Iterable,
    Sequence,
)
from typing import (
    Any,
    Protocol,
    TypeAlias,
    runtime_checkable,
)
from typing_extensions import Self

from sqlinsert.cancel import CancelToken
from sqlinsert.tokens import TokenKind

# Data is either a single record or a list/tuple of records with the same shape
Data: TypeAlias = Any
Args: TypeAlias = list[Any]


@runtime_checkable
class Record(Protocol):
    """A row that exposes its ordered (column name, value) pairs."""
    def items(self) -> Iterable[tuple[str, Any]]: ...


class Statement(Protocol):
    def execute(self, *args: Any) -> Any: ...
    def close(self) -> None: ...


class ContextStatement(Protocol):
    def execute_context(self, ctx: CancelToken, *args: Any) -> Any: ...
    def close(self) -> None: ...


class Executor(Protocol):
    def prepare(self, query: str) -> Statement: ...


class ContextExecutor(Protocol):
    def prepare_context(self, ctx: CancelToken, query: str) -> ContextStatement: ...


class Cursor(Protocol):
    rowcount: int
    def execute(self, *args: Any, **kwargs: Any) -> Any: ...
    def close(self) -> None: ...


class Connection(Protocol):
    def cursor(self, *args: Any, **kwargs: Any) -> Cursor: ...
    def __enter__(self) -> Self: ...
    def __exit__(self, *args: Any, **kwargs: Any) -> bool | None: ...


@runtime_checkable
class Inserter(Protocol):
    """Functionality to produce an INSERT statement with bind args."""
    def tokenize(self, kind: TokenKind) -> str: ...
    def columns(self) -> str: ...
    def params(self, kind: TokenKind | None = None) -> str: ...
    def sql(self, kind: TokenKind | None = None) -> str: ...
    def args(self) -> Sequence[Any]: ...
    def insert(self, executor: Executor, kind: TokenKind | None = None) -> Any: ...
    def insert_context(self, ctx: CancelToken, executor: ContextExecutor,
                       kind: TokenKind | None = None) -> Any: ...
