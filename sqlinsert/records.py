"""
Records are the rows of data passed to an INSERT.  This module turns each
record into an ordered list of Field descriptors.

A record may be:
  + a dataclass instance whose fields carry the column name in their
    metadata under the tag key (default 'col'), see column()
  + any object with an items() method returning ordered (name, value) pairs,
    e.g. a dict
  + a namedtuple

Fields of a dataclass without the tag key get an empty column name.  Batches
are lists or tuples of records; they must all share the same shape, but this
is not checked.
"""
from __future__ import annotations

import dataclasses
from collections.abc import Sequence
from functools import lru_cache
from typing import Any, NamedTuple

from sqlinsert.exceptions import SQLInsertRecordError
from sqlinsert.types import Record

DEFAULT_TAG_KEY = 'col'


class Field(NamedTuple):
    name: str
    position: int
    value: Any


def column(name: str, key: str = DEFAULT_TAG_KEY, **kwargs: Any) -> Any:
    """
    Return a dataclass field that maps to the named column.

    :param name: column name
    :param key: metadata key that holds the column name
    :param kwargs: other arguments passed to dataclasses.field e.g. default
    :return: dataclasses.Field
    """
    metadata = dict(kwargs.pop('metadata', None) or {})
    metadata[key] = name
    return dataclasses.field(metadata=metadata, **kwargs)


@lru_cache(maxsize=128)
def dataclass_shape(record_class: type, tag_key: str) -> tuple[tuple[str, str], ...]:
    """
    Return (attribute, column name) pairs for a dataclass, in declared order.
    The shape is calculated once per class and tag key.
    """
    return tuple((f.name, f.metadata.get(tag_key, ''))
                 for f in dataclasses.fields(record_class))


def record_fields(record: Any, tag_key: str = DEFAULT_TAG_KEY) -> list[Field]:
    """
    Return the ordered fields of a single record.

    :param record: a dataclass instance, namedtuple or object with items()
    :param tag_key: dataclass metadata key holding column names
    :return: list of Field
    :raises SQLInsertRecordError: if record is not a supported record type
    """
    if dataclasses.is_dataclass(record) and not isinstance(record, type):
        pairs = [(name, getattr(record, attr))
                 for attr, name in dataclass_shape(type(record), tag_key)]

    # Namedtuples are checked before items() as they are also tuples
    elif hasattr(record, '_asdict'):
        pairs = list(zip(record._fields, record))

    elif isinstance(record, Record):
        pairs = list(record.items())

    else:
        msg = f"Row is not a dataclass, namedtuple or mapping ({type(record)})"
        raise SQLInsertRecordError(msg)

    return [Field(name, i + 1, value) for i, (name, value) in enumerate(pairs)]


def is_batch(data: Any) -> bool:
    """Return True if data is a list or tuple of records."""
    return isinstance(data, (list, tuple)) and not hasattr(data, '_asdict')


def as_records(data: Any) -> Sequence[Any]:
    """
    Return data as a sequence of records, wrapping a single record in a list.

    :raises SQLInsertRecordError: if data is an empty batch
    """
    if not is_batch(data):
        return [data]

    if not data:
        msg = "No records to insert; data is an empty sequence"
        raise SQLInsertRecordError(msg)
    return data
