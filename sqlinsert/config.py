"""
This module defines the InsertConfig class that holds the settings used to
render INSERT statements, and the process-wide default configuration.

The default is read once, when an Insert is created.  Code that needs the same
output regardless of other threads should pass an InsertConfig explicitly.
"""
from __future__ import annotations

import logging
import os
from typing import Any, NamedTuple

from sqlinsert.exceptions import SQLInsertConfigError
from sqlinsert.records import DEFAULT_TAG_KEY
from sqlinsert.tokens import (
    DEFAULT_TOKEN_FORMAT,
    TokenFormat,
    TokenKind,
)

logger = logging.getLogger('sqlinsert')


class InsertConfig(NamedTuple):
    """Settings for rendering an INSERT statement."""
    tag_key: str = DEFAULT_TAG_KEY
    token_kind: TokenKind = TokenKind.QUESTION_MARK
    token_format: TokenFormat = DEFAULT_TOKEN_FORMAT

    def validate(self) -> InsertConfig:
        """
        Check the configuration values.

        :return: self, so that calls can be chained
        :raises SQLInsertConfigError: if any value is invalid
        """
        if not isinstance(self.tag_key, str) or not self.tag_key:
            msg = f"tag_key must be a non-empty string, got {self.tag_key!r}"
            raise SQLInsertConfigError(msg)

        if not isinstance(self.token_kind, TokenKind):
            msg = f"token_kind must be a TokenKind, got {self.token_kind!r}"
            raise SQLInsertConfigError(msg)

        if not isinstance(self.token_format, TokenFormat):
            msg = f"token_format must be a TokenFormat, got {self.token_format!r}"
            raise SQLInsertConfigError(msg)

        return self

    def replace(self, **changes: Any) -> InsertConfig:
        """
        Return a validated copy of the configuration with changes applied.

        :raises SQLInsertConfigError: for unknown or invalid settings
        """
        bad_keys = set(changes) - set(self._fields)
        if bad_keys:
            msg = f"Invalid setting(s): {bad_keys}. Valid settings are {self._fields}"
            raise SQLInsertConfigError(msg)
        return self._replace(**changes).validate()

    @classmethod
    def from_environment(cls, prefix: str = 'SQLINSERT_') -> InsertConfig:
        """
        Create InsertConfig from environment variables e.g. SQLINSERT_TAG_KEY,
        SQLINSERT_TOKEN_KIND (a TokenKind name such as ORDINAL_NUMBER) and
        SQLINSERT_SEPARATOR.  Unset variables keep their default values.

        :param prefix: str, prefix to environment variable names
        """
        changes: dict[str, Any] = {}

        tag_key = os.getenv(f'{prefix}TAG_KEY')
        if tag_key is not None:
            changes['tag_key'] = tag_key

        token_kind = os.getenv(f'{prefix}TOKEN_KIND')
        if token_kind is not None:
            try:
                changes['token_kind'] = TokenKind[token_kind.strip().upper()]
            except KeyError:
                msg = (f"{prefix}TOKEN_KIND must be one of "
                       f"{[kind.name for kind in TokenKind]}, got {token_kind!r}")
                raise SQLInsertConfigError(msg) from None

        separator = os.getenv(f'{prefix}SEPARATOR')
        if separator is not None:
            changes['token_format'] = DEFAULT_TOKEN_FORMAT._replace(separator=separator)

        return cls().replace(**changes)


_default_config = InsertConfig()


def get_default_config() -> InsertConfig:
    """Return the process-wide default InsertConfig."""
    return _default_config


def set_default_config(**changes: Any) -> InsertConfig:
    """
    Update the process-wide default InsertConfig, e.g.
    set_default_config(token_kind=TokenKind.ORDINAL_NUMBER).

    The default is swapped in a single assignment so Insert objects already
    created keep the configuration they were built with.

    :return: the new default configuration
    :raises SQLInsertConfigError: for unknown or invalid settings
    """
    global _default_config
    _default_config = _default_config.replace(**changes)
    logger.debug("Default insert config set to %s", _default_config)
    return _default_config


def reset_default_config() -> InsertConfig:
    """Restore the process-wide default InsertConfig to its initial values."""
    global _default_config
    _default_config = InsertConfig()
    return _default_config
