"""
SQL Insert Exception classes
"""


class SQLInsertError(Exception):
    """Base class for exceptions in this module"""


class SQLInsertRecordError(SQLInsertError):
    """Exception raised when data cannot be read as records"""


class SQLInsertConfigError(SQLInsertError):
    """Exception raised for bad configuration values"""


class SQLInsertAbort(SQLInsertError):
    """Exception raised when a cancel token has been cancelled."""
