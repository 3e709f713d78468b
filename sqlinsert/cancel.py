"""
Cancel tokens are passed through insert_context to the executor, which decides
when to check them.  The builder itself never blocks.
"""
import threading

from sqlinsert.exceptions import SQLInsertAbort


class CancelToken:
    """Thread-safe flag used to request cancellation of an insert."""

    def __init__(self):
        self._event = threading.Event()

    def cancel(self):
        """Request cancellation."""
        self._event.set()

    def is_cancelled(self):
        return self._event.is_set()

    def raise_if_cancelled(self, message):
        """Raise SQLInsertAbort exception with message if cancelled."""
        if self._event.is_set():
            raise SQLInsertAbort(message)

    def __repr__(self):
        return f"CancelToken(cancelled={self.is_cancelled()})"
