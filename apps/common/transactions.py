# apps/common/transactions.py
from contextlib import contextmanager
import logging

from django.db import OperationalError

from .exceptions import TransactionConflict

logger = logging.getLogger(__name__)


@contextmanager
def conflict_guard(operation):
    """Surface lock timeouts, deadlocks and serialization failures as TransactionConflict.

    Usable as a context manager or as a decorator around a function that opens
    its own ``transaction.atomic()`` block.
    """
    try:
        yield
    except OperationalError as exc:
        logger.warning(f"Transaction conflict in {operation}: {exc}")
        raise TransactionConflict(operation=operation) from exc
