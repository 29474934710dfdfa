"""Column types shared by the models."""

from sqlalchemy import DateTime
from sqlalchemy.types import TypeDecorator

from ..utils.timezone import ensure_utc

class UtcDateTime(TypeDecorator):
    """
    Timestamp stored as UTC and always read back timezone-aware.

    Aware values are converted to UTC before they are written, since SQLite
    keeps only the wall-clock part. Naive values are taken to be UTC already.
    """
    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        return ensure_utc(value)

    def process_result_value(self, value, dialect):
        return ensure_utc(value)
