"""
RetailIQ Seed — Batch Persister

Buffers generated rows and commits them in fixed-size transactional batches.

Contract:
    - add(row) buffers; reaching batch_size writes the batch and clears it
    - flush() writes whatever remains (a partial batch)
    - each batch is one transaction: all of its rows commit or none do
    - a failed batch is rolled back and the error propagates; batches that
      already committed stay committed

Memory use is bounded by batch_size, not by the number of rows generated.
"""

from __future__ import annotations

from typing import Any, Iterable, Protocol

import structlog
from sqlalchemy import Table, insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from retailiq_seed.config import settings

logger = structlog.get_logger(__name__)


class Row(Protocol):
    def as_row(self) -> dict[str, Any]: ...


class BatchPersister:
    """
    Accumulator with a flush() boundary over a single table.

    Usage:
        with BatchPersister(session_factory, PriceHistory.__table__) as persister:
            for record in generator.generate(listings):
                persister.add(record)
        persister.committed  # rows written

    Leaving the ``with`` block normally flushes the remainder; leaving it with
    an exception discards the unwritten buffer.
    """

    def __init__(
        self,
        session_factory: sessionmaker[Session],
        table: Table,
        batch_size: int | None = None,
    ):
        batch_size = settings.HISTORY_BATCH_SIZE if batch_size is None else batch_size
        if batch_size < 1:
            raise ValueError("batch_size must be at least 1")

        self._session_factory = session_factory
        self._table = table
        self.batch_size = batch_size
        self._buffer: list[dict[str, Any]] = []
        self.committed = 0
        self.batches = 0

    def __enter__(self) -> BatchPersister:
        return self

    def __exit__(self, exc_type: Any, exc: Any, tb: Any) -> None:
        if exc_type is None:
            self.flush()
        else:
            self._buffer.clear()

    @property
    def pending(self) -> int:
        """Rows buffered but not yet committed."""
        return len(self._buffer)

    def add(self, record: Row) -> None:
        self._buffer.append(record.as_row())
        if len(self._buffer) >= self.batch_size:
            self.flush()

    def add_all(self, records: Iterable[Row]) -> int:
        """Add every record; returns the running committed count."""
        for record in records:
            self.add(record)
        return self.committed

    def flush(self) -> int:
        """
        Write the buffered rows in one transaction.

        Returns:
            Number of rows written by this call (0 if the buffer was empty).

        Raises:
            SQLAlchemyError: If the transaction fails. The batch is rolled back
                and dropped from the buffer.
        """
        if not self._buffer:
            return 0

        batch, self._buffer = self._buffer, []
        try:
            with self._session_factory.begin() as session:
                session.execute(insert(self._table), batch)
        except SQLAlchemyError as e:
            logger.error(
                "batch_write_failed",
                table=self._table.name,
                batch_rows=len(batch),
                committed_so_far=self.committed,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise

        self.committed += len(batch)
        self.batches += 1
        logger.info(
            "batch_committed",
            table=self._table.name,
            batch=self.batches,
            batch_rows=len(batch),
            committed=self.committed,
        )
        return len(batch)
