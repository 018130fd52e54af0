"""Clear-all: truncate every StayFit table and restart identities."""

from __future__ import annotations

import logging
from collections.abc import Callable

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine

from stayfit import models  # noqa: F401 - register every table on Base.metadata
from stayfit.core.constants import TABLE_NAMES
from stayfit.db.base import Base
from stayfit.services.outcome import OperationResult

logger = logging.getLogger(__name__)

CONFIRM_PROMPT = (
    "Are you sure you want to delete ALL data from the database? This cannot be undone. (y/n): "
)


def is_confirmed(answer: str | None) -> bool:
    return answer is not None and answer.strip().lower() == "y"


def truncate_statement(tables=TABLE_NAMES) -> str:
    return f"TRUNCATE {', '.join(tables)} RESTART IDENTITY CASCADE"


async def truncate_all(engine: AsyncEngine) -> None:
    """Empty all tables in one transaction.

    PostgreSQL gets a single cascading TRUNCATE, so foreign keys between the
    tables never block it. Other backends (SQLite in tests) delete children
    before parents; their integer keys start over once a table is empty.
    """
    async with engine.begin() as conn:
        if conn.dialect.name == "postgresql":
            await conn.execute(text(truncate_statement()))
            return
        for table in reversed(Base.metadata.sorted_tables):
            if table.name in TABLE_NAMES:
                await conn.execute(table.delete())


async def clear_all_data(engine: AsyncEngine, confirm: Callable[[str], str]) -> OperationResult:
    """Ask for confirmation, then truncate. Anything but ``y`` leaves the data alone."""
    if not is_confirmed(confirm(CONFIRM_PROMPT)):
        return OperationResult.success("clear", "Operation canceled.")

    await truncate_all(engine)
    logger.info("Truncated %d tables", len(TABLE_NAMES))
    return OperationResult.success("clear", "All tables have been successfully cleared.")
