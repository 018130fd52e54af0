"""Plain-text dump of the StayFit tables."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Any

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine

from stayfit.core.constants import (
    COLUMN_WIDTH,
    DISPLAY_ROW_LIMIT,
    ELLIPSIS,
    NULL_TOKEN,
    TABLE_NAMES,
    TRUNCATED_WIDTH,
)

logger = logging.getLogger(__name__)

Echo = Callable[[str], None]


def _fit(value: str) -> str:
    """Pad or cut to exactly one column."""
    return value.ljust(COLUMN_WIDTH)[:COLUMN_WIDTH]


def format_cell(value: Any) -> str:
    """NULL for missing values; long values keep 12 chars plus an ellipsis."""
    rendered = NULL_TOKEN if value is None else str(value)
    if len(rendered) > COLUMN_WIDTH:
        rendered = rendered[:TRUNCATED_WIDTH] + ELLIPSIS
    return _fit(rendered)


def format_header(columns: Sequence[str]) -> str:
    return " | ".join(_fit(column) for column in columns)


def render_rows(columns: Sequence[str], rows: Sequence[Sequence[Any]]) -> list[str]:
    """Header, separator and one line per row."""
    lines = [format_header(columns), "-" * (len(columns) * (COLUMN_WIDTH + 3))]
    lines.extend(" | ".join(format_cell(value) for value in row) for row in rows)
    return lines


async def display_table(conn: AsyncConnection, table: str, echo: Echo = print) -> int | None:
    """Print the first rows of ``table``.

    Returns the number of rows shown, or None when the table could not be read.
    A failed read is reported and the connection's transaction rolled back so
    the next table can still be queried.
    """
    try:
        result = await conn.execute(text(f'SELECT * FROM "{table}" LIMIT {DISPLAY_ROW_LIMIT}'))
        columns = list(result.keys())
        rows = result.fetchall()
    except SQLAlchemyError as e:
        logger.warning("Reading table %s failed: %s", table, e)
        echo(f"Error reading table {table}: {e}\n")
        await conn.rollback()
        return None

    if not rows:
        echo("No data found.\n")
        return 0

    for line in render_rows(columns, rows):
        echo(line)
    echo(f"\nDisplayed records: {len(rows)}\n")
    return len(rows)


async def display_all_tables(
    engine: AsyncEngine,
    echo: Echo = print,
    tables: Sequence[str] = TABLE_NAMES,
) -> dict[str, int | None]:
    """Dump every table over one connection; per-table failures don't stop the rest."""
    shown: dict[str, int | None] = {}
    async with engine.connect() as conn:
        for table in tables:
            echo(f"\n=== Table: {table.upper()} ===")
            shown[table] = await display_table(conn, table, echo)
    return shown


async def count_rows(engine: AsyncEngine, tables: Sequence[str] = TABLE_NAMES) -> dict[str, int]:
    """Row count for each table."""
    counts: dict[str, int] = {}
    async with engine.connect() as conn:
        for table in tables:
            result = await conn.execute(text(f'SELECT count(*) FROM "{table}"'))
            counts[table] = result.scalar_one()
    return counts
