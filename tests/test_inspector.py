import random

from sqlalchemy import text

from stayfit.core.constants import TABLE_NAMES
from stayfit.services.inspector import (
    count_rows,
    display_all_tables,
    display_table,
    format_cell,
    format_header,
    render_rows,
)
from stayfit.services.seeding import seed_database

from tests.conftest import NOW


def test_format_cell_null():
    assert format_cell(None) == "NULL".ljust(15)


def test_format_cell_pads_short_values():
    assert format_cell(42) == "42" + " " * 13
    assert len(format_cell(True)) == 15


def test_format_cell_keeps_exactly_fifteen_chars():
    assert format_cell("a" * 15) == "a" * 15


def test_format_cell_truncates_long_values():
    assert format_cell("someone@example.com") == "someone@exam..."


def test_header_cuts_long_column_names():
    assert format_header(["access_token_expires_at", "id"]) == "access_token_ex | " + "id".ljust(15)


def test_render_rows_layout():
    lines = render_rows(["a", "b"], [(1, None), ("x" * 20, 2.5)])
    assert lines[1] == "-" * 36
    assert lines[2].split(" | ") == ["1".ljust(15), "NULL".ljust(15)]
    assert lines[3].startswith("xxxxxxxxxxxx... | 2.5")
    assert len(lines) == 4


async def test_empty_tables_report_no_data(engine):
    out = []
    shown = await display_all_tables(engine, out.append)
    assert shown == {table: 0 for table in TABLE_NAMES}
    assert out.count("No data found.\n") == len(TABLE_NAMES)
    assert out[0] == "\n=== Table: USERS ==="


async def test_display_limits_to_fifty_rows(engine, session_maker):
    await seed_database(session_maker, random.Random(11), now=NOW, user_count=10)
    out = []
    async with engine.connect() as conn:
        shown = await display_table(conn, "activity_log", out.append)
    assert shown == 50
    assert out[-1] == "\nDisplayed records: 50\n"
    assert out[0].startswith("log_id".ljust(15) + " | user_id")


async def test_unreadable_table_does_not_stop_the_rest(engine):
    async with engine.begin() as conn:
        await conn.execute(text("DROP TABLE user_settings"))

    out = []
    shown = await display_all_tables(engine, out.append)

    assert shown["user_settings"] is None
    assert any(line.startswith("Error reading table user_settings:") for line in out)
    # tables after the broken one are still displayed
    assert shown["meal_types"] == 0
    assert shown["activity_log"] == 0
    assert out[-1] == "No data found.\n"


async def test_count_rows(engine, seeded):
    counts = await count_rows(engine)
    assert set(counts) == set(TABLE_NAMES)
    assert counts["users"] == 15
