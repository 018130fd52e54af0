"""Print row counts for every StayFit table."""

import asyncio

from stayfit.core.config import get_settings
from stayfit.core.constants import TABLE_NAMES
from stayfit.db.session import create_engine_from_settings
from stayfit.services.inspector import count_rows


async def check_data():
    engine = create_engine_from_settings(get_settings())
    try:
        print(f"Checking tables: {list(TABLE_NAMES)}")
        counts = await count_rows(engine)
        for table, count in counts.items():
            print(f"Table '{table}' row count: {count}")
    except Exception as e:
        print(f"Error checking DB: {e}")
    finally:
        await engine.dispose()

if __name__ == "__main__":
    asyncio.run(check_data())
