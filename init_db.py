"""Create (or drop) all StayFit tables straight from the ORM metadata.

Usage:
    python init_db.py          # create missing tables
    python init_db.py --drop   # drop every table
Prefer `alembic upgrade head` for a managed schema.
"""

import argparse
import asyncio

from stayfit.core.config import get_settings
from stayfit.db.base import Base
from stayfit.db.session import create_engine_from_settings
# Import all models
from stayfit.models import *  # noqa: F401, F403


async def create_tables(drop: bool = False):
    engine = create_engine_from_settings(get_settings())
    async with engine.begin() as conn:
        if drop:
            print("Dropping all tables...")
            await conn.run_sync(Base.metadata.drop_all)
            print("Tables dropped.")
        else:
            print("Creating tables...")
            await conn.run_sync(Base.metadata.create_all)
            print("Tables created.")
    await engine.dispose()


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--drop", action="store_true", help="drop every table instead of creating")
    args = parser.parse_args()
    asyncio.run(create_tables(drop=args.drop))


if __name__ == "__main__":
    main()
