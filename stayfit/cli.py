"""Interactive console: inspect tables, generate test data, clear everything."""

from __future__ import annotations

import asyncio
import logging
import random
from collections.abc import Awaitable, Callable

from sqlalchemy.ext.asyncio import AsyncEngine

from stayfit.core.config import Settings, get_settings
from stayfit.core.errors import SeedingError
from stayfit.db.session import create_engine_from_settings, create_session_maker
from stayfit.services.inspector import display_all_tables
from stayfit.services.outcome import OperationResult
from stayfit.services.reset import clear_all_data
from stayfit.services.seeding import seed_database

logger = logging.getLogger(__name__)

MENU = (
    "================================\n"
    "          Main Menu           \n"
    "================================\n"
    "1. Display data from all tables\n"
    "2. Generate test data\n"
    "3. Exit\n"
)
# "-1" (clear all data) is intentionally left off the menu
CLEAR_CHOICE = "-1"
EXIT_CHOICE = "3"

Echo = Callable[[str], None]
Prompt = Callable[[str], str]


async def show_tables(engine: AsyncEngine, echo: Echo) -> OperationResult:
    shown = await display_all_tables(engine, echo)
    counts = {table: n for table, n in shown.items() if n is not None}
    failed = [table for table, n in shown.items() if n is None]
    message = f"Displayed {len(counts)} tables."
    if failed:
        message += f" Could not read: {', '.join(failed)}."
    return OperationResult.success("display", message, counts)


async def generate_test_data(engine: AsyncEngine, rng: random.Random, echo: Echo) -> OperationResult:
    echo("\nStarting test data generation...\n")

    def progress(table: str, count: int) -> None:
        echo(f"-> {count} {table} rows inserted.")

    report = await seed_database(create_session_maker(engine), rng, progress=progress)
    return OperationResult.success(
        "generate",
        f"Test data generation completed successfully! ({report.total} rows)",
        report.counts,
    )


async def run_action(name: str, action: Callable[[], Awaitable[OperationResult]]) -> OperationResult:
    """Turn any failure of a menu action into a failed result so the loop keeps going."""
    try:
        return await action()
    except SeedingError as e:
        return OperationResult.failure(
            name, e, f"Error during data generation ({e.table}): {e.cause}\nTransaction rolled back."
        )
    except Exception as e:
        logger.exception("Menu action %s failed", name)
        return OperationResult.failure(name, e)


def report(result: OperationResult, echo: Echo) -> None:
    if result.ok:
        logger.info("%s finished: %s", result.name, result.message)
    else:
        logger.error("%s failed: %s", result.name, result.error)
    echo(f"\n{result.message}\n")


async def run_menu(
    engine: AsyncEngine,
    *,
    seed: int | None = None,
    input_fn: Prompt = input,
    echo: Echo = print,
) -> None:
    """Menu loop; returns when the user exits or the input stream closes."""
    rng = random.Random(seed)
    actions: dict[str, tuple[str, Callable[[], Awaitable[OperationResult]]]] = {
        "1": ("display", lambda: show_tables(engine, echo)),
        "2": ("generate", lambda: generate_test_data(engine, rng, echo)),
        CLEAR_CHOICE: ("clear", lambda: clear_all_data(engine, input_fn)),
    }

    echo("=== Fitness Database Console App ===\n")
    while True:
        echo(MENU)
        try:
            choice = input_fn("Your choice: ").strip()
        except EOFError:
            echo("\nInput closed. Exiting application...")
            return

        if choice == EXIT_CHOICE:
            echo("Exiting application...")
            return
        if choice not in actions:
            echo("Invalid choice. Please try again.\n")
            continue

        name, action = actions[choice]
        report(await run_action(name, action), echo)


async def _run(settings: Settings) -> None:
    engine = create_engine_from_settings(settings)
    try:
        await run_menu(engine, seed=settings.seed)
    finally:
        await engine.dispose()


def main() -> None:
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        asyncio.run(_run(settings))
    except KeyboardInterrupt:
        print("\nInterrupted. Exiting application...")


if __name__ == "__main__":
    main()
