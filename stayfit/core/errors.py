"""Exceptions raised by console operations."""


class StayFitError(Exception):
    """Base for errors the console reports to the user."""


class SeedingError(StayFitError):
    """A generator failed; the whole seeding transaction was rolled back."""

    def __init__(self, table: str, cause: BaseException):
        self.table = table
        self.cause = cause
        super().__init__(f"seeding {table} failed: {cause}")

