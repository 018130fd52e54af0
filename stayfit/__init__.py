"""StayFit database seeding and inspection console."""

__version__ = "0.1.0"
