"""Database package: engine, session, base."""

from stayfit.db.session import create_engine_from_settings, create_session_maker

__all__ = ["create_engine_from_settings", "create_session_maker"]
