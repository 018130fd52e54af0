from stayfit.core.config import Settings


def test_defaults_point_at_local_postgres():
    settings = Settings(_env_file=None)
    assert settings.async_database_url == "postgresql+asyncpg://postgres:@localhost:5432/StayFit"
    assert settings.database_url.endswith("/StayFit?sslmode=disable")
    assert settings.seed is None
    assert set(Settings.model_fields) >= {"debug", "log_level", "seed"}
    assert "app_name" not in Settings.model_fields


def test_credentials_are_escaped():
    settings = Settings(_env_file=None, database_user="fit user", database_password="p@ss:word")
    assert "fit+user:p%40ss%3Aword@" in settings.async_database_url


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("DATABASE_HOST", "db.internal")
    monkeypatch.setenv("DATABASE_PORT", "6543")
    monkeypatch.setenv("DATABASE_POOL_SIZE", "2")
    monkeypatch.setenv("DATABASE_SSL_MODE", "require")
    monkeypatch.setenv("SEED", "17")
    settings = Settings(_env_file=None)
    assert settings.database_pool_size == 2
    assert settings.seed == 17
    assert settings.async_database_url.startswith("postgresql+asyncpg://postgres:@db.internal:6543/")
    assert settings.async_database_url.endswith("?ssl=require")
