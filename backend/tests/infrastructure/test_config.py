"""Settings — environment-driven configuration."""

from jobtrail.config import Settings


def test_postgres_url_coerced_to_asyncpg():
    settings = Settings(database_url="postgresql://u:p@host:5432/db")
    assert settings.database_url == "postgresql+asyncpg://u:p@host:5432/db"


def test_sqlite_url_untouched():
    settings = Settings(database_url="sqlite+aiosqlite:///local.db")
    assert settings.database_url == "sqlite+aiosqlite:///local.db"


def test_history_close_out_off_by_default(monkeypatch):
    monkeypatch.delenv("HISTORY_CLOSE_PRIOR_ON_CHANGE", raising=False)
    assert Settings().history_close_prior_on_change is False


def test_close_out_read_from_env(monkeypatch):
    monkeypatch.setenv("HISTORY_CLOSE_PRIOR_ON_CHANGE", "true")
    assert Settings().history_close_prior_on_change is True
