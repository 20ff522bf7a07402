"""Settings — defaults and URL coercion."""

from todo_app.config import Settings


def test_cors_origins_default_to_empty(monkeypatch):
    monkeypatch.delenv("CORS_ORIGINS", raising=False)
    assert Settings(_env_file=None).cors_origins == []


def test_postgres_url_is_coerced_to_asyncpg():
    settings = Settings(database_url="postgresql://u:p@db:5432/todo")
    assert settings.database_url == "postgresql+asyncpg://u:p@db:5432/todo"
