"""Tests for settings parsing."""

from app.core.config import Settings


class TestCorsOrigins:
    def test_comma_separated(self, monkeypatch):
        monkeypatch.setenv("BACKEND_CORS_ORIGINS", "http://a.test, http://b.test")
        assert Settings().BACKEND_CORS_ORIGINS == ["http://a.test", "http://b.test"]

    def test_json_list(self, monkeypatch):
        monkeypatch.setenv("BACKEND_CORS_ORIGINS", '["http://a.test"]')
        assert Settings().BACKEND_CORS_ORIGINS == ["http://a.test"]

    def test_bad_json_gives_no_origins(self, monkeypatch):
        monkeypatch.setenv("BACKEND_CORS_ORIGINS", "[not json")
        assert Settings().BACKEND_CORS_ORIGINS == []


def test_database_url_from_environment(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql://u:p@db:5432/x")
    assert Settings().DATABASE_URL == "postgresql://u:p@db:5432/x"
