import pytest

from config import DEFAULT_CORS_ORIGINS, Settings, load_settings

ENV_VARS = [
    "SUPABASE_URL", "SUPABASE_KEY", "JOURNAL_TABLE", "PORT", "APP_ENV",
    "CORS_ORIGINS", "DB_RETRY_DELAY", "DB_RETRY_MULTIPLIER",
    "DB_RETRY_MAX_DELAY", "LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        # setenv first so teardown also clears what load_dotenv writes
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


def test_defaults():
    settings = load_settings()
    assert settings == Settings()
    assert settings.port == 3000
    assert settings.cors_origins == DEFAULT_CORS_ORIGINS
    assert settings.retry_delay == 5.0
    assert settings.retry_max_delay is None
    assert not settings.has_database


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("SUPABASE_URL", "https://example.supabase.co")
    monkeypatch.setenv("SUPABASE_KEY", "secret")
    monkeypatch.setenv("JOURNAL_TABLE", "journal")
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("APP_ENV", "production")
    monkeypatch.setenv("CORS_ORIGINS", "https://a.example, https://b.example,")
    monkeypatch.setenv("DB_RETRY_DELAY", "1.5")
    monkeypatch.setenv("DB_RETRY_MULTIPLIER", "2")
    monkeypatch.setenv("DB_RETRY_MAX_DELAY", "60")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = load_settings()

    assert settings.has_database
    assert settings.table_name == "journal"
    assert settings.port == 8080
    assert settings.environment == "production"
    assert settings.cors_origins == ["https://a.example", "https://b.example"]
    assert settings.retry_delay == 1.5
    assert settings.retry_multiplier == 2.0
    assert settings.retry_max_delay == 60.0
    assert settings.log_level == "DEBUG"


def test_reads_env_file(tmp_path):
    env_file = tmp_path / "custom.env"
    env_file.write_text("SUPABASE_URL=https://file.supabase.co\nSUPABASE_KEY=k\nPORT=4000\n")

    settings = load_settings(str(env_file))

    assert settings.supabase_url == "https://file.supabase.co"
    assert settings.port == 4000


def test_bad_port_raises(monkeypatch):
    monkeypatch.setenv("PORT", "abc")
    with pytest.raises(ValueError):
        load_settings()
