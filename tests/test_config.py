from marriage_scores.config import Settings, load_settings


def test_settings_defaults(monkeypatch) -> None:
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)

    assert load_settings() == Settings(database_url="sqlite:///./marriage_scores.db", log_level="INFO")


def test_settings_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("DATABASE_URL", "postgresql://scores@localhost/marriage")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    assert load_settings() == Settings(database_url="postgresql://scores@localhost/marriage", log_level="DEBUG")
