import pytest

from devconnector import config
from devconnector.config import Settings, load_settings
from devconnector.core.errors import ConfigurationError


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch):
    monkeypatch.setattr(config, "load_dotenv", lambda: None)
    for name in (
        "JWT_SECRET_KEY",
        "JWT_ALGORITHM",
        "JWT_EXPIRES_SECONDS",
        "DATABASE_URL",
        "BCRYPT_ROUNDS",
        "GRAVATAR_SIZE",
        "GRAVATAR_RATING",
        "GRAVATAR_DEFAULT",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


def test_defaults(monkeypatch):
    monkeypatch.setenv("JWT_SECRET_KEY", "s3cret")

    settings = load_settings()

    assert settings.jwt_secret_key == "s3cret"
    assert settings.jwt_algorithm == "HS256"
    assert settings.jwt_expires_seconds == 360000
    assert settings.bcrypt_rounds == 10
    assert (settings.gravatar_size, settings.gravatar_rating, settings.gravatar_default) == (200, "pg", "mm")


def test_overrides(monkeypatch):
    monkeypatch.setenv("JWT_SECRET_KEY", "s3cret")
    monkeypatch.setenv("JWT_EXPIRES_SECONDS", "60")
    monkeypatch.setenv("BCRYPT_ROUNDS", "12")
    monkeypatch.setenv("DATABASE_URL", "sqlite:///:memory:")

    settings = load_settings()

    assert settings.jwt_expires_seconds == 60
    assert settings.bcrypt_rounds == 12
    assert settings.database_url == "sqlite:///:memory:"


def test_missing_secret_is_fatal():
    with pytest.raises(ConfigurationError):
        load_settings()


def test_non_integer_value_is_fatal(monkeypatch):
    monkeypatch.setenv("JWT_SECRET_KEY", "s3cret")
    monkeypatch.setenv("JWT_EXPIRES_SECONDS", "soon")

    with pytest.raises(ConfigurationError):
        load_settings()


def test_lifetime_must_be_positive():
    with pytest.raises(ConfigurationError):
        Settings(jwt_secret_key="s3cret", jwt_expires_seconds=0)


def test_unknown_log_level_is_fatal(monkeypatch):
    monkeypatch.setenv("JWT_SECRET_KEY", "s3cret")
    monkeypatch.setenv("LOG_LEVEL", "chatty")

    with pytest.raises(ConfigurationError):
        load_settings()


def test_log_level_is_case_insensitive(monkeypatch):
    monkeypatch.setenv("JWT_SECRET_KEY", "s3cret")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    assert load_settings().log_level == "debug"
