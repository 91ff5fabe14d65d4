import pytest
from pydantic import ValidationError

from gita_guide.core.config import Settings
from gita_guide.core.constants import AppSettings, GroqModels, api_key_is_set


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("GROQ_API_KEY", "GROQ_MODEL", "GROQ_BASE_URL",
                 "GROQ_TEMPERATURE", "REQUEST_TIMEOUT", "ENVIRONMENT"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(clean_env):
    settings = Settings(_env_file=None)

    assert settings.GROQ_API_KEY is None
    assert settings.GROQ_MODEL is GroqModels.LLAMA3_1_8B_INSTANT
    assert settings.GROQ_TEMPERATURE == 0.7
    assert not settings.has_api_key


def test_reads_environment(clean_env):
    clean_env.setenv("groq_api_key", "gsk_live")
    clean_env.setenv("GROQ_MODEL", "llama-3.3-70b-versatile")
    clean_env.setenv("GROQ_TEMPERATURE", "0.3")

    settings = Settings(_env_file=None)

    assert settings.has_api_key
    assert settings.groq_config == {
        "api_key": "gsk_live",
        "base_url": AppSettings.GROQ_BASE_URL,
        "model": "llama-3.3-70b-versatile",
        "temperature": 0.3,
        "timeout": AppSettings.REQUEST_TIMEOUT,
    }


def test_placeholder_key_is_not_configured(clean_env):
    clean_env.setenv("GROQ_API_KEY", AppSettings.GROQ_API_KEY_PLACEHOLDER)

    assert not Settings(_env_file=None).has_api_key


def test_out_of_range_temperature_is_rejected(clean_env):
    clean_env.setenv("GROQ_TEMPERATURE", "3.5")

    with pytest.raises(ValidationError):
        Settings(_env_file=None)


@pytest.mark.parametrize("api_key,expected", [
    (None, False),
    ("", False),
    (AppSettings.GROQ_API_KEY_PLACEHOLDER, False),
    ("gsk_live", True),
])
def test_api_key_is_set(api_key, expected):
    assert api_key_is_set(api_key) is expected
