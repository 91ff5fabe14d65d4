from enum import Enum


class GroqModels(Enum):
    """Supported Groq chat-completion model identifiers"""

    LLAMA3_1_8B_INSTANT = "llama-3.1-8b-instant"
    LLAMA3_3_70B_VERSATILE = "llama-3.3-70b-versatile"
    GEMMA_2_9B = "gemma2-9b-it"


class AppSettings:
    """Central place for all application-level configuration"""

    GROQ_API_KEY_PLACEHOLDER: str = "YOUR_GROQ_API_KEY_HERE"
    GROQ_MODEL: GroqModels = GroqModels.LLAMA3_1_8B_INSTANT
    GROQ_BASE_URL: str = "https://api.groq.com/openai/v1"
    GROQ_TEMPERATURE: float = 0.7
    REQUEST_TIMEOUT: float = 30.0
    API_VERSION = "/v1"
    ENVIRONMENT = "development"


def api_key_is_set(api_key: str | None) -> bool:
    """A key counts as set unless it is empty or the placeholder"""
    return bool(api_key) and api_key != AppSettings.GROQ_API_KEY_PLACEHOLDER
