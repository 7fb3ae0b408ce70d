"""
Конфигурация прокси к OpenAI Assistants API.
Читается из окружения и .env в рабочей директории один раз при создании приложения.
Переменные окружения важнее значений из .env, пустые значения считаются незаданными.
"""
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://api.openai.com/v1"
DEFAULT_BETA = "assistants=v2"
DEFAULT_MESSAGES_LIMIT = 10


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
    )

    # OpenAI API
    openai_api_key: Optional[str] = None
    openai_assistant_id: Optional[str] = None
    openai_org_id: Optional[str] = None
    openai_base_url: str = DEFAULT_BASE_URL
    openai_beta: str = DEFAULT_BETA

    # Ограничения запросов
    messages_limit: int = DEFAULT_MESSAGES_LIMIT
    request_timeout: Optional[float] = None  # None: таймаут клиента по умолчанию

    # Настройки сервера
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8000

    @field_validator("openai_api_key", "openai_assistant_id", "openai_org_id", mode="before")
    @classmethod
    def _blank_is_unset(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v.strip() if isinstance(v, str) else v

    @field_validator("openai_base_url")
    @classmethod
    def _strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, v: str) -> str:
        return v.upper()
