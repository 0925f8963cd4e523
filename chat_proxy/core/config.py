import os
from typing import List, Optional

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from chat_proxy.core.exceptions import MissingApiKeyError

API_KEY_ENV = "OPENAI_API_KEY"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"

    # CORS (쉼표 구분, 비어있으면 같은 origin만 허용)
    cors_allow_origins: str = ""

    # LLM Client Settings
    llm_client_timeout: int = 60
    llm_client_max_tokens: int = 1024
    llm_client_temperature: Optional[float] = 0.7
    llm_client_top_p: float = 1.0

    # OpenAI Settings
    openai_api_key: Optional[str] = None
    openai_base_url: str = "https://api.openai.com/v1"
    openai_model: str = "gpt-4o-mini"

    # Chat Settings
    chat_system_prompt: Optional[str] = None
    input_max_length: int = 4000

    @model_validator(mode='after')
    def validate_llm_settings(self) -> 'Settings':
        # gpt-5 이상이거나 o1 모델인 경우 temperature를 사용하지 않음 (None 설정)
        model_name = self.openai_model.lower()
        if "gpt-5" in model_name or "o1-" in model_name:
            self.llm_client_temperature = None

        return self

    @property
    def cors_origins(self) -> List[str]:
        return [origin.strip() for origin in self.cors_allow_origins.split(",") if origin.strip()]


def get_api_key() -> str:
    """
    API 키를 요청 시점에 환경변수에서 읽어옴

    환경변수가 비어있으면 .env에서 로드된 설정값을 사용하고,
    둘 다 없으면 MissingApiKeyError를 발생시킴
    """
    api_key = os.environ.get(API_KEY_ENV) or settings.openai_api_key
    if not api_key:
        raise MissingApiKeyError(f"{API_KEY_ENV} is not configured")
    return api_key


settings = Settings()
