from functools import lru_cache
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    openai_api_key: str = Field(default="", alias="OPENAI_API_KEY")
    openai_base_url: str = Field(default="https://api.openai.com/v1", alias="OPENAI_BASE_URL")
    openai_model: str = Field(default="gpt-4o-mini", alias="OPENAI_MODEL")
    llm_temperature: float = Field(default=0.8, alias="LLM_TEMPERATURE")
    llm_timeout_seconds: float = Field(default=60.0, alias="LLM_TIMEOUT_SECONDS")
    llm_num_retries: int = Field(default=0, alias="LLM_NUM_RETRIES")

    idea_default_count: int = Field(default=5, alias="IDEA_DEFAULT_COUNT")
    idea_max_count: int = Field(default=20, alias="IDEA_MAX_COUNT")

    def model_post_init(self, __context: Any) -> None:  # type: ignore[override]
        self.openai_api_key = self.openai_api_key.strip()
        self.openai_model = self.openai_model.strip() or "gpt-4o-mini"
        self.idea_max_count = max(self.idea_max_count, 1)
        if not 1 <= self.idea_default_count <= self.idea_max_count:
            self.idea_default_count = min(5, self.idea_max_count)
        self.llm_num_retries = max(self.llm_num_retries, 0)

    @property
    def has_api_key(self) -> bool:
        return bool(self.openai_api_key)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
