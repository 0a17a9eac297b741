# backend/travel_ai/core/config_loader.py

from typing import List, Optional
from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

# Also exported to os.environ so the OpenAI SDK sees its own variables.
load_dotenv()


class Settings(BaseSettings):
    OPENAI_API_KEY: str = ""
    OPENAI_ORGANIZATION: Optional[str] = None
    OPENAI_PROJECT: Optional[str] = None
    OPENAI_BASE_URL: Optional[str] = None

    openai_model: str = "gpt-4o"
    openai_temperature: float = 0.7
    openai_max_tokens: int = 500
    openai_timeout: Optional[float] = None   # None -> SDK default

    DB_PATH: str = "data.sqlite3"

    environment: str = "development"
    cors_origins: List[str] = ["*"]

    log_level: str = "INFO"
    log_dir: Optional[str] = None           # None -> console only

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )

    @property
    def is_development(self) -> bool:
        return self.environment.lower() == "development"


settings = Settings()
