"""Application configuration."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # SECOP II open data (Socrata)
    SECOP_BASE_URL: str
    SECOP_APP_TOKEN: str = ""
    SECOP_TIMEOUT_S: float = 30.0

    # OpenAI
    OPENAI_API_KEY: str
    MODEL_NAME: str = "gpt-4o"
    LLM_TEMPERATURE: float = 0.0
    LLM_TIMEOUT_S: float = 60.0

    # Application
    APP_NAME: str = "SECOP Relay"
    HOST: str = "0.0.0.0"
    PORT: int = 8080

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")


# Global settings instance
settings = Settings()
