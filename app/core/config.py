from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    GRADING_PROVIDER: str = "gemini"

    GEMINI_API_KEY: str | None = None
    GEMINI_MODEL: str = "gemini-3-flash-preview"
    GEMINI_BASE_URL: str = "https://generativelanguage.googleapis.com/v1beta"
    GEMINI_TEMPERATURE: float = 0.2
    GEMINI_TOP_K: int = 40
    GEMINI_TOP_P: float = 0.95
    GEMINI_MAX_OUTPUT_TOKENS: int = 2048

    OPENAI_API_KEY: str | None = None
    OPENAI_MODEL_GRADE: str = "gpt-4o-mini"
    OPENAI_TEMPERATURE_GRADE: float = 0.3

    GRADING_TIMEOUT_SECONDS: float = 30.0
    GRADING_PACING_MS: int = 300

    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"


settings = Settings()
