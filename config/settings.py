from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    # Core Engine implementation as "package.module:factory". The factory is
    # called with no arguments and must return a CoreEngineProtocol.
    CORE_ENGINE: str = ""

    # Limits
    MAX_PREPAID_BONDS: int = 100
    MATCH_HISTORY_LIMIT: int = 100  # default n for matchoutcomes / matchfails

    # App
    APP_NAME: str = "Market Admin"
    API_PREFIX: str = "/api"
    LOG_LEVEL: str = "INFO"
    DEBUG: bool = False  # Safe default for production; set DEBUG=True in .env for local dev


settings = Settings()
