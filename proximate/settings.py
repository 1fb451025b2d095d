from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    LISTINGS_PATH: str | None = None       # JSON con listings; si falta, se usa el catálogo semilla

    # cuántos candidatos pedimos al store antes de rankear
    TEXT_SEARCH_FETCH_LIMIT: int = 50
    VOICE_SEARCH_FETCH_LIMIT: int = 15
    MAX_RESULTS: int = 12
    MAX_IMAGES: int = 8
    DEFAULT_VOICE_CONFIDENCE: float = 0.8

    CORS_ALLOW_ORIGINS: list[str] = ["*"]
    LOG_LEVEL: str = "INFO"                # DEBUG para trazas detalladas

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

settings = Settings()
