from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    APP_NAME: str = "Sign Shop Estimator"
    LOG_LEVEL: str = "INFO"

    # Result display: numbers show at most this many decimals
    DISPLAY_MAX_FRACTION_DIGITS: int = 6

    # Form starts on the line marker group (bullet markers)
    DEFAULT_PART_GROUP: str = "lineMarkers"

    CORS_ORIGINS: list[str] = ["*"]

    class Config:
        env_file = ".env"


settings = Settings()
