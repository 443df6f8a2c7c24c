from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    PROJECT_NAME: str = "Share Link Codec"
    LOG_LEVEL: str = "INFO"
    API_PREFIX: str = "/api/v1"

    # Upper bound for links accepted by the parse endpoint
    MAX_LINK_LENGTH: int = 4096

    class Config:
        env_file = ".env"

settings = Settings()
