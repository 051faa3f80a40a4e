from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="PB_TYPEGEN_", env_file=".env", extra="ignore")

    app_name: str = "pocketbase-typegen"
    log_level: str = "INFO"

    url: str | None = None
    email: str | None = None
    password: str | None = None
    db: str | None = None
    json_path: str | None = Field(default=None, validation_alias="PB_TYPEGEN_JSON")

    out: str = "pocketbase-types.ts"
    request_timeout: float = 30.0


def load_settings(env_file: str | None = ".env") -> Settings:
    """Build settings, reading the given env file when it exists; None reads only the environment."""
    return Settings(_env_file=env_file)

settings = Settings()
