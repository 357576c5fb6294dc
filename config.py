import os

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=f"{os.getenv('TARGET', 'dev')}.env")

    db_user: str = "postgres"
    db_password: str = "1234"
    db_ip: str = "postgres"
    db_port: int = 5432
    db_name: str = "taskpilot_db"
    db_url: str | None = None
    db_create_all: bool = True
    secret: str = "YOUR_SECRET"
    access_policy: str = "owner"
    log_level: str = "INFO"
    log_dir: str | None = None
    cors_origins: list[str] = ["http://localhost:5173"]


settings = Settings()
