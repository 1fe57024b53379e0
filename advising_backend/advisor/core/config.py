from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    database_url: str = "sqlite:///courses.db"
    catalog_path: str | None = None
    catalog_dir: str = "data"
    catalog_encoding: str = "utf-8-sig"
    max_upload_bytes: int = 1024 * 1024
    log_level: str = "INFO"
    environment: str = "development"

    class Config:
        env_file = ".env"
        env_prefix = "ADVISOR_"
        extra = "ignore"


settings = Settings()
