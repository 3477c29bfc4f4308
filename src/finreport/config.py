from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_name: str = "FinReport"
    app_version: str = "0.1.0"
    host: str = "localhost"
    port: int = 5000
    debug: bool = False
    log_level: str = "INFO"
    cors_allow_origins: list[str] = ["*"]
    report_filename_prefix: str = "Report"

    class Config:
        env_file = ".env"


settings = Settings()
