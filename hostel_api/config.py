from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    mongodb_uri: str
    mongodb_database: str = "test"
    mongodb_collection: str = "hostels"
    mongodb_timeout_ms: int = 30000
    host: str = "0.0.0.0"
    port: int = 4000
    log_level: str = "INFO"
    static_dir: str = "public"
    cors_origins: list[str] = ["*"]
