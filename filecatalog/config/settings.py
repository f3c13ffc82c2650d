from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    object_store_backend: str = "s3"
    local_storage_root: str = "/app/storage"
    aws_region: str = "us-east-1"
    s3_endpoint_url: str = ""
    aws_access_key_id: str = ""
    aws_secret_access_key: str = ""

    db_host: str = "host.docker.internal"
    db_port: int = 5432
    db_database: str = "filecatalog"
    db_username: str = "filecatalog"
    db_password: str = "secret"
    db_pool_max_size: int = 4

    catalog_table: str = "file_metadata"
    batch_failure_policy: str = "abort"
