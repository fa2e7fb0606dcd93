from typing import List, Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    database_url: str
    jwt_secret: str
    jwt_algorithm: str = "HS256"
    access_token_expire_minutes: int = 60 * 24

    # Регистрация администраторов через API по умолчанию запрещена
    allow_admin_registration: bool = False

    cors_origins: List[str] = ["*"]
    create_tables_on_startup: bool = True

    # Объектное хранилище: "s3" или "memory"
    storage_backend: str = "s3"
    s3_bucket: str = ""
    s3_region: str = "us-east-1"
    s3_endpoint_url: Optional[str] = None
    s3_access_key_id: Optional[str] = None
    s3_secret_access_key: Optional[str] = None
    s3_public_base_url: Optional[str] = None

    max_upload_bytes: int = 50 * 1024 * 1024
    # Квота только для отображения, не применяется
    storage_quota_bytes: int = 1024 * 1024 * 1024

    log_level: str = "INFO"
    log_format: str = "plain"

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
