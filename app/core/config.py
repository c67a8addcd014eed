"""
Core configuration and settings for the Catalog Service
Following FastAPI best practices for configuration management
"""

from typing import List, Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Config(BaseSettings):
    """Application configuration with environment variable support"""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",  # Allow extra fields to be ignored
    )

    # Service information
    service_name: str = Field(default="catalog-service")
    service_version: str = Field(default="1.0.0")
    environment: str = Field(default="development")

    # Server configuration
    port: int = Field(default=8000)
    host: str = Field(default="0.0.0.0")  # nosec B104
    api_prefix: str = Field(default="")

    # Database configuration
    mongodb_uri: Optional[str] = Field(default=None)
    mongodb_database: str = Field(default="catalog")

    # Logging configuration
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="console")
    log_to_file: bool = Field(default=False)
    log_to_console: bool = Field(default=True)
    log_file_path: str = Field(default="logs/catalog-service.log")

    # Request tracing
    correlation_id_header: str = Field(default="X-Correlation-ID")
    enable_tracing: bool = Field(default=False)

    # CORS - comma separated list of origins
    allowed_origins: str = Field(default="*")

    # JWT Authentication configuration
    jwt_secret: Optional[str] = Field(default=None)
    jwt_algorithm: str = Field(default="HS256")
    jwt_expiration_days: int = Field(default=7)

    # Object storage (S3 compatible)
    s3_bucket_name: Optional[str] = Field(default=None)
    s3_endpoint_url: Optional[str] = Field(default=None)
    s3_region: str = Field(default="us-east-1")
    s3_access_key_id: Optional[str] = Field(default=None)
    s3_secret_access_key: Optional[str] = Field(default=None)
    s3_public_base_url: Optional[str] = Field(default=None)

    # Image uploads
    products_image_folder: str = Field(default="catalog-products")
    hero_image_folder: str = Field(default="catalog-hero")
    max_upload_size: int = Field(default=50 * 1024 * 1024)  # 50MB per file
    max_product_images: int = Field(default=10)
    upload_concurrency: int = Field(default=4, ge=1)

    @property
    def cors_origins(self) -> List[str]:
        """Allowed CORS origins as a list"""
        origins = [origin.strip() for origin in self.allowed_origins.split(",")]
        return [origin for origin in origins if origin] or ["*"]

    @property
    def storage_configured(self) -> bool:
        """Whether object storage credentials are present"""
        return bool(self.s3_bucket_name and self.s3_access_key_id and self.s3_secret_access_key)


# Global config instance
config = Config()
