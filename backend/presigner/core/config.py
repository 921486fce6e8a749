from functools import lru_cache

from pydantic import BaseModel, ConfigDict, Field, HttpUrl, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        protected_namespaces=(),
    )

    debug: bool = Field(default=False, alias="DEBUG")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=3000, alias="PORT")
    frontend_origins: str = Field(default="*", alias="CORS_ORIGINS")

    aws_bucket_region: str | None = Field(default=None, alias="AWS_BUCKET_REGION")
    aws_access_key_id: str | None = Field(default=None, alias="AWS_ACCESS_KEY_ID")
    aws_secret_access_key: SecretStr | None = Field(default=None, alias="AWS_SECRET_ACCESS_KEY")
    aws_bucket_name: str = Field(default="", alias="AWS_BUCKET_NAME")
    s3_endpoint: HttpUrl | None = Field(default=None, alias="S3_ENDPOINT_URL")

    api_key: SecretStr | None = Field(default=None, alias="API_KEY")
    require_api_key: bool = Field(default=True, alias="REQUIRE_API_KEY")
    url_ttl_seconds: int = Field(default=300, ge=1, le=604800, alias="URL_TTL_SECONDS")

    @property
    def cors_origins(self) -> list[str]:
        return [origin.strip() for origin in self.frontend_origins.split(",") if origin.strip()]


class ServiceConfig(BaseModel):
    """Everything the issuer needs, fixed for the lifetime of the process."""

    model_config = ConfigDict(frozen=True)

    region: str | None = None
    access_key_id: str | None = None
    secret_access_key: SecretStr | None = None
    bucket: str = ""
    endpoint_url: str | None = None
    api_key: SecretStr | None = None
    require_api_key: bool = True
    url_ttl_seconds: int = Field(default=300, ge=1, le=604800)


@lru_cache
def get_settings() -> Settings:
    return Settings()


def build_service_config(settings: Settings | None = None) -> ServiceConfig:
    settings = settings or get_settings()
    return ServiceConfig(
        region=settings.aws_bucket_region,
        access_key_id=settings.aws_access_key_id,
        secret_access_key=settings.aws_secret_access_key,
        bucket=settings.aws_bucket_name,
        endpoint_url=str(settings.s3_endpoint) if settings.s3_endpoint else None,
        api_key=settings.api_key,
        require_api_key=settings.require_api_key,
        url_ttl_seconds=settings.url_ttl_seconds,
    )
