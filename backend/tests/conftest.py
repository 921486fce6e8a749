import os
import sys
from pathlib import Path

import pytest
import pytest_asyncio
from botocore.exceptions import ClientError
from httpx import AsyncClient, ASGITransport
from pydantic import SecretStr

# Ensure project root is on sys.path
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

os.environ.setdefault("AWS_BUCKET_REGION", "us-east-1")
os.environ.setdefault("AWS_ACCESS_KEY_ID", "test")
os.environ.setdefault("AWS_SECRET_ACCESS_KEY", "test")
os.environ.setdefault("AWS_BUCKET_NAME", "test-bucket")
os.environ.setdefault("API_KEY", "test-api-key")

from presigner.core.config import ServiceConfig, Settings, get_settings
from presigner.main import create_app
from presigner.services import storage as storage_service


class DummyStorage(storage_service.StorageService):
    def __init__(self, config: ServiceConfig) -> None:  # type: ignore[super-init-not-called]
        self.config = config
        self.bucket = config.bucket
        self.calls: list[tuple[str, str, int]] = []

    def create_presigned_put(self, key: str, content_type: str, expires_in: int = 300) -> str:  # type: ignore[override]
        self.calls.append((key, content_type, expires_in))
        return f"https://example.com/put/{key}?expires={expires_in}"


class FailingStorage(DummyStorage):
    def create_presigned_put(self, key: str, content_type: str, expires_in: int = 300) -> str:  # type: ignore[override]
        raise ClientError(
            {"Error": {"Code": "AccessDenied", "Message": "secret provider detail"}},
            "PutObject",
        )


@pytest.fixture(scope="session", autouse=True)
def configure_environment():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def api_key() -> str:
    return "test-api-key"


@pytest.fixture
def make_config(api_key):
    def _make(**overrides) -> ServiceConfig:
        values = {
            "region": "us-east-1",
            "access_key_id": "test",
            "secret_access_key": SecretStr("test"),
            "bucket": "test-bucket",
            "api_key": SecretStr(api_key),
            "require_api_key": True,
            "url_ttl_seconds": 300,
        }
        values.update(overrides)
        return ServiceConfig(**values)

    return _make


@pytest.fixture
def dummy_storage_factory():
    return DummyStorage


@pytest.fixture
def failing_storage_factory():
    return FailingStorage


@pytest.fixture
def service_config(make_config) -> ServiceConfig:
    return make_config()


@pytest.fixture
def storage(service_config) -> DummyStorage:
    return DummyStorage(service_config)


@pytest.fixture
def app_instance(service_config, storage):
    return create_app(config=service_config, storage=storage)


@pytest_asyncio.fixture
async def client(app_instance):
    transport = ASGITransport(app=app_instance)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client


@pytest.fixture
def client_factory():
    """Builds clients for apps with a non-default configuration or backend."""

    def _make(
        config: ServiceConfig,
        storage: DummyStorage | None = None,
        settings: Settings | None = None,
    ) -> AsyncClient:
        app = create_app(config=config, storage=storage or DummyStorage(config), settings=settings)
        return AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver")

    return _make
