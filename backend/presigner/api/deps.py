from fastapi import Depends, Header, Request

from presigner.core.config import ServiceConfig
from presigner.core.security import check_api_key
from presigner.services.uploads import UploadUrlIssuer


def get_service_config(request: Request) -> ServiceConfig:
    return request.app.state.service_config


def get_upload_issuer(request: Request) -> UploadUrlIssuer:
    return request.app.state.upload_issuer


async def require_api_key(
    request: Request,
    x_api_key: str | None = Header(default=None, alias="x-api-key"),
    config: ServiceConfig = Depends(get_service_config),
) -> None:
    client = request.client.host if request.client else None
    check_api_key(config, x_api_key, client=client)
