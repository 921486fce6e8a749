from fastapi import APIRouter, Depends

from presigner.api.deps import get_upload_issuer, require_api_key
from presigner.schemas import ErrorResponse, PresignRequest, SignedUploadGrant
from presigner.services.uploads import UploadUrlIssuer

router = APIRouter(tags=["uploads"])


@router.post(
    "/get-presigned-url",
    response_model=SignedUploadGrant,
    dependencies=[Depends(require_api_key)],
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def get_presigned_url(
    payload: PresignRequest,
    issuer: UploadUrlIssuer = Depends(get_upload_issuer),
) -> SignedUploadGrant:
    return issuer.issue(payload.filename, payload.content_type)
