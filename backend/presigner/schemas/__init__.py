from presigner.schemas.health import HealthResponse
from presigner.schemas.storage import ErrorResponse, PresignRequest, SignedUploadGrant

__all__ = [
    "HealthResponse",
    "PresignRequest",
    "SignedUploadGrant",
    "ErrorResponse",
]
