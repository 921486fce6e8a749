import logging

from presigner.core.config import ServiceConfig
from presigner.core.errors import BadRequestError, ServerMisconfiguredError, UpstreamError
from presigner.schemas import SignedUploadGrant
from presigner.services.storage import StorageService

logger = logging.getLogger(__name__)


class UploadUrlIssuer:
    """Turns an upload request into a short-lived signed PUT URL.

    Holds no per-request state, so a single instance serves every request.
    """

    def __init__(self, config: ServiceConfig, storage: StorageService) -> None:
        self.config = config
        self.storage = storage

    def issue(self, filename: str | None, content_type: str | None) -> SignedUploadGrant:
        if not filename or not content_type:
            raise BadRequestError()

        key = self.storage.generate_upload_key(filename)

        if not self.storage.bucket:
            logger.critical("AWS_BUCKET_NAME is not configured on the server")
            raise ServerMisconfiguredError()

        try:
            upload_url = self.storage.create_presigned_put(
                key,
                content_type,
                expires_in=self.config.url_ttl_seconds,
            )
        except Exception as exc:
            logger.exception("Error creating pre-signed URL for %s", key)
            raise UpstreamError() from exc

        logger.info("Successfully generated pre-signed URL for: %s", key)
        return SignedUploadGrant(upload_url=upload_url, key=key)
