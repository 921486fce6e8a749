import secrets
from typing import Final

import boto3
from botocore.client import Config

from presigner.core.config import ServiceConfig

UPLOAD_PREFIX: Final[str] = "uploads/"


class StorageService:
    """S3-compatible storage backend used to sign upload URLs."""

    scheme: Final[str] = "s3"

    def __init__(self, config: ServiceConfig) -> None:
        self.config = config
        session = boto3.session.Session()
        secret_key = config.secret_access_key.get_secret_value() if config.secret_access_key else None
        self.client = session.client(
            "s3",
            endpoint_url=config.endpoint_url,
            aws_access_key_id=config.access_key_id,
            aws_secret_access_key=secret_key,
            region_name=config.region,
            config=Config(signature_version="s3v4"),
        )
        self.bucket = config.bucket

    def generate_upload_key(self, filename: str) -> str:
        # The filename is kept verbatim; uniqueness comes from the 128-bit prefix.
        return f"{UPLOAD_PREFIX}{secrets.token_hex(16)}-{filename}"

    def create_presigned_put(
        self,
        key: str,
        content_type: str,
        expires_in: int = 300,
    ) -> str:
        return self.client.generate_presigned_url(
            "put_object",
            Params={
                "Bucket": self.bucket,
                "Key": key,
                "ContentType": content_type,
            },
            ExpiresIn=expires_in,
        )
