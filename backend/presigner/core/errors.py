from fastapi import status


class ServiceError(Exception):
    """Base for errors that end a request with a fixed, non-leaking message."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    message: str = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class BadRequestError(ServiceError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "filename and contentType are required."


class UnauthorizedError(ServiceError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Unauthorized"


class ServerMisconfiguredError(ServiceError):
    """Raised when the deployment is missing something the service needs."""

    message = "Internal Server Configuration Error"


class UpstreamError(ServiceError):
    """Raised when the storage provider fails to sign a URL."""

    message = "Internal server error while creating pre-signed URL."
