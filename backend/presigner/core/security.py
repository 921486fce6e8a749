import hmac
import logging

from presigner.core.config import ServiceConfig
from presigner.core.errors import ServerMisconfiguredError, UnauthorizedError

logger = logging.getLogger(__name__)


def api_keys_match(supplied: str, expected: str) -> bool:
    return hmac.compare_digest(supplied.encode("utf-8"), expected.encode("utf-8"))


def check_api_key(config: ServiceConfig, supplied: str | None, client: str | None = None) -> None:
    """Fail closed unless ``supplied`` equals the configured shared secret.

    A server without a secret rejects every request with
    ``ServerMisconfiguredError``, whatever the caller sent.
    """
    if not config.require_api_key:
        return

    expected = config.api_key.get_secret_value() if config.api_key else ""
    if not expected:
        logger.critical("API_KEY is not configured on the server; rejecting request")
        raise ServerMisconfiguredError()

    if not supplied or not api_keys_match(supplied, expected):
        logger.warning("Failed API key attempt from %s", client or "unknown client")
        raise UnauthorizedError()
