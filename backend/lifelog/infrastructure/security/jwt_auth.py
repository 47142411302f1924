"""Bearer-token verification — the identity collaborator of the API.

Tokens are issued elsewhere; this module only verifies the signature and
expiry and extracts the caller's user id.
"""

import logging
from typing import Any

import jwt

from lifelog.domain.exceptions import AuthenticationError

logger = logging.getLogger(__name__)


def decode_access_token(token: str, secret: str, algorithm: str) -> dict[str, Any]:
    """Verify and decode a bearer token.

    Raises:
        AuthenticationError: If the token is expired, malformed or badly signed.
    """
    try:
        return jwt.decode(token, secret, algorithms=[algorithm])
    except jwt.ExpiredSignatureError:
        raise AuthenticationError("Access token has expired") from None
    except jwt.InvalidTokenError as exc:
        logger.debug("Rejected bearer token: %s", exc)
        raise AuthenticationError("Invalid access token") from None


def user_id_from_claims(claims: dict[str, Any]) -> str:
    """Return the user id carried in ``sub`` (or ``id``)."""
    user_id = claims.get("sub") or claims.get("id")
    if not user_id:
        raise AuthenticationError("Access token carries no user id")
    return str(user_id)
