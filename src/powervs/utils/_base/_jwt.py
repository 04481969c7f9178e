################################################################################
# © Copyright 2026 Zapata Computing Inc.
################################################################################
import jwt

from ._driver._exceptions import InvalidTokenError


def get_account_id(token: str) -> str:
    """Reads the IBM Cloud account ID from an IAM access token.

    Note: This DOES NOT CRYPTOGRAPHICALY VERIFY THE TOKEN. IAM already did that
    when it issued it; we only need the claims.

    Args:
        token: the IAM access token, without the "Bearer " prefix.

    Raises:
        InvalidTokenError: if the token is not a JWT or doesn't carry an account.
    """
    try:
        claims = jwt.decode(token, options={"verify_signature": False})
    except jwt.DecodeError:
        raise InvalidTokenError("IAM access token is not a JWT.")

    try:
        return claims["account"]["bss"]
    except (KeyError, TypeError):
        raise InvalidTokenError("IAM access token doesn't contain an account ID.")
