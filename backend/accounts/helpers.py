BEARER_PREFIX = "Bearer "


def has_complete_profile(user) -> bool:
    """Return True when the user has every profile field required to book a car."""
    return bool(user and user.date_of_birth and user.phone_number and user.name)


def get_token_from_authorization_string(authorization: str | None) -> str | None:
    """Extract the token from a ``Bearer <token>`` Authorization header value.

    The prefix match is exact and case-sensitive and includes the trailing
    space, so a bare ``"Bearer"`` or ``"Bearerabc"`` yields None, as does
    anything else that does not start with ``"Bearer "``.
    """
    if authorization and authorization.startswith(BEARER_PREFIX):
        return authorization[len(BEARER_PREFIX):]
    return None
