from rest_framework_simplejwt.authentication import JWTAuthentication

from .helpers import get_token_from_authorization_string


class BearerTokenAuthentication(JWTAuthentication):
    """SimpleJWT authentication reading the access token from ``Authorization: Bearer``."""

    def authenticate(self, request):
        raw_token = get_token_from_authorization_string(
            request.META.get("HTTP_AUTHORIZATION")
        )
        if raw_token is None:
            return None

        validated_token = self.get_validated_token(raw_token)
        return self.get_user(validated_token), validated_token
