# core/supabase_auth.py
# DRF authentication class verifying Supabase JWTs

import os
import logging
import jwt
from django.contrib.auth import get_user_model
from rest_framework.authentication import BaseAuthentication
from rest_framework.exceptions import AuthenticationFailed

logger = logging.getLogger("studio.auth")

User = get_user_model()


class SupabaseJWTAuthentication(BaseAuthentication):
    """
    Validates Supabase access tokens.

    1. Extracts the JWT from the Authorization header
    2. Verifies the signature with the Supabase JWT secret
    3. Maps the Supabase user id (``sub``) to a Django user, creating it on
       first sight
    """

    def authenticate(self, request):
        auth_header = request.headers.get("Authorization", "")

        if not auth_header.startswith("Bearer "):
            return None  # Let other auth backends handle it

        token = auth_header.split(" ")[1]

        supabase_jwt_secret = os.environ.get("SUPABASE_JWT_SECRET")
        if not supabase_jwt_secret:
            logger.debug("SUPABASE_JWT_SECRET not configured")
            return None

        try:
            # Supabase uses HS256 by default
            payload = jwt.decode(
                token,
                supabase_jwt_secret,
                algorithms=["HS256"],
                audience="authenticated",
            )
        except jwt.ExpiredSignatureError:
            raise AuthenticationFailed("Token has expired")
        except jwt.InvalidTokenError as e:
            logger.debug(f"Invalid Supabase token: {e}")
            return None  # Let other auth backends try

        supabase_user_id = payload.get("sub")
        if not supabase_user_id:
            raise AuthenticationFailed("Invalid token: missing user ID")

        user = self._get_or_create_user(supabase_user_id, payload.get("email"), payload)
        return (user, payload)

    def _get_or_create_user(self, supabase_user_id: str, email: str, payload: dict):
        user = User.objects.filter(supabase_id=supabase_user_id).first()
        if user is not None:
            return user

        if not email:
            raise AuthenticationFailed("Token missing email claim")

        metadata = payload.get("user_metadata") or {}
        name = metadata.get("name") or email.split("@")[0]

        user = User.objects.filter(email=email).first()
        if user is not None:
            # Existing account signing in through Supabase for the first time
            user.supabase_id = supabase_user_id
            user.save(update_fields=["supabase_id"])
            return user

        username = email.split("@")[0]
        # Ensure unique username
        base_username = username
        counter = 1
        while User.objects.filter(username=username).exists():
            username = f"{base_username}_{counter}"
            counter += 1

        user = User.objects.create(
            username=username,
            email=email,
            name=name,
            supabase_id=supabase_user_id,
            # Password is not used for Supabase auth
        )
        logger.info(f"Created new user from Supabase: {email}")
        return user
