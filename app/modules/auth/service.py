import logging
from supabase import Client
from app.core.exceptions import Unauthenticated
from app.modules.auth.schemas import VerifiedIdentity

logger = logging.getLogger(__name__)


class AuthService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def get_current_user(self, token: str) -> VerifiedIdentity:
        """Verify a Supabase access token and return the identity behind it"""
        if not token:
            raise Unauthenticated()
        try:
            user_response = self.supabase.auth.get_user(jwt=token)
        except Exception as e:
            logger.warning("Token verification failed: %s", type(e).__name__)
            raise Unauthenticated()
        if not user_response or not user_response.user:
            logger.warning("Token verification returned no user")
            raise Unauthenticated()
        user = user_response.user
        metadata = user.user_metadata or {}
        return VerifiedIdentity(
            id=user.id,
            email=user.email,
            full_name=metadata.get("full_name"),
        )
