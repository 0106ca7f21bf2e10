import logging
from supabase import Client
from app.config.permissions_config import Role
from app.core.exceptions import NotFound
from app.modules.auth.schemas import VerifiedIdentity
from app.modules.users.schemas import UserRecord
from typing import List, Optional

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def get_by_auth_id(self, auth_user_id: str) -> Optional[UserRecord]:
        """Get the application user linked to a Supabase identity"""
        result = self.supabase.table("users")\
            .select("*")\
            .eq("auth_user_id", auth_user_id)\
            .limit(1)\
            .execute()
        if not result.data:
            return None
        return UserRecord(**result.data[0])

    def get_user(self, user_id: str) -> UserRecord:
        """Get user by internal ID"""
        result = self.supabase.table("users")\
            .select("*")\
            .eq("id", user_id)\
            .limit(1)\
            .execute()
        if not result.data:
            raise NotFound("User not found")
        return UserRecord(**result.data[0])

    def ensure_user(self, identity: VerifiedIdentity) -> UserRecord:
        """Find or create the user for a verified identity.

        Creation is an insert-or-ignore keyed on the unique auth_user_id, so
        two concurrent first requests from the same identity both end up
        reading the single row that won.
        """
        existing = self.get_by_auth_id(identity.id)
        if existing:
            return existing

        self.supabase.table("users").upsert(
            {
                "auth_user_id": identity.id,
                "email": identity.email or "",
                "name": identity.full_name or identity.email,
                "role": Role.MEMBER.value,
                "team_id": None,
            },
            on_conflict="auth_user_id",
            ignore_duplicates=True,
        ).execute()

        user = self.get_by_auth_id(identity.id)
        if user is None:
            raise NotFound("User not found")
        logger.info("Provisioned user %s for identity %s", user.id, identity.id)
        return user

    def update_membership(self, user_id: str, team_id: Optional[str], role: Role) -> UserRecord:
        """Point the user at a team (or none) with the given role"""
        result = self.supabase.table("users")\
            .update({"team_id": team_id, "role": role.value})\
            .eq("id", user_id)\
            .execute()
        if not result.data:
            raise NotFound("User not found")
        return UserRecord(**result.data[0])

    def list_team_members(self, team_id: str) -> List[UserRecord]:
        """Users currently on the team, oldest first"""
        result = self.supabase.table("users")\
            .select("*")\
            .eq("team_id", team_id)\
            .order("created_at")\
            .execute()
        return [UserRecord(**row) for row in result.data]
