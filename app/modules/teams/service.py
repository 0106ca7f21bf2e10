import logging
import secrets
from postgrest.exceptions import APIError
from supabase import Client
from app.config import settings
from app.config.permissions_config import Capability, Role, has_capability
from app.core.exceptions import Conflict, Forbidden, InvalidArgument, NotFound
from app.modules.teams.schemas import (
    TeamRecord, TeamResponse, TeamWithInviteResponse, TeamInviteResponse, TeamJoinResponse
)
from app.modules.users.schemas import UserRecord
from app.modules.users.service import UserService
from typing import Callable, Optional

logger = logging.getLogger(__name__)

UNIQUE_VIOLATION = "23505"


def generate_invite_code() -> str:
    return secrets.token_hex(settings.invite_code_bytes)


def _is_unique_violation(error: APIError) -> bool:
    return getattr(error, "code", None) == UNIQUE_VIOLATION


class TeamService:
    def __init__(self, supabase: Client):
        self.supabase = supabase
        self.users = UserService(supabase)

    def _write_with_fresh_code(self, write: Callable[[str], list]) -> list:
        """Run a write that stores a new invite code, regenerating the code on a collision"""
        attempts = max(1, settings.invite_code_max_attempts)
        for attempt in range(1, attempts + 1):
            try:
                return write(generate_invite_code())
            except APIError as e:
                if not _is_unique_violation(e) or attempt == attempts:
                    raise
                logger.warning("Invite code collision, regenerating (attempt %d/%d)", attempt, attempts)
        return []

    def get_team(self, team_id: str) -> Optional[TeamRecord]:
        """Get team by ID"""
        result = self.supabase.table("teams")\
            .select("*")\
            .eq("id", team_id)\
            .limit(1)\
            .execute()
        if not result.data:
            return None
        return TeamRecord(**result.data[0])

    def create_team(self, user: UserRecord, name: Optional[str]) -> TeamWithInviteResponse:
        """Create a team and make the caller its admin"""
        if not name:
            raise InvalidArgument("name is required")
        if user.team_id:
            raise Conflict("Already in a team")

        rows = self._write_with_fresh_code(
            lambda code: self.supabase.table("teams").insert({
                "name": name,
                "invite_code": code
            }).execute().data
        )
        if not rows:
            raise RuntimeError("Failed to create team")
        team = TeamRecord(**rows[0])

        # Only claim the caller if they are still team-less at write time
        result = self.supabase.table("users")\
            .update({"team_id": team.id, "role": Role.ADMIN.value})\
            .eq("id", user.id)\
            .is_("team_id", "null")\
            .execute()
        if not result.data:
            self.supabase.table("teams").delete().eq("id", team.id).execute()
            raise Conflict("Already in a team")

        logger.info("User %s created team %s", user.id, team.id)
        return TeamWithInviteResponse(id=team.id, name=team.name, invite_code=team.invite_code)

    def rotate_invite(self, user: UserRecord) -> TeamInviteResponse:
        """Replace the team's invite code; the old one stops working immediately"""
        if not has_capability(user.role, Capability.ROTATE_INVITE):
            raise Forbidden("Only admin can create invite")
        if not user.team_id:
            raise InvalidArgument("No team assigned")

        rows = self._write_with_fresh_code(
            lambda code: self.supabase.table("teams")
            .update({"invite_code": code})
            .eq("id", user.team_id)
            .execute().data
        )
        if not rows:
            raise NotFound("Team not found")

        logger.info("User %s rotated invite code of team %s", user.id, user.team_id)
        return TeamInviteResponse(id=rows[0]["id"], invite_code=rows[0]["invite_code"])

    def join_team(self, user: UserRecord, invite_code: Optional[str]) -> TeamJoinResponse:
        """
        Join the team behind an invite code.

        A caller already on a team is moved to the new one and demoted to
        MEMBER; the invite code wins over the existing membership.
        """
        if not invite_code:
            raise InvalidArgument("inviteCode is required")

        result = self.supabase.table("teams")\
            .select("*")\
            .eq("invite_code", invite_code)\
            .limit(1)\
            .execute()
        if not result.data:
            raise NotFound("Invalid invite code")
        team = TeamRecord(**result.data[0])

        updated = self.users.update_membership(user.id, team.id, Role.MEMBER)
        if user.team_id and user.team_id != team.id:
            logger.info("User %s switched from team %s to team %s", user.id, user.team_id, team.id)
        else:
            logger.info("User %s joined team %s", user.id, team.id)
        return TeamJoinResponse(team_id=updated.team_id)

    def leave_team(self, user: UserRecord) -> None:
        """Leave the current team. The team itself is kept, even if left without members."""
        if not user.team_id:
            raise InvalidArgument("No team joined")
        self.users.update_membership(user.id, None, Role.MEMBER)
        logger.info("User %s left team %s", user.id, user.team_id)

    def rename_team(self, user: UserRecord, name: Optional[str]) -> TeamResponse:
        """Rename the caller's team (admin only)"""
        if not name:
            raise InvalidArgument("name is required")
        if not user.team_id:
            raise InvalidArgument("No team joined")
        if not has_capability(user.role, Capability.RENAME_TEAM):
            raise Forbidden("Only admin can rename team")

        result = self.supabase.table("teams")\
            .update({"name": name})\
            .eq("id", user.team_id)\
            .execute()
        if not result.data:
            raise NotFound("Team not found")

        logger.info("User %s renamed team %s", user.id, user.team_id)
        return TeamResponse(id=result.data[0]["id"], name=result.data[0]["name"])
