from typing import List, Optional

from app.database.repository import BaseRepository
from app.database.supabase_client import execute
from app.modules.teams.models import Team, TeamMember


class TeamRepository(BaseRepository[Team]):
    table = "teams"
    model = Team

    def list_all(self) -> List[Team]:
        result = execute(self.query().select("*").order("name"))
        return self._many(result)

    def find_by_lead(self, lead_id: str) -> List[Team]:
        result = execute(self.query().select("*").eq("lead_id", lead_id))
        return self._many(result)

    def find_accessible_by_user(self, user_id: str) -> List[Team]:
        """Teams the user leads plus teams they belong to, each once."""
        teams = {t.id: t for t in self.find_by_lead(user_id)}
        member_ids = [tid for tid in TeamMemberRepository(self.supabase).team_ids_for_user(user_id) if tid not in teams]
        for team in self.find_by_ids(member_ids):
            teams[team.id] = team
        return sorted(teams.values(), key=lambda t: t.name)

    def is_lead(self, team_id: str, user_id: str) -> bool:
        result = execute(
            self.query()
            .select("id")
            .eq("id", team_id)
            .eq("lead_id", user_id)
            .limit(1)
        )
        return bool(result.data)

    def is_member(self, team_id: str, user_id: str) -> bool:
        return TeamMemberRepository(self.supabase).find_membership(team_id, user_id) is not None

    def can_user_access(self, team_id: str, user_id: str) -> bool:
        return self.is_lead(team_id, user_id) or self.is_member(team_id, user_id)


class TeamMemberRepository(BaseRepository[TeamMember]):
    table = "team_members"
    model = TeamMember
    conflict_message = "User is already a member of this team"

    def list_by_team(self, team_id: str) -> List[TeamMember]:
        result = execute(
            self.query()
            .select("*")
            .eq("team_id", team_id)
            .order("joined_at")
        )
        return self._many(result)

    def team_ids_for_user(self, user_id: str) -> List[str]:
        result = execute(self.query().select("team_id").eq("user_id", user_id))
        return [row["team_id"] for row in (result.data or [])]

    def find_membership(self, team_id: str, user_id: str) -> Optional[TeamMember]:
        result = execute(
            self.query()
            .select("*")
            .eq("team_id", team_id)
            .eq("user_id", user_id)
            .limit(1)
        )
        return self._one(result)

    def remove(self, team_id: str, user_id: str) -> bool:
        result = execute(
            self.query()
            .delete()
            .eq("team_id", team_id)
            .eq("user_id", user_id)
        )
        return bool(result.data)

    def delete_by_team(self, team_id: str) -> None:
        execute(self.query().delete().eq("team_id", team_id))
