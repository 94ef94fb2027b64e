import logging
from typing import List

from supabase import Client

from app.core.authorization import Principal
from app.core.enums import TeamMemberRole
from app.core.errors import NotFound
from app.core.models import new_id, utcnow
from app.modules.activities.service import ActivityService
from app.modules.teams.models import Team, TeamMember
from app.modules.teams.repository import TeamMemberRepository, TeamRepository
from app.modules.teams.schemas import TeamCreate, TeamMemberAdd, TeamUpdate
from app.modules.users.repository import UserRepository

logger = logging.getLogger(__name__)


class TeamService:
    def __init__(self, supabase: Client):
        self.repository = TeamRepository(supabase)
        self.members = TeamMemberRepository(supabase)
        self.users = UserRepository(supabase)
        self.activity = ActivityService(supabase)

    def get_team(self, team_id: str) -> Team:
        team = self.repository.find_by_id(team_id)
        if team is None:
            raise NotFound(f"Team with id {team_id} not found")
        return team

    def list_teams(self, principal: Principal) -> List[Team]:
        if principal.is_admin:
            return self.repository.list_all()
        return self.repository.find_accessible_by_user(principal.id)

    def _ensure_user(self, user_id: str) -> None:
        if self.users.find_by_id(user_id) is None:
            raise NotFound(f"User with id {user_id} not found")

    def create_team(self, data: TeamCreate, creator_id: str) -> Team:
        """Create a team; the creator leads it unless another lead is named, in which case they join as a member"""
        lead_id = data.lead_id or creator_id
        self._ensure_user(lead_id)
        now = utcnow()
        team = self.repository.create(Team(
            id=new_id(),
            name=data.name,
            description=data.description,
            lead_id=lead_id,
            created_at=now,
            updated_at=now,
        ))
        self.members.create(TeamMember(
            id=new_id(),
            team_id=team.id,
            user_id=lead_id,
            role=TeamMemberRole.LEAD,
            joined_at=now,
        ))
        if lead_id != creator_id:
            self.members.create(TeamMember(
                id=new_id(),
                team_id=team.id,
                user_id=creator_id,
                role=TeamMemberRole.MEMBER,
                joined_at=now,
            ))
        self.activity.record(creator_id, "created", "team", team.id, details={"name": team.name})
        logger.info("Team %s created by %s", team.id, creator_id)
        return team

    def update_team(self, team: Team, data: TeamUpdate, actor_id: str) -> Team:
        if data.lead_id:
            self._ensure_user(data.lead_id)
        updated = self.repository.update(team.apply(data.model_dump(exclude_none=True)))
        self.activity.record(actor_id, "updated", "team", team.id, details={"fields": sorted(data.model_dump(exclude_none=True).keys())})
        return updated

    def delete_team(self, team: Team, actor_id: str) -> None:
        self.members.delete_by_team(team.id)
        self.repository.delete(team.id)
        self.activity.record(actor_id, "deleted", "team", team.id, details={"name": team.name})
        logger.info("Team %s deleted by %s", team.id, actor_id)

    def list_members(self, team_id: str) -> List[TeamMember]:
        return self.members.list_by_team(team_id)

    def add_member(self, team: Team, data: TeamMemberAdd, actor_id: str) -> TeamMember:
        self._ensure_user(data.user_id)
        member = self.members.create(TeamMember(
            id=new_id(),
            team_id=team.id,
            user_id=data.user_id,
            role=data.role,
            joined_at=utcnow(),
        ))
        self.activity.record(actor_id, "member_added", "team", team.id, details={"user_id": data.user_id})
        return member

    def remove_member(self, team: Team, user_id: str, actor_id: str) -> None:
        if not self.members.remove(team.id, user_id):
            raise NotFound(f"User {user_id} is not a member of this team")
        self.activity.record(actor_id, "member_removed", "team", team.id, details={"user_id": user_id})
