from fastapi import APIRouter, Depends
from app.database.supabase_client import get_supabase
from app.modules.teams.schemas import (
    TeamCreate, TeamUpdate, TeamResponse,
    TeamMemberAdd, TeamMemberResponse
)
from app.modules.teams.service import TeamService
from app.core.authorization import Action, Principal
from app.core.dependencies import get_current_principal, check_team_access
from app.core.responses import ApiResponse, MessageResponse
from supabase import Client
from typing import List

router = APIRouter(prefix="/teams", tags=["teams"])


def get_team_service(supabase: Client = Depends(get_supabase)) -> TeamService:
    return TeamService(supabase)


@router.get("", response_model=ApiResponse[List[TeamResponse]])
async def list_teams(
    principal: Principal = Depends(get_current_principal),
    service: TeamService = Depends(get_team_service)
):
    """List teams the caller leads or belongs to (all teams for admins)"""
    return ApiResponse.ok(service.list_teams(principal))


@router.post("", response_model=ApiResponse[TeamResponse], status_code=201)
async def create_team(
    team_data: TeamCreate,
    principal: Principal = Depends(get_current_principal),
    service: TeamService = Depends(get_team_service)
):
    return ApiResponse.ok(service.create_team(team_data, principal.id), "Team created")


@router.get("/{team_id}", response_model=ApiResponse[TeamResponse])
async def get_team(
    team_id: str,
    principal: Principal = Depends(get_current_principal),
    supabase: Client = Depends(get_supabase)
):
    return ApiResponse.ok(check_team_access(team_id, principal, supabase, Action.READ))


@router.put("/{team_id}", response_model=ApiResponse[TeamResponse])
async def update_team(
    team_id: str,
    team_data: TeamUpdate,
    principal: Principal = Depends(get_current_principal),
    service: TeamService = Depends(get_team_service),
    supabase: Client = Depends(get_supabase)
):
    """Update team (lead or admin)"""
    team = check_team_access(team_id, principal, supabase, Action.UPDATE)
    return ApiResponse.ok(service.update_team(team, team_data, principal.id), "Team updated")


@router.delete("/{team_id}", response_model=MessageResponse)
async def delete_team(
    team_id: str,
    principal: Principal = Depends(get_current_principal),
    service: TeamService = Depends(get_team_service),
    supabase: Client = Depends(get_supabase)
):
    """Delete team (lead or admin)"""
    team = check_team_access(team_id, principal, supabase, Action.DELETE)
    service.delete_team(team, principal.id)
    return MessageResponse(message="Team deleted")


@router.get("/{team_id}/members", response_model=ApiResponse[List[TeamMemberResponse]])
async def list_members(
    team_id: str,
    principal: Principal = Depends(get_current_principal),
    service: TeamService = Depends(get_team_service),
    supabase: Client = Depends(get_supabase)
):
    check_team_access(team_id, principal, supabase, Action.READ)
    return ApiResponse.ok(service.list_members(team_id))


@router.post("/{team_id}/members", response_model=ApiResponse[TeamMemberResponse], status_code=201)
async def add_member(
    team_id: str,
    member_data: TeamMemberAdd,
    principal: Principal = Depends(get_current_principal),
    service: TeamService = Depends(get_team_service),
    supabase: Client = Depends(get_supabase)
):
    """Add a member to the team (lead or admin)"""
    team = check_team_access(team_id, principal, supabase, Action.MANAGE_MEMBERS)
    return ApiResponse.ok(service.add_member(team, member_data, principal.id), "Member added")


@router.delete("/{team_id}/members/{user_id}", response_model=MessageResponse)
async def remove_member(
    team_id: str,
    user_id: str,
    principal: Principal = Depends(get_current_principal),
    service: TeamService = Depends(get_team_service),
    supabase: Client = Depends(get_supabase)
):
    """Remove a member from the team (lead or admin)"""
    team = check_team_access(team_id, principal, supabase, Action.MANAGE_MEMBERS)
    service.remove_member(team, user_id, principal.id)
    return MessageResponse(message="Member removed")
