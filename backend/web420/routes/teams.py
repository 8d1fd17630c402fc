"""
WEB 420 API: Team Route Handlers
================================

What:  Teams and their players.
    GET    /api/teams                  list teams
    POST   /api/teams                  create a team (no players yet)
    POST   /api/teams/{id}/players     add a player, returns the player
    GET    /api/teams/{id}/players     the team's players
    DELETE /api/teams/{id}             delete a team, returns it
"""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from web420.database import get_db_session
from web420.schemas.common import ErrorResponse
from web420.schemas.team import Player, TeamRequest, TeamResponse
from web420.services.team_service import team_service

router = APIRouter(prefix="/api", tags=["Teams"])

_NOT_FOUND = {404: {"description": "Team not found", "model": ErrorResponse}}
_DB_ERROR = {501: {"description": "Database Exception", "model": ErrorResponse}}


@router.get("/teams", response_model=List[TeamResponse], responses={**_DB_ERROR})
async def find_all_teams(db: AsyncSession = Depends(get_db_session)) -> List[TeamResponse]:
    return await team_service.list_teams(db)


@router.post("/teams", response_model=TeamResponse, responses={**_DB_ERROR})
async def create_team(
    body: TeamRequest,
    db: AsyncSession = Depends(get_db_session),
) -> TeamResponse:
    return await team_service.create_team(db, body)


@router.post(
    "/teams/{team_id}/players",
    response_model=Player,
    responses={**_NOT_FOUND, **_DB_ERROR},
    summary="Assigns a player to a team",
)
async def assign_player_to_team(
    team_id: UUID,
    body: Player,
    db: AsyncSession = Depends(get_db_session),
) -> Player:
    return await team_service.add_player(db, team_id, body)


@router.get(
    "/teams/{team_id}/players",
    response_model=List[Player],
    responses={**_NOT_FOUND, **_DB_ERROR},
    summary="Returns the players on a team",
)
async def find_all_players_by_team_id(
    team_id: UUID,
    db: AsyncSession = Depends(get_db_session),
) -> List[Player]:
    return await team_service.list_players(db, team_id)


@router.delete(
    "/teams/{team_id}",
    response_model=TeamResponse,
    responses={**_NOT_FOUND, **_DB_ERROR},
)
async def delete_team_by_id(
    team_id: UUID,
    db: AsyncSession = Depends(get_db_session),
) -> TeamResponse:
    return await team_service.delete_team(db, team_id)
