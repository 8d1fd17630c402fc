"""
WEB 420 API: Team Service
=========================

What:  Teams and their embedded players.
How:   Players live in the team row's JSON `players` array. Adding a player
       loads the team, assigns a new list with the player appended, and
       flushes.

Operations:
    list_teams / create_team / delete_team
    add_player   → returns the player that was added
    list_players → returns the team's players array
"""

import logging
from typing import List
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from web420.exceptions import DatabaseError, NotFoundError
from web420.models.team import Team
from web420.schemas.team import Player, TeamRequest, TeamResponse

logger = logging.getLogger(__name__)


class TeamService:

    async def list_teams(self, db: AsyncSession) -> List[TeamResponse]:
        try:
            result = await db.execute(select(Team).order_by(Team.created_at))
            return [TeamResponse.model_validate(t) for t in result.scalars().all()]
        except Exception as e:
            logger.error("Database error listing teams: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not retrieve teams. Please try again.",
                context={"error_type": type(e).__name__},
            )

    async def create_team(self, db: AsyncSession, data: TeamRequest) -> TeamResponse:
        try:
            team = Team(name=data.name, mascot=data.mascot, players=[])
            db.add(team)
            await db.flush()
            logger.info("Team created: %s (%s)", team.name, team.id)
            return TeamResponse.model_validate(team)
        except Exception as e:
            logger.error("Database error creating team: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not create the team. Please try again.",
                context={"error_type": type(e).__name__},
            )

    async def add_player(self, db: AsyncSession, team_id: UUID, player: Player) -> Player:
        """
        Append a player to a team.

        Raises:
            NotFoundError: No team with this id
            DatabaseError: Query or update failed
        """
        try:
            team = await self._load(db, team_id)
            # New list object: in-place append on a plain JSON column is not detected
            team.players = [*(team.players or []), player.model_dump(by_alias=True)]
            await db.flush()
            logger.info("Player added to team %s (%d players)", team_id, len(team.players))
            return player
        except NotFoundError:
            raise
        except Exception as e:
            logger.error("Database error adding player to team %s: %s", team_id, str(e))
            raise DatabaseError(
                message="Could not add the player. Please try again.",
                context={"team_id": str(team_id)},
            )

    async def list_players(self, db: AsyncSession, team_id: UUID) -> List[Player]:
        try:
            team = await self._load(db, team_id)
            return [Player.model_validate(p) for p in team.players or []]
        except NotFoundError:
            raise
        except Exception as e:
            logger.error("Database error fetching players for team %s: %s", team_id, str(e))
            raise DatabaseError(
                message="Could not retrieve the players. Please try again.",
                context={"team_id": str(team_id)},
            )

    async def delete_team(self, db: AsyncSession, team_id: UUID) -> TeamResponse:
        try:
            team = await self._load(db, team_id)
            deleted = TeamResponse.model_validate(team)
            await db.delete(team)
            await db.flush()
            logger.info("Team deleted: %s", team_id)
            return deleted
        except NotFoundError:
            raise
        except Exception as e:
            logger.error("Database error deleting team %s: %s", team_id, str(e))
            raise DatabaseError(
                message="Could not delete the team. Please try again.",
                context={"team_id": str(team_id)},
            )

    async def _load(self, db: AsyncSession, team_id: UUID) -> Team:
        result = await db.execute(select(Team).where(Team.id == team_id))
        team = result.scalar_one_or_none()
        if team is None:
            raise NotFoundError(resource="team", resource_id=str(team_id))
        return team


team_service = TeamService()
