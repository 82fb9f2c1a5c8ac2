"""HTTP routes for the Kill Awards API."""

from __future__ import annotations

from typing import Annotated, Literal

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from pydantic import BaseModel, Field

from killawards.api.runtime import ApiState
from killawards.domain import models as dm
from killawards.domain.enums import CreatureKind
from killawards.errors import ConfigurationError

router = APIRouter()


def get_state(request: Request) -> ApiState:
    state = getattr(request.app.state, "api_state", None)
    if state is None:  # pragma: no cover - FastAPI should always initialise state
        raise RuntimeError("API state not initialised")
    return state


ApiStateDep = Annotated[ApiState, Depends(get_state)]


class PositionPayload(BaseModel):
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


class WeaponPayload(BaseModel):
    name: str
    magazine_capacity: int = Field(ge=0)
    ammo_count: int = Field(default=0, ge=0)


class PlayerPayload(BaseModel):
    kind: Literal["player"] = "player"
    id: int
    display_name: str = ""
    position: PositionPayload = Field(default_factory=PositionPayload)
    is_npc: bool = False
    active_weapon: WeaponPayload | None = None

    def to_domain(self) -> dm.Player:
        weapon = None
        if self.active_weapon is not None:
            weapon = dm.HeldWeapon(
                name=self.active_weapon.name,
                magazine_capacity=self.active_weapon.magazine_capacity,
                ammo_count=self.active_weapon.ammo_count,
            )
        return dm.Player(
            id=dm.PlayerID(self.id),
            display_name=self.display_name,
            position=dm.Vector3(self.position.x, self.position.y, self.position.z),
            is_npc=self.is_npc,
            active_weapon=weapon,
        )


class CreaturePayload(BaseModel):
    kind: CreatureKind
    id: int = 0
    short_name: str = ""

    def to_domain(self) -> dm.Creature:
        return dm.Creature(id=self.id, short_name=self.short_name, kind=self.kind)


class DeathEventRequest(BaseModel):
    victim: PlayerPayload | CreaturePayload
    killer: PlayerPayload | None = None


class HostActionPayload(BaseModel):
    type: str
    player_id: int | None
    detail: dict[str, object]


class DeathEventResponse(BaseModel):
    eligibility: str
    victim_reset: bool
    kill_count: int | None
    milestone: int | None
    actions: list[HostActionPayload]


class PlayerCounter(BaseModel):
    player_id: int
    kill_count: int


class TeamRequest(BaseModel):
    members: list[int] = Field(default_factory=list)


class TeamResponse(BaseModel):
    team_id: int
    members: list[int]


@router.get("/health")
async def health(state: ApiStateDep) -> dict[str, object]:
    return {
        "status": "ok",
        "version": state.settings.plugin_version,
        "tracked_players": len(state.awards.stored),
    }


@router.post("/events/death", response_model=DeathEventResponse)
async def report_death(request: DeathEventRequest, state: ApiStateDep) -> DeathEventResponse:
    killer = request.killer.to_domain() if request.killer is not None else None
    outcome, actions = await state.handle_death(request.victim.to_domain(), killer)
    kill = outcome.kill
    return DeathEventResponse(
        eligibility=str(outcome.eligibility),
        victim_reset=outcome.victim_reset,
        kill_count=kill.kill_count if kill is not None else None,
        milestone=kill.milestone if kill is not None else None,
        actions=[
            HostActionPayload(
                type=action.type,
                player_id=int(action.player_id) if action.player_id is not None else None,
                detail=action.detail,
            )
            for action in actions
        ],
    )


@router.post("/events/new-save", status_code=status.HTTP_204_NO_CONTENT)
async def report_new_save(state: ApiStateDep) -> Response:
    await state.new_save()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/players/{player_id}", response_model=PlayerCounter)
async def get_player(player_id: int, state: ApiStateDep) -> PlayerCounter:
    kill_count = state.awards.kill_count(dm.PlayerID(player_id))
    if kill_count is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="player not tracked")
    return PlayerCounter(player_id=player_id, kill_count=kill_count)


@router.put("/teams/{team_id}", response_model=TeamResponse)
async def put_team(team_id: int, request: TeamRequest, state: ApiStateDep) -> TeamResponse:
    roster = state.teams.set_team(team_id, [dm.PlayerID(member) for member in request.members])
    return TeamResponse(team_id=team_id, members=sorted(int(member) for member in roster))


@router.delete("/teams/{team_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_team(team_id: int, state: ApiStateDep) -> Response:
    if not state.teams.remove_team(team_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="team not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/config")
async def get_config(state: ApiStateDep) -> dict[str, object]:
    return state.awards.config.model_dump(mode="json", by_alias=True)


@router.post("/config/reload")
async def reload_config(state: ApiStateDep) -> dict[str, object]:
    try:
        config = await state.reload_configuration()
    except ConfigurationError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=exc.detail) from exc
    return config.model_dump(mode="json", by_alias=True)
