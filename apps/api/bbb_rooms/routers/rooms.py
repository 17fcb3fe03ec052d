"""Learner-facing room listing and join endpoints."""
from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from ..core.config import settings
from ..data.rooms import build_catalogue, find_room, room_for_level
from ..schemas import meetings as schemas
from ..services.gateway import ConferencingGateway, Role, get_gateway

router = APIRouter()


@router.get("/rooms", response_model=schemas.RoomListResponse)
async def list_rooms() -> schemas.RoomListResponse:
    """Return the pre-provisioned rooms in display order."""

    return schemas.RoomListResponse(
        items=[
            schemas.RoomSummary(key=room.key, meeting_id=room.meeting_id, name=room.name, level=room.level)
            for room in build_catalogue(settings).values()
        ]
    )


@router.get("/session", response_model=schemas.SessionResponse)
async def session_role(name: str = Query(default="")) -> schemas.SessionResponse:
    """Tell the pages whether the signed-in name is the configured administrator."""

    admin_username = settings.admin_username.strip()
    return schemas.SessionResponse(name=name, is_admin=bool(admin_username) and name == admin_username)


@router.get("/bbb", response_model=schemas.JoinResponse)
async def join_room(
    name: str = Query(..., min_length=1),
    level: str | None = None,
    room_id: str | None = Query(default=None, alias="roomId"),
    gateway: ConferencingGateway = Depends(get_gateway),
) -> schemas.JoinResponse:
    """Return a signed join URL for the learner's room.

    ``roomId`` picks a catalogue room directly; otherwise ``level`` routes the
    learner to their level's room, defaulting to the general room.
    """

    catalogue = {room.key: room for room in gateway.rooms}
    room = find_room(catalogue, room_id) if room_id else None
    if room is None:
        room = room_for_level(catalogue, level)

    link = await gateway.build_join_url(room.meeting_id, name, Role.VIEWER)
    return schemas.JoinResponse(join_url=link.join_url, meeting_id=link.meeting_id, full_name=link.full_name)
