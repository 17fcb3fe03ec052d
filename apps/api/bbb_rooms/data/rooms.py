"""Static room catalogue for the pre-provisioned meeting rooms."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from ..core.config import Settings

DEFAULT_LEVEL = "general"


@dataclass(frozen=True, slots=True)
class RoomIdentity:
    """A room known to the front-end and the remote meeting it maps to."""

    key: str
    meeting_id: str
    name: str
    level: str


def build_catalogue(config: Settings) -> dict[str, RoomIdentity]:
    """Return the room catalogue keyed by room key, in display order."""

    rooms = [
        RoomIdentity(key="general", meeting_id=config.general_id, name="General Room", level="general"),
        RoomIdentity(key="beginner", meeting_id=config.beginner_id, name="Beginner Room", level="beginner"),
        RoomIdentity(
            key="intermediate",
            meeting_id=config.intermediate_id,
            name="Intermediate Room",
            level="intermediate",
        ),
        RoomIdentity(key="elite", meeting_id=config.elite_id, name="Elite Room", level="elite"),
    ]
    return {room.key: room for room in rooms}


def find_room(rooms: Mapping[str, RoomIdentity], identifier: str) -> RoomIdentity | None:
    """Look a room up by key first, then by its remote meeting ID."""

    room = rooms.get(identifier)
    if room is not None:
        return room
    for candidate in rooms.values():
        if candidate.meeting_id == identifier:
            return candidate
    return None


def resolve_room(rooms: Mapping[str, RoomIdentity], identifier: str) -> RoomIdentity:
    """Like :func:`find_room`, but unknown identifiers map onto themselves."""

    room = find_room(rooms, identifier)
    if room is not None:
        return room
    return RoomIdentity(key=identifier, meeting_id=identifier, name=identifier, level=DEFAULT_LEVEL)


def room_for_level(rooms: Mapping[str, RoomIdentity], level: str | None) -> RoomIdentity:
    """Pick the room a learner of ``level`` joins; unknown levels go to the general room."""

    normalized = (level or "").strip().lower()
    for room in rooms.values():
        if room.level == normalized:
            return room
    return rooms[DEFAULT_LEVEL]
