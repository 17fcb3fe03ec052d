"""Signed calls to the remote conferencing server.

Every operation follows the same path: assemble parameters in a fixed order,
serialize and sign them, issue one GET, interpret the answer. Failures are
raised as :class:`~.errors.GatewayError` subclasses; raw httpx exceptions
never leave this module.
"""
from __future__ import annotations

import asyncio
import enum
import logging
from dataclasses import dataclass
from typing import Mapping

import httpx

from ..core.config import Credentials, Settings, settings
from ..data.rooms import RoomIdentity, build_catalogue, resolve_room
from .checksum import SignedRequest, signed_request
from .errors import ConfigError, GatewayError, NotFoundError, RemoteProtocolError, TransportError
from .meeting_info import FAILED_MARKER, MeetingSnapshot, RecordingState, extract_field, parse_meeting_info

logger = logging.getLogger(__name__)

CONFIG_MISSING_MESSAGE = "BigBlueButton configuration missing"


class Role(str, enum.Enum):
    VIEWER = "VIEWER"
    MODERATOR = "MODERATOR"


class RoomState(str, enum.Enum):
    IDLE = "idle"
    RUNNING = "running"
    STOPPED = "stopped"


@dataclass(slots=True)
class CreateMeetingResult:
    success: bool
    message: str
    meeting_id: str
    meeting_name: str
    recording_enabled: bool


@dataclass(slots=True)
class EndMeetingResult:
    success: bool
    message: str
    meeting_id: str


@dataclass(slots=True)
class JoinLink:
    join_url: str
    meeting_id: str
    full_name: str
    role: Role


@dataclass(slots=True)
class RoomStatus:
    room: RoomIdentity
    state: RoomState
    participant_count: int = 0
    recording_state: RecordingState = RecordingState.NOT_RECORDING
    error: str | None = None


def room_state(snapshot: MeetingSnapshot) -> RoomState:
    """Collapse a snapshot into the state shown on the admin dashboard."""

    if not snapshot.exists:
        return RoomState.STOPPED
    return RoomState.RUNNING if snapshot.running else RoomState.IDLE


class ConferencingGateway:
    """Client for the create/end/getMeetingInfo/join remote operations."""

    def __init__(
        self,
        credentials: Credentials,
        *,
        rooms: Mapping[str, RoomIdentity] | None = None,
        moderator_password: str = "mp",
        admin_username: str = "",
        admin_display_name: str = "Admin",
        client: httpx.AsyncClient | None = None,
        timeout: float | None = 10.0,
        strict_return_codes: bool = False,
    ) -> None:
        self._credentials = credentials
        self._rooms = dict(rooms or {})
        self._moderator_password = moderator_password
        self._admin_username = admin_username.strip()
        self._admin_display_name = admin_display_name
        self._client = client
        self._timeout = timeout
        self._strict_return_codes = strict_return_codes

    @classmethod
    def from_settings(cls, config: Settings, *, client: httpx.AsyncClient | None = None) -> "ConferencingGateway":
        """Build a gateway from settings, failing fast when credentials are absent."""

        credentials = config.credentials()
        if credentials is None:
            raise ConfigError(CONFIG_MISSING_MESSAGE)
        return cls(
            credentials,
            rooms=build_catalogue(config),
            moderator_password=config.moderator_password,
            admin_username=config.admin_username,
            admin_display_name=config.admin_display_name,
            client=client,
            timeout=config.http_timeout_seconds,
            strict_return_codes=config.strict_return_codes,
        )

    @property
    def rooms(self) -> list[RoomIdentity]:
        return list(self._rooms.values())

    async def create_meeting(self, room_key: str, enable_recording: bool = True) -> CreateMeetingResult:
        """Create (or re-create) the remote meeting behind ``room_key``."""

        room = resolve_room(self._rooms, room_key)
        params = {"meetingID": room.meeting_id, "name": room.name}
        if enable_recording:
            params["record"] = "true"
            params["autoStartRecording"] = "true"
            params["allowStartStopRecording"] = "true"

        response = await self._send(signed_request("create", params, self._credentials.secret))
        self._ensure_accepted(response, "create")

        message = f"Successfully created meeting: {room.name} (ID: {room.meeting_id})"
        if enable_recording:
            message += " with recording enabled"
        return CreateMeetingResult(
            success=True,
            message=message,
            meeting_id=room.meeting_id,
            meeting_name=room.name,
            recording_enabled=enable_recording,
        )

    async def end_meeting(self, meeting_id: str) -> EndMeetingResult:
        params = {"meetingID": meeting_id, "password": self._moderator_password}
        response = await self._send(signed_request("end", params, self._credentials.secret))
        self._ensure_accepted(response, "end")
        return EndMeetingResult(
            success=True,
            message=f"Successfully ended meeting: {meeting_id}",
            meeting_id=meeting_id,
        )

    async def get_meeting_status(self, meeting_id: str) -> MeetingSnapshot:
        """Fetch a fresh snapshot of ``meeting_id``."""

        response = await self._send(
            signed_request("getMeetingInfo", {"meetingID": meeting_id}, self._credentials.secret)
        )
        logger.debug("Raw meeting info for %s: %s", meeting_id, response.text)
        snapshot = parse_meeting_info(response.content)
        logger.debug(
            "Meeting %s: exists=%s running=%s participants=%d recording=%s",
            meeting_id,
            snapshot.exists,
            snapshot.running,
            snapshot.participant_count,
            snapshot.recording_state.value,
        )
        return snapshot

    async def build_join_url(self, meeting_id: str, full_name: str, role: Role = Role.VIEWER) -> JoinLink:
        """Return a signed join URL for an existing meeting.

        The configured administrator always joins as moderator under the admin
        display name, whatever role was asked for.
        """

        if self._admin_username and full_name == self._admin_username:
            full_name = self._admin_display_name
            role = Role.MODERATOR

        try:
            snapshot = await self.get_meeting_status(meeting_id)
        except RemoteProtocolError as exc:
            raise NotFoundError("No meeting found", raw_payload=exc.raw_payload) from exc
        if not snapshot.exists:
            raise NotFoundError("No meeting found", raw_payload=snapshot.raw_payload)

        params = {"meetingID": meeting_id, "fullName": full_name, "role": role.value}
        request = signed_request("join", params, self._credentials.secret)
        return JoinLink(
            join_url=request.url(self._credentials.base_url),
            meeting_id=meeting_id,
            full_name=full_name,
            role=role,
        )

    async def get_room_statuses(self) -> list[RoomStatus]:
        """Check every catalogue room concurrently.

        Identical concurrent checks are not coalesced; each room costs one call.
        """

        rooms = self.rooms
        results = await asyncio.gather(
            *(self.get_meeting_status(room.meeting_id) for room in rooms),
            return_exceptions=True,
        )

        statuses: list[RoomStatus] = []
        for room, result in zip(rooms, results):
            if isinstance(result, GatewayError):
                logger.warning("Error fetching status for %s: %s", room.name, result.message)
                statuses.append(RoomStatus(room=room, state=RoomState.STOPPED, error=result.message))
                continue
            if isinstance(result, BaseException):
                raise result
            statuses.append(
                RoomStatus(
                    room=room,
                    state=room_state(result),
                    participant_count=result.participant_count,
                    recording_state=result.recording_state,
                )
            )
        return statuses

    async def _send(self, request: SignedRequest) -> httpx.Response:
        url = request.url(self._credentials.base_url)
        logger.info("Calling %s: %s", request.operation, url)
        try:
            if self._client is not None:
                return await self._client.get(url)
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                return await client.get(url)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.warning("Error calling %s on conferencing server: %s", request.operation, exc)
            raise TransportError(f"Error contacting conferencing server: {exc}") from exc

    def _ensure_accepted(self, response: httpx.Response, action: str) -> None:
        """Raise unless the remote server accepted a create/end call.

        Any 2xx counts as success; the body is only inspected for a failure
        return code when ``strict_return_codes`` is enabled.
        """

        body = response.text
        logger.info("Conferencing server %s response: %s", action, body)
        if not response.is_success:
            raise RemoteProtocolError(
                f"Failed to {action} meeting: {response.status_code} {response.reason_phrase}",
                error_key=f"http-{response.status_code}",
                raw_payload=body,
                status_code=response.status_code,
            )
        if self._strict_return_codes and FAILED_MARKER in body:
            raise RemoteProtocolError(
                extract_field(body, "message") or "Unknown error",
                error_key=extract_field(body, "messageKey") or "unknown",
                raw_payload=body,
                status_code=response.status_code,
            )


def get_gateway() -> ConferencingGateway:
    """FastAPI dependency returning a gateway for the current settings."""

    return ConferencingGateway.from_settings(settings)
