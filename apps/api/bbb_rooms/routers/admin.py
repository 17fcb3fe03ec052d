"""Admin endpoints for starting, stopping and monitoring meeting rooms."""
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from ..schemas import meetings as schemas
from ..services.errors import RemoteProtocolError
from ..services.gateway import ConferencingGateway, get_gateway

router = APIRouter()


@router.get(
    "/meeting-status",
    response_model=schemas.MeetingStatusResponse,
    response_model_exclude_none=True,
)
async def meeting_status(
    meeting_id: str | None = Query(default=None, alias="meetingID"),
    gateway: ConferencingGateway = Depends(get_gateway),
) -> schemas.MeetingStatusResponse:
    """Return a fresh status snapshot for one meeting."""

    if not meeting_id:
        raise HTTPException(status_code=400, detail="Meeting ID is required")

    try:
        snapshot = await gateway.get_meeting_status(meeting_id)
    except RemoteProtocolError as exc:
        # The remote server answers FAILED/notFound for meetings that are not running.
        return schemas.MeetingStatusResponse(exists=False, error=exc.message, error_key=exc.error_key)

    if not snapshot.exists:
        return schemas.MeetingStatusResponse(exists=False, error=snapshot.error)

    return schemas.MeetingStatusResponse(
        exists=True,
        meeting_id=snapshot.meeting_id,
        meeting_name=snapshot.meeting_name,
        participant_count=snapshot.participant_count,
        running=snapshot.running,
        recording_status=snapshot.recording_state.value,
    )


@router.get("/rooms/status", response_model=schemas.RoomStatusListResponse)
async def room_statuses(gateway: ConferencingGateway = Depends(get_gateway)) -> schemas.RoomStatusListResponse:
    """Return the dashboard view of every catalogue room."""

    statuses = await gateway.get_room_statuses()
    return schemas.RoomStatusListResponse(
        items=[
            schemas.RoomStatusSummary(
                key=status.room.key,
                meeting_id=status.room.meeting_id,
                name=status.room.name,
                level=status.room.level,
                status=status.state.value,
                participant_count=status.participant_count,
                recording_status=status.recording_state.value,
                error=status.error,
            )
            for status in statuses
        ]
    )


@router.post("/start-meeting", response_model=schemas.StartMeetingResponse)
async def start_meeting(
    payload: schemas.StartMeetingRequest,
    gateway: ConferencingGateway = Depends(get_gateway),
) -> schemas.StartMeetingResponse:
    """Create the remote meeting for a room."""

    result = await gateway.create_meeting(payload.meeting_id, payload.enable_recording)
    return schemas.StartMeetingResponse(
        success=result.success,
        message=result.message,
        meeting_id=result.meeting_id,
        meeting_name=result.meeting_name,
        recording_enabled=result.recording_enabled,
    )


@router.post("/stop-meeting", response_model=schemas.StopMeetingResponse)
async def stop_meeting(
    payload: schemas.StopMeetingRequest,
    gateway: ConferencingGateway = Depends(get_gateway),
) -> schemas.StopMeetingResponse:
    """End the remote meeting."""

    result = await gateway.end_meeting(payload.meeting_id)
    return schemas.StopMeetingResponse(success=result.success, message=result.message, meeting_id=result.meeting_id)
