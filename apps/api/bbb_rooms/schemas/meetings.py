"""Data contracts for the meeting proxy endpoints.

Field aliases keep the camelCase JSON the browser pages already speak.
"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class StartMeetingRequest(_CamelModel):
    meeting_id: str = Field(..., alias="meetingID", min_length=1)
    enable_recording: bool = Field(default=True, alias="enableRecording")


class StartMeetingResponse(_CamelModel):
    success: bool
    message: str
    meeting_id: str = Field(..., alias="meetingID")
    meeting_name: str = Field(..., alias="meetingName")
    recording_enabled: bool = Field(..., alias="recordingEnabled")


class StopMeetingRequest(_CamelModel):
    meeting_id: str = Field(..., alias="meetingID", min_length=1)


class StopMeetingResponse(_CamelModel):
    success: bool
    message: str
    meeting_id: str = Field(..., alias="meetingID")


class MeetingStatusResponse(_CamelModel):
    exists: bool
    meeting_id: str | None = Field(default=None, alias="meetingID")
    meeting_name: str | None = Field(default=None, alias="meetingName")
    participant_count: int = Field(default=0, ge=0, alias="participantCount")
    running: bool = False
    recording_status: str = Field(default="not-recording", alias="recordingStatus")
    error: str | None = None
    error_key: str | None = Field(default=None, alias="errorKey")


class JoinResponse(_CamelModel):
    join_url: str = Field(..., alias="joinUrl")
    meeting_id: str = Field(..., alias="meetingID")
    full_name: str = Field(..., alias="fullName")


class RoomSummary(_CamelModel):
    key: str
    meeting_id: str = Field(..., alias="meetingID")
    name: str
    level: str


class SessionResponse(_CamelModel):
    name: str
    is_admin: bool = Field(..., alias="isAdmin")


class RoomListResponse(BaseModel):
    items: list[RoomSummary]


class RoomStatusSummary(RoomSummary):
    status: str
    participant_count: int = Field(default=0, ge=0, alias="participantCount")
    recording_status: str = Field(default="not-recording", alias="recordingStatus")
    error: str | None = None


class RoomStatusListResponse(BaseModel):
    items: list[RoomStatusSummary]
