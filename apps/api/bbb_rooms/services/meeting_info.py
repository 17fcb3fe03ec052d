"""Interpret ``getMeetingInfo`` responses from the remote conferencing server.

The payload is treated as loosely structured text rather than parsed as XML:
every field is located on its own by its opening/closing tag pair, so missing
fields, duplicated tags, arbitrary ordering and half-broken documents all
degrade to defaults instead of failing the whole response.
"""
from __future__ import annotations

import enum
import re
from dataclasses import dataclass
from functools import lru_cache

from .errors import ParseError, RemoteProtocolError

FAILED_MARKER = "<returncode>FAILED</returncode>"
MEETING_MARKER = "<meetingID>"
NOT_FOUND_MESSAGE = "Meeting not found"


class RecordingState(str, enum.Enum):
    NOT_RECORDING = "not-recording"
    RECORDING = "recording"
    PROCESSING = "processing"


@dataclass(slots=True)
class MeetingSnapshot:
    """Point-in-time view of one remote meeting. Never cached."""

    exists: bool
    meeting_id: str = ""
    meeting_name: str = ""
    participant_count: int = 0
    running: bool = False
    recording_state: RecordingState = RecordingState.NOT_RECORDING
    raw_payload: str = ""
    error: str | None = None


@lru_cache(maxsize=None)
def _tag_pattern(tag: str) -> re.Pattern[str]:
    return re.compile(rf"<{tag}>(.*?)</{tag}>", re.DOTALL)


def extract_field(payload: str, tag: str) -> str | None:
    """Return the text of the first ``<tag>...</tag>`` pair, or ``None``."""

    match = _tag_pattern(tag).search(payload)
    return match.group(1) if match else None


def _parse_count(value: str | None) -> int:
    if value is None:
        return 0
    try:
        return max(0, int(value.strip()))
    except ValueError:
        return 0


def _recording_state(payload: str) -> RecordingState:
    state = RecordingState.NOT_RECORDING
    if extract_field(payload, "recording") == "true":
        state = RecordingState.RECORDING
    if extract_field(payload, "processing") == "true":
        state = RecordingState.PROCESSING
    return state


def _decode(payload: str | bytes) -> str:
    if isinstance(payload, str):
        return payload
    try:
        return payload.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ParseError(
            "Failed to parse meeting info response",
            raw_payload=payload.decode("utf-8", errors="replace"),
        ) from exc


def parse_meeting_info(payload: str | bytes) -> MeetingSnapshot:
    """Turn a ``getMeetingInfo`` payload into a :class:`MeetingSnapshot`.

    A failure return code wins over everything else and raises
    :class:`RemoteProtocolError`. A payload without a ``meetingID`` tag is a
    meeting that does not exist.
    """

    text = _decode(payload or "")

    if FAILED_MARKER in text:
        raise RemoteProtocolError(
            extract_field(text, "message") or "Unknown error",
            error_key=extract_field(text, "messageKey") or "unknown",
            raw_payload=text,
        )

    if MEETING_MARKER not in text:
        return MeetingSnapshot(exists=False, raw_payload=text, error=NOT_FOUND_MESSAGE)

    return MeetingSnapshot(
        exists=True,
        meeting_id=extract_field(text, "meetingID") or "",
        meeting_name=extract_field(text, "meetingName") or "",
        participant_count=_parse_count(extract_field(text, "participantCount")),
        running=extract_field(text, "running") == "true",
        recording_state=_recording_state(text),
        raw_payload=text,
    )
