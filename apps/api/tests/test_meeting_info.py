"""Tests for the getMeetingInfo payload interpreter."""
from __future__ import annotations

import pytest

from bbb_rooms.services.errors import ParseError, RemoteProtocolError
from bbb_rooms.services.meeting_info import RecordingState, parse_meeting_info

RUNNING_MEETING = (
    "<response><returncode>SUCCESS</returncode><meetingID>room1</meetingID>"
    "<meetingName>Room One</meetingName><participantCount>3</participantCount>"
    "<running>true</running><recording>true</recording></response>"
)


def test_running_meeting_snapshot() -> None:
    snapshot = parse_meeting_info(RUNNING_MEETING)

    assert snapshot.exists is True
    assert snapshot.meeting_id == "room1"
    assert snapshot.meeting_name == "Room One"
    assert snapshot.participant_count == 3
    assert snapshot.running is True
    assert snapshot.recording_state is RecordingState.RECORDING
    assert snapshot.raw_payload == RUNNING_MEETING


def test_processing_overrides_recording() -> None:
    payload = RUNNING_MEETING.replace("</response>", "<processing>true</processing></response>")

    assert parse_meeting_info(payload).recording_state is RecordingState.PROCESSING


def test_processing_without_recording_field() -> None:
    payload = "<response><meetingID>room1</meetingID><processing>true</processing></response>"

    assert parse_meeting_info(payload).recording_state is RecordingState.PROCESSING


def test_failure_return_code_wins_over_meeting_id() -> None:
    payload = (
        "<response><returncode>FAILED</returncode><meetingID>room1</meetingID>"
        "<messageKey>notFound</messageKey><message>We could not find a meeting with that meeting ID</message>"
        "</response>"
    )

    with pytest.raises(RemoteProtocolError) as exc:
        parse_meeting_info(payload)

    assert exc.value.error_key == "notFound"
    assert exc.value.message == "We could not find a meeting with that meeting ID"
    assert exc.value.raw_payload == payload


def test_failure_without_details_uses_defaults() -> None:
    with pytest.raises(RemoteProtocolError) as exc:
        parse_meeting_info("<response><returncode>FAILED</returncode></response>")

    assert exc.value.error_key == "unknown"
    assert exc.value.message == "Unknown error"


@pytest.mark.parametrize("payload", ["", "<response><returncode>SUCCESS</returncode></response>", "not xml at all"])
def test_absent_meeting(payload: str) -> None:
    snapshot = parse_meeting_info(payload)

    assert snapshot.exists is False
    assert snapshot.error == "Meeting not found"
    assert snapshot.participant_count == 0


@pytest.mark.parametrize("count", ["abc", "", "-4"])
def test_malformed_participant_count_defaults_to_zero(count: str) -> None:
    payload = f"<response><meetingID>room1</meetingID><participantCount>{count}</participantCount></response>"

    assert parse_meeting_info(payload).participant_count == 0


def test_missing_fields_take_defaults() -> None:
    snapshot = parse_meeting_info("<response><meetingID>room1</meetingID>")

    assert snapshot.exists is True
    assert snapshot.meeting_name == ""
    assert snapshot.participant_count == 0
    assert snapshot.running is False
    assert snapshot.recording_state is RecordingState.NOT_RECORDING


def test_running_requires_literal_true() -> None:
    payload = "<response><meetingID>room1</meetingID><running>TRUE</running><recording>yes</recording></response>"
    snapshot = parse_meeting_info(payload)

    assert snapshot.running is False
    assert snapshot.recording_state is RecordingState.NOT_RECORDING


def test_first_duplicate_tag_wins_and_order_is_irrelevant() -> None:
    payload = (
        "<response><running>true</running><participantCount>7</participantCount>"
        "<meetingName>First</meetingName><meetingID>room1</meetingID>"
        "<meetingName>Second</meetingName><participantCount>1</participantCount></response>"
    )
    snapshot = parse_meeting_info(payload)

    assert snapshot.meeting_name == "First"
    assert snapshot.participant_count == 7
    assert snapshot.running is True


def test_bytes_payload_is_decoded() -> None:
    assert parse_meeting_info(RUNNING_MEETING.encode("utf-8")).meeting_id == "room1"


def test_undecodable_bytes_raise_parse_error() -> None:
    with pytest.raises(ParseError) as exc:
        parse_meeting_info(b"<meetingID>\xff\xfe</meetingID>")

    assert exc.value.error_key == "parse-error"
    assert exc.value.raw_payload is not None
