"""
Unit tests for Schedule, Day Part and Command tools.
"""

from __future__ import annotations

from src.signage.client import XiboClient

from ..conftest import SAMPLE_SCHEDULE_EVENT, FakeCms
from .conftest import call_tool, form_of, result_of


class TestSchedules:
    """Tests for schedule tools."""

    def test_get_events_by_group(self, patch_get_client: XiboClient, fake_cms: FakeCms) -> None:
        """Test filtering events by display groups and date range."""
        fake_cms.add("GET", "/api/schedule", json=[SAMPLE_SCHEDULE_EVENT])

        result = result_of(call_tool("get_schedule_events", {
            "displayGroupIds": [31, 32],
            "fromDt": "2024-06-01 00:00:00",
            "toDt": "2024-06-02 00:00:00",
        }))

        assert result["data"][0]["eventId"] == 100
        params = fake_cms.last.url.params
        assert params.get_list("displayGroupIds[]") == ["31", "32"]
        assert params["fromDt"] == "2024-06-01 00:00:00"

    def test_add_schedule(self, patch_get_client: XiboClient, fake_cms: FakeCms) -> None:
        """Test scheduling a campaign on display groups."""
        fake_cms.add("POST", "/api/schedule", status=201, json=SAMPLE_SCHEDULE_EVENT)

        result = result_of(call_tool("add_schedule", {
            "eventTypeId": 5,
            "campaignId": 7,
            "displayGroupIds": [31],
            "fromDt": "2024-06-01 09:00:00",
            "toDt": "2024-06-01 17:00:00",
            "recurrenceType": "Day",
            "recurrenceDetail": 1,
        }))

        assert result["data"]["eventTypeId"] == 5
        assert form_of(fake_cms) == {
            "eventTypeId": ["5"],
            "displayGroupIds[]": ["31"],
            "campaignId": ["7"],
            "fromDt": ["2024-06-01 09:00:00"],
            "toDt": ["2024-06-01 17:00:00"],
            "recurrenceType": ["Day"],
            "recurrenceDetail": ["1"],
        }

    def test_add_schedule_needs_display_groups(self, patch_get_client: XiboClient, fake_cms: FakeCms) -> None:
        """Test that an empty display group list is a missing argument."""
        result = result_of(call_tool("add_schedule", {"eventTypeId": 5, "displayGroupIds": []}))

        assert result["error"]["type"] == "input_error"
        assert fake_cms.requests == []

    def test_delete_recurrence(self, patch_get_client: XiboClient, fake_cms: FakeCms) -> None:
        """Test deleting every occurrence of a recurring event."""
        fake_cms.add("DELETE", "/api/schedule/100/recurrence", status=204)

        result = result_of(call_tool("delete_schedule_recurrence", {"eventId": 100, "deleteAll": True}))

        assert result["message"] == "Schedule recurrence deleted successfully."
        assert fake_cms.last.url.params["deleteAll"] == "1"


class TestDayParts:
    """Tests for day part tools."""

    def test_add_day_part_with_exceptions(self, patch_get_client: XiboClient, fake_cms: FakeCms) -> None:
        """Test creating a day part with weekday exceptions."""
        fake_cms.add("POST", "/api/daypart", json={
            "dayPartId": 3,
            "name": "Office hours",
            "startTime": "09:00",
            "endTime": "17:00",
            "exceptions": '[{"day": "Sat", "start": "10:00", "end": "14:00"}]',
        })

        result = result_of(call_tool("add_day_part", {
            "name": "Office hours",
            "startTime": "09:00",
            "endTime": "17:00",
            "exceptionDays": ["Sat"],
            "exceptionStartTimes": ["10:00"],
            "exceptionEndTimes": ["14:00"],
        }))

        assert result["data"]["exceptions"] == [{"day": "Sat", "start": "10:00", "end": "14:00"}]
        form = form_of(fake_cms)
        assert form["exceptionDays[]"] == ["Sat"]
        assert form["exceptionStartTimes[]"] == ["10:00"]

    def test_edit_day_part_named_like_json(self, patch_get_client: XiboClient, fake_cms: FakeCms) -> None:
        """Test editing a day part; only exceptions are parsed as JSON."""
        fake_cms.add("PUT", "/api/daypart/3", json={
            "dayPartId": 3,
            "name": "[late]",
            "startTime": "18:00",
            "endTime": "23:00",
            "exceptions": "[]",
        })

        result = result_of(call_tool("edit_day_part", {
            "dayPartId": 3, "name": "[late]", "startTime": "18:00", "endTime": "23:00",
        }))

        assert result["data"]["name"] == "[late]"
        assert result["data"]["exceptions"] == []
        assert form_of(fake_cms) == {"name": ["[late]"], "startTime": ["18:00"], "endTime": ["23:00"]}


class TestCommands:
    """Tests for command tools."""

    def test_add_command(self, patch_get_client: XiboClient, fake_cms: FakeCms) -> None:
        """Test creating a player command."""
        fake_cms.add("POST", "/api/command", json={"commandId": 2, "command": "Reboot", "code": "reboot"})

        result = result_of(call_tool("add_command", {"command": "Reboot", "code": "reboot", "createAlertOn": "failure"}))

        assert result["data"]["code"] == "reboot"
        assert form_of(fake_cms) == {"command": ["Reboot"], "code": ["reboot"], "createAlertOn": ["failure"]}
