"""Unit tests for grant conditions parsing and resource matching."""

import pytest

from talentgate.domain.entities import GrantConditions, TimeWindow
from talentgate.domain.exceptions import ValidationError
from talentgate.domain.value_objects import PermissionRequest, resource_matches


class TestGrantConditionsFromMapping:
    def test_none_returns_none(self) -> None:
        assert GrantConditions.from_mapping(None) is None

    def test_empty_mapping_returns_none(self) -> None:
        assert GrantConditions.from_mapping({}) is None

    def test_snake_case_keys(self) -> None:
        conditions = GrantConditions.from_mapping(
            {
                "ip_restrictions": ["10.0.0.1", "10.0.0.2"],
                "time_restrictions": {"start_hour": 9, "end_hour": 17},
            }
        )
        assert conditions.ip_restrictions == ("10.0.0.1", "10.0.0.2")
        assert conditions.time_restrictions == TimeWindow(9, 17)

    def test_camel_case_keys_from_web_client(self) -> None:
        conditions = GrantConditions.from_mapping(
            {"ipRestrictions": ["10.0.0.1"], "timeRestrictions": {"startHour": 0, "endHour": 6}}
        )
        assert conditions.ip_restrictions == ("10.0.0.1",)
        assert conditions.time_restrictions == TimeWindow(0, 6)

    def test_round_trip_through_mapping(self) -> None:
        conditions = GrantConditions(ip_restrictions=("1.2.3.4",), time_restrictions=TimeWindow(8, 20))
        assert GrantConditions.from_mapping(conditions.to_mapping()) == conditions

    @pytest.mark.parametrize(
        "data",
        [
            "not-an-object",
            {"ip_restrictions": "10.0.0.1"},
            {"ip_restrictions": [1, 2]},
            {"time_restrictions": [9, 17]},
            {"time_restrictions": {"start_hour": 9}},
            {"time_restrictions": {"start_hour": 9, "end_hour": 24}},
            {"time_restrictions": {"start_hour": "9", "end_hour": 17}},
            {"time_restrictions": {"start_hour": True, "end_hour": 17}},
            {"time_restrictions": {"start_hour": 22, "end_hour": 6}},
        ],
    )
    def test_malformed_conditions_rejected(self, data) -> None:
        with pytest.raises(ValidationError):
            GrantConditions.from_mapping(data)


class TestTimeWindow:
    def test_contains_is_inclusive(self) -> None:
        window = TimeWindow(9, 17)
        assert window.contains(9)
        assert window.contains(17)
        assert not window.contains(8)
        assert not window.contains(18)

    def test_inverted_window_rejected(self) -> None:
        with pytest.raises(ValidationError, match="after end_hour"):
            TimeWindow(22, 6)

    def test_single_hour_window(self) -> None:
        window = TimeWindow(13, 13)
        assert window.contains(13)
        assert not window.contains(14)


class TestResourceMatches:
    @pytest.mark.parametrize(
        ("granted", "requested", "expected"),
        [
            (None, None, True),
            ("own", None, True),
            (None, "own", True),
            ("all", "own", True),
            ("all", "job-42", True),
            ("own", "own", True),
            ("own", "all", False),
            ("job-1", "job-2", False),
        ],
    )
    def test_resource_matching(self, granted, requested, expected) -> None:
        assert resource_matches(granted, requested) is expected


def test_permission_request_label() -> None:
    assert str(PermissionRequest("job_management", "read", "all")) == "job_management.read (all)"
    assert str(PermissionRequest("analytics", "export")) == "analytics.export"
