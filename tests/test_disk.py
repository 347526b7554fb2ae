"""Tests for disk request validation and result models."""

import json
from datetime import timedelta

import pytest

from control_api.const import DISK_MAX_SIZE, MAX_NAME_LENGTH, DiskMetricsTimeRange
from control_api.disk import (
    DiskCreate,
    DiskDelete,
    DiskGet,
    DiskItem,
    DiskList,
    DiskListResult,
    DiskMetrics,
    DiskMetricsResult,
    DiskUpdate,
)
from control_api.errors import InvalidNameError, ValidationFailed
from control_api.types import Status


def make_create(**kwargs) -> DiskCreate:
    data = {"location": "gke.cluster-rcf2", "project": "my-project", "name": "data", "size": 10}
    data.update(kwargs)
    return DiskCreate(**data)


class TestDiskCreate:
    """Test cases for DiskCreate validation."""

    @pytest.mark.parametrize("name", ["abc", "data", "my-disk-1", "a" * MAX_NAME_LENGTH])
    def test_valid_names(self, name):
        assert make_create(name=name).valid() is None

    @pytest.mark.parametrize("size", [1, 50, DISK_MAX_SIZE])
    def test_valid_sizes(self, size):
        assert make_create(size=size).valid() is None

    def test_size_zero(self):
        err = make_create(size=0).valid()
        assert isinstance(err, ValidationFailed)
        assert err.errors == ["minimum disk size 1 Gi"]

    def test_size_above_max(self):
        err = make_create(size=DISK_MAX_SIZE + 1).valid()
        assert isinstance(err, ValidationFailed)
        assert err.errors == [f"maximum disk size {DISK_MAX_SIZE} Gi"]

    @pytest.mark.parametrize("name", ["Data", "1disk", "disk-", "my_disk", "ab", "a" * (MAX_NAME_LENGTH + 1)])
    def test_invalid_names(self, name):
        err = make_create(name=name).valid()
        assert isinstance(err, ValidationFailed)
        assert all(e.startswith("name") for e in err.errors)

    def test_name_is_trimmed(self):
        m = make_create(name="  data  ")
        assert m.valid() is None
        assert m.name == "data"

    def test_name_trimmed_even_when_invalid(self):
        m = make_create(name=" data ", location="")
        assert m.valid() is not None
        assert m.name == "data"

    def test_reports_every_violation(self):
        """Test that an empty request lists all problems at once."""
        err = DiskCreate().valid()
        assert isinstance(err, ValidationFailed)
        assert "location required" in err.errors
        assert "project required" in err.errors
        assert "minimum disk size 1 Gi" in err.errors
        assert len(err.errors) == 5


class TestDiskUpdate:
    def test_same_rules_as_create(self):
        assert DiskUpdate(location="l", project="p", name="data", size=20).valid() is None
        err = DiskUpdate(location="l", project="p", name="data", size=0).valid()
        assert err.errors == ["minimum disk size 1 Gi"]

    def test_trims_name(self):
        m = DiskUpdate(location="l", project="p", name=" data\n", size=20)
        m.valid()
        assert m.name == "data"


class TestDiskGet:
    def test_valid(self):
        assert DiskGet(location="l", project="p", name="data").valid() is None

    def test_required_fields(self):
        err = DiskGet().valid()
        assert err.errors == ["location required", "project required", "name required"]


class TestDiskList:
    def test_location_optional(self):
        m = DiskList(project="p")
        assert m.location is None
        assert m.valid() is None

    def test_project_required(self):
        assert DiskList(location="l").valid().errors == ["project required"]


class TestDiskDelete:
    """Test cases for DiskDelete's two error paths."""

    def test_valid(self):
        assert DiskDelete(location="l", project="p", name="data").valid() is None

    def test_pattern_error_is_aggregated(self):
        err = DiskDelete(location="l", project="p", name="Bad Name").valid()
        assert isinstance(err, ValidationFailed)
        assert err.errors[0].startswith("name invalid")

    def test_long_name_returns_distinct_error(self):
        err = DiskDelete(location="l", project="p", name="a" * (MAX_NAME_LENGTH + 1)).valid()
        assert isinstance(err, InvalidNameError)
        assert not isinstance(err, ValidationFailed)
        assert str(err) == "name invalid"

    def test_long_name_wins_over_other_failures(self):
        err = DiskDelete(name="A" * (MAX_NAME_LENGTH + 5)).valid()
        assert isinstance(err, InvalidNameError)

    def test_trims_name(self):
        m = DiskDelete(location="l", project="p", name=" data ")
        assert m.valid() is None
        assert m.name == "data"


class TestDiskMetrics:
    """Test cases for DiskMetrics validation."""

    @pytest.mark.parametrize("time_range", ["1h", "6h", "12h", "1d", "2d", "7d", "30d"])
    def test_accepts_every_time_range(self, time_range):
        m = DiskMetrics(location="l", project="p", name="data", time_range=time_range)
        assert m.valid() is None

    @pytest.mark.parametrize("time_range", ["5h", "", "1H", "30m", "90d"])
    def test_rejects_other_time_ranges(self, time_range):
        err = DiskMetrics(location="l", project="p", name="data", time_range=time_range).valid()
        assert err.errors == ["timeRange invalid"]

    def test_accepts_enum_member(self):
        m = DiskMetrics(location="l", project="p", name="data", time_range=DiskMetricsTimeRange.seven_days)
        assert m.time_range == "7d"
        assert m.valid() is None

    def test_name_too_long(self):
        err = DiskMetrics(location="l", project="p", name="a" * (MAX_NAME_LENGTH + 1), time_range="1h").valid()
        assert err.errors == [f"name must have length less than {MAX_NAME_LENGTH} characters"]

    def test_required_fields(self):
        err = DiskMetrics(name="data", time_range="1h").valid()
        assert err.errors == ["location required", "project required"]

    def test_wire_key(self):
        m = DiskMetrics(location="l", project="p", name="data", time_range="1d")
        assert m.to_dict() == {"location": "l", "project": "p", "name": "data", "timeRange": "1d"}
        assert DiskMetrics.model_validate({"timeRange": "6h"}).time_range == "6h"
        assert DiskMetrics.model_validate({"time_range": "6h"}).time_range == "6h"


class TestDiskResults:
    """Test cases for disk result decoding and tables."""

    def test_item_from_json(self):
        item = DiskItem.from_json(json.dumps({
            "project": "p",
            "location": "l",
            "name": "data",
            "size": 10,
            "status": "success",
            "action": "",
            "createdAt": "2024-01-01T00:00:00Z",
            "createdBy": "user@example.com",
            "successAt": None,
        }))
        assert item.status is Status.success
        assert item.created_by == "user@example.com"
        assert item.success_at is None

    def test_item_dump_uses_camel_case(self, two_days_ago):
        item = DiskItem(name="data", size=10, created_at=two_days_ago)
        dumped = item.to_dict()
        assert "createdAt" in dumped
        assert "successAt" in dumped
        assert dumped["status"] == "pending"

    def test_item_table(self, two_days_ago):
        item = DiskItem(name="data", size=10, location="l", created_at=two_days_ago)
        assert item.table() == [["NAME", "SIZE", "LOCATION", "AGE"], ["data", "10Gi", "l", "2d"]]

    def test_list_table(self, two_days_ago):
        result = DiskListResult(items=[
            DiskItem(name="a1", size=1, location="l", created_at=two_days_ago),
            DiskItem(name="b2", size=20, location="l", created_at=two_days_ago - timedelta(days=1)),
        ])
        table = result.table()
        assert table[0] == ["NAME", "SIZE", "LOCATION", "AGE"]
        assert table[1] == ["a1", "1Gi", "l", "2d"]
        assert table[2] == ["b2", "20Gi", "l", "3d"]

    def test_list_null_items(self):
        result = DiskListResult.from_json('{"items": null}')
        assert result.items == []
        assert result.table() == [["NAME", "SIZE", "LOCATION", "AGE"]]

    def test_metrics_result(self):
        result = DiskMetricsResult.from_json(json.dumps({
            "usage": [{"name": "data", "points": [[1700000000, 1.5], [1700000060, 2.0]]}],
            "size": None,
        }))
        assert result.usage[0].name == "data"
        assert result.usage[0].points == [(1700000000.0, 1.5), (1700000060.0, 2.0)]
        assert result.size == []

    def test_yaml_form(self):
        m = DiskCreate(location="l", project="p", name="data", size=10)
        text = m.to_yaml()
        assert "location: l" in text
        assert DiskCreate.from_yaml(text) == m


class TestDiskItemDecoding:
    """Result decoding tolerates partial or newer backend payloads."""

    def test_missing_created_at(self):
        item = DiskItem.from_json('{"name": "data", "size": 1, "status": "success"}')
        assert item.created_at is None
        assert item.table()[1] == ["data", "1Gi", "", ""]

    def test_unknown_status(self):
        item = DiskItem.from_json('{"name": "data", "size": 1, "status": "deleting"}')
        assert item.status == "deleting"
        assert item.to_dict()["status"] == "deleting"

    def test_known_status_is_enum(self):
        item = DiskItem.from_json('{"name": "data", "status": "error"}')
        assert item.status is Status.error
