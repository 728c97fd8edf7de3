"""
Unit tests for the metering façade.

Runs every MeteringService operation against the fake server:
- Meter create/get/list/delete
- Duplicate slug rejection
- Ingest then query aggregation
- Meter subjects
"""

from datetime import datetime, timedelta, timezone

import grpc
import pytest

from meterus.exceptions import MeterusError, SDKConfigurationError
from meterus.protocol.meters.v1 import meters_pb2 as pb
from meterus.sdk.events import new_cloud_event
from meterus.sdk.metering import aggregation_value


@pytest.fixture
def metering(client):
    return client.new_metering_service()


@pytest.fixture
def test_meter(metering):
    """Create the meter used by the ingestion scenario."""
    return metering.create_meter(
        slug="test_meter",
        event_type="test.event",
        aggregation="count",
        group_by=["user_id"],
        description="Test meter for integration tests",
        created_by="integration-test",
    )


class TestAggregationValue:
    """Test aggregation argument resolution."""

    @pytest.mark.parametrize("value", ["count", "COUNT", "AGGREGATION_COUNT", pb.AGGREGATION_COUNT])
    def test_accepted_forms(self, value):
        assert aggregation_value(value) == pb.AGGREGATION_COUNT

    @pytest.mark.parametrize("value", ["median", 99, True, None])
    def test_unknown(self, value):
        with pytest.raises(SDKConfigurationError):
            aggregation_value(value)


class TestMeterLifecycle:
    """Test meter CRUD."""

    def test_create_and_get_meter(self, metering, test_meter):
        """Test a created meter can be fetched by id and by slug."""
        assert test_meter.id
        by_id = metering.get_meter(test_meter.id)
        by_slug = metering.get_meter("test_meter")

        assert by_id == by_slug == test_meter
        assert by_id.slug == "test_meter"
        assert by_id.description == "Test meter for integration tests"
        assert by_id.aggregation == pb.AGGREGATION_COUNT
        assert list(by_id.group_by) == ["user_id"]
        assert by_id.created_by == "integration-test"
        assert by_id.event_type == "test.event"

    def test_description_is_optional(self, metering):
        """Test omitting the description leaves the field unset."""
        meter = metering.create_meter("no_description", "x.event", pb.AGGREGATION_COUNT)
        assert not meter.HasField("description")

    def test_duplicate_slug_fails(self, metering, test_meter):
        """Test a taken slug raises instead of returning the existing meter."""
        with pytest.raises(grpc.RpcError) as exc_info:
            metering.create_meter("test_meter", "other.event", "count")
        assert exc_info.value.code() == grpc.StatusCode.ALREADY_EXISTS

    def test_missing_required_fields(self, metering):
        """Test server-side validation errors are surfaced verbatim."""
        with pytest.raises(grpc.RpcError) as exc_info:
            metering.create_meter("", "", "count")
        assert exc_info.value.code() == grpc.StatusCode.INVALID_ARGUMENT
        assert exc_info.value.details() == "slug and event_type are required"

    def test_delete_then_get_is_not_found(self, metering, test_meter):
        """Test a deleted meter can no longer be fetched."""
        metering.delete_meter(test_meter.id)
        with pytest.raises(grpc.RpcError) as exc_info:
            metering.get_meter(test_meter.id)
        assert exc_info.value.code() == grpc.StatusCode.NOT_FOUND

    def test_delete_by_slug(self, metering, test_meter):
        metering.delete_meter("test_meter")
        assert metering.list_meters(limit=10, page=1) == []

    def test_get_unknown_meter(self, metering):
        with pytest.raises(grpc.RpcError) as exc_info:
            metering.get_meter("does-not-exist")
        assert exc_info.value.code() == grpc.StatusCode.NOT_FOUND


class TestListMeters:
    """Test meter pagination."""

    def test_list_contains_created_meter(self, metering, test_meter):
        assert test_meter in metering.list_meters(limit=10, page=1)

    def test_page_size_is_bounded(self, metering):
        """Test a page never holds more than ``limit`` meters."""
        for index in range(12):
            metering.create_meter(f"meter_{index}", "bulk.event", "count")

        first = metering.list_meters(limit=10, page=1)
        second = metering.list_meters(limit=10, page=2)

        assert len(first) == 10
        assert len(second) == 2
        assert {m.slug for m in first}.isdisjoint({m.slug for m in second})


class TestIngestAndQuery:
    """Test ingestion and aggregation queries."""

    def test_ingest_and_query_meter(self, metering, test_meter):
        """Test a single ingested event is counted once."""
        event = new_cloud_event(
            "test-event-id", "integration-test", "1.0", test_meter.event_type, None, "test-subject",
            {"user_id": "test-user", "action": "test-action"},
        )
        metering.ingest(event)

        now = datetime.now(timezone.utc) + timedelta(seconds=1)
        data = metering.query_meter(
            test_meter.id,
            from_time=now - timedelta(hours=1),
            to_time=now,
            subjects=["test-subject"],
            group_by=["user_id"],
        )

        assert len(data) == 1
        assert data[0].value == 1
        assert data[0].subject == "test-subject"
        assert dict(data[0].group_by) == {"user_id": "test-user"}

    def test_query_outside_window(self, metering, test_meter):
        """Test events after the window end are not counted."""
        event_time = datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)
        metering.ingest(new_cloud_event("e1", "src", "1.0", "test.event", event_time, "s1", {"user_id": "u"}))

        data = metering.query_meter("test_meter", event_time - timedelta(hours=1), event_time)
        assert data == []

    def test_query_unknown_meter(self, metering):
        with pytest.raises(grpc.RpcError) as exc_info:
            metering.query_meter("missing", datetime(2026, 1, 1), datetime(2026, 1, 2))
        assert exc_info.value.code() == grpc.StatusCode.NOT_FOUND

    def test_list_meter_subjects(self, metering, test_meter):
        """Test subjects with events for the meter are listed."""
        for index, subject in enumerate(["tenant-b", "tenant-a", "tenant-b"]):
            metering.ingest(new_cloud_event(f"e{index}", "src", "1.0", "test.event", None, subject, {}))
        metering.ingest(new_cloud_event("other", "src", "1.0", "other.event", None, "tenant-c", {}))

        assert metering.list_meter_subjects(test_meter.slug) == ["tenant-a", "tenant-b"]


class TestCredentialInjection:
    def test_every_call_carries_one_bearer_header(self, metering, fake_meterus, test_meter):
        """Test explicit injection adds exactly one header per call."""
        metering.get_meter(test_meter.id)
        metering.list_meters(limit=1, page=1)

        assert all(headers == ["Bearer sk_test_valid"] for _, headers in fake_meterus.calls)

    def test_generous_timeout_succeeds(self, metering):
        """Test a caller deadline that is not reached does not affect the call."""
        assert metering.list_meters(limit=1, page=1, timeout=5) == []


class TestDeadlines:
    def test_expired_deadline_raises_deadline_exceeded(self, metering):
        """Test the caller's deadline reaches the call and its expiry surfaces unchanged."""
        with pytest.raises(grpc.RpcError) as exc_info:
            metering.list_meters(limit=1, page=1, timeout=1e-9)

        assert exc_info.value.code() == grpc.StatusCode.DEADLINE_EXCEEDED
        assert not isinstance(exc_info.value, MeterusError)

    def test_expired_deadline_applies_to_every_facade(self, client):
        """Test subject and validation calls honour the deadline too."""
        with pytest.raises(grpc.RpcError) as subject_error:
            client.new_subject_service().get_by_id("anyone", timeout=1e-9)
        with pytest.raises(grpc.RpcError) as validation_error:
            client.new_validation_service().validate_api_key("sk_test_valid", ["read"], timeout=1e-9)

        assert subject_error.value.code() == grpc.StatusCode.DEADLINE_EXCEEDED
        assert validation_error.value.code() == grpc.StatusCode.DEADLINE_EXCEEDED
