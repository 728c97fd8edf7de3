"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Meterus, a product of Garudex Labs

Metering façade: meters, ingestion and queries.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional, Sequence, Union

from meterus.exceptions import SDKConfigurationError
from meterus.protocol.meters.v1 import meters_pb2 as pb
from meterus.sdk.base import ServiceFacade
from meterus.sdk.events import to_timestamp

AggregationLike = Union[int, str]


def aggregation_value(aggregation: AggregationLike) -> int:
    """Resolve an aggregation to its enum number.

    Accepts the enum number, the full name (``AGGREGATION_COUNT``) or the
    short name in any case (``"count"``).

    Raises:
        SDKConfigurationError: If the aggregation is unknown.
    """
    if isinstance(aggregation, int) and not isinstance(aggregation, bool):
        if aggregation not in pb.Aggregation.values():
            raise SDKConfigurationError(f"unknown aggregation: {aggregation}")
        return aggregation

    if not isinstance(aggregation, str):
        raise SDKConfigurationError(f"unknown aggregation: {aggregation!r}")

    name = aggregation.upper()
    if not name.startswith("AGGREGATION_"):
        name = f"AGGREGATION_{name}"
    try:
        return pb.Aggregation.Value(name)
    except ValueError as e:
        raise SDKConfigurationError(f"unknown aggregation: {aggregation!r}") from e


class MeteringService(ServiceFacade):
    """Operations on ``meters.v1.MeteringService``.

    Obtained from ``MeterusClient.new_metering_service()``. Every method is
    a single blocking call; ``timeout`` is the caller's deadline in seconds.
    Failed calls raise ``grpc.RpcError`` as returned by the server.

    Example::

        metering = client.new_metering_service()
        meter = metering.create_meter("api_calls", "api.call", "count", group_by=["route"])
        metering.ingest(new_cloud_event("evt-1", "gateway", "1.0", "api.call", None, "tenant-1", {"route": "/v1"}))
    """

    SERVICE_NAME = pb.DESCRIPTOR.services_by_name["MeteringService"].full_name

    def ingest(self, event: pb.CloudEvent, timeout: Optional[float] = None) -> None:
        """Submit one event.

        Success means the server accepted the event; aggregation happens
        asynchronously so queries may lag behind.
        """
        self._call("Ingest", event, timeout=timeout)

    def list_meters(self, limit: int, page: int, timeout: Optional[float] = None) -> List[pb.Meter]:
        """List meters, ``limit`` per page, pages counted from 1."""
        response = self._call("ListMeters", pb.ListMetersRequest(limit=limit, page=page), timeout=timeout)
        return list(response.meters)

    def get_meter(self, meter_id_or_slug: str, timeout: Optional[float] = None) -> pb.Meter:
        """Fetch a meter by id or slug."""
        return self._call("GetMeter", pb.MeterId(meter_id_or_slug=meter_id_or_slug), timeout=timeout)

    def create_meter(
        self,
        slug: str,
        event_type: str,
        aggregation: AggregationLike,
        group_by: Optional[Sequence[str]] = None,
        description: Optional[str] = None,
        created_by: str = "",
        timeout: Optional[float] = None,
    ) -> pb.Meter:
        """Create a meter.

        Args:
            slug: Unique human-readable key.
            event_type: Type of the events this meter counts.
            aggregation: Aggregation function (``"count"``, ``"sum"``,
                ``pb.AGGREGATION_MAX``, ...).
            group_by: Payload keys used as grouping dimensions.
            description: Optional free text.
            created_by: Creator recorded on the meter.
            timeout: Call deadline in seconds.

        Raises:
            SDKConfigurationError: If ``aggregation`` is unknown.
            grpc.RpcError: ``ALREADY_EXISTS`` for a taken slug, or any
                other server-side rejection.
        """
        request = pb.CreateMeterRequest(
            slug=slug,
            aggregation=aggregation_value(aggregation),
            group_by=list(group_by or ()),
            created_by=created_by,
            event_type=event_type,
        )
        if description is not None:
            request.description = description
        return self._call("CreateMeter", request, timeout=timeout)

    def delete_meter(self, meter_id_or_slug: str, timeout: Optional[float] = None) -> None:
        """Delete a meter by id or slug."""
        self._call("DeleteMeter", pb.MeterId(meter_id_or_slug=meter_id_or_slug), timeout=timeout)

    def query_meter(
        self,
        meter_id_or_slug: str,
        from_time: datetime,
        to_time: datetime,
        subjects: Optional[Sequence[str]] = None,
        group_by: Optional[Sequence[str]] = None,
        timeout: Optional[float] = None,
    ) -> List[pb.MeterValue]:
        """Query aggregated values over ``[from_time, to_time)``.

        ``subjects`` filters by subject; ``group_by`` overrides the meter's
        grouping dimensions.
        """
        request = pb.QueryMeterRequest(
            meter_id_or_slug=meter_id_or_slug,
            subject=list(subjects or ()),
            group_by=list(group_by or ()),
            **{"from": to_timestamp(from_time), "to": to_timestamp(to_time)},
        )
        response = self._call("QueryMeter", request, timeout=timeout)
        return list(response.data)

    def list_meter_subjects(self, meter_id_or_slug: str, timeout: Optional[float] = None) -> List[str]:
        """List the subjects that have events for a meter."""
        request = pb.ListMeterSubjectsRequest(meter_id_or_slug=meter_id_or_slug)
        response = self._call("ListMeterSubjects", request, timeout=timeout)
        return list(response.subjects)
