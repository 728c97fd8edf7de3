"""
Shared fixtures for the Meterus SDK tests.

``fake_meterus`` runs an in-process gRPC server implementing the Meterus
contract in memory, so the tests exercise real channels, real metadata and
real status codes.
"""

import uuid
from concurrent import futures
from typing import Dict, List, Optional, Set, Tuple

import grpc
import pytest
from google.protobuf import empty_pb2, json_format, struct_pb2

from meterus.protocol.meters.v1 import meters_pb2 as meters_pb
from meterus.protocol.meters.v1 import meters_pb2_grpc
from meterus.protocol.subject.v1 import subject_pb2 as subject_pb
from meterus.protocol.subject.v1 import subject_pb2_grpc
from meterus.protocol.validation.v1 import validation_pb2 as validation_pb
from meterus.protocol.validation.v1 import validation_pb2_grpc
from meterus.sdk.client import MeterusClient

VALID_API_KEY = "sk_test_valid"
READONLY_API_KEY = "sk_test_readonly"


class FakeMeterus(
    meters_pb2_grpc.MeteringServiceServicer,
    subject_pb2_grpc.SubjectServiceServicer,
    validation_pb2_grpc.ValidationServiceServicer,
):
    """In-memory implementation of the three Meterus services.

    Attributes:
        calls: ``(method, authorization header values)`` for every call.
    """

    def __init__(self, api_keys: Dict[str, Tuple[str, Set[str]]]) -> None:
        self.api_keys = api_keys
        self.calls: List[Tuple[str, List[str]]] = []
        self.meters: Dict[str, meters_pb.Meter] = {}
        self.events: List[meters_pb.CloudEvent] = []
        self.subjects: Dict[str, subject_pb.Subject] = {}
        self.address: Optional[str] = None

    # -- helpers -----------------------------------------------------------

    def _authorize(self, method: str, context) -> str:
        headers = [value for key, value in context.invocation_metadata() if key == "authorization"]
        self.calls.append((method, headers))

        if len(headers) != 1 or not headers[0].startswith("Bearer "):
            context.abort(grpc.StatusCode.UNAUTHENTICATED, "missing bearer token")
        key = headers[0][len("Bearer "):]
        if key not in self.api_keys:
            context.abort(grpc.StatusCode.UNAUTHENTICATED, "invalid api key")
        return key

    def _find_meter(self, id_or_slug: str, context) -> meters_pb.Meter:
        meter = self.meters.get(id_or_slug)
        if meter is None:
            meter = next((m for m in self.meters.values() if m.slug == id_or_slug), None)
        if meter is None:
            context.abort(grpc.StatusCode.NOT_FOUND, f"meter {id_or_slug} not found")
        return meter

    def authorization_headers(self, method: str) -> List[List[str]]:
        return [headers for name, headers in self.calls if name == method]

    # -- meters.v1.MeteringService -----------------------------------------

    def Ingest(self, request, context):
        self._authorize("Ingest", context)
        self.events.append(request)
        return empty_pb2.Empty()

    def ListMeters(self, request, context):
        self._authorize("ListMeters", context)
        meters = list(self.meters.values())
        if request.limit > 0:
            start = (max(request.page, 1) - 1) * request.limit
            meters = meters[start:start + request.limit]
        return meters_pb.ListMetersResponse(meters=meters)

    def GetMeter(self, request, context):
        self._authorize("GetMeter", context)
        return self._find_meter(request.meter_id_or_slug, context)

    def CreateMeter(self, request, context):
        self._authorize("CreateMeter", context)
        if not request.slug or not request.event_type:
            context.abort(grpc.StatusCode.INVALID_ARGUMENT, "slug and event_type are required")
        if any(m.slug == request.slug for m in self.meters.values()):
            context.abort(grpc.StatusCode.ALREADY_EXISTS, f"meter {request.slug} already exists")

        meter = meters_pb.Meter(
            id=f"meter_{uuid.uuid4().hex}",
            slug=request.slug,
            aggregation=request.aggregation,
            group_by=request.group_by,
            created_by=request.created_by,
            event_type=request.event_type,
        )
        if request.HasField("description"):
            meter.description = request.description
        self.meters[meter.id] = meter
        return meter

    def DeleteMeter(self, request, context):
        self._authorize("DeleteMeter", context)
        meter = self._find_meter(request.meter_id_or_slug, context)
        del self.meters[meter.id]
        return empty_pb2.Empty()

    def QueryMeter(self, request, context):
        self._authorize("QueryMeter", context)
        meter = self._find_meter(request.meter_id_or_slug, context)
        if meter.aggregation != meters_pb.AGGREGATION_COUNT:
            context.abort(grpc.StatusCode.UNIMPLEMENTED, "only COUNT meters are supported")

        start = getattr(request, "from").ToNanoseconds()
        end = request.to.ToNanoseconds()
        group_by = list(request.group_by) or list(meter.group_by)

        counts: Dict[Tuple[str, Tuple[str, ...]], int] = {}
        for event in self.events:
            if event.type != meter.event_type:
                continue
            if not start <= event.time.ToNanoseconds() < end:
                continue
            if request.subject and event.subject not in request.subject:
                continue
            data = json_format.MessageToDict(event.data)
            group = tuple(str(data.get(key, "")) for key in group_by)
            counts[(event.subject, group)] = counts.get((event.subject, group), 0) + 1

        values = []
        for (subject, group), count in counts.items():
            value = meters_pb.MeterValue(subject=subject, value=float(count), group_by=dict(zip(group_by, group)))
            value.window_start.CopyFrom(getattr(request, "from"))
            value.window_end.CopyFrom(request.to)
            values.append(value)
        return meters_pb.QueryMeterResponse(data=values)

    def ListMeterSubjects(self, request, context):
        self._authorize("ListMeterSubjects", context)
        meter = self._find_meter(request.meter_id_or_slug, context)
        subjects = sorted({e.subject for e in self.events if e.type == meter.event_type})
        return meters_pb.ListMeterSubjectsResponse(subjects=subjects)

    # -- subject.v1.SubjectService -----------------------------------------

    def CreateSubject(self, request, context):
        self._authorize("CreateSubject", context)
        if request.id in self.subjects:
            context.abort(grpc.StatusCode.ALREADY_EXISTS, f"subject {request.id} already exists")
        self.subjects[request.id] = request
        return request

    def GetSubject(self, request, context):
        self._authorize("GetSubject", context)
        if request.subject_id not in self.subjects:
            context.abort(grpc.StatusCode.NOT_FOUND, f"subject {request.subject_id} not found")
        return self.subjects[request.subject_id]

    def ListSubjects(self, request, context):
        self._authorize("ListSubjects", context)
        subjects = list(self.subjects.values())
        if request.limit > 0:
            start = (max(request.page, 1) - 1) * request.limit
            subjects = subjects[start:start + request.limit]
        return subject_pb.ListSubjectsResponse(subjects=subjects)

    def UpdateSubject(self, request, context):
        self._authorize("UpdateSubject", context)
        if request.id not in self.subjects:
            context.abort(grpc.StatusCode.NOT_FOUND, f"subject {request.id} not found")
        self.subjects[request.id] = request
        return request

    def DeleteSubject(self, request, context):
        self._authorize("DeleteSubject", context)
        if request.subject_id not in self.subjects:
            context.abort(grpc.StatusCode.NOT_FOUND, f"subject {request.subject_id} not found")
        del self.subjects[request.subject_id]
        return empty_pb2.Empty()

    # -- validation.v1.ValidationService -----------------------------------

    def ValidateApiKey(self, request, context):
        key = self._authorize("ValidateApiKey", context)
        subject, scopes = self.api_keys[key]
        missing = set(request.required_scopes) - scopes
        if missing:
            context.abort(grpc.StatusCode.PERMISSION_DENIED, f"missing scopes: {', '.join(sorted(missing))}")

        attributes = struct_pb2.Struct()
        attributes.update({"plan": "pro", "scopes": sorted(scopes)})
        return validation_pb.ValidateApiKeyResponse(
            metadata=validation_pb.ApiKeyMetadata(subject=subject, additional_attributes=attributes)
        )


@pytest.fixture
def fake_meterus():
    """Start a fake Meterus server on an ephemeral port."""
    fake = FakeMeterus({
        VALID_API_KEY: ("test-owner", {"meterus:meterus", "read", "write"}),
        READONLY_API_KEY: ("readonly-owner", {"read"}),
    })
    server = grpc.server(futures.ThreadPoolExecutor(max_workers=8))
    meters_pb2_grpc.add_MeteringServiceServicer_to_server(fake, server)
    subject_pb2_grpc.add_SubjectServiceServicer_to_server(fake, server)
    validation_pb2_grpc.add_ValidationServiceServicer_to_server(fake, server)
    port = server.add_insecure_port("127.0.0.1:0")
    server.start()
    fake.address = f"127.0.0.1:{port}"

    yield fake

    server.stop(None)


@pytest.fixture
def client(fake_meterus):
    """Client using explicit per-call credential injection."""
    client = MeterusClient(fake_meterus.address, api_key=VALID_API_KEY)
    yield client
    if not client.closed:
        client.close()


@pytest.fixture
def interceptor_client(fake_meterus):
    """Client using the dual-channel interceptor mode."""
    client = MeterusClient(fake_meterus.address, api_key=VALID_API_KEY, auth_mode="interceptor")
    yield client
    if not client.closed:
        client.close()
