"""
Meterus gRPC contract: protobuf messages and client stubs.

The ``.proto`` files live beside their generated modules:

- ``meters/v1/meters.proto`` - ``meters.v1`` (MeteringService)
- ``subject/v1/subject.proto`` - ``subject.v1`` (SubjectService)
- ``validation/v1/validation.proto`` - ``validation.v1`` (ValidationService)

Regenerate from the repository root after editing a ``.proto``::

    python -m grpc_tools.protoc -I . --python_out=. --pyi_out=. --grpc_python_out=. meterus/protocol/*/v1/*.proto
"""

from meterus.protocol.meters.v1 import meters_pb2, meters_pb2_grpc
from meterus.protocol.meters.v1.meters_pb2_grpc import MeteringServiceStub
from meterus.protocol.subject.v1 import subject_pb2, subject_pb2_grpc
from meterus.protocol.subject.v1.subject_pb2_grpc import SubjectServiceStub
from meterus.protocol.validation.v1 import validation_pb2, validation_pb2_grpc
from meterus.protocol.validation.v1.validation_pb2_grpc import ValidationServiceStub

__all__ = [
    "meters_pb2",
    "meters_pb2_grpc",
    "subject_pb2",
    "subject_pb2_grpc",
    "validation_pb2",
    "validation_pb2_grpc",
    "MeteringServiceStub",
    "SubjectServiceStub",
    "ValidationServiceStub",
]
