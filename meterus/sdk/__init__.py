"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Meterus, a product of Garudex Labs

Meterus SDK - public API surface.

Quick start::

    from meterus.sdk import MeterusClient, new_cloud_event
    client = MeterusClient("localhost:8000", api_key="sk_test_123")
    client.new_metering_service().ingest(
        new_cloud_event("evt-1", "billing", "1.0", "api.call", None, "tenant-1", {"route": "/v1"})
    )

Advanced::

    from meterus.sdk import MeterusBuilder
    client = MeterusBuilder().set_api_key("sk_prod").use_tls().build()
"""

from meterus._version import get_version

__version__ = get_version()

# -- Core API (primary) -------------------------------------------------

from meterus.sdk.client import MeterusClient, MeterusBuilder
from meterus.sdk.auth import BearerAuthInterceptor, authorization_metadata, with_auth
from meterus.sdk.connection import Connection, open_connection
from meterus.sdk.events import new_cloud_event
from meterus.sdk.metering import MeteringService
from meterus.sdk.subjects import SubjectService
from meterus.sdk.validation import ValidationService
from meterus.exceptions import (
    CallError,
    ConnectionError,
    EncodingError,
    MeterusError,
    SDKConfigurationError,
)


__all__ = [
    "__version__",
    # client
    "MeterusClient",
    "MeterusBuilder",
    # façades
    "MeteringService",
    "SubjectService",
    "ValidationService",
    # events
    "new_cloud_event",
    # auth
    "BearerAuthInterceptor",
    "authorization_metadata",
    "with_auth",
    # infra
    "Connection",
    "open_connection",
    # errors
    "MeterusError",
    "ConnectionError",
    "EncodingError",
    "SDKConfigurationError",
    "CallError",
]
