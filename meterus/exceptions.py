"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Meterus, a product of Garudex Labs

Exception hierarchy for the Meterus SDK.

Remote failures are not wrapped: a failed RPC surfaces as the
``grpc.RpcError`` raised by the channel, exported here as ``CallError`` so
callers can catch it without importing grpc themselves.
"""

from typing import Optional

import grpc


class MeterusError(Exception):
    """Base exception for errors raised by the SDK itself."""


class ConnectionError(MeterusError):
    """Raised when the transport cannot be established or is already closed.

    Attributes:
        channel: Which channel failed (``"authenticated"``,
            ``"unauthenticated"``), or None when not channel-specific.
    """

    def __init__(self, message: str, channel: Optional[str] = None) -> None:
        self.channel = channel
        super().__init__(message)


class EncodingError(MeterusError, ValueError):
    """Raised when an event payload cannot be encoded as a protobuf Struct.

    Attributes:
        path: Dotted location of the offending value inside the payload.
    """

    def __init__(self, message: str, path: str = "") -> None:
        self.path = path
        super().__init__(message)


class SDKConfigurationError(MeterusError):
    """Raised when the client or its configuration is invalid."""


# Remote call failures: status code and details are read via
# ``err.code()`` / ``err.details()``.
CallError = grpc.RpcError


__all__ = [
    "MeterusError",
    "ConnectionError",
    "EncodingError",
    "SDKConfigurationError",
    "CallError",
]
