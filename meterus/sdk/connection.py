"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Meterus, a product of Garudex Labs

Transport connection shared by every service façade.

A ``Connection`` wraps one ``grpc.Channel``. The client that opened it is
its only owner and closes it exactly once; façades keep a plain reference
and consult ``ensure_open`` before dispatching so calls on a closed client
fail immediately instead of reaching a dead channel.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence, Tuple

import grpc

from meterus.exceptions import ConnectionError
from meterus.logging_config import get_logger, log_connection_event

logger = get_logger(__name__)

ChannelOptions = Sequence[Tuple[str, Any]]


class Connection:
    """A single gRPC channel plus its open/closed state.

    Args:
        channel: The underlying (possibly intercepted) channel.
        address: Target address the channel was opened against.
        role: ``"authenticated"`` or ``"unauthenticated"``.
        secure: Whether the channel uses TLS.
    """

    def __init__(self, channel: grpc.Channel, address: str, role: str, secure: bool = False) -> None:
        self._channel = channel
        self.address = address
        self.role = role
        self.secure = secure
        self._closed = False

    @property
    def channel(self) -> grpc.Channel:
        return self._channel

    @property
    def closed(self) -> bool:
        return self._closed

    def ensure_open(self) -> None:
        """Raise ``ConnectionError`` if the connection has been closed."""
        if self._closed:
            raise ConnectionError(
                f"{self.role} gRPC connection to {self.address} is closed",
                channel=self.role,
            )

    def close(self) -> None:
        """Close the channel.

        Raises:
            ConnectionError: If the connection was already closed.
        """
        if self._closed:
            raise ConnectionError(
                f"{self.role} gRPC connection to {self.address} already closed",
                channel=self.role,
            )
        self._closed = True
        self._channel.close()
        log_connection_event(logger, self.address, self.role, "closed", self.secure)


def open_connection(
    address: str,
    role: str,
    secure: bool = False,
    credentials: Optional[grpc.ChannelCredentials] = None,
    options: Optional[ChannelOptions] = None,
    interceptors: Optional[Sequence[Any]] = None,
    connect_timeout: Optional[float] = None,
) -> Connection:
    """Open a channel to ``address`` and wrap it in a ``Connection``.

    Channels are plaintext unless ``secure`` is set, in which case
    ``credentials`` (or default SSL credentials) are used. When
    ``connect_timeout`` is given the call blocks until the channel is ready.

    Raises:
        ConnectionError: If the address is empty, the channel cannot be
            created or it does not become ready in time.
    """
    if not address:
        raise ConnectionError(f"failed to create {role} gRPC connection: address is required", channel=role)

    try:
        if secure:
            channel = grpc.secure_channel(
                address,
                credentials or grpc.ssl_channel_credentials(),
                options=options,
            )
        else:
            channel = grpc.insecure_channel(address, options=options)
    except Exception as e:
        log_connection_event(logger, address, role, "failed", secure, error=str(e))
        raise ConnectionError(f"failed to create {role} gRPC connection: {e}", channel=role) from e

    if connect_timeout is not None:
        try:
            grpc.channel_ready_future(channel).result(timeout=connect_timeout)
        except grpc.FutureTimeoutError as e:
            channel.close()
            log_connection_event(logger, address, role, "failed", secure, error="not ready")
            raise ConnectionError(
                f"failed to create {role} gRPC connection: {address} not ready after {connect_timeout}s",
                channel=role,
            ) from e

    if interceptors:
        channel = grpc.intercept_channel(channel, *interceptors)

    log_connection_event(logger, address, role, "opened", secure)
    return Connection(channel, address, role, secure)
