"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Meterus, a product of Garudex Labs

Bearer credential injection for outgoing gRPC calls.

Two equivalent mechanisms attach ``authorization: Bearer <token>``:

    - ``with_auth(metadata, token)`` - explicit, applied by each façade
      method right before it dispatches the call.
    - ``BearerAuthInterceptor(token)`` - registered on a channel once, adds
      the header to every unary call made through it.

Both produce the same metadata tuple for the same token. gRPC requires
lower-case metadata keys, and HTTP/2 lower-cases header names anyway, so
``authorization`` is what any client puts on the wire.
"""

from __future__ import annotations

import collections
from typing import Iterable, Optional, Tuple

import grpc

AUTHORIZATION_HEADER = "authorization"
BEARER_PREFIX = "Bearer "

Metadata = Tuple[Tuple[str, str], ...]


def authorization_metadata(token: str) -> Metadata:
    """Return the metadata carrying ``token`` as a bearer credential."""
    return ((AUTHORIZATION_HEADER, BEARER_PREFIX + token),)


def with_auth(metadata: Optional[Iterable[Tuple[str, str]]], token: Optional[str]) -> Metadata:
    """Append the bearer header for ``token`` to ``metadata``.

    A None token leaves the metadata unchanged so the server can reject the
    call with its own authentication status.
    """
    combined = tuple(metadata or ())
    if token is None:
        return combined
    return combined + authorization_metadata(token)


class _ClientCallDetails(
    collections.namedtuple(
        "_ClientCallDetails",
        ("method", "timeout", "metadata", "credentials", "wait_for_ready", "compression"),
    ),
    grpc.ClientCallDetails,
):
    pass


class BearerAuthInterceptor(grpc.UnaryUnaryClientInterceptor):
    """Channel interceptor that attaches a fixed bearer token to every call.

    Args:
        token: Credential sent as ``Bearer <token>``.
    """

    def __init__(self, token: str) -> None:
        self._token = token

    def intercept_unary_unary(self, continuation, client_call_details, request):
        details = _ClientCallDetails(
            client_call_details.method,
            client_call_details.timeout,
            with_auth(client_call_details.metadata, self._token),
            client_call_details.credentials,
            getattr(client_call_details, "wait_for_ready", None),
            getattr(client_call_details, "compression", None),
        )
        return continuation(details, request)
