"""
Common plumbing for the service façades.
"""

from __future__ import annotations

import time
from typing import Any, Optional

import grpc

from meterus.logging_config import get_logger, log_rpc_call
from meterus.sdk.auth import with_auth
from meterus.sdk.connection import Connection

logger = get_logger(__name__)


def _status_name(error: grpc.RpcError) -> str:
    code = error.code() if hasattr(error, "code") else None
    return code.name if code is not None else "UNKNOWN"


class ServiceFacade:
    """Wraps a generated stub bound to a shared connection.

    Façades never own the connection: ``close`` is the client's job. When
    ``inject_credentials`` is false the channel is expected to carry an auth
    interceptor already.

    Args:
        connection: Shared transport connection.
        stub: Stub created on ``connection.channel``.
        api_key: Credential injected into each call.
        inject_credentials: Add the bearer header explicitly per call.
    """

    SERVICE_NAME = ""

    def __init__(
        self,
        connection: Connection,
        stub: Any,
        api_key: Optional[str] = None,
        inject_credentials: bool = True,
    ) -> None:
        self._connection = connection
        self._stub = stub
        self._api_key = api_key
        self._inject_credentials = inject_credentials

    def _call(
        self,
        method: str,
        request: Any,
        timeout: Optional[float] = None,
        api_key: Optional[str] = None,
    ) -> Any:
        """Issue one unary call and return its response.

        ``api_key`` overrides the stored credential for this call only.
        ``grpc.RpcError`` propagates unchanged.
        """
        self._connection.ensure_open()

        token = api_key if api_key is not None else self._api_key
        metadata = with_auth(None, token) if self._inject_credentials or api_key is not None else ()

        started = time.perf_counter()
        try:
            response = getattr(self._stub, method)(request, metadata=metadata, timeout=timeout)
        except grpc.RpcError as e:
            log_rpc_call(
                logger,
                self.SERVICE_NAME,
                method,
                _status_name(e),
                duration_ms=(time.perf_counter() - started) * 1000,
                error=e.details() if hasattr(e, "details") else str(e),
            )
            raise

        log_rpc_call(
            logger,
            self.SERVICE_NAME,
            method,
            "OK",
            duration_ms=(time.perf_counter() - started) * 1000,
        )
        return response
