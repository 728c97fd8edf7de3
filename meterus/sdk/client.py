"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Meterus, a product of Garudex Labs

Meterus SDK Client & Builder.

Provides two entry points to initialize the SDK:
    - ``MeterusClient("localhost:8000", api_key=...)`` - quick start with sensible defaults
    - ``MeterusBuilder().set_api_key(...).use_tls().build()`` - advanced config

"""

from __future__ import annotations

from typing import Any, List, Optional, Sequence, Tuple

import grpc

from meterus.config.settings import AUTH_MODES, DEFAULT_ADDRESS, MeterusConfig
from meterus.exceptions import ConnectionError, SDKConfigurationError
from meterus.logging_config import get_logger, setup_logging
from meterus.protocol import MeteringServiceStub, SubjectServiceStub, ValidationServiceStub
from meterus.sdk.auth import BearerAuthInterceptor
from meterus.sdk.connection import ChannelOptions, Connection, open_connection
from meterus.sdk.metering import MeteringService
from meterus.sdk.subjects import SubjectService
from meterus.sdk.validation import ValidationService

logger = get_logger(__name__)


# ---------------------------------------------------------------------------
# MeterusClient
# ---------------------------------------------------------------------------

class MeterusClient:
    """SDK client for the Meterus service.

    Quick start::

        client = MeterusClient("localhost:8000", api_key="sk_test_123")
        metering = client.new_metering_service()
        meters = metering.list_meters(limit=10, page=1)
        client.close()

    The client owns its gRPC channel(s) and mints façades that share them.
    Façades are cheap and may be created per use; they stop working once the
    client is closed.

    Args:
        address: Service address (host:port).
        api_key: API key injected into metering and subject calls.
        secure: Use TLS. Channels are plaintext by default.
        credentials: Channel credentials for TLS (defaults to system roots).
        options: Extra gRPC channel options.
        interceptors: Extra client interceptors for the authenticated channel.
        auth_mode: ``"explicit"`` adds the bearer header in each façade call
            over one channel. ``"interceptor"`` opens an authenticated channel
            with an auth interceptor plus a bare channel for key validation.
        connect_timeout: Block until the channel is ready, up to this many
            seconds.

    Raises:
        SDKConfigurationError: If ``auth_mode`` is unknown, or interceptor
            mode is requested without an API key.
        ConnectionError: If a channel cannot be established.
    """

    def __init__(
        self,
        address: str,
        api_key: Optional[str] = None,
        *,
        secure: bool = False,
        credentials: Optional[grpc.ChannelCredentials] = None,
        options: Optional[ChannelOptions] = None,
        interceptors: Optional[Sequence[Any]] = None,
        auth_mode: str = "explicit",
        connect_timeout: Optional[float] = None,
    ) -> None:
        # -- Core Initialization -------------------------------------------

        if auth_mode not in AUTH_MODES:
            raise SDKConfigurationError(
                f"auth_mode must be one of {', '.join(AUTH_MODES)}, got {auth_mode!r}"
            )
        if auth_mode == "interceptor" and api_key is None:
            raise SDKConfigurationError("auth_mode='interceptor' requires an api_key.")

        self._address = address
        self._api_key = api_key
        self._auth_mode = auth_mode

        dial = dict(
            secure=secure,
            credentials=credentials,
            options=options,
            connect_timeout=connect_timeout,
        )

        auth_interceptors: List[Any] = list(interceptors or ())
        if auth_mode == "interceptor":
            auth_interceptors.insert(0, BearerAuthInterceptor(api_key))

        self._connection = open_connection(address, "authenticated", interceptors=auth_interceptors, **dial)

        # Validation needs a channel without the stored key attached.
        self._validation_connection: Optional[Connection] = None
        if auth_mode == "interceptor":
            try:
                self._validation_connection = open_connection(address, "unauthenticated", **dial)
            except ConnectionError:
                self._connection.close()
                raise

        logger.info("MeterusClient initialized", address=address, auth_mode=auth_mode, secure=secure)

    @classmethod
    def from_config(cls, config: MeterusConfig, configure_logging: bool = False) -> MeterusClient:
        """Construct a client from a ``MeterusConfig``.

        Args:
            config: Resolved configuration (see ``meterus.config.load_config``).
            configure_logging: Also apply ``config.logging`` via ``setup_logging``.
        """
        if configure_logging:
            setup_logging(
                level=config.logging.level,
                log_file=config.logging.file,
                json_format=config.logging.json_format,
            )
        return cls(
            config.address,
            api_key=config.api_key,
            secure=config.secure,
            auth_mode=config.auth_mode,
            connect_timeout=config.connect_timeout,
        )

    # -- Properties --------------------------------------------------------

    @property
    def address(self) -> str:
        return self._address

    @property
    def auth_mode(self) -> str:
        return self._auth_mode

    @property
    def closed(self) -> bool:
        return self._connection.closed

    # -- Façade constructors -----------------------------------------------

    def new_metering_service(self) -> MeteringService:
        """Metering façade over the shared authenticated channel."""
        return MeteringService(
            self._connection,
            MeteringServiceStub(self._connection.channel),
            api_key=self._api_key,
            inject_credentials=self._auth_mode == "explicit",
        )

    def new_subject_service(self) -> SubjectService:
        """Subject façade over the shared authenticated channel."""
        return SubjectService(
            self._connection,
            SubjectServiceStub(self._connection.channel),
            api_key=self._api_key,
            inject_credentials=self._auth_mode == "explicit",
        )

    def new_validation_service(self) -> ValidationService:
        """Validation façade; each call authenticates with the key it checks."""
        connection = self._validation_connection or self._connection
        return ValidationService(
            connection,
            ValidationServiceStub(connection.channel),
            inject_credentials=False,
        )

    # -- Lifecycle ---------------------------------------------------------

    def close(self) -> None:
        """Close the client's channel(s).

        Raises:
            ConnectionError: If the client was already closed.
        """
        first_error: Optional[ConnectionError] = None
        for connection in (self._connection, self._validation_connection):
            if connection is None:
                continue
            try:
                connection.close()
            except ConnectionError as e:
                if first_error is None:
                    first_error = e

        if first_error is not None:
            raise first_error
        logger.info("MeterusClient closed", address=self._address)

    def __enter__(self) -> MeterusClient:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        if not self.closed:
            self.close()


# ---------------------------------------------------------------------------
# MeterusBuilder (advanced initialization)
# ---------------------------------------------------------------------------

class MeterusBuilder:
    """Fluent builder for advanced MeterusClient configuration.

    Example::

        client = (
            MeterusBuilder()
            .set_address("meterus.internal:443")
            .set_api_key("sk_prod_123")
            .use_tls()
            .set_auth_mode("interceptor")
            .set_option("grpc.keepalive_time_ms", 30000)
            .build()
        )
    """

    def __init__(self) -> None:
        self._address: str = DEFAULT_ADDRESS
        self._api_key: Optional[str] = None
        self._secure: bool = False
        self._credentials: Optional[grpc.ChannelCredentials] = None
        self._options: List[Tuple[str, Any]] = []
        self._interceptors: List[Any] = []
        self._auth_mode: str = "explicit"
        self._connect_timeout: Optional[float] = None

    def set_address(self, address: str) -> MeterusBuilder:
        """Set the service address (host:port)."""
        self._address = address
        return self

    def set_api_key(self, key: str) -> MeterusBuilder:
        """Set the API key."""
        self._api_key = key
        return self

    def use_tls(self, credentials: Optional[grpc.ChannelCredentials] = None) -> MeterusBuilder:
        """Switch from the default plaintext channel to TLS."""
        self._secure = True
        self._credentials = credentials
        return self

    def set_auth_mode(self, mode: str) -> MeterusBuilder:
        """Choose ``"explicit"`` or ``"interceptor"`` credential injection."""
        self._auth_mode = mode
        return self

    def set_option(self, name: str, value: Any) -> MeterusBuilder:
        """Add a gRPC channel option."""
        self._options.append((name, value))
        return self

    def add_interceptor(self, interceptor: Any) -> MeterusBuilder:
        """Add a client interceptor to the authenticated channel."""
        self._interceptors.append(interceptor)
        return self

    def set_connect_timeout(self, seconds: float) -> MeterusBuilder:
        """Wait up to ``seconds`` for the channel to be ready during build."""
        self._connect_timeout = seconds
        return self

    def build(self) -> MeterusClient:
        """Construct the MeterusClient.

        Raises:
            SDKConfigurationError: If the configuration is invalid.
            ConnectionError: If a channel cannot be established.
        """
        client = MeterusClient(
            self._address,
            api_key=self._api_key,
            secure=self._secure,
            credentials=self._credentials,
            options=self._options or None,
            interceptors=self._interceptors,
            auth_mode=self._auth_mode,
            connect_timeout=self._connect_timeout,
        )
        logger.info(
            f"MeterusBuilder: built client with {len(self._interceptors)} extra interceptor(s)"
        )
        return client
