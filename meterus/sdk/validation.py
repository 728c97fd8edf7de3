"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Meterus, a product of Garudex Labs

Validation façade: checks arbitrary API keys against required scopes.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Sequence, Tuple

from google.protobuf import json_format

from meterus.protocol.validation.v1 import validation_pb2 as pb
from meterus.sdk.base import ServiceFacade


class ValidationService(ServiceFacade):
    """Operations on ``validation.v1.ValidationService``.

    The key being validated is sent as the bearer token of the call, not the
    client's own key, so any key can be checked.
    """

    SERVICE_NAME = pb.DESCRIPTOR.services_by_name["ValidationService"].full_name

    def validate_api_key(
        self,
        api_key: str,
        required_scopes: Sequence[str],
        timeout: Optional[float] = None,
    ) -> Tuple[bool, str, Optional[Dict[str, Any]]]:
        """Validate ``api_key`` against ``required_scopes``.

        Returns:
            ``(True, subject, additional_attributes)`` for an accepted key.
            ``additional_attributes`` is None when the server sent none.

        Raises:
            grpc.RpcError: For a rejected key (``UNAUTHENTICATED`` or
                ``PERMISSION_DENIED``) or any transport failure.
        """
        request = pb.ValidateApiKeyRequest(required_scopes=list(required_scopes))
        response = self._call("ValidateApiKey", request, timeout=timeout, api_key=api_key)

        metadata = response.metadata
        attributes = None
        if metadata.HasField("additional_attributes"):
            attributes = json_format.MessageToDict(metadata.additional_attributes)
        return True, metadata.subject, attributes
