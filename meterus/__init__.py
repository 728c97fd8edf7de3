"""
Meterus Python SDK - gRPC client for the Meterus metering service.

Meterus records usage events, aggregates them through meters and attributes
the results to subjects. This package exposes a client that shares a single
gRPC channel across per-service façades (metering, subjects, API-key
validation) and injects bearer credentials into every call.
"""

from meterus._version import __version__

__all__ = ["__version__"]
