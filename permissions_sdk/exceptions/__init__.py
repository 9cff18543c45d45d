"""Offer Exception handling tools to manage project permissions."""

from .error import (
    ConfigError,
    ConfigValidationError,
    ConflictingGranteeError,
    DataRetrievalError,
    GatewayError,
    GrantNotFoundError,
    GrantValidationError,
    InvalidCapabilityError,
    MalformedIdentifierError,
    ReconcileError,
    TransportError,
    UnsupportedOperationError,
    UpstreamError,
    UpstreamFailureError,
    UseCaseError,
)

__all__ = [
    "ConfigError",
    "ConfigValidationError",
    "ConflictingGranteeError",
    "DataRetrievalError",
    "GatewayError",
    "GrantNotFoundError",
    "GrantValidationError",
    "InvalidCapabilityError",
    "MalformedIdentifierError",
    "ReconcileError",
    "TransportError",
    "UnsupportedOperationError",
    "UpstreamError",
    "UpstreamFailureError",
    "UseCaseError",
]
