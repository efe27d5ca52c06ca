"""Error taxonomy for the scan/artwork handlers.

Categories
----------
- ``ValidationError``   : the client sent a bad coordinate, style or query.
- ``ConfigurationError``: a server-side credential is missing.
- ``UpstreamFailure``   : the static imagery service did not deliver.
- ``ModelFailure``      : an AI model call errored or returned nothing usable.

Scan and artwork absorb upstream and model failures and return them as data;
the static map proxy and the artwork route still render them as error statuses.
"""

from __future__ import annotations


class OrthoLocusError(Exception):
    """Base exception for all ortholocus-domain errors.

    Attributes:
        message: Short human-readable reason, safe to show to the client.
        code: Machine-readable error code (e.g. ``"INVALID_COORDINATES"``).
        status_code: HTTP status used when the error reaches a handler.
    """

    default_code: str = "INTERNAL"
    default_status: int = 500

    def __init__(
        self,
        message: str = "",
        *,
        code: str = "",
        status_code: int | None = None,
    ) -> None:
        self.message = message
        self.code = code or self.default_code
        self.status_code = status_code if status_code is not None else self.default_status
        super().__init__(message)

    @property
    def category(self) -> str:
        if isinstance(self, ValidationError):
            return "validation"
        if isinstance(self, ConfigurationError):
            return "configuration"
        if isinstance(self, UpstreamFailure):
            return "upstream"
        if isinstance(self, ModelFailure):
            return "model"
        return "internal"

    def to_error_dict(self) -> dict[str, object]:
        """Structured payload with stable keys, for logging."""
        return {
            "category": self.category,
            "code": self.code,
            "status_code": self.status_code,
            "message": self.message,
        }


class ValidationError(OrthoLocusError):
    """Malformed or missing client input."""

    default_code = "INVALID_INPUT"
    default_status = 400


class ConfigurationError(OrthoLocusError):
    """A required credential is absent. The message never names the secret."""

    default_code = "SERVER_CONFIGURATION"
    default_status = 500

    def __init__(self, message: str = "Server configuration error", **kwargs: object) -> None:
        super().__init__(message, **kwargs)  # type: ignore[arg-type]


class UpstreamFailure(OrthoLocusError):
    """Static imagery fetch failed (non-success status or transport error)."""

    default_code = "UPSTREAM_FAILED"
    default_status = 502


class ModelFailure(OrthoLocusError):
    """The model call raised or produced no usable content."""

    default_code = "MODEL_FAILED"
    default_status = 500
