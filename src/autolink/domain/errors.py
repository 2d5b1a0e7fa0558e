"""Domain error classes.

Protocol-agnostic errors that represent business failures.
These errors are translated to HTTP responses by the entrypoint layer.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain errors.

    Carries a human-readable message plus structured context that
    protocol adapters can render.
    """

    # Default error code (can be used as i18n key)
    error_code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, **context: Any) -> None:
        """Create a domain error.

        Args:
            message: Human-readable error message (default locale)
            **context: Additional context for error (e.g., field names, values)
        """
        self.message = message
        self.context = context
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format for protocol translation."""
        return {
            "message": self.message,
            "code": self.error_code,
            **self.context,
        }


class ValidationError(DomainError):
    """Field-level or business rule validation error.

    Examples:
        - description shorter than 10 characters
        - condition outside the five supported values
        - photo larger than 5 MiB

    Protocol mappings:
        - REST: 422 Unprocessable Entity
    """

    error_code: str = "VALIDATION_ERROR"

    def __init__(
        self,
        message: str | None = None,
        errors: list[dict[str, str]] | None = None,
        **context: Any,
    ) -> None:
        """Create a validation error.

        Args:
            message: Overall validation error message (optional if errors provided)
            errors: List of field-specific errors, each with 'field' and 'message'
                   Example: [{"field": "price", "message": "Price must be greater than 0"}]
            **context: Additional context
        """
        self.errors: list[dict[str, str]] | None
        if errors:
            self.errors = errors
            msg = message or "Validation failed"
        else:
            self.errors = None
            msg = message or "Validation error"

        super().__init__(msg, **context)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format."""
        if self.errors:
            return {
                "message": self.message,
                "code": self.error_code,
                "errors": self.errors,
                **self.context,
            }
        return super().to_dict()


class NotFoundError(DomainError):
    """Resource not found.

    Protocol mappings:
        - REST: 404 Not Found
    """

    error_code: str = "NOT_FOUND"

    def __init__(self, resource: str, identifier: str | None = None, **context: Any) -> None:
        """Create a not found error.

        Args:
            resource: Type of resource (e.g., "Listing")
            identifier: Resource identifier
            **context: Additional context
        """
        if identifier:
            message = f"{resource} with identifier '{identifier}' not found"
        else:
            message = f"{resource} not found"

        super().__init__(message, resource=resource, identifier=identifier, **context)


class ConflictError(DomainError):
    """Business constraint conflict.

    Examples:
        - Generated listing identifier already present in the store
        - Submission wizard transition not allowed from the current step

    Protocol mappings:
        - REST: 409 Conflict
    """

    error_code: str = "CONFLICT"


class ConfigurationError(DomainError):
    """A feature is disabled because its configuration is missing.

    Examples:
        - STRIPE_SECRET_KEY not set
        - APP_URL not set
        - OPENAI_API_KEY not set

    Protocol mappings:
        - REST: 503 Service Unavailable
    """

    error_code: str = "CONFIGURATION_ERROR"


class ExternalServiceError(DomainError):
    """A call to a third-party provider failed (network, SDK or bad reply).

    Transient from the caller's point of view; never retried automatically.

    Protocol mappings:
        - REST: 502 Bad Gateway
    """

    error_code: str = "EXTERNAL_SERVICE_ERROR"

    def __init__(self, service: str, message: str, **context: Any) -> None:
        super().__init__(message, service=service, **context)
