from typing import Any


class AppException(Exception):
    """Base client exception."""

    error_code: str = "APP_ERROR"
    message: str = "A SmartPay client error occurred"

    def __init__(
        self,
        message: str | None = None,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message or self.__class__.message
        self.error_code = error_code or self.__class__.error_code
        self.details = details or {}
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(error_code={self.error_code!r}, message={self.message!r})"


class ConfigurationError(AppException):
    """Client is not configured."""

    error_code = "CONFIGURATION_ERROR"
    message = "SmartPay client is not configured"


class ValidationError(AppException):
    """Validation error."""

    error_code = "VALIDATION_ERROR"
    message = "Validation failed"


class MissingFieldsError(ValidationError):
    """Required request fields are missing."""

    error_code = "MISSING_FIELDS"
    message = "Missing required fields"

    def __init__(
        self,
        missing: list[str],
        message: str | None = None,
    ) -> None:
        self.missing = list(missing)
        super().__init__(
            message=message or f"Missing required fields: {', '.join(self.missing)}",
            details={"missing": self.missing},
        )


class TransportError(AppException):
    """HTTP request could not be completed."""

    error_code = "TRANSPORT_ERROR"
    message = "Request to SmartPay failed"

    def __init__(
        self,
        detail: str,
        message: str | None = None,
    ) -> None:
        self.detail = detail
        super().__init__(
            message=message or f"Request to SmartPay failed: {detail}",
            details={"detail": detail},
        )


class InvalidSignatureError(AppException):
    """Inbound payload signature does not match."""

    error_code = "INVALID_SIGNATURE"
    message = "Invalid signature"
