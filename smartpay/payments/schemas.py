"""Payment schemas for SmartPay communication."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, SecretStr, field_validator


@dataclass(frozen=True)
class FieldSpec:
    """Contract of one request field."""

    name: str
    required: bool
    description: str = ""


@dataclass(frozen=True)
class Operation:
    """Remote operation: service code plus its ordered field schema."""

    name: str
    service: str
    fields: tuple[FieldSpec, ...]

    @property
    def field_names(self) -> list[str]:
        return [spec.name for spec in self.fields]

    @property
    def required_fields(self) -> list[str]:
        return [spec.name for spec in self.fields if spec.required]


class Credentials(BaseModel):
    """Merchant credentials, fixed for the lifetime of a client."""

    model_config = ConfigDict(frozen=True)

    merchant_id: str = Field(..., min_length=1, description="Merchant ID")
    sign_key: SecretStr = Field(..., description="Signing secret, never transmitted")

    @field_validator("sign_key")
    @classmethod
    def _sign_key_not_empty(cls, value: SecretStr) -> SecretStr:
        if not value.get_secret_value():
            raise ValueError("sign_key must not be empty")
        return value


class ResultStatus(str, Enum):
    """Outcome of a client operation."""

    SUCCESS = "success"
    VALIDATION_ERROR = "validation_error"
    TRANSPORT_ERROR = "transport_error"
    MALFORMED_RESPONSE = "malformed_response"
    REJECTED = "rejected"


@dataclass
class ApiResult:
    """Result of a SmartPay operation.

    Which attributes are set depends on `status`:
    SUCCESS -> payload; VALIDATION_ERROR -> missing_fields;
    TRANSPORT_ERROR -> detail; REJECTED -> message and payload.
    """

    status: ResultStatus
    payload: dict[str, Any] | None = None
    missing_fields: list[str] = field(default_factory=list)
    message: str | None = None
    detail: str | None = None

    @property
    def ok(self) -> bool:
        return self.status is ResultStatus.SUCCESS

    @classmethod
    def success(cls, payload: dict[str, Any]) -> "ApiResult":
        return cls(status=ResultStatus.SUCCESS, payload=payload)

    @classmethod
    def validation_error(cls, missing_fields: list[str]) -> "ApiResult":
        return cls(status=ResultStatus.VALIDATION_ERROR, missing_fields=list(missing_fields))

    @classmethod
    def transport_error(cls, detail: str) -> "ApiResult":
        return cls(status=ResultStatus.TRANSPORT_ERROR, detail=detail)

    @classmethod
    def malformed_response(cls) -> "ApiResult":
        return cls(status=ResultStatus.MALFORMED_RESPONSE)

    @classmethod
    def rejected(cls, message: str | None, payload: dict[str, Any]) -> "ApiResult":
        return cls(status=ResultStatus.REJECTED, message=message, payload=payload)


@dataclass
class TransportResponse:
    """Raw HTTP response returned by a transport."""

    status_code: int
    body: str

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300


class Notification(BaseModel):
    """Verified payment notification (webhook) from SmartPay.

    Only the signature is guaranteed; everything else is service-defined, so
    unknown fields are kept as extras.
    """

    model_config = ConfigDict(extra="allow")

    signature: str = Field(..., description="MD5 signature")
    sign_type: str | None = Field(default=None, description="Signature algorithm")

    merchant_id: str | None = Field(default=None, description="Merchant ID")
    increment_id: str | None = Field(default=None, description="Merchant order number")
    grandtotal: str | None = Field(default=None, description="Order amount")
    currency: str | None = Field(default=None, description="Currency code")
    status: str | None = Field(default=None, description="Payment status")
